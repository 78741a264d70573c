import pytest

from calculator.config import CalculatorConfig
from calculator.payout_table import PayoutTable
from exceptions import InvalidSnapshotError, RowNotFoundError, TableFullError


class TestPayoutTable:
    def test_initialization(self, payout_table):
        """Test that new rows start at the configured default buy-in."""
        assert [r.buy_in for r in payout_table.rows] == ["30", "30"]
        assert payout_table.delete_mode is False
        assert payout_table.checkboxes_visible is False

    def test_table_buy_in_sets_every_row(self, payout_table):
        payout_table.set_table_buy_in("50,4")

        assert [r.buy_in for r in payout_table.rows] == ["50", "50"]
        assert payout_table.add_row(name="Cara").buy_in == "50,4"

    def test_blank_table_buy_in_keeps_rows(self, payout_table):
        payout_table.set_buy_in(0, "45")

        payout_table.set_table_buy_in("  ")

        assert payout_table.rows[0].buy_in == "45"

    def test_step_buy_in(self, payout_table):
        payout_table.set_table_buy_in("25")

        assert payout_table.step_buy_in(0, 1) == "50"
        assert payout_table.step_buy_in(0, 1) == "75"
        assert payout_table.step_buy_in(0, -5) == "25"

    def test_step_without_table_buy_in(self, payout_table):
        assert payout_table.step_buy_in(0, 1) == "30"

    def test_recalc(self, payout_table):
        payout_table.set_cash_out(0, "40")
        payout_table.set_cash_out(1, "20")

        result = payout_table.recalc()

        assert result.per_row_payout == [10, -10]
        assert result.balanced is True

    def test_recalc_resets_negative_cash_out(self, payout_table):
        payout_table.set_cash_out(0, "-12")

        result = payout_table.recalc()

        assert payout_table.rows[0].cash_out == "0.00"
        assert result.per_row_payout[0] == -30

    def test_row_cap(self):
        table = PayoutTable(CalculatorConfig(max_rows=2))

        with pytest.raises(TableFullError):
            table.add_row()

    def test_delete_rows_down_to_empty(self, payout_table):
        payout_table.delete_row()
        payout_table.delete_row()

        assert payout_table.rows == []
        with pytest.raises(RowNotFoundError):
            payout_table.delete_row()

    def test_modes_are_exclusive(self, payout_table):
        """Test that delete buttons and settled checkboxes never show together."""
        assert payout_table.toggle_settle_mode() is True
        assert payout_table.toggle_delete_mode() is True
        assert payout_table.checkboxes_visible is False

        assert payout_table.toggle_settle_mode() is True
        assert payout_table.delete_mode is False

    def test_clear(self, payout_table):
        payout_table.add_row(name="Cara", cash_out="90")
        payout_table.toggle_settle_mode()

        payout_table.clear()

        assert len(payout_table.rows) == 2
        assert all(r.name == "" for r in payout_table.rows)
        assert payout_table.checkboxes_visible is False

    def test_seat_player(self, payout_table):
        payout_table.set_table_buy_in("20")

        assert payout_table.seat_player("Alice") == 0
        assert payout_table.seat_player("Bob") == 1
        assert payout_table.seat_player("Cara") == 2
        assert [(r.name, r.buy_in) for r in payout_table.rows] == [
            ("Alice", "20"),
            ("Bob", "20"),
            ("Cara", "20"),
        ]


class TestPayoutTableSnapshot:
    def test_snapshot_restores_table(self, payout_table):
        payout_table.set_name(0, "Alice")
        payout_table.set_cash_out(0, "55")
        payout_table.set_settled(0, True)
        payout_table.set_table_buy_in("30")

        restored = PayoutTable.from_snapshot(payout_table.snapshot())

        assert restored.buy_in == "30"
        assert restored.rows[0].name == "Alice"
        assert restored.rows[0].cash_out == "55"
        assert restored.rows[0].settled is True
        assert len(restored.rows) == 2

    def test_numeric_values_kept_as_text(self):
        table = PayoutTable.from_snapshot(
            {"rows": [{"name": "Bob", "buy_in": 30, "cash_out": None}], "buy_in": 30}
        )

        assert table.rows[0].buy_in == "30"
        assert table.rows[0].cash_out == ""
        assert table.buy_in == "30"

    def test_from_browser_calculator_keys(self):
        table = PayoutTable.from_snapshot(
            {
                "rows": [{"name": "A", "in": "30", "out": "40", "settled": True}],
                "buyIn": "30",
            }
        )

        assert table.buy_in == "30"
        assert table.rows[0].buy_in == "30"
        assert table.rows[0].cash_out == "40"
        assert table.rows[0].settled is True

    def test_invalid_snapshot(self):
        with pytest.raises(InvalidSnapshotError):
            PayoutTable.from_snapshot({"rows": [{"settled": "maybe"}]})
