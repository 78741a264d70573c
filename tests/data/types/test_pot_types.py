import pytest
from pydantic import ValidationError

from data.types.pot_types import Pot, SettlementResult, SidePotReport, WinnerSelection
from data.types.snapshot_types import PayoutSnapshot, SidePotSnapshot


class TestPot:
    def test_names(self):
        assert Pot(tier=0, size=10).name == "Main Pot"
        assert Pot(tier=3, size=10).name == "Side Pot 3"

    def test_negative_size_rejected(self):
        with pytest.raises(ValidationError):
            Pot(tier=0, size=-1)

    def test_is_eligible(self):
        pot = Pot(tier=1, size=10, eligible_players=["Bob", "Cara"])

        assert pot.is_eligible("Cara")
        assert not pot.is_eligible("Alice")


class TestWinnerSelection:
    def test_hashable_and_comparable(self):
        first = WinnerSelection(pot_index=0, board=1, player="Alice")
        second = WinnerSelection(pot_index=0, board=1, player="Alice")

        assert first == second
        assert len({first, second}) == 1


class TestSettlementResult:
    def test_defaults(self):
        result = SettlementResult()

        assert result.per_player_payout == {}
        assert result.balanced is True
        assert result.unsettled == []

    def test_negative_totals_rejected(self):
        with pytest.raises(ValidationError):
            SettlementResult(total_contributed=-1)

    def test_report_totals(self):
        report = SidePotReport(
            settlement=SettlementResult(total_contributed=25, total_distributed=15)
        )

        assert report.total_bet == 25
        assert report.total_won == 15


class TestSnapshots:
    def test_side_pot_defaults(self):
        snapshot = SidePotSnapshot()

        assert snapshot.rows == []
        assert snapshot.initial_pot == "0"
        assert snapshot.boards == "1"

    def test_numbers_coerced_to_text(self):
        snapshot = SidePotSnapshot(initial_pot=2.5, boards=2)

        assert snapshot.initial_pot == "2.5"
        assert snapshot.boards == "2"

    def test_payout_rows(self):
        snapshot = PayoutSnapshot(
            rows=[{"name": "Alice", "buy_in": 30, "cash_out": "41", "settled": 1}]
        )

        assert snapshot.rows[0].buy_in == "30"
        assert snapshot.rows[0].settled is True
