from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from calculator.amount import format_amount, format_integer, parse_amount
from calculator.config import CalculatorConfig
from calculator.payout import compute_payouts, step_buy_in
from data.types.payout_types import PayoutResult, PayoutRow
from data.types.snapshot_types import PayoutRowSnapshot, PayoutSnapshot
from exceptions import InvalidSnapshotError, RowNotFoundError, TableFullError
from loggers.table_logger import TableLogger


@dataclass
class PayoutTableRow:
    """One player row of the payout table, as typed."""

    name: str = ""
    buy_in: str = ""
    cash_out: str = ""
    settled: bool = False


class PayoutTable:
    """
    Holds the state of a payout calculator session.

    Attributes:
        config (CalculatorConfig): Row cap and default buy-in
        rows (List[PayoutTableRow]): Player rows in display order
        buy_in (str): The table's standard buy-in, as typed
        delete_mode (bool): Whether per-row delete buttons are showing
        checkboxes_visible (bool): Whether the "settled" checkboxes are showing

    Note:
        - Delete mode and settled checkboxes are never shown together
        - ``recalc()`` resets negative cash-outs to ``0.00`` in the rows
    """

    def __init__(self, config: Optional[CalculatorConfig] = None) -> None:
        self.config = config or CalculatorConfig()
        self.buy_in: str = ""
        self.rows: List[PayoutTableRow] = []
        self.delete_mode: bool = False
        self.checkboxes_visible: bool = False
        for _ in range(self.config.default_rows):
            self.add_row()
        TableLogger.log_table_creation("payout", len(self.rows))

    def _row(self, index: int) -> PayoutTableRow:
        if not 0 <= index < len(self.rows):
            raise RowNotFoundError(f"No row at index {index}")
        return self.rows[index]

    def _table_buy_in(self) -> Optional[str]:
        """The table buy-in text, or None when it is blank."""
        raw = self.buy_in.strip()
        return raw or None

    def add_row(
        self,
        name: str = "",
        buy_in: Optional[str] = None,
        cash_out: str = "",
        settled: bool = False,
    ) -> PayoutTableRow:
        """
        Append a player row.

        A row added without a buy-in starts at the table buy-in, or at
        ``config.default_buy_in`` when the table has none.

        Raises:
            TableFullError: If the table already has ``config.max_rows`` rows
        """
        if len(self.rows) >= self.config.max_rows:
            TableLogger.log_table_full(self.config.max_rows)
            raise TableFullError(f"Table already has {self.config.max_rows} rows")
        if buy_in is None:
            buy_in = self._table_buy_in() or self.config.default_buy_in
        row = PayoutTableRow(name=name, buy_in=buy_in, cash_out=cash_out, settled=settled)
        self.rows.append(row)
        TableLogger.log_row_added(len(self.rows) - 1, name)
        return row

    def delete_row(self, index: Optional[int] = None) -> PayoutTableRow:
        """Remove a row, the last one when no index is given."""
        if index is None:
            index = len(self.rows) - 1
        row = self._row(index)
        del self.rows[index]
        TableLogger.log_row_deleted(index, row.name)
        return row

    def clear(self) -> None:
        """Reset to default rows and hide all row controls."""
        self.rows = []
        for _ in range(self.config.default_rows):
            self.add_row()
        self.delete_mode = False
        self.checkboxes_visible = False
        TableLogger.log_table_cleared("payout")

    def set_name(self, index: int, name: str) -> None:
        self._row(index).name = name

    def set_buy_in(self, index: int, value: str) -> None:
        self._row(index).buy_in = value

    def set_cash_out(self, index: int, value: str) -> None:
        self._row(index).cash_out = value

    def set_settled(self, index: int, settled: bool) -> None:
        self._row(index).settled = settled

    def set_table_buy_in(self, value: str) -> None:
        """Change the standard buy-in and reset every row's buy-in to it."""
        self.buy_in = value
        if self._table_buy_in() is None:
            return
        whole = format_integer(parse_amount(value))
        for row in self.rows:
            row.buy_in = whole

    def step_buy_in(self, index: int, delta: int) -> str:
        """Add (or with a negative delta remove) whole buy-ins for a row."""
        row = self._row(index)
        unit = self._table_buy_in()
        if unit is None:
            return row.buy_in
        row.buy_in = format_integer(step_buy_in(row.buy_in, delta, unit))
        return row.buy_in

    def seat_player(self, name: str) -> int:
        """Put a player in the first unnamed row, adding one if needed."""
        unit = self._table_buy_in()
        for index, row in enumerate(self.rows):
            if not row.name.strip():
                row.name = name
                if unit is not None:
                    row.buy_in = format_integer(parse_amount(unit))
                return index
        self.add_row(name=name, buy_in=unit or "")
        return len(self.rows) - 1

    def toggle_delete_mode(self) -> bool:
        self.delete_mode = not self.delete_mode
        if self.delete_mode:
            self.checkboxes_visible = False
        TableLogger.log_view_state("delete_mode", self.delete_mode)
        return self.delete_mode

    def toggle_settle_mode(self) -> bool:
        self.checkboxes_visible = not self.checkboxes_visible
        if self.checkboxes_visible:
            self.delete_mode = False
        TableLogger.log_view_state("checkboxes_visible", self.checkboxes_visible)
        return self.checkboxes_visible

    def recalc(self) -> PayoutResult:
        """Compute payouts for every row, resetting negative cash-outs to 0.00."""
        for index, row in enumerate(self.rows):
            if parse_amount(row.cash_out) < 0:
                TableLogger.log_value_clamped(index, "cash-out", row.cash_out)
                row.cash_out = format_amount(0)
        return compute_payouts(
            PayoutRow(buy_in=row.buy_in, cash_out=row.cash_out) for row in self.rows
        )

    def snapshot(self) -> PayoutSnapshot:
        return PayoutSnapshot(
            rows=[
                PayoutRowSnapshot(
                    name=r.name, buy_in=r.buy_in, cash_out=r.cash_out, settled=r.settled
                )
                for r in self.rows
            ],
            buy_in=self.buy_in,
        )

    @classmethod
    def from_snapshot(
        cls,
        snapshot: Union[PayoutSnapshot, Dict[str, Any]],
        config: Optional[CalculatorConfig] = None,
    ) -> "PayoutTable":
        """
        Rebuild a table from a saved or shared snapshot.

        Raises:
            InvalidSnapshotError: If the snapshot data does not validate
        """
        if not isinstance(snapshot, PayoutSnapshot):
            try:
                snapshot = PayoutSnapshot(**snapshot)
            except (TypeError, ValidationError) as e:
                raise InvalidSnapshotError(f"Invalid payout snapshot: {e}")

        table = cls(config)
        table.buy_in = snapshot.buy_in
        rows = snapshot.rows
        if len(rows) > table.config.max_rows:
            TableLogger.log_table_full(table.config.max_rows)
            rows = rows[: table.config.max_rows]
        table.rows = [
            PayoutTableRow(
                name=r.name, buy_in=r.buy_in, cash_out=r.cash_out, settled=r.settled
            )
            for r in rows
        ]
        TableLogger.log_restored("payout", len(table.rows))
        return table
