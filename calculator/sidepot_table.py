from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from calculator.amount import format_amount, parse_amount
from calculator.config import CalculatorConfig
from calculator.side_pot import build_pots, clamp_board_count, settle
from calculator.winners import Selections, reconcile_winners, toggle_winner
from data.types.pot_types import Contribution, Pot, SidePotReport
from data.types.snapshot_types import SidePotRowSnapshot, SidePotSnapshot
from exceptions import (
    InvalidSnapshotError,
    InvalidTableStateError,
    RowNotFoundError,
    TableFullError,
)
from loggers.table_logger import TableLogger


@dataclass
class SidePotRow:
    """One player row of the side pot table, as typed."""

    name: str = ""
    bet: str = ""


class SidePotTable:
    """
    Holds the state of a side pot calculator session.

    The table keeps the raw text of every input plus the winner selections,
    and rebuilds pots and winnings from scratch on every ``recalc()``. The
    engines it calls never see the table itself, only plain contributions
    and selections.

    Attributes:
        config (CalculatorConfig): Row cap, board cap and default labels
        rows (List[SidePotRow]): Player rows in display order
        initial_pot (str): Chips in the middle before this hand, as typed
        boards (str): Board count as typed ("1" or "2")
        winners (Selections): Current winner selections
        delete_mode (bool): Whether per-row delete buttons are showing

    Usage:
        table = SidePotTable()
        table.set_name(0, "Alice")
        table.set_bet(0, "5")
        table.set_name(1, "Bob")
        table.set_bet(1, "10")
        report = table.recalc()
        table.toggle_winner(0, 0, "Bob", True)
    """

    def __init__(self, config: Optional[CalculatorConfig] = None) -> None:
        self.config = config or CalculatorConfig()
        self.rows: List[SidePotRow] = [
            SidePotRow() for _ in range(self.config.default_rows)
        ]
        self.initial_pot: str = ""
        self.boards: str = "1"
        self.winners: Selections = frozenset()
        self.delete_mode: bool = False
        self._pots: List[Pot] = []
        TableLogger.log_table_creation("side pot", len(self.rows))

    # Row editing

    def _row(self, index: int) -> SidePotRow:
        if not 0 <= index < len(self.rows):
            raise RowNotFoundError(f"No row at index {index}")
        return self.rows[index]

    def add_row(self, name: str = "", bet: str = "") -> SidePotRow:
        """
        Append a player row.

        Raises:
            TableFullError: If the table already has ``config.max_rows`` rows
        """
        if len(self.rows) >= self.config.max_rows:
            TableLogger.log_table_full(self.config.max_rows)
            raise TableFullError(f"Table already has {self.config.max_rows} rows")
        row = SidePotRow(name=name, bet=bet)
        self.rows.append(row)
        TableLogger.log_row_added(len(self.rows) - 1, name)
        return row

    def delete_row(self, index: Optional[int] = None) -> SidePotRow:
        """
        Remove a row, the last one when no index is given.

        Raises:
            RowNotFoundError: If the index does not exist
            InvalidTableStateError: If it is the only row left
        """
        if index is None:
            index = len(self.rows) - 1
        row = self._row(index)
        if len(self.rows) <= 1:
            raise InvalidTableStateError("Cannot delete the last row")
        del self.rows[index]
        TableLogger.log_row_deleted(index, row.name)
        return row

    def clear(self) -> None:
        """Reset to empty default rows, no initial pot and no winners."""
        self.rows = [SidePotRow() for _ in range(self.config.default_rows)]
        self.initial_pot = ""
        self.winners = frozenset()
        self.delete_mode = False
        self._pots = []
        TableLogger.log_table_cleared("side pot")

    def set_name(self, index: int, name: str) -> None:
        self._row(index).name = name

    def set_bet(self, index: int, bet: str) -> None:
        self._row(index).bet = bet

    def set_initial_pot(self, value: str) -> None:
        self.initial_pot = value

    def set_boards(self, value: str) -> None:
        self.boards = value

    def seat_player(self, name: str) -> int:
        """
        Put a player in the first row without a name, adding a row if needed.

        When an initial pot is entered the player's bet starts at that value.

        Returns:
            int: Index of the row the player was seated in.
        """
        bet = self.initial_pot.strip()
        for index, row in enumerate(self.rows):
            if not row.name.strip():
                row.name = name
                if bet:
                    row.bet = bet
                return index
        self.add_row(name=name, bet=bet)
        return len(self.rows) - 1

    def toggle_delete_mode(self) -> bool:
        self.delete_mode = not self.delete_mode
        TableLogger.log_view_state("delete_mode", self.delete_mode)
        return self.delete_mode

    # Computation

    def player_ids(self) -> List[str]:
        """Player id per row: the trimmed name, made unique in row order."""
        ids: List[str] = []
        seen: Dict[str, int] = {}
        for row in self.rows:
            base = row.name.strip() or self.config.no_name_label
            seen[base] = seen.get(base, 0) + 1
            ids.append(base if seen[base] == 1 else f"{base} ({seen[base]})")
        return ids

    def _clamp_negative_inputs(self) -> None:
        for index, row in enumerate(self.rows):
            if parse_amount(row.bet) < 0:
                TableLogger.log_value_clamped(index, "bet", row.bet)
                row.bet = format_amount(0)
        if parse_amount(self.initial_pot) < 0:
            TableLogger.log_value_clamped(-1, "initial pot", self.initial_pot)
            self.initial_pot = format_amount(0)

    def contributions(self) -> List[Contribution]:
        return [
            Contribution(player=player, amount=parse_amount(row.bet))
            for player, row in zip(self.player_ids(), self.rows)
        ]

    @property
    def board_count(self) -> int:
        return clamp_board_count(self.boards, self.config.max_boards)

    @property
    def pots(self) -> List[Pot]:
        """Pots from the last recalculation."""
        return list(self._pots)

    def recalc(self) -> SidePotReport:
        """
        Rebuild pots from the current rows and settle them.

        Negative bets are reset to ``0.00``. Winner selections are carried
        over to the rebuilt pots where still valid, and pots with a single
        eligible player are awarded to that player.

        Returns:
            SidePotReport: Pots, settlement and board count.
        """
        self._clamp_negative_inputs()
        contributions = self.contributions()
        initial_pot = parse_amount(self.initial_pot)
        board_count = self.board_count

        pots = build_pots(contributions, initial_pot)
        self.winners = reconcile_winners(pots, board_count, self._pots, self.winners)
        self._pots = pots

        settlement = settle(
            contributions,
            self.winners,
            initial_pot=initial_pot,
            board_count=board_count,
            pots=pots,
        )
        return SidePotReport(pots=pots, settlement=settlement, board_count=board_count)

    def toggle_winner(
        self, pot_index: int, board: int, player: str, checked: bool
    ) -> SidePotReport:
        """
        Change a winner checkbox and recalculate.

        The change is carried forward to later pots the player is eligible
        for on the same board.
        """
        if not self._pots:
            self.recalc()
        if not 0 <= pot_index < len(self._pots):
            raise InvalidTableStateError(f"No pot at index {pot_index}")
        self.winners = toggle_winner(
            self._pots, self.winners, pot_index, board, player, checked
        )
        return self.recalc()

    # Snapshots

    def snapshot(self) -> SidePotSnapshot:
        return SidePotSnapshot(
            rows=[SidePotRowSnapshot(name=r.name, bet=r.bet) for r in self.rows],
            initial_pot=self.initial_pot or "0",
            boards=self.boards,
        )

    @classmethod
    def from_snapshot(
        cls,
        snapshot: Union[SidePotSnapshot, Dict[str, Any]],
        config: Optional[CalculatorConfig] = None,
    ) -> "SidePotTable":
        """
        Rebuild a table from a saved or shared snapshot.

        Rows beyond ``config.max_rows`` are dropped.

        Raises:
            InvalidSnapshotError: If the snapshot data does not validate
        """
        if not isinstance(snapshot, SidePotSnapshot):
            try:
                snapshot = SidePotSnapshot(**snapshot)
            except (TypeError, ValidationError) as e:
                raise InvalidSnapshotError(f"Invalid side pot snapshot: {e}")

        table = cls(config)
        rows = snapshot.rows
        if len(rows) > table.config.max_rows:
            TableLogger.log_table_full(table.config.max_rows)
            rows = rows[: table.config.max_rows]

        table.rows = [SidePotRow(name=r.name, bet=r.bet) for r in rows]
        table.initial_pot = snapshot.initial_pot
        table.boards = snapshot.boards or "1"
        TableLogger.log_restored("side pot", len(table.rows))
        return table
