from dataclasses import dataclass
from typing import Dict, List, Tuple

from pydantic import BaseModel, Field, field_validator


@dataclass(frozen=True)
class Contribution:
    """Chips a single player put into the pot this hand."""

    player: str
    amount: float


@dataclass(frozen=True)
class WinnerSelection:
    """A player marked as winner of one pot on one board."""

    pot_index: int
    board: int
    player: str


class Pot(BaseModel):
    """Represents the main pot or one side pot built from a contribution tier."""

    tier: int = Field(..., ge=0, description="Tier index, 0 is the main pot")
    size: float = Field(..., ge=0, description="Total chips in this pot")
    eligible_players: List[str] = Field(
        default_factory=list,
        description="Players who contributed at least this tier's threshold",
    )

    @property
    def name(self) -> str:
        """Display name, 'Main Pot' or 'Side Pot N'."""
        if self.tier == 0:
            return "Main Pot"
        return f"Side Pot {self.tier}"

    @property
    def is_side_pot(self) -> bool:
        return self.tier > 0

    def is_eligible(self, player: str) -> bool:
        return player in self.eligible_players


class SettlementResult(BaseModel):
    """Outcome of distributing every pot among the selected winners."""

    per_player_payout: Dict[str, float] = Field(default_factory=dict)
    total_contributed: float = 0.0
    total_distributed: float = 0.0
    balanced: bool = True
    unsettled: List[Tuple[int, int]] = Field(
        default_factory=list,
        description="(pot_index, board) shares that have no winner selected",
    )

    @field_validator("total_contributed", "total_distributed")
    @classmethod
    def validate_totals(cls, v: float) -> float:
        """Totals are never negative."""
        if v < 0:
            raise ValueError("Totals cannot be negative")
        return float(v)


class SidePotReport(BaseModel):
    """Everything a side pot table shows after a recalculation."""

    pots: List[Pot] = Field(default_factory=list)
    settlement: SettlementResult = Field(default_factory=SettlementResult)
    board_count: int = Field(default=1, ge=1, le=2)

    @property
    def total_bet(self) -> float:
        return self.settlement.total_contributed

    @property
    def total_won(self) -> float:
        return self.settlement.total_distributed
