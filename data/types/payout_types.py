from typing import List, Union

from pydantic import BaseModel, Field

RawAmount = Union[str, float, int, None]


class PayoutRow(BaseModel):
    """One player's buy-in and cash-out as entered."""

    buy_in: RawAmount = ""
    cash_out: RawAmount = ""


class PayoutResult(BaseModel):
    """Net payout per row plus session totals."""

    per_row_payout: List[float] = Field(default_factory=list)
    total_in: float = 0.0
    total_out: float = 0.0
    balanced: bool = True

    @property
    def total_payout(self) -> float:
        return self.total_out - self.total_in
