from typing import List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


def _as_text(v) -> str:
    """Older saves store numbers; keep everything as entered text."""
    if v is None:
        return ""
    return str(v)


class SidePotRowSnapshot(BaseModel):
    """A side pot table row exactly as entered."""

    name: str = ""
    bet: str = ""

    @field_validator("name", "bet", mode="before")
    @classmethod
    def coerce_to_text(cls, v) -> str:
        return _as_text(v)


class SidePotSnapshot(BaseModel):
    """Side pot table state exchanged with storage and share links.

    Accepts both the snake_case field names and the camelCase keys written
    by the browser calculator (``initialPot``, ``boardCount``).
    """

    model_config = ConfigDict(populate_by_name=True)

    rows: List[SidePotRowSnapshot] = Field(default_factory=list)
    initial_pot: str = Field(
        default="0", validation_alias=AliasChoices("initial_pot", "initialPot")
    )
    boards: str = Field(
        default="1", validation_alias=AliasChoices("boards", "boardCount")
    )

    @field_validator("initial_pot", "boards", mode="before")
    @classmethod
    def coerce_to_text(cls, v) -> str:
        return _as_text(v)


class PayoutRowSnapshot(BaseModel):
    """A payout table row exactly as entered.

    ``in`` and ``out`` are the browser calculator's keys for buy-in and
    cash-out.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    buy_in: str = Field(default="", validation_alias=AliasChoices("buy_in", "in"))
    cash_out: str = Field(default="", validation_alias=AliasChoices("cash_out", "out"))
    settled: bool = False

    @field_validator("name", "buy_in", "cash_out", mode="before")
    @classmethod
    def coerce_to_text(cls, v) -> str:
        return _as_text(v)


class PayoutSnapshot(BaseModel):
    """Payout table state exchanged with storage and share links."""

    model_config = ConfigDict(populate_by_name=True)

    rows: List[PayoutRowSnapshot] = Field(default_factory=list)
    buy_in: str = Field(default="", validation_alias=AliasChoices("buy_in", "buyIn"))

    @field_validator("buy_in", mode="before")
    @classmethod
    def coerce_to_text(cls, v) -> str:
        return _as_text(v)
