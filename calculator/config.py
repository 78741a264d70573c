import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

ENV_PREFIX = "POTCALC_"


@dataclass
class CalculatorConfig:
    """
    Configuration parameters for the payout and side pot calculators.

    Attributes:
        max_rows (int): Maximum number of player rows in a table (default: 32)
        default_rows (int): Empty rows created for a fresh or cleared table (default: 2)
        max_boards (int): Highest board count accepted for run-it-twice (default: 2)
        no_name_label (str): Player id used for rows with a blank name (default: "(no name)")
        default_buy_in (str): Buy-in given to new payout rows when the table has none (default: "30")

    Raises:
        ValueError: If any of the parameters are out of range
    """

    max_rows: int = 32
    default_rows: int = 2
    max_boards: int = 2
    no_name_label: str = "(no name)"
    default_buy_in: str = "30"

    def __post_init__(self):
        """Validate configuration parameters."""
        if self.max_rows <= 0:
            raise ValueError("Max rows must be positive")
        if not 1 <= self.default_rows <= self.max_rows:
            raise ValueError("Default rows must be between 1 and max rows")
        if not 1 <= self.max_boards <= 2:
            raise ValueError("Max boards must be 1 or 2")
        if not self.no_name_label.strip():
            raise ValueError("No-name label cannot be empty")

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "CalculatorConfig":
        """Build a config from POTCALC_* environment variables.

        A ``.env`` file is loaded first when present; variables already set in
        the environment win over the file.
        """
        load_dotenv(env_file)

        kwargs = {}
        for field_name in ("max_rows", "default_rows", "max_boards"):
            raw = os.getenv(f"{ENV_PREFIX}{field_name.upper()}")
            if raw is None or not raw.strip():
                continue
            try:
                kwargs[field_name] = int(raw)
            except ValueError:
                raise ValueError(
                    f"{ENV_PREFIX}{field_name.upper()} must be an integer, got {raw!r}"
                )

        buy_in = os.getenv(f"{ENV_PREFIX}DEFAULT_BUY_IN")
        if buy_in is not None:
            kwargs["default_buy_in"] = buy_in

        label = os.getenv(f"{ENV_PREFIX}NO_NAME_LABEL")
        if label is not None:
            kwargs["no_name_label"] = label

        return cls(**kwargs)
