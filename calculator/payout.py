from typing import Iterable, List, Mapping, Union

from calculator.amount import RawAmount, is_balanced, parse_amount
from data.types.payout_types import PayoutResult, PayoutRow
from loggers.payout_logger import PayoutLogger

PayoutInput = Union[PayoutRow, Mapping[str, RawAmount]]


def _row_values(row: PayoutInput) -> tuple:
    if isinstance(row, PayoutRow):
        return row.buy_in, row.cash_out
    return row.get("buy_in"), row.get("cash_out")


def compute_payouts(rows: Iterable[PayoutInput]) -> PayoutResult:
    """
    Compute each player's net result for a cash game session.

    Args:
        rows: Buy-in and cash-out per player, either ``PayoutRow`` models or
            mappings with ``buy_in`` and ``cash_out`` keys. Values may be raw
            text as typed or numbers.

    Returns:
        PayoutResult: ``cash_out - buy_in`` per row, the totals and whether
            total cash-out matches total buy-in to the cent.

    Note:
        - Malformed amounts count as 0, nothing is raised
        - A negative cash-out is treated as a typo and counted as 0
    """
    payouts: List[float] = []
    total_in = 0.0
    total_out = 0.0

    for index, row in enumerate(rows):
        raw_in, raw_out = _row_values(row)
        buy_in = parse_amount(raw_in)
        cash_out = parse_amount(raw_out)
        if cash_out < 0:
            PayoutLogger.log_cash_out_clamped(index, cash_out)
            cash_out = 0.0

        payouts.append(cash_out - buy_in)
        total_in += buy_in
        total_out += cash_out

    balanced = is_balanced(total_out, total_in)
    PayoutLogger.log_totals(total_in, total_out, balanced)

    return PayoutResult(
        per_row_payout=payouts,
        total_in=total_in,
        total_out=total_out,
        balanced=balanced,
    )


def step_buy_in(current: RawAmount, delta: int, unit: RawAmount) -> float:
    """
    Add or remove whole buy-ins from a player's total buy-in.

    Args:
        current: The player's buy-in so far.
        delta: Number of buy-ins to add (negative to remove).
        unit: The table's standard buy-in.

    Returns:
        float: The new buy-in, never below a single ``unit``. When no unit is
            set the current value is returned unchanged.
    """
    current_value = parse_amount(current)
    unit_value = parse_amount(unit)
    if unit_value <= 0:
        return current_value

    new_value = max(current_value + delta * unit_value, unit_value)
    PayoutLogger.log_buy_in_stepped(current_value, new_value, unit_value)
    return new_value
