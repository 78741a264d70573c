import logging

logger = logging.getLogger(__name__)


class PayoutLogger:
    """Handles all logging operations for buy-in and cash-out payouts."""

    @staticmethod
    def log_cash_out_clamped(row_index: int, raw_value: float) -> None:
        """Log a negative cash-out being corrected to zero."""
        logger.debug(f"Row {row_index}: negative cash-out {raw_value} clamped to 0")

    @staticmethod
    def log_buy_in_stepped(old_value: float, new_value: float, unit: float) -> None:
        """Log a buy-in stepper change."""
        logger.debug(f"Buy-in stepped {old_value} -> {new_value} (unit {unit})")

    @staticmethod
    def log_totals(total_in: float, total_out: float, balanced: bool) -> None:
        """Log session totals, warning when they do not match."""
        if balanced:
            logger.debug(f"Payout totals balanced: in={total_in}, out={total_out}")
        else:
            logger.warning(
                f"Payout totals unbalanced - In: {total_in}, Out: {total_out}, "
                f"Difference: {total_out - total_in}"
            )
