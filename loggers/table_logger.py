import logging

logger = logging.getLogger(__name__)


class TableLogger:
    """Handles all logging operations for calculator table edits and state changes."""

    @staticmethod
    def log_table_creation(kind: str, num_rows: int) -> None:
        """Log when a new table is created."""
        logger.info(f"New {kind} table created with {num_rows} rows")

    @staticmethod
    def log_row_added(index: int, name: str) -> None:
        logger.debug(f"Added row {index} ({name or 'blank'})")

    @staticmethod
    def log_row_deleted(index: int, name: str) -> None:
        logger.debug(f"Deleted row {index} ({name or 'blank'})")

    @staticmethod
    def log_table_full(max_rows: int) -> None:
        """Log a rejected add because the row cap was reached."""
        logger.warning(f"Table is full ({max_rows} rows), row not added")

    @staticmethod
    def log_table_cleared(kind: str) -> None:
        logger.info(f"{kind.capitalize()} table cleared")

    @staticmethod
    def log_value_clamped(index: int, field: str, raw: str) -> None:
        """Log a negative entry replaced by zero."""
        logger.debug(f"Row {index}: negative {field} {raw!r} reset to 0.00")

    @staticmethod
    def log_view_state(flag: str, value: bool) -> None:
        """Log a UI view-state toggle."""
        logger.debug(f"View state {flag} -> {value}")

    @staticmethod
    def log_restored(kind: str, num_rows: int) -> None:
        logger.info(f"Restored {kind} table with {num_rows} rows")
