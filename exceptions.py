class PotCalculatorError(Exception):
    """Base exception for pot calculator errors."""

    pass


class InvalidTableStateError(PotCalculatorError):
    """Raised when a calculator table is asked to do something its state forbids."""

    pass


class TableFullError(InvalidTableStateError):
    """Raised when adding a row to a table that already holds the maximum rows."""

    pass


class RowNotFoundError(InvalidTableStateError):
    """Raised when a row index does not exist in the table."""

    pass


class InvalidSnapshotError(PotCalculatorError):
    """Raised when a saved or shared table snapshot cannot be loaded."""

    pass
