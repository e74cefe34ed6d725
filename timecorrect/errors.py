"""Exception types shared across the package."""


class HistoryStoreError(Exception):
    """Raised by a HistoryStore when a read or write cannot be completed."""


class UnitMismatchError(ValueError):
    """Raised when a duration unit is unknown or cannot be reconciled."""
