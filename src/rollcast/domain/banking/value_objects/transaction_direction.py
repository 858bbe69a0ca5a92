"""Transaction direction enumeration."""

from enum import Enum


class TransactionDirection(str, Enum):
    """Whether money entered or left the account."""

    INFLOW = "inflow"
    OUTFLOW = "outflow"

    @property
    def is_inflow(self) -> bool:
        return self is TransactionDirection.INFLOW
