"""Value objects for banking domain."""

from rollcast.domain.banking.value_objects.statement_row import StatementRow
from rollcast.domain.banking.value_objects.transaction import (
    UNCATEGORIZED,
    Transaction,
)
from rollcast.domain.banking.value_objects.transaction_direction import (
    TransactionDirection,
)

__all__ = [
    "UNCATEGORIZED",
    "StatementRow",
    "Transaction",
    "TransactionDirection",
]
