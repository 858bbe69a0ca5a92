"""Repository interfaces for banking domain."""

from rollcast.domain.banking.repositories.transaction_repository import (
    TransactionListener,
    TransactionRepository,
    Unsubscribe,
)

__all__ = [
    "TransactionListener",
    "TransactionRepository",
    "Unsubscribe",
]
