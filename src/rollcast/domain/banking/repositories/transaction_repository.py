"""Repository interface for imported transactions."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import date

from rollcast.domain.banking.value_objects import Transaction

TransactionListener = Callable[[list[Transaction]], None]
Unsubscribe = Callable[[], None]


class TransactionRepository(ABC):
    """Repository for persisting imported transactions.

    Transactions are append-only: they are written once by an import and
    only removed by a bulk session reset.
    """

    @abstractmethod
    async def save_batch(self, transactions: list[Transaction]) -> list[str]:
        """
        Persist a batch of new transactions.

        Parameters
        ----------
        transactions
            Already categorized and deduplicated transactions

        Returns
        -------
        IDs of the written transactions, in input order

        Raises
        ------
        PersistenceError
            If the underlying store rejects the write
        """

    @abstractmethod
    async def find_all(self) -> list[Transaction]:
        """Return every stored transaction ordered by date."""

    @abstractmethod
    async def find_by_date_range(self, start: date, end: date) -> list[Transaction]:
        """
        Return stored transactions dated within ``start`` and ``end``.

        Parameters
        ----------
        start
            First day (inclusive)
        end
            Last day (inclusive)
        """

    @abstractmethod
    async def get_known_hashes(self) -> set[str]:
        """Return the hash index of every stored transaction."""

    @abstractmethod
    async def delete_all(self) -> int:
        """
        Remove every stored transaction (session reset).

        Returns
        -------
        Number of removed transactions
        """

    @abstractmethod
    def subscribe(self, listener: TransactionListener) -> Unsubscribe:
        """
        Register a listener receiving the full transaction list on every change.

        Returns
        -------
        Callable that removes the listener
        """
