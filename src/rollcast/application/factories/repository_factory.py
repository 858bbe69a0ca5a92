"""Repository factory protocol for application layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from rollcast.domain.banking.repositories import TransactionRepository
from rollcast.domain.forecasting.repositories import EstimateRepository

if TYPE_CHECKING:
    from rollcast.application.ports import SessionContext


class RepositoryFactory(Protocol):
    """Protocol for creating session-scoped repositories."""

    @property
    def session(self) -> SessionContext:
        """Get the session the repositories are scoped to."""
        ...

    def transaction_repository(self) -> TransactionRepository:
        """Get transaction repository."""
        ...

    def estimate_repository(self) -> EstimateRepository:
        """Get estimate repository."""
        ...
