"""Repository interface for estimates."""

from abc import ABC, abstractmethod
from collections.abc import Callable

from rollcast.domain.forecasting.value_objects import Estimate

EstimateListener = Callable[[list[Estimate]], None]
Unsubscribe = Callable[[], None]


class EstimateRepository(ABC):
    """Repository for user-authored estimates.

    Saves are upserts keyed by estimate id; the last write wins.
    """

    @abstractmethod
    async def save(self, estimate: Estimate) -> None:
        """Insert or replace an estimate."""

    @abstractmethod
    async def find_by_id(self, estimate_id: str) -> Estimate | None:
        """
        Find an estimate by id.

        Returns
        -------
        The estimate if found, None otherwise
        """

    @abstractmethod
    async def find_all(self) -> list[Estimate]:
        """Return every estimate of every scenario."""

    @abstractmethod
    async def find_by_scenario(self, scenario: str) -> list[Estimate]:
        """Return the estimates of one scenario."""

    @abstractmethod
    async def delete(self, estimate_id: str) -> bool:
        """
        Delete an estimate.

        Returns
        -------
        True if an estimate was deleted, False if the id was unknown
        """

    @abstractmethod
    def subscribe(self, listener: EstimateListener) -> Unsubscribe:
        """Register a listener receiving every estimate on each change."""
