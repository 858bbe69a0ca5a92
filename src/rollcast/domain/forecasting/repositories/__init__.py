"""Repository interfaces for forecasting domain."""

from rollcast.domain.forecasting.repositories.estimate_repository import (
    EstimateListener,
    EstimateRepository,
    Unsubscribe,
)

__all__ = [
    "EstimateListener",
    "EstimateRepository",
    "Unsubscribe",
]
