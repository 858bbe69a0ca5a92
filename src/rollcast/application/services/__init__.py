"""Application services."""

from rollcast.application.services.live_forecast_service import (
    ForecastSubscription,
    LiveForecastService,
)
from rollcast.application.services.transaction_import_service import (
    TransactionImportService,
)

__all__ = [
    "ForecastSubscription",
    "LiveForecastService",
    "TransactionImportService",
]
