"""Data transfer objects of the application layer."""

from rollcast.application.dtos.forecast_dto import ForecastRequest, ForecastResult
from rollcast.application.dtos.import_dto import ImportPreview, ImportResult, RowError

__all__ = [
    "ForecastRequest",
    "ForecastResult",
    "ImportPreview",
    "ImportResult",
    "RowError",
]
