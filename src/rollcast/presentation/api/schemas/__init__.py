"""Pydantic schemas for API request/response models."""

from rollcast.presentation.api.schemas.common import ErrorResponse, HealthResponse
from rollcast.presentation.api.schemas.estimates import (
    EstimateCreateRequest,
    EstimateListResponse,
    EstimateResponse,
    EstimateUpdateRequest,
)
from rollcast.presentation.api.schemas.forecast import (
    ForecastRequestSchema,
    ForecastResponse,
    ReceivablesOutlookRequest,
    ReceivablesOutlookResponse,
    ScenarioComparisonRequest,
    ScenarioComparisonResponse,
    WeekBucketResponse,
)
from rollcast.presentation.api.schemas.imports import (
    ImportPreviewResponse,
    ImportResultResponse,
)
from rollcast.presentation.api.schemas.transactions import (
    SessionResetResponse,
    TransactionListResponse,
    TransactionResponse,
)

__all__ = [
    "ErrorResponse",
    "EstimateCreateRequest",
    "EstimateListResponse",
    "EstimateResponse",
    "EstimateUpdateRequest",
    "ForecastRequestSchema",
    "ForecastResponse",
    "HealthResponse",
    "ImportPreviewResponse",
    "ImportResultResponse",
    "ReceivablesOutlookRequest",
    "ReceivablesOutlookResponse",
    "ScenarioComparisonRequest",
    "ScenarioComparisonResponse",
    "SessionResetResponse",
    "TransactionListResponse",
    "TransactionResponse",
    "WeekBucketResponse",
]
