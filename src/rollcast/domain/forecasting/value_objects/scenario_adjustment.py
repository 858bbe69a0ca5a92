"""Scenario-wide adjustments applied to receivables projections."""

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from rollcast.domain.forecasting.value_objects.client_payment_projection import (
    ProjectionConfidence,
)


class ReceivablesOutlook(str, Enum):
    OPTIMISTIC = "optimistic"
    REALISTIC = "realistic"
    PESSIMISTIC = "pessimistic"


class ScenarioAdjustment(BaseModel):
    """Multiplier, collection delay and optional confidence override."""

    name: str
    multiplier: Decimal = Field(..., ge=0)
    delay_days: int = 0
    confidence_override: ProjectionConfidence | None = None

    model_config = ConfigDict(frozen=True)


OPTIMISTIC_ADJUSTMENT = ScenarioAdjustment(
    name=ReceivablesOutlook.OPTIMISTIC.value,
    multiplier=Decimal("1.2"),
)
REALISTIC_ADJUSTMENT = ScenarioAdjustment(
    name=ReceivablesOutlook.REALISTIC.value,
    multiplier=Decimal("1.0"),
)
PESSIMISTIC_ADJUSTMENT = ScenarioAdjustment(
    name=ReceivablesOutlook.PESSIMISTIC.value,
    multiplier=Decimal("0.7"),
    delay_days=14,
    confidence_override=ProjectionConfidence.LOW,
)

DEFAULT_ADJUSTMENTS: dict[ReceivablesOutlook, ScenarioAdjustment] = {
    ReceivablesOutlook.OPTIMISTIC: OPTIMISTIC_ADJUSTMENT,
    ReceivablesOutlook.REALISTIC: REALISTIC_ADJUSTMENT,
    ReceivablesOutlook.PESSIMISTIC: PESSIMISTIC_ADJUSTMENT,
}

# Share of a projection kept per outlook and confidence level.
CONFIDENCE_HAIRCUTS: dict[
    ReceivablesOutlook,
    dict[ProjectionConfidence, Decimal],
] = {
    ReceivablesOutlook.OPTIMISTIC: {
        ProjectionConfidence.HIGH: Decimal("1.00"),
        ProjectionConfidence.MEDIUM: Decimal("0.95"),
        ProjectionConfidence.LOW: Decimal("0.85"),
    },
    ReceivablesOutlook.REALISTIC: {
        ProjectionConfidence.HIGH: Decimal("0.95"),
        ProjectionConfidence.MEDIUM: Decimal("0.80"),
        ProjectionConfidence.LOW: Decimal("0.60"),
    },
    ReceivablesOutlook.PESSIMISTIC: {
        ProjectionConfidence.HIGH: Decimal("0.85"),
        ProjectionConfidence.MEDIUM: Decimal("0.65"),
        ProjectionConfidence.LOW: Decimal("0.40"),
    },
}
