"""Pure adjustments of receivables projections."""

from collections.abc import Iterable
from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal

from rollcast.domain.forecasting.value_objects import (
    CONFIDENCE_HAIRCUTS,
    ClientPaymentProjection,
    ReceivablesOutlook,
    ScenarioAdjustment,
    relative_week_number,
)

_CENTS = Decimal("0.01")


def _scaled(amount: Decimal, factor: Decimal) -> Decimal:
    return (amount * factor).quantize(_CENTS, rounding=ROUND_HALF_UP)


def apply_adjustment(
    projections: Iterable[ClientPaymentProjection],
    adjustment: ScenarioAdjustment,
    anchor: date,
) -> list[ClientPaymentProjection]:
    """Scale, delay and optionally downgrade every projection.

    The week number is recomputed from the shifted collection date, so a
    delay crossing a week boundary moves the projection to its new week.
    """
    adjusted = []
    delay = timedelta(days=adjustment.delay_days)
    for projection in projections:
        collection_date = projection.estimated_collection_date + delay
        amount = _scaled(projection.expected_amount, adjustment.multiplier)
        update = {
            "expected_amount": amount,
            "estimated_collection_date": collection_date,
            "week_number": relative_week_number(anchor, collection_date),
        }
        if adjustment.confidence_override is not None:
            update["confidence"] = adjustment.confidence_override
        adjusted.append(projection.model_copy(update=update))
    return adjusted


def apply_confidence_haircut(
    projections: Iterable[ClientPaymentProjection],
    outlook: ReceivablesOutlook,
) -> list[ClientPaymentProjection]:
    """Scale each projection by the share its confidence keeps under ``outlook``."""
    table = CONFIDENCE_HAIRCUTS[outlook]
    return [
        projection.model_copy(
            update={
                "expected_amount": _scaled(
                    projection.expected_amount,
                    table[projection.confidence],
                ),
            },
        )
        for projection in projections
    ]
