"""Value objects for the forecasting domain."""

from rollcast.domain.forecasting.value_objects.client_payment_projection import (
    ClientPaymentProjection,
    CollectionStatus,
    ProjectionConfidence,
)
from rollcast.domain.forecasting.value_objects.collection_assumptions import (
    CollectionAssumptions,
)
from rollcast.domain.forecasting.value_objects.estimate import (
    DEFAULT_SCENARIO,
    Estimate,
    RecurringPeriod,
)
from rollcast.domain.forecasting.value_objects.invoice_record import InvoiceRecord
from rollcast.domain.forecasting.value_objects.scenario_adjustment import (
    CONFIDENCE_HAIRCUTS,
    DEFAULT_ADJUSTMENTS,
    OPTIMISTIC_ADJUSTMENT,
    PESSIMISTIC_ADJUSTMENT,
    REALISTIC_ADJUSTMENT,
    ReceivablesOutlook,
    ScenarioAdjustment,
)
from rollcast.domain.forecasting.value_objects.timeline_window import (
    TimelineMode,
    TimelineWindow,
)
from rollcast.domain.forecasting.value_objects.week_bucket import (
    EstimateVariance,
    WeekBucket,
)
from rollcast.domain.forecasting.value_objects.week_shell import WeekShell
from rollcast.domain.forecasting.value_objects.week_status import WeekStatus
from rollcast.domain.forecasting.value_objects.week_timeline import (
    WeekTimeline,
    relative_week_number,
    week_start_for,
)

__all__ = [
    "CONFIDENCE_HAIRCUTS",
    "DEFAULT_ADJUSTMENTS",
    "DEFAULT_SCENARIO",
    "OPTIMISTIC_ADJUSTMENT",
    "PESSIMISTIC_ADJUSTMENT",
    "REALISTIC_ADJUSTMENT",
    "ClientPaymentProjection",
    "CollectionAssumptions",
    "CollectionStatus",
    "Estimate",
    "EstimateVariance",
    "InvoiceRecord",
    "ProjectionConfidence",
    "ReceivablesOutlook",
    "RecurringPeriod",
    "ScenarioAdjustment",
    "TimelineMode",
    "TimelineWindow",
    "WeekBucket",
    "WeekShell",
    "WeekStatus",
    "WeekTimeline",
    "relative_week_number",
    "week_start_for",
]
