"""Domain services for rolling cashflow forecasting."""

from rollcast.domain.forecasting.services.balance_anchor import (
    BalanceAnchor,
    derive_balance_anchor,
    end_of_day_balance,
)
from rollcast.domain.forecasting.services.cashflow_aggregator import (
    CashflowAggregator,
    variance_pct,
)
from rollcast.domain.forecasting.services.projection_adjustments import (
    apply_adjustment,
    apply_confidence_haircut,
)
from rollcast.domain.forecasting.services.projection_builder import (
    ProjectionBuilder,
    ProjectionSummary,
    confidence_for,
    summarize_projections,
)
from rollcast.domain.forecasting.services.recurring_estimate_expander import (
    RecurringEstimateExpander,
)
from rollcast.domain.forecasting.services.rolling_week_generator import (
    RollingWeekGenerator,
    week_status,
)
from rollcast.domain.forecasting.services.scenario_overlay import (
    ScenarioComparison,
    ScenarioFigures,
    ScenarioOverlay,
    ScenarioWeekComparison,
    filter_estimates,
    scenario_names,
)

__all__ = [
    "BalanceAnchor",
    "CashflowAggregator",
    "ProjectionBuilder",
    "ProjectionSummary",
    "RecurringEstimateExpander",
    "RollingWeekGenerator",
    "ScenarioComparison",
    "ScenarioFigures",
    "ScenarioOverlay",
    "ScenarioWeekComparison",
    "apply_adjustment",
    "apply_confidence_haircut",
    "confidence_for",
    "derive_balance_anchor",
    "end_of_day_balance",
    "filter_estimates",
    "scenario_names",
    "summarize_projections",
    "variance_pct",
    "week_status",
]
