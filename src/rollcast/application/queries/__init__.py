"""Read-side queries of the application layer."""

from rollcast.application.queries.receivables_outlook_query import (
    ReceivablesOutlookQuery,
)
from rollcast.application.queries.rolling_forecast_query import (
    RollingForecastQuery,
    assumptions_from_settings,
)
from rollcast.application.queries.scenario_comparison_query import (
    ScenarioComparisonQuery,
)
from rollcast.application.queries.transaction_list_query import TransactionListQuery

__all__ = [
    "ReceivablesOutlookQuery",
    "RollingForecastQuery",
    "ScenarioComparisonQuery",
    "TransactionListQuery",
    "assumptions_from_settings",
]
