"""Forecast router for rolling week forecasts and comparisons."""

import logging

from fastapi import APIRouter

from rollcast.application.queries import (
    ReceivablesOutlookQuery,
    RollingForecastQuery,
    ScenarioComparisonQuery,
)
from rollcast.presentation.api.dependencies import AppSettings, RepoFactory
from rollcast.presentation.api.schemas import (
    ForecastRequestSchema,
    ForecastResponse,
    ReceivablesOutlookRequest,
    ReceivablesOutlookResponse,
    ScenarioComparisonRequest,
    ScenarioComparisonResponse,
    WeekBucketResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    summary="Compute a forecast",
    responses={200: {"description": "Week buckets with a running balance"}},
)
async def compute_forecast(
    request: ForecastRequestSchema,
    factory: RepoFactory,
    settings: AppSettings,
) -> ForecastResponse:
    """
    Fill the rolling (or fixed) timeline of one scenario.

    Past weeks show actuals only; the current and future weeks add the
    scenario's estimates and the receivables projections.
    """
    query = RollingForecastQuery.from_factory(factory, settings)
    result = await query.execute(request.to_request(settings))
    return ForecastResponse.from_dto(result)


@router.post(
    "/scenarios",
    summary="Compare scenarios",
    responses={200: {"description": "Weekly figures per scenario"}},
)
async def compare_scenarios(
    request: ScenarioComparisonRequest,
    factory: RepoFactory,
    settings: AppSettings,
) -> ScenarioComparisonResponse:
    query = ScenarioComparisonQuery.from_factory(factory, settings)
    comparison = await query.execute(
        request.to_request(settings),
        scenarios=request.scenarios,
    )
    return ScenarioComparisonResponse.from_domain(comparison)


@router.post(
    "/receivables",
    summary="Compare receivables outlooks",
    responses={200: {"description": "Week buckets per receivables adjustment"}},
)
async def compare_receivables_outlooks(
    request: ReceivablesOutlookRequest,
    factory: RepoFactory,
    settings: AppSettings,
) -> ReceivablesOutlookResponse:
    """Run one scenario under optimistic, realistic and pessimistic collections."""
    forecast_request = request.to_request(settings)
    adjustments = (
        [adjustment.to_domain() for adjustment in request.adjustments]
        if request.adjustments
        else None
    )
    query = ReceivablesOutlookQuery.from_factory(factory, settings)
    outlooks = await query.execute(forecast_request, adjustments)
    return ReceivablesOutlookResponse(
        scenario=forecast_request.scenario,
        outlooks={
            name: [WeekBucketResponse.from_domain(bucket) for bucket in buckets]
            for name, buckets in outlooks.items()
        },
    )
