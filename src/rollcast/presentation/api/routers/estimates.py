"""Estimates router for forecast line item management."""

import logging
from typing import Annotated

from fastapi import APIRouter, Query, status

from rollcast.application.commands import (
    CreateEstimateCommand,
    DeleteEstimateCommand,
    UpdateEstimateCommand,
)
from rollcast.domain.forecasting.services import scenario_names
from rollcast.presentation.api.dependencies import RepoFactory
from rollcast.presentation.api.schemas import (
    EstimateCreateRequest,
    EstimateListResponse,
    EstimateResponse,
    EstimateUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()

ScenarioFilter = Annotated[
    str | None,
    Query(description="Only estimates of this scenario"),
]


@router.get(
    "",
    summary="List estimates",
    responses={200: {"description": "Estimates ordered by week"}},
)
async def list_estimates(
    factory: RepoFactory,
    scenario: ScenarioFilter = None,
) -> EstimateListResponse:
    repo = factory.estimate_repository()
    all_estimates = await repo.find_all()
    estimates = (
        [estimate for estimate in all_estimates if estimate.scenario == scenario]
        if scenario
        else all_estimates
    )
    return EstimateListResponse(
        estimates=[EstimateResponse.from_domain(estimate) for estimate in estimates],
        count=len(estimates),
        scenarios=scenario_names(all_estimates),
    )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create an estimate",
    responses={
        201: {"description": "Estimate created"},
        422: {"description": "Invalid estimate fields"},
    },
)
async def create_estimate(
    request: EstimateCreateRequest,
    factory: RepoFactory,
) -> EstimateResponse:
    """
    Create an estimate in one week of one scenario.

    Give the week as any date inside it (``week_start``) or as a relative
    ``week_number`` with the ``anchor_date`` of the timeline.
    """
    command = CreateEstimateCommand.from_factory(factory)
    estimate = await command.execute(
        amount=request.amount,
        direction=request.direction,
        category=request.category,
        description=request.description,
        week_start=request.week_start,
        scenario=request.scenario,
        notes=request.notes,
        recurring_period=request.recurring_period,
        monthly_day_of_month=request.monthly_day_of_month,
    )
    return EstimateResponse.from_domain(estimate)


@router.put(
    "/{estimate_id}",
    summary="Update an estimate",
    responses={
        200: {"description": "Estimate updated"},
        404: {"description": "Estimate not found"},
        422: {"description": "Invalid estimate fields"},
    },
)
async def update_estimate(
    estimate_id: str,
    request: EstimateUpdateRequest,
    factory: RepoFactory,
) -> EstimateResponse:
    command = UpdateEstimateCommand.from_factory(factory)
    estimate = await command.execute(estimate_id, **request.changes())
    return EstimateResponse.from_domain(estimate)


@router.delete(
    "/{estimate_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an estimate",
    responses={
        204: {"description": "Estimate deleted"},
        404: {"description": "Estimate not found"},
    },
)
async def delete_estimate(estimate_id: str, factory: RepoFactory) -> None:
    command = DeleteEstimateCommand.from_factory(factory)
    await command.execute(estimate_id)
