"""Transactions router for listing and resetting imported transactions."""

import logging
from datetime import date
from typing import Annotated

from fastapi import APIRouter, Query

from rollcast.application.commands import ResetSessionCommand
from rollcast.application.queries import TransactionListQuery
from rollcast.domain.banking.services import summarize_categories
from rollcast.presentation.api.dependencies import RepoFactory
from rollcast.presentation.api.schemas import (
    SessionResetResponse,
    TransactionListResponse,
    TransactionResponse,
)
from rollcast.presentation.api.schemas.transactions import CategoryTotalResponse

logger = logging.getLogger(__name__)

router = APIRouter()

StartFilter = Annotated[
    date | None,
    Query(description="First day (inclusive)"),
]
EndFilter = Annotated[
    date | None,
    Query(description="Last day (inclusive)"),
]


@router.get(
    "",
    summary="List transactions",
    responses={200: {"description": "Stored transactions ordered by date"}},
)
async def list_transactions(
    factory: RepoFactory,
    start: StartFilter = None,
    end: EndFilter = None,
) -> TransactionListResponse:
    """List the session's transactions, optionally within a date range."""
    query = TransactionListQuery.from_factory(factory)
    transactions = await query.execute(start=start, end=end)
    return TransactionListResponse(
        transactions=[TransactionResponse.from_domain(tx) for tx in transactions],
        count=len(transactions),
        categories=[
            CategoryTotalResponse.from_domain(total)
            for total in summarize_categories(transactions)
        ],
    )


@router.delete(
    "",
    summary="Reset the session",
    responses={200: {"description": "Every imported transaction removed"}},
)
async def reset_session(factory: RepoFactory) -> SessionResetResponse:
    """Delete all imported transactions of the session. Estimates are kept."""
    command = ResetSessionCommand.from_factory(factory)
    deleted = await command.execute()
    return SessionResetResponse(
        session_id=factory.session.session_id,
        deleted=deleted,
    )
