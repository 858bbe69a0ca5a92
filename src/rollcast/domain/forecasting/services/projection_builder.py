"""Receivables projections from outstanding invoices."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal

from rollcast.domain.forecasting.value_objects import (
    ClientPaymentProjection,
    CollectionAssumptions,
    CollectionStatus,
    InvoiceRecord,
    ProjectionConfidence,
    relative_week_number,
)

logger = logging.getLogger(__name__)

_CENTS = Decimal("0.01")
_HUNDRED = Decimal("100")
MEDIUM_CONFIDENCE_MAX_DAYS_OVERDUE = 30


def confidence_for(days_overdue: int) -> ProjectionConfidence:
    if days_overdue <= 0:
        return ProjectionConfidence.HIGH
    if days_overdue <= MEDIUM_CONFIDENCE_MAX_DAYS_OVERDUE:
        return ProjectionConfidence.MEDIUM
    return ProjectionConfidence.LOW


@dataclass
class ProjectionSummary:
    """Totals over a set of projections."""

    total_expected: Decimal
    client_count: int
    invoice_count: int
    by_confidence: dict[ProjectionConfidence, Decimal] = field(default_factory=dict)
    by_week: dict[int, Decimal] = field(default_factory=dict)


class ProjectionBuilder:
    """Convert invoice records into ``ClientPaymentProjection`` entries.

    Each collectible invoice becomes one projection. Its amount is scaled
    by the collection rate of its status and its expected date is pushed
    back by the status delay, but never before ``today``.
    """

    def __init__(self, assumptions: CollectionAssumptions | None = None):
        self._assumptions = assumptions or CollectionAssumptions()

    @property
    def assumptions(self) -> CollectionAssumptions:
        return self._assumptions

    def build(
        self,
        invoices: Iterable[InvoiceRecord],
        anchor: date,
        today: date | None = None,
    ) -> list[ClientPaymentProjection]:
        """
        Build projections for every collectible invoice.

        Parameters
        ----------
        invoices
            Records from the receivables feed
        anchor
            Timeline anchor the week numbers are relative to
        today
            Reference date for due/overdue days, defaults to ``anchor``

        Returns
        -------
        Projections ordered by estimated collection date
        """
        today = today or anchor
        projections = []
        skipped = 0
        for invoice in invoices:
            if not invoice.is_collectible:
                skipped += 1
                continue
            projections.append(self._project(invoice, anchor, today))

        if skipped:
            logger.debug("Skipped %d paid, voided or empty invoices", skipped)
        return sorted(
            projections,
            key=lambda p: (
                p.estimated_collection_date,
                p.client_name,
                p.invoice_number,
            ),
        )

    def _project(
        self,
        invoice: InvoiceRecord,
        anchor: date,
        today: date,
    ) -> ClientPaymentProjection:
        assumptions = self._assumptions
        days_until_due = (invoice.due_date - today).days
        days_overdue = max(0, -days_until_due)
        status = self._collection_status(invoice, days_overdue)

        if status is CollectionStatus.CURRENT:
            rate = assumptions.current_on_time_pct
            delay = 0
        elif status is CollectionStatus.OVERDUE:
            rate = assumptions.overdue_collection_pct
            delay = assumptions.average_delay_days
        else:
            rate = assumptions.collections_rate_pct
            delay = assumptions.collections_delay_days

        expected = (invoice.amount_due * rate / _HUNDRED).quantize(
            _CENTS,
            rounding=ROUND_HALF_UP,
        )
        collection_date = max(invoice.due_date + timedelta(days=delay), today)

        return ClientPaymentProjection(
            invoice_number=invoice.invoice_number,
            client_name=invoice.client_name,
            expected_amount=expected,
            original_amount=invoice.amount_due,
            original_due_date=invoice.due_date,
            estimated_collection_date=collection_date,
            confidence=confidence_for(days_overdue),
            collection_status=status,
            days_until_due=days_until_due,
            days_overdue=days_overdue,
            week_number=relative_week_number(anchor, collection_date),
        )

    def _collection_status(
        self,
        invoice: InvoiceRecord,
        days_overdue: int,
    ) -> CollectionStatus:
        if invoice.status == CollectionStatus.COLLECTIONS.value:
            return CollectionStatus.COLLECTIONS
        if days_overdue == 0:
            return CollectionStatus.CURRENT
        if days_overdue > self._assumptions.collections_after_days:
            return CollectionStatus.COLLECTIONS
        return CollectionStatus.OVERDUE


def summarize_projections(
    projections: Iterable[ClientPaymentProjection],
) -> ProjectionSummary:
    total = Decimal("0")
    clients: set[str] = set()
    count = 0
    by_confidence: dict[ProjectionConfidence, Decimal] = {
        level: Decimal("0") for level in ProjectionConfidence
    }
    by_week: dict[int, Decimal] = {}

    for projection in projections:
        count += 1
        total += projection.expected_amount
        clients.add(projection.client_name)
        by_confidence[projection.confidence] += projection.expected_amount
        by_week[projection.week_number] = (
            by_week.get(projection.week_number, Decimal("0"))
            + projection.expected_amount
        )

    return ProjectionSummary(
        total_expected=total,
        client_count=len(clients),
        invoice_count=count,
        by_confidence=by_confidence,
        by_week=dict(sorted(by_week.items())),
    )
