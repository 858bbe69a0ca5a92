"""Receivables feed port."""

from typing import Protocol

from rollcast.domain.forecasting.value_objects import InvoiceRecord


class ReceivablesFeed(Protocol):
    """Source of outstanding invoices, e.g. an invoicing system adapter."""

    async def fetch_open_invoices(self) -> list[InvoiceRecord]:
        ...
