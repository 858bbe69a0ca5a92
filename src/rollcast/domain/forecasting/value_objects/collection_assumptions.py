"""Receivables collection assumptions."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class CollectionAssumptions(BaseModel):
    """How much of an invoice is expected back, and how late.

    Percentages are whole numbers (``90`` means 90 %). Overdue invoices past
    ``collections_after_days`` are treated as in collections.
    """

    current_on_time_pct: Decimal = Field(default=Decimal("90"), ge=0)
    overdue_collection_pct: Decimal = Field(default=Decimal("75"), ge=0)
    average_delay_days: int = Field(default=14, ge=0)
    collections_after_days: int = Field(default=90, ge=1)
    collections_rate_pct: Decimal = Field(default=Decimal("50"), ge=0)
    collections_delay_days: int = Field(default=30, ge=0)

    model_config = ConfigDict(frozen=True)
