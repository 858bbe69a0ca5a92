"""Canonical transaction value object."""

from datetime import date, datetime
from decimal import Decimal
from typing import Literal
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from rollcast.domain.banking.value_objects.statement_row import StatementRow
from rollcast.domain.banking.value_objects.transaction_direction import (
    TransactionDirection,
)
from rollcast.domain.shared.time import utc_now

UNCATEGORIZED = "Uncategorized"


class Transaction(BaseModel):
    """A settled money movement imported from a bank statement.

    ``amount`` is always a non-negative magnitude; the sign lives in
    ``direction``. Instances are immutable; categorization returns a copy.
    """

    kind: Literal["processed"] = "processed"
    id: str = Field(default_factory=lambda: str(uuid4()))
    hash: str = Field(..., min_length=1, description="Content-derived dedup key")
    date: date
    description: str = Field(..., min_length=1)
    amount: Decimal = Field(..., ge=0)
    direction: TransactionDirection
    category: str = UNCATEGORIZED
    subcategory: str | None = None
    running_balance_at_source: Decimal | None = Field(
        default=None,
        description="Balance reported by the bank after this transaction",
    )
    check_number: str | None = None
    source_row: StatementRow | None = None
    imported_at: datetime = Field(default_factory=utc_now)

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
    )

    @property
    def is_inflow(self) -> bool:
        return self.direction is TransactionDirection.INFLOW

    @property
    def signed_amount(self) -> Decimal:
        return self.amount if self.is_inflow else -self.amount

    def with_category(
        self,
        category: str,
        subcategory: str | None = None,
    ) -> "Transaction":
        return self.model_copy(
            update={"category": category, "subcategory": subcategory},
        )

    def __str__(self) -> str:
        sign = "+" if self.is_inflow else "-"
        return f"{self.date}: {sign}{self.amount} - {self.description[:50]}"
