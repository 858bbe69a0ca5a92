"""Invoice record consumed from the receivables feed."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

UNCOLLECTIBLE_STATUSES = frozenset({"paid", "voided", "void", "draft", "written_off"})


class InvoiceRecord(BaseModel):
    """An outstanding invoice as reported by the invoicing system."""

    invoice_number: str = Field(..., min_length=1)
    client_name: str = Field(..., min_length=1)
    due_date: date
    amount_due: Decimal
    status: str = "open"

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
    )

    @field_validator("status")
    @classmethod
    def _normalize_status(cls, value: str) -> str:
        return value.lower()

    @property
    def is_collectible(self) -> bool:
        return self.amount_due > 0 and self.status not in UNCOLLECTIBLE_STATUSES
