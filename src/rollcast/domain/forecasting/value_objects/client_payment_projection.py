"""Expected client payment derived from an outstanding invoice."""

from datetime import date
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ProjectionConfidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class CollectionStatus(str, Enum):
    CURRENT = "current"
    OVERDUE = "overdue"
    COLLECTIONS = "collections"


class ClientPaymentProjection(BaseModel):
    """A projected inflow placed in the week of its estimated collection.

    ``week_number`` is relative to the timeline anchor used when the
    projection was built or last adjusted, and always agrees with
    ``estimated_collection_date``.
    """

    invoice_number: str
    client_name: str
    expected_amount: Decimal = Field(..., ge=0)
    original_amount: Decimal = Field(..., ge=0)
    original_due_date: date
    estimated_collection_date: date
    confidence: ProjectionConfidence
    collection_status: CollectionStatus
    days_until_due: int
    days_overdue: int = Field(..., ge=0)
    week_number: int

    model_config = ConfigDict(frozen=True)
