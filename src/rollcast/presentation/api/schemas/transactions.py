"""Transaction schemas for API responses."""

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from rollcast.domain.banking.services import CategoryTotal
from rollcast.domain.banking.value_objects import Transaction, TransactionDirection


class TransactionResponse(BaseModel):
    """A stored transaction."""

    id: str
    hash: str = Field(description="Content-derived dedup key")
    date: date
    description: str
    amount: Decimal = Field(description="Non-negative magnitude")
    direction: TransactionDirection
    category: str
    subcategory: str | None = None
    running_balance_at_source: Decimal | None = None
    check_number: str | None = None
    imported_at: datetime

    @classmethod
    def from_domain(cls, tx: Transaction) -> "TransactionResponse":
        return cls(
            id=tx.id,
            hash=tx.hash,
            date=tx.date,
            description=tx.description,
            amount=tx.amount,
            direction=tx.direction,
            category=tx.category,
            subcategory=tx.subcategory,
            running_balance_at_source=tx.running_balance_at_source,
            check_number=tx.check_number,
            imported_at=tx.imported_at,
        )


class CategoryTotalResponse(BaseModel):
    category: str
    direction: TransactionDirection
    count: int
    total: Decimal

    @classmethod
    def from_domain(cls, total: CategoryTotal) -> "CategoryTotalResponse":
        return cls(
            category=total.category,
            direction=total.direction,
            count=total.count,
            total=total.total,
        )


class TransactionListResponse(BaseModel):
    """Response for listing transactions."""

    transactions: list[TransactionResponse]
    count: int = Field(description="Number of transactions in response")
    categories: list[CategoryTotalResponse] = Field(default_factory=list)


class SessionResetResponse(BaseModel):
    session_id: str
    deleted: int = Field(description="Number of removed transactions")
