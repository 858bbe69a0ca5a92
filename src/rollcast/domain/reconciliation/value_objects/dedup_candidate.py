"""Records accepted by the fuzzy duplicate detector."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Annotated, Union

from pydantic import Field

from rollcast.domain.banking.exceptions import MalformedAmountError, MalformedDateError
from rollcast.domain.banking.services import parse_amount, parse_posting_date
from rollcast.domain.banking.value_objects import StatementRow, Transaction

# Tagged by ``kind``: "raw" for statement rows, "processed" for transactions.
DedupCandidate = Annotated[
    Union[StatementRow, Transaction],
    Field(discriminator="kind"),
]


@dataclass(frozen=True)
class ComparableRecord:
    """The three facts the detector compares, with a signed amount."""

    date: date
    amount: Decimal
    description: str


def to_comparable(candidate: StatementRow | Transaction) -> ComparableRecord | None:
    """Extract comparable facts, or None when a raw row cannot be parsed.

    Unparseable rows are never grouped; they surface as row errors in the
    import flow instead.
    """
    if candidate.kind == "processed":
        return ComparableRecord(
            date=candidate.date,
            amount=candidate.signed_amount,
            description=candidate.description,
        )

    if candidate.is_skippable or not candidate.amount:
        return None
    try:
        return ComparableRecord(
            date=parse_posting_date(candidate.posting_date),
            amount=parse_amount(candidate.amount),
            description=candidate.description,
        )
    except (MalformedDateError, MalformedAmountError):
        return None
