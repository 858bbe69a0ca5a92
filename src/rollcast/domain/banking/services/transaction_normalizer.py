"""Turn raw statement rows into canonical transactions."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from uuid import uuid4

from rollcast.domain.banking.exceptions import (
    MalformedAmountError,
    MalformedDateError,
    MissingFieldError,
)
from rollcast.domain.banking.services.transaction_hash import (
    compute_transaction_hash,
)
from rollcast.domain.banking.value_objects import (
    StatementRow,
    Transaction,
    TransactionDirection,
)
from rollcast.domain.shared.time import utc_now


# Tried in order; month-first formats win for ambiguous dates such as 03/04/2024.
# %m and %d also accept single digits, so 1/5/2024 is covered by the first entry.
DATE_FORMATS: tuple[str, ...] = (
    "%m/%d/%Y",
    "%m/%d/%y",
    "%Y-%m-%d",
    "%Y-%m-%dT%H:%M:%S",
    "%d/%m/%Y",
)

INFLOW_MARKERS = frozenset({"CREDIT", "DSLIP"})
OUTFLOW_MARKERS = frozenset({"DEBIT", "CHECK"})


def parse_posting_date(value: str, formats: Sequence[str] = DATE_FORMATS) -> date:
    """Parse a posting date string using the first matching format.

    Raises
    ------
    MalformedDateError
        If no format matches.
    """
    text = value.strip()
    for fmt in formats:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    raise MalformedDateError(value)


def parse_amount(value: str, field: str = "Amount") -> Decimal:
    """Parse a bank amount such as ``-1,234.50``, ``$75`` or ``(12.00)``."""
    text = value.strip().replace(",", "").replace("$", "")
    negative = text.startswith("(") and text.endswith(")")
    if negative:
        text = text[1:-1]
    try:
        amount = Decimal(text)
    except InvalidOperation as e:
        raise MalformedAmountError(value, field) from e
    if not amount.is_finite():
        raise MalformedAmountError(value, field)
    return -amount if negative else amount


def infer_direction(marker: str | None, signed_amount: Decimal) -> TransactionDirection:
    """Direction from the statement marker, else from the amount sign."""
    normalized = (marker or "").strip().upper()
    if normalized in INFLOW_MARKERS:
        return TransactionDirection.INFLOW
    if normalized in OUTFLOW_MARKERS:
        return TransactionDirection.OUTFLOW
    if signed_amount > 0:
        return TransactionDirection.INFLOW
    return TransactionDirection.OUTFLOW


class TransactionNormalizer:
    """Pure conversion of a ``StatementRow`` into a ``Transaction``.

    The result carries an absolute amount, an inferred direction and the
    identity hash. It is left uncategorized.
    """

    def __init__(
        self,
        date_formats: Sequence[str] = DATE_FORMATS,
        id_factory: Callable[[], str] | None = None,
    ):
        self._date_formats = tuple(date_formats)
        self._id_factory = id_factory or (lambda: str(uuid4()))

    def normalize(
        self,
        row: StatementRow,
        imported_at: datetime | None = None,
    ) -> Transaction:
        """Normalize one row.

        Raises
        ------
        MissingFieldError
            If the date, description or amount is blank.
        MalformedDateError
            If the posting date matches no accepted format.
        MalformedAmountError
            If the amount or balance is not numeric.
        """
        if not row.posting_date:
            raise MissingFieldError("Posting Date")
        if not row.description:
            raise MissingFieldError("Description")
        if not row.amount:
            raise MissingFieldError("Amount")

        posting_date = parse_posting_date(row.posting_date, self._date_formats)
        signed_amount = parse_amount(row.amount)
        balance = parse_amount(row.balance, "Balance") if row.balance else None
        direction = infer_direction(row.details, signed_amount)
        # a marker can disagree with the sign; the hash follows the direction
        magnitude = abs(signed_amount)
        hashed_amount = (
            magnitude if direction is TransactionDirection.INFLOW else -magnitude
        )

        return Transaction(
            id=self._id_factory(),
            hash=compute_transaction_hash(posting_date, hashed_amount, row.description),
            date=posting_date,
            description=row.description,
            amount=magnitude,
            direction=direction,
            running_balance_at_source=balance,
            check_number=row.check_number or None,
            source_row=row,
            imported_at=imported_at or utc_now(),
        )
