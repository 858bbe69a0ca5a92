"""Builders for domain objects used across the test suite.

Defaults describe a small consulting business: client payments in,
payroll and vendor bills out. Dates are anchored on Wednesday 2024-01-17
so week 0 runs from Monday 2024-01-15 through Sunday 2024-01-21.
"""

from datetime import date
from decimal import Decimal

from rollcast.domain.banking.services import compute_transaction_hash
from rollcast.domain.banking.value_objects import (
    StatementRow,
    Transaction,
    TransactionDirection,
)
from rollcast.domain.forecasting.value_objects import Estimate, InvoiceRecord

ANCHOR = date(2024, 1, 17)
TODAY = ANCHOR

STATEMENT_HEADER = (
    "Details,Posting Date,Description,Amount,Type,Balance,Check or Slip #"
)


def make_row(  # NOQA: PLR0913
    posting_date: str | None = "01/15/2024",
    description: str | None = "ACME CORP PAYMENT #1234",
    amount: str | None = "1500.00",
    details: str | None = "CREDIT",
    balance: str | None = "10000.00",
    row_number: int = 1,
    **fields,
) -> StatementRow:
    return StatementRow(
        row_number=row_number,
        details=details,
        posting_date=posting_date,
        description=description,
        amount=amount,
        balance=balance,
        **fields,
    )


def make_transaction(
    day: date,
    amount: str | Decimal,
    direction: TransactionDirection = TransactionDirection.INFLOW,
    description: str = "ACME CORP PAYMENT",
    **fields,
) -> Transaction:
    amount = Decimal(amount)
    signed = amount if direction is TransactionDirection.INFLOW else -amount
    return Transaction(
        hash=compute_transaction_hash(day, signed, description),
        date=day,
        description=description,
        amount=amount,
        direction=direction,
        **fields,
    )


def make_estimate(
    week_start: date,
    amount: str | Decimal,
    direction: TransactionDirection = TransactionDirection.OUTFLOW,
    scenario: str = "base",
    **fields,
) -> Estimate:
    fields.setdefault("category", "Payroll")
    fields.setdefault("description", "Payroll run")
    return Estimate(
        week_start=week_start,
        amount=Decimal(amount),
        direction=direction,
        scenario=scenario,
        **fields,
    )


def make_invoice(
    invoice_number: str,
    due_date: date,
    amount_due: str | Decimal,
    client_name: str = "ACME Corp",
    status: str = "open",
) -> InvoiceRecord:
    return InvoiceRecord(
        invoice_number=invoice_number,
        client_name=client_name,
        due_date=due_date,
        amount_due=Decimal(amount_due),
        status=status,
    )


def statement_csv(*lines: str) -> str:
    """A statement export with the standard header and ``lines`` as rows."""
    return "\n".join([STATEMENT_HEADER, *lines]) + "\n"
