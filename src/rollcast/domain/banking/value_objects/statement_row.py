"""Raw bank statement row value object."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class StatementRow(BaseModel):
    """One record exactly as it appeared in an uploaded statement export.

    All fields are kept as text. Parsing happens in the normalizer so the
    original values survive for audit even when a row turns out malformed.
    """

    kind: Literal["raw"] = "raw"
    row_number: int | None = Field(
        default=None,
        description="1-based data row number in the source file",
    )
    details: str | None = Field(default=None, description="Direction marker")
    posting_date: str | None = None
    description: str | None = None
    amount: str | None = None
    type: str | None = None
    balance: str | None = None
    check_number: str | None = None

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
    )

    @property
    def is_skippable(self) -> bool:
        """Rows without a date or description carry no usable event."""
        return not self.posting_date or not self.description
