"""DTOs for statement import preview and commit."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from rollcast.domain.banking.services import CategoryTotal
from rollcast.domain.banking.value_objects import Transaction
from rollcast.domain.reconciliation.value_objects import RemovedDuplicate


@dataclass(frozen=True)
class RowError:
    """A statement row that could not be turned into a transaction."""

    row_number: int | None
    message: str
    code: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "row_number": self.row_number,
            "message": self.message,
            "code": self.code,
        }


@dataclass
class ImportPreview:
    """Everything an import would write, computed without touching the store.

    ``transactions`` is what ``commit`` writes. Exact and fuzzy duplicates
    are kept for review; row errors are never dropped.
    """

    total_rows: int
    transactions: list[Transaction]
    exact_duplicates: list[Transaction] = field(default_factory=list)
    fuzzy_duplicates: list[RemovedDuplicate] = field(default_factory=list)
    errors: list[RowError] = field(default_factory=list)
    skipped_rows: int = 0
    categories: list[CategoryTotal] = field(default_factory=list)

    @property
    def unique_count(self) -> int:
        return len(self.transactions)

    @property
    def duplicate_count(self) -> int:
        return len(self.exact_duplicates) + len(self.fuzzy_duplicates)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def summary(self) -> dict[str, int]:
        return {
            "total": self.total_rows,
            "unique": self.unique_count,
            "duplicate": self.duplicate_count,
            "errored": self.error_count,
            "skipped": self.skipped_rows,
        }


@dataclass(frozen=True)
class ImportResult:
    """Outcome of committing an import preview.

    On a failed write ``preview`` still holds the computed transactions, so
    the caller can retry ``commit`` without parsing the file again.
    """

    success: bool
    total_processed: int
    uploaded: int
    duplicates: int
    errors: list[RowError] = field(default_factory=list)
    uploaded_ids: list[str] = field(default_factory=list)
    error_message: str | None = None
    preview: ImportPreview | None = None

    @property
    def can_retry(self) -> bool:
        return not self.success and self.preview is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "total_processed": self.total_processed,
            "uploaded": self.uploaded,
            "duplicates": self.duplicates,
            "errors": [error.to_dict() for error in self.errors],
            "uploaded_ids": list(self.uploaded_ids),
            "error_message": self.error_message,
        }
