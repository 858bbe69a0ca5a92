"""Schemas for statement import preview and commit."""

from pydantic import BaseModel, Field

from rollcast.application.dtos import ImportPreview, ImportResult, RowError
from rollcast.domain.reconciliation.value_objects import RemovedDuplicate
from rollcast.presentation.api.schemas.transactions import (
    CategoryTotalResponse,
    TransactionResponse,
)


class RowErrorResponse(BaseModel):
    row_number: int | None = Field(description="1-based data row number")
    message: str
    code: str

    @classmethod
    def from_dto(cls, error: RowError) -> "RowErrorResponse":
        return cls(row_number=error.row_number, message=error.message, code=error.code)


class FuzzyDuplicateResponse(BaseModel):
    """A record dropped as a near-duplicate of an earlier one."""

    removed_description: str | None
    kept_description: str | None
    date_difference_hours: int
    amount_difference: str
    description_similarity: float
    reason: str

    @classmethod
    def from_domain(cls, duplicate: RemovedDuplicate) -> "FuzzyDuplicateResponse":
        evidence = duplicate.evidence
        return cls(
            removed_description=duplicate.removed.description,
            kept_description=duplicate.kept.description,
            date_difference_hours=evidence.date_difference_hours,
            amount_difference=str(evidence.amount_difference),
            description_similarity=round(evidence.description_similarity, 4),
            reason=duplicate.reason,
        )


class ImportSummaryResponse(BaseModel):
    total: int
    unique: int
    duplicate: int
    errored: int
    skipped: int


class ImportPreviewResponse(BaseModel):
    """What an import would write, computed without storing anything."""

    summary: ImportSummaryResponse
    transactions: list[TransactionResponse]
    exact_duplicates: list[TransactionResponse]
    fuzzy_duplicates: list[FuzzyDuplicateResponse]
    errors: list[RowErrorResponse]
    categories: list[CategoryTotalResponse]

    @classmethod
    def from_dto(cls, preview: ImportPreview) -> "ImportPreviewResponse":
        return cls(
            summary=ImportSummaryResponse(**preview.summary()),
            transactions=[
                TransactionResponse.from_domain(tx) for tx in preview.transactions
            ],
            exact_duplicates=[
                TransactionResponse.from_domain(tx) for tx in preview.exact_duplicates
            ],
            fuzzy_duplicates=[
                FuzzyDuplicateResponse.from_domain(dup)
                for dup in preview.fuzzy_duplicates
            ],
            errors=[RowErrorResponse.from_dto(error) for error in preview.errors],
            categories=[
                CategoryTotalResponse.from_domain(total)
                for total in preview.categories
            ],
        )


class ImportResultResponse(BaseModel):
    """Outcome of an import commit."""

    success: bool
    total_processed: int
    uploaded: int
    duplicates: int
    errors: list[RowErrorResponse]
    uploaded_ids: list[str]
    error_message: str | None = None

    @classmethod
    def from_dto(cls, result: ImportResult) -> "ImportResultResponse":
        return cls(
            success=result.success,
            total_processed=result.total_processed,
            uploaded=result.uploaded,
            duplicates=result.duplicates,
            errors=[RowErrorResponse.from_dto(error) for error in result.errors],
            uploaded_ids=list(result.uploaded_ids),
            error_message=result.error_message,
        )
