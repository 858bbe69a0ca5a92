"""Application service for importing bank statement files.

The import runs in two phases:
1. preview: parse, validate, normalize, categorize and deduplicate against
   the stored hash index. Nothing is written.
2. commit: re-read the hash index and write the surviving transactions.

A preview that is never committed leaves no trace in the store.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from datetime import timedelta
from typing import TYPE_CHECKING

from rollcast.application.dtos import ImportPreview, ImportResult, RowError
from rollcast.domain.banking.services import (
    TransactionCategorizer,
    TransactionNormalizer,
    summarize_categories,
)
from rollcast.domain.banking.value_objects import StatementRow, Transaction
from rollcast.domain.reconciliation.services import (
    ExactDuplicateFilter,
    FuzzyDuplicateDetector,
)
from rollcast.domain.reconciliation.value_objects import SimilarityOptions
from rollcast.domain.shared.exceptions import PersistenceError, ValidationError
from rollcast.domain.shared.time import utc_now

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from rollcast.application.factories import RepositoryFactory
    from rollcast.application.ports import StatementReader
    from rollcast.domain.banking.repositories import TransactionRepository
    from rollcast_config import Settings


class TransactionImportService:
    """Turn an uploaded statement into deduplicated, categorized transactions."""

    def __init__(  # NOQA: PLR0913
        self,
        transaction_repository: TransactionRepository,
        statement_reader: StatementReader,
        normalizer: TransactionNormalizer | None = None,
        categorizer: TransactionCategorizer | None = None,
        exact_filter: ExactDuplicateFilter | None = None,
        fuzzy_detector: FuzzyDuplicateDetector | None = None,
        check_history: bool = True,
    ):
        self._transaction_repo = transaction_repository
        self._reader = statement_reader
        self._normalizer = normalizer or TransactionNormalizer()
        self._categorizer = categorizer or TransactionCategorizer()
        self._exact_filter = exact_filter or ExactDuplicateFilter()
        self._fuzzy_detector = fuzzy_detector or FuzzyDuplicateDetector()
        self._check_history = check_history

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        statement_reader: StatementReader,
        settings: Settings | None = None,
    ) -> TransactionImportService:
        if settings is None:
            return cls(
                transaction_repository=factory.transaction_repository(),
                statement_reader=statement_reader,
            )

        options = SimilarityOptions(
            max_date_difference_hours=settings.dedup_max_date_difference_hours,
            amount_variance=settings.dedup_amount_variance,
            description_similarity_threshold=settings.dedup_description_similarity,
        )
        return cls(
            transaction_repository=factory.transaction_repository(),
            statement_reader=statement_reader,
            fuzzy_detector=FuzzyDuplicateDetector(options),
            check_history=settings.dedup_check_history,
        )

    async def preview(self, content: str) -> ImportPreview:
        """Compute what importing ``content`` would write.

        Raises
        ------
        MissingColumnsError
            If the file lacks a required column; no row is processed then.
        PersistenceError
            If the stored hash index cannot be read.
        """
        rows = self._reader.read(content)
        known_hashes = await self._transaction_repo.get_known_hashes()

        preview = self.prepare(rows, known_hashes)
        if self._check_history and preview.transactions:
            history = await self._load_history(preview.transactions)
            self._drop_history_matches(preview, history)

        logger.info(
            "Import preview: %d rows, %d unique, %d duplicates, %d errors, %d skipped",
            preview.total_rows,
            preview.unique_count,
            preview.duplicate_count,
            preview.error_count,
            preview.skipped_rows,
        )
        return preview

    def prepare(
        self,
        rows: Sequence[StatementRow],
        known_hashes: set[str],
    ) -> ImportPreview:
        """Pure part of the preview: everything except reading the store."""
        imported_at = utc_now()
        normalized: list[Transaction] = []
        errors: list[RowError] = []
        skipped = 0

        for row in rows:
            if row.is_skippable:
                skipped += 1
                continue
            try:
                normalized.append(self._normalizer.normalize(row, imported_at))
            except ValidationError as e:
                errors.append(
                    RowError(
                        row_number=row.row_number,
                        message=e.message,
                        code=e.code.value,
                    ),
                )

        categorized = self._categorizer.categorize_all(normalized)
        exact = self._exact_filter.filter(categorized, known_hashes)
        fuzzy = self._fuzzy_detector.find_duplicates(exact.unique)

        transactions = [tx for tx in fuzzy.kept if isinstance(tx, Transaction)]
        return ImportPreview(
            total_rows=len(rows),
            transactions=transactions,
            exact_duplicates=exact.duplicates,
            fuzzy_duplicates=list(fuzzy.removed),
            errors=errors,
            skipped_rows=skipped,
            categories=summarize_categories(transactions),
        )

    async def commit(self, preview: ImportPreview) -> ImportResult:
        """Write the previewed transactions.

        The hash index is read again right before the write so a file
        imported twice, even concurrently previewed, lands only once.
        Persistence failures are returned as a failed result carrying the
        preview for a retry.
        """
        try:
            known_hashes = await self._transaction_repo.get_known_hashes()
            fresh = self._exact_filter.filter(preview.transactions, known_hashes)
            uploaded_ids = []
            if fresh.unique:
                uploaded_ids = await self._transaction_repo.save_batch(fresh.unique)
        except PersistenceError as e:
            logger.error("Import commit failed: %s", e.message)
            return ImportResult(
                success=False,
                total_processed=preview.total_rows,
                uploaded=0,
                duplicates=preview.duplicate_count,
                errors=list(preview.errors),
                error_message=e.message,
                preview=preview,
            )

        logger.info(
            "Imported %d transactions (%d duplicates skipped)",
            len(uploaded_ids),
            preview.duplicate_count + fresh.duplicate_count,
        )
        return ImportResult(
            success=True,
            total_processed=preview.total_rows,
            uploaded=len(uploaded_ids),
            duplicates=preview.duplicate_count + fresh.duplicate_count,
            errors=list(preview.errors),
            uploaded_ids=list(uploaded_ids),
        )

    async def import_statement(self, content: str) -> ImportResult:
        """Preview and commit in one step."""
        return await self.commit(await self.preview(content))

    async def _load_history(self, transactions: list[Transaction]) -> list[Transaction]:
        options = self._fuzzy_detector.options
        margin = timedelta(days=math.ceil(options.max_date_difference_hours / 24))
        start = min(tx.date for tx in transactions) - margin
        end = max(tx.date for tx in transactions) + margin
        return await self._transaction_repo.find_by_date_range(start, end)

    def _drop_history_matches(
        self,
        preview: ImportPreview,
        history: list[Transaction],
    ) -> None:
        if not history:
            return
        result = self._fuzzy_detector.remove_matching_history(
            preview.transactions,
            history,
        )
        if not result.has_duplicates:
            return
        preview.transactions = [tx for tx in result.kept if isinstance(tx, Transaction)]
        preview.fuzzy_duplicates.extend(result.removed)
        preview.categories = summarize_categories(preview.transactions)
