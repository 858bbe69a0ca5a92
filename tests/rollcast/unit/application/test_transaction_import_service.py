"""
Unit tests for TransactionImportService.

The service runs against the in-memory document store so that the
preview/commit cycle and the hash index behave like a real session.
"""

from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from rollcast.application.services import TransactionImportService
from rollcast.domain.banking.exceptions import MissingColumnsError
from rollcast.domain.banking.value_objects import TransactionDirection
from rollcast.domain.shared.exceptions import ErrorCode, PersistenceError
from rollcast.infrastructure.persistence.documents import (
    DocumentRepositoryFactory,
    DocumentTransactionRepository,
)
from rollcast.infrastructure.statements import CsvStatementReader
from rollcast_config import Settings
from tests.shared.fixtures import InMemoryDocumentStore, make_row, statement_csv

STATEMENT = statement_csv(
    "CREDIT,01/08/2024,ACME CORP PAYMENT #1234,1500.00,ACH_CREDIT,10000.00,",
    "DEBIT,01/09/2024,RIPPLING PAYROLL,-8000.00,ACH_DEBIT,2000.00,",
    "CREDIT,01/11/2024,ACME CORP PAYMENT #1235,1500.00,ACH_CREDIT,3500.00,",
    "CREDIT,13/45/2024,BROKEN ROW,1.00,ACH_CREDIT,3501.00,",
    "DEBIT,01/12/2024,,-5.00,ACH_DEBIT,3496.00,",
)


@pytest.fixture
def store():
    return InMemoryDocumentStore()


@pytest.fixture
def transaction_repo(store):
    return DocumentTransactionRepository(store)


@pytest.fixture
def service(transaction_repo):
    return TransactionImportService(
        transaction_repository=transaction_repo,
        statement_reader=CsvStatementReader(),
    )


class TestPreview:
    """Test cases for TransactionImportService.preview."""

    @pytest.mark.asyncio
    async def test_summary(self, service):
        preview = await service.preview(STATEMENT)

        assert preview.summary() == {
            "total": 5,
            "unique": 2,
            "duplicate": 1,
            "errored": 1,
            "skipped": 1,
        }

    @pytest.mark.asyncio
    async def test_rows_are_normalized_and_categorized(self, service):
        preview = await service.preview(STATEMENT)

        acme, payroll = preview.transactions
        assert acme.description == "ACME CORP PAYMENT #1234"
        assert acme.direction is TransactionDirection.INFLOW
        assert acme.category == "Other Income"
        assert payroll.amount == Decimal("8000.00")
        assert payroll.direction is TransactionDirection.OUTFLOW
        assert payroll.category == "Payroll"
        assert payroll.subcategory == "Rippling"
        assert payroll.source_row.row_number == 2

    @pytest.mark.asyncio
    async def test_fuzzy_duplicate_is_reported(self, service):
        preview = await service.preview(STATEMENT)

        (removed,) = preview.fuzzy_duplicates
        assert removed.removed.description == "ACME CORP PAYMENT #1235"
        assert removed.kept.description == "ACME CORP PAYMENT #1234"
        assert removed.evidence.date_difference_hours == 72

    @pytest.mark.asyncio
    async def test_row_errors_are_kept(self, service):
        preview = await service.preview(STATEMENT)

        (error,) = preview.errors
        assert error.row_number == 4
        assert error.code == ErrorCode.INVALID_DATE.value
        assert "13/45/2024" in error.message

    @pytest.mark.asyncio
    async def test_preview_writes_nothing(self, service, store):
        await service.preview(STATEMENT)

        assert store.write_count == 0

    @pytest.mark.asyncio
    async def test_missing_columns_abort(self, service):
        with pytest.raises(MissingColumnsError):
            await service.preview("Details,Description\nCREDIT,ACME\n")

    @pytest.mark.asyncio
    async def test_category_summary(self, service):
        preview = await service.preview(STATEMENT)

        assert [(c.category, c.count) for c in preview.categories] == [
            ("Payroll", 1),
            ("Other Income", 1),
        ]


class TestPrepare:
    def test_known_hash_is_an_exact_duplicate(self, service):
        rows = [make_row()]
        first = service.prepare(rows, set())

        second = service.prepare(rows, {first.transactions[0].hash})

        assert second.transactions == []
        assert second.exact_duplicates[0].hash == first.transactions[0].hash

    def test_repeated_row_in_one_file(self, service):
        rows = [make_row(row_number=1), make_row(row_number=2)]

        preview = service.prepare(rows, set())

        assert preview.unique_count == 1
        assert preview.duplicate_count == 1

    def test_transfer_out_and_back_are_both_kept(self, service):
        rows = [
            make_row(row_number=1, description="ONLINE TRANSFER", amount="500.00"),
            make_row(
                row_number=2,
                description="ONLINE TRANSFER",
                amount="-500.00",
                details="DEBIT",
            ),
        ]

        preview = service.prepare(rows, set())

        assert len(preview.transactions) == 2
        assert preview.duplicate_count == 0


class TestCommit:
    """Test cases for TransactionImportService.commit."""

    @pytest.mark.asyncio
    async def test_import_writes_unique_transactions(self, service, transaction_repo):
        result = await service.import_statement(STATEMENT)

        assert result.success
        assert result.uploaded == 2
        assert result.duplicates == 1
        assert result.total_processed == 5
        assert len(result.errors) == 1
        stored = await transaction_repo.find_all()
        assert [tx.id for tx in stored] == result.uploaded_ids

    @pytest.mark.asyncio
    async def test_reimport_writes_nothing(self, service, transaction_repo):
        await service.import_statement(STATEMENT)

        result = await service.import_statement(STATEMENT)

        assert result.success
        assert result.uploaded == 0
        assert result.duplicates == 3
        assert len(await transaction_repo.find_all()) == 2

    @pytest.mark.asyncio
    async def test_reimport_without_history_check(self, transaction_repo):
        service = TransactionImportService(
            transaction_repository=transaction_repo,
            statement_reader=CsvStatementReader(),
            check_history=False,
        )
        await service.import_statement(STATEMENT)

        result = await service.import_statement(STATEMENT)

        # #1235 is no longer compared with the stored #1234
        assert result.uploaded == 1

    @pytest.mark.asyncio
    async def test_commit_rechecks_hash_index(self, service, transaction_repo):
        """Two previews of the same file commit only once."""
        first = await service.preview(STATEMENT)
        second = await service.preview(STATEMENT)

        await service.commit(first)
        result = await service.commit(second)

        assert result.uploaded == 0
        assert result.duplicates == 3
        assert len(await transaction_repo.find_all()) == 2

    @pytest.mark.asyncio
    async def test_failed_write_can_be_retried(self, service, store, transaction_repo):
        preview = await service.preview(STATEMENT)
        store.fail_writes = True

        failed = await service.commit(preview)

        assert not failed.success
        assert failed.can_retry
        assert failed.uploaded == 0
        assert failed.error_message == "Document store is unavailable"
        assert await transaction_repo.find_all() == []

        store.fail_writes = False
        retried = await service.commit(failed.preview)

        assert retried.success
        assert retried.uploaded == 2

    @pytest.mark.asyncio
    async def test_unreadable_index_fails_commit(self, service):
        preview = service.prepare([make_row()], set())
        service._transaction_repo = AsyncMock()
        service._transaction_repo.get_known_hashes.side_effect = PersistenceError()

        result = await service.commit(preview)

        assert not result.success
        service._transaction_repo.save_batch.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_result_to_dict(self, service):
        result = await service.import_statement(STATEMENT)

        payload = result.to_dict()

        assert payload["uploaded"] == 2
        assert payload["errors"][0]["code"] == "INVALID_DATE"


class TestFromFactory:
    def test_settings_reach_the_fuzzy_detector(self, store):
        factory = DocumentRepositoryFactory(store, session=None)
        settings = Settings(
            dedup_amount_variance=Decimal("5"),
            dedup_check_history=False,
        )

        service = TransactionImportService.from_factory(
            factory,
            CsvStatementReader(),
            settings,
        )

        assert service._fuzzy_detector.options.amount_variance == Decimal("5")
        assert service._check_history is False
