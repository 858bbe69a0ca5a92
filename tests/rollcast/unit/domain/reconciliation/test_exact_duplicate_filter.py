"""Tests for exact duplicate filtering against the hash index."""

from datetime import date

from rollcast.domain.banking.value_objects import TransactionDirection
from rollcast.domain.reconciliation.services import ExactDuplicateFilter
from tests.shared.fixtures import make_transaction

OUTFLOW = TransactionDirection.OUTFLOW


class TestExactDuplicateFilter:
    """Test cases for ExactDuplicateFilter.filter."""

    def test_known_hashes_are_dropped(self):
        stored = make_transaction(date(2024, 1, 8), "1500")
        new = make_transaction(date(2024, 1, 9), "200", description="STRIPE")

        result = ExactDuplicateFilter().filter([stored, new], {stored.hash})

        assert result.unique == [new]
        assert result.known_duplicates == [stored]
        assert result.batch_duplicates == []
        assert result.duplicate_count == 1

    def test_repeats_within_batch_keep_first(self):
        first = make_transaction(date(2024, 1, 8), "4.50", OUTFLOW)
        repeat = make_transaction(date(2024, 1, 8), "4.50", OUTFLOW)

        result = ExactDuplicateFilter().filter([first, repeat], set())

        assert result.unique == [first]
        assert result.batch_duplicates == [repeat]
        assert result.duplicates == [repeat]

    def test_index_is_not_modified(self):
        tx = make_transaction(date(2024, 1, 8), "1500")
        known: set[str] = set()

        ExactDuplicateFilter().filter([tx], known)

        assert known == set()

    def test_empty_batch(self):
        result = ExactDuplicateFilter().filter([], {"abc"})

        assert result.unique == []
        assert result.duplicate_count == 0
