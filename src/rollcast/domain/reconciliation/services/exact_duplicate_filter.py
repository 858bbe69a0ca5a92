"""Exact duplicate filtering against the stored hash index."""

import logging
from collections.abc import Iterable, Set

from rollcast.domain.banking.value_objects import Transaction
from rollcast.domain.reconciliation.value_objects import ExactDedupResult

logger = logging.getLogger(__name__)


class ExactDuplicateFilter:
    """Drop transactions whose identity hash was already seen.

    A hash counts as seen when it is in the stored index or when an earlier
    transaction of the same batch carried it. The filter only reads the
    index; it never adds to the store.
    """

    def filter(
        self,
        transactions: Iterable[Transaction],
        known_hashes: Set[str],
    ) -> ExactDedupResult:
        result = ExactDedupResult(unique=[])
        batch_hashes: set[str] = set()

        for tx in transactions:
            if tx.hash in known_hashes:
                result.known_duplicates.append(tx)
            elif tx.hash in batch_hashes:
                result.batch_duplicates.append(tx)
            else:
                batch_hashes.add(tx.hash)
                result.unique.append(tx)

        if result.duplicate_count:
            logger.info(
                "Exact dedup: %d unique, %d already stored, %d repeated in batch",
                len(result.unique),
                len(result.known_duplicates),
                len(result.batch_duplicates),
            )
        return result
