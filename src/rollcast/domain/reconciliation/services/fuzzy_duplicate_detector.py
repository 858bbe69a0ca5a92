"""Fuzzy duplicate detection by date, amount and description proximity."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from rollcast.domain.reconciliation.services.description_similarity import (
    description_similarity,
)
from rollcast.domain.reconciliation.value_objects import (
    Candidate,
    ComparableRecord,
    DedupCandidate,
    DuplicateGroup,
    FuzzyDedupResult,
    MatchEvidence,
    RemovedDuplicate,
    SimilarityOptions,
    to_comparable,
)

logger = logging.getLogger(__name__)


class FuzzyDuplicateDetector:
    """Group near-identical records and keep one representative per group.

    Two records match only if all three tolerances hold: the date gap, the
    amount difference and the description similarity. Grouping is anchored
    on the earliest ungrouped record in input order, so for a given order
    the groups and the removal counts are always the same.
    """

    def __init__(self, options: SimilarityOptions | None = None):
        self._options = options or SimilarityOptions()

    @property
    def options(self) -> SimilarityOptions:
        return self._options

    def compare(self, first: Candidate, second: Candidate) -> MatchEvidence | None:
        """Return match evidence if both records describe the same event."""
        a = to_comparable(first)
        b = to_comparable(second)
        if a is None or b is None:
            return None
        return self._compare_records(a, b)

    def find_duplicates(self, candidates: Sequence[DedupCandidate]) -> FuzzyDedupResult:
        """Group duplicates within one batch.

        Returns the input list itself as ``kept`` when nothing matched.
        """
        records = [to_comparable(candidate) for candidate in candidates]
        grouped: set[int] = set()
        removed_indices: set[int] = set()
        groups: list[DuplicateGroup] = []
        removed: list[RemovedDuplicate] = []

        for i, anchor in enumerate(records):
            if i in grouped or anchor is None:
                continue
            members: list[int] = []
            for j in range(i + 1, len(records)):
                other = records[j]
                if j in grouped or other is None:
                    continue
                evidence = self._compare_records(anchor, other)
                if evidence is None:
                    continue
                members.append(j)
                removed_indices.add(j)
                removed.append(
                    RemovedDuplicate(
                        removed=candidates[j],
                        kept=candidates[i],
                        evidence=evidence,
                    ),
                )

            if members:
                grouped.add(i)
                grouped.update(members)
                groups.append(
                    DuplicateGroup(
                        representative=candidates[i],
                        duplicates=tuple(candidates[j] for j in members),
                    ),
                )

        if not removed:
            return FuzzyDedupResult(kept=candidates)  # type: ignore[arg-type]

        kept = [
            candidate
            for index, candidate in enumerate(candidates)
            if index not in removed_indices
        ]
        logger.info(
            "Fuzzy dedup: %d groups, removed %d of %d records",
            len(groups),
            len(removed),
            len(candidates),
        )
        return FuzzyDedupResult(kept=kept, removed=removed, groups=groups)

    def remove_matching_history(
        self,
        candidates: Sequence[DedupCandidate],
        history: Sequence[Candidate],
    ) -> FuzzyDedupResult:
        """Drop batch records that match an already stored record.

        Each removal names the first matching history record as the kept
        counterpart. History records themselves are never removed.
        """
        history_records = [
            (record, comparable)
            for record in history
            if (comparable := to_comparable(record)) is not None
        ]
        kept: list[Candidate] = []
        removed: list[RemovedDuplicate] = []

        for candidate in candidates:
            match = self._first_history_match(candidate, history_records)
            if match is None:
                kept.append(candidate)
            else:
                removed.append(
                    RemovedDuplicate(
                        removed=candidate,
                        kept=match[0],
                        evidence=match[1],
                    ),
                )

        if not removed:
            return FuzzyDedupResult(kept=candidates)  # type: ignore[arg-type]

        logger.info(
            "Fuzzy dedup against history: removed %d of %d records",
            len(removed),
            len(candidates),
        )
        return FuzzyDedupResult(kept=kept, removed=removed)

    def _first_history_match(
        self,
        candidate: Candidate,
        history_records: list[tuple[Candidate, ComparableRecord]],
    ) -> tuple[Candidate, MatchEvidence] | None:
        comparable = to_comparable(candidate)
        if comparable is None:
            return None
        for record, other in history_records:
            evidence = self._compare_records(comparable, other)
            if evidence is not None:
                return record, evidence
        return None

    def _compare_records(
        self,
        a: ComparableRecord,
        b: ComparableRecord,
    ) -> MatchEvidence | None:
        options = self._options

        hours = abs((a.date - b.date).days) * 24
        if hours > options.max_date_difference_hours:
            return None

        amount_difference = abs(a.amount - b.amount)
        if amount_difference > options.amount_variance:
            return None

        similarity = description_similarity(a.description, b.description)
        if similarity < options.description_similarity_threshold:
            return None

        return MatchEvidence(
            date_difference_hours=hours,
            amount_difference=amount_difference,
            description_similarity=similarity,
        )
