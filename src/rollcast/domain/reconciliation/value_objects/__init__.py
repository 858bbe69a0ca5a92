"""Value objects for the reconciliation domain."""

from rollcast.domain.reconciliation.value_objects.dedup_candidate import (
    ComparableRecord,
    DedupCandidate,
    to_comparable,
)
from rollcast.domain.reconciliation.value_objects.duplicate_report import (
    Candidate,
    DuplicateGroup,
    ExactDedupResult,
    FuzzyDedupResult,
    MatchEvidence,
    RemovedDuplicate,
)
from rollcast.domain.reconciliation.value_objects.similarity_options import (
    SimilarityOptions,
)

__all__ = [
    "Candidate",
    "ComparableRecord",
    "DedupCandidate",
    "DuplicateGroup",
    "ExactDedupResult",
    "FuzzyDedupResult",
    "MatchEvidence",
    "RemovedDuplicate",
    "SimilarityOptions",
    "to_comparable",
]
