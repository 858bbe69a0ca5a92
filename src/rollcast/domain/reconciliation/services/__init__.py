"""Domain services for duplicate reconciliation."""

from rollcast.domain.reconciliation.services.description_similarity import (
    description_similarity,
)
from rollcast.domain.reconciliation.services.exact_duplicate_filter import (
    ExactDuplicateFilter,
)
from rollcast.domain.reconciliation.services.fuzzy_duplicate_detector import (
    FuzzyDuplicateDetector,
)

__all__ = [
    "ExactDuplicateFilter",
    "FuzzyDuplicateDetector",
    "description_similarity",
]
