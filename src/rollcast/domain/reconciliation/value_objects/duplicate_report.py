"""Results of duplicate detection passes."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from rollcast.domain.banking.value_objects import StatementRow, Transaction

Candidate = StatementRow | Transaction


@dataclass(frozen=True)
class MatchEvidence:
    """Why two records were judged to be the same event."""

    date_difference_hours: int
    amount_difference: Decimal
    description_similarity: float

    @property
    def reason(self) -> str:
        return (
            f"{self.date_difference_hours}h apart, "
            f"amount difference {self.amount_difference}, "
            f"description similarity {self.description_similarity:.2f}"
        )


@dataclass(frozen=True)
class RemovedDuplicate:
    """A dropped record together with the record it duplicates."""

    removed: Candidate
    kept: Candidate
    evidence: MatchEvidence

    @property
    def reason(self) -> str:
        return self.evidence.reason


@dataclass(frozen=True)
class DuplicateGroup:
    representative: Candidate
    duplicates: tuple[Candidate, ...]

    @property
    def size(self) -> int:
        return 1 + len(self.duplicates)


@dataclass
class FuzzyDedupResult:
    """Outcome of a fuzzy pass: survivors plus an audit trail of removals."""

    kept: list[Candidate]
    removed: list[RemovedDuplicate] = field(default_factory=list)
    groups: list[DuplicateGroup] = field(default_factory=list)

    @property
    def duplicate_count(self) -> int:
        return len(self.removed)

    @property
    def has_duplicates(self) -> bool:
        return bool(self.removed)


@dataclass
class ExactDedupResult:
    """Outcome of matching a batch against the stored hash index."""

    unique: list[Transaction]
    known_duplicates: list[Transaction] = field(default_factory=list)
    batch_duplicates: list[Transaction] = field(default_factory=list)

    @property
    def duplicate_count(self) -> int:
        return len(self.known_duplicates) + len(self.batch_duplicates)

    @property
    def duplicates(self) -> list[Transaction]:
        return [*self.known_duplicates, *self.batch_duplicates]
