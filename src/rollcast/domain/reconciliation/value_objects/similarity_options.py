"""Tolerances for fuzzy duplicate detection."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class SimilarityOptions(BaseModel):
    """Thresholds two records must all satisfy to count as the same event."""

    max_date_difference_hours: int = Field(default=72, ge=0)
    amount_variance: Decimal = Field(default=Decimal("0"), ge=0)
    description_similarity_threshold: float = Field(default=0.85, ge=0.0, le=1.0)

    model_config = ConfigDict(frozen=True)
