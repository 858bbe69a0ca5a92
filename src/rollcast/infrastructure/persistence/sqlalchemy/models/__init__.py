"""SQLAlchemy models for persistence layer."""

from rollcast.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from rollcast.infrastructure.persistence.sqlalchemy.models.document_model import (
    DocumentModel,
)

__all__ = [
    "Base",
    "DocumentModel",
    "TimestampMixin",
]
