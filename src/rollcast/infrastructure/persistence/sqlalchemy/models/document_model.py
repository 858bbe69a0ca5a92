"""SQLAlchemy model for stored JSON documents."""

from typing import Any

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column

from rollcast.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class DocumentModel(Base, TimestampMixin):
    """One document of one collection, scoped to a session namespace.

    The body is the full JSON document including its ``id``; filtering on
    body fields happens after loading the collection.
    """

    __tablename__ = "documents"

    namespace: Mapped[str] = mapped_column(String(128), primary_key=True)
    collection: Mapped[str] = mapped_column(String(64), primary_key=True)
    document_id: Mapped[str] = mapped_column("id", String(64), primary_key=True)
    body: Mapped[dict[str, Any]] = mapped_column(nullable=False)

    __table_args__ = (
        Index("ix_documents_namespace_collection", "namespace", "collection"),
    )

    def __repr__(self) -> str:
        return (
            f"<DocumentModel({self.namespace}/{self.collection}/"
            f"{self.document_id})>"
        )
