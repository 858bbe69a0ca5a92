"""Conversion between domain models and stored documents.

Absent optional values are never written: a ``None`` field is left out of
the document and restored as ``None`` when read back.
"""

from typing import TypeVar

from pydantic import BaseModel

from rollcast.application.ports import Document

ModelT = TypeVar("ModelT", bound=BaseModel)


def to_document(model: BaseModel) -> Document:
    """Dump a domain model to a JSON-compatible document without null fields."""
    return model.model_dump(mode="json", exclude_none=True)


def from_document(model_type: type[ModelT], document: Document) -> ModelT:
    """Validate a stored document back into ``model_type``."""
    return model_type.model_validate(document)


def from_documents(model_type: type[ModelT], documents: list[Document]) -> list[ModelT]:
    return [from_document(model_type, document) for document in documents]
