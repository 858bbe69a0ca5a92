"""Tests for the documents table definition."""

from sqlalchemy import JSON
from sqlalchemy.dialects import postgresql, sqlite

from rollcast.infrastructure.persistence.sqlalchemy.models import DocumentModel

TABLE = DocumentModel.__table__


class TestDocumentModel:
    def test_primary_key_is_namespace_collection_id(self):
        assert [column.name for column in TABLE.primary_key.columns] == [
            "namespace",
            "collection",
            "id",
        ]

    def test_body_is_jsonb_on_postgresql(self):
        body_type = TABLE.c.body.type

        assert isinstance(body_type, JSON)
        assert body_type.compile(dialect=postgresql.dialect()) == "JSONB"
        assert body_type.compile(dialect=sqlite.dialect()) == "JSON"

    def test_timestamps_are_present(self):
        assert {"created_at", "updated_at"} <= set(TABLE.c.keys())
