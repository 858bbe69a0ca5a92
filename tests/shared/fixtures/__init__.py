"""Shared pytest fixtures and builders for all test packages."""

from tests.shared.fixtures.builders import (
    ANCHOR,
    STATEMENT_HEADER,
    TODAY,
    make_estimate,
    make_invoice,
    make_row,
    make_transaction,
    statement_csv,
)
from tests.shared.fixtures.memory_store import InMemoryDocumentStore

__all__ = [
    "ANCHOR",
    "STATEMENT_HEADER",
    "TODAY",
    "InMemoryDocumentStore",
    "make_estimate",
    "make_invoice",
    "make_row",
    "make_transaction",
    "statement_csv",
]
