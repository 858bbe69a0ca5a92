"""Ports (interfaces) the application layer depends on."""

from rollcast.application.ports.document_store import (
    Document,
    DocumentListener,
    DocumentStore,
    RecordFilter,
    Unsubscribe,
)
from rollcast.application.ports.receivables_feed import ReceivablesFeed
from rollcast.application.ports.session_context import (
    DEFAULT_SESSION_ID,
    SessionContext,
)
from rollcast.application.ports.statement_reader import StatementReader

__all__ = [
    "DEFAULT_SESSION_ID",
    "Document",
    "DocumentListener",
    "DocumentStore",
    "ReceivablesFeed",
    "RecordFilter",
    "SessionContext",
    "StatementReader",
    "Unsubscribe",
]
