"""FastAPI dependency injection for the rollcast API.

Provides dependencies for:
- Database engine and session maker (shared per process)
- Session scoping from the ``X-Session-Id`` header
- Session-scoped document store and repository factory
- Statement reader and settings
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from rollcast.application.ports import (
    DEFAULT_SESSION_ID,
    DocumentStore,
    SessionContext,
)
from rollcast.infrastructure.persistence.documents import DocumentRepositoryFactory
from rollcast.infrastructure.persistence.sqlalchemy.document_store import (
    SQLAlchemyDocumentStore,
)
from rollcast.infrastructure.persistence.sqlalchemy.subscription_hub import (
    SubscriptionHub,
)
from rollcast.infrastructure.statements import CsvStatementReader
from rollcast_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

SESSION_ID_PATTERN = r"^[A-Za-z0-9_.\-]{1,128}$"


@lru_cache()
def get_database_url() -> str:
    """
    Get database URL from application settings.

    Returns
    -------
    Database URL string
    """
    url = get_settings().database_url

    # Ensure data directory exists for file-based SQLite
    if url.startswith("sqlite") and ":memory:" not in url:
        db_path = url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return url


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    Returns
    -------
    AsyncEngine instance
    """
    return create_async_engine(
        get_database_url(),
        echo=get_settings().database_echo,
        pool_pre_ping=True,
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """
    Get the shared async session maker (singleton).

    Returns
    -------
    async_sessionmaker configured with the shared engine
    """
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


@lru_cache(maxsize=1)
def get_subscription_hub() -> SubscriptionHub:
    """Get the hub shared by every store instance of this process."""
    return SubscriptionHub()


# -----------------------------------------------------------------------------
# Session Context & Repository Factory
# -----------------------------------------------------------------------------


def get_session_context(
    x_session_id: Annotated[
        str | None,
        Header(
            pattern=SESSION_ID_PATTERN,
            description="Working session the data belongs to",
        ),
    ] = None,
) -> SessionContext:
    """
    Get the SessionContext all stored data is scoped to.

    Requests without an ``X-Session-Id`` header use the default session.
    """
    return SessionContext(session_id=x_session_id or DEFAULT_SESSION_ID)


# Type alias for injected session context
CurrentSession = Annotated[SessionContext, Depends(get_session_context)]


def get_document_store(session: CurrentSession) -> DocumentStore:
    """Get the document store namespaced to the current session."""
    return SQLAlchemyDocumentStore(
        session_maker=get_session_maker(),
        namespace=session.session_id,
        hub=get_subscription_hub(),
    )


def get_repository_factory(
    session: CurrentSession,
    store: DocumentStore = Depends(get_document_store),
) -> DocumentRepositoryFactory:
    """
    Get repository factory for the current session.

    The factory creates session-scoped repositories for domain operations.
    """
    return DocumentRepositoryFactory(store=store, session=session)


# Type alias for injected repository factory
RepoFactory = Annotated[DocumentRepositoryFactory, Depends(get_repository_factory)]


def get_statement_reader() -> CsvStatementReader:
    return CsvStatementReader()


StatementReaderDep = Annotated[CsvStatementReader, Depends(get_statement_reader)]

# Type alias for injected settings
AppSettings = Annotated[Settings, Depends(get_settings)]
