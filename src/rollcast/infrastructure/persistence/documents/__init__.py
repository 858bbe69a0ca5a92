"""Repositories storing domain models as JSON documents."""

from rollcast.infrastructure.persistence.documents.estimate_repository import (
    ESTIMATES,
    DocumentEstimateRepository,
)
from rollcast.infrastructure.persistence.documents.factory import (
    DocumentRepositoryFactory,
)
from rollcast.infrastructure.persistence.documents.mapper import (
    from_document,
    from_documents,
    to_document,
)
from rollcast.infrastructure.persistence.documents.transaction_repository import (
    TRANSACTIONS,
    DocumentTransactionRepository,
)

__all__ = [
    "ESTIMATES",
    "TRANSACTIONS",
    "DocumentEstimateRepository",
    "DocumentRepositoryFactory",
    "DocumentTransactionRepository",
    "from_document",
    "from_documents",
    "to_document",
]
