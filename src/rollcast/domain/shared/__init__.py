"""Shared domain components.

This module exports shared exceptions and time helpers used across
domain boundaries.
"""

from rollcast.domain.shared.exceptions import (
    BusinessRuleViolation,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    PersistenceError,
    ValidationError,
)
from rollcast.domain.shared.time import monday_of, today_utc, utc_now

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    "BusinessRuleViolation",
    "EntityNotFoundError",
    "ConflictError",
    "PersistenceError",
    # Utilities
    "monday_of",
    "today_utc",
    "utc_now",
]
