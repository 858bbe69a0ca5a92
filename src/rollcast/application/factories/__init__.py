"""Factories for application layer objects."""

from rollcast.application.factories.repository_factory import RepositoryFactory

__all__ = ["RepositoryFactory"]
