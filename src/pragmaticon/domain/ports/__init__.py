"""Domain port definitions for adapters."""

from __future__ import annotations

from .persistence import RegistryStore, UnitRepository
from .unit_of_work import CorpusRepositories, CorpusUnitOfWork, RepositoryCollection, UnitOfWork

__all__ = [
    "CorpusRepositories",
    "CorpusUnitOfWork",
    "RegistryStore",
    "RepositoryCollection",
    "UnitOfWork",
    "UnitRepository",
]
