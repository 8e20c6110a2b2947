"""SQLAlchemy adapter package for Pragmaticon."""

from __future__ import annotations

from .mappings import (
    create_all_tables,
    mapper_registry,
    reset_all_tables,
    start_mappers,
)
from .repositories import SqlAlchemyRegistryStore, SqlAlchemyUnitRepository, serialize_ids
from .unit_of_work import SqlAlchemyCorpusUnitOfWork, StartupError, shutdown, startup

__all__ = [
    "SqlAlchemyCorpusUnitOfWork",
    "SqlAlchemyRegistryStore",
    "SqlAlchemyUnitRepository",
    "StartupError",
    "create_all_tables",
    "mapper_registry",
    "reset_all_tables",
    "serialize_ids",
    "shutdown",
    "start_mappers",
    "startup",
]
