"""SQLAlchemy mapping metadata for the normalized corpus."""

from __future__ import annotations

import logging
from functools import cache
from typing import TYPE_CHECKING

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    ForeignKey,
    Integer,
    String,
    Table,
    Text,
    UniqueConstraint,
    orm,
)

from pragmaticon.domain.model import Unit

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)


mapper_registry = orm.registry()
mapper_registry.metadata.naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_label)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

# Registry tables -------------------------------------------------------------

token_table = Table(
    "tokens",
    mapper_registry.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("text", String, nullable=False, unique=True),
)

expression_table = Table(
    "exprs",
    mapper_registry.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("token_ids", String, nullable=False, unique=True),
)

phrase_table = Table(
    "phrases",
    mapper_registry.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("expr_ids", String, nullable=False),
)

feature_table = Table(
    "features",
    mapper_registry.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("field", String, nullable=False),
    Column("value", String, nullable=False),
    Column("gloss", String, nullable=True),
    UniqueConstraint("field", "value"),
)

translation_table = Table(
    "translations",
    mapper_registry.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("excerpt", Text, nullable=False),
    Column("lang", String(3), nullable=False),
    UniqueConstraint("excerpt", "lang"),
)

# Units -----------------------------------------------------------------------

unit_table = Table(
    "units",
    mapper_registry.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("phrase_id", Integer, ForeignKey("phrases.id"), nullable=False),
    Column("extrequired", Boolean, nullable=False, default=False),
    Column("semantics", JSON, nullable=True),
    Column("act1", JSON, nullable=True),
    Column("actclass", JSON, nullable=True),
    Column("situation", Text, nullable=True),
    Column("parts", Boolean, nullable=False, default=False),
    Column("intonation", Integer, ForeignKey("features.id"), nullable=True),
    Column("extension", JSON, nullable=True),
    Column("mods", Text, nullable=True),
    Column("gest", JSON, nullable=True),
    Column("organ", JSON, nullable=True),
    Column("translations", JSON, nullable=True),
    Column("examples", JSON, nullable=True),
    Column("audio", Text, nullable=True),
    Column("video", Text, nullable=True),
    Column("style", Integer, ForeignKey("features.id"), nullable=True),
    Column("comment", Text, nullable=True),
    Column("construction", Text, nullable=True),
    Column("link", Text, nullable=True),
)


@cache
def start_mappers() -> orm.registry:
    """Configure SQLAlchemy mappers for the domain model."""

    log.info("Starting SQLAlchemy mappers")
    mapper_registry.map_imperatively(Unit, unit_table)
    return mapper_registry


def create_all_tables(engine: Engine) -> None:
    """Create database tables for the mapped metadata."""

    log.info("Creating all tables")
    mapper_registry.metadata.create_all(engine)


def reset_all_tables(engine: Engine) -> None:
    """Drop and recreate every table; all previously loaded data is lost."""

    log.warning("Dropping all tables")
    mapper_registry.metadata.drop_all(engine)
    create_all_tables(engine)
