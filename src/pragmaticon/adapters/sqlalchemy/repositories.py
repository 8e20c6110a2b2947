"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, cast

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from pragmaticon.adapters.sqlalchemy.mappings import (
    expression_table,
    feature_table,
    phrase_table,
    token_table,
    translation_table,
    unit_table,
)
from pragmaticon.domain.model import PersistenceError, Unit

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sqlalchemy import Insert
    from sqlalchemy.orm import Session

    from pragmaticon.domain.model import EntityId, OptionalId


def serialize_ids(ids: Sequence[OptionalId]) -> str:
    """Render an ID sequence as compact JSON, the on-disk form of exprs/phrases."""

    return json.dumps(list(ids), separators=(",", ":"))


def _error_detail(exc: SQLAlchemyError) -> str:
    original = getattr(exc, "orig", None)
    return str(original if original is not None else exc)


class SqlAlchemyRegistryStore:
    """Insert-only store behind the identity registries.

    Each insert is committed on its own so that a rejected row rolls back
    nothing but itself.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def insert_token(self, text: str) -> EntityId:
        return self._insert(token_table.insert().values(text=text))

    def insert_expression(self, token_ids: Sequence[OptionalId]) -> EntityId:
        return self._insert(expression_table.insert().values(token_ids=serialize_ids(token_ids)))

    def insert_phrase(self, expression_ids: Sequence[OptionalId]) -> EntityId:
        return self._insert(phrase_table.insert().values(expr_ids=serialize_ids(expression_ids)))

    def insert_feature(self, field: str, value: str) -> EntityId:
        return self._insert(feature_table.insert().values(field=field, value=value))

    def insert_translation(self, excerpt: str, lang: str) -> EntityId:
        return self._insert(translation_table.insert().values(excerpt=excerpt, lang=lang))

    def _insert(self, stmt: Insert) -> EntityId:
        try:
            result = self.session.execute(stmt)
            primary_key = result.inserted_primary_key
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise PersistenceError(
                f"Insert into {stmt.table.name} failed", detail=_error_detail(exc)
            ) from exc
        if primary_key is None:
            raise PersistenceError(f"Insert into {stmt.table.name} returned no primary key")
        return cast("EntityId", primary_key[0])


class SqlAlchemyUnitRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, unit: Unit) -> EntityId:
        try:
            self.session.add(unit)
            self.session.flush()
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise PersistenceError("Insert into units failed", detail=_error_detail(exc)) from exc
        if unit.id is None:
            raise PersistenceError("Insert into units returned no primary key")
        return unit.id

    def count(self) -> int:
        stmt = select(func.count()).select_from(unit_table)
        return self.session.execute(stmt).scalar_one()


if TYPE_CHECKING:
    from pragmaticon.domain.ports import RegistryStore, UnitRepository

    _session_stub = cast("Session", object())
    _store_check: RegistryStore = SqlAlchemyRegistryStore(_session_stub)
    _unit_repo_check: UnitRepository = SqlAlchemyUnitRepository(_session_stub)
