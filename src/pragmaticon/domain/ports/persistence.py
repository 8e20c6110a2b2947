"""Ports for persisting normalized corpus entities."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pragmaticon.domain.model import EntityId, OptionalId, Unit


@runtime_checkable
class RegistryStore(Protocol):
    """Insert-only persistence contract behind the identity registries.

    Each method inserts exactly one row and returns the ID assigned by the
    backing table. Implementations raise ``PersistenceError`` when the insert
    fails; they never look up existing rows.
    """

    def insert_token(self, text: str) -> EntityId: ...

    def insert_expression(self, token_ids: Sequence[OptionalId]) -> EntityId: ...

    def insert_phrase(self, expression_ids: Sequence[OptionalId]) -> EntityId: ...

    def insert_feature(self, field: str, value: str) -> EntityId: ...

    def insert_translation(self, excerpt: str, lang: str) -> EntityId: ...


@runtime_checkable
class UnitRepository(Protocol):
    """Persistence contract for unit rows."""

    def add(self, unit: Unit) -> EntityId: ...

    def count(self) -> int: ...
