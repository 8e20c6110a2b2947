"""Public domain model surface."""

from __future__ import annotations

from pragmaticon.domain.model.entities import (
    EntityId,
    ExampleCitation,
    ExampleSource,
    OptionalId,
    PhraseVector,
    Unit,
)
from pragmaticon.domain.model.enums import FieldName, IssueKind, RegistryName
from pragmaticon.domain.model.errors import CorpusFormatError, PersistenceError

__all__ = [
    "CorpusFormatError",
    "EntityId",
    "ExampleCitation",
    "ExampleSource",
    "FieldName",
    "IssueKind",
    "OptionalId",
    "PersistenceError",
    "PhraseVector",
    "RegistryName",
    "Unit",
]
