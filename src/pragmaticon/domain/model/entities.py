"""Normalized corpus entities.

Registry entities (tokens, expressions, phrases, features, translations) are
identified by the integer the backing table assigns on insert. ``Unit`` is the
only entity written as a full record; it references registry rows by ID and
never owns their lifecycle.
"""

from __future__ import annotations

from dataclasses import dataclass, field

type EntityId = int
type OptionalId = EntityId | None


@dataclass(frozen=True, slots=True)
class PhraseVector:
    """Result of vectorizing a unit's surface text.

    ``token_ids`` keeps the nested per-part token vectors and
    ``expression_ids`` the ordered expression IDs; both are kept for
    traceability only.
    """

    phrase_id: OptionalId
    primary_expression_id: OptionalId
    expression_ids: tuple[OptionalId, ...]
    token_ids: tuple[tuple[OptionalId, ...], ...]


@dataclass(frozen=True, slots=True)
class ExampleSource:
    """Bibliographic metadata recovered from an example citation."""

    author: str
    book: str
    date: str
    grammar: str


@dataclass(frozen=True, slots=True)
class ExampleCitation:
    excerpt: str
    language: str
    source: ExampleSource | None = None


@dataclass(eq=False, kw_only=True)
class Unit:
    """One corpus row with all decoded properties."""

    id: EntityId | None = None
    phrase_id: OptionalId = None
    extrequired: bool = False
    semantics: list[OptionalId] = field(default_factory=list[OptionalId])
    act1: list[OptionalId] = field(default_factory=list[OptionalId])
    actclass: list[OptionalId] = field(default_factory=list[OptionalId])
    situation: str | None = None
    parts: bool = False
    intonation: OptionalId = None
    extension: list[OptionalId] = field(default_factory=list[OptionalId])
    mods: str | None = None
    gest: list[OptionalId] = field(default_factory=list[OptionalId])
    organ: list[OptionalId] = field(default_factory=list[OptionalId])
    translations: list[OptionalId] = field(default_factory=list[OptionalId])
    examples: list[OptionalId] = field(default_factory=list[OptionalId])
    audio: str | None = None
    video: str | None = None
    style: OptionalId = None
    comment: str | None = None
    construction: str | None = None
    link: str | None = None
