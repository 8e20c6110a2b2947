"""Content-addressed identity registries.

A registry maps a deterministic key to the ID of the single backing-table row
created for it. Keys are tuples (or strings for tokens), so ID sequences are
compared structurally: ``(1, 23)`` and ``(12, 3)`` never collide the way the
delimited strings ``"1,23"`` and ``"12,3"`` would once the delimiter is dropped.

Registries are append-only for one run and are not safe to resolve
concurrently; the pipeline resolves keys strictly one at a time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from pragmaticon.domain.model import IssueKind, PersistenceError, RegistryName

if TYPE_CHECKING:
    from collections.abc import Callable, Hashable, Sequence

    from pragmaticon.domain.ingest_pipeline.issues import IssueReporter
    from pragmaticon.domain.model import EntityId, OptionalId
    from pragmaticon.domain.ports import RegistryStore

log = getLogger(__name__)

type IdSequenceKey = tuple[OptionalId, ...]
type FeatureKey = tuple[str, str]
type TranslationKey = tuple[str, str]


def id_sequence_key(ids: Sequence[OptionalId]) -> IdSequenceKey:
    """Return the order-sensitive cache key for an ID sequence."""

    return tuple(ids)


@dataclass(slots=True)
class IdentityRegistry[TKey: Hashable]:
    """Memoized key -> ID resolver backed by a uniquely constrained table."""

    name: RegistryName
    insert: Callable[[TKey], EntityId]
    reporter: IssueReporter | None = None
    _ids: dict[TKey, EntityId] = field(default_factory=dict)
    inserts: int = 0

    def resolve(self, key: TKey) -> OptionalId:
        """Return the cached ID for ``key``, inserting a row on first sight.

        A failed insert is reported and yields ``None``; nothing is cached, so
        the gap is confined to the entry that failed.
        """

        cached = self._ids.get(key)
        if cached is not None:
            return cached
        try:
            self.inserts += 1
            new_id = self.insert(key)
        except PersistenceError as exc:
            self._report_failure(key, exc)
            return None
        self._ids[key] = new_id
        return new_id

    def lookup(self, key: TKey) -> OptionalId:
        """Return the cached ID for ``key`` without ever inserting."""

        return self._ids.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def _report_failure(self, key: TKey, exc: PersistenceError) -> None:
        if self.reporter is None:
            log.error("Insert into %s failed for %r: %s", self.name, key, exc.detail)
            return
        self.reporter.report(
            IssueKind.PERSISTENCE_CONFLICT,
            str(self.name),
            repr(key),
            exc.detail,
        )


@dataclass(slots=True)
class RegistrySet:
    """The five registries of one ingest run, passed explicitly to every decoder."""

    tokens: IdentityRegistry[str]
    expressions: IdentityRegistry[IdSequenceKey]
    phrases: IdentityRegistry[IdSequenceKey]
    features: IdentityRegistry[FeatureKey]
    translations: IdentityRegistry[TranslationKey]

    @classmethod
    def from_store(
        cls, store: RegistryStore, *, reporter: IssueReporter | None = None
    ) -> RegistrySet:
        return cls(
            tokens=IdentityRegistry(RegistryName.TOKENS, store.insert_token, reporter),
            expressions=IdentityRegistry(
                RegistryName.EXPRESSIONS, store.insert_expression, reporter
            ),
            phrases=IdentityRegistry(RegistryName.PHRASES, store.insert_phrase, reporter),
            features=IdentityRegistry(
                RegistryName.FEATURES, lambda key: store.insert_feature(*key), reporter
            ),
            translations=IdentityRegistry(
                RegistryName.TRANSLATIONS, lambda key: store.insert_translation(*key), reporter
            ),
        )

    def sizes(self) -> dict[RegistryName, int]:
        return {
            registry.name: len(registry)
            for registry in (
                self.tokens,
                self.expressions,
                self.phrases,
                self.features,
                self.translations,
            )
        }
