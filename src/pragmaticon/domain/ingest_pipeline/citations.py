"""Parsers for bracketed ``excerpt[[language]]`` citation fields.

Translation fields register every distinct (excerpt, language) pair. Example
fields carry the same markers, but their excerpt may end with a bibliographic
reference in single brackets, e.g.::

    Ну что ж, пора. [Чехов. Вишнёвый сад (1903)][[русский]]
    Ну что ж, пора. [Чехов // «Вишнёвый сад», 1903][[русский]]

The reference is matched against ``EXAMPLE_SOURCE_GRAMMARS`` in order.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Final

from pragmaticon.domain.ingest_pipeline.languages import is_source_language, language_code
from pragmaticon.domain.model import ExampleCitation, ExampleSource, IssueKind

if TYPE_CHECKING:
    from collections.abc import Callable

    from pragmaticon.domain.ingest_pipeline.issues import IssueReporter
    from pragmaticon.domain.ingest_pipeline.registry import RegistrySet
    from pragmaticon.domain.model import OptionalId

log = getLogger(__name__)

LANGUAGE_MARKER: Final[str] = "[["
SOURCE_MARKER: Final[str] = "["
EN_DASH: Final[str] = "–"

_CITATION_BOUNDARY: Final = re.compile(r"(?<=\]\])\s*")
_LANGUAGE_CLOSE: Final = re.compile(r"\.?\]\]$")
_DASHES: Final = re.compile(r"--|-")


@dataclass(frozen=True, slots=True)
class RawCitation:
    excerpt: str
    language_name: str


def split_citations(content: str) -> list[str]:
    """Split a citation field on the whitespace that follows each ``]]``.

    Pipes are decoration in these fields and are dropped before splitting.
    """

    cleaned = content.replace("|", "").strip()
    if not cleaned:
        return []
    pieces = (piece.strip() for piece in _CITATION_BOUNDARY.split(cleaned))
    return [piece for piece in pieces if piece]


def split_citation(piece: str) -> RawCitation | None:
    """Split ``excerpt[[language]]``; ``None`` unless exactly one marker is present."""

    parts = piece.split(LANGUAGE_MARKER)
    if len(parts) != 2:  # noqa: PLR2004
        return None
    excerpt, language = parts
    return RawCitation(excerpt=excerpt.strip(), language_name=_LANGUAGE_CLOSE.sub("", language))


def parse_translations(
    field: str,
    content: str,
    registries: RegistrySet,
    reporter: IssueReporter,
) -> list[OptionalId]:
    """Register each translation citation and return the IDs in field order."""

    ids: list[OptionalId] = []
    for piece in split_citations(content):
        citation = split_citation(piece)
        if citation is None:
            reporter.report(IssueKind.FORMAT_MISMATCH, field, content, "does not match")
            continue
        code = language_code(citation.language_name)
        if code is None:
            reporter.report(
                IssueKind.UNRECOGNIZED_REFERENCE,
                field,
                content,
                f"language {citation.language_name!r} not in language list",
            )
            continue
        if is_source_language(code):
            reporter.report(
                IssueKind.DATA_QUALITY, field, content, "translation into the source language"
            )
        ids.append(registries.translations.resolve((citation.excerpt, code)))
    return ids


# Example sources -------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class SourceResolution:
    """Outcome of matching one bibliographic reference.

    Exactly one of ``source`` and ``problem`` is set once a grammar matched.
    """

    source: ExampleSource | None = None
    problem: str | None = None


@dataclass(frozen=True, slots=True)
class SourceGrammar:
    name: str
    pattern: re.Pattern[str]
    extract: Callable[[str, re.Match[str]], SourceResolution]

    def attempt(self, reference: str) -> SourceResolution | None:
        match = self.pattern.match(reference)
        if match is None:
            return None
        return self.extract(self.name, match)


def _author_dot_book(grammar: str, match: re.Match[str]) -> SourceResolution:
    head = match["head"]
    segments = head.split(".")
    if len(segments) != 2:  # noqa: PLR2004
        return SourceResolution(problem=f"cannot split author and book in {head.strip()!r}")
    author, book = (segment.strip() for segment in segments)
    if not author or not book:
        return SourceResolution(problem=f"empty author or book in {head.strip()!r}")
    source = ExampleSource(author=author, book=book, date=match["date"], grammar=grammar)
    return SourceResolution(source=source)


def _author_quoted_book(grammar: str, match: re.Match[str]) -> SourceResolution:
    source = ExampleSource(
        author=match["author"].strip(),
        book=match["book"].strip(),
        date=match["date"],
        grammar=grammar,
    )
    return SourceResolution(source=source)


EXAMPLE_SOURCE_GRAMMARS: Final[tuple[SourceGrammar, ...]] = (
    SourceGrammar(
        name="author-dot-book",
        pattern=re.compile(r"^(?P<head>.*?)\((?P<date>[\d–.]+)\)\]$"),
        extract=_author_dot_book,
    ),
    SourceGrammar(
        name="author-quoted-book",
        pattern=re.compile(r"^(?P<author>.*?)\s*//\s*«(?P<book>.*?)»,\s+(?P<date>[\d–.]+)\]$"),
        extract=_author_quoted_book,
    ),
)


def normalize_dashes(text: str) -> str:
    return _DASHES.sub(EN_DASH, text)


def resolve_example_source(reference: str) -> SourceResolution:
    """Match ``reference`` (the text after the single ``[``) against the grammars."""

    normalized = normalize_dashes(reference.strip())
    for grammar in EXAMPLE_SOURCE_GRAMMARS:
        resolution = grammar.attempt(normalized)
        if resolution is not None:
            return resolution
    return SourceResolution(problem=f"unresolved citation {normalized!r}")


def parse_examples(
    field: str,
    content: str,
    registries: RegistrySet,
    reporter: IssueReporter,
) -> list[OptionalId]:
    """Return the translation IDs referenced by each example citation.

    Examples never register translations; an excerpt that no translation
    citation registered earlier is reported and leaves a gap.
    """

    ids: list[OptionalId] = []
    for piece in split_citations(content):
        citation = read_example(field, piece, content, reporter)
        if citation is None:
            continue
        translation_id = registries.translations.lookup((citation.excerpt, citation.language))
        if translation_id is None:
            reporter.report(
                IssueKind.UNRECOGNIZED_REFERENCE,
                field,
                content,
                f"example {citation.excerpt!r} is not a registered translation",
            )
        ids.append(translation_id)
    return ids


def read_example(
    field: str,
    piece: str,
    content: str,
    reporter: IssueReporter,
) -> ExampleCitation | None:
    raw = split_citation(piece)
    if raw is None:
        reporter.report(IssueKind.FORMAT_MISMATCH, field, content, f"does not match: {piece!r}")
        return None

    text, marker, reference = raw.excerpt.partition(SOURCE_MARKER)
    source: ExampleSource | None = None
    if marker:
        resolution = resolve_example_source(reference)
        if resolution.problem is not None:
            reporter.report(IssueKind.FORMAT_MISMATCH, field, content, resolution.problem)
        else:
            source = resolution.source
            log.debug("Example source: %s", source)

    code = language_code(raw.language_name)
    if code is None:
        reporter.report(
            IssueKind.UNRECOGNIZED_REFERENCE,
            field,
            content,
            f"language {raw.language_name!r} not in language list",
        )
        return None
    return ExampleCitation(excerpt=text.strip(), language=code, source=source)
