"""Per-field dispatch and unit assembly.

``FIELD_DECODERS`` is a closed table: every ``FieldName`` has exactly one
decoder, and the row assembler refuses fields outside the table instead of
silently skipping them.
"""

from __future__ import annotations

from logging import getLogger
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from pragmaticon.domain.ingest_pipeline.citations import parse_examples, parse_translations
from pragmaticon.domain.ingest_pipeline.context import RowScope
from pragmaticon.domain.ingest_pipeline.features import decode_feature, decode_feature_list
from pragmaticon.domain.ingest_pipeline.vectorizer import split_parts, tokenize, vectorize_unit
from pragmaticon.domain.model import FieldName, IssueKind

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from pragmaticon.domain.ingest_pipeline.context import PipelineContext
    from pragmaticon.domain.model import Unit

type FieldDecoder = Callable[[str, RowScope], None]

log = getLogger(__name__)

THREE_PART_MARKER: Final[str] = "трехчастная"
MANDATORY_FEATURE_FIELDS: Final = frozenset({FieldName.ACTCLASS})


def _decode_unit(value: str, scope: RowScope) -> None:
    if not value.strip():
        scope.reporter.report(IssueKind.DATA_QUALITY, FieldName.UNIT, value, "unit text is empty")
        return
    if any(not tokenize(part) for part in split_parts(value)):
        scope.reporter.report(
            IssueKind.DATA_QUALITY, FieldName.UNIT, value, "unit text has an empty part"
        )
    vector = vectorize_unit(value, scope.registries)
    log.debug(
        "Unit %r -> phrase %s (primary expression %s, expressions %s)",
        value,
        vector.phrase_id,
        vector.primary_expression_id,
        vector.expression_ids,
    )
    scope.unit.phrase_id = vector.phrase_id


def _decode_extrequired(value: str, scope: RowScope) -> None:
    scope.unit.extrequired = bool(value)


def _decode_semantics1(value: str, scope: RowScope) -> None:
    scope.semantics1 = value


def _decode_semantics(value: str, scope: RowScope) -> None:
    combined = f"{scope.semantics1}|{value}"
    scope.unit.semantics = decode_feature_list(
        FieldName.SEMANTICS, combined, scope.registries, scope.reporter
    )


def _decode_parts(value: str, scope: RowScope) -> None:
    # an empty structure means a two-part unit
    scope.unit.parts = value == THREE_PART_MARKER


def _feature_list(field_name: FieldName) -> FieldDecoder:
    mandatory = field_name in MANDATORY_FEATURE_FIELDS

    def decode(value: str, scope: RowScope) -> None:
        ids = decode_feature_list(
            field_name, value, scope.registries, scope.reporter, mandatory=mandatory
        )
        setattr(scope.unit, field_name, ids)

    return decode


def _single_feature(field_name: FieldName) -> FieldDecoder:
    def decode(value: str, scope: RowScope) -> None:
        setattr(scope.unit, field_name, decode_feature(field_name, value, scope.registries))

    return decode


def _text(field_name: FieldName) -> FieldDecoder:
    def decode(value: str, scope: RowScope) -> None:
        setattr(scope.unit, field_name, value or None)

    return decode


def _decode_translations(value: str, scope: RowScope) -> None:
    scope.unit.translations = parse_translations(
        FieldName.TRANSLATIONS, value, scope.registries, scope.reporter
    )


def _decode_examples(value: str, scope: RowScope) -> None:
    scope.unit.examples = parse_examples(
        FieldName.EXAMPLES, value, scope.registries, scope.reporter
    )


FIELD_DECODERS: Final[Mapping[FieldName, FieldDecoder]] = MappingProxyType(
    {
        FieldName.UNIT: _decode_unit,
        FieldName.EXTREQUIRED: _decode_extrequired,
        FieldName.SEMANTICS1: _decode_semantics1,
        FieldName.SEMANTICS: _decode_semantics,
        FieldName.ACT1: _feature_list(FieldName.ACT1),
        FieldName.ACTCLASS: _feature_list(FieldName.ACTCLASS),
        FieldName.SITUATION: _text(FieldName.SITUATION),
        FieldName.PARTS: _decode_parts,
        FieldName.INTONATION: _single_feature(FieldName.INTONATION),
        FieldName.EXTENSION: _feature_list(FieldName.EXTENSION),
        FieldName.MODS: _text(FieldName.MODS),
        FieldName.GEST: _feature_list(FieldName.GEST),
        FieldName.ORGAN: _feature_list(FieldName.ORGAN),
        FieldName.TRANSLATIONS: _decode_translations,
        FieldName.EXAMPLES: _decode_examples,
        FieldName.AUDIO: _text(FieldName.AUDIO),
        FieldName.VIDEO: _text(FieldName.VIDEO),
        FieldName.STYLE: _single_feature(FieldName.STYLE),
        FieldName.COMMENT: _text(FieldName.COMMENT),
        FieldName.CONSTRUCTION: _text(FieldName.CONSTRUCTION),
        FieldName.LINK: _text(FieldName.LINK),
    }
)


def decoder_for(field_name: FieldName) -> FieldDecoder:
    try:
        return FIELD_DECODERS[field_name]
    except KeyError:
        raise ValueError(f"No decoder registered for field {field_name!r}") from None


def assemble_unit(row: Mapping[FieldName, str], context: PipelineContext) -> Unit:
    """Decode every present field of ``row`` in ``FieldName`` order into a ``Unit``."""

    unknown = [name for name in row if name not in FIELD_DECODERS]
    if unknown:
        raise ValueError(f"Unknown fields in row: {', '.join(map(repr, unknown))}")

    scope = RowScope(context=context)
    for field_name in FieldName:
        if field_name not in row:
            continue
        value = row[field_name]
        context.tally.add(field_name, value)
        decoder_for(field_name)(value, scope)

    if row.get(FieldName.UNIT, "").strip() and scope.unit.phrase_id is None:
        context.reporter.report(
            IssueKind.DATA_QUALITY,
            FieldName.UNIT,
            row[FieldName.UNIT],
            "unit has no phrase identity",
        )
    return scope.unit
