"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class FieldName(StrEnum):
    """Canonical identifiers of the annotated corpus columns.

    Declaration order is processing order: ``SEMANTICS1`` must precede
    ``SEMANTICS`` because the latter folds the former into its feature list.
    """

    UNIT = "unit"
    EXTREQUIRED = "extrequired"
    SEMANTICS1 = "semantics1"
    SEMANTICS = "semantics"
    ACT1 = "act1"
    ACTCLASS = "actclass"
    SITUATION = "situation"
    PARTS = "parts"
    INTONATION = "intonation"
    EXTENSION = "extension"
    MODS = "mods"
    GEST = "gest"
    ORGAN = "organ"
    TRANSLATIONS = "translations"
    EXAMPLES = "examples"
    AUDIO = "audio"
    VIDEO = "video"
    STYLE = "style"
    COMMENT = "comment"
    CONSTRUCTION = "construction"
    LINK = "link"


class RegistryName(StrEnum):
    TOKENS = "tokens"
    EXPRESSIONS = "exprs"
    PHRASES = "phrases"
    FEATURES = "features"
    TRANSLATIONS = "translations"


class IssueKind(StrEnum):
    """Reportable, non-fatal problems found while normalizing a row."""

    FORMAT_MISMATCH = "format-mismatch"
    UNRECOGNIZED_REFERENCE = "unrecognized-reference"
    DATA_QUALITY = "data-quality"
    PERSISTENCE_CONFLICT = "persistence-conflict"
