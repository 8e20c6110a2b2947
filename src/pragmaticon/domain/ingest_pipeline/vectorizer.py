"""Token / expression / phrase vectorization of a unit's surface text."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from pragmaticon.domain.ingest_pipeline.registry import id_sequence_key
from pragmaticon.domain.model import PhraseVector

if TYPE_CHECKING:
    from pragmaticon.domain.ingest_pipeline.registry import RegistrySet
    from pragmaticon.domain.model import OptionalId

PART_SEPARATOR: Final[str] = "|"

# whitespace, or the empty position right before a hyphen
_TOKEN_BOUNDARY: Final[re.Pattern[str]] = re.compile(r"\s|(?=-)")


def split_parts(text: str) -> list[str]:
    return text.split(PART_SEPARATOR)


def tokenize(part: str) -> list[str]:
    """Split one part into trimmed, non-empty tokens.

    >>> tokenize("пере-дать слово")
    ['пере', '-дать', 'слово']
    """

    tokens = (token.strip() for token in _TOKEN_BOUNDARY.split(part))
    return [token for token in tokens if token]


def vectorize_expression(
    part: str, registries: RegistrySet
) -> tuple[OptionalId, tuple[OptionalId, ...]]:
    """Resolve the tokens of ``part`` and then the expression they form."""

    token_ids = tuple(registries.tokens.resolve(token) for token in tokenize(part))
    expression_id = registries.expressions.resolve(id_sequence_key(token_ids))
    return expression_id, token_ids


def vectorize_unit(text: str, registries: RegistrySet) -> PhraseVector:
    """Vectorize a pipe-delimited unit text bottom-up into a phrase.

    Parts are processed left to right: tokens before their expression, every
    expression before the phrase that lists them.
    """

    expression_ids: list[OptionalId] = []
    token_vectors: list[tuple[OptionalId, ...]] = []
    for part in split_parts(text):
        expression_id, token_ids = vectorize_expression(part, registries)
        expression_ids.append(expression_id)
        token_vectors.append(token_ids)

    phrase_id = registries.phrases.resolve(id_sequence_key(expression_ids))
    return PhraseVector(
        phrase_id=phrase_id,
        primary_expression_id=expression_ids[0] if expression_ids else None,
        expression_ids=tuple(expression_ids),
        token_ids=tuple(token_vectors),
    )
