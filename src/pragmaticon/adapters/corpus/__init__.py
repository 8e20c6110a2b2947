"""Corpus file adapter: CSV reading and the source header schema."""

from __future__ import annotations

from .reader import Corpus, CorpusHeader, parse_header, parse_rows, read_corpus
from .schema import HEADER_FOR_FIELD, SOURCE_HEADERS, CorpusRowPayload, field_for_header

__all__ = [
    "HEADER_FOR_FIELD",
    "SOURCE_HEADERS",
    "Corpus",
    "CorpusHeader",
    "CorpusRowPayload",
    "field_for_header",
    "parse_header",
    "parse_rows",
    "read_corpus",
]
