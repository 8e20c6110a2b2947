"""Normalization pipeline for the discourse-formula corpus.

Rows are decoded field by field into ``Unit`` records while five identity
registries (tokens, expressions, phrases, features, translations) assign one
stable ID to every distinct substructure. All registries of a run live in a
``PipelineContext`` that is created empty and passed explicitly to decoders.
"""

from __future__ import annotations

from .assembler import FIELD_DECODERS, assemble_unit
from .context import FieldTally, PipelineContext, RowScope
from .issues import IngestIssue, IssueReporter
from .registry import IdentityRegistry, RegistrySet
from .runner import IngestResult, run_ingest_pipeline

__all__ = [
    "FIELD_DECODERS",
    "FieldTally",
    "IdentityRegistry",
    "IngestIssue",
    "IngestResult",
    "IssueReporter",
    "PipelineContext",
    "RegistrySet",
    "RowScope",
    "assemble_unit",
    "run_ingest_pipeline",
]
