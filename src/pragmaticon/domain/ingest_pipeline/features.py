"""Decoders for categorical feature fields."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from pragmaticon.domain.model import IssueKind

if TYPE_CHECKING:
    from pragmaticon.domain.ingest_pipeline.issues import IssueReporter
    from pragmaticon.domain.ingest_pipeline.registry import RegistrySet
    from pragmaticon.domain.model import OptionalId

FEATURE_SEPARATOR: Final[str] = "|"


def split_features(value: str) -> list[str]:
    return [segment for segment in value.split(FEATURE_SEPARATOR) if segment]


def decode_feature_list(
    field: str,
    value: str,
    registries: RegistrySet,
    reporter: IssueReporter,
    *,
    mandatory: bool = False,
) -> list[OptionalId]:
    """Resolve each ``|``-separated segment of ``value`` as a feature of ``field``.

    Order and repeats are kept. An empty list is a normal result unless the
    field is mandatory, in which case it is also reported.
    """

    ids = [registries.features.resolve((field, segment)) for segment in split_features(value)]
    if mandatory and not ids:
        reporter.report(IssueKind.DATA_QUALITY, field, value, "mandatory field is empty")
    return ids


def decode_feature(field: str, value: str, registries: RegistrySet) -> OptionalId:
    """Resolve a single-valued feature; blank values resolve to nothing."""

    stripped = value.strip()
    if not stripped:
        return None
    return registries.features.resolve((field, stripped))
