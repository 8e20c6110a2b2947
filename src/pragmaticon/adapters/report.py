"""Plain-text frequency report of the raw values seen per column."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from pragmaticon.adapters.corpus import CorpusHeader
    from pragmaticon.domain.ingest_pipeline import FieldTally

log = getLogger(__name__)

BANNER: Final[str] = "============================="
EMPTY_VALUE: Final[str] = "■"


def render_frequency_report(header: CorpusHeader, tally: FieldTally) -> Iterator[str]:
    for cell, field_name in header.known:
        yield BANNER
        yield BANNER
        yield f"{field_name}||{cell}"
        yield BANNER
        for value, count in tally.frequencies(field_name):
            yield f"{value or EMPTY_VALUE}\t{count}"


def write_frequency_report(path: Path, header: CorpusHeader, tally: FieldTally) -> None:
    """Write one block per known column, in header order, overwriting ``path``."""

    with path.open("w", encoding="utf-8") as handle:
        for line in render_frequency_report(header, tally):
            handle.write(line + "\n")
    log.info("Wrote frequency report to %s", path)
