"""Read the tabular corpus file into canonical field mappings."""

from __future__ import annotations

import csv
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from pragmaticon.adapters.corpus.schema import (
    CorpusRowPayload,
    canonical_header,
    field_for_header,
)
from pragmaticon.domain.model import CorpusFormatError, FieldName, IssueKind

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence
    from pathlib import Path

    from pragmaticon.domain.ingest_pipeline import IssueReporter

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CorpusHeader:
    """The header row and the canonical field of each column (``None`` if rejected)."""

    cells: tuple[str, ...]
    fields: tuple[FieldName | None, ...]

    @property
    def known(self) -> list[tuple[str, FieldName]]:
        return [
            (cell, field_name)
            for cell, field_name in zip(self.cells, self.fields, strict=True)
            if field_name is not None
        ]

    @property
    def unknown(self) -> list[str]:
        return [
            cell
            for cell, field_name in zip(self.cells, self.fields, strict=True)
            if field_name is None
        ]


@dataclass(slots=True)
class Corpus:
    header: CorpusHeader
    rows: list[dict[FieldName, str]] = field(default_factory=list[dict[FieldName, str]])


def parse_header(cells: Sequence[str], reporter: IssueReporter | None = None) -> CorpusHeader:
    """Map header cells to canonical fields, rejecting unknown columns explicitly."""

    canonical = tuple(canonical_header(cell) for cell in cells)
    header = CorpusHeader(
        cells=canonical,
        fields=tuple(field_for_header(cell) for cell in canonical),
    )
    for cell in header.unknown:
        if reporter is not None:
            reporter.report(IssueKind.FORMAT_MISMATCH, "header", cell, "unknown column ignored")
        else:
            log.error("Unknown column ignored: %r", cell)
    if FieldName.UNIT not in header.fields:
        raise CorpusFormatError("Corpus header has no unit column")
    return header


def parse_rows(
    header: CorpusHeader, records: Iterable[Sequence[str]]
) -> Iterator[dict[FieldName, str]]:
    """Yield the known cells of every record keyed by canonical field."""

    for line_number, record in enumerate(records, start=2):
        if not any(cell.strip() for cell in record):
            continue
        if len(record) != len(header.cells):
            log.warning(
                "Line %s has %s cells, header has %s", line_number, len(record), len(header.cells)
            )
        # missing trailing cells read as empty so every known field is decoded
        padded = [*record, *[""] * (len(header.cells) - len(record))]
        cells = {
            cell: value
            for cell, field_name, value in zip(header.cells, header.fields, padded, strict=False)
            if field_name is not None
        }
        yield CorpusRowPayload.model_validate(cells).as_fields()


def read_corpus(
    path: Path,
    *,
    delimiter: str = ",",
    reporter: IssueReporter | None = None,
) -> Corpus:
    """Read the whole corpus file; the first row must be the header."""

    with path.open(encoding="utf-8-sig", newline="") as handle:
        records = csv.reader(handle, delimiter=delimiter)
        try:
            header_cells = next(records)
        except StopIteration:
            raise CorpusFormatError(f"Corpus file {path} is empty") from None
        header = parse_header(header_cells, reporter)
        rows = list(parse_rows(header, records))

    log.info("Read %s rows with %s known columns from %s", len(rows), len(header.known), path)
    return Corpus(header=header, rows=rows)
