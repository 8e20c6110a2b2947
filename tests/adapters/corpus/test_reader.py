from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from pragmaticon.adapters.corpus import (
    SOURCE_HEADERS,
    CorpusRowPayload,
    parse_header,
    parse_rows,
    read_corpus,
)
from pragmaticon.domain.ingest_pipeline import IssueReporter, assemble_unit
from pragmaticon.domain.model import CorpusFormatError, FieldName, IssueKind
from tests.support.corpus import make_context, write_corpus

if TYPE_CHECKING:
    from pathlib import Path


def test_every_field_has_one_source_header() -> None:
    assert sorted(SOURCE_HEADERS.values()) == sorted(FieldName)


def test_parse_header_maps_known_and_reports_unknown() -> None:
    reporter = IssueReporter()

    header = parse_header(["\ufeffДФ ", "интонация", "Заметки"], reporter)

    assert header.fields == (FieldName.UNIT, FieldName.INTONATION, None)
    assert header.known == [("ДФ", FieldName.UNIT), ("интонация", FieldName.INTONATION)]
    assert header.unknown == ["Заметки"]
    [issue] = reporter.issues
    assert issue.kind is IssueKind.FORMAT_MISMATCH
    assert issue.content == "Заметки"


def test_parse_header_without_unit_column_is_fatal() -> None:
    with pytest.raises(CorpusFormatError):
        parse_header(["интонация", "Комментарий"])


def test_parse_rows_keeps_raw_values_of_known_columns() -> None:
    header = parse_header(["ДФ", "unit", "Комментарий"])

    rows = list(parse_rows(header, [["ну и ну ", "ignored", ""], ["", "", ""], ["вот"]]))

    assert rows == [
        {FieldName.UNIT: "ну и ну ", FieldName.COMMENT: ""},
        {FieldName.UNIT: "вот", FieldName.COMMENT: ""},
    ]


def test_row_payload_accepts_field_names() -> None:
    payload = CorpusRowPayload.model_validate({"unit": "ну", "интонация": "ровная"})

    assert payload.as_fields() == {FieldName.UNIT: "ну", FieldName.INTONATION: "ровная"}


def test_read_corpus(tmp_path: Path) -> None:
    path = write_corpus(
        tmp_path / "corpus.csv",
        [{FieldName.UNIT: "ну", FieldName.TRANSLATIONS: "Well, well[[англ]]"}],
        columns=[FieldName.UNIT, FieldName.TRANSLATIONS],
        extra_headers=["Заметки"],
    )
    reporter = IssueReporter()

    corpus = read_corpus(path, reporter=reporter)

    assert corpus.rows == [{FieldName.UNIT: "ну", FieldName.TRANSLATIONS: "Well, well[[англ]]"}]
    assert corpus.header.unknown == ["Заметки"]
    assert len(reporter.issues) == 1


def test_read_corpus_rejects_empty_file(tmp_path: Path) -> None:
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")

    with pytest.raises(CorpusFormatError):
        read_corpus(path)


def test_read_corpus_with_custom_delimiter(tmp_path: Path) -> None:
    path = tmp_path / "corpus.tsv"
    path.write_text("ДФ\tструктура\nну|вот\tтрехчастная\n", encoding="utf-8")

    corpus = read_corpus(path, delimiter="\t")

    assert corpus.rows == [{FieldName.UNIT: "ну|вот", FieldName.PARTS: "трехчастная"}]


def test_short_record_reads_missing_trailing_cells_as_empty() -> None:
    header = parse_header(["ДФ", "тип речевого акта (собеседник)"])
    context = make_context()

    [row] = parse_rows(header, [["да"]])
    unit = assemble_unit(row, context)

    assert row == {FieldName.UNIT: "да", FieldName.ACTCLASS: ""}
    assert unit.actclass == []
    [issue] = context.reporter.of_kind(IssueKind.DATA_QUALITY)
    assert issue.field == FieldName.ACTCLASS
