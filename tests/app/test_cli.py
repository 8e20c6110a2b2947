from __future__ import annotations

from pathlib import Path

import pytest

from pragmaticon.domain.ingest_pipeline import IngestResult, run_ingest_pipeline
from pragmaticon.ui import cli as cli_module
from tests.support.corpus import FakeUnitOfWork


def test_cli_passes_path_and_report(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    captured: dict[str, object] = {}
    corpus = tmp_path / "corpus.csv"
    corpus.write_text("ДФ\nну\n", encoding="utf-8")

    def fake_ingest(path: Path, **kwargs: object) -> IngestResult:
        captured["path"] = path
        captured.update(kwargs)
        return run_ingest_pipeline([], uow=FakeUnitOfWork())

    monkeypatch.setattr(cli_module, "ingest_corpus", fake_ingest)

    cli_module.main([str(corpus), "--report", str(tmp_path / "out.log")])

    assert captured == {"path": corpus, "report_path": tmp_path / "out.log"}


def test_cli_without_path_exits_with_usage(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    def fake_ingest(*_: object, **__: object) -> None:
        raise AssertionError("ingest should not run")

    monkeypatch.setattr(cli_module, "ingest_corpus", fake_ingest)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main([])

    assert excinfo.value.code == 2
    assert "Usage" in capsys.readouterr().err


def test_cli_with_missing_file_exits_with_usage(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    def fake_ingest(*_: object, **__: object) -> None:
        raise AssertionError("ingest should not run")

    monkeypatch.setattr(cli_module, "ingest_corpus", fake_ingest)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main([str(tmp_path / "missing.csv")])

    assert excinfo.value.code == 2
    assert "missing.csv" in capsys.readouterr().err


def test_cli_fatal_error_exits_with_one(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    corpus = tmp_path / "corpus.csv"
    corpus.write_text("интонация\n", encoding="utf-8")

    def fake_ingest(*_: object, **__: object) -> None:
        raise RuntimeError("boom")

    monkeypatch.setattr(cli_module, "ingest_corpus", fake_ingest)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main([str(corpus)])

    assert excinfo.value.code == 1
