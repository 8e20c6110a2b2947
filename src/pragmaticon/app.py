"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from pragmaticon.adapters.corpus import read_corpus
from pragmaticon.adapters.report import write_frequency_report
from pragmaticon.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyCorpusUnitOfWork,
    shutdown,
    startup,
)
from pragmaticon.config import get_ingest_config
from pragmaticon.domain.ingest_pipeline import (
    IngestResult,
    IssueReporter,
    PipelineContext,
    run_ingest_pipeline,
)

if TYPE_CHECKING:
    from pathlib import Path

    from sqlalchemy.engine import Engine


log = getLogger(__name__)


def ingest_corpus(
    path: Path,
    *,
    report_path: Path | None = None,
    database_uri: str | None = None,
    engine: Engine | None = None,
    delimiter: str | None = None,
) -> IngestResult:
    """Reload the whole corpus at ``path`` into a freshly reset database.

    The file is read and its header validated before any table is dropped.

    The frequency report is written next to the run, to ``report_path`` or
    the configured default.
    """

    if not path.is_file():
        raise FileNotFoundError(f"Corpus file not found: {path}")

    config = get_ingest_config()
    effective_report = report_path or config.report_path
    log.info("Starting corpus ingest: path=%s, report=%s", path, effective_report)

    # header problems must surface before the previous load is dropped
    reporter = IssueReporter()
    corpus = read_corpus(path, delimiter=delimiter or config.csv_delimiter, reporter=reporter)

    startup(engine=engine, database_uri=database_uri, reset=True, force=True)
    try:
        with SqlAlchemyCorpusUnitOfWork() as uow:
            context = PipelineContext.for_store(uow.repositories.registries, reporter=reporter)
            result = run_ingest_pipeline(corpus.rows, uow=uow, context=context)
            stored = uow.repositories.units.count()
        write_frequency_report(effective_report, corpus.header, result.tally)
    finally:
        shutdown()

    log.info(
        f"Finished corpus ingest: rows={result.counters.rows}, stored={stored}, "
        f"issues={len(result.issues)}"
    )
    return result
