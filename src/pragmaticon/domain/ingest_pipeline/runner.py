"""Entry point for running the ingest pipeline over a whole corpus."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from pragmaticon.domain.ingest_pipeline.assembler import assemble_unit
from pragmaticon.domain.ingest_pipeline.context import (
    FieldTally,
    IngestCounters,
    PipelineContext,
)
from pragmaticon.domain.model import FieldName, IssueKind, PersistenceError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from pragmaticon.domain.ingest_pipeline.issues import IngestIssue
    from pragmaticon.domain.model import RegistryName, Unit
    from pragmaticon.domain.ports import CorpusUnitOfWork

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class IngestResult:
    counters: IngestCounters
    registry_sizes: dict[RegistryName, int]
    issues: tuple[IngestIssue, ...]
    tally: FieldTally

    def issue_counts(self) -> dict[IssueKind, int]:
        return dict(Counter(issue.kind for issue in self.issues))


def run_ingest_pipeline(
    rows: Iterable[Mapping[FieldName, str]],
    *,
    uow: CorpusUnitOfWork,
    context: PipelineContext | None = None,
) -> IngestResult:
    """Normalize ``rows`` strictly one after another and persist one unit per row.

    Every problem is reported and processing moves on; nothing short of an
    exception from outside the pipeline stops the run.
    """

    repos = uow.repositories
    active = context or PipelineContext.for_store(repos.registries)
    counters = active.counters

    for row_number, row in enumerate(rows, start=1):
        active.reporter.row = row_number
        counters.rows += 1
        unit = assemble_unit(row, active)
        if unit.phrase_id is None:
            counters.units_failed += 1
            continue
        if _write_unit(unit, uow, active):
            counters.units_written += 1
        else:
            counters.units_failed += 1
    active.reporter.row = None

    uow.commit()
    log.info(
        "Ingest finished: rows=%s, units=%s, failed=%s, registries=%s",
        counters.rows,
        counters.units_written,
        counters.units_failed,
        active.registries.sizes(),
    )
    return IngestResult(
        counters=counters,
        registry_sizes=active.registries.sizes(),
        issues=tuple(active.reporter.issues),
        tally=active.tally,
    )


def _write_unit(unit: Unit, uow: CorpusUnitOfWork, context: PipelineContext) -> bool:
    try:
        unit.id = uow.repositories.units.add(unit)
    except PersistenceError as exc:
        context.reporter.report(
            IssueKind.PERSISTENCE_CONFLICT, FieldName.UNIT, str(unit.phrase_id), exc.detail
        )
        return False
    return True
