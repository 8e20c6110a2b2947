"""Shared context structures for the ingest pipeline (registries + run state)."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pragmaticon.domain.ingest_pipeline.issues import IssueReporter
from pragmaticon.domain.ingest_pipeline.registry import RegistrySet
from pragmaticon.domain.model import FieldName, Unit

if TYPE_CHECKING:
    from pragmaticon.domain.ports import RegistryStore


@dataclass(slots=True)
class FieldTally:
    """Frequency of every raw value seen per field, in first-seen order."""

    values: dict[FieldName, Counter[str]] = field(default_factory=dict[FieldName, Counter[str]])

    def add(self, field_name: FieldName, value: str) -> None:
        self.values.setdefault(field_name, Counter())[value] += 1

    def frequencies(self, field_name: FieldName) -> list[tuple[str, int]]:
        return list(self.values.get(field_name, Counter()).items())


@dataclass(slots=True)
class IngestCounters:
    rows: int = 0
    units_written: int = 0
    units_failed: int = 0


@dataclass(slots=True)
class PipelineContext:
    """Mutable state of one ingest run, created empty at pipeline start."""

    registries: RegistrySet
    reporter: IssueReporter
    tally: FieldTally = field(default_factory=FieldTally)
    counters: IngestCounters = field(default_factory=IngestCounters)

    @classmethod
    def for_store(
        cls, store: RegistryStore, *, reporter: IssueReporter | None = None
    ) -> PipelineContext:
        """Build an empty context; ``reporter`` keeps issues found before the run."""

        reporter = reporter or IssueReporter()
        return cls(registries=RegistrySet.from_store(store, reporter=reporter), reporter=reporter)


@dataclass(slots=True)
class RowScope:
    """Row-local state while one unit is being decoded."""

    context: PipelineContext
    unit: Unit = field(default_factory=Unit)
    semantics1: str = ""

    @property
    def registries(self) -> RegistrySet:
        return self.context.registries

    @property
    def reporter(self) -> IssueReporter:
        return self.context.reporter
