"""Structured reporting of non-fatal ingest problems."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger

from pragmaticon.domain.model import IssueKind

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class IngestIssue:
    kind: IssueKind
    field: str
    content: str
    detail: str
    row: int | None = None

    def describe(self) -> str:
        location = f"row {self.row}" if self.row is not None else "corpus"
        return f"{self.kind} in {location}, field {self.field}: {self.detail} ■ {self.content!r}"


@dataclass(slots=True)
class IssueReporter:
    """Log every issue and keep it for the run summary.

    ``row`` is advanced by the runner so decoders never need to pass it.
    """

    row: int | None = None
    issues: list[IngestIssue] = field(default_factory=list[IngestIssue])

    def report(self, kind: IssueKind, field: str, content: str, detail: str) -> IngestIssue:
        issue = IngestIssue(kind=kind, field=field, content=content, detail=detail, row=self.row)
        self.issues.append(issue)
        log.error(issue.describe())
        return issue

    def of_kind(self, kind: IssueKind) -> list[IngestIssue]:
        return [issue for issue in self.issues if issue.kind is kind]
