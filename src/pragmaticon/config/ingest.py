"""Ingest run defaults."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import optional_env_var
from .errors import ConfigurationError

DEFAULT_REPORT_FILENAME: Final[str] = "agg.log"
DEFAULT_CSV_DELIMITER: Final[str] = ","


@dataclass(frozen=True, slots=True)
class IngestConfig:
    report_path: Path = Path(DEFAULT_REPORT_FILENAME)
    csv_delimiter: str = DEFAULT_CSV_DELIMITER


def get_ingest_config() -> IngestConfig:
    report = optional_env_var("PRAGMATICON_REPORT_PATH")
    delimiter = optional_env_var("PRAGMATICON_CSV_DELIMITER") or DEFAULT_CSV_DELIMITER
    if len(delimiter) != 1:
        raise ConfigurationError(
            f"PRAGMATICON_CSV_DELIMITER must be a single character, got {delimiter!r}"
        )
    return IngestConfig(
        report_path=Path(report) if report else Path(DEFAULT_REPORT_FILENAME),
        csv_delimiter=delimiter,
    )
