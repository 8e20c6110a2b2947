"""Domain-level exceptions."""

from __future__ import annotations


class PersistenceError(RuntimeError):
    """Raised by stores when a row cannot be written."""

    def __init__(self, message: str, *, detail: str | None = None) -> None:
        super().__init__(message)
        self.detail = detail or message


class CorpusFormatError(ValueError):
    """Raised when the corpus as a whole cannot be processed (e.g. unusable header)."""
