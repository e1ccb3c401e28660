"""Shared extractor contract for per-format text extraction."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from docuterm.extraction.models import ExtractionError, FailureReason


@runtime_checkable
class TextExtractor(Protocol):
    """Protocol that every format extractor must implement."""

    def extract(self, path: Path) -> str:
        """Return the document's text as one linear string."""


def read_source_bytes(path: Path) -> bytes:
    """Read the complete source payload, mapping OS failures to ``IO_ERROR``."""

    try:
        return path.read_bytes()
    except OSError as exc:
        raise ExtractionError(FailureReason.IO_ERROR, f"Failed to read file: {exc}", path) from exc
