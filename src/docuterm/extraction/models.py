"""Canonical types shared by the format detector, extractors and facade."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class Format(Enum):
    """Document format inferred from a file extension."""

    PLAIN_TEXT = "plain_text"
    DOCX = "docx"
    PDF = "pdf"
    PPTX = "pptx"
    UNSUPPORTED_LEGACY = "unsupported_legacy"
    UNKNOWN = "unknown"


EXTRACTABLE_FORMATS = frozenset({Format.PLAIN_TEXT, Format.DOCX, Format.PDF, Format.PPTX})


class FailureReason(Enum):
    IO_ERROR = "io_error"
    UNSUPPORTED_FORMAT = "unsupported_format"
    MALFORMED_CONTAINER = "malformed_container"
    NO_TEXT_FOUND = "no_text_found"


@dataclass(slots=True)
class ExtractionError(Exception):
    """Domain error for every extraction failure.

    ``str(error)`` is the user-facing message and never needs extra wrapping;
    ``reason`` tells callers which kind of failure happened.
    """

    reason: FailureReason
    message: str
    path: Path | None = None

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class SlideUnit:
    """One slide document read out of a presentation archive."""

    name: str
    ordinal: int
    payload: bytes
