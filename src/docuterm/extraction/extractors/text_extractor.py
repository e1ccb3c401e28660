"""Plain-text extractor for TXT and Markdown sources."""

from __future__ import annotations

from pathlib import Path

from charset_normalizer import from_bytes

from docuterm.extraction.extractors.base import read_source_bytes
from docuterm.extraction.models import ExtractionError, FailureReason


def _guess_encoding(raw: bytes) -> str | None:
    best = from_bytes(raw).best()
    if best and best.encoding:
        return best.encoding
    return None


class PlainTextExtractor:
    """Return UTF-8 text files verbatim."""

    def extract(self, path: Path) -> str:
        raw = read_source_bytes(path)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            message = f"Failed to read file: stream did not contain valid UTF-8 ({exc.reason} at byte {exc.start})"
            guessed = _guess_encoding(raw)
            if guessed and guessed.replace("_", "-").lower() not in {"utf-8", "ascii"}:
                message += f"; the file looks like {guessed}, re-save it as UTF-8"
            raise ExtractionError(FailureReason.IO_ERROR, message, path) from exc
