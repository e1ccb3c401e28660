from __future__ import annotations

from pathlib import Path

import pytest

from docuterm.extraction.extractors.text_extractor import PlainTextExtractor
from docuterm.extraction.models import ExtractionError, FailureReason


def test_plain_text_round_trips_exactly(tmp_path: Path) -> None:
    content = "Line one\r\nLine two\n\n  indented\ttab · ünïcödé 日本語\n"
    sample = tmp_path / "notes.txt"
    sample.write_bytes(content.encode("utf-8"))

    assert PlainTextExtractor().extract(sample) == content


def test_markdown_markup_is_not_stripped(tmp_path: Path) -> None:
    content = "# Heading\n\n* **bold** item\n"
    sample = tmp_path / "notes.md"
    sample.write_text(content, encoding="utf-8", newline="")

    assert PlainTextExtractor().extract(sample) == content


def test_empty_file_is_an_empty_success(tmp_path: Path) -> None:
    sample = tmp_path / "empty.txt"
    sample.write_bytes(b"")

    assert PlainTextExtractor().extract(sample) == ""


def test_invalid_utf8_is_reported_as_io_error(tmp_path: Path) -> None:
    sample = tmp_path / "latin1.txt"
    sample.write_bytes("Café au lait, crème brûlée et pâté.\n".encode("latin-1"))

    with pytest.raises(ExtractionError, match="valid UTF-8") as excinfo:
        PlainTextExtractor().extract(sample)

    assert excinfo.value.reason is FailureReason.IO_ERROR
    assert excinfo.value.path == sample


def test_missing_file_is_reported_as_io_error(tmp_path: Path) -> None:
    with pytest.raises(ExtractionError, match="Failed to read file") as excinfo:
        PlainTextExtractor().extract(tmp_path / "missing.txt")

    assert excinfo.value.reason is FailureReason.IO_ERROR
