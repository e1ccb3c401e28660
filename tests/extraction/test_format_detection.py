from __future__ import annotations

from pathlib import Path

import pytest

from docuterm.extraction.detection import detect_format, file_extension, supported_extensions
from docuterm.extraction.models import Format


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("notes.txt", Format.PLAIN_TEXT),
        ("README.md", Format.PLAIN_TEXT),
        ("report.docx", Format.DOCX),
        ("paper.pdf", Format.PDF),
        ("deck.pptx", Format.PPTX),
        ("old-deck.ppt", Format.UNSUPPORTED_LEGACY),
        ("image.xyz", Format.UNKNOWN),
        ("Makefile", Format.UNKNOWN),
    ],
)
def test_detect_format_maps_extensions(name: str, expected: Format) -> None:
    assert detect_format(Path(name)) is expected


def test_detect_format_is_case_insensitive() -> None:
    assert detect_format("SLIDES.PPTX") is Format.PPTX
    assert detect_format("Letter.DocX") is Format.DOCX
    assert detect_format("LEGACY.PPT") is Format.UNSUPPORTED_LEGACY


def test_detect_format_uses_last_suffix_only() -> None:
    assert detect_format("archive.pdf.zip") is Format.UNKNOWN
    assert detect_format("notes.backup.md") is Format.PLAIN_TEXT


def test_file_extension_strips_dot_and_lowercases() -> None:
    assert file_extension("a/b/Deck.PPTX") == "pptx"
    assert file_extension("no_extension") == ""
    assert file_extension(".hidden") == ""


def test_supported_extensions_exclude_legacy_ppt() -> None:
    extensions = supported_extensions()

    assert extensions == [".docx", ".md", ".pdf", ".pptx", ".txt"]
    assert ".ppt" not in extensions
