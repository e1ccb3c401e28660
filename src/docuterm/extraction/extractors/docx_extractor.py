"""DOCX extractor emitting one output line per body paragraph."""

from __future__ import annotations

from io import BytesIO
from pathlib import Path

from docx import Document as DocxDocument
from docx.oxml.ns import qn
from docx.text.paragraph import Paragraph
from docx.text.run import Run

from docuterm.extraction.extractors.base import read_source_bytes
from docuterm.extraction.models import ExtractionError, FailureReason

_TEXT_TAG = qn("w:t")


def _run_text(run: Run) -> str:
    # Only <w:t> nodes count; tabs, breaks and deleted text are not run text.
    return "".join(node.text or "" for node in run._r.iter(_TEXT_TAG))


def _paragraph_text(paragraph: Paragraph) -> str:
    return "".join(_run_text(run) for run in paragraph.runs)


class DocxExtractor:
    """Walk paragraphs, then runs, then text nodes in document order.

    Formatting splits a sentence into several runs (bold, italic, spell-check
    marks); those are merged back with no separator so the output carries the
    text only. Every paragraph ends with a newline, including empty ones.
    """

    def extract(self, path: Path) -> str:
        raw = read_source_bytes(path)
        try:
            document = DocxDocument(BytesIO(raw))
        except Exception as exc:
            raise ExtractionError(
                FailureReason.MALFORMED_CONTAINER,
                f"Failed to parse docx: {exc}",
                path,
            ) from exc

        return "".join(f"{_paragraph_text(paragraph)}\n" for paragraph in document.paragraphs)
