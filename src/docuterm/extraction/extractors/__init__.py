"""Extractor implementations and contracts."""

from docuterm.extraction.models import Format

from .base import TextExtractor, read_source_bytes
from .docx_extractor import DocxExtractor
from .pdf_extractor import PDFExtractor
from .pptx_extractor import PPTXExtractor
from .text_extractor import PlainTextExtractor


def build_default_extractors() -> dict[Format, TextExtractor]:
    """Return the default format-to-extractor map covering every extractable format."""
    return {
        Format.PLAIN_TEXT: PlainTextExtractor(),
        Format.DOCX: DocxExtractor(),
        Format.PDF: PDFExtractor(),
        Format.PPTX: PPTXExtractor(),
    }


__all__ = [
    "TextExtractor",
    "PlainTextExtractor",
    "DocxExtractor",
    "PDFExtractor",
    "PPTXExtractor",
    "build_default_extractors",
    "read_source_bytes",
]
