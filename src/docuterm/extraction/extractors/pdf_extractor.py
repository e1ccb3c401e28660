"""PDF extractor delegating to the pymupdf text layer."""

from __future__ import annotations

import logging
from pathlib import Path

import pymupdf

from docuterm.extraction.extractors.base import read_source_bytes
from docuterm.extraction.models import ExtractionError, FailureReason

logger = logging.getLogger(__name__)


class PDFExtractor:
    """Concatenate the embedded text of every page in page order.

    PDF has no paragraph model, so no markers are added. Image-only pages
    contribute nothing; an entirely scanned document yields an empty string.
    """

    def extract(self, path: Path) -> str:
        raw = read_source_bytes(path)
        try:
            with pymupdf.open(stream=raw, filetype="pdf") as doc:
                page_texts = [page.get_text("text") for page in doc]
        except Exception as exc:
            raise ExtractionError(
                FailureReason.MALFORMED_CONTAINER,
                f"Failed to extract PDF text: {exc}",
                path,
            ) from exc

        text = "".join(page_texts)
        if not text.strip():
            logger.info("PDF has no embedded text layer (%d page(s)): %s", len(page_texts), path)
        return text
