"""Routing entrypoint for document text extraction."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping

from docuterm.extraction.detection import detect_format, file_extension
from docuterm.extraction.extractors import TextExtractor, build_default_extractors
from docuterm.extraction.models import EXTRACTABLE_FORMATS, ExtractionError, FailureReason, Format

logger = logging.getLogger(__name__)

LEGACY_PPT_MESSAGE = (
    "Legacy .ppt files are not supported directly. "
    "Please save the file as a .pptx or .pdf and try again."
)


class DocumentTextExtractor:
    """Detect a document's format and return its text through the matching extractor."""

    def __init__(self, extractors: Mapping[Format, TextExtractor] | None = None) -> None:
        self._extractor_map: dict[Format, TextExtractor] = dict(
            build_default_extractors() if extractors is None else extractors
        )

    @property
    def extractor_map(self) -> dict[Format, TextExtractor]:
        """Registered extractors keyed by format."""

        return dict(self._extractor_map)

    def register_extractor(self, fmt: Format, extractor: TextExtractor) -> None:
        """Register or replace the extractor for an extractable format."""

        if fmt not in EXTRACTABLE_FORMATS:
            raise ValueError(f"Format {fmt.value} cannot have an extractor")
        self._extractor_map[fmt] = extractor

    def extract(self, path: str | Path) -> str:
        """Return the text of ``path`` or raise ``ExtractionError``."""

        source = Path(path)
        fmt = detect_format(source)
        extractor = self._resolve(source, fmt)

        try:
            text = extractor.extract(source)
        except ExtractionError:
            raise
        except Exception as exc:
            raise ExtractionError(
                FailureReason.MALFORMED_CONTAINER,
                f"Failed to extract {fmt.value} text: {exc}",
                source,
            ) from exc

        logger.info("Extracted %d characters from %s (%s)", len(text), source.name, fmt.value)
        return text

    def _resolve(self, source: Path, fmt: Format) -> TextExtractor:
        if fmt is Format.UNSUPPORTED_LEGACY:
            raise ExtractionError(FailureReason.UNSUPPORTED_FORMAT, LEGACY_PPT_MESSAGE, source)
        if fmt is Format.UNKNOWN:
            extension = file_extension(source)
            if not extension:
                raise ExtractionError(
                    FailureReason.UNSUPPORTED_FORMAT,
                    f"Could not determine file type: {source.name} has no extension",
                    source,
                )
            raise ExtractionError(FailureReason.UNSUPPORTED_FORMAT, f"Unsupported file type: {extension}", source)

        extractor = self._extractor_map.get(fmt)
        if extractor is None:
            raise ExtractionError(
                FailureReason.UNSUPPORTED_FORMAT,
                f"No extractor registered for {fmt.value} files",
                source,
            )
        return extractor


def extract_document_text(path: str | Path) -> str:
    """Extract text with the default extractor set."""

    return DocumentTextExtractor().extract(path)
