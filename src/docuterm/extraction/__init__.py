"""Document text extraction interfaces."""

from .detection import detect_format, supported_extensions
from .extractor import LEGACY_PPT_MESSAGE, DocumentTextExtractor, extract_document_text
from .models import ExtractionError, FailureReason, Format

__all__ = [
    "DocumentTextExtractor",
    "ExtractionError",
    "FailureReason",
    "Format",
    "LEGACY_PPT_MESSAGE",
    "detect_format",
    "extract_document_text",
    "supported_extensions",
]
