"""Domain-term extraction from document text."""

from .client import TermExtractionError, TermExtractor
from .config import TermExtractionSettings
from .models import ExtractedCategory, ExtractedVocabulary, VocabularyFormatError, parse_vocabulary
from .prompt import build_messages, truncate_text

__all__ = [
    "ExtractedCategory",
    "ExtractedVocabulary",
    "TermExtractionError",
    "TermExtractionSettings",
    "TermExtractor",
    "VocabularyFormatError",
    "build_messages",
    "parse_vocabulary",
    "truncate_text",
]
