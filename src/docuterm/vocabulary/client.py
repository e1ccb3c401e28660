"""OpenAI-compatible chat client that turns document text into a vocabulary."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any

from docuterm.vocabulary.config import TermExtractionSettings
from docuterm.vocabulary.models import ExtractedVocabulary, VocabularyFormatError, parse_vocabulary
from docuterm.vocabulary.prompt import build_messages, truncate_text

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TermExtractionError(RuntimeError):
    """Domain error raised for failed term-extraction requests or unusable replies."""

    model: str
    message: str

    def __str__(self) -> str:
        return f"{self.message} (model={self.model})"


def _build_default_client(settings: TermExtractionSettings) -> Any:
    try:
        from openai import OpenAI
    except Exception as exc:  # pragma: no cover - environment-dependent
        raise TermExtractionError(
            model=settings.model,
            message=f"OpenAI SDK unavailable for term extraction client: {exc}",
        ) from exc

    return OpenAI(api_key=settings.api_key, base_url=settings.base_url)


def _first_message_content(response: Any) -> str | None:
    choices = getattr(response, "choices", None)
    if not isinstance(choices, list) or not choices:
        return None

    first = choices[0]
    message = getattr(first, "message", None)
    content = getattr(message, "content", None) if message is not None else None
    if content is None and isinstance(first, dict):
        message_dict = first.get("message", {})
        if isinstance(message_dict, dict):
            content = message_dict.get("content")
    return content if isinstance(content, str) else None


class TermExtractor:
    """Single-shot term extraction: one request, no retries."""

    def __init__(self, settings: TermExtractionSettings, *, client: Any | None = None) -> None:
        self._settings = settings
        self._client = client or _build_default_client(settings)

    @property
    def model(self) -> str:
        return self._settings.model

    def extract_terms(self, text: str) -> ExtractedVocabulary:
        if not text.strip():
            raise ValueError("text cannot be empty")

        request_text, truncated = truncate_text(text, self._settings.max_input_chars)
        if truncated:
            logger.info(
                "Truncated document text from %d to %d characters for term extraction",
                len(text),
                len(request_text),
            )

        try:
            response = self._client.chat.completions.create(
                model=self._settings.model,
                max_tokens=self._settings.max_tokens,
                response_format={"type": "json_object"},
                messages=build_messages(request_text),
            )
        except Exception as exc:
            raise TermExtractionError(model=self.model, message=f"Request failed: {exc}") from exc

        content = _first_message_content(response)
        if content is None:
            raise TermExtractionError(model=self.model, message="No response from model")

        try:
            vocabulary = parse_vocabulary(content)
        except VocabularyFormatError as exc:
            raise TermExtractionError(model=self.model, message=f"Failed to parse terms: {exc}") from exc

        logger.info(
            "Extracted %d term(s) in %d categor(ies) as '%s'",
            vocabulary.term_count,
            len(vocabulary.categories),
            vocabulary.suggested_name,
        )
        return vocabulary
