"""Runtime configuration for the term-extraction client."""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Mapping


DEFAULT_OPENAI_BASE_URL = "https://api.openai.com/v1"
DEFAULT_TERMS_MODEL = "gpt-4o-mini"
DEFAULT_MAX_TOKENS = 4096
DEFAULT_MAX_INPUT_CHARS = 60000


def _parse_positive_int(*, name: str, raw_value: str, minimum: int = 1) -> int:
    try:
        value = int(raw_value)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer") from exc
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}")
    return value


@dataclass(frozen=True, slots=True)
class TermExtractionSettings:
    """Validated language-model settings used by term extraction."""

    api_key: str
    model: str = DEFAULT_TERMS_MODEL
    base_url: str = DEFAULT_OPENAI_BASE_URL
    max_tokens: int = DEFAULT_MAX_TOKENS
    max_input_chars: int = DEFAULT_MAX_INPUT_CHARS

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "TermExtractionSettings":
        source: Mapping[str, str] = os.environ if environ is None else environ

        api_key = source.get("OPENAI_API_KEY", "").strip()
        if not api_key:
            raise ValueError("Missing required term extraction environment variable: OPENAI_API_KEY")

        model = source.get("DOCUTERM_TERMS_MODEL", DEFAULT_TERMS_MODEL).strip()
        if not model:
            raise ValueError("DOCUTERM_TERMS_MODEL cannot be empty")

        base_url = source.get("OPENAI_BASE_URL", DEFAULT_OPENAI_BASE_URL).strip()
        if not base_url:
            raise ValueError("OPENAI_BASE_URL cannot be empty")
        if not (base_url.startswith("http://") or base_url.startswith("https://")):
            raise ValueError("OPENAI_BASE_URL must start with http:// or https://")

        max_tokens_raw = source.get("DOCUTERM_MAX_TOKENS", str(DEFAULT_MAX_TOKENS)).strip()
        max_input_chars_raw = source.get("DOCUTERM_MAX_INPUT_CHARS", str(DEFAULT_MAX_INPUT_CHARS)).strip()
        if not max_tokens_raw:
            raise ValueError("DOCUTERM_MAX_TOKENS cannot be empty")
        if not max_input_chars_raw:
            raise ValueError("DOCUTERM_MAX_INPUT_CHARS cannot be empty")

        return cls(
            api_key=api_key,
            model=model,
            base_url=base_url.rstrip("/"),
            max_tokens=_parse_positive_int(name="DOCUTERM_MAX_TOKENS", raw_value=max_tokens_raw),
            max_input_chars=_parse_positive_int(
                name="DOCUTERM_MAX_INPUT_CHARS",
                raw_value=max_input_chars_raw,
                minimum=1000,
            ),
        )
