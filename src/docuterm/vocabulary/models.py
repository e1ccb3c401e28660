"""Vocabulary structures returned by the term-extraction model."""

from __future__ import annotations

from dataclasses import dataclass, field
import json
from typing import Any


class VocabularyFormatError(ValueError):
    """Raised when a model reply does not match the vocabulary JSON shape."""


@dataclass(slots=True)
class ExtractedCategory:
    name: str
    terms: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        return {"name": self.name, "terms": list(self.terms)}


@dataclass(slots=True)
class ExtractedVocabulary:
    """Categorised domain terms plus a suggested vocabulary name."""

    categories: list[ExtractedCategory]
    suggested_name: str

    @property
    def term_count(self) -> int:
        return sum(len(category.terms) for category in self.categories)

    def to_dict(self) -> dict[str, object]:
        return {
            "categories": [category.to_dict() for category in self.categories],
            "suggested_name": self.suggested_name,
        }


def _parse_category(raw: Any) -> ExtractedCategory:
    if not isinstance(raw, dict):
        raise VocabularyFormatError("category entries must be objects")
    name = raw.get("name")
    terms = raw.get("terms")
    if not isinstance(name, str):
        raise VocabularyFormatError("category is missing string field 'name'")
    if not isinstance(terms, list) or not all(isinstance(term, str) for term in terms):
        raise VocabularyFormatError(f"category '{name}' must carry a list of string 'terms'")
    return ExtractedCategory(name=name, terms=terms)


def parse_vocabulary(content: str) -> ExtractedVocabulary:
    """Parse the model's JSON reply into an ``ExtractedVocabulary``."""

    try:
        payload = json.loads(content)
    except json.JSONDecodeError as exc:
        raise VocabularyFormatError(f"reply is not valid JSON: {exc}") from exc

    if not isinstance(payload, dict):
        raise VocabularyFormatError("reply must be a JSON object")

    categories = payload.get("categories")
    suggested_name = payload.get("suggested_name")
    if not isinstance(categories, list):
        raise VocabularyFormatError("reply is missing list field 'categories'")
    if not isinstance(suggested_name, str):
        raise VocabularyFormatError("reply is missing string field 'suggested_name'")

    return ExtractedVocabulary(
        categories=[_parse_category(item) for item in categories],
        suggested_name=suggested_name,
    )
