"""Prompt and input shaping for domain-term extraction requests."""

from __future__ import annotations

EXTRACTION_PROMPT = """You extract domain-specific terms from documents to improve speech-to-text accuracy.

Extract terms in these categories:
1. Drug Names: generic names, brand names, drug classes
2. Medical Terms: conditions, procedures, biomarkers
3. Acronyms: medical and business abbreviations
4. Industry Terms: specialized terminology
5. Organizations: company names, institutions

Guidelines:
- Focus on terms speech-to-text might misrecognize
- Include multi-word phrases (up to 6 words)
- Exclude common words like "patient", "treatment"
- Prioritize proper nouns, acronyms, drug names

Return JSON:
{
  "categories": [
    {"name": "Drug Names", "terms": ["term1", "term2"]},
    {"name": "Medical Terms", "terms": [...]}
  ],
  "suggested_name": "Name based on document content"
}

Only return valid JSON. Omit empty categories. Aim for 20-150 terms."""

USER_PREFIX = "Extract domain-specific terms from this document:\n\n"


def truncate_text(text: str, max_chars: int) -> tuple[str, bool]:
    """Cut ``text`` to at most ``max_chars`` characters; report whether it was cut."""

    if max_chars < 1:
        raise ValueError("max_chars must be >= 1")
    if len(text) <= max_chars:
        return text, False
    return text[:max_chars], True


def build_messages(text: str) -> list[dict[str, str]]:
    return [
        {"role": "system", "content": EXTRACTION_PROMPT},
        {"role": "user", "content": f"{USER_PREFIX}{text}"},
    ]
