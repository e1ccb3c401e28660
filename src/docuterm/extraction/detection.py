"""Extension-based format detection."""

from __future__ import annotations

from pathlib import Path

from docuterm.extraction.models import Format

_EXTENSION_FORMATS: dict[str, Format] = {
    "txt": Format.PLAIN_TEXT,
    "md": Format.PLAIN_TEXT,
    "docx": Format.DOCX,
    "pdf": Format.PDF,
    "pptx": Format.PPTX,
    "ppt": Format.UNSUPPORTED_LEGACY,
}


def file_extension(path: str | Path) -> str:
    """Return the lower-cased extension without its leading dot ("" when absent)."""

    return Path(path).suffix.lower().lstrip(".")


def detect_format(path: str | Path) -> Format:
    """Map a path to its ``Format``; the extension is trusted, content is never sniffed."""

    return _EXTENSION_FORMATS.get(file_extension(path), Format.UNKNOWN)


def supported_extensions() -> list[str]:
    """Extensions that map to an extractable format, dot-prefixed and sorted."""

    return sorted(f".{ext}" for ext, fmt in _EXTENSION_FORMATS.items() if fmt is not Format.UNSUPPORTED_LEGACY)
