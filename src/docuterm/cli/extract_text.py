"""CLI command for document text extraction with a JSON report."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from docuterm.extraction import DocumentTextExtractor, ExtractionError, detect_format, supported_extensions
from docuterm.vocabulary.prompt import truncate_text

LOGGER = logging.getLogger(__name__)


def _collect_inputs(target: Path) -> list[Path]:
    if target.is_file():
        return [target]
    if target.is_dir():
        suffixes = set(supported_extensions())
        return sorted(path for path in target.rglob("*") if path.is_file() and path.suffix.lower() in suffixes)
    # Let the extractor report the missing path.
    return [target]


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    parser = argparse.ArgumentParser(description="Extract plain text from TXT, Markdown, DOCX, PDF and PPTX files")
    parser.add_argument("--path", required=True, help="Source file or directory")
    parser.add_argument(
        "--max-chars",
        type=int,
        default=None,
        help="Truncate each extracted text to this many characters in the report",
    )
    args = parser.parse_args(argv)
    if args.max_chars is not None and args.max_chars < 1:
        parser.error("--max-chars must be >= 1")

    source_path = Path(args.path)
    extractor = DocumentTextExtractor()

    results: list[dict[str, object]] = []
    errors: list[dict[str, str]] = []

    for file_path in _collect_inputs(source_path):
        try:
            text = extractor.extract(file_path)
        except ExtractionError as exc:
            LOGGER.warning("Extraction failed for %s: %s", file_path, exc)
            errors.append({"source_path": str(file_path), "reason": exc.reason.value, "error": str(exc)})
            continue

        truncated = False
        if args.max_chars is not None:
            text, truncated = truncate_text(text, args.max_chars)

        results.append(
            {
                "source_path": str(file_path),
                "format": detect_format(file_path).value,
                "char_count": len(text),
                "truncated": truncated,
                "text": text,
            }
        )

    payload = {
        "path": str(source_path),
        "processed": len(results),
        "results": results,
        "errors": errors,
    }
    print(json.dumps(payload, ensure_ascii=True, indent=2))
    return 0 if not errors else 1


if __name__ == "__main__":
    raise SystemExit(main())
