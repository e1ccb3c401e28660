"""CLI entrypoint: extract a document's text and ask the model for domain terms."""

from __future__ import annotations

import argparse
from dataclasses import replace
import json
import logging
from pathlib import Path

from dotenv import load_dotenv

from docuterm.extraction import ExtractionError, extract_document_text
from docuterm.vocabulary import TermExtractionError, TermExtractionSettings, TermExtractor


load_dotenv()

LOGGER = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build a speech-recognition vocabulary from a document")
    parser.add_argument("--path", required=True, help="Document to read (txt, md, docx, pdf, pptx)")
    parser.add_argument("--model", default=None, help="Override DOCUTERM_TERMS_MODEL")
    return parser.parse_args(argv)


def _build_extractor(settings: TermExtractionSettings) -> TermExtractor:
    return TermExtractor(settings)


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    args = _parse_args(argv)
    source_path = Path(args.path)

    try:
        settings = TermExtractionSettings.from_env()
    except ValueError as exc:
        LOGGER.error("Invalid term extraction configuration: %s", exc)
        return 2
    if args.model is not None:
        model = args.model.strip()
        if not model:
            LOGGER.error("Invalid term extraction configuration: --model cannot be empty")
            return 2
        settings = replace(settings, model=model)

    try:
        text = extract_document_text(source_path)
        vocabulary = _build_extractor(settings).extract_terms(text)
    except ExtractionError as exc:
        print(json.dumps({"path": str(source_path), "reason": exc.reason.value, "error": str(exc)}, ensure_ascii=True, indent=2))
        return 1
    except (TermExtractionError, ValueError) as exc:
        print(json.dumps({"path": str(source_path), "error": str(exc)}, ensure_ascii=True, indent=2))
        return 1

    payload = {"path": str(source_path), "term_count": vocabulary.term_count, **vocabulary.to_dict()}
    print(json.dumps(payload, ensure_ascii=True, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
