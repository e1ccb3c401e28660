"""PPTX extractor walking slide documents inside the presentation archive.

A ``.pptx`` file is a ZIP container holding one XML document per slide at
``ppt/slides/slide<N>.xml``. Slides are emitted in numeric order (slide2
before slide10), each preceded by a ``--- SLIDE <member-name> ---`` marker.
Slides without text are dropped; a deck where every slide is empty is a
``NO_TEXT_FOUND`` failure rather than an empty result.
"""

from __future__ import annotations

from io import BytesIO
import logging
from pathlib import Path
import re
from typing import Iterable, Iterator
from zipfile import BadZipFile, ZipFile
import zlib

from lxml import etree

from docuterm.extraction.extractors.base import read_source_bytes
from docuterm.extraction.models import ExtractionError, FailureReason, SlideUnit

logger = logging.getLogger(__name__)

SLIDE_PREFIX = "ppt/slides/slide"
SLIDE_SUFFIX = ".xml"
NO_TEXT_MESSAGE = "No text found in presentation slides."

_ORDINAL_RE = re.compile(r"[0-9]+")
_FEED_CHUNK_SIZE = 16 * 1024


def is_slide_member(name: str) -> bool:
    """Return True for slide documents; layouts, masters and rels never match."""

    return name.startswith(SLIDE_PREFIX) and name.endswith(SLIDE_SUFFIX)


def slide_ordinal(name: str) -> int:
    """Parse the slide number between prefix and suffix, falling back to 0.

    The fallback keeps extraction going for oddly named members; such slides
    sort to the front and keep their archive order among themselves.
    """

    digits = name[len(SLIDE_PREFIX) : len(name) - len(SLIDE_SUFFIX)]
    if _ORDINAL_RE.fullmatch(digits):
        return int(digits)
    logger.debug("Slide member has no numeric ordinal, using 0: %s", name)
    return 0


def order_slides(units: Iterable[SlideUnit]) -> list[SlideUnit]:
    """Sort slides by ordinal; ``sorted`` is stable so ties keep archive order."""

    return sorted(units, key=lambda unit: unit.ordinal)


class _TextNodeTarget:
    """lxml parser target turning SAX callbacks into whole, trimmed text nodes.

    libxml2 may report one text node through several ``data`` calls (entity
    references, feed boundaries), so pieces are buffered until the next
    markup event.
    """

    def __init__(self) -> None:
        self._pending: list[str] = []
        self._ready: list[str] = []

    def start(self, tag: str, attrib: dict[str, str]) -> None:
        self._flush()

    def end(self, tag: str) -> None:
        self._flush()

    def data(self, data: str) -> None:
        self._pending.append(data)

    def comment(self, text: str) -> None:
        self._flush()

    def pi(self, target: str, data: str | None = None) -> None:
        self._flush()

    def close(self) -> None:
        self._flush()

    def drain(self, *, flush: bool = False) -> list[str]:
        if flush:
            self._flush()
        ready, self._ready = self._ready, []
        return ready

    def _flush(self) -> None:
        if not self._pending:
            return
        text = "".join(self._pending).strip()
        self._pending = []
        if text:
            self._ready.append(text)


def iter_text_nodes(payload: bytes, *, chunk_size: int = _FEED_CHUNK_SIZE) -> Iterator[str]:
    """Lazily yield the unescaped text nodes of an XML payload in document order.

    A syntax error ends the sequence: nodes seen before the error are still
    yielded, nothing after it is.
    """

    target = _TextNodeTarget()
    parser = etree.XMLParser(
        target=target,
        resolve_entities=False,
        no_network=True,
        load_dtd=False,
        huge_tree=False,
    )

    for offset in range(0, len(payload), chunk_size):
        try:
            parser.feed(payload[offset : offset + chunk_size])
        except etree.XMLSyntaxError as exc:
            logger.warning("Stopped parsing slide XML at malformed markup: %s", exc)
            yield from target.drain(flush=True)
            return
        yield from target.drain()

    try:
        parser.close()
    except etree.XMLSyntaxError as exc:
        logger.warning("Slide XML ended in malformed markup: %s", exc)
    yield from target.drain(flush=True)


def slide_text(payload: bytes) -> str:
    """Fold a slide's text nodes into one string, each node followed by a space."""

    return "".join(f"{node} " for node in iter_text_nodes(payload))


def format_slide_block(name: str, text: str) -> str:
    return f"--- SLIDE {name} ---\n{text}\n"


class PPTXExtractor:
    """Extract slide text from PowerPoint archives in natural slide order."""

    def extract(self, path: Path) -> str:
        raw = read_source_bytes(path)
        try:
            archive = ZipFile(BytesIO(raw), "r")
        except (BadZipFile, OSError, ValueError) as exc:
            raise ExtractionError(
                FailureReason.MALFORMED_CONTAINER,
                f"Failed to read pptx as zip: {exc}",
                path,
            ) from exc

        blocks: list[str] = []
        with archive:
            for unit in self._read_slides(archive, path):
                text = slide_text(unit.payload)
                if not text.strip():
                    logger.debug("Skipping slide without text: %s", unit.name)
                    continue
                blocks.append(format_slide_block(unit.name, text))

        if not blocks:
            raise ExtractionError(FailureReason.NO_TEXT_FOUND, NO_TEXT_MESSAGE, path)
        return "".join(blocks)

    def _read_slides(self, archive: ZipFile, path: Path) -> list[SlideUnit]:
        units: list[SlideUnit] = []
        for name in archive.namelist():
            if not is_slide_member(name):
                continue
            try:
                payload = archive.read(name)
            except (BadZipFile, OSError, RuntimeError, zlib.error) as exc:
                raise ExtractionError(
                    FailureReason.MALFORMED_CONTAINER,
                    f"Failed to read slide {name}: {exc}",
                    path,
                ) from exc
            units.append(SlideUnit(name=name, ordinal=slide_ordinal(name), payload=payload))
        return order_slides(units)
