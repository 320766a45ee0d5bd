"""Splitting a document into fixed-size parts."""

from __future__ import annotations

from typing import List, Tuple

from .document import PDFDocument
from .utils import get_logger

LOGGER = get_logger("pdf_slicer.splitter")

MIN_CHUNK_SIZE = 2


def chunk_bounds(page_count: int, n: int) -> List[Tuple[int, int]]:
    """Return ``[start, end)`` bounds of consecutive chunks of up to *n* pages."""

    if n < MIN_CHUNK_SIZE or page_count <= 0:
        return []
    return [(start, min(start + n, page_count)) for start in range(0, page_count, n)]


def split_every(document: PDFDocument, n: int) -> List[PDFDocument]:
    """Partition *document* into parts of *n* pages, the last holding the remainder.

    ``n < 2`` is treated as a no-op and returns an empty list, as does an
    empty document. The source is not modified.
    """

    bounds = chunk_bounds(document.page_count, n)
    if not bounds:
        LOGGER.debug("Nothing to split for %s every %d page(s)", document.display_name, n)
        return []

    parts: List[PDFDocument] = []
    for start, end in bounds:
        part = PDFDocument()
        cursor = 0
        for index in range(start, end):
            page = document.page(index)
            if page is None:
                continue
            part.insert(page, cursor)
            cursor += 1
        part.copy_metadata(document, title_suffix=f" - Pages {start + 1}-{end}")
        parts.append(part)

    LOGGER.info("Split %s into %d part(s) of up to %d page(s)", document.display_name, len(parts), n)
    return parts


__all__ = ["split_every", "chunk_bounds", "MIN_CHUNK_SIZE"]
