"""Merging several documents into one."""

from __future__ import annotations

from typing import Iterable

from .document import PDFDocument
from .utils import get_logger

LOGGER = get_logger("pdf_slicer.combiner")


def merge_all(documents: Iterable[PDFDocument], *, metadata: bool = True) -> PDFDocument:
    """Concatenate *documents* into a new document.

    Documents are taken in the given order and each document's pages in
    ascending index order, each appended at the next insertion position.
    An empty input yields an empty document; a single input yields a copy.
    When *metadata* is set, core metadata of the first non-empty input is
    carried over.
    """

    merged = PDFDocument()
    cursor = 0
    sources = 0
    metadata_source = None

    for document in documents:
        sources += 1
        for index in range(document.page_count):
            page = document.page(index)
            if page is None:
                continue
            merged.insert(page, cursor)
            cursor += 1
        if metadata and metadata_source is None and document.page_count:
            metadata_source = document

    if metadata_source is not None:
        merged.copy_metadata(metadata_source)

    LOGGER.info("Merged %d document(s) into %d page(s)", sources, cursor)
    return merged


__all__ = ["merge_all"]
