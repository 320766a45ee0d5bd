"""Deleting and extracting pages of a single document."""

from __future__ import annotations

from typing import Iterable, Tuple

from .document import PDFDocument
from .selection import SelectionSet
from .types import EditResult
from .utils import get_logger

LOGGER = get_logger("pdf_slicer.editor")


def delete_pages(document: PDFDocument, indices: Iterable[int]) -> EditResult:
    """Remove the pages at *indices* from *document* in place.

    Pages are removed from the highest index down so that pending indices
    still point at the pages they named. Indices outside the document at the
    moment of removal are skipped. When *indices* is a :class:`SelectionSet`
    it is cleared afterwards, since its indices no longer match the document.
    """

    pending = sorted(set(indices), reverse=True)
    result = EditResult(requested=len(pending))

    for index in pending:
        if document.remove(index):
            result.applied.append(index)
        else:
            result.skipped.append(index)

    if isinstance(indices, SelectionSet):
        indices.select_none()

    LOGGER.debug(
        "Deleted %d page(s) from %s, skipped %s",
        result.applied_count,
        document.display_name,
        result.skipped,
    )
    return result


def extract_pages_with_result(
    document: PDFDocument, indices: Iterable[int]
) -> Tuple[PDFDocument, EditResult]:
    """Copy the pages at *indices* into a new document in reading order."""

    wanted = sorted(set(indices))
    result = EditResult(requested=len(wanted))
    extracted = PDFDocument()

    cursor = 0
    for index in wanted:
        page = document.page(index)
        if page is None:
            result.skipped.append(index)
            continue
        extracted.insert(page, cursor)
        cursor += 1
        result.applied.append(index)

    if cursor:
        extracted.copy_metadata(document, title_suffix=" - Extract")
    LOGGER.debug("Extracted %d page(s) from %s", cursor, document.display_name)
    return extracted, result


def extract_pages(document: PDFDocument, indices: Iterable[int]) -> PDFDocument:
    """Return a new document holding the pages at *indices*, ascending.

    The source document is left untouched. Empty *indices* yield an empty
    document.
    """

    extracted, _ = extract_pages_with_result(document, indices)
    return extracted


__all__ = ["delete_pages", "extract_pages", "extract_pages_with_result"]
