"""Mutable PDF document built on a :class:`pypdf.PdfWriter` page list."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from pypdf import PageObject, PdfReader, PdfWriter
from pypdf.errors import PdfReadError

from .exceptions import DocumentWriteError, EncryptedPDFError, InvalidPDFError
from .types import DocumentInfo, SaveResult
from .utils import PathLike, get_logger

LOGGER = get_logger("pdf_slicer.document")

PRODUCER = "PDF Slicer"


def page_bounds(page: PageObject) -> Tuple[float, float]:
    """Return the displayed ``(width, height)`` of *page* in points."""

    box = page.mediabox
    width, height = float(box.width), float(box.height)
    if (page.rotation or 0) % 180 == 90:
        return height, width
    return width, height


class PDFDocument:
    """An ordered, mutable sequence of pages.

    Pages inserted from another document are copied into this document's
    writer, so the source keeps its own page. Indices shift down after
    :meth:`remove`.
    """

    def __init__(
        self,
        writer: Optional[PdfWriter] = None,
        *,
        source: Optional[Path] = None,
        file_size: int = 0,
    ) -> None:
        self._writer = writer if writer is not None else PdfWriter()
        self.source = source
        self.file_size = file_size

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    @classmethod
    def load(cls, pdf_path: PathLike, password: Optional[str] = None) -> "PDFDocument":
        path = Path(pdf_path)
        if not path.exists() or not path.is_file():
            raise InvalidPDFError(f"PDF file not found: {pdf_path}")

        try:
            raw_bytes = path.read_bytes()
        except OSError as exc:
            raise InvalidPDFError(f"Unable to read PDF file: {pdf_path}. Error: {exc}") from exc

        try:
            reader = PdfReader(io.BytesIO(raw_bytes))
        except PdfReadError as exc:
            raise InvalidPDFError(f"Corrupted or invalid PDF file: {pdf_path}. Error: {exc}") from exc
        except Exception as exc:
            raise InvalidPDFError(f"Unexpected error reading PDF: {pdf_path}. Error: {exc}") from exc

        if reader.is_encrypted:
            if password:
                if reader.decrypt(password) == 0:
                    raise EncryptedPDFError("Failed to decrypt PDF with supplied password.")
            else:
                raise EncryptedPDFError("PDF is encrypted. Supply a password to process this file.")

        try:
            writer = PdfWriter(clone_from=reader)
        except Exception as exc:
            raise InvalidPDFError(f"Unable to read pages from PDF: {pdf_path}. Error: {exc}") from exc

        LOGGER.debug("Loaded %s with %d page(s)", path, len(writer.pages))
        return cls(writer, source=path.resolve(), file_size=len(raw_bytes))

    # ------------------------------------------------------------------
    # Page access
    # ------------------------------------------------------------------
    @property
    def page_count(self) -> int:
        return len(self._writer.pages)

    def __len__(self) -> int:
        return self.page_count

    @property
    def display_name(self) -> str:
        return self.source.name if self.source else "Untitled.pdf"

    def page(self, index: int) -> Optional[PageObject]:
        """Return the page at *index*, or ``None`` when out of range."""

        if 0 <= index < self.page_count:
            return self._writer.pages[index]
        return None

    def iter_pages(self) -> Iterator[PageObject]:
        for index in range(self.page_count):
            yield self._writer.pages[index]

    def page_sizes(self) -> List[Tuple[float, float]]:
        return [page_bounds(page) for page in self.iter_pages()]

    # ------------------------------------------------------------------
    # Structural edits
    # ------------------------------------------------------------------
    def insert(self, page: PageObject, index: int) -> PageObject:
        """Insert a copy of *page* at *index* (clamped to ``[0, page_count]``)."""

        index = max(0, min(index, self.page_count))
        return self._writer.insert_page(page, index)

    def append(self, page: PageObject) -> PageObject:
        return self._writer.add_page(page)

    def remove(self, index: int) -> bool:
        """Remove the page at *index*; return ``False`` when out of range."""

        if not 0 <= index < self.page_count:
            return False
        del self._writer.pages[index]
        return True

    def copy(self) -> "PDFDocument":
        duplicate = PDFDocument(source=self.source)
        for page in self.iter_pages():
            duplicate.append(page)
        duplicate.copy_metadata(self)
        return duplicate

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------
    @property
    def metadata(self) -> Dict[str, str]:
        info = self._writer.metadata
        if not info:
            return {}
        return {str(key): str(value) for key, value in info.items() if value is not None}

    def set_metadata(self, metadata: Mapping[str, Any]) -> None:
        cleaned = {key: str(value) for key, value in metadata.items() if value is not None}
        if cleaned:
            self._writer.add_metadata(cleaned)

    def copy_metadata(self, other: "PDFDocument", *, title_suffix: str = "") -> None:
        """Copy core metadata from *other*, appending *title_suffix* to the title."""

        source = other.metadata
        metadata_dict: Dict[str, str] = {}
        for key in ("/Title", "/Author", "/Subject", "/Creator"):
            if source.get(key):
                metadata_dict[key] = source[key]
        if title_suffix and "/Title" in metadata_dict:
            metadata_dict["/Title"] = f"{metadata_dict['/Title']}{title_suffix}"
        metadata_dict.setdefault("/Producer", PRODUCER)
        self.set_metadata(metadata_dict)

    # ------------------------------------------------------------------
    # Storage
    # ------------------------------------------------------------------
    def write(self, destination: PathLike) -> bool:
        """Write the document to *destination*; return whether it succeeded."""

        return self.save_with_result(destination).success

    def save_with_result(self, destination: PathLike) -> SaveResult:
        path = Path(destination)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("wb") as handle:
                self._writer.write(handle)
        except Exception as exc:
            LOGGER.error("Failed to write PDF to %s: %s", path, exc)
            return SaveResult(success=False, path=path, page_count=self.page_count, error=str(exc))

        LOGGER.info("Wrote %d page(s) to %s", self.page_count, path)
        return SaveResult(success=True, path=path, page_count=self.page_count)

    def save(self, destination: PathLike) -> Path:
        """Write the document to *destination*, raising on failure."""

        result = self.save_with_result(destination)
        if not result.success:
            raise DocumentWriteError(f"Failed to write PDF to {result.path}: {result.error}")
        return result.path

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------
    def info(self) -> DocumentInfo:
        metadata = self.metadata
        return DocumentInfo(
            num_pages=self.page_count,
            source=self.source,
            file_size=self.file_size,
            title=metadata.get("/Title"),
            author=metadata.get("/Author"),
            page_sizes=self.page_sizes(),
        )

    def __repr__(self) -> str:
        return f"PDFDocument(source={self.display_name!r}, pages={self.page_count})"


__all__ = ["PDFDocument", "page_bounds", "PRODUCER"]
