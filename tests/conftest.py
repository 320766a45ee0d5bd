from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, List, Optional

import pytest
from pypdf import PdfWriter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pdf_slicer.document import PDFDocument  # noqa: E402

BASE_WIDTH = 100


def build_pdf(path: Path, pages: int, *, base_width: int = BASE_WIDTH, height: int = 200,
              title: Optional[str] = None) -> Path:
    """Write a PDF whose page ``i`` is ``base_width + i`` points wide."""

    writer = PdfWriter()
    for index in range(pages):
        writer.add_blank_page(width=base_width + index, height=height)
    if title is not None:
        writer.add_metadata({"/Title": title, "/Author": "pdf-slicer-tests"})
    with path.open("wb") as handle:
        writer.write(handle)
    return path


def page_widths(document: PDFDocument) -> List[int]:
    return [round(width) for width, _ in document.page_sizes()]


@pytest.fixture()
def pdf_factory(tmp_path: Path) -> Callable[..., Path]:
    def _create(filename: str, pages: int = 5, **kwargs) -> Path:
        return build_pdf(tmp_path / filename, pages, **kwargs)

    return _create


@pytest.fixture()
def doc_factory(pdf_factory: Callable[..., Path]) -> Callable[..., PDFDocument]:
    def _create(pages: int = 5, *, base_width: int = BASE_WIDTH, filename: Optional[str] = None,
                **kwargs) -> PDFDocument:
        name = filename or f"doc_{base_width}_{pages}.pdf"
        return PDFDocument.load(pdf_factory(name, pages, base_width=base_width, **kwargs))

    return _create


@pytest.fixture()
def sample_pdf(pdf_factory: Callable[..., Path]) -> Path:
    return pdf_factory("sample.pdf", 5, title="Sample")


@pytest.fixture()
def sample_document(sample_pdf: Path) -> PDFDocument:
    return PDFDocument.load(sample_pdf)


@pytest.fixture()
def widths() -> Callable[[PDFDocument], List[int]]:
    return page_widths
