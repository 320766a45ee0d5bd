"""
PDF Slicer - page selection, editing, merging, splitting and raster compression.

Quick Start:
    >>> from pdf_slicer import PDFDocument, SelectionSet, extract_pages
    >>> document = PDFDocument.load('input.pdf')
    >>> selection = SelectionSet()
    >>> result = selection.union_range('1-3,5', document.page_count)
    >>> extract_pages(document, selection).write('selected.pdf')

Engine:
    - parse_range_spec / parse_page_indices: range text to page indices
    - SelectionSet: all/none/invert/union-with-range selection algebra
    - delete_pages / extract_pages: index-safe page editing
    - merge_all: order-preserving concatenation
    - split_every: fixed-size parts
    - RasterCompressor / rasterize: render pages to JPEG and rebuild

Session:
    - Workspace: several open documents with batch export actions
    - SlicerSettings: export folder and raster defaults

For CLI usage, use the 'pdf-slicer' command after installation.
"""

__version__ = "1.0.0"
__license__ = "MIT"

# Document collaborator
from pdf_slicer.document import PDFDocument, page_bounds

# Engine
from pdf_slicer.ranges import parse_range_spec, parse_page_indices, format_page_indices
from pdf_slicer.selection import SelectionSet
from pdf_slicer.editor import delete_pages, extract_pages, extract_pages_with_result
from pdf_slicer.combiner import merge_all
from pdf_slicer.splitter import split_every, chunk_bounds
from pdf_slicer.rasterizer import RasterCompressor, CompressorState, rasterize

# Observers and session
from pdf_slicer.observer import EngineObserver, NullObserver, LoggingObserver, RecordingObserver
from pdf_slicer.settings import SlicerSettings, RasterPreset, resolve_preset
from pdf_slicer.workspace import Workspace, WorkspaceItem

# Data types
from pdf_slicer.types import (
    RasterParams,
    RangeParseResult,
    EditResult,
    RasterResult,
    SaveResult,
    DocumentInfo,
    clamp_quality,
)

# Exceptions
from pdf_slicer.exceptions import (
    PDFSlicerException,
    InvalidPDFError,
    EncryptedPDFError,
    DocumentWriteError,
    RasterizationError,
)

__all__ = [
    "PDFDocument",
    "page_bounds",
    "parse_range_spec",
    "parse_page_indices",
    "format_page_indices",
    "SelectionSet",
    "delete_pages",
    "extract_pages",
    "extract_pages_with_result",
    "merge_all",
    "split_every",
    "chunk_bounds",
    "RasterCompressor",
    "CompressorState",
    "rasterize",
    "EngineObserver",
    "NullObserver",
    "LoggingObserver",
    "RecordingObserver",
    "SlicerSettings",
    "RasterPreset",
    "resolve_preset",
    "Workspace",
    "WorkspaceItem",
    "RasterParams",
    "RangeParseResult",
    "EditResult",
    "RasterResult",
    "SaveResult",
    "DocumentInfo",
    "clamp_quality",
    "PDFSlicerException",
    "InvalidPDFError",
    "EncryptedPDFError",
    "DocumentWriteError",
    "RasterizationError",
    "__version__",
]
