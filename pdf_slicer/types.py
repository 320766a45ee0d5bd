"""
Type definitions and dataclasses for PDF Slicer.

This module defines data structures used throughout the library.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, FrozenSet, List, Optional, Tuple

if TYPE_CHECKING:
    from .document import PDFDocument

MIN_QUALITY = 0.2
MAX_QUALITY = 0.95
POINTS_PER_INCH = 72.0


def clamp_quality(quality: float) -> float:
    """Clamp a lossy encoder quality into ``[MIN_QUALITY, MAX_QUALITY]``."""

    return max(MIN_QUALITY, min(MAX_QUALITY, float(quality)))


@dataclass(frozen=True)
class RasterParams:
    """
    Rasterization parameters.

    Attributes:
        dpi: Target resolution in pixels per inch; pages are skipped unless positive
        quality: Requested encoder quality; clamped before use
    """
    dpi: float
    quality: float

    @property
    def valid(self) -> bool:
        """Whether *dpi* is a finite positive number."""

        return math.isfinite(self.dpi) and self.dpi > 0

    @property
    def scale(self) -> float:
        return self.dpi / POINTS_PER_INCH

    @property
    def effective_quality(self) -> float:
        return clamp_quality(self.quality)

    def pixel_size(self, width: float, height: float) -> Tuple[int, int]:
        """Return the target bitmap size for a page of *width* x *height* points."""

        scale = self.scale
        return max(1, round(width * scale)), max(1, round(height * scale))


@dataclass(frozen=True)
class RangeParseResult:
    """
    Result of parsing a range specifier.

    Attributes:
        indices: Zero-based page indices selected by the specifier
        dropped: Tokens that were malformed or selected no page
    """
    indices: FrozenSet[int]
    dropped: Tuple[str, ...] = ()

    @property
    def dropped_count(self) -> int:
        return len(self.dropped)


@dataclass
class EditResult:
    """
    Outcome of a page deletion or extraction.

    Attributes:
        requested: Number of distinct indices supplied
        applied: Indices that resolved to a page, in the order they were applied
        skipped: Indices that were out of bounds when used
    """
    requested: int
    applied: List[int] = field(default_factory=list)
    skipped: List[int] = field(default_factory=list)

    @property
    def applied_count(self) -> int:
        return len(self.applied)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)

    def __str__(self) -> str:
        return f"EditResult(applied={self.applied_count}, skipped={self.skipped_count})"


@dataclass
class RasterResult:
    """
    Result of a rasterize-and-recompress run.

    Attributes:
        document: The rebuilt output document
        params: Parameters used for the run
        source_pages: Page count of the input document
        skipped_pages: Zero-based indices of pages that could not be rendered
    """
    document: "PDFDocument"
    params: RasterParams
    source_pages: int
    skipped_pages: List[int] = field(default_factory=list)

    @property
    def output_pages(self) -> int:
        return self.source_pages - len(self.skipped_pages)

    def __str__(self) -> str:
        return (
            f"RasterResult(pages={self.output_pages}/{self.source_pages}, "
            f"dpi={self.params.dpi}, quality={self.params.effective_quality:.2f})"
        )


@dataclass
class SaveResult:
    """
    Result of saving a document to storage.

    Attributes:
        success: Whether the document was written
        path: Destination path
        page_count: Number of pages written
        error: Error message if the write failed
    """
    success: bool
    path: Path
    page_count: int = 0
    error: Optional[str] = None

    def __str__(self) -> str:
        if self.success:
            return f"SaveResult(success=True, path='{self.path.name}', pages={self.page_count})"
        return f"SaveResult(success=False, error='{self.error}')"


@dataclass
class DocumentInfo:
    """
    Summary information about a loaded document.

    Attributes:
        num_pages: Number of pages in the document
        source: Path the document was loaded from, if any
        file_size: Size of the source file in bytes
        title: PDF title metadata
        author: PDF author metadata
        page_sizes: Width and height of each page in points
    """
    num_pages: int
    source: Optional[Path] = None
    file_size: int = 0
    title: Optional[str] = None
    author: Optional[str] = None
    page_sizes: List[Tuple[float, float]] = field(default_factory=list)
