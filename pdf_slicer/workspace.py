"""Multi-document session: loaded files, active selection and batch export."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from .combiner import merge_all
from .document import PDFDocument
from .editor import delete_pages, extract_pages
from .exceptions import PDFSlicerException
from .observer import EngineObserver, LoggingObserver, NullObserver
from .rasterizer import RasterCompressor
from .selection import SelectionSet
from .settings import SlicerSettings
from .splitter import MIN_CHUNK_SIZE, split_every
from .types import EditResult, RangeParseResult, SaveResult
from .utils import PathLike, base_name, get_logger

LOGGER = get_logger("pdf_slicer.workspace")

MERGED_NAME = "Merged.pdf"


@dataclass
class WorkspaceItem:
    """A loaded document and the file it came from."""

    path: Path
    document: PDFDocument

    @property
    def display_name(self) -> str:
        return self.path.name

    @property
    def stem(self) -> str:
        return base_name(self.path)


class Workspace:
    """Ordered list of open documents with one active document.

    The selection always refers to the active document and is cleared
    whenever the active document changes or loses pages. Every action is
    reported as a line in :attr:`log` and forwarded to the observer.
    """

    def __init__(
        self,
        settings: Optional[SlicerSettings] = None,
        *,
        observer: Optional[EngineObserver] = None,
        compressor: Optional[RasterCompressor] = None,
    ) -> None:
        self.settings = settings or SlicerSettings()
        self.observer: EngineObserver = observer or LoggingObserver(LOGGER)
        self.compressor = compressor or RasterCompressor()
        # Notifications still reach the observer the compressor was built with.
        previous = self.compressor.observer
        self._compressor_observer: EngineObserver = (
            NullObserver() if previous is self.observer or previous is self else previous
        )
        self.compressor.observer = self
        self.items: List[WorkspaceItem] = []
        self.active_index: Optional[int] = None
        self.selection = SelectionSet()
        self.log: List[str] = ["Ready."]
        self.busy = False

    # ------------------------------------------------------------------
    # Observer protocol, so the workspace can watch its compressor
    # ------------------------------------------------------------------
    def on_busy_changed(self, busy: bool) -> None:
        self.busy = busy
        self._compressor_observer.on_busy_changed(busy)
        self.observer.on_busy_changed(busy)

    def on_event(self, message: str) -> None:
        self._compressor_observer.on_event(message)
        self._emit(message)

    def _emit(self, message: str) -> None:
        self.log.append(message)
        self.observer.on_event(message)

    # ------------------------------------------------------------------
    # Document list
    # ------------------------------------------------------------------
    @property
    def active(self) -> Optional[WorkspaceItem]:
        if self.active_index is None:
            return None
        return self.items[self.active_index]

    @property
    def active_document(self) -> Optional[PDFDocument]:
        item = self.active
        return item.document if item else None

    def add_files(self, paths: Iterable[PathLike]) -> int:
        """Load *paths* and append them; unreadable files are reported and skipped."""

        added = 0
        for path in paths:
            try:
                document = PDFDocument.load(path, password=self.settings.password)
            except PDFSlicerException as exc:
                self._emit(f"Could not open {Path(path).name}: {exc}")
                continue
            self.items.append(WorkspaceItem(path=Path(path), document=document))
            added += 1

        if self.active_index is None and self.items:
            self.active_index = 0
        self._emit(f"Added {added} file(s)")
        return added

    def set_active(self, index: int) -> None:
        if not 0 <= index < len(self.items):
            raise IndexError(f"No document at position {index}")
        self.active_index = index
        self.selection.select_none()

    def remove_active(self) -> Optional[WorkspaceItem]:
        """Drop the active document from the list (the file is not deleted)."""

        if self.active_index is None:
            return None
        item = self.items.pop(self.active_index)
        self.active_index = 0 if self.items else None
        self.selection.select_none()
        self._emit(f"Removed {item.display_name} from list")
        return item

    def move_active(self, *, up: bool) -> bool:
        """Swap the active document with its neighbour; return whether it moved."""

        index = self.active_index
        if index is None:
            return False
        target = max(0, index - 1) if up else min(len(self.items) - 1, index + 1)
        if target == index:
            return False
        self.items[index], self.items[target] = self.items[target], self.items[index]
        self.active_index = target
        return True

    # ------------------------------------------------------------------
    # Selection on the active document
    # ------------------------------------------------------------------
    def _page_count(self) -> int:
        document = self.active_document
        return document.page_count if document else 0

    def select_all(self) -> None:
        if self.active_document is not None:
            self.selection.select_all(self._page_count())

    def select_none(self) -> None:
        self.selection.select_none()

    def invert_selection(self) -> None:
        if self.active_document is not None:
            self.selection.invert(self._page_count())

    def select_range(self, spec: str) -> Optional[RangeParseResult]:
        if self.active_document is None:
            return None
        return self.selection.union_range(spec, self._page_count())

    # ------------------------------------------------------------------
    # Page actions
    # ------------------------------------------------------------------
    def delete_selected(self) -> Optional[EditResult]:
        item = self.active
        if item is None or not self.selection:
            return None
        result = delete_pages(item.document, self.selection)
        self._emit(f"Deleted {result.applied_count} page(s) from {item.display_name}")
        return result

    def export_selection(self) -> Optional[SaveResult]:
        item = self.active
        if item is None or not self.selection:
            return None
        extracted = extract_pages(item.document, self.selection)
        return self.save(extracted, f"{item.stem}_extract.pdf")

    # ------------------------------------------------------------------
    # Batch actions over every document
    # ------------------------------------------------------------------
    def merge_all(self) -> Optional[SaveResult]:
        if not self.items:
            return None
        merged = merge_all(item.document for item in self.items)
        return self.save(merged, MERGED_NAME)

    def split_all(self, n: Optional[int] = None) -> List[SaveResult]:
        n = self.settings.split_every if n is None else n
        if n < MIN_CHUNK_SIZE or not self.items:
            return []
        results: List[SaveResult] = []
        for item in self.items:
            for part_number, part in enumerate(split_every(item.document, n), start=1):
                results.append(self.save(part, f"{item.stem}_part_{part_number:02d}.pdf"))
        return results

    def compress_all(self, dpi: Optional[float] = None, quality: Optional[float] = None) -> List[SaveResult]:
        if not self.items:
            return []
        dpi = self.settings.dpi if dpi is None else dpi
        quality = self.settings.quality if quality is None else quality
        results: List[SaveResult] = []
        for item in self.items:
            compressed = self.compressor.rasterize(item.document, dpi, quality)
            results.append(self.save(compressed, f"{item.stem}_compressed.pdf"))
        return results

    # ------------------------------------------------------------------
    def save(self, document: PDFDocument, suggested_name: str) -> SaveResult:
        """Write *document* into the export folder under *suggested_name*."""

        destination = self.settings.output_dir() / suggested_name
        result = document.save_with_result(destination)
        if result.success:
            self._emit(f"Saved → {destination.name}")
        else:
            self._emit(f"Save failed for {destination.name}")
        return result


__all__ = ["Workspace", "WorkspaceItem", "MERGED_NAME"]
