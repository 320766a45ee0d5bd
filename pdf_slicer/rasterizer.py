"""Rasterize-and-recompress pipeline.

Every page is drawn into a bitmap at ``dpi / 72`` pixels per point, encoded
as JPEG and wrapped as a single-image page of the same physical size. Pages
that cannot be rendered are left out of the output rather than failing the
run. A non-positive or non-finite DPI skips every page.
"""

from __future__ import annotations

import threading
from enum import Enum
from typing import Optional

from .backends import Img2PdfPageFactory, JpegEncoder, PdfiumRenderer
from .backends.base import ImageEncoder, ImagePageFactory, PageRenderer
from .document import PDFDocument, page_bounds
from .exceptions import RasterizationError
from .observer import EngineObserver, NullObserver
from .types import RasterParams, RasterResult
from .utils import get_logger

LOGGER = get_logger("pdf_slicer.rasterizer")


class CompressorState(str, Enum):
    """Lifecycle of a :class:`RasterCompressor`."""

    IDLE = "idle"
    BUSY = "busy"


class RasterCompressor:
    """Convert documents into documents of JPEG page images.

    Calls on the same instance are serialised: a second caller waits until
    the running conversion has finished. The observer sees
    ``on_busy_changed(True)`` before any page is processed and
    ``on_busy_changed(False)`` once the call returns, whichever way it ends.
    """

    def __init__(
        self,
        renderer: Optional[PageRenderer] = None,
        encoder: Optional[ImageEncoder] = None,
        page_factory: Optional[ImagePageFactory] = None,
        observer: Optional[EngineObserver] = None,
    ) -> None:
        self.renderer: PageRenderer = renderer or PdfiumRenderer()
        self.encoder: ImageEncoder = encoder or JpegEncoder()
        self.page_factory: ImagePageFactory = page_factory or Img2PdfPageFactory()
        self.observer: EngineObserver = observer or NullObserver()
        self._lock = threading.Lock()
        self._state = CompressorState.IDLE

    @property
    def state(self) -> CompressorState:
        return self._state

    @property
    def busy(self) -> bool:
        return self._state is CompressorState.BUSY

    def rasterize(self, document: PDFDocument, dpi: float, quality: float) -> PDFDocument:
        """Return a rasterized copy of *document*."""

        return self.rasterize_with_result(document, RasterParams(dpi=dpi, quality=quality)).document

    def rasterize_with_result(self, document: PDFDocument, params: RasterParams) -> RasterResult:
        with self._lock:
            self._set_state(CompressorState.BUSY)
            try:
                return self._run(document, params)
            finally:
                self._set_state(CompressorState.IDLE)

    # ------------------------------------------------------------------
    def _set_state(self, state: CompressorState) -> None:
        self._state = state
        self.observer.on_busy_changed(state is CompressorState.BUSY)

    def _run(self, document: PDFDocument, params: RasterParams) -> RasterResult:
        output = PDFDocument()
        result = RasterResult(document=output, params=params, source_pages=document.page_count)
        quality = params.effective_quality

        if not params.valid:
            LOGGER.warning("Skipping %s: DPI must be > 0, got %s", document.display_name, params.dpi)
            self.observer.on_event(f"Skipped {document.display_name}: DPI must be > 0, got {params.dpi}")
            result.skipped_pages.extend(range(document.page_count))
            return result

        LOGGER.debug(
            "Rasterizing %s at %s dpi, quality %.2f",
            document.display_name,
            params.dpi,
            quality,
        )

        for index in range(document.page_count):
            page = document.page(index)
            if page is None:
                result.skipped_pages.append(index)
                continue

            width, height = page_bounds(page)
            size = params.pixel_size(width, height)
            try:
                image = self.renderer.render(page, size)
                if image is None:
                    raise RasterizationError("renderer returned no image")
                data = self.encoder.encode(image, quality)
                raster_page = self.page_factory.from_image(data, (width, height))
            except RasterizationError as exc:
                LOGGER.warning("Skipping page %d of %s: %s", index + 1, document.display_name, exc)
                self.observer.on_event(f"Skipped page {index + 1} of {document.display_name}: {exc}")
                result.skipped_pages.append(index)
                continue

            output.insert(raster_page, output.page_count)

        if output.page_count:
            output.copy_metadata(document)

        self.observer.on_event(
            f"Rasterized {document.display_name}: {result.output_pages}/{result.source_pages} page(s)"
        )
        LOGGER.info("%s", result)
        return result


def rasterize(
    document: PDFDocument,
    dpi: float,
    quality: float,
    *,
    observer: Optional[EngineObserver] = None,
) -> PDFDocument:
    """Rasterize *document* with the default pdfium/Pillow/img2pdf backends."""

    return RasterCompressor(observer=observer).rasterize(document, dpi, quality)


__all__ = ["RasterCompressor", "CompressorState", "rasterize"]
