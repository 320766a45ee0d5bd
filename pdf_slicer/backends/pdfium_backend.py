"""pypdfium2 page renderer."""

from __future__ import annotations

import io
from typing import Optional

import pypdfium2 as pdfium
from PIL import Image
from pypdf import PageObject, PdfWriter

from ..document import page_bounds
from ..utils import get_logger
from .base import PageRenderer, PixelSize

LOGGER = get_logger("pdf_slicer.backends.pdfium")

WHITE = (255, 255, 255, 255)


def _single_page_pdf(page: PageObject) -> bytes:
    """Serialise *page* alone, with its crop box widened to the media box."""

    writer = PdfWriter()
    added = writer.add_page(page)
    added.cropbox = added.mediabox
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


class PdfiumRenderer(PageRenderer):
    """Render pages with pdfium on a white background.

    The page is rendered at the uniform scale that matches the requested
    width; when pdfium's rounding leaves the bitmap off by a pixel the image
    is resampled with a Lanczos filter so the result is exactly *size*.
    """

    def __init__(self, *, draw_forms: bool = True) -> None:
        self.draw_forms = draw_forms

    def render(self, page: PageObject, size: PixelSize) -> Optional[Image.Image]:
        width_px, height_px = size
        width_pt, _ = page_bounds(page)
        if width_px <= 0 or height_px <= 0 or width_pt <= 0:
            LOGGER.warning("Cannot render page with size %s", size)
            return None

        try:
            pdf = pdfium.PdfDocument(_single_page_pdf(page))
        except Exception as exc:
            LOGGER.warning("pdfium failed to open page: %s", exc)
            return None

        try:
            pdf_page = pdf[0]
            try:
                bitmap = pdf_page.render(
                    scale=width_px / width_pt,
                    fill_color=WHITE,
                    may_draw_forms=self.draw_forms,
                )
                image = bitmap.to_pil().convert("RGB")
            finally:
                pdf_page.close()
        except Exception as exc:
            LOGGER.warning("pdfium failed to render page: %s", exc)
            return None
        finally:
            pdf.close()

        if image.size != (width_px, height_px):
            LOGGER.debug("Resampling %s bitmap to %s", image.size, size)
            image = image.resize((width_px, height_px), Image.LANCZOS)
        return image
