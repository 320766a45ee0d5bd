"""img2pdf page factory embedding encoded images without re-encoding."""

from __future__ import annotations

import io

import img2pdf
from pypdf import PageObject, PdfReader

from ..exceptions import RasterizationError
from .base import ImagePageFactory, PointSize


class Img2PdfPageFactory(ImagePageFactory):
    """Build a one-page PDF around JPEG bytes and return that page.

    The image is fitted into a page of the requested size in points, so a
    rasterized page keeps the physical size of the page it replaces.
    """

    def from_image(self, data: bytes, page_size: PointSize) -> PageObject:
        layout = img2pdf.get_layout_fun(pagesize=(float(page_size[0]), float(page_size[1])))
        try:
            pdf_bytes = img2pdf.convert(data, layout_fun=layout)
        except Exception as exc:  # img2pdf raises a range of ValueError/ImageOpenError
            raise RasterizationError(f"Unable to wrap image as a page: {exc}") from exc
        if not pdf_bytes:
            raise RasterizationError("Unable to wrap image as a page: empty output")
        return PdfReader(io.BytesIO(pdf_bytes)).pages[0]
