"""Render, encode and image-page backends for PDF Slicer."""

from .base import ImageEncoder, ImagePageFactory, PageRenderer
from .img2pdf_backend import Img2PdfPageFactory
from .pdfium_backend import PdfiumRenderer
from .pillow_backend import JpegEncoder

__all__ = [
    "PageRenderer",
    "ImageEncoder",
    "ImagePageFactory",
    "PdfiumRenderer",
    "JpegEncoder",
    "Img2PdfPageFactory",
]
