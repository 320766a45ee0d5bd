"""Backend protocols for page rendering, image encoding and image pages."""

from __future__ import annotations

from typing import Optional, Protocol, Tuple

from PIL import Image
from pypdf import PageObject

PixelSize = Tuple[int, int]
PointSize = Tuple[float, float]


class PageRenderer(Protocol):
    """Draws a page's content into a bitmap of a requested size."""

    def render(self, page: PageObject, size: PixelSize) -> Optional[Image.Image]:
        """Return an RGB image of exactly *size* pixels, or ``None`` on failure."""


class ImageEncoder(Protocol):
    """Compresses a bitmap into a lossy format."""

    format: str

    def encode(self, image: Image.Image, quality: float) -> bytes:
        """Encode *image* at *quality* in ``[0, 1]``."""


class ImagePageFactory(Protocol):
    """Wraps encoded image bytes as a single-image page."""

    def from_image(self, data: bytes, page_size: PointSize) -> PageObject:
        """Return a page of *page_size* points showing the image in *data*."""
