"""Pillow JPEG encoder."""

from __future__ import annotations

import io

from PIL import Image

from ..exceptions import RasterizationError
from .base import ImageEncoder


class JpegEncoder(ImageEncoder):
    """Encode bitmaps as baseline JPEG.

    ``quality`` is a scalar in ``[0, 1]`` and maps onto Pillow's 1-100 scale.
    """

    format = "JPEG"

    def __init__(self, *, optimize: bool = True, subsampling: int = 2) -> None:
        self.optimize = optimize
        self.subsampling = subsampling

    def encode(self, image: Image.Image, quality: float) -> bytes:
        pillow_quality = max(1, min(100, int(round(quality * 100))))
        if image.mode not in {"RGB", "L"}:
            image = image.convert("RGB")
        output = io.BytesIO()
        try:
            image.save(
                output,
                format=self.format,
                quality=pillow_quality,
                optimize=self.optimize,
                subsampling=self.subsampling,
            )
        except (OSError, ValueError) as exc:
            raise RasterizationError(f"JPEG encoding failed: {exc}") from exc
        return output.getvalue()
