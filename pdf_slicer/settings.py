"""Configuration defaults and raster presets."""

from __future__ import annotations

import dataclasses
from pathlib import Path
from typing import Literal, Optional

from .types import RasterParams

PresetName = Literal["low", "medium", "high"]

DEFAULT_DPI = 110.0
DEFAULT_QUALITY = 0.6
DEFAULT_SPLIT_EVERY = 10
MIN_DPI = 72.0
MAX_DPI = 300.0


@dataclasses.dataclass(frozen=True)
class RasterPreset:
    """Named pairing of resolution and JPEG quality."""

    name: PresetName
    dpi: float
    quality: float

    def params(self) -> RasterParams:
        return RasterParams(dpi=self.dpi, quality=self.quality)


_PRESETS: dict[PresetName, RasterPreset] = {
    "low": RasterPreset("low", dpi=150.0, quality=0.85),
    "medium": RasterPreset("medium", dpi=DEFAULT_DPI, quality=DEFAULT_QUALITY),
    "high": RasterPreset("high", dpi=MIN_DPI, quality=0.4),
}


def resolve_preset(name: str) -> RasterPreset:
    """Return the preset called *name* (``low``, ``medium`` or ``high`` compression)."""

    try:
        return _PRESETS[name]  # type: ignore[index]
    except KeyError as exc:
        raise ValueError(f"Unknown raster preset: {name}") from exc


def preset_names() -> list[str]:
    return list(_PRESETS)


@dataclasses.dataclass
class SlicerSettings:
    """
    Settings shared by the workspace and the command line.

    Attributes:
        export_folder: Directory batch actions save into; ``None`` means the
            current working directory
        dpi: Rasterization resolution
        quality: JPEG quality in ``[0, 1]``, clamped to ``[0.2, 0.95]`` on use
        split_every: Default part size for splitting
        password: Password used when loading encrypted inputs
    """
    export_folder: Optional[Path] = None
    dpi: float = DEFAULT_DPI
    quality: float = DEFAULT_QUALITY
    split_every: int = DEFAULT_SPLIT_EVERY
    password: Optional[str] = None

    @classmethod
    def from_preset(cls, name: str, **overrides) -> "SlicerSettings":
        preset = resolve_preset(name)
        return cls(dpi=preset.dpi, quality=preset.quality, **overrides)

    def raster_params(self) -> RasterParams:
        return RasterParams(dpi=self.dpi, quality=self.quality)

    def output_dir(self) -> Path:
        return Path(self.export_folder) if self.export_folder else Path.cwd()


__all__ = [
    "SlicerSettings",
    "RasterPreset",
    "resolve_preset",
    "preset_names",
    "DEFAULT_DPI",
    "DEFAULT_QUALITY",
    "DEFAULT_SPLIT_EVERY",
    "MIN_DPI",
    "MAX_DPI",
]
