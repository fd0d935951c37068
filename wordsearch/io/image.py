"""Grid colorizer: reduce a photo to one color sample per grid cell."""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import List, Tuple

from PIL import Image, UnidentifiedImageError

from ..core.exceptions import ColorizerError
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class CellColor:
    """Full color and luminance-gray version of one cell."""

    full: RGB
    gray: RGB

    @property
    def full_css(self) -> str:
        return "rgb({}, {}, {})".format(*self.full)

    @property
    def gray_css(self) -> str:
        return "rgb({}, {}, {})".format(*self.gray)

    def to_jsonable(self) -> dict:
        return {"fullColor": self.full_css, "grayColor": self.gray_css}


def luminance(rgb: RGB) -> float:
    """Relative luminance in [0, 1] using the 0.299/0.587/0.114 weights."""

    r, g, b = rgb
    return (0.299 * r + 0.587 * g + 0.114 * b) / 255


def text_color(rgb: RGB) -> str:
    """Letter color readable on top of ``rgb``."""

    return "black" if luminance(rgb) > 0.5 else "white"


def colorize(image_bytes: bytes, size: int) -> List[CellColor]:
    """Downsample an image to ``size`` x ``size`` and return row-major cell colors."""

    if size < 1:
        raise ColorizerError(f"Grid size must be positive, got {size}")
    try:
        with Image.open(io.BytesIO(image_bytes)) as img:
            pixels = img.convert("RGB").resize((size, size), Image.Resampling.BILINEAR)
    except (UnidentifiedImageError, OSError) as exc:
        raise ColorizerError(f"Failed to load image: {exc}") from exc

    colors: List[CellColor] = []
    for row in range(size):
        for col in range(size):
            rgb = pixels.getpixel((col, row))
            gray = round(0.299 * rgb[0] + 0.587 * rgb[1] + 0.114 * rgb[2])
            colors.append(CellColor(full=rgb, gray=(gray, gray, gray)))
    LOGGER.debug("Colorized image into %d cells", len(colors))
    return colors
