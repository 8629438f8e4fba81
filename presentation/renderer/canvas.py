"""
presentation/renderer/canvas.py -- Raster canvas backed by Pillow

A Canvas owns one RGBA image of fixed size plus a small paint state
(color, font family, font size). Colors are RGB float triples in 0..1,
clamped to range. Text coordinates follow the cairo convention: (x, y)
is the left end of the baseline and y grows downward.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image, ImageDraw, ImageFont, UnidentifiedImageError

from presentation.errors import ExportIOError, ImageLoadError, SurfaceCreationError

logger = logging.getLogger(__name__)

Color = tuple[float, float, float]
FontType = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]

DEFAULT_FONT_FAMILY = "DejaVuSans.ttf"
DEFAULT_FONT_SIZE = 40.0
DEFAULT_COLOR: Color = (0.0, 0.0, 0.0)

# Baseline-left anchor
_ANCHOR = "ls"


# ── Color Utilities ───────────────────────────────────────────────


def to_rgba(color: Color) -> tuple[int, int, int, int]:
    """Convert an RGB float triple to an opaque 8-bit RGBA tuple."""
    if len(color) != 3:
        raise ValueError(f"Expected an (r, g, b) triple, got {color!r}")
    r, g, b = (round(min(max(float(c), 0.0), 1.0) * 255) for c in color)
    return (r, g, b, 255)


# ── Fonts ─────────────────────────────────────────────────────────


@lru_cache(maxsize=None)
def _warn_font_fallback(family: str) -> None:
    logger.warning("Font %s not found, using Pillow's default font", family)


@lru_cache(maxsize=64)
def load_font(family: str, size: float) -> FontType:
    """Load a TrueType font by file name or path, cached per (family, size)."""
    try:
        return ImageFont.truetype(family, size)
    except OSError:
        _warn_font_fallback(family)
        return ImageFont.load_default(size)


@dataclass(frozen=True)
class TextExtents:
    """Ink box of a string relative to its baseline-left origin."""

    x_bearing: float
    y_bearing: float
    width: float
    height: float


# ── Images ────────────────────────────────────────────────────────


def load_image(path: Union[str, Path]) -> Image.Image:
    """Load and fully decode a raster file as RGBA.

    Raises:
        ImageLoadError: The file is missing, unreadable, not an image or
            larger than Pillow's decompression limit.
    """
    try:
        with Image.open(path) as src:
            src.load()
            return src.convert("RGBA")
    except FileNotFoundError as exc:
        raise ImageLoadError(path, "no such file") from exc
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        SyntaxError,
    ) as exc:
        raise ImageLoadError(path, str(exc)) from exc


def fit_box(width: int, height: int, margin: float) -> tuple[int, int, int, int]:
    """Return the (left, top, right, bottom) box inset by margin on every side.

    The margin is a fraction of each axis, so the horizontal inset is
    ``margin * width`` and the vertical inset is ``margin * height``.
    """
    if not 0.0 <= margin < 0.5:
        raise ValueError(f"margin must be in [0, 0.5), got {margin}")
    left = round(width * margin)
    top = round(height * margin)
    right = round(width * (1 - margin))
    bottom = round(height * (1 - margin))
    return left, top, right, bottom


# ── Canvas ────────────────────────────────────────────────────────


class Canvas:
    """A fixed-size RGBA drawing surface.

    Usage:
        canvas = Canvas.create(1920, 1080)
        canvas.fill((1.0, 0.9, 1.0))
        canvas.draw_centered_text("Hello", 200, 960, 540)
        canvas.export_to("output/000.png")
    """

    def __init__(self, image: Image.Image, font_family: str = DEFAULT_FONT_FAMILY):
        self._image = image
        self._draw = ImageDraw.Draw(image)
        self.font_family = font_family
        self._base_font_family = font_family
        self.font_size = DEFAULT_FONT_SIZE
        self.color: Color = DEFAULT_COLOR

    @classmethod
    def create(
        cls,
        width: int,
        height: int,
        font_family: str = DEFAULT_FONT_FAMILY,
    ) -> "Canvas":
        """Allocate a blank, fully transparent canvas.

        Raises:
            SurfaceCreationError: Dimensions are not positive integers or
                the buffer cannot be allocated.
        """
        if isinstance(width, bool) or isinstance(height, bool):
            raise SurfaceCreationError(f"Invalid canvas size {width}x{height}")
        if not isinstance(width, int) or not isinstance(height, int):
            raise SurfaceCreationError(f"Invalid canvas size {width}x{height}")
        if width <= 0 or height <= 0:
            raise SurfaceCreationError(f"Invalid canvas size {width}x{height}")
        try:
            image = Image.new("RGBA", (width, height), (0, 0, 0, 0))
        except (MemoryError, OverflowError, ValueError) as exc:
            raise SurfaceCreationError(
                f"Failed to create {width}x{height} surface: {exc}"
            ) from exc
        return cls(image, font_family=font_family)

    @property
    def width(self) -> int:
        return self._image.width

    @property
    def height(self) -> int:
        return self._image.height

    @property
    def image(self) -> Image.Image:
        """The backing Pillow image."""
        return self._image

    def to_array(self) -> np.ndarray:
        """Copy the pixel buffer into a (height, width, 4) uint8 array."""
        return np.array(self._image, dtype=np.uint8)

    # ── Paint State ──

    def set_color(self, color: Color) -> None:
        to_rgba(color)
        self.color = tuple(color)

    def set_font(self, family: str) -> None:
        self.font_family = family

    def reset_paint(self) -> None:
        """Restore the canvas's initial font family, default size and color."""
        self.set_font(self._base_font_family)
        self.font_size = DEFAULT_FONT_SIZE
        self.color = DEFAULT_COLOR

    def _font(self, size: float) -> FontType:
        self.font_size = size
        return load_font(self.font_family, size)

    # ── Drawing ──

    def fill(self, color: Color) -> None:
        """Paint every pixel with an opaque color, discarding prior content."""
        self._image.paste(to_rgba(color), (0, 0, self.width, self.height))

    def text_extents(self, text: str, font_size: float) -> TextExtents:
        """Measure the ink box of text at the given size.

        Bearings are offsets from the baseline-left origin to the box's
        top-left corner; y_bearing is negative for ink above the baseline.
        """
        font = self._font(font_size)
        if not text:
            return TextExtents(x_bearing=0, y_bearing=0, width=0, height=0)
        # getbbox reports the layout box; the rendered mask gives the ink
        mask, (offset_x, offset_y) = font.getmask2(text, mode="L", anchor=_ANCHOR)
        ink = mask.getbbox() if mask.size[0] and mask.size[1] else None
        if ink is None:
            return TextExtents(x_bearing=0, y_bearing=0, width=0, height=0)
        left, top, right, bottom = ink
        return TextExtents(
            x_bearing=offset_x + left,
            y_bearing=offset_y + top,
            width=right - left,
            height=bottom - top,
        )

    def draw_text(self, text: str, font_size: float, x: float, y: float) -> None:
        """Draw text with the left end of its baseline at (x, y)."""
        font = self._font(font_size)
        self._draw.text((x, y), text, fill=to_rgba(self.color), font=font, anchor=_ANCHOR)

    def draw_centered_text(
        self, text: str, font_size: float, center_x: float, center_y: float
    ) -> None:
        """Draw text so the center of its ink box lands on (center_x, center_y)."""
        ext = self.text_extents(text, font_size)
        x = center_x - ext.width / 2 - ext.x_bearing
        y = center_y - ext.height / 2 - ext.y_bearing
        logger.debug("Centered %r at (%.1f, %.1f), extents %s", text, x, y, ext)
        self.draw_text(text, font_size, x, y)

    def draw_image_fit(self, image: Image.Image, margin: float) -> tuple[int, int, int, int]:
        """Stretch image to exactly fill the box inset by margin on every side.

        The x and y scale factors are independent, so the source aspect
        ratio is not preserved. Returns the target box.
        """
        left, top, right, bottom = fit_box(self.width, self.height, margin)
        target = (right - left, bottom - top)
        if target[0] <= 0 or target[1] <= 0:
            return left, top, right, bottom
        scaled = image.convert("RGBA").resize(target, Image.Resampling.BILINEAR)
        self._image.alpha_composite(scaled, dest=(left, top))
        logger.debug(
            "Fit %dx%d image into box %s (scale %.3f x %.3f)",
            image.width,
            image.height,
            (left, top, right, bottom),
            target[0] / image.width,
            target[1] / image.height,
        )
        return left, top, right, bottom

    # ── Export ──

    def export_to(self, path: Union[str, Path]) -> Path:
        """Write the canvas to a PNG file. The canvas is left unchanged.

        Raises:
            ExportIOError: The file could not be written.
        """
        path = Path(path)
        try:
            self._image.save(path, format="PNG")
        except OSError as exc:
            raise ExportIOError(path, exc.strerror or str(exc)) from exc
        return path
