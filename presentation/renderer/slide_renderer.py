"""
presentation/renderer/slide_renderer.py -- Per-variant slide drawing

Each renderer paints one slide onto a fresh, blank Canvas. Layout
constants are reference pixels for a 1920x1080 canvas and are not
rescaled for other sizes: a larger canvas gets the same text at the
same offsets.
"""

from __future__ import annotations

import logging
from typing import Callable

from presentation.deck.models import (
    BulletSlide,
    ImageSlide,
    SlideKind,
    SlideSpec,
    TitleSlide,
)
from presentation.renderer.canvas import Canvas, Color, load_image

logger = logging.getLogger(__name__)

# ── Colors ────────────────────────────────────────────────────────

BACKGROUND: Color = (1.0, 0.9, 1.0)  # pale lavender
INK: Color = (0.0, 0.0, 0.3)  # dark navy

# ── Geometry Constants (pixels) ───────────────────────────────────

FONT_TITLE = 200
FONT_BULLET = 100

HEADING_X = 100
HEADING_Y = 300

BULLET_X = 200
BULLET_START_Y = 400
BULLET_STEP = 150

IMAGE_MARGIN = 0.1


# ── Per-Type Renderers ────────────────────────────────────────────


def _render_title(canvas: Canvas, slide: TitleSlide) -> None:
    """Render a title slide: one heading centered on the canvas."""
    canvas.reset_paint()
    canvas.fill(BACKGROUND)
    canvas.set_color(INK)
    canvas.draw_centered_text(slide.text, FONT_TITLE, canvas.width / 2, canvas.height / 2)


def bullet_positions(count: int) -> list[tuple[int, int]]:
    """Baseline origins for count bullet lines.

    The cursor starts at BULLET_START_Y and advances by BULLET_STEP before
    each line, so the first bullet sits at BULLET_START_Y + BULLET_STEP.
    """
    positions = []
    y = BULLET_START_Y
    for _ in range(count):
        y += BULLET_STEP
        positions.append((BULLET_X, y))
    return positions


def _render_bullets(canvas: Canvas, slide: BulletSlide) -> None:
    """Render a heading and its bullets, top to bottom, without wrapping."""
    canvas.reset_paint()
    canvas.fill(BACKGROUND)
    canvas.set_color(INK)
    canvas.draw_text(slide.title, FONT_TITLE, HEADING_X, HEADING_Y)

    for item, (x, y) in zip(slide.items, bullet_positions(len(slide.items))):
        canvas.draw_text(item, FONT_BULLET, x, y)


def _render_image(canvas: Canvas, slide: ImageSlide) -> None:
    """Render an image stretched into the canvas with a 10% margin.

    The image is loaded before anything is painted, so a load failure
    leaves the canvas untouched.

    Raises:
        ImageLoadError: The source image could not be loaded.
    """
    image = load_image(slide.path)
    canvas.reset_paint()
    canvas.fill(BACKGROUND)
    canvas.draw_image_fit(image, IMAGE_MARGIN)


# ── Dispatch Table ────────────────────────────────────────────────

_RENDERERS: dict[SlideKind, Callable[[Canvas, SlideSpec], None]] = {
    SlideKind.TITLE: _render_title,
    SlideKind.BULLETS: _render_bullets,
    SlideKind.IMAGE: _render_image,
}


# ── Public API ────────────────────────────────────────────────────


def render_slide(canvas: Canvas, slide: SlideSpec) -> None:
    """Paint slide onto canvas using the renderer for its kind."""
    renderer_fn = _RENDERERS.get(SlideKind(slide.kind))
    if renderer_fn is None:
        raise ValueError(f"No renderer for slide kind: {slide.kind}")
    logger.debug("Rendering %s slide with %s", slide.kind, renderer_fn.__name__)
    renderer_fn(canvas, slide)
