"""
presentation/services/exporter.py -- Deck and sequential PNG export

Coordinates the render loop:
  slide → fresh Canvas → per-kind renderer → <output_dir>/<NNN>.png → next index

Slides are processed strictly in deck order. A failed image load or file
write is logged and recorded in the report; the run continues with the
next slide. A canvas that cannot be allocated aborts the run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Union

from presentation.deck.models import NumberingPolicy, RenderConfig, SlideSpec, parse_slide
from presentation.errors import ExportIOError, ImageLoadError
from presentation.renderer.canvas import DEFAULT_FONT_FAMILY, Canvas
from presentation.renderer.slide_renderer import render_slide

logger = logging.getLogger(__name__)


@dataclass
class ExportReport:
    """Result of one export run."""

    slide_count: int = 0
    indices_consumed: int = 0
    written: list[Path] = field(default_factory=list)
    skipped: list[int] = field(default_factory=list)  # index tried by each failed slide
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


class Deck:
    """
    An ordered list of slides plus the state of one export run.

    Usage:
        deck = Deck([TitleSlide(text="Hello")], output_dir="output")
        report = deck.render()
        # report.written → [Path("output/000.png")]
    """

    def __init__(
        self,
        slides: Optional[Iterable[SlideSpec]] = None,
        output_dir: Union[str, Path] = "output",
        width: int = 1920,
        height: int = 1080,
        font_family: str = DEFAULT_FONT_FAMILY,
        numbering: NumberingPolicy = NumberingPolicy.PRESERVE_GAPS,
    ):
        self.slides: list[SlideSpec] = []
        self.output_dir = Path(output_dir)
        self.width = width
        self.height = height
        self.font_family = font_family
        self.numbering = NumberingPolicy(numbering)
        self.next_index = 0
        for slide in slides or []:
            self.add(slide)

    @classmethod
    def from_config(cls, config: RenderConfig, slides: Iterable[SlideSpec] = ()) -> "Deck":
        return cls(
            slides,
            output_dir=config.output_dir,
            width=config.width,
            height=config.height,
            font_family=config.font_family,
            numbering=config.numbering,
        )

    def add(self, slide) -> "Deck":
        """Append a slide (a model instance or a mapping with a ``kind`` key)."""
        self.slides.append(parse_slide(slide))
        return self

    def __len__(self) -> int:
        return len(self.slides)

    def output_path(self, index: int) -> Path:
        """File path for an output index, zero-padded to at least 3 digits."""
        return self.output_dir / f"{index:03d}.png"

    def render(self) -> ExportReport:
        """Render every slide in order and write each to the next numbered file.

        Raises:
            SurfaceCreationError: A canvas could not be allocated.
        """
        report = ExportReport(slide_count=len(self.slides))
        start_index = self.next_index

        for slide in self.slides:
            canvas = Canvas.create(self.width, self.height, font_family=self.font_family)
            index = self.next_index
            written = False
            try:
                render_slide(canvas, slide)
                path = canvas.export_to(self.output_path(index))
            except (ImageLoadError, ExportIOError) as exc:
                logger.error("Slide %03d (%s) skipped: %s", index, slide.kind, exc)
                report.errors.append(str(exc))
                report.skipped.append(index)
            else:
                written = True
                report.written.append(path)
                logger.info("Wrote %s", path)

            if written or self.numbering == NumberingPolicy.PRESERVE_GAPS:
                self.next_index += 1

        report.indices_consumed = self.next_index - start_index
        logger.info(
            "Rendered %d/%d slides to %s",
            len(report.written),
            report.slide_count,
            self.output_dir,
        )
        return report


def render(deck: Deck) -> ExportReport:
    """Render a deck to numbered PNG files."""
    return deck.render()
