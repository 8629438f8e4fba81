"""
presentation/deck/models.py -- Pydantic data models for slides and decks

A slide is exactly one of three variants. Each variant is its own model
and the ``kind`` field is the discriminator, so a title slide can never
carry bullet items and an image slide can never carry text.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


# ── Enums ──────────────────────────────────────────────────────────


class SlideKind(str, Enum):
    TITLE = "title"
    BULLETS = "bullets"
    IMAGE = "image"


class NumberingPolicy(str, Enum):
    """How the output index advances when a slide produces no file."""

    PRESERVE_GAPS = "preserve_gaps"  # advance on every attempted slide
    COMPACT = "compact"  # advance only after a file is written


# ── Slide Variants ─────────────────────────────────────────────────


class _SlideBase(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class TitleSlide(_SlideBase):
    """A single heading centered on the canvas."""

    kind: Literal["title"] = "title"
    text: str


class BulletSlide(_SlideBase):
    """A heading followed by bullet lines, top to bottom in list order."""

    kind: Literal["bullets"] = "bullets"
    title: str
    items: list[str] = Field(default_factory=list)


class ImageSlide(_SlideBase):
    """A raster file stretched into the slide with a margin."""

    kind: Literal["image"] = "image"
    path: str


SlideSpec = Annotated[
    Union[TitleSlide, BulletSlide, ImageSlide],
    Field(discriminator="kind"),
]

_SLIDE_ADAPTER: TypeAdapter = TypeAdapter(SlideSpec)


def parse_slide(data: Any) -> SlideSpec:
    """Validate a mapping (or slide instance) into the matching variant.

    The ``kind`` key selects the model; fields belonging to another
    variant are rejected.
    """
    return _SLIDE_ADAPTER.validate_python(data)


# ── Run Configuration ──────────────────────────────────────────────


@dataclass
class RenderConfig:
    """Configuration for one export run."""

    output_dir: str = "output"
    width: int = 1920
    height: int = 1080
    font_family: str = "DejaVuSans.ttf"
    numbering: NumberingPolicy = NumberingPolicy.PRESERVE_GAPS
