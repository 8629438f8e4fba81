"""
skills/render_deck.py -- Render a list of slides to numbered PNG files.

Wraps presentation.services.exporter.Deck, creating the output directory
first. A directory that cannot be created is reported and the run goes
ahead; each slide's write failure then shows up in the report.
"""

import logging
from typing import Iterable, Optional

from presentation.deck.models import RenderConfig, SlideSpec
from presentation.errors import DirectoryCreationError
from presentation.services.exporter import Deck, ExportReport
from presentation.services.workspace import ensure_output_dir

logger = logging.getLogger(__name__)


def render(
    slides: Iterable[SlideSpec],
    config: Optional[RenderConfig] = None,
) -> ExportReport:
    """Render slides in order to <output_dir>/<NNN>.png.

    Args:
        slides: Slide models (or mappings with a ``kind`` key) in deck order.
        config: Output directory, canvas size and numbering policy.

    Returns:
        ExportReport listing written files and skipped indices.
    """
    config = config or RenderConfig()
    try:
        ensure_output_dir(config.output_dir)
    except DirectoryCreationError as exc:
        logger.error("%s", exc)

    deck = Deck.from_config(config, slides)
    return deck.render()
