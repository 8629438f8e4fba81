#!/usr/bin/env python3
"""
scripts/render_deck.py -- Render the sample deck to numbered PNG files.

Usage:
    python scripts/render_deck.py --output output --width 1920 --height 1080

Options:
    -o, --output DIR       Output directory (default: output)
    -x, --width N          Canvas width in pixels (default: 1920)
    -y, --height N         Canvas height in pixels (default: 1080)
    --image PATH           Source file for the image slide (default: image.png)
    --compact-numbering    Do not leave index gaps for slides that fail
    --verbose              Show debug logging
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from presentation.deck.models import NumberingPolicy, RenderConfig  # noqa: E402
from presentation.deck.samples import hello_world_slides  # noqa: E402
from presentation.errors import SurfaceCreationError  # noqa: E402
from skills.render_deck import render  # noqa: E402

VERSION_STRING = "presentation-1.0.0"

LICENSE_STRING = (
    "Copyright (C) 2024 Sam Christy.\n"
    "License GPLv3+: GNU GPL version 3 or later "
    "<http://gnu.org/licenses/gpl.html>\n"
    "\n"
    "This is free software; you are free to change and redistribute it.\n"
    "There is NO WARRANTY, to the extent permitted by law."
)

logger = logging.getLogger("presentation")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="presentation",
        description="Render a slide deck to numbered PNG images.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    ap.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"{VERSION_STRING}\n{LICENSE_STRING}",
        help="Print the version number",
    )
    ap.add_argument("-o", "--output", default="output", help="Output directory (default: output)")
    ap.add_argument("-x", "--width", type=int, default=1920, help="Screen width (default: 1920)")
    ap.add_argument("-y", "--height", type=int, default=1080, help="Screen height (default: 1080)")
    ap.add_argument("--image", default="image.png", help="Image slide source (default: image.png)")
    ap.add_argument(
        "--compact-numbering",
        action="store_true",
        help="Number output files without gaps for skipped slides",
    )
    ap.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = RenderConfig(
        output_dir=args.output,
        width=args.width,
        height=args.height,
        numbering=(
            NumberingPolicy.COMPACT if args.compact_numbering else NumberingPolicy.PRESERVE_GAPS
        ),
    )

    try:
        report = render(hello_world_slides(args.image), config)
    except SurfaceCreationError as exc:
        logger.error("%s", exc)
        return 1

    logger.info(
        "Done: %d written, %d skipped, next index %d",
        len(report.written),
        len(report.skipped),
        report.indices_consumed,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
