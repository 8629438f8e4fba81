"""Shared fixtures for the presentation test suite."""

import sys
from pathlib import Path

import pytest
from PIL import Image

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from presentation.renderer.canvas import Canvas  # noqa: E402


@pytest.fixture
def blank_canvas():
    """A blank reference-size canvas."""
    return Canvas.create(1920, 1080)


@pytest.fixture
def small_canvas():
    return Canvas.create(200, 100)


@pytest.fixture
def red_image_path(tmp_path):
    """A small solid red PNG on disk."""
    path = tmp_path / "image.png"
    Image.new("RGB", (64, 32), (255, 0, 0)).save(path)
    return path


@pytest.fixture
def output_dir(tmp_path):
    path = tmp_path / "output"
    path.mkdir()
    return path
