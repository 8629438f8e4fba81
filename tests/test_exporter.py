"""
tests/test_exporter.py -- Tests for Deck export, numbering and output directories

Covers:
  - Output file naming
  - Sequential export of the sample deck, with and without the image
  - Index gaps (default) versus compact numbering
  - Write failures, surface failures, empty decks
  - Output directory creation
  - skills.render_deck wrapper
"""

import os
import stat

import pytest
from PIL import Image

from presentation.deck.models import (
    BulletSlide,
    ImageSlide,
    NumberingPolicy,
    RenderConfig,
    TitleSlide,
)
from presentation.deck.samples import hello_world_slides
from presentation.errors import DirectoryCreationError, SurfaceCreationError
from presentation.services.exporter import Deck, ExportReport, render
from presentation.services.workspace import ensure_output_dir
from skills.render_deck import render as render_skill

SMALL = {"width": 480, "height": 270}


def _names(directory):
    return sorted(p.name for p in directory.iterdir())


# ── Naming ───────────────────────────────────────────────────────


class TestOutputPath:
    @pytest.mark.parametrize(
        "index,name",
        [(0, "000.png"), (7, "007.png"), (42, "042.png"), (999, "999.png"), (1000, "1000.png")],
    )
    def test_zero_padded(self, tmp_path, index, name):
        deck = Deck(output_dir=tmp_path)
        assert deck.output_path(index) == tmp_path / name


# ── Deck Construction ────────────────────────────────────────────


class TestDeck:
    def test_counter_starts_at_zero(self):
        assert Deck().next_index == 0

    def test_add_keeps_insertion_order(self):
        deck = Deck()
        deck.add(TitleSlide(text="a")).add({"kind": "bullets", "title": "b"})
        assert [s.kind for s in deck.slides] == ["title", "bullets"]
        assert isinstance(deck.slides[1], BulletSlide)
        assert len(deck) == 2

    def test_from_config(self, tmp_path):
        config = RenderConfig(output_dir=str(tmp_path), width=640, height=480)
        deck = Deck.from_config(config, [TitleSlide(text="a")])
        assert (deck.width, deck.height) == (640, 480)
        assert deck.output_dir == tmp_path
        assert len(deck) == 1


# ── Export ───────────────────────────────────────────────────────


class TestRender:
    def test_sample_deck_with_image(self, output_dir, red_image_path):
        deck = Deck(hello_world_slides(str(red_image_path)), output_dir=output_dir)
        report = deck.render()
        assert _names(output_dir) == ["000.png", "001.png", "002.png", "003.png"]
        assert report.ok
        assert report.skipped == []
        assert deck.next_index == 4
        with Image.open(output_dir / "000.png") as img:
            assert img.size == (1920, 1080)

    def test_missing_image_leaves_gap(self, output_dir, tmp_path):
        slides = hello_world_slides(str(tmp_path / "missing.png"))
        deck = Deck(slides, output_dir=output_dir, **SMALL)
        report = deck.render()
        assert _names(output_dir) == ["000.png", "001.png", "003.png"]
        assert report.skipped == [2]
        assert len(report.errors) == 1
        assert report.indices_consumed == 4
        assert deck.next_index == 4

    def test_compact_numbering_closes_gap(self, output_dir, tmp_path):
        slides = hello_world_slides(str(tmp_path / "missing.png"))
        deck = Deck(slides, output_dir=output_dir, numbering=NumberingPolicy.COMPACT, **SMALL)
        report = deck.render()
        assert _names(output_dir) == ["000.png", "001.png", "002.png"]
        assert report.indices_consumed == 3
        assert report.skipped == [2]

    def test_write_failure_still_advances(self, tmp_path):
        deck = Deck(
            [TitleSlide(text="a"), TitleSlide(text="b")],
            output_dir=tmp_path / "does-not-exist",
            **SMALL,
        )
        report = deck.render()
        assert report.written == []
        assert report.skipped == [0, 1]
        assert len(report.errors) == 2
        assert deck.next_index == 2

    def test_written_paths_in_deck_order(self, output_dir):
        slides = [TitleSlide(text=str(i)) for i in range(5)]
        report = Deck(slides, output_dir=output_dir, **SMALL).render()
        assert [p.name for p in report.written] == [f"{i:03d}.png" for i in range(5)]

    def test_empty_bullets_slide_is_exported(self, output_dir):
        report = Deck([BulletSlide(title="Only")], output_dir=output_dir, **SMALL).render()
        assert report.written == [output_dir / "000.png"]

    def test_empty_deck(self, output_dir):
        report = Deck(output_dir=output_dir).render()
        assert report == ExportReport()
        assert _names(output_dir) == []

    def test_surface_failure_aborts_run(self, output_dir):
        deck = Deck([TitleSlide(text="a")], output_dir=output_dir, width=0, height=1080)
        with pytest.raises(SurfaceCreationError):
            deck.render()
        assert _names(output_dir) == []
        assert deck.next_index == 0

    def test_oversized_image_is_skipped_and_run_continues(
        self, output_dir, red_image_path, monkeypatch
    ):
        monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 100)
        slides = [ImageSlide(path=str(red_image_path)), TitleSlide(text="after")]
        deck = Deck(slides, output_dir=output_dir, **SMALL)
        report = deck.render()
        assert report.skipped == [0]
        assert _names(output_dir) == ["001.png"]
        assert deck.next_index == 2

    def test_module_render_delegates(self, output_dir):
        deck = Deck([TitleSlide(text="a")], output_dir=output_dir, **SMALL)
        report = render(deck)
        assert report.written == [output_dir / "000.png"]

    def test_slides_get_fresh_canvases(self, output_dir):
        slides = [BulletSlide(title="First", items=["x"]), TitleSlide(text="Second")]
        Deck(slides, output_dir=output_dir).render()

        alone = output_dir / "alone"
        alone.mkdir()
        Deck([TitleSlide(text="Second")], output_dir=alone).render()
        with Image.open(output_dir / "001.png") as a, Image.open(alone / "000.png") as b:
            assert a.tobytes() == b.tobytes()


# ── Output Directory ─────────────────────────────────────────────


class TestEnsureOutputDir:
    def test_creates_owner_only_directory(self, tmp_path):
        target = tmp_path / "output"
        path = ensure_output_dir(target)
        assert path.is_dir()
        assert stat.S_IMODE(os.stat(target).st_mode) == 0o700

    def test_existing_directory_is_kept(self, output_dir):
        (output_dir / "keep.txt").write_text("x")
        ensure_output_dir(output_dir)
        assert (output_dir / "keep.txt").exists()

    def test_file_in_the_way_raises(self, tmp_path):
        blocker = tmp_path / "output"
        blocker.write_text("not a dir")
        with pytest.raises(DirectoryCreationError):
            ensure_output_dir(blocker)


# ── Skill Wrapper ────────────────────────────────────────────────


class TestRenderSkill:
    def test_creates_directory_and_renders(self, tmp_path):
        target = tmp_path / "nested" / "output"
        config = RenderConfig(output_dir=str(target), **SMALL)
        report = render_skill([TitleSlide(text="a"), {"kind": "title", "text": "b"}], config)
        assert _names(target) == ["000.png", "001.png"]
        assert report.ok

    def test_directory_failure_is_reported_and_run_continues(self, tmp_path, caplog):
        blocker = tmp_path / "output"
        blocker.write_text("not a dir")
        config = RenderConfig(output_dir=str(blocker), **SMALL)
        report = render_skill([TitleSlide(text="a")], config)
        assert "not a directory" in caplog.text
        assert report.skipped == [0]
