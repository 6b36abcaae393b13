"""Tests for the site building pipeline."""

import json
from pathlib import Path

import pytest

from folio.config import ErrorTolerance, FolioConfig
from folio.exceptions import ParseError, RenderError
from folio.pipeline import MANIFEST_NAME, SitePipeline


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    return tmp_path / "site"


def lenient_config(**processing) -> FolioConfig:
    return FolioConfig(processing={"error_tolerance": ErrorTolerance.LENIENT, **processing})


def test_build_writes_every_page(chapters_dir: Path, output_dir: Path) -> None:
    """Test a full build of a three chapter book."""
    result = SitePipeline().build(chapters_dir, output_dir)

    assert result.success
    assert [p.name for p in result.written] == [
        "introduction.html",
        "starting-out.html",
        "types-and-type-aliases.html",
        "index.html",
    ]
    assert all(p.exists() for p in result.written)
    page = (output_dir / "starting-out.html").read_text(encoding="utf-8")
    assert 'rel="prev" href="introduction.html"' in page
    assert 'rel="next" href="types-and-type-aliases.html"' in page
    assert not (output_dir / MANIFEST_NAME).exists()


def test_build_is_repeatable(chapters_dir: Path, output_dir: Path) -> None:
    SitePipeline().build(chapters_dir, output_dir)
    first = (output_dir / "introduction.html").read_bytes()

    SitePipeline().build(chapters_dir, output_dir)

    assert (output_dir / "introduction.html").read_bytes() == first


def test_manifest(chapters_dir: Path, output_dir: Path) -> None:
    config = FolioConfig(processing={"write_manifest": True})

    SitePipeline(config).build(chapters_dir, output_dir)

    manifest = json.loads((output_dir / MANIFEST_NAME).read_text(encoding="utf-8"))
    assert manifest[:2] == [
        {"title": "Introduction", "ref": "introduction"},
        {"title": "Starting Out", "ref": "starting-out"},
    ]


def test_concurrent_reads_match(chapters_dir: Path, tmp_path: Path) -> None:
    config = FolioConfig(processing={"concurrent_reads": True})

    concurrent = SitePipeline(config).build(chapters_dir, tmp_path / "a")
    sequential = SitePipeline().build(chapters_dir, tmp_path / "b")

    assert concurrent.collection == sequential.collection
    assert concurrent.toc == sequential.toc


def test_strict_build_aborts_on_parse_error(
    chapters_dir: Path, output_dir: Path, write_chapter
) -> None:
    write_chapter(chapters_dir, "04-broken.md", None)

    with pytest.raises(ParseError):
        SitePipeline().build(chapters_dir, output_dir)

    assert not output_dir.exists()


def test_lenient_build_skips_broken_chapter(
    chapters_dir: Path, output_dir: Path, write_chapter
) -> None:
    write_chapter(chapters_dir, "04-broken.md", None)

    result = SitePipeline(lenient_config()).build(chapters_dir, output_dir)

    assert not result.success
    assert len(result.collection) == 3
    assert len(result.errors) == 1
    assert result.skipped[0].endswith("04-broken.md")
    assert (output_dir / "index.html").exists()


def test_render_error_policy(chapters_dir: Path, output_dir: Path, write_chapter) -> None:
    write_chapter(chapters_dir, "04-gallery.md", "Gallery", layout="gallery")

    with pytest.raises(RenderError):
        SitePipeline().build(chapters_dir, output_dir / "strict")

    result = SitePipeline(lenient_config()).build(chapters_dir, output_dir / "lenient")

    assert result.skipped == ["gallery"]
    assert isinstance(result.errors[0], RenderError)
    assert not (output_dir / "lenient" / "gallery.html").exists()
    assert [entry.ref for entry in result.toc] == [
        "introduction",
        "starting-out",
        "types-and-type-aliases",
    ]
    assert result.collection.get("gallery") is None
    index = (output_dir / "lenient" / "index.html").read_text(encoding="utf-8")
    assert "gallery.html" not in index
    last = (output_dir / "lenient" / "types-and-type-aliases.html").read_text(encoding="utf-8")
    assert "gallery.html" not in last
    assert 'rel="next"' not in last


def test_render_error_dropped_from_manifest(
    chapters_dir: Path, output_dir: Path, write_chapter
) -> None:
    write_chapter(chapters_dir, "02-gallery.md", "Gallery", order=5, layout="gallery")

    result = SitePipeline(lenient_config(write_manifest=True)).build(chapters_dir, output_dir)

    manifest = json.loads((output_dir / MANIFEST_NAME).read_text(encoding="utf-8"))
    assert [entry["ref"] for entry in manifest] == [
        "introduction",
        "starting-out",
        "types-and-type-aliases",
    ]
    assert result.skipped == ["gallery"]
    assert len(result.errors) == 1
