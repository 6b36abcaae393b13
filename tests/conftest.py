"""Test fixtures for Folio."""

import logging
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Optional

import pytest
import structlog

ChapterWriter = Callable[..., Path]


@pytest.fixture(autouse=True)
def isolated_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[None, None, None]:
    """Keep config lookup and logging setup from leaking between tests.

    Config discovery reads ``./folio.yaml`` and ``FOLIO_*`` variables, so each
    test runs from its own directory with those variables cleared.
    """
    for var in (
        "FOLIO_CONFIG",
        "FOLIO_SITE_TITLE",
        "FOLIO_ERROR_TOLERANCE",
        "FOLIO_LOG_LEVEL",
        "FOLIO_TEMPLATE_DIR",
    ):
        monkeypatch.delenv(var, raising=False)
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)

    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    yield

    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            root_logger.removeHandler(handler)
    structlog.reset_defaults()


@pytest.fixture
def write_chapter() -> ChapterWriter:
    """Return a helper that writes a chapter with front-matter.

    Returns:
        Function taking (directory, filename, title, body, **front-matter)
    """

    def _write(
        directory: Path,
        filename: str,
        title: Optional[str] = None,
        body: str = "Some prose.\n",
        **frontmatter: object,
    ) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        lines = ["---"]
        if title is not None:
            lines.append(f"title: {title}")
        for key, value in frontmatter.items():
            lines.append(f"{key}: {value}")
        lines.append("---")
        path = directory / filename
        path.write_text("\n".join(lines) + "\n" + body, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def chapters_dir(tmp_path: Path, write_chapter: ChapterWriter) -> Path:
    """Create a small book of three chapters."""
    directory = tmp_path / "chapters"
    write_chapter(directory, "01-introduction.md", "Introduction", "# Hello\n\nWelcome.\n")
    write_chapter(directory, "02-starting-out.md", "Starting Out", "Type `1 + 1`.\n")
    write_chapter(
        directory,
        "03-types.md",
        "Types and Type Aliases",
        "```\nalias Point = { x : Float }\n```\n",
        layout="page",
    )
    return directory
