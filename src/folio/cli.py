"""Command line interface for Folio."""

import json
from pathlib import Path
from typing import Optional

import typer

from folio.config import ErrorTolerance, FolioConfig, load_config
from folio.content.loader import ContentLoader
from folio.exceptions import FolioError
from folio.logging import configure_logging, get_logger
from folio.navigation.toc import build_toc
from folio.pipeline import SitePipeline
from folio.utils.console import FolioConsole

folio_console = FolioConsole()
logger = get_logger(__name__)

app = typer.Typer(help="Folio - assemble markdown chapters into a navigable site.")


def _setup(
    config_path: Optional[Path],
    strict: Optional[bool] = None,
    template_dir: Optional[Path] = None,
    manifest: Optional[bool] = None,
    verbose: bool = False,
) -> FolioConfig:
    config = load_config(config_path)
    if strict is not None:
        config.processing.error_tolerance = (
            ErrorTolerance.STRICT if strict else ErrorTolerance.LENIENT
        )
    if template_dir is not None:
        config.render.template_dir = template_dir
    if manifest is not None:
        config.processing.write_manifest = manifest
    if verbose:
        config.logging.level = "DEBUG"
    configure_logging(config.logging)
    return config


@app.command()
def build(
    source: Path = typer.Argument(..., help="Directory containing markdown chapters"),
    output: Path = typer.Argument(..., help="Output directory for the rendered site"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file"),
    template_dir: Optional[Path] = typer.Option(None, "--templates", "-t", help="Template directory"),
    strict: Optional[bool] = typer.Option(
        None, "--strict/--lenient", help="Abort on the first error or skip broken chapters"
    ),
    manifest: Optional[bool] = typer.Option(
        None, "--manifest/--no-manifest", help="Also write toc.json"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show verbose output"),
) -> None:
    """Render every chapter and an index page into OUTPUT."""
    try:
        config = _setup(config_path, strict, template_dir, manifest, verbose)
        folio_console.build_started(source, output)
        result = SitePipeline(config).build(source, output)
    except FolioError as e:
        logger.error("build_failed", error=e.message, source=e.source, stage=e.stage)
        folio_console.error("Build failed", detail=str(e))
        raise typer.Exit(1)

    folio_console.report_errors(result.errors, label="Skipped")
    folio_console.build_summary(
        chapters=len(result.collection),
        written=len(result.written),
        skipped=len(result.skipped),
    )
    if not result.success:
        raise typer.Exit(1)


@app.command()
def toc(
    source: Path = typer.Argument(..., help="Directory containing markdown chapters"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file"),
    as_json: bool = typer.Option(False, "--json", help="Print the table of contents as JSON"),
) -> None:
    """Print the table of contents."""
    try:
        config = _setup(config_path)
        entries = build_toc(ContentLoader(config).load(source))
    except FolioError as e:
        folio_console.error("Cannot build table of contents", detail=str(e))
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps([entry.to_dict() for entry in entries], indent=2, ensure_ascii=False))
        return
    folio_console.chapter_table(entries, title=config.site.title)


@app.command()
def check(
    source: Path = typer.Argument(..., help="Directory containing markdown chapters"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file"),
) -> None:
    """Load every chapter and report problems without writing anything."""
    try:
        config = _setup(config_path, strict=False)
        loader = ContentLoader(config)
        collection = loader.load(source)
    except FolioError as e:
        folio_console.error("Check failed", detail=str(e))
        raise typer.Exit(1)

    if folio_console.report_errors(loader.errors):
        raise typer.Exit(1)
    folio_console.success(f"{len(collection)} chapters OK")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
