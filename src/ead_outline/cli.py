"""CLI for ead-outline (outline JSON and HTML rendering of finding aids)."""

import json
from pathlib import Path
from typing import Annotated

import requests
import typer
from loguru import logger

from ead_outline.core.containers import SkippedReference
from ead_outline.core.document import EadDocument
from ead_outline.core.render.html import render_finding_aid_html
from ead_outline.core.tree.builder import build_component_tree
from ead_outline.core.tree.series import build_series_tree
from ead_outline.errors import EadError
from ead_outline.logging_config import configure_logging
from ead_outline.models.node import to_widget_tree
from ead_outline.sources import open_source, read_document

app = typer.Typer(help="Build navigation outlines and HTML views of EAD finding aids.")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
) -> None:
    configure_logging(verbose=verbose, quiet=quiet)


def _load(source: str) -> EadDocument:
    """Read and parse a finding aid, exiting with status 1 on failure."""
    try:
        return read_document(open_source(source))
    except EadError as exc:
        logger.error("{}", exc)
        raise typer.Exit(1) from exc
    except requests.RequestException as exc:
        logger.error("Cannot fetch {}: {}", source, exc)
        raise typer.Exit(1) from exc


def _report_skipped(skipped: list[SkippedReference]) -> None:
    for reference in skipped:
        logger.warning("Dropped folder at {}: {}", reference.locator, reference.reason)


@app.command()
def tree(
    source: str = typer.Argument(..., help="EAD file path or http(s) URL"),
    indent: int = typer.Option(2, "--indent", "-i", help="JSON indentation"),
    show_skipped: bool = typer.Option(
        False, "--show-skipped", help="Warn about folder references that were dropped"
    ),
) -> None:
    """Print the component outline as JSON."""
    document = _load(source)
    skipped: list[SkippedReference] = []
    nodes = build_component_tree(document, skipped=skipped)
    if show_skipped:
        _report_skipped(skipped)
    typer.echo(json.dumps(to_widget_tree(nodes), indent=indent or None))


@app.command()
def series(
    source: str = typer.Argument(..., help="EAD file path or http(s) URL"),
    object_id: str = typer.Option(..., "--object-id", "-o", help="Identifier used in links"),
    href_template: Annotated[
        str | None,
        typer.Option(
            "--href-template",
            help="Link format with {object_id} and {node_id} placeholders",
        ),
    ] = None,
    indent: int = typer.Option(2, "--indent", "-i", help="JSON indentation"),
    show_skipped: bool = typer.Option(
        False, "--show-skipped", help="Warn about folder references that were dropped"
    ),
) -> None:
    """Print the series/subseries container list outline as JSON."""
    document = _load(source)
    skipped: list[SkippedReference] = []
    nodes = build_series_tree(
        document, object_id=object_id, href_template=href_template, skipped=skipped
    )
    if show_skipped:
        _report_skipped(skipped)
    typer.echo(json.dumps(to_widget_tree(nodes), indent=indent or None))


@app.command()
def html(
    source: str = typer.Argument(..., help="EAD file path or http(s) URL"),
    output: Annotated[
        Path | None,
        typer.Option("--output", "-O", help="Write the fragment to this file"),
    ] = None,
) -> None:
    """Render the finding aid as an HTML fragment."""
    document = _load(source)
    try:
        fragment = render_finding_aid_html(document)
    except EadError as exc:
        logger.error("{}", exc)
        raise typer.Exit(1) from exc

    if output is None:
        typer.echo(fragment)
        return
    output.write_text(fragment, encoding="utf-8")
    logger.info("Wrote {}", output)
