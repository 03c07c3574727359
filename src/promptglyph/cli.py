"""CLI entry point for rendering prompt templates."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

console = Console()


@click.group()
@click.version_option(version="0.1.0")
def main() -> None:
    """Render prompt templates with icon and color helpers."""


# ---------------------------------------------------------------------------
# render — render a single template source
# ---------------------------------------------------------------------------


@main.command()
@click.argument("source")
@click.option("--data", "-d", "data_json", default=None, help="Template data as a JSON object")
@click.option(
    "--data-file",
    "-f",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read template data from a JSON file",
)
@click.option("--fancy/--plain", default=None, help="Use fancy or plain icons")
@click.option("--no-color", is_flag=True, help="Render color helpers as empty strings")
def render(
    source: str,
    data_json: str | None,
    data_file: Path | None,
    fancy: bool | None,
    no_color: bool,
) -> None:
    """Render SOURCE, a Jinja2 template string, and print the result."""
    from promptglyph.config import get_settings
    from promptglyph.render.cache import TemplateCache
    from promptglyph.render.errors import TemplateError

    settings = get_settings()
    _setup_logging(settings.log_level)

    if data_json and data_file:
        raise click.UsageError("Use either --data or --data-file, not both.")
    data = _load_data(data_json, data_file)

    cache = TemplateCache(_build_registry(settings, fancy=fancy, no_color=no_color))
    try:
        output = cache.render(source, data)
    except TemplateError as exc:
        console.print(f"[bold red]{type(exc).__name__}:[/bold red] {escape(str(exc))}")
        raise SystemExit(1)

    # Printed raw: the output may already contain escape codes.
    click.echo(output, nl=not output.endswith("\n"))


# ---------------------------------------------------------------------------
# icons — show the icon set
# ---------------------------------------------------------------------------


@main.command()
@click.option("--fancy/--plain", default=None, help="Show fancy or plain icons")
def icons(fancy: bool | None) -> None:
    """List the icon helpers available to templates."""
    from promptglyph.config import get_settings
    from promptglyph.render.icons import IconSet

    settings = get_settings()
    icon_set = IconSet.for_settings(settings.fancy_icons if fancy is None else fancy)

    table = Table(title="Prompt Icons")
    table.add_column("Helper", style="bold")
    table.add_column("Symbol")
    table.add_column("Color", style="dim")
    for name, icon in icon_set.helper_names().items():
        table.add_row(name, escape(icon.symbol), icon.color)
    console.print(table)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _build_registry(settings: object, *, fancy: bool | None, no_color: bool):
    """Build the helper registry from settings, with CLI overrides applied."""
    from promptglyph.render.colors import ColorFormatter
    from promptglyph.render.helpers import build_registry
    from promptglyph.render.icons import IconSet

    use_fancy = getattr(settings, "fancy_icons", False) if fancy is None else fancy
    colors = ColorFormatter(
        enabled=not (no_color or getattr(settings, "disable_color", False)),
        color_system=getattr(settings, "color_system", "256"),
    )
    return build_registry(IconSet.for_settings(use_fancy), colors)


def _load_data(data_json: str | None, data_file: Path | None) -> dict:
    """Parse template data from a JSON string or file. Must be an object."""
    raw = data_file.read_text() if data_file else data_json
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"invalid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise click.BadParameter("template data must be a JSON object")
    return data


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )
