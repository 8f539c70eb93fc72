"""CLI entry point — all commands defined here."""

from __future__ import annotations

import enum
import logging
from pathlib import Path
from typing import Optional

import typer
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from wcagcontrast import __version__
from wcagcontrast.models import WcagVerdict

app = typer.Typer(
    name="wcagcontrast",
    help="WCAG 2.0 color contrast checker.",
    no_args_is_help=True,
)
console = Console()


class ReportFormat(str, enum.Enum):
    TABLE = "table"
    JSON = "json"
    MARKDOWN = "markdown"


class Level(str, enum.Enum):
    AA_NORMAL = "AA_normal"
    AA_LARGE = "AA_large"
    AAA_NORMAL = "AAA_normal"
    AAA_LARGE = "AAA_large"


def version_callback(value: bool) -> None:
    if value:
        console.print(f"wcagcontrast {__version__}")
        raise typer.Exit()


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def main(
    version: Optional[bool] = typer.Option(  # noqa: UP007
        None, "--version", "-v", callback=version_callback, is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """wcagcontrast — contrast ratios and WCAG pass/fail for hex colors."""


@app.command()
def check(
    foreground: str = typer.Argument(..., help="Foreground (text) color, e.g. '#333' or 'ffffff'."),
    background: str = typer.Argument(..., help="Background color."),
    fmt: Optional[ReportFormat] = typer.Option(  # noqa: UP007
        None, "--format", "-f", help="Output format. Defaults to the configured format.",
    ),
    config: Optional[Path] = typer.Option(  # noqa: UP007
        None, "--config", "-c", help="Path to a wcagcontrast.yaml config file.",
    ),
    fail_under: Optional[Level] = typer.Option(  # noqa: UP007
        None, "--fail-under", help="Exit with code 2 if this level does not pass.",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging."),
) -> None:
    """Compute the contrast ratio of FOREGROUND on BACKGROUND."""
    from wcagcontrast.config import WcagContrastConfig
    from wcagcontrast.evaluator import evaluate
    from wcagcontrast.models import Invalid

    if config is not None and not config.is_file():
        console.print(f"[red]File not found:[/red] {config}")
        raise typer.Exit(code=1)

    try:
        cfg = WcagContrastConfig.load(config)
    except (yaml.YAMLError, ValidationError) as exc:
        console.print(f"[red]Invalid config:[/red] {exc}")
        raise typer.Exit(code=1)

    _setup_logging("DEBUG" if verbose else cfg.logging.level)

    verdict = evaluate(foreground, background)
    if isinstance(verdict, Invalid):
        console.print(f"[red]Invalid color:[/red] {verdict.message}")
        raise typer.Exit(code=1)

    report_format = fmt.value if fmt is not None else cfg.output.report_format
    if report_format == "json":
        from wcagcontrast.reporter import format_json_report

        console.print_json(format_json_report(foreground, background, verdict))
    elif report_format == "markdown":
        from wcagcontrast.reporter import format_markdown_report

        console.print(format_markdown_report(foreground, background, verdict), markup=False)
    else:
        _print_table(foreground, background, verdict)

    if fail_under is not None and not verdict.passes.as_dict()[fail_under.value]:
        raise typer.Exit(code=2)


def _print_table(foreground: str, background: str, verdict: WcagVerdict) -> None:
    from wcagcontrast.reporter import LEVEL_LABELS

    table = Table(title=f"Contrast: {foreground.strip()} on {background.strip()}")
    table.add_column("Metric", style="bold")
    table.add_column("Value")

    table.add_row("Ratio", f"{verdict.ratio:.2f}:1")
    table.add_row("Foreground luminance", f"{verdict.lum.fg:.4f}")
    table.add_row("Background luminance", f"{verdict.lum.bg:.4f}")
    table.add_row("Lighter", verdict.lum.lighter_is.value)
    for key, passed in verdict.passes.as_dict().items():
        table.add_row(LEVEL_LABELS[key], "[green]Pass[/green]" if passed else "[red]Fail[/red]")

    console.print(table)


@app.command()
def normalize(
    color: str = typer.Argument(..., help="Hex color to normalize."),
) -> None:
    """Print COLOR in canonical #rrggbb form."""
    from wcagcontrast.hexcolor import normalize_hex
    from wcagcontrast.models import Invalid

    normalized = normalize_hex(color)
    if isinstance(normalized, Invalid):
        console.print(f"[red]Invalid color:[/red] {normalized.message}")
        raise typer.Exit(code=1)

    console.print(f"#{normalized}")
