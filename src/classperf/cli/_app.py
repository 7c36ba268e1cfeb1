"""App definition, shared state, and root callback for the classperf CLI."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from classperf.config_loader import EvaluationConfig, load_config

from ._theme import CP_THEME

app = typer.Typer(
    help="Evaluate binary classifier scores with precision-recall and ROC curves.",
    epilog=(
        "[dim]Input is a two-column table with a header naming the "
        "[bold]predictions[/bold] and [bold]labels[/bold] columns.\n"
        "  Curve            → classperf roc scores.table\n"
        "  Area under curve → classperf roc-auc scores.table\n"
        "  Best threshold   → classperf optimal-precision-recall scores.table\n"
        "  Everything       → classperf summary scores.table[/dim]"
    ),
    rich_markup_mode="rich",
    no_args_is_help=True,
)

console = Console(theme=CP_THEME)
err_console = Console(theme=CP_THEME, stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        import platform

        import numpy as np

        from classperf import __version__

        console.print(
            f"classperf [bold]{__version__}[/bold]  "
            f"(Python {platform.python_version()}, NumPy {np.__version__})"
        )
        raise typer.Exit()


def _verbosity_level(verbose: int) -> int:
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return logging.WARNING


def _configure_logging(verbose: int) -> None:
    """Send log records to stderr at a level chosen by ``-v`` count.

    Warnings such as ``DegenerateInputWarning`` are routed through the
    ``py.warnings`` logger so each one is reported once, in log format.
    """
    level = _verbosity_level(verbose)
    logging.basicConfig(level=level, format="%(name)s %(levelname)s %(message)s")
    logging.getLogger("classperf").setLevel(level)
    logging.captureWarnings(True)


def fail(message: str) -> typer.Exit:
    """Print an error line on stderr and return the exit to raise."""
    err_console.print(f"[cp.fail]Error:[/cp.fail] {escape(message)}", highlight=False)
    return typer.Exit(code=1)


@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to classperf.toml (default: ./classperf.toml when present).",
    ),
    verbose: int = typer.Option(
        0, "--verbose", "-v", count=True, help="Verbose level [-v or -vv]."
    ),
) -> None:
    """classperf command-line interface."""
    try:
        settings = load_config(config)
    except (OSError, ValueError) as exc:
        raise fail(str(exc)) from None

    settings = settings.merged(verbose=verbose)
    _configure_logging(settings.logging.verbose)
    ctx.obj = settings


def settings_from(
    ctx: typer.Context,
    *,
    print_header: bool = False,
    print_thresholds: bool = False,
    normalize_precision: bool = False,
) -> EvaluationConfig:
    """Merge per-command flags into the settings stored by the root callback."""
    base = ctx.obj if isinstance(ctx.obj, EvaluationConfig) else EvaluationConfig()
    return base.merged(
        print_header=print_header,
        print_thresholds=print_thresholds,
        normalize_precision=normalize_precision,
    )
