"""tinypw command line.

The root command generates a password; `doctor` groups diagnostics and the
interactive defaults setup.
"""

from __future__ import annotations

import logging
import sys

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from adapters.clipboard import ClipboardError, copy_to_clipboard
from cli import doctor
from cli.options import config_from_mode
from cli.ui_components import render_strength_bar
from core.config import AppSettings
from core.services.password_pipeline import generate_password

app = typer.Typer(
    name="tinypw",
    help="Yet another tiny CLI tool to generate passwords.",
    add_completion=False,
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(message)s",
        handlers=[RichHandler(console=_err_console, show_time=False, show_path=False)],
        force=True,
    )


def load_settings() -> AppSettings:
    try:
        return AppSettings()
    except ValidationError as exc:
        _err_console.print(f"[red]Invalid configuration:[/red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    length: int | None = typer.Option(None, "--length", "-l", help="Set the password length."),
    to_clipboard: bool = typer.Option(False, "--clipboard", "-c", help="Copy password to clipboard."),
    mode: str | None = typer.Option(
        None,
        "--mode",
        "-m",
        help="Mode: include u=uppercase l=lowercase s=symbols n=numbers e=exclude similars.",
    ),
    extra: str | None = typer.Option(None, "--extra", "-e", help="Extra chars to add to the base set of chars."),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr."),
) -> None:
    """Generate a password and show its strength."""

    settings = load_settings()
    configure_logging("DEBUG" if verbose else settings.log_level)

    if ctx.invoked_subcommand is not None:
        return

    try:
        config = config_from_mode(
            length=settings.default_length if length is None else length,
            mode=settings.default_mode if mode is None else mode,
            extra=settings.default_extra if extra is None else extra,
        )
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc

    report = generate_password(config)

    if as_json:
        typer.echo(report.model_dump_json(indent=2))
    else:
        typer.echo(f"Password: {report.password}")
        _console.print(render_strength_bar(report.estimate, width=settings.bar_width, color=settings.color))

    if to_clipboard:
        try:
            copy_to_clipboard(report.password)
        except ClipboardError as exc:
            _err_console.print(f"[yellow]Warning:[/yellow] failed to copy to clipboard: {escape(str(exc))}")
        else:
            if not as_json:
                _console.print("Password copied to clipboard.")


def run() -> None:
    # Block characters and emoji in the strength bar fail on cp1252 consoles.
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")
    app()
