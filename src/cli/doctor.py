"""Doctor command for environment diagnostics."""

from __future__ import annotations

import random

import typer
from rich.console import Console
from rich.markup import escape

from adapters.clipboard import detect_backend
from cli.options import MODE_LETTERS, config_from_mode
from cli.ui_components import build_settings_table, render_strength_bar
from core.config import ENV_PREFIX, AppSettings, get_user_env_file, write_user_env_vars
from core.domain.models import PasswordReport
from core.services.password_pipeline import generate_password

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_pipeline(settings: AppSettings) -> tuple[PasswordReport | None, str]:
    """Run the pipeline once with a seeded source to catch a broken config."""

    try:
        config = config_from_mode(
            length=settings.default_length,
            mode=settings.default_mode,
            extra=settings.default_extra,
        )
        report = generate_password(config, rng=random.Random(0))
    except Exception as exc:
        return None, str(exc)
    if len(report.password) != config.length:
        return None, f"expected {config.length} characters, got {len(report.password)}"
    return report, f"pool of {report.pool_size} characters"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = build_settings_table("tinypw Doctor")

    # Config
    env_file = get_user_env_file()
    table.add_row("User config", "OK" if env_file.exists() else "DEFAULTS", str(env_file))
    table.add_row("Default length", "OK", str(settings.default_length))
    table.add_row("Default mode", "OK", escape(settings.default_mode))
    table.add_row("Default extra", "OK", escape(settings.default_extra) or "(none)")

    # Clipboard
    backend = detect_backend()
    if backend:
        table.add_row("Clipboard", "OK", " ".join(backend))
    else:
        table.add_row("Clipboard", "MISSING", "Install wl-clipboard, xclip or xsel to use --clipboard")

    report, detail_pipeline = _check_pipeline(settings)
    table.add_row("Generator", "OK" if report is not None else "FAIL", detail_pipeline)

    _console.print(table)

    if report is not None:
        _console.print("\nStrength of a password with the current defaults:")
        _console.print(render_strength_bar(report.estimate, width=settings.bar_width, color=settings.color))


@app.command()
def setup() -> None:
    """Interactive setup of default length, mode and extras (stored in the user config .env)."""

    settings = AppSettings()

    length = typer.prompt("Default length", default=settings.default_length, type=int)
    if length < 0:
        raise typer.BadParameter("length must be >= 0")

    mode = typer.prompt(
        f"Default mode letters ({MODE_LETTERS})",
        default=settings.default_mode,
        show_default=True,
    ).strip()
    unknown = sorted({ch for ch in mode if ch not in MODE_LETTERS})
    if unknown:
        raise typer.BadParameter(f"unknown mode letters: {''.join(unknown)}")

    extra = typer.prompt("Default extra characters", default=settings.default_extra, show_default=False)

    env_path = write_user_env_vars(
        {
            f"{ENV_PREFIX}DEFAULT_LENGTH": str(length),
            f"{ENV_PREFIX}DEFAULT_MODE": mode,
            f"{ENV_PREFIX}DEFAULT_EXTRA": extra,
        }
    )

    _console.print(f"[green]Saved defaults to:[/green] {env_path}")
