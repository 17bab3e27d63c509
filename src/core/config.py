"""Application configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking into
  the CLI.
- The CLI reads its defaults (length, mode letters, extras) from one place.
"""

from __future__ import annotations

import os
import re
import sys
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.charsets import DEFAULT_LENGTH

ENV_PREFIX = "TINYPW_"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "tinypw"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "tinypw"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "tinypw"
    return Path.home() / ".config" / "tinypw"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def settings_env_files() -> tuple[Path, ...]:
    return (Path(".env"), get_user_env_file())


def _quote_env_value(value: str) -> str:
    # Single-quoted: `#` and surrounding whitespace stay literal; only `\\` and
    # `\'` are unescaped on read.
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def _unquote_env_value(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] == "'":
        return re.sub(r"\\([\\'])", r"\1", value[1:-1])
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return re.sub(r'\\([\\"\'])', r"\1", value[1:-1])
    return value


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        if key:
            data[key] = _unquote_env_value(value.strip())
    return data


def read_user_env_vars() -> dict[str, str]:
    env_path = get_user_env_file()
    if not env_path.exists():
        return {}
    return _parse_env_lines(env_path.read_text(encoding="utf-8"))


def write_user_env_vars(values: dict[str, str]) -> Path:
    """Write/update variables in the user's global .env."""

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing = read_user_env_vars()
    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# tinypw user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={_quote_env_value(existing[key])}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typed and validated at the edge (env vars, .env files).
    - One configuration contract shared by every CLI command.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
        case_sensitive=False,
        env_file_encoding="utf-8",
    )

    def __init__(self, **values: Any) -> None:
        # Project .env first (dev), then the user's global config; resolved per
        # instance so a changed HOME/XDG_CONFIG_HOME is honoured.
        values.setdefault("_env_file", settings_env_files())
        super().__init__(**values)

    default_length: int = Field(
        default=DEFAULT_LENGTH,
        ge=0,
        description="Password length when --length is not given.",
    )
    default_mode: str = Field(
        default="ulnse",
        description="Mode letters when --mode is not given (u, l, n, s, e).",
    )
    default_extra: str = Field(
        default="",
        description="Extra characters when --extra is not given.",
    )
    bar_width: int = Field(
        default=24,
        ge=1,
        le=200,
        description="Number of cells in the strength bar.",
    )
    color: bool = Field(
        default=True,
        description="Colour the strength bar by label.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level for stderr diagnostics.",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level
