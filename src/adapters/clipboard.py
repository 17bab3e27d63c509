"""System clipboard access through the platform's copy tool.

Why a subprocess wrapper:
- Every desktop ships a copy command (pbcopy, clip, wl-copy, xclip, xsel);
  piping to it avoids a GUI toolkit dependency.
- Failures are raised as `ClipboardError` so the CLI can downgrade them to a
  warning; the password itself was already generated.
"""

from __future__ import annotations

import logging
import platform
import shutil
import subprocess

logger = logging.getLogger(__name__)

_LINUX_BACKENDS: tuple[tuple[str, ...], ...] = (
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
)


class ClipboardError(RuntimeError):
    """The clipboard could not be written."""


def detect_backend(system: str | None = None) -> list[str] | None:
    """Return the copy command for this platform, or None if none is installed."""

    system = system or platform.system()
    if system == "Darwin":
        return ["pbcopy"] if shutil.which("pbcopy") else None
    if system == "Windows":
        return ["clip"]
    if system == "Linux":
        for candidate in _LINUX_BACKENDS:
            if shutil.which(candidate[0]):
                return list(candidate)
    return None


def copy_to_clipboard(text: str, *, timeout: float = 5.0) -> str:
    """Copy `text` to the clipboard and return the backend name used."""

    command = detect_backend()
    if command is None:
        raise ClipboardError(
            f"no clipboard tool found for {platform.system() or 'this platform'} "
            "(install wl-clipboard, xclip or xsel)"
        )

    try:
        subprocess.run(
            command,
            input=text,
            text=True,
            check=True,
            timeout=timeout,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.PIPE,
        )
    except subprocess.CalledProcessError as exc:
        detail = (exc.stderr or "").strip() or f"exit status {exc.returncode}"
        raise ClipboardError(f"{command[0]} failed: {detail}") from exc
    except (OSError, subprocess.TimeoutExpired) as exc:
        raise ClipboardError(f"{command[0]} failed: {exc}") from exc

    logger.debug("Copied %d characters with %s", len(text), command[0])
    return command[0]
