"""Tests for the clipboard adapter (subprocess is never really spawned)."""

import subprocess

import pytest

from adapters import clipboard
from adapters.clipboard import ClipboardError, copy_to_clipboard, detect_backend


def _which_only(*available):
    return lambda name: f"/usr/bin/{name}" if name in available else None


def test_detect_prefers_wayland_on_linux(monkeypatch):
    monkeypatch.setattr(clipboard.shutil, "which", _which_only("wl-copy", "xclip"))

    assert detect_backend("Linux") == ["wl-copy"]


def test_detect_falls_back_to_xsel(monkeypatch):
    monkeypatch.setattr(clipboard.shutil, "which", _which_only("xsel"))

    assert detect_backend("Linux") == ["xsel", "--clipboard", "--input"]


def test_detect_windows_and_unknown(monkeypatch):
    monkeypatch.setattr(clipboard.shutil, "which", _which_only())

    assert detect_backend("Windows") == ["clip"]
    assert detect_backend("Darwin") is None
    assert detect_backend("Plan9") is None


def test_copy_pipes_text_to_backend(monkeypatch):
    calls = []
    monkeypatch.setattr(clipboard, "detect_backend", lambda: ["xclip", "-selection", "clipboard"])
    monkeypatch.setattr(
        clipboard.subprocess,
        "run",
        lambda command, **kwargs: calls.append((command, kwargs["input"])),
    )

    assert copy_to_clipboard("s3cret") == "xclip"
    assert calls == [(["xclip", "-selection", "clipboard"], "s3cret")]


def test_copy_without_backend_raises(monkeypatch):
    monkeypatch.setattr(clipboard, "detect_backend", lambda: None)

    with pytest.raises(ClipboardError, match="no clipboard tool"):
        copy_to_clipboard("x")


def test_copy_reports_tool_failure(monkeypatch):
    def fail(command, **kwargs):
        raise subprocess.CalledProcessError(1, command, stderr="Can't open display")

    monkeypatch.setattr(clipboard, "detect_backend", lambda: ["xclip"])
    monkeypatch.setattr(clipboard.subprocess, "run", fail)

    with pytest.raises(ClipboardError, match="Can't open display"):
        copy_to_clipboard("x")
