"""Shared fixtures: isolate settings from the developer's environment."""

from __future__ import annotations

import os

import pytest


class SequenceSource:
    """Random source that replays fixed indices and counts calls."""

    def __init__(self, indices):
        self._indices = list(indices)
        self.calls: list[int] = []

    def randrange(self, stop: int) -> int:
        self.calls.append(stop)
        return self._indices[(len(self.calls) - 1) % len(self._indices)]


class ExplodingSource:
    def randrange(self, stop: int) -> int:
        raise AssertionError("random source must not be consulted")


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    for key in list(os.environ):
        if key.upper().startswith("TINYPW_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("APPDATA", str(tmp_path / "config"))
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setenv("USERPROFILE", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)
    return tmp_path
