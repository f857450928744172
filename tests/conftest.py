from __future__ import annotations

from datetime import datetime

import pytest

from retouch.core.events import EditorEvent


@pytest.fixture(autouse=True)
def _isolate_home(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Prevent developer machine `~/.retouch/config.json` from influencing tests."""

    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("RETOUCH_DEBUG", "")
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def fixed_clock():
    """Clock that always returns the same instant."""
    return lambda: datetime(2024, 3, 9, 14, 5, 30)


@pytest.fixture
def events() -> list[EditorEvent]:
    """Event list usable as a sink via ``events.append``."""
    return []
