"""
Tests for plot settings and size resolution.
"""

from __future__ import annotations

import os

import pytest

from clplot.config.settings import PlotSettings
from clplot.errors import ConfigError
from clplot.renderer.recording import RecordingSurface

ENV_VARS = ["CLPLOT_WIDTH", "CLPLOT_HEIGHT", "CLPLOT_RESERVE_ROWS", "CLPLOT_VERBOSE"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Keep load_dotenv() from finding a developer's .env file
    monkeypatch.chdir(tmp_path)


class _NoSizeSurface(RecordingSurface):
    def size(self):
        raise AssertionError("terminal size should not be queried")


def test_defaults() -> None:
    settings = PlotSettings.from_env()
    assert settings.width is None
    assert settings.height is None
    assert settings.reserve_rows == 1
    assert settings.verbose is False


def test_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("CLPLOT_WIDTH", "50")
    monkeypatch.setenv("CLPLOT_HEIGHT", " 12 ")
    monkeypatch.setenv("CLPLOT_RESERVE_ROWS", "0")
    monkeypatch.setenv("CLPLOT_VERBOSE", "yes")
    settings = PlotSettings.from_env()
    assert (settings.width, settings.height, settings.reserve_rows) == (50, 12, 0)
    assert settings.verbose is True


def test_reads_dotenv_file(tmp_path) -> None:
    (tmp_path / ".env").write_text("CLPLOT_WIDTH=33\n", encoding="utf-8")
    try:
        assert PlotSettings.from_env().width == 33
    finally:
        os.environ.pop("CLPLOT_WIDTH", None)


def test_overrides_win_and_none_is_ignored(monkeypatch) -> None:
    monkeypatch.setenv("CLPLOT_WIDTH", "50")
    monkeypatch.setenv("CLPLOT_HEIGHT", "12")
    settings = PlotSettings.from_env({"width": 30, "height": None})
    assert (settings.width, settings.height) == (30, 12)


@pytest.mark.parametrize("value", ["abc", "0", "-4"])
def test_invalid_width_raises_config_error(monkeypatch, value) -> None:
    monkeypatch.setenv("CLPLOT_WIDTH", value)
    with pytest.raises(ConfigError):
        PlotSettings.from_env()


def test_resolve_size_from_terminal() -> None:
    surface = RecordingSurface(columns=100, rows=30)
    assert PlotSettings().resolve_size(surface) == (100, 29)
    assert PlotSettings(reserve_rows=0).resolve_size(surface) == (100, 30)
    assert PlotSettings(width=20).resolve_size(surface) == (20, 29)


def test_resolve_size_never_below_one_row() -> None:
    surface = RecordingSurface(columns=10, rows=1)
    assert PlotSettings(reserve_rows=3).resolve_size(surface) == (10, 1)


def test_explicit_size_skips_terminal_query() -> None:
    assert PlotSettings(width=7, height=3).resolve_size(_NoSizeSurface()) == (7, 3)
