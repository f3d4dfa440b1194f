"""
Tests for the clplot command line entry point.
"""

from __future__ import annotations

import logging

import pytest

from clplot import main as main_module
from clplot.config.settings import PlotSettings
from clplot.renderer.recording import RecordingSurface
from clplot.renderer.surface import SAVE_CURSOR
from clplot.utils.logging import setup_logging


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ("CLPLOT_WIDTH", "CLPLOT_HEIGHT", "CLPLOT_RESERVE_ROWS", "CLPLOT_VERBOSE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def test_cli_run_draws_demo_and_finishes() -> None:
    surface = RecordingSurface(columns=60, rows=21)
    status = main_module.run(PlotSettings(), surface)

    assert status == 0
    assert surface.commands[-3:] == [("restore",), ("down", 1), ("flush",)]
    assert "ha! I love printing!" in surface.line(1)
    assert surface.line(7).startswith(" BAAB")


def test_cli_run_reports_surface_failure() -> None:
    surface = RecordingSurface(columns=60, rows=21, fail_on_flush=True)
    assert main_module.run(PlotSettings(), surface) == 1


def test_cli_writes_escape_sequences_to_stdout(capsys) -> None:
    status = main_module.cli(["-W", "30", "-H", "8"])
    captured = capsys.readouterr()
    assert status == 0
    assert captured.out.startswith("\n" * 8 + SAVE_CURSOR)


def test_cli_rejects_invalid_size() -> None:
    assert main_module.cli(["--width", "0"]) == 2


def test_cli_help_exits_cleanly() -> None:
    with pytest.raises(SystemExit) as excinfo:
        main_module.cli(["--help"])
    assert excinfo.value.code == 0


def test_setup_logging_levels() -> None:
    logger = setup_logging(verbose=True)
    assert logger.name == "clplot"
    assert logger.level == logging.DEBUG
    assert not logger.propagate
    assert setup_logging(verbose=False).level == logging.WARNING
