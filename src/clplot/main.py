"""
Main entry point for the clplot command line tool.
"""

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console

from .config.settings import PlotSettings
from .errors import ClplotError, ConfigError, SurfaceError
from .renderer.canvas import Canvas
from .renderer.shapes import Label, Line, Point, Rect
from .renderer.surface import RichTerminalSurface, TerminalSurface
from .renderer.viewbox import ScaledViewBox, ViewBox
from .schemas.coordinates import DomainPoint, GridPoint
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)


def draw_demo(canvas: Canvas) -> None:
    """
    Draw the demonstration scene.

    Args:
        canvas: Freshly created canvas to draw on
    """
    canvas.clear()
    for symbol, x, y in (
        ("b", 11, 5),
        ("e", 20, 12),
        ("a", 32, 7),
        ("n", 45, 20),
        ("s", 69, 22),
        (".", 80, 17),
        (".", 92, 25),
        (".", 110, 29),
    ):
        Point(GridPoint(x, y), symbol).draw(canvas)

    canvas.put_str("ha! I love printing!", GridPoint(1, 1))
    canvas.put_str("what if I have...\na newline?", canvas.origin_bl(3, 4))
    canvas.put_str("AAAA\nAAAA\nAAAA\nAAAA", GridPoint(1, 7))
    canvas.put_str_transparent("B  B\nBB  \n  BB\n B B", GridPoint(1, 7))

    frame = ViewBox(
        canvas,
        canvas.derive_point_dec(0.5, 0.2),
        GridPoint(max(canvas.width // 3, 2), max(canvas.height // 2, 2)),
    )
    Rect(GridPoint(0, 0), frame.size, "#").draw_vb(frame)
    Label(GridPoint(2, 1), "view box", transparent=True).draw_vb(frame)

    chart = ScaledViewBox(
        canvas,
        frame.origin.offset(1, 2),
        GridPoint(max(frame.size.x - 2, 1), max(frame.size.y - 3, 1)),
        x_min=0.0,
        x_max=1.0,
        y_min=0.0,
        y_max=1.0,
    )
    Line.in_svb(chart, DomainPoint(0.0, 0.0), DomainPoint(1.0, 1.0), "*").draw(canvas)


def run(settings: PlotSettings, surface: Optional[TerminalSurface] = None) -> int:
    """
    Size a canvas from the settings, draw the demo scene and finish.

    Args:
        settings: Resolved plot settings
        surface: Terminal surface; a Rich-backed one when omitted

    Returns:
        Process exit status
    """
    surface = surface or RichTerminalSurface()
    try:
        width, height = settings.resolve_size(surface)
        logger.debug("Drawing on a %dx%d canvas", width, height)
        canvas = Canvas.create(surface, width, height)
        draw_demo(canvas)
        canvas.finish()
    except SurfaceError as e:
        logger.error("Terminal interaction failed: %s", e)
        return 1
    except ClplotError as e:
        logger.error("Could not draw: %s", e)
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clplot",
        description="clplot - draw shapes and text on the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-W",
        "--width",
        type=int,
        default=None,
        help="Canvas width in columns (default: terminal width)",
    )
    parser.add_argument(
        "-H",
        "--height",
        type=int,
        default=None,
        help="Canvas height in rows (default: terminal rows minus one)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=None,
        help="Log debug output to stderr",
    )
    return parser


def cli(argv: Optional[List[str]] = None) -> int:
    """CLI entry point with argument parsing."""
    parser = build_parser()
    args = parser.parse_args(argv)

    err_console = Console(stderr=True)
    try:
        settings = PlotSettings.from_env(
            {"width": args.width, "height": args.height, "verbose": args.verbose}
        )
    except ConfigError as e:
        setup_logging(verbose=False, console=err_console)
        logger.error("%s", e)
        return 2

    setup_logging(verbose=settings.verbose, console=err_console)
    return run(settings)


if __name__ == "__main__":
    sys.exit(cli())
