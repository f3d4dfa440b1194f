"""
Canvas: a rectangular character grid carved out of the terminal.

The canvas never addresses the terminal absolutely. On creation it prints
``height`` blank lines, then saves the cursor as its anchor. Every write starts
by restoring that anchor, moving up ``height - y`` rows and right ``x`` columns,
then printing. Only ``resize`` moves the anchor, and doing so makes the old
canvas stale.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterator, List, Tuple, Union

from ..errors import BoundsError, StaleCanvasError
from ..schemas.coordinates import GridPoint, clamp
from .surface import TerminalSurface

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Bounds:
    """Clip rectangle, inclusive on both ends."""

    x_min: int
    x_max: int
    y_min: int
    y_max: int

    @classmethod
    def full(cls, width: int, height: int) -> "Bounds":
        return cls(0, width, 0, height)

    def fits(self, width: int, height: int) -> bool:
        return (
            0 <= self.x_min <= self.x_max <= width
            and 0 <= self.y_min <= self.y_max <= height
        )


def clip(text: str, max_len: int) -> str:
    """Cut off the end of a string if it is too long."""
    if max_len <= 0:
        return ""
    return text if len(text) <= max_len else text[:max_len]


def transparent_runs(line: str) -> Iterator[Tuple[str, Union[str, int]]]:
    """
    Split a line into the commands needed to draw it without painting whitespace.

    Yields ``("text", str)`` for each run of visible characters and
    ``("skip", int)`` for each whitespace run followed by more text. Trailing
    whitespace yields nothing.

    Args:
        line: A single line (no newlines)
    """
    length = len(line)
    start = 0
    while start < length:
        gap = start
        while gap < length and not line[gap].isspace():
            gap += 1
        if gap == length:
            yield ("text", line[start:])
            return
        if gap > start:
            yield ("text", line[start:gap])

        resume = gap
        while resume < length and line[resume].isspace():
            resume += 1
        if resume == length:
            return
        yield ("skip", resume - gap)
        start = resume


class Canvas:
    """
    Terminal-backed plot area.

    Use ``Canvas.create`` rather than the constructor; the constructor does not
    touch the terminal.
    """

    def __init__(
        self,
        surface: TerminalSurface,
        width: int,
        height: int,
        generation: int,
    ):
        self.surface = surface
        self.width = width
        self.height = height
        self._generation = generation
        self._bounds = Bounds.full(width, height)

    @staticmethod
    def _check_size(width: int, height: int) -> None:
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise BoundsError(f"Canvas {name} must be a non-negative int, got {value!r}")

    @classmethod
    def create(cls, surface: TerminalSurface, width: int, height: int) -> "Canvas":
        """
        Create a new plot area of a specified width/height.

        Prints ``height`` newlines (scrolling the terminal if needed) and saves
        the cursor position as the anchor.

        Args:
            surface: Terminal to draw on
            width: Number of columns
            height: Number of rows

        Returns:
            Canvas with bounds covering the whole area
        """
        cls._check_size(width, height)
        surface.write("\n" * height)
        generation = surface.save_anchor()
        surface.flush()
        logger.debug("Created %dx%d canvas (anchor generation %d)", width, height, generation)
        return cls(surface, width, height, generation)

    # Handle state

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def is_stale(self) -> bool:
        """True once another anchor has been saved on the surface."""
        return self.surface.anchor_generation != self._generation

    def _ensure_live(self) -> None:
        if self.is_stale:
            raise StaleCanvasError(
                f"Canvas anchored at generation {self._generation} is stale; "
                f"surface is at generation {self.surface.anchor_generation}"
            )

    def resize(self, width: int, height: int) -> "Canvas":
        """
        Resize the plot to a new width/height.

        New blank lines are printed above the current anchor and a fresh anchor
        is saved. This canvas is stale afterwards; use the returned one. Clear
        the new canvas before drawing if the old content should go.

        Returns:
            A new Canvas anchored at the new position
        """
        self._ensure_live()
        self._check_size(width, height)
        surface = self.surface
        surface.restore_anchor()
        self._move_up(self.height)
        surface.write("\n" * height)
        generation = surface.save_anchor()
        surface.flush()
        logger.debug(
            "Resized canvas %dx%d -> %dx%d (anchor generation %d)",
            self.width,
            self.height,
            width,
            height,
            generation,
        )
        return Canvas(surface, width, height, generation)

    # Bounds

    @property
    def bounds(self) -> Bounds:
        return self._bounds

    def set_bounds(self, x_min: int, x_max: int, y_min: int, y_max: int) -> None:
        """
        Narrow the clip rectangle used by every placement call.

        Raises:
            BoundsError: if the rectangle is inverted or leaves the canvas
        """
        bounds = Bounds(x_min, x_max, y_min, y_max)
        if not bounds.fits(self.width, self.height):
            raise BoundsError(
                f"Bounds {bounds} do not fit a {self.width}x{self.height} canvas"
            )
        self._bounds = bounds

    def reset_bounds(self) -> None:
        self._bounds = Bounds.full(self.width, self.height)

    def _clamp_xy(self, x: int, y: int) -> GridPoint:
        b = self._bounds
        return GridPoint(clamp(x, b.x_min, b.x_max), clamp(y, b.y_min, b.y_max))

    def clamp_to_plot(self, point: GridPoint) -> GridPoint:
        """Constrain a point within the clip rectangle; each axis is clamped separately."""
        return self._clamp_xy(point.x, point.y)

    def origin_bl(self, x: int, y: int) -> GridPoint:
        """Get a point ``x`` columns in and ``y`` rows up from the anchor row."""
        return self._clamp_xy(x, self.height - y)

    def origin_br(self, x: int, y: int) -> GridPoint:
        """Get a point offset from the bottom right of the plot area."""
        return self._clamp_xy(self.width - x, self.height - y)

    def derive_point_dec(self, x: float, y: float) -> GridPoint:
        """
        Derive a point from fractions of the plot size.

        (0.0, 0.0) is the top left cell and (1.0, 1.0) the bottom right.
        """
        fx = clamp(float(x), 0.0, 1.0)
        fy = clamp(float(y), 0.0, 1.0)
        return self._clamp_xy(
            math.floor(fx * self.width + 0.5), math.floor(fy * self.height + 0.5)
        )

    # Cursor protocol

    def _move_up(self, rows: int) -> None:
        if rows > 0:
            self.surface.move_up(rows)

    def _move_right(self, columns: int) -> None:
        if columns > 0:
            self.surface.move_right(columns)

    def _move_to(self, point: GridPoint) -> None:
        self.surface.restore_anchor()
        self._move_up(self.height - point.y)
        self._move_right(point.x)

    def _rows_in_bounds(self, content: str, start: GridPoint) -> List[str]:
        """Split text into lines, dropping those that would land below ``y_max``."""
        return content.split("\n")[: self._bounds.y_max - start.y + 1]

    # Drawing

    def clear(self) -> None:
        """Fill the whole width x height area with spaces, ignoring the clip rectangle."""
        self._ensure_live()
        surface = self.surface
        surface.restore_anchor()
        self._move_up(self.height)
        row = " " * self.width + "\n"
        surface.write(row * self.height)
        surface.flush()
        logger.debug("Cleared %dx%d canvas", self.width, self.height)

    def put(self, symbol: str, point: GridPoint) -> None:
        """Place a character at a location on the plot area."""
        self._ensure_live()
        if len(symbol) != 1:
            raise ValueError(f"put() expects a single character, got {symbol!r}")
        actual = self.clamp_to_plot(point)
        self._move_to(actual)
        self.surface.write(symbol)
        self.surface.flush()

    def put_str(self, content: str, start: GridPoint) -> None:
        """
        Print a string on the plot area.

        Whitespace overwrites existing content; use ``put_str_transparent`` to
        leave cells under whitespace alone. Each line is clipped at the right
        edge and later lines start in the same column as the first. Lines that
        would fall below the clip rectangle are dropped.
        """
        self._ensure_live()
        actual = self.clamp_to_plot(start)
        surface = self.surface
        self._move_to(actual)
        for line in self._rows_in_bounds(content, actual):
            visible = clip(line, self.width - actual.x)
            if visible:
                surface.write(visible)
            surface.write("\n")
            self._move_right(actual.x)
        surface.flush()

    def put_str_transparent(self, content: str, start: GridPoint) -> None:
        """Print a string on the plot area without overwriting cells under whitespace."""
        self._ensure_live()
        actual = self.clamp_to_plot(start)
        surface = self.surface
        self._move_to(actual)
        for line in self._rows_in_bounds(content, actual):
            for kind, value in transparent_runs(clip(line, self.width - actual.x)):
                if kind == "text":
                    surface.write(value)
                else:
                    self._move_right(value)
            surface.write("\n")
            self._move_right(actual.x)
        surface.flush()

    def finish(self) -> None:
        """
        Park the cursor on the line below the plot so it stays visible.

        Run this once drawing is done.
        """
        self._ensure_live()
        self.surface.restore_anchor()
        self.surface.move_down(1)
        self.surface.flush()
        logger.debug("Finished canvas at anchor generation %d", self._generation)
