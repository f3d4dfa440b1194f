"""
Basic shapes that can be drawn on a canvas.

Shapes are plain values: they hold grid coordinates and a symbol, and turn
themselves into canvas placement calls when drawn. Each shape can also be drawn
inside a ViewBox or built from the domain coordinates of a ScaledViewBox.
"""

from __future__ import annotations

import math
from fractions import Fraction
from typing import List

from ..schemas.coordinates import DomainPoint, GridPoint
from .canvas import Canvas
from .viewbox import ScaledViewBox, ViewBox


def _check_symbol(symbol: str) -> str:
    if not isinstance(symbol, str) or len(symbol) != 1:
        raise ValueError(f"Shape symbol must be a single character, got {symbol!r}")
    return symbol


class Point:
    """A single character at a grid position."""

    def __init__(self, position: GridPoint, symbol: str):
        self.position = position
        self.symbol = _check_symbol(symbol)

    @classmethod
    def in_svb(cls, viewbox: ScaledViewBox, position: DomainPoint, symbol: str) -> "Point":
        """Create a point from a ScaledViewBox's coordinate system."""
        return cls(viewbox.translate_to_plot(position), symbol)

    def draw(self, canvas: Canvas) -> None:
        canvas.put(self.symbol, self.position)

    def draw_vb(self, viewbox: ViewBox) -> None:
        """Draw the point relative to the ViewBox's origin."""
        Point(viewbox.translate_to_plot(self.position), self.symbol).draw(viewbox.canvas)


class Line:
    """
    A straight run of one symbol between two grid points.

    Horizontal and vertical lines are single placement calls. Any other slope
    is rasterised one row at a time: walking from the endpoint with the smaller
    y, x advances by dx/dy per row and the row is filled over the columns that
    step covers. Rows are placed transparently so their padding does not erase
    what is already drawn.
    """

    def __init__(self, start: GridPoint, end: GridPoint, symbol: str):
        self.start = start
        self.end = end
        self.symbol = _check_symbol(symbol)

    @classmethod
    def in_svb(
        cls, viewbox: ScaledViewBox, start: DomainPoint, end: DomainPoint, symbol: str
    ) -> "Line":
        return cls(viewbox.translate_to_plot(start), viewbox.translate_to_plot(end), symbol)

    def rows(self) -> List[str]:
        """
        Build the rows of a sloped line.

        Each row is padded with spaces relative to the leftmost endpoint.
        Returns an empty list for axis-aligned lines.
        """
        delta = self.start.to(self.end)
        if delta.dx == 0 or delta.dy == 0:
            return []

        low, high = (self.start, self.end) if delta.dy > 0 else (self.end, self.start)
        left = min(self.start.x, self.end.x)
        step_x = Fraction(high.x - low.x, high.y - low.y)

        rows = []
        px = Fraction(low.x)
        for _ in range(low.y, high.y):
            prev_x = px
            px += step_x
            first = math.floor(min(prev_x, px))
            last = math.ceil(max(prev_x, px))
            rows.append(" " * (first - left) + self.symbol * (last - first))
        return rows

    def draw(self, canvas: Canvas) -> None:
        """Draw the line after clamping both endpoints to the canvas bounds."""
        start = canvas.clamp_to_plot(self.start)
        end = canvas.clamp_to_plot(self.end)
        if (start, end) != (self.start, self.end):
            Line(start, end, self.symbol).draw(canvas)
            return

        delta = self.start.to(self.end)
        if delta.is_zero:
            canvas.put(self.symbol, self.start)
        elif delta.dy == 0:
            run = self.symbol * abs(delta.dx)
            canvas.put_str(run, GridPoint(min(self.start.x, self.end.x), self.start.y))
        elif delta.dx == 0:
            column = "\n".join(self.symbol for _ in range(abs(delta.dy)))
            canvas.put_str(column, GridPoint(self.start.x, min(self.start.y, self.end.y)))
        else:
            canvas.put_str_transparent(
                "\n".join(self.rows()),
                GridPoint(min(self.start.x, self.end.x), min(self.start.y, self.end.y)),
            )

    def draw_vb(self, viewbox: ViewBox) -> None:
        Line(
            viewbox.translate_to_plot(self.start),
            viewbox.translate_to_plot(self.end),
            self.symbol,
        ).draw(viewbox.canvas)


class Rect:
    """An unfilled rectangle outlined with one symbol."""

    def __init__(self, position: GridPoint, size: GridPoint, symbol: str):
        self.position = position
        self.size = size
        self.symbol = _check_symbol(symbol)

    @classmethod
    def in_svb(
        cls, viewbox: ScaledViewBox, position: DomainPoint, size: DomainPoint, symbol: str
    ) -> "Rect":
        """
        Create a rectangle from domain coordinates.

        Both corners are mapped through the view box and the grid size is taken
        from their difference, so the size is scaled but not offset.
        """
        corner = viewbox.translate_to_plot(position)
        far = viewbox.translate_to_plot(position + size)
        span = corner.to(far)
        return cls(corner, GridPoint(abs(span.dx), abs(span.dy)), symbol)

    def edges(self) -> List[Line]:
        """Top, bottom, left and right edges, in drawing order."""
        tl = self.position
        tr = GridPoint(tl.x + self.size.x, tl.y)
        bl = GridPoint(tl.x, tl.y + self.size.y)
        br = GridPoint(tl.x + self.size.x, tl.y + self.size.y)
        return [
            Line(tl, tr, self.symbol),
            Line(bl, br, self.symbol),
            Line(tl, bl, self.symbol),
            Line(tr, br, self.symbol),
        ]

    def draw(self, canvas: Canvas) -> None:
        for edge in self.edges():
            edge.draw(canvas)

    def draw_vb(self, viewbox: ViewBox) -> None:
        Rect(viewbox.translate_to_plot(self.position), self.size, self.symbol).draw(
            viewbox.canvas
        )


class Label:
    """A block of text, optionally drawn without painting its whitespace."""

    def __init__(self, position: GridPoint, text: str, transparent: bool = False):
        self.position = position
        self.text = text
        self.transparent = transparent

    @classmethod
    def in_svb(
        cls,
        viewbox: ScaledViewBox,
        position: DomainPoint,
        text: str,
        transparent: bool = False,
    ) -> "Label":
        return cls(viewbox.translate_to_plot(position), text, transparent)

    def draw(self, canvas: Canvas) -> None:
        if self.transparent:
            canvas.put_str_transparent(self.text, self.position)
        else:
            canvas.put_str(self.text, self.position)

    def draw_vb(self, viewbox: ViewBox) -> None:
        Label(viewbox.translate_to_plot(self.position), self.text, self.transparent).draw(
            viewbox.canvas
        )
