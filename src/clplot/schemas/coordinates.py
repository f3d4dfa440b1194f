"""
Coordinate value types.

GridPoint addresses a cell on a canvas and is always non-negative. Translation
vectors between grid points are GridDelta values, which are signed, so
``a.to(b)`` is defined whatever the relative order of ``a`` and ``b``.
DomainPoint holds arbitrary-unit float coordinates before they are scaled onto
the grid by a ScaledViewBox.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TypeVar, Union

from ..errors import CoordinateError

Number = TypeVar("Number", int, float)


def clamp(n: Number, lower: Number, upper: Number) -> Number:
    """
    Constrain a number within a range.

    Args:
        n: Value to constrain
        lower: Smallest allowed value
        upper: Largest allowed value

    Returns:
        ``lower`` if n is below the range, ``upper`` if above, otherwise n
    """
    return max(lower, min(n, upper))


@dataclass(frozen=True)
class GridDelta:
    """Signed translation vector between two grid cells."""

    dx: int
    dy: int

    @property
    def is_zero(self) -> bool:
        return self.dx == 0 and self.dy == 0

    def __add__(self, other: "GridDelta") -> "GridDelta":
        if not isinstance(other, GridDelta):
            return NotImplemented
        return GridDelta(self.dx + other.dx, self.dy + other.dy)

    def __sub__(self, other: "GridDelta") -> "GridDelta":
        if not isinstance(other, GridDelta):
            return NotImplemented
        return GridDelta(self.dx - other.dx, self.dy - other.dy)

    def __neg__(self) -> "GridDelta":
        return GridDelta(-self.dx, -self.dy)


@dataclass(frozen=True)
class GridPoint:
    """
    A cell address on the canvas grid.

    Both components must be non-negative integers.
    """

    x: int
    y: int

    def __post_init__(self) -> None:
        for name in ("x", "y"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise CoordinateError(
                    f"GridPoint.{name} must be an int, got {type(value).__name__}"
                )
            if value < 0:
                raise CoordinateError(f"GridPoint.{name} must be >= 0, got {value}")

    def to(self, other: "GridPoint") -> GridDelta:
        """
        Determine what to add to this point to reach another point.

        Args:
            other: Target point

        Returns:
            Signed delta such that ``self + self.to(other) == other``
        """
        return GridDelta(other.x - self.x, other.y - self.y)

    def offset(self, dx: int, dy: int) -> "GridPoint":
        """Return this point moved by (dx, dy)."""
        return self + GridDelta(dx, dy)

    def __add__(self, other: Union["GridPoint", GridDelta]) -> "GridPoint":
        if isinstance(other, GridPoint):
            return GridPoint(self.x + other.x, self.y + other.y)
        if isinstance(other, GridDelta):
            x, y = self.x + other.dx, self.y + other.dy
            if x < 0 or y < 0:
                raise CoordinateError(
                    f"Translating ({self.x}, {self.y}) by ({other.dx}, {other.dy}) "
                    "leaves the grid"
                )
            return GridPoint(x, y)
        return NotImplemented

    def __sub__(self, other: "GridPoint") -> GridDelta:
        if not isinstance(other, GridPoint):
            return NotImplemented
        return GridDelta(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class DomainPoint:
    """A point on an arbitrary float coordinate plane."""

    x: float
    y: float

    def __post_init__(self) -> None:
        for name in ("x", "y"):
            value = getattr(self, name)
            try:
                number = float(value)
            except (TypeError, ValueError) as exc:
                raise CoordinateError(
                    f"DomainPoint.{name} must be a number, got {value!r}"
                ) from exc
            if not math.isfinite(number):
                raise CoordinateError(f"DomainPoint.{name} must be finite, got {value}")
            object.__setattr__(self, name, number)

    def to(self, other: "DomainPoint") -> "DomainPoint":
        """Return the vector that moves this point onto ``other``."""
        return DomainPoint(other.x - self.x, other.y - self.y)

    def distance(self, other: "DomainPoint") -> float:
        """Euclidean distance to another point."""
        delta = self.to(other)
        return math.hypot(delta.x, delta.y)

    def __add__(self, other: "DomainPoint") -> "DomainPoint":
        if not isinstance(other, DomainPoint):
            return NotImplemented
        return DomainPoint(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "DomainPoint") -> "DomainPoint":
        if not isinstance(other, DomainPoint):
            return NotImplemented
        return DomainPoint(self.x - other.x, self.y - other.y)
