"""
View boxes: sub-rectangles of a canvas.

A ViewBox only translates; a ScaledViewBox also maps a float domain onto its
grid rectangle so data values can be drawn directly.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, Field, ValidationError, model_validator

from ..errors import DegenerateDomainError
from ..schemas.coordinates import DomainPoint, GridPoint, clamp
from .canvas import Canvas


class ViewBox:
    """
    Constrain shapes to a portion of the plot area.

    Points are clamped into [0, size] relative to the box before the origin is
    added, so shapes stay inside the box wherever it sits on the canvas.
    """

    def __init__(self, canvas: Canvas, origin: GridPoint, size: GridPoint):
        self.canvas = canvas
        self.origin = origin
        self.size = size

    def clamp_to_box(self, point: GridPoint) -> GridPoint:
        """Clamp a box-relative point into [0, size]."""
        return GridPoint(clamp(point.x, 0, self.size.x), clamp(point.y, 0, self.size.y))

    def translate_to_plot(self, point: GridPoint) -> GridPoint:
        """Translate box-relative coordinates to absolute coordinates on the canvas."""
        return self.clamp_to_box(point) + self.origin


class Domain(BaseModel):
    """Float extent mapped onto a scaled view box."""

    x_min: float = Field(description="Domain value drawn at the left edge")
    x_max: float = Field(description="Domain value drawn at the right edge")
    y_min: float = Field(description="Domain value drawn at the origin row")
    y_max: float = Field(description="Domain value drawn at origin row + size")

    @model_validator(mode="after")
    def check_extent(self) -> "Domain":
        for name in ("x_min", "x_max", "y_min", "y_max"):
            if not math.isfinite(getattr(self, name)):
                raise ValueError(f"{name} must be finite")
        if self.x_min >= self.x_max:
            raise ValueError(f"x_min ({self.x_min}) must be below x_max ({self.x_max})")
        if self.y_min >= self.y_max:
            raise ValueError(f"y_min ({self.y_min}) must be below y_max ({self.y_max})")
        if not (math.isfinite(self.x_max - self.x_min) and math.isfinite(self.y_max - self.y_min)):
            raise ValueError("domain span must be finite")
        return self


class ScaledViewBox:
    """
    View box with its own coordinate system.

    - Constrains shapes to a portion of the plot area, like ViewBox
    - Converts DomainPoints from an arbitrary scale into canvas coordinates
    """

    def __init__(
        self,
        canvas: Canvas,
        origin: GridPoint,
        size: GridPoint,
        x_min: float,
        x_max: float,
        y_min: float,
        y_max: float,
    ):
        self.canvas = canvas
        self.origin = origin
        self.size = size
        try:
            self.domain = Domain(x_min=x_min, x_max=x_max, y_min=y_min, y_max=y_max)
        except ValidationError as exc:
            raise DegenerateDomainError(f"Invalid scaled view box domain: {exc}") from exc

    @property
    def x_min(self) -> float:
        return self.domain.x_min

    @property
    def x_max(self) -> float:
        return self.domain.x_max

    @property
    def y_min(self) -> float:
        return self.domain.y_min

    @property
    def y_max(self) -> float:
        return self.domain.y_max

    def clamp_to_domain(self, point: DomainPoint) -> DomainPoint:
        d = self.domain
        return DomainPoint(clamp(point.x, d.x_min, d.x_max), clamp(point.y, d.y_min, d.y_max))

    def scale_to_dec(self, point: DomainPoint) -> DomainPoint:
        """Normalise a domain point into [0, 1] on each axis."""
        d = self.domain
        return DomainPoint(
            (point.x - d.x_min) / (d.x_max - d.x_min),
            (point.y - d.y_min) / (d.y_max - d.y_min),
        )

    def dec_to_grid(self, point: DomainPoint) -> GridPoint:
        return GridPoint(
            math.floor(point.x * self.size.x) + self.origin.x,
            math.floor(point.y * self.size.y) + self.origin.y,
        )

    def translate_to_plot(self, point: DomainPoint) -> GridPoint:
        """
        Translate a domain point into canvas coordinates.

        The point is clamped into the domain first, so the result always lies
        within [origin, origin + size].
        """
        return self.dec_to_grid(self.scale_to_dec(self.clamp_to_domain(point)))

    @property
    def view_box(self) -> ViewBox:
        """The same rectangle as a plain, unscaled ViewBox."""
        return ViewBox(self.canvas, self.origin, self.size)
