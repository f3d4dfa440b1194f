"""
Value types shared by the canvas, view boxes and shapes.
"""

from .coordinates import DomainPoint, GridDelta, GridPoint, clamp

__all__ = [
    "DomainPoint",
    "GridDelta",
    "GridPoint",
    "clamp",
]
