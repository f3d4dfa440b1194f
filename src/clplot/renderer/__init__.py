"""
Terminal renderer.

Draws on the command line using only relative cursor movement from a single
saved anchor. ``Canvas`` owns the cursor protocol, view boxes map coordinates
onto part of a canvas, and shapes turn geometry into canvas calls. All terminal
access goes through a ``TerminalSurface``.
"""

from .canvas import Bounds, Canvas, clip, transparent_runs
from .recording import RecordingSurface
from .shapes import Label, Line, Point, Rect
from .surface import RichTerminalSurface, TerminalSurface
from .viewbox import Domain, ScaledViewBox, ViewBox

__all__ = [
    "Bounds",
    "Canvas",
    "clip",
    "transparent_runs",
    "RecordingSurface",
    "Label",
    "Line",
    "Point",
    "Rect",
    "RichTerminalSurface",
    "TerminalSurface",
    "Domain",
    "ScaledViewBox",
    "ViewBox",
]
