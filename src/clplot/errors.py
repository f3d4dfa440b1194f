"""
Exception hierarchy for the plotting library.
"""


class ClplotError(Exception):
    """Base class for all clplot errors."""


class SurfaceError(ClplotError):
    """A terminal surface failed to write, flush, or report its size."""


class StaleCanvasError(ClplotError):
    """A canvas was used after its anchor was replaced by a resize or another canvas."""


class CoordinateError(ClplotError, ValueError):
    """A coordinate could not be represented (negative grid cell, non-finite value)."""


class BoundsError(ClplotError, ValueError):
    """A clip rectangle does not fit inside its canvas."""


class DegenerateDomainError(ClplotError, ValueError):
    """A scaled view box domain has zero (or negative) extent on an axis."""


class ConfigError(ClplotError, ValueError):
    """Settings could not be parsed or validated."""
