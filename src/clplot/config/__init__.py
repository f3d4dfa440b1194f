"""
Configuration for canvas sizing and output.
"""

from .settings import PlotSettings

__all__ = ["PlotSettings"]
