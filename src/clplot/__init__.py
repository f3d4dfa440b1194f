"""
clplot - draw points, lines, rectangles and text on a terminal.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
