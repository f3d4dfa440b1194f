"""
Pytest configuration and fixtures.
"""

import sys
from pathlib import Path

import pytest

MARKERS = {
    "canvas": "cursor protocol and placement tests",
    "shapes": "shape rasterization tests",
    "viewbox": "coordinate transform tests",
    "cli": "command line tests",
}


def pytest_configure(config):
    """Configure pytest."""
    # Add src to path
    src_path = Path(__file__).parent.parent / "src"
    sys.path.insert(0, str(src_path))

    for name, description in MARKERS.items():
        config.addinivalue_line("markers", f"{name}: {description}")


def pytest_collection_modifyitems(config, items):
    """
    Modify test items to add helpful markers.
    """
    for item in items:
        node = item.nodeid.lower()
        if "canvas" in node or "transparent" in node:
            item.add_marker("canvas")
        if "shape" in node or "line" in node or "rect" in node:
            item.add_marker("shapes")
        if "viewbox" in node:
            item.add_marker("viewbox")
        if "cli" in node:
            item.add_marker("cli")


@pytest.fixture
def surface():
    """Recording surface with an 80x24 terminal."""
    from clplot.renderer.recording import RecordingSurface

    return RecordingSurface(columns=80, rows=24)


@pytest.fixture
def canvas(surface):
    """A 40x20 canvas on a fresh recording surface; grid row y is screen row y."""
    from clplot.renderer.canvas import Canvas

    return Canvas.create(surface, 40, 20)
