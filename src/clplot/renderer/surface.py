"""
Terminal surface abstraction.

A surface is the only thing the canvas talks to. It knows how to report its
size, write raw text, remember one cursor anchor and move the cursor relative
to where it is. ``RichTerminalSurface`` drives a real terminal through a Rich
console; ``RecordingSurface`` (see ``recording.py``) replaces it in tests.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from rich.console import Console
from rich.control import Control

from ..errors import SurfaceError

logger = logging.getLogger(__name__)

# DEC save/restore cursor. Rich has no control type for these.
SAVE_CURSOR = "\x1b7"
RESTORE_CURSOR = "\x1b8"


class TerminalSurface(ABC):
    """
    Contract every terminal backend must follow.

    Commands may be queued; nothing is guaranteed to reach the terminal until
    ``flush()`` is called. Each ``save_anchor()`` bumps ``anchor_generation`` so
    canvases can tell when the anchor they rely on has been replaced.
    """

    def __init__(self) -> None:
        self._anchor_generation = 0

    @property
    def anchor_generation(self) -> int:
        """Number of anchors saved on this surface so far."""
        return self._anchor_generation

    def save_anchor(self) -> int:
        """
        Save the current cursor position as the anchor.

        Returns:
            The new anchor generation
        """
        self._save_anchor()
        self._anchor_generation += 1
        return self._anchor_generation

    @abstractmethod
    def size(self) -> Tuple[int, int]:
        """Return the visible area as (columns, rows)."""
        ...

    @abstractmethod
    def write(self, text: str) -> None:
        """Write raw text at the cursor."""
        ...

    @abstractmethod
    def _save_anchor(self) -> None:
        ...

    @abstractmethod
    def restore_anchor(self) -> None:
        """Move the cursor back to the saved anchor."""
        ...

    @abstractmethod
    def move_up(self, rows: int) -> None:
        ...

    @abstractmethod
    def move_down(self, rows: int) -> None:
        ...

    @abstractmethod
    def move_right(self, columns: int) -> None:
        ...

    @abstractmethod
    def flush(self) -> None:
        """Push all queued commands to the terminal."""
        ...


class RichTerminalSurface(TerminalSurface):
    """Surface backed by a Rich console writing ANSI sequences to its file."""

    def __init__(self, console: Optional[Console] = None):
        super().__init__()
        self.console = console or Console(highlight=False)
        self._pending: List[str] = []

    def size(self) -> Tuple[int, int]:
        try:
            dimensions = self.console.size
        except OSError as exc:
            raise SurfaceError(f"Could not query terminal size: {exc}") from exc
        return (dimensions.width, dimensions.height)

    def write(self, text: str) -> None:
        self._pending.append(text)

    def _save_anchor(self) -> None:
        self._pending.append(SAVE_CURSOR)

    def restore_anchor(self) -> None:
        self._pending.append(RESTORE_CURSOR)

    def move_up(self, rows: int) -> None:
        self._queue_control(Control.move(y=-rows))

    def move_down(self, rows: int) -> None:
        self._queue_control(Control.move(y=rows))

    def move_right(self, columns: int) -> None:
        self._queue_control(Control.move(x=columns))

    def _queue_control(self, control: Control) -> None:
        self._pending.append(control.segment.text)

    def flush(self) -> None:
        if not self._pending:
            return
        payload = "".join(self._pending)
        self._pending.clear()
        try:
            self.console.file.write(payload)
            self.console.file.flush()
        except OSError as exc:
            raise SurfaceError(f"Error with terminal interaction: {exc}") from exc
        logger.debug("Flushed %d bytes to terminal", len(payload))
