"""
In-memory terminal surface.

RecordingSurface keeps a log of every command it receives and also plays them
against a small screen model (cursor, saved anchor, rows of cells), so tests
can assert both on the exact command stream and on what a terminal would show.
The model does not wrap long lines and never scrolls past row 0.
"""

from __future__ import annotations

from typing import Any, List, Optional, Tuple

from ..errors import SurfaceError
from .surface import TerminalSurface

Command = Tuple[Any, ...]


class RecordingSurface(TerminalSurface):
    """Fake terminal that records commands and emulates their effect."""

    def __init__(self, columns: int = 80, rows: int = 24, fail_on_flush: bool = False):
        super().__init__()
        self.columns = columns
        self.rows = rows
        self.fail_on_flush = fail_on_flush
        self.commands: List[Command] = []
        self.flush_count = 0
        self.screen: List[List[str]] = [[]]
        self.cursor_row = 0
        self.cursor_col = 0
        self.anchor: Optional[Tuple[int, int]] = None

    def size(self) -> Tuple[int, int]:
        return (self.columns, self.rows)

    def write(self, text: str) -> None:
        self.commands.append(("write", text))
        for char in text:
            if char == "\n":
                self.cursor_row += 1
                self.cursor_col = 0
                self._ensure_row(self.cursor_row)
                continue
            row = self.screen[self.cursor_row]
            if len(row) <= self.cursor_col:
                row.extend(" " * (self.cursor_col + 1 - len(row)))
            row[self.cursor_col] = char
            self.cursor_col += 1

    def _save_anchor(self) -> None:
        self.commands.append(("save",))
        self.anchor = (self.cursor_row, self.cursor_col)

    def restore_anchor(self) -> None:
        self.commands.append(("restore",))
        if self.anchor is None:
            raise SurfaceError("Cannot restore cursor: no anchor has been saved")
        self.cursor_row, self.cursor_col = self.anchor

    def move_up(self, rows: int) -> None:
        self.commands.append(("up", rows))
        self.cursor_row = max(0, self.cursor_row - rows)

    def move_down(self, rows: int) -> None:
        self.commands.append(("down", rows))
        self.cursor_row += rows
        self._ensure_row(self.cursor_row)

    def move_right(self, columns: int) -> None:
        self.commands.append(("right", columns))
        self.cursor_col += columns

    def flush(self) -> None:
        if self.fail_on_flush:
            raise SurfaceError("Error with terminal interaction: flush failed")
        self.flush_count += 1
        self.commands.append(("flush",))

    def _ensure_row(self, row: int) -> None:
        while len(self.screen) <= row:
            self.screen.append([])

    # Inspection helpers

    def line(self, row: int) -> str:
        """Return the characters on a screen row, gaps filled with spaces."""
        if row >= len(self.screen):
            return ""
        return "".join(self.screen[row])

    def lines(self) -> List[str]:
        return [self.line(row) for row in range(len(self.screen))]

    def cell(self, column: int, row: int) -> str:
        """Return one character, or a space for a cell never written."""
        text = self.line(row)
        return text[column] if column < len(text) else " "

    def drawn_cells(self, blank: str = " ") -> List[Tuple[int, int, str]]:
        """List (column, row, char) for every cell holding something other than ``blank``."""
        cells = []
        for row, chars in enumerate(self.screen):
            for column, char in enumerate(chars):
                if char != blank:
                    cells.append((column, row, char))
        return cells

    def reset_log(self) -> None:
        """Forget recorded commands while keeping the screen state."""
        self.commands.clear()
        self.flush_count = 0
