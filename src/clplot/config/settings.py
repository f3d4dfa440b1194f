"""
Plot settings resolved from flags, environment variables and the terminal.

Environment Variables:
- CLPLOT_WIDTH / CLPLOT_HEIGHT: Fixed canvas size (defaults to the terminal size)
- CLPLOT_RESERVE_ROWS: Rows left free under the canvas when the height comes
  from the terminal (default 1, so the prompt stays visible)
- CLPLOT_VERBOSE: Enable debug logging ("1", "true", "yes", "on")
"""

import os
from typing import Any, Dict, Optional, Tuple

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, ValidationError

from ..errors import ConfigError
from ..renderer.surface import TerminalSurface

ENV_PREFIX = "CLPLOT_"
TRUTHY = {"1", "true", "yes", "on"}


class PlotSettings(BaseModel):
    """
    Canvas sizing and output options.
    """

    width: Optional[int] = Field(
        default=None, ge=1, description="Canvas width in columns; terminal width if unset"
    )
    height: Optional[int] = Field(
        default=None, ge=1, description="Canvas height in rows; terminal rows if unset"
    )
    reserve_rows: int = Field(
        default=1, ge=0, description="Rows kept free below a terminal-sized canvas"
    )
    verbose: bool = Field(default=False, description="Log debug output to stderr")

    @classmethod
    def from_env(cls, overrides: Optional[Dict[str, Any]] = None) -> "PlotSettings":
        """
        Build settings from the environment, after loading the nearest .env file
        found from the working directory upwards.

        Args:
            overrides: Values that win over the environment, e.g. CLI flags.
                Keys with a None value are ignored.

        Returns:
            Validated settings

        Raises:
            ConfigError: if any value is missing its expected type or range
        """
        load_dotenv(find_dotenv(usecwd=True))

        values: Dict[str, Any] = {}
        for key in ("width", "height", "reserve_rows"):
            raw = os.getenv(ENV_PREFIX + key.upper())
            if raw is not None and raw.strip():
                values[key] = raw.strip()
        verbose = os.getenv(ENV_PREFIX + "VERBOSE")
        if verbose is not None:
            values["verbose"] = verbose.strip().lower() in TRUTHY

        for key, value in (overrides or {}).items():
            if value is not None:
                values[key] = value

        try:
            return cls(**values)
        except ValidationError as exc:
            raise ConfigError(f"Invalid plot settings: {exc}") from exc

    def resolve_size(self, surface: TerminalSurface) -> Tuple[int, int]:
        """
        Work out the canvas size to use.

        Explicit width/height win; otherwise the terminal size is used, minus
        ``reserve_rows`` for the height.

        Args:
            surface: Terminal to query when a dimension is unset

        Returns:
            Tuple of (width, height)
        """
        if self.width is not None and self.height is not None:
            return (self.width, self.height)
        columns, rows = surface.size()
        width = self.width if self.width is not None else columns
        height = self.height if self.height is not None else max(rows - self.reserve_rows, 1)
        return (width, height)
