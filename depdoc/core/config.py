"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

_LOG_FORMATS = ("console", "json")


@dataclass(frozen=True)
class Settings:
    base_dir: Path
    log_level: str = "WARNING"
    log_format: str = "console"

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from environment variables.

        Reads:
            DEPDOC_BASE_DIR   — directory to check (default: current directory)
            DEPDOC_LOG_LEVEL  — log level (default: WARNING)
            DEPDOC_LOG_FORMAT — console | json (default: console)
        """
        base_dir = os.environ.get("DEPDOC_BASE_DIR") or os.getcwd()
        log_format = os.environ.get("DEPDOC_LOG_FORMAT", "console").lower()
        if log_format not in _LOG_FORMATS:
            log_format = "console"
        return cls(
            base_dir=Path(base_dir),
            log_level=os.environ.get("DEPDOC_LOG_LEVEL", "WARNING").upper(),
            log_format=log_format,
        )
