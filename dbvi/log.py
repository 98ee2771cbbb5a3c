"""Logging setup.

The TUI owns the terminal, so log records go to a file instead of stderr.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from loguru import logger

from .config import LOG_PATH

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"


def is_debug_enabled(flag: bool = False) -> bool:
    return flag or os.environ.get("DBVI_DEBUG") == "1"


def configure_logging(debug: bool = False, path: Path | None = None) -> None:
    """Route log records to a rotating file sink."""
    logger.remove()
    log_path = path or LOG_PATH
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        print(f"[dbvi] Logging disabled, cannot create {log_path.parent}: {e}", file=sys.stderr)
        return
    logger.add(
        log_path,
        level="DEBUG" if is_debug_enabled(debug) else "INFO",
        format=LOG_FORMAT,
        rotation="1 MB",
        retention=3,
    )
