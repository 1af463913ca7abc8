from __future__ import annotations

import os
import sys
from typing import Any, Optional

from loguru import logger

_SINK_ID: Optional[int] = None


def configure_logging(level: Optional[str] = None, sink: Any = sys.stderr) -> int:
    """
    Enable optbox log records and route them to a single Loguru sink.

    Existing Loguru handlers, including the default stderr one, are removed
    first so ``level`` is the only threshold applied. The level defaults to
    ``OPTBOX_LOG_LEVEL`` (``INFO`` when unset). Only records emitted from the
    ``optbox`` namespace reach the sink. Calling this again returns the
    already installed sink id.
    """
    global _SINK_ID
    if _SINK_ID is not None:
        return _SINK_ID

    level = level or os.getenv("OPTBOX_LOG_LEVEL", "INFO")
    logger.remove()
    logger.enable("optbox")
    _SINK_ID = logger.add(
        sink,
        level=level.upper(),
        filter="optbox",
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function} - {message}",
    )
    return _SINK_ID


def reset_logging() -> None:
    """Undo configure_logging: mute optbox and restore Loguru's stderr handler."""
    global _SINK_ID
    logger.disable("optbox")
    if _SINK_ID is None:
        return
    logger.remove(_SINK_ID)
    _SINK_ID = None
    logger.add(sys.stderr, level="DEBUG")
