"""Logging helpers for the CLI and library diagnostics."""
from __future__ import annotations

import logging
from typing import Optional, Union

from rich.logging import RichHandler

_LOGGER_CONFIGURED = False


def configure_logging(debug: bool = False, *, level: Optional[Union[int, str]] = None) -> None:
    """Configure process-wide logging with a Rich handler (first call wins)."""
    global _LOGGER_CONFIGURED
    if _LOGGER_CONFIGURED:
        return

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = None
    resolved_level = level or (logging.DEBUG if debug else logging.INFO)
    logging.basicConfig(
        level=resolved_level,
        format="%(message)s",
        datefmt="%H:%M:%S",
        handlers=[RichHandler(show_path=debug)],
    )
    _LOGGER_CONFIGURED = True
