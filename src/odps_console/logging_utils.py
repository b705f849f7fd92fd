"""Runtime logging helpers."""

from __future__ import annotations

import os
import sys
from logging import Handler
from typing import Literal

import loguru
from loguru import logger
from rich.console import Console
from rich.logging import RichHandler

from odps_console.errors import ConfigurationError

LogProfile = Literal["default", "shell"]

_DEFAULT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<7} | {name}:{function}:{line} | {message}"
_CONFIGURED: tuple[LogProfile, str] | None = None


def _build_shell_handler() -> Handler:
    # Result lines own stdout; shell diagnostics share stderr with error messages.
    return RichHandler(
        console=Console(stderr=True),
        show_level=True,
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )


def _stderr_sink(message: loguru.Message) -> None:
    sys.stderr.write(message)


def resolve_level(level: str | None) -> str:
    """Pick the log level from the argument or ``ODPS_LOG_LEVEL``."""

    name = (level or os.getenv("ODPS_LOG_LEVEL") or "WARNING").strip().upper()
    try:
        logger.level(name)
    except ValueError as exc:
        raise ConfigurationError(f"Unknown log level: {name}") from exc
    return name


def configure_logging(*, profile: LogProfile = "default", level: str | None = None) -> None:
    """Configure process-level logging; a repeat call only acts on a new profile or level."""

    global _CONFIGURED
    resolved = resolve_level(level)
    if _CONFIGURED == (profile, resolved):
        return

    logger.remove()
    if profile == "shell":
        logger.add(
            _build_shell_handler(),
            level=resolved,
            format="{message}",
            backtrace=False,
            diagnose=False,
        )
    else:
        logger.add(
            _stderr_sink,
            level=resolved,
            format=_DEFAULT_FORMAT,
            backtrace=False,
            diagnose=False,
        )
    _CONFIGURED = (profile, resolved)


def configured_logging() -> tuple[LogProfile, str] | None:
    """Return the active ``(profile, level)`` pair, if logging was configured."""

    return _CONFIGURED
