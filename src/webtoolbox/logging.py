"""Logging setup for the webtoolbox CLI.

Console records are rendered by Rich on stderr; stdout carries only command
results. With the flight recorder on, DEBUG records are buffered in memory and
dumped to a file the first time a WARNING (or worse) is logged, so a fallback
such as an unavailable locale leaves a full trace behind.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from dataclasses import dataclass, field
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import Literal, TypeAlias

import babel
from dateutil import __version__ as dateutil_version
from rich.console import Console
from rich.logging import RichHandler

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "webtoolbox"
RECORDER_CAPACITY = 2000

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]

RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)


@dataclass(frozen=True)
class LoggingSetup:
    """How the CLI wants logging configured.

    Attributes:
        level: Console level; ignored (DEBUG) when `debug` is set.
        debug: Show timestamps, logger names and source paths on the console.
        color: Allow ANSI colors on the console.
        recorder_path: File for the flight recorder, or None to disable it.
        logger_levels: Minimum level per logger name.
    """

    level: int = logging.WARNING
    debug: bool = False
    color: bool = True
    recorder_path: Path | None = None
    logger_levels: dict[str, int] = field(default_factory=dict)

    @property
    def console_level(self) -> int:
        return logging.DEBUG if self.debug else self.level


class LibraryPrefixFilter(logging.Filter):
    """Prefix records from other packages with ``[package]``.

    webtoolbox's own records get an empty prefix. Nothing is filtered out.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        package = record.name.split(".", 1)[0]
        record.prefix = "" if package == PROJECT_PREFIX else f"[{package}]"
        return True


def console_handler(setup: LoggingSetup) -> RichHandler:
    """Return the stderr RichHandler described by `setup`."""
    color_system: ColorSystem | None = "auto" if setup.color else None
    handler = RichHandler(
        level=setup.console_level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=setup.debug,
        enable_link_path=setup.debug,
    )
    if setup.debug:
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(prefix)s %(message)s"))
        handler.addFilter(LibraryPrefixFilter())
    return handler


def flight_recorder(path: Path, capacity: int = RECORDER_CAPACITY) -> MemoryHandler:
    """Return a buffering handler that writes to `path` once a WARNING arrives.

    The file is truncated on the first flush and never created when nothing
    at WARNING or above is logged.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    target = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(RECORDER_FORMAT))
    return MemoryHandler(
        capacity, flushLevel=logging.WARNING, target=target, flushOnClose=False
    )


def configure_logging(setup: LoggingSetup) -> list[logging.Handler]:
    """Install root handlers and per-logger levels for `setup`.

    Replaces any handlers already on the root logger.

    Returns:
        list[logging.Handler]: The handlers now attached to the root logger.
    """
    handlers: list[logging.Handler] = [console_handler(setup)]
    if setup.recorder_path is not None:
        handlers.append(flight_recorder(setup.recorder_path))

    # Root passes everything; each handler applies its own level.
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, level in setup.logger_levels.items():
        logging.getLogger(name).setLevel(level)
    return handlers


def log_startup(
    logger: logging.Logger,
    setup: LoggingSetup,
    handlers: list[logging.Handler],
    app_version: str,
) -> None:
    """Log a one-line INFO summary followed by DEBUG environment details."""
    logger.info(
        "webtoolbox %s (console=%s, flight-recorder=%s)",
        app_version,
        logging.getLevelName(setup.console_level),
        "OFF" if setup.recorder_path is None else "ON",
    )

    details = {
        "Python": sys.version.split()[0],
        "Platform": f"{platform.system()} {platform.release()}",
        "PID": os.getpid(),
        "Babel": babel.__version__,
        "python-dateutil": dateutil_version,
        "Handlers": [type(h).__name__ for h in handlers],
    }
    if setup.recorder_path is not None:
        details["Flight recorder"] = f"path={setup.recorder_path}"
    details["Per-logger levels"] = {
        name: logging.getLevelName(level)
        for name, level in setup.logger_levels.items()
    } or "<none>"
    for label, value in details.items():
        logger.debug("%s: %s", label, value)
