"""Logging setup for the ``argus-utils`` CLI.

Two handlers hang off the root logger:

- a Rich console handler on stderr whose level follows ``-v``/``-q``;
- a "flight recorder": a memory buffer of recent DEBUG records that is
  written to a file only when something goes wrong (WARNING or worse), or
  on exit when forced.

Records from other libraries are tagged with their top-level package name so
they stand out on the console.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from importlib.metadata import PackageNotFoundError, version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

from argus_utils.utils.split import split

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "argus_utils"
CONSOLE_FORMAT = "%(prefix)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
FLIGHT_RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class ThirdPartyPrefixFilter(logging.Filter):
    """Set ``record.prefix`` to ``[pkg]`` for loggers outside this project.

    ``some.lib.module`` gets ``[some]``; project loggers get ``""``. Never
    drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(PROJECT_PREFIX):
            record.prefix = ""
        else:
            record.prefix = f"[{split(record.name, '.', 2)[0]}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr console handler.

    Args:
        level: Console threshold. Ignored in debug mode, which always uses DEBUG.
        debug_mode: Show timestamps, logger names and source locations.
        color: False disables color, matching click-extra's ``--no-color``.

    Returns:
        RichHandler: Handler ready to attach to the root logger.
    """
    color_system: ColorSystem | None = "auto" if color else None
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter(fmt=DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(fmt=CONSOLE_FORMAT))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build the flight recorder.

    Args:
        path: File the buffer is written to (truncated at startup).
        capacity: Number of records kept in memory.
        flush_level: Records at or above this level trigger a write.
        flush_on_close: Also write the buffer when the handler closes.

    Returns:
        MemoryHandler: Buffering handler targeting a DEBUG-level FileHandler.
    """
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FLIGHT_RECORDER_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def _dist_version(name: str) -> str:
    try:
        return version(name)
    except PackageNotFoundError:  # pragma: no cover
        return "<not installed>"


def log_startup(  # pylint: disable=too-many-arguments
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    flight_recorder: bool,
    flight_capacity: int | None,
    force_flush_fr: bool,
    logger_levels: dict[str, int],
    redactor_mode: str,
) -> None:
    """Log human-friendly startup info and detailed diagnostics.

    Emits an informational one-line summary describing the application version
    and whether console logging and the flight-recorder are enabled. Additional
    DEBUG-level diagnostics are emitted for troubleshooting, including Python
    and platform versions, process id, current working directory, Click and
    Rich versions, the active handler types, flight-recorder settings, the
    redaction mode, and any per-logger overrides.

    Args:
        logger: Logger used to emit startup messages.
        app_version: Application version string to display.
        level: Effective console logging level (numeric).
        handlers: Active logging handlers attached to the root logger.
        log_path: Path to the flight-recorder output file, or None.
        flight_recorder: Whether the in-memory flight recorder is enabled.
        flight_capacity: Configured capacity of the flight recorder buffer, or None.
        force_flush_fr: Whether the flight recorder is configured to flush on close.
        logger_levels: Mapping of logger names to their configured numeric levels.
        redactor_mode: Redaction mode applied to URIs in log output.
    """

    logger.info(
        "ARGUS UTILS %s - console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(level),
        "ON" if flight_recorder else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    logger.debug("Click: %s", _dist_version("click"))
    logger.debug("Rich: %s", _dist_version("rich"))
    logger.debug(
        "Handlers: %s",
        [type(h).__name__ for h in handlers],
    )
    if flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            str(log_path) if log_path else "<none>",
            flight_capacity,
            force_flush_fr,
        )
    logger.debug("Redactor mode: %s", redactor_mode)
    if logger_levels:
        logger.debug(
            "Per-logger overrides: %s",
            {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()},
        )
    else:
        logger.debug("Per-logger overrides: <none>")  # pragma: no cover.
