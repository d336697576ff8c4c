"""Logging setup for the CLINICFLOW CLI.

Console records go through Rich on stderr. An optional "flight recorder"
keeps recent records at DEBUG in memory and writes them to a file once a
WARNING is logged, so a failed clinic or sample command leaves a trace
without a noisy console.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING

import alembic
import sqlalchemy
from rich.console import Console
from rich.logging import RichHandler
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

from clinicflow import config

if TYPE_CHECKING:
    from logging import Handler, Logger

PROJECT_PREFIX = "clinicflow"

CONSOLE_FORMAT = "%(prefix)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)


@dataclass(frozen=True)
class LoggingSettings:
    """How the CLI should log, as chosen on the command line.

    Attributes:
        verbosity: Number of ``-v`` minus number of ``-q``.
        debug: Force DEBUG on the console and show record origins.
        color: Allow colored console output.
        log_path: Flight recorder file; `None` disables the recorder.
        recorder_capacity: Records kept in memory by the recorder.
        flush_on_exit: Write the recorder buffer on exit even without a warning.
        logger_levels: Minimum level per logger name.
    """

    verbosity: int = 0
    debug: bool = False
    color: bool = True
    log_path: Path | None = None
    recorder_capacity: int = 2000
    flush_on_exit: bool = False
    logger_levels: Mapping[str, int] = field(default_factory=dict)

    @property
    def console_level(self) -> int:
        """Console level: WARNING moved ten points per step of verbosity."""
        if self.debug:
            return logging.DEBUG
        level = logging.WARNING - 10 * self.verbosity
        return max(logging.DEBUG, min(logging.CRITICAL, level))


def tag_library_records(record: logging.LogRecord) -> bool:
    """Set ``record.prefix`` to ``[library]`` for records from outside the project."""
    top = record.name.partition(".")[0]
    record.prefix = "" if top == PROJECT_PREFIX else f"[{top}]"
    return True


def _console_handler(settings: LoggingSettings) -> RichHandler:
    console = Console(color_system="auto" if settings.color else None, stderr=True)
    handler = RichHandler(
        level=settings.console_level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=settings.debug,
        enable_link_path=settings.debug,
    )
    if settings.debug:
        handler.setFormatter(logging.Formatter(DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handler.addFilter(tag_library_records)
    return handler


def _flight_recorder(path: Path, settings: LoggingSettings) -> MemoryHandler:
    path.parent.mkdir(parents=True, exist_ok=True)
    target = logging.FileHandler(path, mode="w", encoding="utf-8")
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(RECORDER_FORMAT))
    return MemoryHandler(
        capacity=settings.recorder_capacity,
        flushLevel=logging.WARNING,
        target=target,
        flushOnClose=settings.flush_on_exit,
    )


def configure_logging(settings: LoggingSettings) -> list[Handler]:
    """Install the console handler and flight recorder on the root logger.

    The root logger passes everything; each handler applies its own level.
    Existing root handlers are replaced.

    Returns:
        The installed handlers, console first.
    """
    handlers: list[Handler] = [_console_handler(settings)]
    if settings.log_path is not None:
        handlers.append(_flight_recorder(settings.log_path, settings))

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, level in settings.logger_levels.items():
        logging.getLogger(name).setLevel(level)
    return handlers


def describe_database() -> str:
    """Describe the configured database for log lines, without its password."""
    try:
        url = make_url(config.get_db_url())
    except config.DatabaseUrlNotSetError:
        return "<unset>"
    except ArgumentError:
        return "<invalid>"
    return f"{url.get_backend_name()} ({url.render_as_string(hide_password=True)})"


def log_startup(
    logger: Logger,
    settings: LoggingSettings,
    handlers: list[Handler],
    *,
    app_version: str,
) -> None:
    """Log a one-line INFO summary, then DEBUG diagnostics."""
    logger.info(
        "CLINICFLOW %s - console=%s, flight-recorder=%s, database=%s",
        app_version,
        logging.getLevelName(settings.console_level),
        "ON" if settings.log_path is not None else "OFF",
        describe_database(),
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s, CWD: %s", os.getpid(), Path.cwd())
    logger.debug(
        "SQLAlchemy: %s, Alembic: %s", sqlalchemy.__version__, alembic.__version__
    )
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if settings.log_path is not None:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_exit=%s",
            settings.log_path,
            settings.recorder_capacity,
            settings.flush_on_exit,
        )
    logger.debug(
        "Per-logger levels: %s",
        {n: logging.getLevelName(lvl) for n, lvl in settings.logger_levels.items()}
        or "<none>",
    )
