"""Logging setup for the budget planner.

Records are rendered by rich on stderr and, when ``LOG_DIR`` is configured,
appended to one plain-text file per day. Handlers sit behind a queue so
request threads never block on console or file output.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from datetime import date, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path
from queue import SimpleQueue
from threading import RLock
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.traceback import install as install_rich_traceback

from .context import ContextFilter, log_context
from .timing import timeit

__all__ = [
    "LoggingConfig",
    "get_logger",
    "init_logging",
    "log_context",
    "shutdown_logging",
    "timeit",
]

ROOT_LOGGER_NAME = "budget_planner"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(context)s%(message)s"


@dataclass(frozen=True)
class LoggingConfig:
    """How log records leave the process."""

    level: str | int = "INFO"
    log_dir: Optional[Path] = None
    console: bool = True
    queue: bool = True

    @property
    def numeric_level(self) -> int:
        if isinstance(self.level, int):
            return self.level
        return getattr(logging, str(self.level).upper(), logging.INFO)


@dataclass
class _Runtime:
    config: Optional[LoggingConfig] = None
    listener: Optional[QueueListener] = None
    installed: list[logging.Handler] = field(default_factory=list)


_lock = RLock()
_runtime = _Runtime()
_context_filter = ContextFilter()


class DailyFileHandler(logging.FileHandler):
    """File handler that rolls over to ``YYYY_MM_DD.log`` when the day changes."""

    def __init__(self, directory: Path, *, encoding: str = "utf-8") -> None:
        self.directory = directory
        self.directory.mkdir(parents=True, exist_ok=True)
        self._day: date = datetime.now().date()
        super().__init__(self._path_for(self._day), mode="a", encoding=encoding)

    def _path_for(self, day: date) -> Path:
        return self.directory / f"{day.strftime('%Y_%m_%d')}.log"

    def emit(self, record: logging.LogRecord) -> None:
        day = datetime.fromtimestamp(record.created).date()
        if day != self._day:
            self._day = day
            if self.stream:
                self.stream.close()
            self.baseFilename = os.fspath(self._path_for(day))
            self.stream = self._open()
        super().emit(record)


def _console_handler(level: int) -> logging.Handler:
    install_rich_traceback(show_locals=False)
    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_path=False,
        markup=False,
        log_time_format="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(logging.Formatter("%(context)s%(message)s"))
    handler.setLevel(level)
    return handler


def _file_handler(directory: Path, level: int) -> logging.Handler:
    handler = DailyFileHandler(directory)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    handler.setLevel(level)
    return handler


def _sinks(config: LoggingConfig) -> list[logging.Handler]:
    level = config.numeric_level
    sinks: list[logging.Handler] = []
    if config.console:
        sinks.append(_console_handler(level))
    if config.log_dir:
        sinks.append(_file_handler(Path(config.log_dir), level))
    for sink in sinks:
        sink.addFilter(_context_filter)
    return sinks


def _teardown() -> None:
    if _runtime.listener is not None:
        _runtime.listener.stop()
    root = logging.getLogger()
    for handler in _runtime.installed:
        root.removeHandler(handler)
        handler.close()
    if _runtime.listener is not None:
        for sink in _runtime.listener.handlers:
            sink.close()
    _runtime.config = None
    _runtime.listener = None
    _runtime.installed = []


def init_logging(**options: object) -> None:
    """Install handlers on the root logger.

    Calling it again with the same options is a no-op; different options
    replace the running setup.
    """

    config = LoggingConfig(**options)  # type: ignore[arg-type]
    with _lock:
        if _runtime.config == config:
            return
        _teardown()

        root = logging.getLogger()
        root.setLevel(logging.NOTSET)
        sinks = _sinks(config)

        if config.queue and sinks:
            queue_handler = QueueHandler(SimpleQueue())
            queue_handler.setLevel(config.numeric_level)
            queue_handler.addFilter(_context_filter)
            _runtime.listener = QueueListener(queue_handler.queue, *sinks, respect_handler_level=True)
            _runtime.listener.start()
            _runtime.installed = [queue_handler]
        else:
            _runtime.installed = sinks

        for handler in _runtime.installed:
            root.addHandler(handler)
        _runtime.config = config


def shutdown_logging() -> None:
    """Stop the queue listener and detach every handler installed here."""

    with _lock:
        _teardown()


def get_logger(name: str | None = None) -> logging.Logger:
    with _lock:
        if _runtime.config is None:
            init_logging()
    return logging.getLogger(name or ROOT_LOGGER_NAME)
