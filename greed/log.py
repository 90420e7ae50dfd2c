"""Console logging set up for the engine and the game."""

from __future__ import annotations

import logging
import queue
import sys
from dataclasses import dataclass
from logging.handlers import QueueHandler, QueueListener
from typing import ClassVar

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

ENGINE_TARGET = "engine"
APP_TARGET = "greed"

_RESET = "\x1b[0m"
_DIM = "\x1b[2m"
_LEVEL_COLOURS = {
    TRACE: "\x1b[35m",
    logging.DEBUG: "\x1b[34m",
    logging.INFO: "\x1b[32m",
    logging.WARNING: "\x1b[33m",
    logging.ERROR: "\x1b[31m",
    logging.CRITICAL: "\x1b[31m",
}
_LEVEL_LABELS = {logging.WARNING: "WARN"}


class _AnsiFormatter(logging.Formatter):
    """Coloured ``time LEVEL target: message`` lines."""

    def format(self, record: logging.LogRecord) -> str:
        level = _LEVEL_LABELS.get(record.levelno, record.levelname)
        colour = _LEVEL_COLOURS.get(record.levelno, "")
        stamp = self.formatTime(record, "%Y-%m-%dT%H:%M:%S")
        return (
            f"{_DIM}{stamp}{_RESET} {colour}{level:>5}{_RESET} "
            f"{_DIM}{record.name}{_RESET}: {record.getMessage()}"
        )


@dataclass
class _Route:
    """One logger feeding stdout through a background thread."""

    logger: logging.Logger
    queue_handler: QueueHandler
    stream_handler: logging.StreamHandler
    listener: QueueListener
    saved_level: int
    saved_propagate: bool

    @classmethod
    def start(cls, target: str) -> _Route:
        logger = logging.getLogger(target)
        records: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
        stream_handler = logging.StreamHandler(sys.stdout)
        stream_handler.setFormatter(_AnsiFormatter())
        listener = QueueListener(records, stream_handler)
        listener.start()
        queue_handler = QueueHandler(records)
        route = cls(
            logger=logger,
            queue_handler=queue_handler,
            stream_handler=stream_handler,
            listener=listener,
            saved_level=logger.level,
            saved_propagate=logger.propagate,
        )
        logger.addHandler(queue_handler)
        logger.setLevel(TRACE)
        logger.propagate = False
        return route

    def stop(self) -> None:
        self.logger.removeHandler(self.queue_handler)
        self.listener.stop()
        self.stream_handler.flush()
        self.logger.setLevel(self.saved_level)
        self.logger.propagate = self.saved_propagate


class Log:
    """Handle on the console logging; output is flushed when it is closed."""

    _active: ClassVar[Log | None] = None

    def __init__(self, routes: list[_Route]) -> None:
        self._routes = routes

    @classmethod
    def init_non_blocking_console(cls) -> Log:
        """Route the engine and game loggers to stdout at every level."""
        if cls._active is not None:
            raise RuntimeError("console logging has already been initialised")
        log = cls([_Route.start(target) for target in (ENGINE_TARGET, APP_TARGET)])
        cls._active = log
        return log

    def close(self) -> None:
        """Flush pending records and detach from the loggers."""
        routes, self._routes = self._routes, []
        for route in routes:
            route.stop()
        if Log._active is self:
            Log._active = None

    def __enter__(self) -> Log:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()