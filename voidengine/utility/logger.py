"""A small process-wide logger writing timestamped, levelled lines."""

from __future__ import annotations

import enum
import sys
import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, TextIO


class Level(enum.IntEnum):
    """Severity of a message; NONE as the threshold disables logging."""

    NONE = 0
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4


_PREFIXES = {
    Level.DEBUG: "DEBUG",
    Level.INFO: "INFO",
    Level.WARNING: "WARNING",
    Level.ERROR: "ERROR",
}


@dataclass
class _Context:
    level: Level = Level.INFO
    output: TextIO | None = None
    lock: threading.Lock = field(default_factory=threading.Lock)


_context = _Context()


def set_level(level: Level) -> None:
    """Set the lowest level that is written."""
    _context.level = Level(level)


def set_output(output: TextIO) -> None:
    """Set the stream that messages are written to."""
    _context.output = output


def log(level: Level, fmt: str, *args: Any, **kwargs: Any) -> None:
    """Format and write a message if its level passes the threshold."""
    level = Level(level)
    if _context.level == Level.NONE or level < _context.level:
        return
    prefix = _PREFIXES.get(level)
    if prefix is None:
        raise ValueError(f"cannot log at level {level.name}")
    with _context.lock:
        now = datetime.now()
        timestamp = f"{now:%H:%M:%S}.{now.microsecond // 1000:03d}"
        message = fmt.format(*args, **kwargs)
        output = _context.output if _context.output is not None else sys.stdout
        output.write(f"{timestamp}: {prefix}: {message}\n")


def debug(fmt: str, *args: Any, **kwargs: Any) -> None:
    log(Level.DEBUG, fmt, *args, **kwargs)


def info(fmt: str, *args: Any, **kwargs: Any) -> None:
    log(Level.INFO, fmt, *args, **kwargs)


def warning(fmt: str, *args: Any, **kwargs: Any) -> None:
    log(Level.WARNING, fmt, *args, **kwargs)


def error(fmt: str, *args: Any, **kwargs: Any) -> None:
    log(Level.ERROR, fmt, *args, **kwargs)