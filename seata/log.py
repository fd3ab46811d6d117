"""Process-wide logger with levels, printf-style variants and a replaceable backend."""

from __future__ import annotations

import logging
import sys
import time
from enum import IntEnum
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Protocol, runtime_checkable


class LogLevel(IntEnum):
    """Severity of a log entry."""

    DEBUG = -1
    INFO = 0
    WARN = 1
    ERROR = 2
    PANIC = 4
    FATAL = 5

    @classmethod
    def parse(cls, text) -> "LogLevel":
        """Parse a level name such as "debug" or "WARN"; the empty name means INFO."""
        if text is None:
            raise TypeError("can't parse a level from None")
        if isinstance(text, (bytes, bytearray)):
            text = bytes(text).decode("utf-8", "replace")
        level = _LEVEL_NAMES.get(text)
        if level is None:
            level = _LEVEL_NAMES.get(text.lower())
        if level is None:
            raise ValueError(f'unrecognized level: "{text}"')
        return level


_LEVEL_NAMES = {
    "debug": LogLevel.DEBUG,
    "DEBUG": LogLevel.DEBUG,
    "info": LogLevel.INFO,
    "INFO": LogLevel.INFO,
    "": LogLevel.INFO,
    "warn": LogLevel.WARN,
    "WARN": LogLevel.WARN,
    "error": LogLevel.ERROR,
    "ERROR": LogLevel.ERROR,
    "panic": LogLevel.PANIC,
    "PANIC": LogLevel.PANIC,
    "fatal": LogLevel.FATAL,
    "FATAL": LogLevel.FATAL,
}

_STD_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.PANIC: logging.CRITICAL,
    LogLevel.FATAL: logging.CRITICAL + 5,
}


@runtime_checkable
class Logger(Protocol):
    """What a logging backend must provide."""

    def debug(self, *args) -> None: ...
    def debugf(self, fmt: str, *args) -> None: ...
    def info(self, *args) -> None: ...
    def infof(self, fmt: str, *args) -> None: ...
    def warn(self, *args) -> None: ...
    def warnf(self, fmt: str, *args) -> None: ...
    def error(self, *args) -> None: ...
    def errorf(self, fmt: str, *args) -> None: ...
    def panic(self, *args) -> None: ...
    def panicf(self, fmt: str, *args) -> None: ...
    def fatal(self, *args) -> None: ...
    def fatalf(self, fmt: str, *args) -> None: ...


def _sprint(args) -> str:
    """Join operands, putting a space only between two adjacent non-strings."""
    out: list[str] = []
    prev = None
    for arg in args:
        if out and not isinstance(arg, str) and not isinstance(prev, str):
            out.append(" ")
        out.append(str(arg))
        prev = arg
    return "".join(out)


def _sprintf(fmt: str, args) -> str:
    return fmt % args if args else fmt


class _Formatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        stamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime(record.created))
        stamp = f"{stamp}.{int(record.msecs):03d} "
        level = getattr(record, "seata_level", record.levelname)
        path = Path(record.pathname)
        caller = f"{path.parent.name}/{path.name}:{record.lineno}"
        return f"{stamp}\t{level}\t{caller:<45}\t{record.getMessage()}"


class _StdLogger:
    """Backend writing through the standard logging machinery."""

    def __init__(self, logger: logging.Logger):
        self._logger = logger

    def _emit(self, level: LogLevel, message: str) -> None:
        # stacklevel 3 points past _emit and the level method to the caller.
        self._logger.log(
            _STD_LEVELS[level], "%s", message, stacklevel=3, extra={"seata_level": level.name}
        )

    def debug(self, *args):
        self._emit(LogLevel.DEBUG, _sprint(args))

    def debugf(self, fmt, *args):
        self._emit(LogLevel.DEBUG, _sprintf(fmt, args))

    def info(self, *args):
        self._emit(LogLevel.INFO, _sprint(args))

    def infof(self, fmt, *args):
        self._emit(LogLevel.INFO, _sprintf(fmt, args))

    def warn(self, *args):
        self._emit(LogLevel.WARN, _sprint(args))

    def warnf(self, fmt, *args):
        self._emit(LogLevel.WARN, _sprintf(fmt, args))

    def error(self, *args):
        self._emit(LogLevel.ERROR, _sprint(args))

    def errorf(self, fmt, *args):
        self._emit(LogLevel.ERROR, _sprintf(fmt, args))

    def panic(self, *args):
        message = _sprint(args)
        self._emit(LogLevel.PANIC, message)
        raise RuntimeError(message)

    def panicf(self, fmt, *args):
        message = _sprintf(fmt, args)
        self._emit(LogLevel.PANIC, message)
        raise RuntimeError(message)

    def fatal(self, *args):
        self._emit(LogLevel.FATAL, _sprint(args))
        raise SystemExit(1)

    def fatalf(self, fmt, *args):
        self._emit(LogLevel.FATAL, _sprintf(fmt, args))
        raise SystemExit(1)


def _build(handler: logging.Handler, level: LogLevel) -> _StdLogger:
    logger = logging.Logger("seata", _STD_LEVELS[level])
    handler.setFormatter(_Formatter())
    logger.addHandler(handler)
    return _StdLogger(logger)


_current: Logger = _build(logging.StreamHandler(sys.stderr), LogLevel.INFO)


def init_logging(log_path, level=LogLevel.INFO) -> Logger:
    """Log to a size-rotated file at ``log_path`` from ``level`` upwards."""
    global _current
    handler = RotatingFileHandler(
        log_path, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8"
    )
    _current = _build(handler, LogLevel(level))
    return _current


def set_logger(logger: Logger) -> None:
    """Replace the backend every module-level function writes to."""
    global _current
    _current = logger


def get_logger() -> Logger:
    return _current


def debug(*args):
    _current.debug(*args)


def debugf(fmt, *args):
    _current.debugf(fmt, *args)


def info(*args):
    _current.info(*args)


def infof(fmt, *args):
    _current.infof(fmt, *args)


def warn(*args):
    _current.warn(*args)


def warnf(fmt, *args):
    _current.warnf(fmt, *args)


def error(*args):
    _current.error(*args)


def errorf(fmt, *args):
    _current.errorf(fmt, *args)


def panic(*args):
    _current.panic(*args)


def panicf(fmt, *args):
    _current.panicf(fmt, *args)


def fatal(*args):
    _current.fatal(*args)


def fatalf(fmt, *args):
    _current.fatalf(fmt, *args)