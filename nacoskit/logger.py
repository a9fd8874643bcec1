"""Process-wide logger used by the client."""

from __future__ import annotations

import logging
import logging.handlers
import os
import re
import sys
import threading
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from nacoskit.file import mkdir_if_necessary

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

_FORMAT = "%(asctime)s\t%(levelname)s\t%(filename)s:%(lineno)d\t%(message)s"
_LOG_FILE_NAME = "nacos-sdk.log"

_DURATION_UNITS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "μs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}
_DURATION_PART = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|μs|ms|s|m|h)")


@dataclass
class LoggerConfig:
    """Settings for a file logger."""

    level: str = "info"
    output_path: str = ""
    rotation_time: str = "24h"
    max_age: int = 3


@runtime_checkable
class Logger(Protocol):
    """What the client needs from a logger."""

    def info(self, msg: str, *args: Any) -> None: ...

    def warn(self, msg: str, *args: Any) -> None: ...

    def error(self, msg: str, *args: Any) -> None: ...

    def debug(self, msg: str, *args: Any) -> None: ...


class NacosLogger:
    """Logger backed by a standard library ``logging.Logger``."""

    def __init__(self, logger: logging.Logger) -> None:
        self.logger = logger

    def info(self, msg: str, *args: Any) -> None:
        self.logger.info(msg, *args, stacklevel=2)

    def warn(self, msg: str, *args: Any) -> None:
        self.logger.warning(msg, *args, stacklevel=2)

    def error(self, msg: str, *args: Any) -> None:
        self.logger.error(msg, *args, stacklevel=2)

    def debug(self, msg: str, *args: Any) -> None:
        self.logger.debug(msg, *args, stacklevel=2)


def _parse_duration(text: str) -> float:
    """Parse a duration such as ``"1h30m"`` into seconds."""
    original = text
    sign = 1.0
    if text and text[0] in "+-":
        sign = -1.0 if text[0] == "-" else 1.0
        text = text[1:]
    if text == "0":
        return 0.0
    if not text:
        raise ValueError(f"time: invalid duration {original!r}")
    total = 0.0
    pos = 0
    while pos < len(text):
        match = _DURATION_PART.match(text, pos)
        if match is None:
            raise ValueError(f"time: invalid duration {original!r}")
        total += float(match.group(1)) * _DURATION_UNITS[match.group(2)]
        pos = match.end()
    return sign * total


def _level_for(level: str) -> int:
    return _LEVELS.get(level, logging.INFO)


def _default_logger() -> NacosLogger:
    log = logging.Logger("nacos-sdk", logging.DEBUG)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    log.addHandler(handler)
    log.propagate = False
    return NacosLogger(log)


def init_nacos_logger(config: LoggerConfig) -> NacosLogger:
    """Build a logger writing to a time-rotated file under ``config.output_path``."""
    rotation_seconds = _parse_duration(config.rotation_time)
    if rotation_seconds <= 0:
        raise ValueError(f"rotation time must be positive: {config.rotation_time!r}")
    mkdir_if_necessary(config.output_path)
    handler = logging.handlers.TimedRotatingFileHandler(
        os.path.join(config.output_path, _LOG_FILE_NAME),
        when="S",
        interval=max(1, int(rotation_seconds)),
        backupCount=max(0, int(config.max_age)),
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(_FORMAT))
    log = logging.Logger("nacos-sdk", _level_for(config.level))
    log.addHandler(handler)
    log.propagate = False
    return NacosLogger(log)


_lock = threading.Lock()
_current: Logger | None = _default_logger()


def init_logger(config: LoggerConfig) -> None:
    """Replace the global logger with a file logger built from ``config``."""
    global _current
    with _lock:
        _current = init_nacos_logger(config)


def set_logger(log: Logger | None) -> None:
    """Replace the global logger."""
    global _current
    with _lock:
        _current = log


def get_logger() -> Logger | None:
    """Return the global logger."""
    with _lock:
        return _current


def info(msg: str, *args: Any) -> None:
    """Log at info level through the global logger."""
    get_logger().info(msg, *args)


def warn(msg: str, *args: Any) -> None:
    """Log at warning level through the global logger."""
    get_logger().warn(msg, *args)


def error(msg: str, *args: Any) -> None:
    """Log at error level through the global logger."""
    get_logger().error(msg, *args)


def debug(msg: str, *args: Any) -> None:
    """Log at debug level through the global logger."""
    get_logger().debug(msg, *args)