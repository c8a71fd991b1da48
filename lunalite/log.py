"""Engine-wide logging: a core logger and a rendering-interface logger sharing sinks."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path

__all__ = [
    "LogType",
    "LogLevel",
    "TRACE",
    "init",
    "shutdown",
    "is_initialized",
    "set_level",
    "get_level",
    "get_logger",
    "core",
    "rhi",
    "flush",
]

TRACE = 5
"""Numeric logging level used for trace messages, below DEBUG."""

_CORE_NAME = "LunaCore"
_RHI_NAME = "LunaRHI"
_BOOTSTRAP_NAME = "LunaCoreBootstrap"

_CONSOLE_FORMAT = "[%(name)s] [%(luna_level)s] %(message)s"
_FILE_FORMAT = "[%(asctime)s.%(msecs)03d] [%(name)s] [%(luna_level)s] %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_OFF = logging.CRITICAL + 10


class LogType(IntEnum):
    """Which of the two engine loggers to use."""

    CORE = 0
    RHI = 1


class LogLevel(IntEnum):
    """Severity threshold for the engine loggers."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    FATAL = 5
    OFF = 6


_PYTHON_LEVELS = {
    LogLevel.TRACE: TRACE,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.FATAL: logging.CRITICAL,
    LogLevel.OFF: _OFF,
}

_LEVEL_NAMES = {
    TRACE: "trace",
    logging.DEBUG: "debug",
    logging.INFO: "info",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "critical",
}


class _Formatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        record.luna_level = _LEVEL_NAMES.get(record.levelno, record.levelname.lower())
        return super().format(record)


@dataclass
class _State:
    initialized: bool = False
    level: LogLevel = LogLevel.INFO
    log_file: str = ""
    handlers: list[logging.Handler] = field(default_factory=list)
    core_logger: logging.Logger | None = None
    rhi_logger: logging.Logger | None = None


_state = _State()


def _to_python_level(level: LogLevel) -> int:
    return _PYTHON_LEVELS.get(LogLevel(level), logging.INFO)


def _attach(name: str, handlers: list[logging.Handler], level: int) -> logging.Logger:
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


def _detach(logger: logging.Logger | None) -> None:
    if logger is None:
        return
    for handler in list(logger.handlers):
        logger.removeHandler(handler)


def _close_handlers(handlers: list[logging.Handler]) -> None:
    for handler in handlers:
        try:
            handler.close()
        except Exception:
            pass


def init(log_file: str | os.PathLike[str] = "", level: LogLevel = LogLevel.INFO) -> None:
    """Set up the console sink, an optional truncated file sink, and both loggers."""
    shutdown()

    _state.log_file = os.fspath(log_file)
    _state.level = LogLevel(level)
    handlers: list[logging.Handler] = []
    _state.handlers = handlers
    python_level = _to_python_level(_state.level)

    try:
        console = logging.StreamHandler(sys.stdout)
        console.setFormatter(_Formatter(_CONSOLE_FORMAT))
        handlers.append(console)

        if _state.log_file:
            path = Path(_state.log_file)
            path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(path, mode="w", encoding="utf-8")
            file_handler.setFormatter(_Formatter(_FILE_FORMAT, datefmt=_DATE_FORMAT))
            handlers.append(file_handler)

        for handler in handlers:
            handler.setLevel(python_level)

        _state.core_logger = _attach(_CORE_NAME, handlers, python_level)
        _state.rhi_logger = _attach(_RHI_NAME, handlers, python_level)
        _state.initialized = True

        if _state.log_file:
            _state.core_logger.info("Logger initialized, output file: %s", _state.log_file)
        else:
            _state.core_logger.info("Logger initialized (console only)")
    except OSError as exc:
        try:
            if _state.core_logger is not None:
                _state.core_logger.error("Logger initialization failed: %s", exc)
            elif handlers:
                bootstrap = _attach(_BOOTSTRAP_NAME, handlers, python_level)
                bootstrap.error("Logger initialization failed: %s", exc)
                _detach(bootstrap)
        except Exception:
            pass

        _detach(_state.core_logger)
        _detach(_state.rhi_logger)
        _close_handlers(handlers)
        _state.initialized = False
        _state.handlers = []
        _state.core_logger = None
        _state.rhi_logger = None


def shutdown() -> None:
    """Flush and release both loggers and their sinks."""
    if not _state.initialized:
        return

    if _state.core_logger is not None:
        _state.core_logger.info("Logger shutdown")
    flush()

    _detach(_state.core_logger)
    _detach(_state.rhi_logger)
    _close_handlers(_state.handlers)

    _state.core_logger = None
    _state.rhi_logger = None
    _state.handlers = []
    _state.initialized = False


def is_initialized() -> bool:
    return _state.initialized


def set_level(level: LogLevel) -> None:
    """Change the threshold; applied to sinks and loggers when initialized."""
    _state.level = LogLevel(level)
    if not _state.initialized:
        return

    python_level = _to_python_level(_state.level)
    for handler in _state.handlers:
        handler.setLevel(python_level)
    for logger in (_state.core_logger, _state.rhi_logger):
        if logger is not None:
            logger.setLevel(python_level)


def get_level() -> LogLevel:
    return _state.level


def _ensure_initialized() -> None:
    if not _state.initialized:
        init(_state.log_file, _state.level)


def get_logger(kind: LogType = LogType.CORE) -> logging.Logger:
    """Return the requested logger, initializing logging on first use."""
    _ensure_initialized()
    logger = _state.rhi_logger if LogType(kind) is LogType.RHI else _state.core_logger
    if logger is None:
        raise RuntimeError("logging could not be initialized")
    return logger


def core() -> logging.Logger:
    return get_logger(LogType.CORE)


def rhi() -> logging.Logger:
    return get_logger(LogType.RHI)


def flush() -> None:
    """Flush all sinks if logging is initialized."""
    if not _state.initialized:
        return
    for handler in _state.handlers:
        handler.flush()