# -*- coding: utf-8 -*-
"""
Logging system for the ABC-MCDM pipeline.

Features:
- Plain or colored console output
- Rotating DEBUG file log without ANSI codes
- Optional JSON log file for machine parsing
- Hierarchical module loggers under ``abc_mcdm``
- Context fields (phase, analysis id) attached to every record
- Phase timing through ``ProgressLogger``
"""

import logging
import logging.handlers
import json
import os
import re
import sys
import threading
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime
from functools import wraps
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union


LOG_NAME = "abc_mcdm"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
CONSOLE_DATE_FORMAT = "%H:%M:%S"
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB
BACKUP_COUNT = 5


class Colors:
    """ANSI color codes for terminal output."""
    RESET = "\033[0m"
    BOLD = "\033[1m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"
    BRIGHT_RED = "\033[91m"

    ANSI_PATTERN = re.compile(r'\033\[[0-9;]*m')

    @classmethod
    def strip(cls, text: str) -> str:
        """Remove all ANSI codes from text."""
        return cls.ANSI_PATTERN.sub('', text)

    @classmethod
    def supports_color(cls) -> bool:
        if os.getenv("NO_COLOR"):
            return False
        if os.getenv("FORCE_COLOR"):
            return True
        return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


# =============================================================================
# Formatters
# =============================================================================

class ColoredFormatter(logging.Formatter):
    """Level-colored console formatter."""

    LEVEL_COLORS = {
        logging.DEBUG: Colors.CYAN,
        logging.INFO: Colors.GREEN,
        logging.WARNING: Colors.YELLOW,
        logging.ERROR: Colors.RED,
        logging.CRITICAL: Colors.BRIGHT_RED + Colors.BOLD,
    }

    def __init__(self, fmt: Optional[str] = None, datefmt: Optional[str] = None,
                 use_colors: bool = True):
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors and Colors.supports_color()

    def format(self, record: logging.LogRecord) -> str:
        record = logging.makeLogRecord(record.__dict__)
        if self.use_colors:
            color = self.LEVEL_COLORS.get(record.levelno, "")
            record.levelname = f"{color}{Colors.BOLD}{record.levelname:8}{Colors.RESET}"
            record.msg = f"{color}{record.msg}{Colors.RESET}"
        return super().format(record)


class CleanFormatter(logging.Formatter):
    """File formatter; strips ANSI codes from messages."""

    def format(self, record: logging.LogRecord) -> str:
        record = logging.makeLogRecord(record.__dict__)
        if isinstance(record.msg, str):
            record.msg = Colors.strip(record.msg)
        return super().format(record)


class JSONFormatter(logging.Formatter):
    """One JSON object per record, including context fields."""

    _DEFAULT_KEYS = {
        'name', 'msg', 'args', 'created', 'filename', 'funcName',
        'levelname', 'levelno', 'lineno', 'module', 'msecs',
        'pathname', 'process', 'processName', 'relativeCreated',
        'stack_info', 'exc_info', 'exc_text', 'thread', 'threadName',
        'taskName', 'message'
    }

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": Colors.strip(record.getMessage()),
            "function": record.funcName,
            "line": record.lineno,
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        for key, value in record.__dict__.items():
            if key not in self._DEFAULT_KEYS:
                log_data[key] = value
        return json.dumps(log_data, ensure_ascii=False, default=str)


class SafeRotatingFileHandler(logging.handlers.RotatingFileHandler):
    """Rotating file handler serialising emits across threads."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._emit_lock = threading.Lock()

    def emit(self, record: logging.LogRecord) -> None:
        with self._emit_lock:
            try:
                super().emit(record)
            except Exception:
                self.handleError(record)


# =============================================================================
# Context
# =============================================================================

class LogContext:
    """Thread-local key/value context copied onto every log record."""
    _local = threading.local()

    @classmethod
    def get(cls) -> Dict[str, Any]:
        if not hasattr(cls._local, 'context'):
            cls._local.context = {}
        return cls._local.context

    @classmethod
    def set(cls, key: str, value: Any) -> None:
        cls.get()[key] = value

    @classmethod
    def remove(cls, key: str) -> None:
        cls.get().pop(key, None)

    @classmethod
    def clear(cls) -> None:
        cls._local.context = {}


class ContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in LogContext.get().items():
            setattr(record, key, value)
        return True


@contextmanager
def log_context(**kwargs):
    """
    Attach temporary context to all records logged inside the block.

    Example:
        with log_context(analysis_id="..."):
            logger.info("Persisting items")
    """
    for key, value in kwargs.items():
        LogContext.set(key, value)
    try:
        yield
    finally:
        for key in kwargs:
            LogContext.remove(key)


# =============================================================================
# Progress tracking
# =============================================================================

@dataclass
class PhaseMetrics:
    """Timing and status of one pipeline phase."""
    name: str
    start_time: float = 0.0
    end_time: Optional[float] = None
    status: str = "pending"
    sub_metrics: Dict[str, Any] = field(default_factory=dict)

    @property
    def elapsed(self) -> float:
        end = self.end_time or time.time()
        return end - self.start_time


class ProgressLogger:
    """
    Context manager logging start, completion and failure of a phase.

    Example:
        with ProgressLogger(logger, "Phase 2: Scoring") as phase:
            result = process(items)
            phase.set_metric("items", len(items))
    """

    def __init__(self, logger: logging.Logger, operation: str):
        self.logger = logger
        self.operation = operation
        self.metrics = PhaseMetrics(name=operation)

    def __enter__(self) -> 'ProgressLogger':
        self.metrics.start_time = time.time()
        self.metrics.status = "running"
        LogContext.set("phase", self.operation)
        self.logger.info(f"▶ Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.metrics.end_time = time.time()
        LogContext.remove("phase")
        if exc_type is None:
            self.metrics.status = "completed"
            self.logger.info(
                f"✓ Completed: {self.operation} ({self.metrics.elapsed:.2f}s)"
            )
        else:
            self.metrics.status = "failed"
            self.logger.error(
                f"✗ Failed: {self.operation} ({self.metrics.elapsed:.2f}s) - "
                f"{exc_type.__name__}: {exc_val}"
            )
        return False

    def set_metric(self, name: str, value: Any) -> None:
        self.metrics.sub_metrics[name] = value
        self.logger.debug(f"{self.operation}: {name}={value}")


# =============================================================================
# Logger factory
# =============================================================================

class LoggerFactory:
    """Central configuration of the ``abc_mcdm`` logger tree."""

    _loggers: Dict[str, logging.Logger] = {}
    _root_logger: Optional[logging.Logger] = None

    @classmethod
    def setup(
        cls,
        name: str = LOG_NAME,
        level: Union[int, str] = logging.INFO,
        log_file: Optional[Path] = None,
        json_file: Optional[Path] = None,
        console: bool = True,
        use_colors: bool = False,
        console_level: Optional[int] = None,
    ) -> logging.Logger:
        """
        Configure the root ``abc_mcdm`` logger.

        Parameters
        ----------
        name : str
            Logger name
        level : int or str
            Logger level
        log_file : Path, optional
            Plain text log file, always written at DEBUG level
        json_file : Path, optional
            JSON-lines log file
        console : bool
            Enable stdout output
        use_colors : bool
            Colored console output when the terminal supports it
        console_level : int, optional
            Console handler level (defaults to ``level``)
        """
        if isinstance(level, str):
            level = getattr(logging, level.upper(), logging.INFO)

        logger = logging.getLogger(name)
        logger.setLevel(level)
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()
        logger.filters.clear()
        logger.propagate = False
        logger.addFilter(ContextFilter())

        if console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(console_level if console_level is not None else level)
            if use_colors:
                console_fmt = ColoredFormatter(
                    fmt='%(asctime)s │ %(levelname)s │ %(message)s',
                    datefmt=CONSOLE_DATE_FORMAT,
                )
            else:
                console_fmt = CleanFormatter(
                    fmt='%(asctime)s | %(levelname)-8s | %(message)s',
                    datefmt=CONSOLE_DATE_FORMAT,
                )
            console_handler.setFormatter(console_fmt)
            logger.addHandler(console_handler)

        if log_file:
            log_file = Path(log_file)
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = SafeRotatingFileHandler(
                log_file, maxBytes=MAX_LOG_SIZE,
                backupCount=BACKUP_COUNT, encoding='utf-8'
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(CleanFormatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)s | '
                    '%(funcName)s:%(lineno)d | %(message)s',
                datefmt=DEFAULT_DATE_FORMAT,
            ))
            logger.addHandler(file_handler)

        if json_file:
            json_file = Path(json_file)
            json_file.parent.mkdir(parents=True, exist_ok=True)
            json_handler = SafeRotatingFileHandler(
                json_file, maxBytes=MAX_LOG_SIZE,
                backupCount=BACKUP_COUNT, encoding='utf-8'
            )
            json_handler.setLevel(level)
            json_handler.setFormatter(JSONFormatter())
            logger.addHandler(json_handler)

        cls._root_logger = logger
        cls._loggers[name] = logger
        return logger

    @classmethod
    def get_logger(cls, name: str = LOG_NAME) -> logging.Logger:
        if name in cls._loggers:
            return cls._loggers[name]
        root_name = cls._root_logger.name if cls._root_logger else LOG_NAME
        if name == root_name or name.startswith(root_name + "."):
            logger = logging.getLogger(name)
        else:
            logger = logging.getLogger(f"{root_name}.{name}")
        cls._loggers[name] = logger
        return logger

    @classmethod
    def get_module_logger(cls, module_name: str) -> logging.Logger:
        """Logger for a package module, e.g. ``'mcdm.topsis'``."""
        root_name = cls._root_logger.name if cls._root_logger else LOG_NAME
        return cls.get_logger(f"{root_name}.{module_name}")


def setup_logger(
    name: str = LOG_NAME,
    level: int = logging.INFO,
    console: bool = True,
    debug_file: Optional[Path] = None,
    json_file: Optional[Path] = None,
    use_colors: bool = False,
) -> logging.Logger:
    """
    Setup the pipeline logger.

    Console output is at ``level``, colored when ``use_colors`` is set and
    the terminal supports it; ``debug_file`` receives everything at DEBUG
    level.
    """
    return LoggerFactory.setup(
        name=name,
        level=logging.DEBUG,
        log_file=debug_file,
        json_file=json_file,
        console=console,
        use_colors=use_colors,
        console_level=level,
    )


def get_logger(name: str = LOG_NAME) -> logging.Logger:
    return LoggerFactory.get_logger(name)


def get_module_logger(module_name: str) -> logging.Logger:
    return LoggerFactory.get_module_logger(module_name)


# =============================================================================
# Decorators and timing
# =============================================================================

def log_execution(logger: Optional[logging.Logger] = None,
                  level: int = logging.DEBUG) -> Callable:
    """Log entry, completion time and failure of the decorated function."""
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            log = logger or get_logger()
            func_name = func.__qualname__
            log.log(level, f"Calling {func_name}")
            start = time.time()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                log.error(f"{func_name} failed after {time.time() - start:.3f}s: {e}")
                raise
            log.log(level, f"{func_name} completed ({time.time() - start:.3f}s)")
            return result
        return wrapper
    return decorator


@contextmanager
def timed_operation(logger: logging.Logger, operation: str,
                    level: int = logging.INFO):
    """
    Example:
        with timed_operation(logger, "csv export"):
            manager.save_all(result)
    """
    start = time.time()
    logger.log(level, f"Starting: {operation}")
    try:
        yield
    finally:
        logger.log(level, f"Finished: {operation} ({time.time() - start:.3f}s)")


class PipelineLogger:
    """Structured helpers for the run summary."""

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def banner(self, title: str, char: str = "═", width: int = 60) -> None:
        self.logger.info(char * width)
        self.logger.info(title.center(width))
        self.logger.info(char * width)

    def section(self, title: str) -> None:
        self.logger.info('─' * 40)
        self.logger.info(f"  {title}")
        self.logger.info('─' * 40)

    def metric(self, name: str, value: Any, unit: str = "") -> None:
        value_str = f"{value:.4f}" if isinstance(value, float) else str(value)
        suffix = f" {unit}" if unit else ""
        self.logger.info(f"  • {name}: {value_str}{suffix}")

    def metrics(self, metrics_dict: Dict[str, Any]) -> None:
        for name, value in metrics_dict.items():
            self.metric(name, value)

    def ranking(self, rankings: List[tuple], title: str = "Rankings",
                top_n: int = 5) -> None:
        self.logger.info(f"  {title} (Top {top_n}):")
        for i, (entity, score) in enumerate(rankings[:top_n], 1):
            self.logger.info(f"    {i}. {entity}: {score:.4f}")

    def step(self, message: str, status: str = "info") -> None:
        icons = {"info": "•", "done": "✓", "skip": "⊘", "warn": "⚡", "error": "✗"}
        self.logger.info(f"  {icons.get(status, '•')} {message}")


__all__ = [
    'setup_logger',
    'get_logger',
    'get_module_logger',
    'LoggerFactory',
    'ProgressLogger',
    'PipelineLogger',
    'LogContext',
    'Colors',
    'ColoredFormatter',
    'CleanFormatter',
    'JSONFormatter',
    'log_execution',
    'log_context',
    'timed_operation',
    'LOG_NAME',
]
