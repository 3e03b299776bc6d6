# ruff: noqa: A005
"""Structured logging for the grading engine.

Records are rendered by a structlog pipeline onto stdlib loggers under the
``brutus`` namespace. Importing the package installs nothing but a
``NullHandler`` on that namespace; the host application decides where records
go, or calls ``configure_logging`` to send them to stdout.

Every record passes through a sensitive data filter, so a field named after a
password or secret is masked before it reaches a handler.

Architecture:
- LogLevel / LogFormat: level and renderer enumerations
- LogConfig: validated configuration dataclass
- SensitiveDataFilter: masks password-like fields
- StructuredLogger: named logger reading the current configuration per call
- LoggerFactory: holds the active configuration and structlog pipeline
"""

import logging
import re
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import structlog
from structlog.contextvars import merge_contextvars

from brutus.core.errors import ConfigurationError

ROOT_LOGGER_NAME = "brutus"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


class LogLevel(Enum):
    """Logging levels with priority mapping."""

    DEBUG = ("DEBUG", 10)
    INFO = ("INFO", 20)
    WARNING = ("WARNING", 30)
    ERROR = ("ERROR", 40)
    CRITICAL = ("CRITICAL", 50)

    def __init__(self, level_name: str, priority: int):
        self.level_name = level_name
        self.priority = priority

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        level_str = level_str.upper()
        for level in cls:
            if level.level_name == level_str:
                return level
        raise ConfigurationError(f"Invalid log level: {level_str}", config_key="level")


class LogFormat(Enum):
    """Log output format options."""

    JSON = "json"
    PLAIN = "plain"


@dataclass(frozen=True)
class LogConfig:
    """Logging configuration."""

    level: LogLevel = field(default=LogLevel.INFO)
    format: LogFormat = field(default=LogFormat.PLAIN)
    enable_timestamps: bool = field(default=True)
    enable_sensitive_data_filtering: bool = field(default=True)

    def __post_init__(self):
        if not isinstance(self.level, LogLevel):
            raise ConfigurationError("Log level must be a LogLevel", config_key="level")
        if not isinstance(self.format, LogFormat):
            raise ConfigurationError("Log format must be a LogFormat", config_key="format")


class SensitiveDataFilter:
    """
    Masks values of fields whose names look sensitive.

    Field names are matched case-insensitively; nested dictionaries and
    lists of dictionaries are filtered recursively.
    """

    sensitive_pattern = re.compile(r"password|passwd|token|secret|credential", re.IGNORECASE)

    def filter(self, record: dict[str, Any]) -> dict[str, Any]:
        filtered = {}
        for key, value in record.items():
            if self.sensitive_pattern.search(key):
                filtered[key] = None if value is None else "***[MASKED]"
            elif isinstance(value, dict):
                filtered[key] = self.filter(value)
            elif isinstance(value, list):
                filtered[key] = [
                    self.filter(item) if isinstance(item, dict) else item for item in value
                ]
            else:
                filtered[key] = value
        return filtered


class LoggerFactory:
    """
    Active logging configuration and the structlog pipeline built from it.

    Bound loggers are cached per name and dropped whenever the configuration
    changes, so existing ``StructuredLogger`` instances pick up the new
    pipeline on their next call.
    """

    def __init__(self, config: LogConfig | None = None):
        self._bound: dict[str, Any] = {}
        self.config = config or LogConfig()

    @property
    def config(self) -> LogConfig:
        return self._config

    @config.setter
    def config(self, config: LogConfig) -> None:
        self._config = config
        self._filter = SensitiveDataFilter() if config.enable_sensitive_data_filtering else None
        self._processors = self._build_processors(config)
        self._bound.clear()

    @staticmethod
    def _build_processors(config: LogConfig) -> list[Any]:
        processors: list[Any] = [
            merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
        ]
        if config.enable_timestamps:
            processors.append(structlog.processors.TimeStamper(fmt="iso"))
        processors.append(structlog.processors.format_exc_info)
        if config.format == LogFormat.JSON:
            processors.append(structlog.processors.JSONRenderer())
        else:
            processors.append(structlog.processors.KeyValueRenderer(key_order=["event"]))
        return processors

    def bound(self, name: str) -> Any:
        """structlog logger for ``name`` wrapping the stdlib logger of that name."""
        if name not in self._bound:
            self._bound[name] = structlog.wrap_logger(
                logging.getLogger(name),
                processors=self._processors,
                wrapper_class=structlog.stdlib.BoundLogger,
            )
        return self._bound[name]

    def sanitize(self, record: dict[str, Any]) -> dict[str, Any]:
        return self._filter.filter(record) if self._filter else record


_factory = LoggerFactory()
_loggers: dict[str, "StructuredLogger"] = {}


class StructuredLogger:
    """
    Named logger with keyword arguments as structured fields.

    Holds no configuration of its own; level, format and filtering are read
    from the active factory on every call.
    """

    def __init__(self, name: str, factory: LoggerFactory | None = None):
        self.name = name
        self._factory = factory

    @property
    def factory(self) -> LoggerFactory:
        return self._factory or _factory

    @property
    def config(self) -> LogConfig:
        return self.factory.config

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(LogLevel.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(LogLevel.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(LogLevel.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(LogLevel.ERROR, message, **kwargs)

    def _log(self, level: LogLevel, message: str, **kwargs: Any) -> None:
        factory = self.factory
        if level.priority < factory.config.level.priority:
            return
        record = factory.sanitize(kwargs)
        getattr(factory.bound(self.name), level.level_name.lower())(message, **record)


def configure_logging(config: LogConfig | None = None, stream: Any = None) -> None:
    """
    Apply ``config`` to every ``brutus`` logger and emit records to ``stream``.

    Only an explicit call touches the stdlib configuration: the ``brutus``
    logger level is set, and a root handler writing to ``stream`` (stdout by
    default) is installed if the root logger has none.

    Args:
        config: Logging configuration (uses defaults if not provided)
        stream: Destination for the root handler
    """
    config = config or LogConfig()
    _factory.config = config
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(config.level.priority)
    logging.basicConfig(format="%(message)s", stream=stream or sys.stdout)


def current_config() -> LogConfig:
    return _factory.config


def get_logger(name: str) -> StructuredLogger:
    """
    Get structured logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        StructuredLogger: Logger following the active configuration
    """
    if name not in _loggers:
        _loggers[name] = StructuredLogger(name)
    return _loggers[name]
