"""
Shared Logger

Logging setup for the scheduling service. Components that report business
outcomes (validation verdicts, repository failures) receive a ContextLogger,
so their context travels with every record as ``record.extra_data``.
"""

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JSONFormatter(logging.Formatter):
    """One JSON object per record, with the context under ``extra``."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        extra_data = getattr(record, "extra_data", None)
        if extra_data:
            payload["extra"] = extra_data
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class ColoredFormatter(logging.Formatter):
    """Console formatter that colors the level name."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # Work on a copy so other handlers keep the plain level name
        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"{self.COLORS.get(record.levelname, self.RESET)}{record.levelname}{self.RESET}"
        return super().format(colored)


class ContextLogger:
    """Logger bound to a fixed context."""

    def __init__(self, name: str, context: dict[str, Any] | None = None):
        self._logger = logging.getLogger(name)
        self._context = context or {}

    def with_context(self, **kwargs) -> "ContextLogger":
        """Return a logger whose context also holds ``kwargs``."""
        return ContextLogger(self._logger.name, {**self._context, **kwargs})

    def _log(self, level: int, message: str, **kwargs) -> None:
        self._logger.log(level, message, extra={"extra_data": {**self._context, **kwargs}})

    def debug(self, message: str, **kwargs) -> None:
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs) -> None:
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs) -> None:
        self._log(logging.ERROR, message, **kwargs)


def configure_logging(level: str = "INFO", format_type: str = "colored") -> None:
    """
    Install a single stdout handler on the root logger.

    Args:
        level: Log level name, case-insensitive
        format_type: 'colored', 'json' or 'plain'
    """
    formatters = {
        "json": lambda: JSONFormatter(),
        "colored": lambda: ColoredFormatter(LOG_FORMAT, datefmt=DATE_FORMAT),
    }
    formatter = formatters.get(format_type, lambda: logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


def _component_logger(component: str, name: str) -> ContextLogger:
    return ContextLogger(f"{component}.{name}", {"component": component, component: name})


def get_api_logger(route_name: str) -> ContextLogger:
    return ContextLogger(f"api.{route_name}", {"component": "api", "route": route_name})


def get_service_logger(service_name: str) -> ContextLogger:
    return _component_logger("service", service_name)


def get_repository_logger(repo_name: str) -> ContextLogger:
    return _component_logger("repository", repo_name)
