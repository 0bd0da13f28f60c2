"""Logging setup.

A thin layer over the standard library: ``ContextualLogger`` attaches
key/value context to every record, and ``LoggerConfigurator`` installs a
single stream handler on the ``any_exporter`` logger.
"""

import json
import logging
import sys
from typing import Any, MutableMapping, Optional

_BASE_NAME = "any_exporter"


class _TextFormatter(logging.Formatter):
    """Plain text formatter that appends context as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context = getattr(record, "context", None)
        if context:
            pairs = " ".join(f"{k}={v}" for k, v in context.items())
            message = f"{message} [{pairs}]"
        return message


class _JsonFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(getattr(record, "context", None) or {})
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class ContextualLogger(logging.LoggerAdapter):
    """Logger adapter carrying a dimension dict into each log record."""

    def __init__(self, logger: logging.Logger, extra: Optional[dict[str, Any]] = None):
        super().__init__(logger, extra or {})

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, MutableMapping[str, Any]]:
        extra = kwargs.setdefault("extra", {})
        extra["context"] = {**self.extra, **extra.get("context", {})}
        return msg, kwargs

    def with_context(self, **context: Any) -> "ContextualLogger":
        """Return a new logger with ``context`` merged into the current dimensions."""
        return ContextualLogger(self.logger, {**self.extra, **context})


class LoggerConfigurator:
    """Configures the process-wide handler and hands out contextual loggers."""

    @classmethod
    def configure(cls, level: str = "INFO", json_output: bool = False) -> None:
        """Install (or replace) the stream handler on the base logger."""
        base = logging.getLogger(_BASE_NAME)
        for handler in list(base.handlers):
            base.removeHandler(handler)

        handler = logging.StreamHandler(sys.stderr)
        if json_output:
            handler.setFormatter(_JsonFormatter())
        else:
            handler.setFormatter(
                _TextFormatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
            )
        base.addHandler(handler)
        base.setLevel(level)
        base.propagate = False

    @classmethod
    def configure_logger(cls, name: str, dimensions: Optional[dict[str, Any]] = None) -> ContextualLogger:
        """Return a contextual logger under the base namespace."""
        if not name.startswith(_BASE_NAME):
            name = f"{_BASE_NAME}.{name}"
        return ContextualLogger(logging.getLogger(name), dimensions)


logger = LoggerConfigurator.configure_logger(_BASE_NAME)
