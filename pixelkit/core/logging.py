"""
Structured logging configuration with operation ID tracking.

Kernel operations log as JSON objects so that a host application can ship
them alongside its own structured logs. A correlation ID can be bound to the
current context to group the records emitted by one batch of operations.
"""

import logging
import sys
import uuid
from contextvars import ContextVar
from typing import Any

import orjson

# Context variable to store the operation ID across threads/async contexts
operation_id_var: ContextVar[str] = ContextVar("operation_id", default="")

# Attributes every LogRecord carries; anything else came in through `extra`
_RESERVED_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "message",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "thread",
        "threadName",
        "taskName",
        "exc_info",
        "exc_text",
        "stack_info",
    }
)


def set_operation_id(operation_id: str | None = None) -> str:
    """
    Set the operation ID for the current context.

    Args:
        operation_id: Optional operation ID. If None, generates a new UUID.

    Returns:
        The operation ID that was set
    """
    oid = operation_id or str(uuid.uuid4())
    operation_id_var.set(oid)
    return oid


def get_operation_id() -> str:
    """Return the operation ID for the current context, or "" if unset."""
    return operation_id_var.get()


class StructuredFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.

    Outputs logs as JSON objects with consistent fields including:
    - timestamp: formatted record time
    - level: Log level name
    - logger: Logger name
    - message: Log message
    - operation_id: Current correlation ID
    - Extra fields from log record
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON string."""
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "operation_id": get_operation_id(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                log_data[key] = value

        # Shapes and numpy scalars are common in extras
        return orjson.dumps(
            log_data, default=str, option=orjson.OPT_SERIALIZE_NUMPY
        ).decode("utf-8")


def setup_logging(log_level: str = "INFO") -> None:
    """
    Configure logging with structured JSON output.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(StructuredFormatter())

    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with the specified name.

    Args:
        name: Logger name (typically __name__ of the module)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
