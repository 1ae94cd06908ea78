"""
Name: Structured Logger Configuration

Responsibilities:
  - Configure JSON-structured logging for the cardify package
  - Automatically include run context (run_id, document_path)
  - Include stack traces for exceptions

Collaborators:
  - context.py: Run-scoped context vars
  - Python logging module (stdlib)

Constraints:
  - No external dependencies (uses stdlib only)
  - Never log document bodies, only paths and counts

Notes:
  - Modules log through logging.getLogger(__name__); every logger under
    "cardify" propagates to the handler installed here
"""

import logging
import sys
import json
import traceback
from datetime import datetime, timezone
from typing import Any


class JSONFormatter(logging.Formatter):
    """
    R: Format logs as JSON with automatic context enrichment.

    Includes:
      - timestamp (ISO 8601)
      - level, message, logger
      - module, function, line
      - run_id, document_path (from context)
      - exception stack trace (if present)
      - extra fields from log call
    """

    # R: Fields that should never be logged
    SENSITIVE_KEYS = {"content", "text", "body", "password", "token", "secret"}

    # R: Attributes every LogRecord carries; everything else came from `extra`
    INTERNAL_KEYS = {
        "name", "msg", "args", "created", "filename", "funcName",
        "levelname", "levelno", "lineno", "module", "msecs",
        "pathname", "process", "processName", "relativeCreated",
        "stack_info", "exc_info", "exc_text", "thread", "threadName",
        "taskName", "message",
    }

    def format(self, record: logging.LogRecord) -> str:
        log_obj: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # R: Add run context (imported lazily to avoid circular imports)
        from .context import get_context_dict

        log_obj.update(get_context_dict())

        for key, value in record.__dict__.items():
            if key in self.INTERNAL_KEYS:
                continue
            if key.lower() in self.SENSITIVE_KEYS:
                continue
            log_obj[key] = value

        if record.exc_info:
            log_obj["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "stacktrace": traceback.format_exception(*record.exc_info),
            }

        return json.dumps(log_obj, default=str)


def setup_logger(name: str = "cardify", level: str | int = logging.INFO) -> logging.Logger:
    """
    R: Configure and return the package logger.

    Args:
        name: Logger name (default: "cardify")
        level: Logging level name or number

    Returns:
        Configured logger with JSON formatting
    """
    log = logging.getLogger(name)
    log.setLevel(level)

    # R: Avoid duplicate handlers on reimport
    if not log.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(JSONFormatter())
        log.addHandler(handler)

    return log


# R: Global package logger instance
logger = setup_logger()
