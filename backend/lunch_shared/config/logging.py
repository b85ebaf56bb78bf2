"""
Structured logging for the backend.

Loggers accept keyword context (``logger.info("Order created", order_id=3)``).
Records are rendered as JSON lines in production and as one coloured line
per record elsewhere. The id of the request being served, when there is one,
rides along on every record through ``request_id_var``.
"""

import json
import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any

from lunch_shared.config.settings import settings

# Set per request by the request id middleware
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

QUIET_LOGGERS = {
    "uvicorn.access": logging.WARNING,
    "sqlalchemy.engine": logging.WARNING,
    "httpx": logging.WARNING,
}


def get_request_id() -> str:
    return request_id_var.get()


class RequestIdFilter(logging.Filter):
    """Stamp each record with the current request id, or "-" outside a request."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get() or "-"
        return True


def _record_context(record: logging.LogRecord) -> dict[str, Any]:
    return getattr(record, "context", None) or {}


class JSONFormatter(logging.Formatter):
    """One JSON object per line, for log shippers."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if getattr(record, "request_id", "-") != "-":
            entry["request_id"] = record.request_id
        context = _record_context(record)
        if context:
            entry["context"] = context
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        if settings.debug:
            entry["source"] = f"{record.pathname}:{record.lineno}"
        return json.dumps(entry, default=str)


class ConsoleFormatter(logging.Formatter):
    """Readable single-line output for local runs."""

    LEVEL_COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelno, self.RESET)
        clock = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        parts = [f"{color}{clock} {record.levelname:<8}{self.RESET}"]

        request_id = getattr(record, "request_id", "-")
        if request_id != "-":
            parts.append(f"[{request_id[:8]}]")
        parts.append(f"{record.name}: {record.getMessage()}")

        context = _record_context(record)
        if context:
            parts.append(" ".join(f"{key}={value}" for key, value in context.items()))

        line = " ".join(parts)
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


class StructuredLogger(logging.Logger):
    """Logger whose level methods take arbitrary keyword context."""

    def _log(
        self,
        level: int,
        msg: object,
        args: Any,
        exc_info: Any = None,
        extra: dict[str, Any] | None = None,
        stack_info: bool = False,
        stacklevel: int = 1,
        **context: Any,
    ) -> None:
        extra = {**(extra or {}), "context": context}
        super()._log(
            level,
            msg,
            args,
            exc_info=exc_info,
            extra=extra,
            stack_info=stack_info,
            stacklevel=stacklevel + 1,
        )


logging.setLoggerClass(StructuredLogger)


def setup_logging() -> None:
    """Install the stdout handler on the root logger. Call once at startup."""
    level = logging.DEBUG if settings.debug else logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIdFilter())
    handler.setFormatter(JSONFormatter() if settings.environment == "production" else ConsoleFormatter())

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    for name, quiet_level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(quiet_level)


def get_logger(name: str) -> StructuredLogger:
    """
    Usage:
        logger = get_logger(__name__)
        logger.warning("Sign-in failed", email=mask_email(email))
    """
    return logging.getLogger(name)  # type: ignore[return-value]


def mask_email(email: str | None) -> str:
    """Keep the first two characters of the local part: "ann@acme.org" -> "an***@acme.org"."""
    if not email:
        return "<no-email>"
    local, at, domain = email.partition("@")
    if not at or not local:
        return "***@invalid"
    return f"{local[:2]}***@{domain}"


def mask_token(token: str | None) -> str:
    """Show only the first 4 characters of an auth token."""
    if not token:
        return "<no-token>"
    if len(token) <= 4:
        return "***"
    return f"{token[:4]}..."


# Area loggers
rest_api_logger = get_logger("lunch_api")
auth_logger = get_logger("lunch_api.auth")
orders_logger = get_logger("lunch_api.orders")
admin_logger = get_logger("lunch_api.admin")
