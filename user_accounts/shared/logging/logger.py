"""Loguru setup for the account service.

Every line carries the request correlation id and, once the auth gate has
verified a bearer token, the subject it was issued for. Both live in
ContextVars so they follow the request through use cases and stores without
being passed around. All sinks run the sensitive-data filter.
"""

from __future__ import annotations

import logging
import os
import sys
from contextvars import ContextVar

from loguru import logger as _logger

from .sensitive_filter import sanitize_record

_FMT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<lvl>{level:<8}</lvl> | "
    "<magenta>{extra[correlation_id]}</magenta> | "
    "<yellow>sub={extra[subject]}</yellow> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<lvl>{message}</lvl>"
)

DEFAULT_LOG_NAME = "user_accounts.log"

_CORRELATION_ID: ContextVar[str] = ContextVar("correlation_id", default="-")
_SUBJECT: ContextVar[str] = ContextVar("subject", default="-")


def _log_file_path() -> str:
    configured = os.getenv("LOG_FILE")
    if configured:
        return configured
    root = os.path.abspath(os.path.join(os.path.dirname(__file__), "../../instance"))
    return os.path.join(root, DEFAULT_LOG_NAME)


def _context() -> dict[str, str]:
    return {"correlation_id": _CORRELATION_ID.get(), "subject": _SUBJECT.get()}


class _InterceptHandler(logging.Handler):
    """Route werkzeug, SQLAlchemy and httpx records into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = _logger.level(record.levelname).name
        except ValueError:
            level = str(record.levelno)
        _logger.bind(**_context()).opt(depth=6, exception=record.exc_info).log(
            level, record.getMessage()
        )


class ContextualLogger:
    """Proxy for loguru that binds the current request context on each call."""

    def __getattr__(self, name):  # pragma: no cover
        return getattr(_logger.bind(**_context()), name)


def set_correlation_id(value: str | None) -> None:
    _CORRELATION_ID.set(value or "-")


def get_correlation_id() -> str:
    return _CORRELATION_ID.get()


def set_subject(value: str | None) -> None:
    _SUBJECT.set(value or "-")


def clear_correlation_id() -> None:
    _CORRELATION_ID.set("-")
    _SUBJECT.set("-")


def setup_logging(level: str | None = None, *, debug_mode: bool = False) -> None:
    level = (level or os.getenv("LOG_LEVEL") or ("DEBUG" if debug_mode else "INFO")).upper()
    log_file = _log_file_path()
    os.makedirs(os.path.dirname(log_file), exist_ok=True)

    _logger.remove()
    _logger.configure(extra={"correlation_id": "-", "subject": "-"})
    _logger.add(
        sys.stderr,
        level=level,
        format=_FMT,
        colorize=True,
        backtrace=False,
        diagnose=False,
        filter=sanitize_record,
    )
    # diagnose must stay off: frame variables are not redacted.
    _logger.add(
        log_file,
        level=level,
        format=_FMT,
        colorize=False,
        backtrace=debug_mode,
        diagnose=False,
        enqueue=True,
        rotation="10 MB",
        retention=5,
        encoding="utf-8",
        filter=sanitize_record,
    )

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)
    logging.getLogger("werkzeug").setLevel(logging.INFO)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if debug_mode else logging.WARNING
    )


logger = ContextualLogger()

__all__ = [
    "logger",
    "setup_logging",
    "set_correlation_id",
    "set_subject",
    "clear_correlation_id",
    "get_correlation_id",
]
