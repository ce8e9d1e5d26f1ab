"""Structured stdout logger built on structlog.

Renderer depends on the environment: colored key=value lines while
developing, one JSON object per line everywhere else.

Secret-bearing fields (raw tokens, passwords, digests) are masked by a
processor before rendering, so a careless ``logger.info(..., token=t)``
still only prints a preview.

ConsoleAdapter satisfies LoggerProtocol structurally; it does not subclass it.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from src.core.constants import TOKEN_PREVIEW_LENGTH

SECRET_FIELDS = frozenset(
    {
        "token",
        "access_token",
        "refresh_token",
        "new_refresh_token",
        "password",
        "new_password",
        "current_password",
        "password_hash",
        "secret_key",
    }
)


def _redact_secrets(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    for key in SECRET_FIELDS.intersection(event_dict):
        value = event_dict[key]
        if isinstance(value, str) and "password" not in key:
            event_dict[key] = value[:TOKEN_PREVIEW_LENGTH] + "..."
        else:
            event_dict[key] = "***"
    return event_dict


class ConsoleAdapter:
    """structlog-backed LoggerProtocol implementation.

    Args:
        use_json: Render JSON lines instead of the colored console format.
        level: Lowest level emitted (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """

    def __init__(self, *, use_json: bool = False, level: str = "INFO") -> None:
        renderer: structlog.types.Processor = (
            structlog.processors.JSONRenderer()
            if use_json
            else structlog.dev.ConsoleRenderer(colors=True)
        )
        min_level = logging.getLevelNamesMapping().get(level.upper(), logging.INFO)

        structlog.configure(
            processors=[
                structlog.contextvars.merge_contextvars,
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso", utc=True),
                _redact_secrets,
                renderer,
            ],
            wrapper_class=structlog.make_filtering_bound_logger(min_level),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=False,
        )
        self._logger = structlog.get_logger()

    @classmethod
    def _wrapping(cls, bound_logger: Any) -> ConsoleAdapter:
        adapter = cls.__new__(cls)
        adapter._logger = bound_logger
        return adapter

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log at ERROR level.

        When ``error`` is given its class name and text are added as
        ``error_type`` and ``error_message``.
        """
        self._logger.error(message, **_with_error(context, error))

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        self._logger.critical(message, **_with_error(context, error))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return a child adapter carrying ``context`` on every entry."""
        return self._wrapping(self._logger.bind(**context))

    def with_context(self, **context: Any) -> ConsoleAdapter:
        return self.bind(**context)


def _with_error(context: dict[str, Any], error: Exception | None) -> dict[str, Any]:
    if error is not None:
        context["error_type"] = type(error).__name__
        context["error_message"] = str(error)
    return context
