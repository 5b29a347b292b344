"""Console logging adapter.

Outputs structured logs to stdout using structlog.
- Development: human-readable console renderer with colors
- Testing/CI/Production: JSON renderer for machine parsing

Context keys that look like credentials are redacted before rendering, so
a stray ``password=`` or ``refresh_token=`` never reaches the output.

Does NOT inherit from LoggerProtocol (PEP 544 structural subtyping).
"""

from __future__ import annotations

import logging
import sys
from collections.abc import MutableMapping
from typing import Any

import structlog

REDACTED = "[REDACTED]"
SENSITIVE_KEYS = frozenset(
    {
        "password",
        "password_hash",
        "access_token",
        "refresh_token",
        "token",
        "secret",
        "api_key",
        "authorization",
    }
)


def redact_sensitive(
    _logger: Any, _method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """structlog processor replacing credential values with a marker."""
    for key in event_dict.keys() & SENSITIVE_KEYS:
        event_dict[key] = REDACTED
    return event_dict


class ConsoleAdapter:
    """Console logger.

    Args:
        use_json: JSON output when True, human-readable when False.
        level: Minimum level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """

    def __init__(self, *, use_json: bool = False, level: str = "INFO") -> None:
        processors: list[structlog.types.Processor] = [
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            redact_sensitive,
        ]

        if use_json:
            processors.append(structlog.processors.JSONRenderer())
        else:
            processors.append(structlog.dev.ConsoleRenderer(colors=True))

        min_level = logging.getLevelNamesMapping().get(level.upper(), logging.INFO)
        structlog.configure(
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(min_level),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )

        self._logger = structlog.get_logger()

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error message, flattening ``error`` into type and message fields."""
        self._logger.error(message, **_with_error(context, error))

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical message, flattening ``error`` into type and message fields."""
        self._logger.critical(message, **_with_error(context, error))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return new adapter with bound context; self is unchanged."""
        bound_adapter = ConsoleAdapter.__new__(ConsoleAdapter)
        bound_adapter._logger = self._logger.bind(**context)
        return bound_adapter

    def with_context(self, **context: Any) -> ConsoleAdapter:
        """Alias for bind()."""
        return self.bind(**context)


def _with_error(context: dict[str, Any], error: Exception | None) -> dict[str, Any]:
    if error is not None:
        context["error_type"] = type(error).__name__
        context["error_message"] = str(error)
    return context
