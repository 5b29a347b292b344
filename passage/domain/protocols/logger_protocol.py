"""LoggerProtocol definition for structured logging.

Backend-agnostic structured logging port. Implementations MUST keep logs
structured (message + key-value context) and safe (no secrets).

Log Levels:
    - DEBUG: Detailed diagnostic info (dev only)
    - INFO: Normal operational events (login, logout, session renewed)
    - WARNING: Degraded behaviour (notification failed, rate limit hit)
    - ERROR: Flow failed on a collaborator error
    - CRITICAL: System-wide failure

Security:
    - NEVER log passwords, password hashes, full tokens or full codes
    - Codes are logged as an 8-character prefix only

Usage:
    from passage.core.container import get_logger

    logger = get_logger()
    logger.info("User logged in", user_id=str(user.id))

    flow_logger = logger.bind(flow="refresh", session_id=str(session_id))
    flow_logger.info("Session renewed")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            error: Optional exception instance; implementation may include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message for catastrophic failures."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        Original logger instance remains unchanged.

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Alias for bind()."""
        ...
