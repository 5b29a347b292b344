"""Logging adapters."""

from passage.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
