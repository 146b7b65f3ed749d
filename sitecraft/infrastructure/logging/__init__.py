"""Logging adapters implementing LoggerProtocol."""

from sitecraft.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
