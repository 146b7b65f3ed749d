"""Core enums package."""

from sitecraft.core.enums.environment import Environment
from sitecraft.core.enums.error_code import ErrorCode

__all__ = ["Environment", "ErrorCode"]
