"""Core shared kernel.

This module provides foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Base error class and error codes
- Clock abstraction

The core module has NO dependencies on other application layers.
"""

from src.core.clock import Clock, utc_now
from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success

__all__ = [
    "Clock",
    "DomainError",
    "ErrorCode",
    "Failure",
    "Result",
    "Success",
    "utc_now",
]
