# Base exception class
from .base import ServerlessDIError

from .domain_exceptions import (
    ConfigurationError,
    ConnectionError,
    NotFoundError,
    RetryableError,
    ValidationError,
)

__all__ = [
    # Base exception
    "ServerlessDIError",

    # Domain exceptions (alphabetically ordered)
    "ConfigurationError",
    "ConnectionError",
    "NotFoundError",
    "RetryableError",
    "ValidationError",
]
