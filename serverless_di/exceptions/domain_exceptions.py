"""
Domain-Specific Exceptions for serverless-di

Organized by category:
1. Module Configuration Errors
2. Data Validation Errors
3. Infrastructure and Retry Errors
"""

from typing import Any, Dict, Optional

from .base import ServerlessDIError


# =============================================================================
# Module Configuration Errors
# =============================================================================

class ConfigurationError(ServerlessDIError):
    """Raised when a module description cannot be turned into bindings.

    Used for:
    - Declarations without a handler or controller tag
    - Provider pairs missing ``provide`` or ``use_value``
    """

    def __init__(self, message: str, subject: Optional[str] = None, original_error: Optional[Exception] = None):
        """Initialize configuration error.

        Args:
            message: Human-readable error message
            subject: Name of the offending declaration or provider
            original_error: The original exception that caused this error
        """
        self.subject = subject
        context = {}
        if subject:
            context['subject'] = subject
        super().__init__(message, original_error, context)


# =============================================================================
# Data Validation Errors
# =============================================================================

class ValidationError(ServerlessDIError):
    """Raised when data validation fails.

    Used for:
    - Strict batch writes containing items without their primary keys
    - DynamoDB ValidationException responses
    """

    def __init__(self, message: str, errors: Optional[Dict[str, Any]] = None, original_error: Optional[Exception] = None):
        """Initialize validation error.

        Args:
            message: Human-readable error message
            errors: Dictionary of validation error details
            original_error: The original exception that caused this error
        """
        self.errors = errors or {}
        context = {
            'validation_errors': self.errors
        }
        super().__init__(message, original_error, context)


# =============================================================================
# Infrastructure and Retry Errors
# =============================================================================

class NotFoundError(ServerlessDIError):
    """Raised when a DynamoDB resource (table, index) is not found."""

    def __init__(self, message: str, resource_type: Optional[str] = None, resource_name: Optional[str] = None, original_error: Optional[Exception] = None):
        """Initialize not found error.

        Args:
            message: Human-readable error message
            resource_type: Type of resource not found (e.g., 'table', 'index')
            resource_name: Name of the resource not found
            original_error: The original exception that caused this error
        """
        self.resource_type = resource_type
        self.resource_name = resource_name
        context = {}
        if resource_type:
            context['resource_type'] = resource_type
        if resource_name:
            context['resource_name'] = resource_name
        super().__init__(message, original_error, context)


class ConnectionError(ServerlessDIError):
    """Raised when connection to DynamoDB fails.

    Used for:
    - Network connectivity issues
    - Authentication/authorization failures
    - Invalid endpoint configurations
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, original_error, context)


class RetryableError(ServerlessDIError):
    """Raised when a request fails for temporary reasons and may be retried by the caller.

    Used for:
    - ProvisionedThroughputExceededException
    - RequestLimitExceeded errors
    - Temporary service unavailability
    """

    def __init__(self, message: str, retry_after_seconds: Optional[int] = None, original_error: Optional[Exception] = None):
        """Initialize retryable error.

        Args:
            message: Human-readable error message
            retry_after_seconds: Suggested retry delay in seconds
            original_error: The original exception that caused this error
        """
        self.retry_after_seconds = retry_after_seconds
        context = {}
        if retry_after_seconds:
            context['retry_after_seconds'] = retry_after_seconds
        super().__init__(message, original_error, context)
