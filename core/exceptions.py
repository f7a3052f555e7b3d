"""Custom exception classes for the application.

Defines domain-specific exceptions raised by the API and service layers and
rendered consistently by the handlers in `core.error_handlers`. The AI
errors at the bottom never cross the service boundary: the services that
call external models catch them and switch to their offline fallback.
"""

from typing import Optional, Any, Dict


class AppException(Exception):
    """Base exception class for all application exceptions.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code to return.
        details: Optional additional error details.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(AppException):
    """Exception raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: Any):
        """Initialize not found error.

        Args:
            resource: Type of resource (e.g., 'DietPlan', 'MealLog').
            identifier: ID or identifier that was not found.
        """
        message = f"{resource} with id '{identifier}' not found"
        super().__init__(message, status_code=404, details={"resource": resource, "id": identifier})


class ValidationError(AppException):
    """Exception raised when input validation fails."""

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(message, status_code=400, details=details)


class DatabaseError(AppException):
    """Exception raised when database operations fail."""

    def __init__(self, message: str, operation: Optional[str] = None):
        details = {"operation": operation} if operation else {}
        super().__init__(message, status_code=500, details=details)


class ConfigurationError(AppException):
    """Exception raised when application configuration is invalid."""

    def __init__(self, message: str, config_key: Optional[str] = None):
        details = {"config_key": config_key} if config_key else {}
        super().__init__(message, status_code=500, details=details)


class AIServiceError(AppException):
    """Transport-level failure talking to an external model endpoint.

    Covers non-2xx responses, timeouts and connection errors.

    Attributes:
        upstream_status: HTTP status returned by the provider, if any.
    """

    def __init__(self, message: str, upstream_status: Optional[int] = None):
        details = {"upstream_status": upstream_status} if upstream_status is not None else {}
        self.upstream_status = upstream_status
        super().__init__(message, status_code=502, details=details)


class AIResponseError(AppException):
    """The provider answered, but the payload was empty or malformed."""

    def __init__(self, message: str, content: Optional[str] = None):
        details = {"content": content[:200]} if content else {}
        super().__init__(message, status_code=502, details=details)
