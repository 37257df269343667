"""
Exception hierarchy for the CourseHub resource store.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class CourseHubException(Exception):
    """Base exception for all CourseHub application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(CourseHubException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class NotFoundError(CourseHubException):
    """Raised when a node, parent, review or target resource does not exist."""

    def __init__(
        self,
        kind: str,
        resource_id: Any,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize not found error.

        Args:
            kind: Resource kind (Course, Folder, File, Review)
            resource_id: ID of the missing resource
            details: Additional context
        """
        details = details or {}
        details["kind"] = kind
        details["resource_id"] = str(resource_id)
        self.kind = kind
        self.resource_id = resource_id
        super().__init__(f"{kind} not found: {resource_id}", details)


class ConflictError(CourseHubException):
    """Raised on duplicate reviews or re-parenting an already-parented node."""

    pass


class AuthorizationError(CourseHubException):
    """Raised when the acting user lacks ownership or the admin role."""

    def __init__(
        self,
        message: str,
        user_id: Any = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize authorization error.

        Args:
            message: Error message
            user_id: Acting user that was refused
            details: Additional context
        """
        details = details or {}
        if user_id is not None:
            details["user_id"] = str(user_id)
        super().__init__(message, details)


class DependencyError(CourseHubException):
    """Raised when the blob store or the backing store fails transiently."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        retryable: bool = True,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize dependency error.

        Args:
            message: Error message
            operation: Operation that failed (blob_delete, cascade_delete, ...)
            retryable: Whether repeating the call is safe and may succeed
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        self.retryable = retryable
        super().__init__(message, details)
