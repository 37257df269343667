"""
Store error handling utilities.

Decorator that maps resource store exceptions onto HTTP responses for
every router.

Dependencies: fastapi, pydantic, coursehub.core.exceptions
System role: Uniform HTTP error mapping
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status
from pydantic import ValidationError as PydanticValidationError

from coursehub.core.exceptions import (
    AuthorizationError,
    ConflictError,
    DependencyError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_store_errors(func: F) -> F:
    """
    Decorator to handle store errors and transform them into HTTPExceptions.

    This centralizes:
    - Logging of errors with context
    - Mapping domain exceptions to HTTP status codes
    - Ensuring uniform error response formats
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except ValidationError as e:
            logger.warning("Invalid request", extra={"field": e.details.get("field"), "error": e.message})
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

        except AuthorizationError as e:
            logger.warning("Forbidden", extra={"user_id": e.details.get("user_id"), "error": e.message})
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=e.message)

        except NotFoundError as e:
            logger.warning(
                "Resource not found",
                extra={"kind": e.kind, "resource_id": str(e.resource_id)},
            )
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

        except ConflictError as e:
            logger.warning("Conflict", extra={"error": e.message})
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)

        except DependencyError as e:
            logger.error(
                "Backing store failure",
                extra={"operation": e.details.get("operation"), "retryable": e.retryable, "error": e.message},
            )
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail=e.message,
                headers={"Retry-After": "1"} if e.retryable else None,
            )

        except PydanticValidationError as e:
            logger.warning("Pydantic validation error", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=e.errors(),
            )

        except Exception as e:
            logger.exception("Unexpected failure in store operation", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="An internal error occurred",
            )

    return wrapper  # type: ignore
