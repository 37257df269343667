"""
Core business logic module.

Contains the domain vocabulary (node kinds, parent references), the
exception hierarchy, field validation, rating arithmetic and ownership
checks. Nothing here touches the database.
"""

from coursehub.core.exceptions import (
    CourseHubException,
    ValidationError,
    NotFoundError,
    ConflictError,
    AuthorizationError,
    DependencyError,
)
from coursehub.core.nodes import NodeKind, NodeRef, ParentRef, parent_from_fields
from coursehub.core.authorization import ActingUser, Role

__all__ = [
    # Exceptions
    "CourseHubException",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "AuthorizationError",
    "DependencyError",
    # Hierarchy
    "NodeKind",
    "NodeRef",
    "ParentRef",
    "parent_from_fields",
    # Identity
    "ActingUser",
    "Role",
]
