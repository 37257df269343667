"""
Acting identity and ownership checks.

The caller authenticates; this module only compares the acting user's ID
and role against the owner recorded on a resource.

Dependencies: None (pure domain layer)
System role: Ownership/role comparison used before any mutation
"""

import enum
from dataclasses import dataclass
from uuid import UUID

from coursehub.core.exceptions import AuthorizationError


class Role(str, enum.Enum):
    """Roles supplied by the identity provider."""

    USER = "user"
    ADMIN = "admin"


@dataclass(frozen=True)
class ActingUser:
    """Identity of the user performing a request."""

    id: UUID
    role: Role = Role.USER

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN


def ensure_owner_or_admin(user: ActingUser, owner_id: UUID, action: str) -> None:
    """
    Allow the action when the user owns the resource or is an admin.

    Args:
        user: Acting user
        owner_id: Uploader, course admin or review author
        action: Short description used in the error message

    Raises:
        AuthorizationError: If neither condition holds
    """
    if user.is_admin or user.id == owner_id:
        return
    raise AuthorizationError(f"Not authorized to {action}", user_id=user.id)


def ensure_admin(user: ActingUser, action: str) -> None:
    """
    Allow the action for admins only.

    Raises:
        AuthorizationError: If the user is not an admin
    """
    if not user.is_admin:
        raise AuthorizationError(f"Not authorized to {action}", user_id=user.id)
