"""
Field validation for node and review records.

Every check runs before any write and raises ValidationError with the
offending field name.

Dependencies: coursehub.core.exceptions
System role: Fail-fast input validation for the resource store
"""

from typing import Any

from coursehub.core.exceptions import ValidationError
from coursehub.core.rating import MAX_RATING, MIN_RATING

NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500
COMMENT_MAX_LENGTH = 500


def clean_name(value: Any, field: str = "name") -> str:
    """Trim and check a required name."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field.capitalize()} is required", field=field)
    name = value.strip()
    if len(name) > NAME_MAX_LENGTH:
        raise ValidationError(
            f"{field.capitalize()} cannot be more than {NAME_MAX_LENGTH} characters",
            field=field,
        )
    return name


def clean_optional_text(value: Any, field: str, max_length: int) -> str | None:
    """Trim an optional free-text field and enforce its length limit."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field.capitalize()} must be text", field=field)
    text = value.strip()
    if len(text) > max_length:
        raise ValidationError(
            f"{field.capitalize()} cannot be more than {max_length} characters",
            field=field,
        )
    return text


def clean_flag(value: Any, field: str) -> bool:
    if not isinstance(value, bool):
        raise ValidationError(f"{field} must be a boolean", field=field)
    return value


def clean_rating(value: Any) -> int:
    """
    Check a review rating.

    Raises:
        ValidationError: If the rating is not an integer between 1 and 5
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError("A rating between 1 and 5 is required", field="rating")
    if not MIN_RATING <= value <= MAX_RATING:
        raise ValidationError(
            f"Rating must be between {MIN_RATING} and {MAX_RATING}",
            field="rating",
        )
    return value


def reject_unknown_fields(fields: dict[str, Any], allowed: set[str], kind: str) -> None:
    """Refuse fields that are not updatable on this kind of record."""
    unknown = sorted(set(fields) - allowed)
    if unknown:
        raise ValidationError(
            f"Cannot update {', '.join(unknown)} on {kind}",
            field=unknown[0],
            details={"allowed": sorted(allowed)},
        )
