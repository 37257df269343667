"""
Cascade deletion settings.

Dependencies: pydantic_settings
System role: Timeouts for per-node deletion steps
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CascadeSettings(BaseSettings):
    """Settings for the cascade deletion engine."""

    model_config = SettingsConfigDict(
        env_prefix="CASCADE_",
        case_sensitive=False,
        extra="ignore",
    )

    step_timeout_seconds: float | None = Field(
        default=30.0,
        description="Timeout for deleting one node (None disables the timeout)",
    )
