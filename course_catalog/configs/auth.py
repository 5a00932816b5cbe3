"""
Caller identity settings.

The authentication subsystem sits in front of this service and forwards
the authenticated caller as request headers.

Dependencies: pydantic_settings
System role: Identity header configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AuthSettings(BaseSettings):
    """Headers carrying the authenticated caller."""

    model_config = SettingsConfigDict(
        env_prefix="AUTH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    user_id_header: str = Field(default="X-User-Id", description="Header with caller id")
    user_role_header: str = Field(default="X-User-Role", description="Header with caller role")
