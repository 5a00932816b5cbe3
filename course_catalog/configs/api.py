"""
HTTP API settings.

Dependencies: pydantic, pydantic_settings
System role: Router prefix and CORS configuration
"""

from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class ApiSettings(BaseSettings):
    """FastAPI application settings."""

    model_config = SettingsConfigDict(
        env_prefix="API_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    prefix: str = Field(default="/api/v1", description="Router mount prefix")
    cors_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["*"], description="Allowed CORS origins"
    )
    host: str = Field(default="0.0.0.0", description="Bind host for uvicorn")
    port: int = Field(default=8000, description="Bind port for uvicorn")

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _parse_cors_origins(cls, v):
        # API_CORS_ORIGINS is a comma-separated string
        if v is None:
            return []
        if isinstance(v, str):
            return [s.strip() for s in v.split(",") if s.strip()]
        return v
