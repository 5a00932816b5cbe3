"""
Course rule settings.

Dependencies: pydantic_settings
System role: Course validation strictness configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CourseSettings(BaseSettings):
    """Course creation rules."""

    model_config = SettingsConfigDict(
        env_prefix="COURSE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    require_full_details: bool = Field(
        default=False,
        description=(
            "Require description, shortDescription and level on create "
            "in addition to title"
        ),
    )
