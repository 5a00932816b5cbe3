"""
Common response models.

Dependencies: pydantic
System role: Shared API response structures
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error response schema used by every failing route."""

    error: str = Field(description="Human-readable error message")


class MessageResponse(BaseModel):
    """Confirmation response for state-changing operations without a body."""

    message: str
