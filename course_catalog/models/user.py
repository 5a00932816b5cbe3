"""
Caller identity and user projections.

Dependencies: pydantic
System role: Identity contract supplied by the authentication subsystem
"""

import uuid
from enum import IntEnum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class UserRole(IntEnum):
    """Roles recognized by course visibility rules."""

    LEARNER = 0
    PROVIDER = 1


class CurrentUser(BaseModel):
    """Authenticated caller as forwarded by the auth gateway."""

    model_config = ConfigDict(frozen=True)

    id: uuid.UUID
    role: int | None = None


class UserSummary(BaseModel):
    """Public projection of a user; credentials are never included."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: uuid.UUID
    name: str | None = None
    email: str | None = None
    role: int | None = None
