"""User Schemas — request body, stored record and response envelopes.

Invariants:
    - UserCreate accepts missing id/name (defaults to ""); emptiness is a
      ValidationError raised by the handler, not a parse failure
    - Wrong JSON types (e.g. numeric id) fail parsing → MalformedInputError
    - UserResponse.user is present on success only

Design Decisions:
    - Separate request/record types: the request shape is lenient so the
      empty-field rule lives in one place (core/validate_user.py)
"""

from pydantic import BaseModel, ConfigDict


class UserCreate(BaseModel):
    """POST /users body."""
    id: str = ""
    name: str = ""
    email: str | None = None


class User(BaseModel):
    """A stored user record."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str | None = None


class UserResponse(BaseModel):
    """Envelope for user endpoints."""
    message: str
    user: User | None = None


class HealthCheckResponse(BaseModel):
    status: str
    message: str
