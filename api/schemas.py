"""Pydantic schemas for API request/response validation."""

from pydantic import BaseModel, ConfigDict


class UserRequest(BaseModel):
    """Body of POST /users and PUT /users/{id}.

    Missing fields default to "" so they fail domain validation (400) rather
    than schema validation. An ``id`` in the body is ignored.
    """

    name: str = ""
    email: str = ""


class UserResponse(BaseModel):
    """User response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str


class MessageResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    service: str
