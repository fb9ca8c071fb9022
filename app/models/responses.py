# =============================================================================
# API Response Models — Pydantic V2 Schemas
# =============================================================================
#
# These models define the shape of data coming OUT of the API. The stored
# `vec` text is never sent as-is: UserResponse decodes it back into a list.
# =============================================================================

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.services.vectors import decode_vec


class UserResponse(BaseModel):
    """A user as returned by GET /users and GET /users/{id}."""

    id: int
    name: str
    email: str
    vec: list[Any] | None = Field(
        default=None,
        description="Decoded vector, or null when none is stored",
    )

    model_config = ConfigDict(from_attributes=True)

    @field_validator("vec", mode="before")
    @classmethod
    def _decode_stored_vec(cls, value: Any) -> Any:
        if value is None or isinstance(value, list):
            return value
        return decode_vec(value)


class UserCreatedResponse(BaseModel):
    """Response for POST /users."""

    success: bool = True
    id: int = Field(description="Database-assigned id of the new user")


class MessageResponse(BaseModel):
    """Response for PUT and DELETE /users/{id}."""

    message: str


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str
