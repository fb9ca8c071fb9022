# =============================================================================
# API Request Models — Pydantic V2 Schemas
# =============================================================================
#
# POST /users and PUT /users/{id} share one body shape. Unlike most FastAPI
# endpoints, the body is NOT declared as a typed route parameter: a body that
# fails to parse must degrade to an empty payload (and then fail the
# "Missing name or email" check with 400) instead of FastAPI's automatic 422.
# `parse_user_payload()` implements that lenient parse.
# =============================================================================

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

logger = logging.getLogger(__name__)


class UserPayload(BaseModel):
    """
    Request body for creating or fully replacing a user.

    All fields are optional at parse time; routes check `has_identity`
    before writing. `vec` is kept untyped here and checked by the vector
    encoder so that a bad element yields the vector error rather than a
    generic parse failure.

    Example:
        {"name": "Ann", "email": "a@x.com", "vec": [1.5, -2, 3]}
    """

    name: str | None = Field(default=None, examples=["Ann"])
    email: str | None = Field(default=None, examples=["a@x.com"])
    vec: Any = Field(default=None, examples=[[1.5, -2, 3]])

    model_config = ConfigDict(
        extra="ignore",
        # {"name": 42} stores "42"
        coerce_numbers_to_str=True,
    )

    @field_validator("name", "email", mode="before")
    @classmethod
    def _zero_is_missing(cls, value: Any) -> Any:
        # a numeric 0 counts as "not given", like an empty string
        if isinstance(value, (int, float)) and not isinstance(value, bool) and value == 0:
            return None
        return value

    @property
    def has_identity(self) -> bool:
        """True when both name and email are non-empty."""
        return bool(self.name) and bool(self.email)


def parse_user_payload(body: bytes) -> UserPayload:
    """
    Parse a raw request body into a UserPayload.

    Never raises: invalid or too deeply nested JSON, a non-object document,
    or fields of the wrong type all produce an empty payload.
    """
    try:
        data = json.loads(body)
    except (ValueError, RecursionError):
        logger.debug("Request body is not valid JSON, treating as empty")
        return UserPayload()

    if not isinstance(data, dict):
        return UserPayload()

    try:
        return UserPayload.model_validate(data)
    except PydanticValidationError as e:
        logger.debug("Request body failed validation, treating as empty: %s", e)
        return UserPayload()
