# =============================================================================
# Users API — CRUD Endpoints
# =============================================================================
#
#   GET    /users        → 200 [User, ...]
#   POST   /users        → 201 {"success": true, "id": <int>}
#   GET    /users/{id}   → 200 User | 404 {"error": "Not Found"}
#   PUT    /users/{id}   → 200 {"message": "Updated successfully"}
#   DELETE /users/{id}   → 200 {"message": "Deleted successfully"}
#
# Authentication and CORS are handled by middleware before these run.
#
# The id is the first path segment after /users/, as sent (still
# percent-encoded), and is handed to the datastore as text without
# validation: /users/abc, /users/1%2Fx and /users/ are valid requests
# that match no row.
#
# This module is thin by design: body parsing, the name/email check, and
# response mapping. Each handler runs one statement via app.services.users.
# =============================================================================

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.engine import get_async_session
from app.exceptions import NotFoundError, ValidationError
from app.models.requests import UserPayload, parse_user_payload
from app.models.responses import (
    MessageResponse,
    UserCreatedResponse,
    UserResponse,
)
from app.services import users as user_service

router = APIRouter(tags=["Users"])

MISSING_IDENTITY = "Missing name or email"


async def get_user_payload(request: Request) -> UserPayload:
    """Dependency: the request body as a UserPayload (empty if unparseable)."""
    return parse_user_payload(await request.body())


USERS_PREFIX = "/users/"


def get_user_id(request: Request, user_path: str) -> str:
    """
    Dependency: the id segment of /users/{id}, still percent-encoded.

    "/users/7/extra" addresses user "7"; "/users/1%2Fx" addresses the
    id "1%2Fx", which matches no row.
    """
    raw_path = request.scope.get("raw_path") or b""
    path = raw_path.split(b"?", 1)[0].decode("latin-1")
    if not path.startswith(USERS_PREFIX):
        # encoded prefix such as /%75sers/; fall back to the decoded path
        path = USERS_PREFIX + user_path
    return path[len(USERS_PREFIX):].split("/", 1)[0]


def _require_identity(payload: UserPayload) -> None:
    if not payload.has_identity:
        raise ValidationError(MISSING_IDENTITY)


# ---------------------------------------------------------------------------
# /users
# ---------------------------------------------------------------------------


@router.get(
    "/users",
    response_model=list[UserResponse],
    summary="List all users",
)
async def list_users(
    session: AsyncSession = Depends(get_async_session),
) -> list[UserResponse]:
    users = await user_service.list_users(session)
    return [UserResponse.model_validate(u) for u in users]


@router.post(
    "/users",
    response_model=UserCreatedResponse,
    status_code=201,
    summary="Create a user",
)
async def create_user(
    payload: UserPayload = Depends(get_user_payload),
    session: AsyncSession = Depends(get_async_session),
) -> UserCreatedResponse:
    """Create a user. name and email are required; vec is optional."""
    _require_identity(payload)

    user_id = await user_service.create_user(
        session, payload.name, payload.email, payload.vec,
    )
    return UserCreatedResponse(id=user_id)


# ---------------------------------------------------------------------------
# /users/{id}
# ---------------------------------------------------------------------------


@router.get(
    "/users/{user_path:path}",
    response_model=UserResponse,
    summary="Get a user",
)
async def get_user(
    user_id: str = Depends(get_user_id),
    session: AsyncSession = Depends(get_async_session),
) -> UserResponse:
    user = await user_service.get_user(session, user_id)
    if user is None:
        raise NotFoundError("Not Found")
    return UserResponse.model_validate(user)


@router.put(
    "/users/{user_path:path}",
    response_model=MessageResponse,
    summary="Replace a user",
)
async def update_user(
    user_id: str = Depends(get_user_id),
    payload: UserPayload = Depends(get_user_payload),
    session: AsyncSession = Depends(get_async_session),
) -> MessageResponse:
    """
    Full replace of name, email and vec. An omitted vec clears the stored
    one. Updating an id that does not exist still reports success.
    """
    _require_identity(payload)

    await user_service.update_user(
        session,
        user_id,
        payload.name,
        payload.email,
        payload.vec,
    )
    return MessageResponse(message="Updated successfully")


@router.delete(
    "/users/{user_path:path}",
    response_model=MessageResponse,
    summary="Delete a user",
)
async def delete_user(
    user_id: str = Depends(get_user_id),
    session: AsyncSession = Depends(get_async_session),
) -> MessageResponse:
    """Delete a user. Deleting an id that does not exist still succeeds."""
    await user_service.delete_user(session, user_id)
    return MessageResponse(message="Deleted successfully")
