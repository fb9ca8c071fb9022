# =============================================================================
# Error Responses — `{"error": <message>}` for every failure
# =============================================================================
#
# Exception handlers are registered on the app by `create_app()`. They cover
# errors raised inside routes and dependencies. Middleware cannot rely on
# them (it runs outside the handler layer), so it calls `error_response()`
# directly.
# =============================================================================

from __future__ import annotations

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.exceptions import NotFoundError, UsersApiError
from app.models.responses import ErrorResponse

ROUTE_NOT_FOUND = "Route not found"


def error_response(exc: UsersApiError) -> JSONResponse:
    """Render a taxonomy error with its status code."""
    return JSONResponse(
        ErrorResponse(error=exc.message).model_dump(),
        status_code=exc.status_code,
    )


async def users_api_error_handler(
    request: Request, exc: UsersApiError,
) -> JSONResponse:
    return error_response(exc)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException,
) -> JSONResponse:
    """
    Map Starlette's routing errors onto the API's envelope.

    Unknown paths (404) and known paths with an unsupported method (405)
    are both "Route not found".
    """
    if exc.status_code in (404, 405):
        return error_response(NotFoundError(ROUTE_NOT_FOUND))
    return JSONResponse(
        ErrorResponse(error=str(exc.detail)).model_dump(),
        status_code=exc.status_code,
    )
