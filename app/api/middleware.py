# =============================================================================
# Request Pipeline Middleware
# =============================================================================
#
# Three Starlette middlewares wrap every request, outermost first:
#
#   CORSMiddleware            OPTIONS → 204 immediately; CORS headers on
#                             every other response
#   RequestLoggingMiddleware  timing + access log; any exception that
#                             escaped the route → 500 {"error": str(exc)}
#   ApiKeyMiddleware          `api_key` query parameter must equal the
#                             configured key, else 401 before routing
#
# DESIGN DECISION: Middleware (not FastAPI dependencies) for auth and CORS,
# because both must apply to paths that match no route: an unknown path
# with a wrong key is a 401, and OPTIONS is answered for any path.
#
# `create_app()` adds them innermost-first (Starlette wraps the last added
# middleware around the others).
# =============================================================================

from __future__ import annotations

import logging
import secrets
import time

from starlette.middleware.base import (
    BaseHTTPMiddleware,
    RequestResponseEndpoint,
)
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp

from app.api.errors import error_response
from app.exceptions import AuthError
from app.models.responses import ErrorResponse

logger = logging.getLogger(__name__)

API_KEY_PARAM = "api_key"


def cors_headers(max_age: int = 86400) -> dict[str, str]:
    """The fixed CORS header set attached to every response."""
    return {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type, X-API-Key",
        "Access-Control-Max-Age": str(max_age),
    }


class CORSMiddleware(BaseHTTPMiddleware):
    """
    Answers every preflight with 204 and no body, whatever the path or key,
    and stamps the CORS headers on all other responses.
    """

    def __init__(self, app: ASGIApp, max_age: int = 86400):
        super().__init__(app)
        self.headers = cors_headers(max_age)

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        if request.method == "OPTIONS":
            return Response(status_code=204, headers=self.headers)

        response = await call_next(request)
        response.headers.update(self.headers)
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs each request and turns unhandled exceptions into JSON 500s."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        start_time = time.monotonic()
        try:
            response = await call_next(request)
        except Exception as e:
            logger.exception(
                "Unhandled error on %s %s", request.method, request.url.path,
            )
            response = JSONResponse(
                ErrorResponse(error=str(e)).model_dump(),
                status_code=500,
            )
        elapsed_ms = int((time.monotonic() - start_time) * 1000)

        logger.info(
            "%s %s -> %d (%dms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response


class ApiKeyMiddleware(BaseHTTPMiddleware):
    """Rejects requests whose `api_key` query parameter is not `api_key`."""

    def __init__(self, app: ASGIApp, api_key: str):
        super().__init__(app)
        self._expected = api_key.encode()

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        provided = request.query_params.get(API_KEY_PARAM)
        if provided is None or not secrets.compare_digest(
            provided.encode(), self._expected,
        ):
            logger.warning(
                "Rejected request with %s API key: %s %s",
                "missing" if provided is None else "invalid",
                request.method,
                request.url.path,
            )
            return error_response(AuthError("Unauthorized"))

        return await call_next(request)
