# =============================================================================
# Error Taxonomy
# =============================================================================
# Every client-visible failure is one of these. The app registers a single
# exception handler that renders them as `{"error": <message>}` with the
# class's status code. Anything else that escapes a route becomes a 500
# (see app/api/middleware.py).
# =============================================================================


class UsersApiError(Exception):
    """Base class for errors rendered as JSON with a fixed status code."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AuthError(UsersApiError):
    """Missing or wrong API key."""

    status_code = 401


class ValidationError(UsersApiError):
    """Missing required field or malformed vector."""

    status_code = 400


class NotFoundError(UsersApiError):
    """Missing resource or unmatched route."""

    status_code = 404
