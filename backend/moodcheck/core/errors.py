"""
Domain errors raised by the store modules.

Every failure is terminal to the attempted operation and carries a
human-readable message; the API layer renders it as ``{"detail": message}``.
"""
from fastapi import Request, status
from fastapi.responses import JSONResponse


class AppError(Exception):
    """Base class for failures surfaced to the client."""
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST


class InvalidInputError(AppError):
    """Input rejected by validation; ``errors`` lists every failed rule."""
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, errors=None):
        super().__init__(message)
        self.errors = list(errors or [])


class InvalidCredentialsError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED


class AuthenticationError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED


class PermissionDeniedError(AppError):
    status_code = status.HTTP_403_FORBIDDEN


class RateLimitError(AppError):
    status_code = status.HTTP_429_TOO_MANY_REQUESTS

    def __init__(self, message: str, reset_time: float):
        super().__init__(message)
        self.reset_time = reset_time


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Render an AppError as a JSON error response."""
    content = {"detail": exc.message}
    if isinstance(exc, InvalidInputError) and exc.errors:
        content["errors"] = exc.errors
    headers = None
    if isinstance(exc, (InvalidCredentialsError, AuthenticationError)):
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(status_code=exc.status_code, content=content, headers=headers)
