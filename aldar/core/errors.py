from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from structlog import get_logger

from aldar.core import messages

logger = get_logger()


class AppError(Exception):
    """Base error carrying the HTTP status and the client-facing message."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = messages.INTERNAL_ERROR

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = messages.NOT_AUTHENTICATED


class AuthorizationError(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = messages.FORBIDDEN


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(AppError):
    """Raised by the store when a unique field is already taken."""

    status_code = status.HTTP_409_CONFLICT


class InternalError(AppError):
    pass


def first_validation_message(errors) -> str:
    """Client message for the first pydantic error, like the 400 bodies of the UI forms."""
    if not errors:
        return messages.FIELD_REQUIRED
    error = errors[0]
    field = ".".join(str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path"))
    if error.get("type") == "missing":
        return f"{field}: {messages.FIELD_REQUIRED}"
    if error.get("type") == "value_error":
        # Custom validators raise ValueError with the localized text
        ctx_error = (error.get("ctx") or {}).get("error")
        if ctx_error is not None:
            return str(ctx_error)
    return f"{field}: {messages.INVALID_VALUE}" if field else messages.INVALID_VALUE


async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error("Request failed", path=request.url.path, error=exc.message)
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError):
    message = first_validation_message(exc.errors())
    logger.info("Request validation failed", path=request.url.path, detail=message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": message})


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled error", path=request.url.path, error=str(exc), exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": messages.INTERNAL_ERROR},
    )


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
