"""FastAPI application factory."""

import logging
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from little_fridge.api.auth import router as auth_router
from little_fridge.api.foods import router as foods_router
from little_fridge.api.fridge import router as fridge_router
from little_fridge.app_logging import configure_logging
from little_fridge.config import parse_allowed_origins
from little_fridge.containers import AppContainer
from little_fridge.errors import (
    ConflictError,
    ForbiddenError,
    FridgeError,
    InternalError,
    NotFoundError,
    UnauthenticatedError,
    ValidationError,
)

_HTTP_ERRORS: dict[int, type[FridgeError]] = {
    status.HTTP_401_UNAUTHORIZED: UnauthenticatedError,
    status.HTTP_403_FORBIDDEN: ForbiddenError,
    status.HTTP_404_NOT_FOUND: NotFoundError,
    status.HTTP_409_CONFLICT: ConflictError,
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Little Fridge API", version=container.settings.app_version)
    app.state.container = container

    # Registered before CORS so that 500 responses still carry CORS headers.
    @app.middleware("http")
    async def unexpected_error_middleware(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        try:
            return await call_next(request)
        except Exception:
            logger.exception(
                "Unhandled error",
                extra={"method": request.method, "path": request.url.path},
            )
            return _error_response(InternalError("Internal server error"))

    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_allowed_origins(container.settings.cors_allow_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(auth_router)
    app.include_router(foods_router)
    app.include_router(fridge_router)

    @app.exception_handler(FridgeError)
    async def fridge_error_handler(request: Request, exc: FridgeError) -> JSONResponse:
        return _error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return _error_response(ValidationError(_describe_validation(exc)))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        response = _error_response(_from_http_exception(exc), exc.status_code)
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.get("/")
    async def root() -> dict[str, str]:
        """Service banner."""
        return {
            "message": "Little Fridge API",
            "version": container.settings.app_version,
        }

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


def _error_response(exc: FridgeError, status_code: int | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code or exc.status_code,
        content={"error": {"kind": exc.kind, "message": exc.message}},
    )


def _describe_validation(exc: RequestValidationError) -> str:
    """Summarize the first body or path problem without echoing input."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(
        str(part) for part in first.get("loc", ()) if part not in {"body", "path"}
    )
    message = str(first.get("msg", "invalid value"))
    if location:
        return f"Invalid {location}: {message}"
    return "Invalid request body"


def _from_http_exception(exc: StarletteHTTPException) -> FridgeError:
    """Map routing errors such as 404 and 405 onto the error taxonomy."""
    error_type = _HTTP_ERRORS.get(exc.status_code)
    if error_type is None:
        error_type = (
            ValidationError
            if exc.status_code < status.HTTP_500_INTERNAL_SERVER_ERROR
            else InternalError
        )
    return error_type(str(exc.detail))
