"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from balance_life.api.meals import router as meals_router
from balance_life.api.users import router as users_router
from balance_life.api.workouts import router as workouts_router
from balance_life.app_logging import configure_logging
from balance_life.config import parse_allowed_origins
from balance_life.containers import AppContainer
from balance_life.domain.errors import (
    DataIntegrityError,
    PersistenceError,
    ReferenceNotFound,
    ValidationError,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)
    allowed_origins = parse_allowed_origins(container.settings.cors_allow_origins)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("BalanceLife API starting (%s)", container.settings.environment)
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="BalanceLife API", lifespan=lifespan)
    app.state.container = container
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=allowed_origins != ["*"],
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    app.include_router(users_router, prefix="/api")
    app.include_router(meals_router, prefix="/api")
    app.include_router(workouts_router, prefix="/api")

    @app.exception_handler(ValidationError)
    async def handle_validation_error(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        return _error_response(
            status.HTTP_400_BAD_REQUEST,
            str(exc),
            field=exc.field,
            constraint=exc.constraint,
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return _error_response(
            status.HTTP_400_BAD_REQUEST, _format_request_errors(exc.errors())
        )

    @app.exception_handler(ReferenceNotFound)
    async def handle_reference_not_found(
        request: Request, exc: ReferenceNotFound
    ) -> JSONResponse:
        return _error_response(
            status.HTTP_400_BAD_REQUEST, f"Invalid {exc.kind} ID: {exc.reference_id}"
        )

    @app.exception_handler(DataIntegrityError)
    async def handle_data_integrity_error(
        request: Request, exc: DataIntegrityError
    ) -> JSONResponse:
        logger.error("Reference data integrity failure: %s", exc)
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Reference data is invalid"
        )

    @app.exception_handler(PersistenceError)
    async def handle_persistence_error(
        request: Request, exc: PersistenceError
    ) -> JSONResponse:
        logger.error(
            "Storage failure on %s %s",
            request.method,
            request.url.path,
            exc_info=exc,
        )
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return _error_response(exc.status_code, str(exc.detail))

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {
            "status": "ok",
            "message": "BalanceLife API is running",
            "storeType": "supabase",
        }

    return app


def _error_response(status_code: int, message: str, **extra: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message, **extra})


def _format_request_errors(errors: list[dict[str, object]]) -> str:
    messages = []
    for error in errors:
        location = error.get("loc") or ()
        field = ".".join(str(part) for part in location if part != "body")
        messages.append(f"{field}: {error.get('msg', 'invalid value')}")
    return "; ".join(messages) or "Invalid request"
