"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from nutriai.api.routes import router
from nutriai.app_logging import configure_logging
from nutriai.config import parse_allowed_origins
from nutriai.containers import AppContainer
from nutriai.domain.errors import UpstreamFailure, ValidationError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "NutriAI backend ready (environment=%s, log_backend=%s)",
            container.settings.environment,
            container.settings.log_backend,
        )
        yield
        logger.info("NutriAI backend shutting down")

    app = FastAPI(title="NutriAI", lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_allowed_origins(container.settings.cors_allowed_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ValidationError)
    async def handle_validation_error(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(exc)}
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.info("Rejected request payload: %s", exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid request payload"},
        )

    @app.exception_handler(UpstreamFailure)
    async def handle_upstream_failure(
        request: Request, exc: UpstreamFailure
    ) -> JSONResponse:
        logger.warning("Request failed: %s %s: %s", request.method, request.url, exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body(container, exc),
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    app.include_router(router)
    app.mount(
        "/uploads",
        StaticFiles(directory=container.settings.upload_dir, check_dir=False),
        name="uploads",
    )

    return app


def _error_body(container: AppContainer, exc: UpstreamFailure) -> dict[str, str]:
    """Return the error body, with the underlying cause in local runs."""
    body = {"error": str(exc)}
    cause = exc.__cause__
    if container.settings.environment == "local" and cause is not None:
        body["message"] = f"{type(cause).__name__}: {cause}".strip()
    return body
