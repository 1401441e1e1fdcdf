import time
from typing import Optional

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from wedding_photos.api.endpoints.photos import files_router
from wedding_photos.api.router import api_router
from wedding_photos.config import Settings, get_settings
from wedding_photos.core.errors import AppError, InternalError, ValidationError
from wedding_photos.core.logging import configure_logging
from wedding_photos.core.uploads import UploadStore
from wedding_photos.db.init_db import init_db, init_upload_store
from wedding_photos.db.storage import Storage

logger = structlog.get_logger()


def _error_response(error: AppError) -> JSONResponse:
    return JSONResponse(status_code=error.status_code, content={"error": error.message})


def _describe_validation_error(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        # Drop the "body"/"query"/"path" prefix, keep the field name
        location = [str(part) for part in error.get("loc", ())[1:]]
        field = ".".join(location)
        messages.append(f"{field}: {error.get('msg')}" if field else error.get("msg", ""))
    return "; ".join(messages) or ValidationError.default_message


def create_app(
        settings: Optional[Settings] = None,
        storage: Optional[Storage] = None,
        upload_store: Optional[UploadStore] = None,
) -> FastAPI:
    """
    Build the application around one storage instance.

    Tests pass their own settings and storage; the module-level ``app`` uses
    the environment configuration and a fresh in-memory store.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        openapi_url=f"{settings.API_STR}/openapi.json"
    )

    app.state.settings = settings
    app.state.storage = storage or init_db(settings)
    app.state.upload_store = upload_store or init_upload_store(settings)

    # Set up CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_logging_middleware(request: Request, call_next):
        start_time = time.time()
        logger.info("request_started", method=request.method, path=request.url.path)

        response = await call_next(request)

        logger.info(
            "request_completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round((time.time() - start_time) * 1000, 2),
        )
        return response

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if exc.status_code >= 500:
            logger.error("request_failed", path=request.url.path, error=exc.message)
        return _error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        message = _describe_validation_error(exc)
        logger.warning("request_invalid", path=request.url.path, error=message)
        return _error_response(ValidationError(message))

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.error("request_failed", path=request.url.path, error=str(exc), exc_info=exc)
        return _error_response(InternalError())

    app.include_router(api_router, prefix=settings.API_STR)
    app.include_router(files_router)

    @app.get(f"{settings.API_STR}/health")
    def health() -> dict:
        return {"status": "healthy", "events": len(app.state.storage.list_events())}

    @app.get("/")
    def root():
        return {"message": f"Welcome to {settings.PROJECT_NAME} API"}

    return app


app = create_app()
