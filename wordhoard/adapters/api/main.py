# wordhoard\adapters\api\main.py
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from wordhoard import __version__
from wordhoard.adapters.api.routers import health, words
from wordhoard.core.domain.exceptions import ValidationFailed
from wordhoard.core.domain.results import OperationResult
from wordhoard.shared.config import AppEnv, settings
from wordhoard.shared.container import container
from wordhoard.shared.logging_config import configure_logging
from wordhoard.shared.observability import instrument_fastapi, setup_telemetry

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manages the application lifecycle.
    The lexicon store is created here, once, and lives until shutdown.
    """
    setup_telemetry(settings.OTEL_SERVICE_NAME)
    logger.info("app_startup", env=settings.APP_ENV.value, storage=settings.STORAGE_BACKEND.value)

    store = container.lexicon_store()
    if not await store.health_check():
        logger.error("storage_unavailable", backend=settings.STORAGE_BACKEND.value)

    yield

    logger.info("app_shutdown")


def create_app() -> FastAPI:
    """Factory function to create the FastAPI application."""
    configure_logging()

    # Modules using @inject / Provide[...]
    container.wire(modules=["wordhoard.adapters.api.dependencies"])

    app = FastAPI(
        title=settings.APP_NAME,
        version=__version__,
        description="Community dictionary: sharded lexicon store with voting and moderation",
        lifespan=lifespan,
        docs_url="/docs" if settings.APP_ENV != AppEnv.PRODUCTION else None,
        redoc_url=None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.DEBUG else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    instrument_fastapi(app)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "code": "http_error",
                "message": {"text": str(exc.detail), "type": "error"},
            },
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Form bound violations, reported per field like the web forms expect."""
        fields = {}
        for error in exc.errors():
            name = str(error["loc"][-1]) if error.get("loc") else "body"
            fields.setdefault(name, []).append(error["msg"])
        result = OperationResult.failure(ValidationFailed(fields))
        return JSONResponse(
            status_code=422,
            content=result.model_dump(mode="json", exclude_none=True),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error("unhandled_exception", path=request.url.path, error=str(exc), exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "code": "internal_error",
                "message": {"text": "Something went wrong!", "type": "error"},
            },
        )

    app.include_router(health.router, prefix="/api/v1")
    app.include_router(words.router, prefix="/api/v1")

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run("wordhoard.adapters.api.main:app", host="0.0.0.0", port=8000, reload=settings.DEBUG)
