import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import DatabaseConfig, ServerConfig
from .core.events import shutdown_event, startup_event
from .logger import get_logger, setup_logging
from .routes import games, health

logger = get_logger(__name__)


def _error_status(status_code: int) -> str:
    return "error" if status_code >= 500 else "fail"


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return ORJSONResponse(
        status_code=exc.status_code,
        content={"status": _error_status(exc.status_code), "message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    message = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in exc.errors()
    )
    logger.info(f"Rejected request to {request.url.path}: {message}")
    return ORJSONResponse(
        status_code=422,
        content={"status": "fail", "message": message or "Invalid request"},
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup_event(app)
    try:
        yield
    finally:
        await shutdown_event(app)


def create_app() -> FastAPI:
    app = FastAPI(
        default_response_class=ORJSONResponse,
        title="Games API",
        description="CRUD service for games backed by PostgreSQL",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.db = None

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(health.router)
    app.include_router(games.router)
    return app


app = create_app()


def main():
    server = ServerConfig()
    setup_logging(server.LOG_LEVEL)

    # Fail fast before binding the listener when the store is not configured
    try:
        DatabaseConfig()
    except ValidationError as e:
        logger.error(f"Invalid database configuration: {e}")
        sys.exit(1)

    import uvicorn

    logger.info(f"Server starting at {server.HOST}:{server.PORT}")
    uvicorn.run(
        "app.main:app",
        host=server.HOST,
        port=server.PORT,
        log_level=server.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
