from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from api import farms
from config.app_config import APP_CONFIG, AppConfig
from constants import ApiRoutes, HTTPStatus, LogConfig
from exceptions import ApplicationError
from init_db import init_database
from utils.error_handlers import to_http_exception
from utils.logging_utils import clear_logging_context, new_request_id, set_logging_context
import logging
from logging.handlers import RotatingFileHandler
import math
import sys

APP_TITLE = "Citronix Farm API"
APP_VERSION = "1.0.0"


def configure_logging(config: AppConfig) -> None:
    """
    Configure the root logger: rotating file (optional) plus stdout.

    Safe to call more than once; handlers installed by a previous call are
    replaced rather than duplicated.
    """
    log_formatter = logging.Formatter(LogConfig.FORMAT)
    root_logger = logging.getLogger()
    root_logger.setLevel(config.log_level)

    for handler in list(root_logger.handlers):
        if getattr(handler, "_citronix", False):
            root_logger.removeHandler(handler)
            handler.close()

    handlers: list[logging.Handler] = []
    if config.log_to_file:
        config.log_dir.mkdir(parents=True, exist_ok=True)
        # File handler with rotation (10MB per file, keep 5 backups)
        file_handler = RotatingFileHandler(
            config.log_dir / "backend.log",
            maxBytes=LogConfig.MAX_BYTES,
            backupCount=LogConfig.BACKUP_COUNT,
            encoding='utf-8'
        )
        handlers.append(file_handler)

    handlers.append(logging.StreamHandler(sys.stdout))

    for handler in handlers:
        handler.setFormatter(log_formatter)
        handler.setLevel(config.log_level)
        handler._citronix = True
        root_logger.addHandler(handler)


configure_logging(APP_CONFIG)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan - startup and shutdown"""
    logger.info("Initializing database...")
    init_database()
    logger.info(f"{APP_TITLE} {APP_VERSION} ready")

    yield

    logger.info("Application shutdown complete")


app = FastAPI(
    title=APP_TITLE,
    description="Farm management REST API: CRUD and search over farms",
    version=APP_VERSION,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=APP_CONFIG.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    """Tag every log line of a request with a request id."""
    request_id = request.headers.get(LogConfig.REQUEST_ID_HEADER) or new_request_id()
    set_logging_context(request_id=request_id, method=request.method, path=request.url.path)
    try:
        response = await call_next(request)
    finally:
        clear_logging_context()
    response.headers[LogConfig.REQUEST_ID_HEADER] = request_id
    return response


def _finite_or_str(value: float):
    # JSON has no literal for inf or nan; echo the rejected input as text
    return value if math.isfinite(value) else str(value)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed body, query or path parameters are a 400, not FastAPI's default 422."""
    body = await request.body()
    body_preview = body.decode("utf-8", errors="ignore")
    if len(body_preview) > LogConfig.BODY_PREVIEW_LIMIT:
        body_preview = f"{body_preview[:LogConfig.BODY_PREVIEW_LIMIT]}...[truncated]"
    logger.warning(
        "Request validation failed path=%s method=%s errors=%s body_preview=%s",
        request.url.path,
        request.method,
        exc.errors(),
        body_preview,
    )
    return JSONResponse(
        status_code=HTTPStatus.BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors(), custom_encoder={float: _finite_or_str})},
    )


@app.exception_handler(ApplicationError)
async def application_error_handler(request: Request, exc: ApplicationError) -> JSONResponse:
    """Application errors that escape a route (e.g. from a dependency)."""
    http_exc = to_http_exception(f"{request.method} {request.url.path}", exc)
    return JSONResponse(status_code=http_exc.status_code, content={"detail": http_exc.detail})


app.include_router(farms.router, prefix=ApiRoutes.API_V1)


@app.get(ApiRoutes.HEALTH, tags=["health"])
def health_check():
    """Health check endpoint"""
    return {
        "status": "ok",
        "service": APP_TITLE,
        "version": APP_VERSION
    }


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting {APP_TITLE} on http://{APP_CONFIG.host}:{APP_CONFIG.port}...")
    uvicorn.run(app, host=APP_CONFIG.host, port=APP_CONFIG.port)
