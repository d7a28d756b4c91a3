import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shorturl_app.config import settings
from shorturl_app.api.v1 import shorturls, statistics
from shorturl_app.dependencies import get_log_sink
from shorturl_app.log_sink import LogEvent
from shorturl_app.logging_config import setup_logging
from shorturl_app.middleware import RequestLoggingMiddleware

setup_logging(settings.log_level, settings.log_file, settings.log_format_json)
logger = logging.getLogger("shorturl_app.server")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Announce start/stop on the log sink; a preset app.state.log_sink wins (tests)"""
    if getattr(app.state, "log_sink", None) is None:
        app.state.log_sink = get_log_sink()
    log_sink = app.state.log_sink

    message = f"Server running on port {settings.port}"
    logger.info(message)
    logger.info(f"Health check: {settings.base_url}/health")
    await log_sink.emit(LogEvent(stack=settings.log_stack, level="info", package="server", message=message))

    yield

    await log_sink.emit(LogEvent(stack=settings.log_stack, level="info", package="server", message="Server shutting down"))
    await log_sink.close()


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="A URL shortener with expiring short codes and click statistics",
    debug=settings.debug,
    lifespan=lifespan
)

app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
def read_root():
    """Root endpoint with API information"""
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.app_version,
        "docs": "/docs",
        "redoc": "/redoc"
    }


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "environment": settings.environment}


######## Error handlers

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """All HTTP errors answer {"error": message}"""
    detail = exc.detail
    if exc.status_code == status.HTTP_404_NOT_FOUND and detail == "Not Found":
        detail = "Route not found"
    return JSONResponse(status_code=exc.status_code, content={"error": detail}, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies are client errors (400), not 422"""
    errors = exc.errors()
    field = errors[0]["loc"][-1] if errors and errors[0].get("loc") else "body"
    message = errors[0]["msg"] if errors else "Invalid request"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": f"Invalid {field}: {message}"}
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    log_sink = getattr(request.app.state, "log_sink", None)
    if log_sink is not None:
        await log_sink.emit(LogEvent(
            stack=settings.log_stack,
            level="error",
            package="middleware",
            message=f"Unhandled error: {exc}",
        ))
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Something went wrong!"}
    )


######## Include routers
app.include_router(shorturls.router)
app.include_router(statistics.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
