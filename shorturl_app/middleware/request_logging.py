"""Request outcome logging middleware."""

import time
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from shorturl_app.config import settings
from shorturl_app.log_sink import LogEvent


def level_for_status(status_code: int) -> str:
    if status_code >= 500:
        return "error"
    if status_code >= 400:
        return "warn"
    return "info"


def package_for_path(path: str) -> str:
    """First path segment names the component: /shorturls/abc -> shorturls"""
    segments = path.split("/")
    return segments[1] if len(segments) > 1 and segments[1] else "root"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Emits one event per finished request to the log sink on app.state.
    
    Level follows the status code: 5xx error, 4xx warn, otherwise info.
    """
    
    async def dispatch(self, request: Request, call_next: Callable):
        start_time = time.perf_counter()
        
        response = await call_next(request)
        
        duration_ms = round((time.perf_counter() - start_time) * 1000)
        log_sink = getattr(request.app.state, "log_sink", None)
        if log_sink is not None:
            await log_sink.emit(LogEvent(
                stack=settings.log_stack,
                level=level_for_status(response.status_code),
                package=package_for_path(request.url.path),
                message=f"{request.method} {request.url.path} - {response.status_code} ({duration_ms}ms)",
            ))
        
        return response
