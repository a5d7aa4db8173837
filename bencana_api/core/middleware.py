"""
Middleware configuration for the application.
Includes Correlation ID setup, request logging and CORS.
"""

import time
import structlog
from typing import Callable
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from asgi_correlation_id import CorrelationIdMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from bencana_api.config import Settings

logger = structlog.get_logger(__name__)


def _elapsed_ms(start_time: float) -> float:
    return round((time.perf_counter() - start_time) * 1000, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log one line per request, tagged with the matched route template.

    Method and path are bound to the structlog context for the duration of
    the request, so events logged by handlers and repositories carry them.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        structlog.contextvars.bind_contextvars(method=request.method, path=request.url.path)
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("Request failed", duration_ms=_elapsed_ms(start_time))
            raise
        finally:
            structlog.contextvars.unbind_contextvars("method", "path")

        route = request.scope.get("route")
        log = logger.warning if response.status_code >= 500 else logger.info
        log(
            "Request handled",
            method=request.method,
            path=request.url.path,
            route=getattr(route, "path", None),
            status_code=response.status_code,
            duration_ms=_elapsed_ms(start_time),
        )
        return response


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Setup all middleware for the application.

    Starlette runs middleware last-added-first, so CORS is added last to
    sit outermost and the correlation id wraps the request logger.
    """
    app.add_middleware(RequestLoggingMiddleware)

    app.add_middleware(
        CorrelationIdMiddleware,
        header_name="X-Request-ID",
        update_request_header=True,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
