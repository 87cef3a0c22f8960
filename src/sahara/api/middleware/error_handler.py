"""
Request Context Middleware

Wraps every request with a correlation ID, request metrics and a
sanitized 500 for anything the endpoints did not handle.

PRIVACY: Request bodies carry user text. Neither the body nor the
exception message is logged or echoed back.
"""

import time
import traceback
from uuid import uuid4

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from sahara.config.logging_config import bind_correlation_id, clear_context, get_logger
from sahara.infrastructure.metrics import track_http_request

logger = get_logger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


def _endpoint_label(request: Request) -> str:
    """Route template (``/api/v1/sentiment/classify``) rather than the raw path."""
    route = request.scope.get("route")
    return getattr(route, "path", None) or "unmatched"


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Correlation, metrics and last-resort error handling.

    Metrics are labelled by route template so that arbitrary paths
    cannot grow label cardinality.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or str(uuid4())
        bind_correlation_id(correlation_id)
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "Request failed",
                endpoint=_endpoint_label(request),
                method=request.method,
                error_type=type(e).__name__,
                traceback=traceback.format_exc(),
            )
            track_http_request(request.method, _endpoint_label(request), 500)
            response = JSONResponse(
                status_code=500,
                content={
                    "error": "Internal server error",
                    "correlation_id": correlation_id,
                    "message": "Something went wrong on our side. Please try again.",
                },
            )
        else:
            track_http_request(request.method, _endpoint_label(request), response.status_code)
            logger.debug(
                "Request completed",
                endpoint=_endpoint_label(request),
                method=request.method,
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
        finally:
            clear_context()

        response.headers[CORRELATION_HEADER] = correlation_id
        return response
