import logging
import time
import uuid
from typing import Callable

from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Middleware that tags every request with an ID and logs its outcome.

    A client-supplied ``X-Request-ID`` is kept, otherwise a new one is
    generated. The ID is echoed back on the response.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = (request.headers.get(REQUEST_ID_HEADER) or "").strip() or uuid.uuid4().hex
        request.state.request_id = request_id

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        response.headers[REQUEST_ID_HEADER] = request_id
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} "
            f"({elapsed_ms:.1f} ms) [{request_id}]"
        )
        return response

def add_middleware(app: FastAPI) -> None:
    """Add all middleware to the FastAPI application."""
    app.add_middleware(RequestContextMiddleware)
