# -*- coding: utf-8 -*-
"""
Request tracking and payload size middleware.
"""
import logging
import time
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from .config import settings

logger = logging.getLogger(__name__)

# Request ID of the request being served, read by the logging filter
request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)

# JSON envelope allowance on top of the Markdown character limit
PAYLOAD_OVERHEAD_BYTES = 1_000_000


def get_request_id() -> str | None:
    return request_id_ctx.get()


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Tag each request with an ID and log one access line per request."""

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(settings.REQUEST_ID_HEADER) or uuid.uuid4().hex
        token = request_id_ctx.set(request_id)
        started = time.perf_counter()

        try:
            response = await call_next(request)
            response.headers[settings.REQUEST_ID_HEADER] = request_id
            logger.info(
                f"{request.method} {request.url.path} -> {response.status_code}",
                extra={"duration_ms": round((time.perf_counter() - started) * 1000, 1)},
            )
            return response
        finally:
            request_id_ctx.reset(token)


class PayloadSizeMiddleware(BaseHTTPMiddleware):
    """
    Reject request bodies whose declared length can't fit the Markdown limit.

    UTF-8 uses at most 4 bytes per character, so anything above
    4 * MAX_MARKDOWN_CHARS (plus JSON overhead) is refused before parsing.
    Bodies under that bound are still checked per endpoint.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        declared = request.headers.get("content-length")
        limit = settings.MAX_MARKDOWN_CHARS * 4 + PAYLOAD_OVERHEAD_BYTES
        if declared and declared.isdigit() and int(declared) > limit:
            logger.warning(f"Payload of {declared} bytes rejected (limit {limit})")
            return JSONResponse(
                status_code=413,
                content={"detail": f"Request body exceeds {limit} bytes"},
            )
        return await call_next(request)
