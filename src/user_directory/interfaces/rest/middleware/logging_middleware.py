"""
Request logging middleware for tracing and context management.

Adds request_id to all logs within a request context.
"""

import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from user_directory.infrastructure.logging import get_logger, bind_context, clear_context

logger = get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware that adds request context to all logs.

    - Generates a unique request_id for each request
    - Binds request context to all logs within the request
    - Logs request completion with timing information
    - Adds X-Request-ID and X-Process-Time headers to the response
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id

        bind_context(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )

        logger.debug(
            "Request started",
            client=request.client.host if request.client else None,
        )

        start_time = time.time()

        try:
            response = await call_next(request)

            process_time = time.time() - start_time

            response.headers["X-Request-ID"] = request_id
            response.headers["X-Process-Time"] = f"{process_time:.3f}"

            logger.info(
                "Request completed",
                status_code=response.status_code,
                process_time=f"{process_time:.3f}s",
            )

            return response

        except Exception as e:
            process_time = time.time() - start_time
            logger.exception(
                "Request failed",
                error=str(e),
                process_time=f"{process_time:.3f}s",
            )
            raise

        finally:
            clear_context()
