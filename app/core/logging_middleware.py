import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger(__name__)


def _level_for(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


def _client(request: Request) -> str:
    return request.client.host if request.client else "-"


class LoggingMiddleware(BaseHTTPMiddleware):
    """One log line per request; 4xx are warnings, 5xx errors."""

    async def dispatch(self, request: Request, call_next):
        start = time.monotonic()
        try:
            response = await call_next(request)
        except Exception:
            # unhandled errors become a 500 further out, log them before they leave
            logger.exception(
                "%s %s -> 500 (%.1fms) client=%s",
                request.method,
                request.url.path,
                (time.monotonic() - start) * 1000,
                _client(request),
            )
            raise

        logger.log(
            _level_for(response.status_code),
            "%s %s -> %s (%.1fms) client=%s",
            request.method,
            request.url.path,
            response.status_code,
            (time.monotonic() - start) * 1000,
            _client(request),
        )
        return response
