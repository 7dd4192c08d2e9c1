import time

from fastapi import Request, Response
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware

SLOW_THRESHOLD_MS = 500
QUIET_PATHS = {"/health"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """HTTP 요청 로깅 + 처리시간 헤더(X-Elapsed-Ms) 미들웨어.

    /health는 DEBUG로만 남기고, 처리시간이 500ms를 넘으면 WARNING으로 기록한다.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        response.headers["X-Elapsed-Ms"] = f"{elapsed_ms:.1f}"

        client_ip = request.client.host if request.client else "unknown"
        line = f"{request.method} {request.url.path} | {client_ip} | {response.status_code} | {elapsed_ms:.0f}ms"

        if request.url.path in QUIET_PATHS:
            logger.debug(line)
        elif elapsed_ms > SLOW_THRESHOLD_MS:
            logger.warning(f"{line} (slow)")
        else:
            logger.info(line)

        return response
