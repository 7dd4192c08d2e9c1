"""전역 예외 핸들러.

AppException 계열 예외를 잡아 일관된 JSON 응답으로 변환한다.
해석 단계 오류는 어떤 이미지에서 실패했는지(image, position)도 함께 담는다.
main.py에서 app.add_exception_handler()로 등록한다.
"""

from fastapi import Request
from fastapi.responses import JSONResponse
from loguru import logger

from core.exceptions import AppException


def error_body(exc: AppException) -> dict:
    body = {
        "error_code": exc.error_code,
        "message": exc.message,
    }
    filename = getattr(exc, "filename", None)
    if filename is not None:
        body["image"] = filename
        body["position"] = exc.position
    return body


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path} | {exc.error_code} | {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=error_body(exc))
