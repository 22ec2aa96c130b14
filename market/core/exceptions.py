"""
exceptions.py

전역 예외 처리기 등록.

모든 에러 응답은 {"status", "code", "message"} 형태를 가지며,
클라이언트는 HTTP 상태가 아닌 비즈니스 코드(code)로 분기한다.

- AppError               : 카탈로그(ErrorCode)에 정의된 상태/코드/메시지
- RequestValidationError : 요청 바디 형식 오류 → C001 + 필드별 메시지
- HTTPException(404/405) : C007 / C002
- 그 외 예외              : 로그(traceback) 기록 후 C004, 내부 정보는 노출하지 않음

"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from market.core.errors import AppError, ErrorCode
from market.core.logging_config import get_logger


log = get_logger(__name__)

_HTTP_STATUS_TO_ERROR = {
    403: ErrorCode.HANDLE_ACCESS_DENIED,
    404: ErrorCode.RESOURCE_NOT_FOUND,
    405: ErrorCode.METHOD_NOT_ALLOWED,
}


def _field_name(loc: tuple) -> str:
    # ("body", "login_handle") → "login_handle"
    parts = [str(p) for p in loc if p not in ("body", "query", "path")]
    return ".".join(parts) or "body"


def _json(err: AppError, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(status_code=err.http_status, content=err.to_body(), headers=headers)


def register_exception_handlers(app: FastAPI) -> None:

    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError):
        headers = None
        if exc.http_status == 401:
            headers = {"WWW-Authenticate": "Bearer"}
        return _json(exc, headers)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        errors: dict[str, str] = {}
        for error in exc.errors():
            errors.setdefault(_field_name(tuple(error.get("loc", ()))), error.get("msg", "invalid"))
        return _json(AppError(ErrorCode.INVALID_INPUT_VALUE, errors=errors))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        error_code = _HTTP_STATUS_TO_ERROR.get(exc.status_code)
        if error_code is None:
            return JSONResponse(
                status_code=exc.status_code,
                content={"status": exc.status_code, "code": str(exc.status_code), "message": str(exc.detail)},
            )
        return _json(AppError(error_code))

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        log.exception("unhandled_exception", path=request.url.path, method=request.method)
        return _json(AppError(ErrorCode.INTERNAL_SERVER_ERROR))
