"""
errors.py

애플리케이션 공통 에러 카탈로그 및 에러 타입 정의 파일.

모든 실패는 (HTTP 상태, 비즈니스 코드, 메시지) 3요소를 가진
ErrorCode 항목 하나로 표현되며, 서비스 계층은 AppError 하나만 발생시킨다.
에러 종류마다 예외 클래스를 따로 만들지 않고 error_code 로 분기한다.

코드 체계:
- Cxxx : 공통 (입력값, 권한, 서버 오류)
- Mxxx : 회원 (중복, 자격 증명, 비밀번호)
- Txxx : 토큰 (만료, 위조, 형식, 불일치)

관련 파일:
- market.core.exceptions   : AppError → JSON 응답 변환
- market.services.*        : 비즈니스 규칙 위반 시 AppError 발생

"""

from enum import Enum
from typing import Any

from starlette import status


class ErrorCode(Enum):
    # Common
    INVALID_INPUT_VALUE = (status.HTTP_400_BAD_REQUEST, "C001", "유효하지 않은 입력 값입니다.")
    METHOD_NOT_ALLOWED = (status.HTTP_405_METHOD_NOT_ALLOWED, "C002", "허용되지 않은 HTTP 메서드입니다.")
    HANDLE_ACCESS_DENIED = (status.HTTP_403_FORBIDDEN, "C003", "접근 권한이 없습니다.")
    INTERNAL_SERVER_ERROR = (status.HTTP_500_INTERNAL_SERVER_ERROR, "C004", "서버 내부 오류가 발생했습니다.")
    RESOURCE_NOT_FOUND = (status.HTTP_404_NOT_FOUND, "C007", "요청한 리소스를 찾을 수 없습니다.")

    # Member
    MEMBER_NOT_FOUND = (status.HTTP_404_NOT_FOUND, "M001", "사용자를 찾을 수 없습니다.")
    DUPLICATE_LOGIN_HANDLE = (status.HTTP_409_CONFLICT, "M002", "이미 사용 중인 ID입니다.")
    DUPLICATE_NICKNAME = (status.HTTP_409_CONFLICT, "M003", "이미 사용 중인 닉네임 입니다.")
    DUPLICATE_EMAIL = (status.HTTP_409_CONFLICT, "M004", "이미 등록되어 있는 이메일입니다.")
    INVALID_CREDENTIALS = (status.HTTP_401_UNAUTHORIZED, "M005", "아이디 또는 비밀번호가 일치하지 않습니다.")
    PASSWORD_MISMATCH = (status.HTTP_400_BAD_REQUEST, "M006", "비밀번호와 확인 비밀번호가 일치하지 않습니다.")
    INVALID_PASSWORD = (status.HTTP_400_BAD_REQUEST, "M008", "현재 비밀번호가 일치하지 않습니다.")
    PASSWORD_POLICY_VIOLATION = (status.HTTP_400_BAD_REQUEST, "M009", "비밀번호 정책을 만족하지 않습니다.")
    SAME_AS_CURRENT_PASSWORD = (status.HTTP_400_BAD_REQUEST, "M010", "새 비밀번호는 현재 비밀번호와 달라야 합니다.")
    MEMBER_STATUS_LOCKED = (status.HTTP_409_CONFLICT, "M011", "차단된 회원의 상태는 변경할 수 없습니다.")

    # Token
    INVALID_ACCESS_TOKEN = (status.HTTP_401_UNAUTHORIZED, "T001", "유효하지 않은 Access Token입니다.")
    INVALID_REFRESH_TOKEN = (status.HTTP_401_UNAUTHORIZED, "T002", "유효하지 않은 Refresh Token입니다.")
    REFRESH_TOKEN_NOT_FOUND = (status.HTTP_401_UNAUTHORIZED, "T003", "Refresh Token을 찾을 수 없습니다.")
    REFRESH_TOKEN_MISMATCH = (status.HTTP_401_UNAUTHORIZED, "T004", "저장된 Refresh Token과 일치하지 않습니다.")
    TOKEN_EXPIRED = (status.HTTP_401_UNAUTHORIZED, "T005", "토큰이 만료되었습니다.")
    UNSUPPORTED_TOKEN = (status.HTTP_401_UNAUTHORIZED, "T006", "지원되지 않는 토큰입니다.")
    MALFORMED_TOKEN = (status.HTTP_401_UNAUTHORIZED, "T007", "잘못된 형식의 토큰입니다.")
    TOKEN_SIGNATURE_INVALID = (status.HTTP_401_UNAUTHORIZED, "T008", "토큰 서명이 유효하지 않습니다.")
    TOKEN_MISSING = (status.HTTP_401_UNAUTHORIZED, "T009", "토큰이 누락되었습니다.")

    def __init__(self, http_status: int, code: str, message: str):
        self.http_status = http_status
        self.code = code
        self.message = message


"""
애플리케이션 공통 예외

- error_code : ErrorCode 카탈로그 항목 (응답의 status / code / message 결정)
- detail     : 기본 메시지를 대신할 구체적인 메시지 (선택)
- errors     : 필드별 검증 실패 메시지 {field: message} (선택)
- extra      : 응답 바디에 그대로 합쳐질 추가 정보 (예: 비밀번호 정책 위반 사유)

"""

class AppError(Exception):
    def __init__(
        self,
        error_code: ErrorCode,
        detail: str | None = None,
        *,
        errors: dict[str, str] | None = None,
        extra: dict[str, Any] | None = None,
    ):
        self.error_code = error_code
        self.message = detail or error_code.message
        self.errors = errors
        self.extra = extra or {}
        super().__init__(self.message)

    @property
    def http_status(self) -> int:
        return self.error_code.http_status

    def to_body(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "status": self.error_code.http_status,
            "code": self.error_code.code,
            "message": self.message,
        }
        if self.errors:
            body["errors"] = self.errors
        body.update(self.extra)
        return body

    def __repr__(self) -> str:
        return f"AppError({self.error_code.name}, {self.message!r})"
