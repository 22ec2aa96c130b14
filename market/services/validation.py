"""
services/validation.py

요청 필드 검증 함수 모음.

선언형 필드 제약 대신, 요청마다 명시적인 검증 함수를 두고
{필드명: 메시지} 형태의 에러 맵을 돌려준다.
라우터는 맵이 비어 있지 않으면 INVALID_INPUT_VALUE(400)로 응답한다.

- validate_signup          : 회원 가입 요청
- validate_login           : 로그인 요청
- validate_change_password : 비밀번호 변경 요청

비밀번호 강도 검사는 여기서 하지 않는다 (market.core.password_policy 담당).

"""

from email_validator import EmailNotValidError, validate_email

from market.core.errors import AppError, ErrorCode
from market.schemas.auth import ChangePasswordRequest, LoginRequest, SignupRequest


LOGIN_HANDLE_MIN = 4
LOGIN_HANDLE_MAX = 20
EMAIL_MAX = 100
NICKNAME_MAX = 20
DISPLAY_NAME_MAX = 100
PHONE_MAX = 20


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


def check_login_handle_format(login_handle: str | None) -> str | None:
    if _blank(login_handle):
        return "아이디는 필수 입력 값입니다."
    if not LOGIN_HANDLE_MIN <= len(login_handle) <= LOGIN_HANDLE_MAX:
        return f"아이디는 {LOGIN_HANDLE_MIN}자 이상 {LOGIN_HANDLE_MAX}자 이하로 입력해주세요."
    if any(ch.isspace() for ch in login_handle):
        return "아이디에는 공백을 사용할 수 없습니다."
    return None


def check_email_format(email: str | None) -> str | None:
    if _blank(email):
        return "이메일은 필수 입력 값입니다."
    if len(email) > EMAIL_MAX:
        return f"이메일은 {EMAIL_MAX}자 이하로 입력해주세요."
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return "유효한 이메일 형식이 아닙니다."
    return None


def validate_signup(data: SignupRequest) -> dict[str, str]:
    errors: dict[str, str] = {}

    message = check_login_handle_format(data.login_handle)
    if message:
        errors["login_handle"] = message

    if _blank(data.password):
        errors["password"] = "비밀번호는 필수 입력 값입니다."

    message = check_email_format(data.email)
    if message:
        errors["email"] = message

    if _blank(data.display_name):
        errors["display_name"] = "이름은 필수 입력 값입니다."
    elif len(data.display_name) > DISPLAY_NAME_MAX:
        errors["display_name"] = f"이름은 {DISPLAY_NAME_MAX}자 이하로 입력해주세요."

    if _blank(data.nickname):
        errors["nickname"] = "닉네임은 필수 입력 값입니다."
    elif len(data.nickname) > NICKNAME_MAX:
        errors["nickname"] = f"닉네임은 {NICKNAME_MAX}자 이하로 입력해주세요."

    if data.phone is not None and len(data.phone) > PHONE_MAX:
        errors["phone"] = f"전화번호는 {PHONE_MAX}자 이하로 입력해주세요."

    return errors


def validate_login(data: LoginRequest) -> dict[str, str]:
    errors: dict[str, str] = {}
    if _blank(data.login_handle):
        errors["login_handle"] = "아이디는 필수 입력 값입니다."
    if _blank(data.password):
        errors["password"] = "비밀번호는 필수 입력 값입니다."
    return errors


def validate_change_password(data: ChangePasswordRequest) -> dict[str, str]:
    errors: dict[str, str] = {}
    if _blank(data.current_password):
        errors["current_password"] = "현재 비밀번호는 필수 입력 항목입니다."
    if _blank(data.new_password):
        errors["new_password"] = "새 비밀번호는 필수 입력 항목입니다."
    if _blank(data.confirm_password):
        errors["confirm_password"] = "새 비밀번호 확인은 필수 입력 항목입니다."
    return errors


def raise_for_errors(errors: dict[str, str]) -> None:
    if errors:
        raise AppError(ErrorCode.INVALID_INPUT_VALUE, errors=errors)
