"""
password_policy.py

비밀번호 강도 정책 검증.

- 길이: PASSWORD_MIN_LENGTH 이상 PASSWORD_MAX_LENGTH 이하 (기본 8 ~ 16)
- 영문자 / 숫자 / 특수문자를 각각 1개 이상 포함

가입 / 비밀번호 변경 양쪽에서 같은 규칙을 사용한다.
실패 시 어떤 규칙을 어겼는지 구분된 사유(PasswordViolation)를 돌려주어
프론트엔드가 정확한 안내 문구를 보여줄 수 있게 한다.

"""

import string
from enum import Enum

from market.core.config import settings
from market.core.errors import AppError, ErrorCode


SPECIAL_CHARACTERS = frozenset("!@#$%^&*()_+-=[]{};':\"\\|,.<>/?")
_LETTERS = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)


class PasswordViolation(str, Enum):
    BLANK = "BLANK"
    TOO_SHORT = "TOO_SHORT"
    TOO_LONG = "TOO_LONG"
    MISSING_LETTER = "MISSING_LETTER"
    MISSING_DIGIT = "MISSING_DIGIT"
    MISSING_SPECIAL = "MISSING_SPECIAL"


VIOLATION_MESSAGES = {
    PasswordViolation.BLANK: "비밀번호는 필수 입력 값입니다.",
    PasswordViolation.TOO_SHORT: "비밀번호는 {min}자 이상이어야 합니다.",
    PasswordViolation.TOO_LONG: "비밀번호는 {max}자 이하여야 합니다.",
    PasswordViolation.MISSING_LETTER: "비밀번호에 영문자가 1개 이상 포함되어야 합니다.",
    PasswordViolation.MISSING_DIGIT: "비밀번호에 숫자가 1개 이상 포함되어야 합니다.",
    PasswordViolation.MISSING_SPECIAL: "비밀번호에 특수문자가 1개 이상 포함되어야 합니다.",
}


def validate_password(
    candidate: str | None,
    *,
    min_length: int | None = None,
    max_length: int | None = None,
) -> PasswordViolation | None:
    """정책을 만족하면 None, 아니면 처음 발견한 위반 사유를 반환한다."""
    if min_length is None:
        min_length = settings.PASSWORD_MIN_LENGTH
    if max_length is None:
        max_length = settings.PASSWORD_MAX_LENGTH

    if not candidate or not candidate.strip():
        return PasswordViolation.BLANK
    if len(candidate) < min_length:
        return PasswordViolation.TOO_SHORT
    if len(candidate) > max_length:
        return PasswordViolation.TOO_LONG

    chars = set(candidate)
    if not chars & _LETTERS:
        return PasswordViolation.MISSING_LETTER
    if not chars & _DIGITS:
        return PasswordViolation.MISSING_DIGIT
    if not chars & SPECIAL_CHARACTERS:
        return PasswordViolation.MISSING_SPECIAL
    return None


def violation_message(violation: PasswordViolation) -> str:
    return VIOLATION_MESSAGES[violation].format(
        min=settings.PASSWORD_MIN_LENGTH,
        max=settings.PASSWORD_MAX_LENGTH,
    )


def check_password(candidate: str | None) -> None:
    violation = validate_password(candidate)
    if violation is not None:
        raise AppError(
            ErrorCode.PASSWORD_POLICY_VIOLATION,
            violation_message(violation),
            extra={"reason": violation.value},
        )
