"""
비밀번호 정책 단위 테스트.
- 최소 길이(8) 경계, 최대 길이(16) 경계,
  문자 종류별 누락 사유가 서로 구분되는지 검증한다.
"""

import pytest

from market.core.errors import AppError, ErrorCode
from market.core.password_policy import PasswordViolation, check_password, validate_password


def test_exact_minimum_length_with_all_classes_passes():
    assert validate_password("Abcde1!x") is None
    assert len("Abcde1!x") == 8


def test_seven_characters_is_too_short():
    assert validate_password("Abcd1!x") == PasswordViolation.TOO_SHORT


def test_exact_maximum_length_passes_and_one_more_fails():
    assert validate_password("Abcdefghij12345!") is None
    assert validate_password("Abcdefghij123456!") == PasswordViolation.TOO_LONG


@pytest.mark.parametrize(
    "candidate, violation",
    [
        ("12345678!", PasswordViolation.MISSING_LETTER),
        ("Abcdefgh!", PasswordViolation.MISSING_DIGIT),
        ("Abcdefgh1", PasswordViolation.MISSING_SPECIAL),
        ("", PasswordViolation.BLANK),
        ("        ", PasswordViolation.BLANK),
        (None, PasswordViolation.BLANK),
    ],
)
def test_each_missing_class_has_its_own_reason(candidate, violation):
    assert validate_password(candidate) == violation


def test_check_password_raises_with_reason():
    with pytest.raises(AppError) as exc_info:
        check_password("Abcdefgh1")

    err = exc_info.value
    assert err.error_code is ErrorCode.PASSWORD_POLICY_VIOLATION
    body = err.to_body()
    assert body["code"] == "M009"
    assert body["reason"] == "MISSING_SPECIAL"


def test_check_password_accepts_valid_password():
    check_password("Passw0rd!")


def test_explicit_length_bounds_override_settings():
    assert validate_password("Ab1!", min_length=0, max_length=4) is None
    assert validate_password("Ab1!x", min_length=0, max_length=4) == PasswordViolation.TOO_LONG
