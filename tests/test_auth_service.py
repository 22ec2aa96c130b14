"""
AuthService 단위 테스트.
- HTTP 로는 재현하기 어려운 경로(동시 가입 충돌, 저장된 토큰 만료, 만료 토큰 로그아웃)를
  서비스 객체를 직접 호출하여 검증한다.
"""

import datetime

import pytest
from sqlalchemy import func, select

from market.core.errors import AppError, ErrorCode
from market.core.security import TokenProvider
from market.core.config import settings
from market.models.refresh_token import RefreshToken
from market.repositories import RefreshTokenStore
from market.schemas.auth import SignupRequest
from market.services.auth import AuthService

from tests.helpers import DEFAULT_PASSWORD, create_member_in_db


def _request(**overrides) -> SignupRequest:
    data = {
        "login_handle": "alice",
        "password": DEFAULT_PASSWORD,
        "email": "alice@market.com",
        "display_name": "Alice",
        "nickname": "al",
    }
    data.update(overrides)
    return SignupRequest(**data)


def test_concurrent_signup_reports_conflicting_field(db, token_provider):
    service = AuthService(db, token_provider)
    service.signup(_request())

    # 사전 검사를 통과한 뒤 unique 제약에서 충돌하는 상황
    real_exists = service.members.exists_by_login_handle
    calls = []

    def racing_exists(login_handle):
        calls.append(login_handle)
        if len(calls) == 1:
            return False
        return real_exists(login_handle)

    service.members.exists_by_login_handle = racing_exists

    with pytest.raises(AppError) as exc:
        service.signup(_request(email="other@market.com", nickname="other"))

    assert exc.value.error_code == ErrorCode.DUPLICATE_LOGIN_HANDLE
    assert len(calls) == 2


def test_expired_stored_refresh_token_is_removed(db, token_provider):
    member = create_member_in_db(db, login_handle="alice")
    service = AuthService(db, token_provider)
    pair = service.login("alice", DEFAULT_PASSWORD).tokens

    store = RefreshTokenStore(db)
    store.find(member.id).expires_at = datetime.datetime.now(datetime.timezone.utc) - datetime.timedelta(minutes=1)
    db.commit()

    with pytest.raises(AppError) as exc:
        service.refresh(pair.refresh_token)

    assert exc.value.error_code == ErrorCode.TOKEN_EXPIRED
    assert store.find(member.id) is None


def test_logout_accepts_expired_refresh_token(db):
    member = create_member_in_db(db, login_handle="alice")
    past = datetime.datetime.now(datetime.timezone.utc) - datetime.timedelta(days=30)
    stale_provider = TokenProvider.from_settings(settings, clock=lambda: past)
    pair = stale_provider.issue(member.id, member.role.value)

    store = RefreshTokenStore(db)
    store.save(member.id, pair.refresh_token, pair.refresh_expires_at)
    db.commit()

    service = AuthService(db, TokenProvider.from_settings(settings))
    with pytest.raises(AppError) as exc:
        service.refresh(pair.refresh_token)
    assert exc.value.error_code == ErrorCode.TOKEN_EXPIRED

    service.logout(pair.refresh_token)
    assert store.find(member.id) is None


def test_login_unknown_and_wrong_password_raise_same_error(db, token_provider):
    create_member_in_db(db, login_handle="alice")
    service = AuthService(db, token_provider)

    with pytest.raises(AppError) as unknown:
        service.login("nobody", DEFAULT_PASSWORD)
    with pytest.raises(AppError) as wrong:
        service.login("alice", "Wr0ngPass!")

    assert unknown.value.error_code == wrong.value.error_code == ErrorCode.INVALID_CREDENTIALS
    assert unknown.value.to_body() == wrong.value.to_body()


def test_concurrent_login_overwrites_refresh_token_saved_first(db, token_provider):
    member = create_member_in_db(db, login_handle="alice")

    # 다른 로그인 요청이 먼저 행을 만든 상황 (조회 시점에는 아직 없었음)
    db.add(RefreshToken(
        member_id=member.id,
        token="other-request-token",
        expires_at=datetime.datetime.now(datetime.timezone.utc) + datetime.timedelta(days=1),
    ))
    db.commit()

    service = AuthService(db, token_provider)
    real_find = service.refresh_tokens.find
    calls = []

    def racing_find(member_id):
        calls.append(member_id)
        if len(calls) == 1:
            return None
        return real_find(member_id)

    service.refresh_tokens.find = racing_find

    pair = service.login("alice", DEFAULT_PASSWORD).tokens

    db.expire_all()
    stored = RefreshTokenStore(db).find(member.id)
    assert stored.token == pair.refresh_token
    assert db.scalar(select(func.count()).select_from(RefreshToken)) == 1
    assert len(calls) == 2
