"""
services/auth.py

인증(Authentication) 비즈니스 로직 모음.

회원 가입, 로그인, 토큰 재발급(회전), 로그아웃, 비밀번호 변경까지
회원 세션의 전체 흐름을 담당한다.
라우터는 필드 검증 후 이 서비스만 호출하고, 결과를 응답으로 감싸기만 한다.

세션 상태 (DB 에 별도 컬럼 없이 데이터 유무로 결정):
- Anonymous     : 가입 전
- Registered    : 가입 완료, 저장된 Refresh Token 없음
- Authenticated : 로그인 완료, Refresh Token 저장됨
- TokenExpired  : Access Token 만료 → refresh 필요
- LoggedOut     : Refresh Token 삭제 → 다시 Registered 와 동일

설계 원칙:
- 실패는 전부 AppError(ErrorCode) 로 발생
- 아이디 없음 / 비밀번호 틀림은 같은 에러(INVALID_CREDENTIALS)로 응답
- 중복 검사는 빠른 실패용, 최종 판정은 DB unique 제약(IntegrityError)
- 재발급 시 Refresh Token 을 회전하여 이전 토큰 재사용을 탐지
- 트랜잭션 commit / rollback 은 이 서비스에서 수행

관련 파일:
- market.core.security           : 해시 / 토큰 발급·검증
- market.core.password_policy    : 비밀번호 정책
- market.repositories.*          : 회원 / Refresh Token 저장소
- market.routers.auth            : 인증 API

"""

import datetime
import hmac
from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from market.core.config import settings
from market.core.errors import AppError, ErrorCode
from market.core.logging_config import get_logger
from market.core.password_policy import check_password
from market.core.security import (
    TokenPair,
    TokenProvider,
    dummy_verify,
    get_password_hash,
    verify_password,
)
from market.models.member import Member, Role
from market.repositories import MemberRepository, RefreshTokenStore
from market.schemas.auth import SignupRequest


log = get_logger(__name__)


def _utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


def _as_utc(value: datetime.datetime) -> datetime.datetime:
    # SQLite 는 tzinfo 없이 돌려주므로 UTC 로 간주
    if value.tzinfo is None:
        return value.replace(tzinfo=datetime.timezone.utc)
    return value


@dataclass(frozen=True)
class LoginResult:
    tokens: TokenPair
    member: Member


class AuthService:
    def __init__(self, db: Session, tokens: TokenProvider):
        self.db = db
        self.tokens = tokens
        self.members = MemberRepository(db)
        self.refresh_tokens = RefreshTokenStore(db)

    """
    회원 가입

    - 아이디 → 이메일 → 닉네임 순으로 중복 검사 (각각 다른 에러 코드)
    - 비밀번호 정책 검사 후 bcrypt 해시로 저장
    - 기본 상태는 settings.DEFAULT_MEMBER_STATUS, 권한은 USER
    - 동시 가입으로 사전 검사를 통과해도 DB unique 제약에서 걸리면
      다시 검사하여 어느 필드가 충돌했는지 알려준다
    - 가입만 하고 토큰은 발급하지 않음

    """

    def _raise_if_duplicate(self, data: SignupRequest) -> None:
        if self.members.exists_by_login_handle(data.login_handle):
            raise AppError(ErrorCode.DUPLICATE_LOGIN_HANDLE)
        if self.members.exists_by_email(data.email):
            raise AppError(ErrorCode.DUPLICATE_EMAIL)
        if self.members.exists_by_nickname(data.nickname):
            raise AppError(ErrorCode.DUPLICATE_NICKNAME)

    def signup(self, data: SignupRequest) -> Member:
        try:
            self._raise_if_duplicate(data)
        except AppError as e:
            log.warning("signup_rejected", login_handle=data.login_handle, code=e.error_code.code)
            raise

        check_password(data.password)

        now = _utcnow()
        member = Member(
            login_handle=data.login_handle,
            password_hash=get_password_hash(data.password),
            email=data.email,
            display_name=data.display_name,
            nickname=data.nickname,
            phone=data.phone,
            status=settings.DEFAULT_MEMBER_STATUS,
            role=Role.USER,
            joined_at=now,
            password_changed_at=now,
        )

        try:
            self.members.save(member)
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            log.warning("signup_conflict", login_handle=data.login_handle)
            self._raise_if_duplicate(data)
            raise AppError(ErrorCode.DUPLICATE_LOGIN_HANDLE)

        self.db.refresh(member)
        log.info("signup_succeeded", member_id=member.id, login_handle=member.login_handle)
        return member

    """
    로그인

    - 아이디가 없거나 비밀번호가 틀리면 동일하게 INVALID_CREDENTIALS
    - 성공 시 Access / Refresh 토큰 발급
    - 기존 Refresh Token 은 덮어씀 (회원당 1세션)
    - 마지막 로그인 시각 갱신

    """

    def login(self, login_handle: str, password: str) -> LoginResult:
        member = self.members.find_by_login_handle(login_handle)
        if member is None:
            dummy_verify()
            log.warning("login_failed", login_handle=login_handle)
            raise AppError(ErrorCode.INVALID_CREDENTIALS)

        if not verify_password(password, member.password_hash):
            log.warning("login_failed", login_handle=login_handle)
            raise AppError(ErrorCode.INVALID_CREDENTIALS)

        pair = self.tokens.issue(member.id, member.role.value)
        try:
            self.refresh_tokens.save(member.id, pair.refresh_token, pair.refresh_expires_at)
            member.last_login_at = _utcnow()
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(member)
        log.info("login_succeeded", member_id=member.id)
        return LoginResult(tokens=pair, member=member)

    """
    토큰 재발급 (Refresh Token 회전)

    - 서명 / 만료 / 형식 검증
    - 저장된 토큰이 없으면 REFRESH_TOKEN_NOT_FOUND (로그아웃 이후)
    - 저장된 토큰과 다르면 REFRESH_TOKEN_MISMATCH (회전 이후 재사용)
    - 일치하면 새 토큰 쌍을 발급하고 저장된 토큰을 교체
      → 이전 토큰은 만료 전이라도 더 이상 사용할 수 없음

    """

    def refresh(self, refresh_token: str | None) -> TokenPair:
        claims = self.tokens.verify(refresh_token, "refresh")

        member = self.members.find_by_id(claims.member_id)
        if member is None:
            log.warning("refresh_failed", member_id=claims.member_id, reason="member_not_found")
            raise AppError(ErrorCode.INVALID_REFRESH_TOKEN)

        stored = self.refresh_tokens.find(member.id)
        if stored is None:
            log.warning("refresh_failed", member_id=member.id, reason="not_found")
            raise AppError(ErrorCode.REFRESH_TOKEN_NOT_FOUND)

        if not hmac.compare_digest(stored.token.encode(), refresh_token.encode()):
            log.warning("refresh_failed", member_id=member.id, reason="mismatch")
            raise AppError(ErrorCode.REFRESH_TOKEN_MISMATCH)

        if _as_utc(stored.expires_at) <= _utcnow():
            self.refresh_tokens.invalidate(member.id)
            self.db.commit()
            log.warning("refresh_failed", member_id=member.id, reason="expired")
            raise AppError(ErrorCode.TOKEN_EXPIRED)

        pair = self.tokens.issue(member.id, member.role.value)
        try:
            self.refresh_tokens.save(member.id, pair.refresh_token, pair.refresh_expires_at)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        log.info("refresh_succeeded", member_id=member.id)
        return pair

    """
    로그아웃

    - 위조 / 형식 오류 토큰은 거부, 만료는 허용
    - 저장된 토큰과 같을 때만 삭제
    - 이미 로그아웃했거나 회전된 이전 토큰이면 아무것도 하지 않음 (멱등)

    """

    def logout(self, refresh_token: str | None) -> None:
        claims = self.tokens.verify(refresh_token, "refresh", allow_expired=True)

        stored = self.refresh_tokens.find(claims.member_id)
        if stored is None or not hmac.compare_digest(stored.token.encode(), refresh_token.encode()):
            log.info("logout_noop", member_id=claims.member_id)
            return

        self.refresh_tokens.invalidate(claims.member_id)
        self.db.commit()
        log.info("logout_succeeded", member_id=claims.member_id)

    """
    비밀번호 변경

    - 현재 비밀번호 확인 (틀리면 INVALID_PASSWORD)
    - 새 비밀번호 / 확인 비밀번호 일치 (다르면 PASSWORD_MISMATCH)
    - 비밀번호 정책 검사
    - 현재 비밀번호와 같은 값으로는 변경 불가
    - 변경 시각 갱신 (기존 세션은 유지)

    """

    def change_password(
        self,
        member_id: int,
        current_password: str,
        new_password: str,
        confirm_password: str,
    ) -> None:
        member = self.members.find_by_id(member_id)
        if member is None:
            raise AppError(ErrorCode.MEMBER_NOT_FOUND)

        if not verify_password(current_password, member.password_hash):
            log.warning("change_password_failed", member_id=member_id, reason="invalid_password")
            raise AppError(ErrorCode.INVALID_PASSWORD)

        if new_password != confirm_password:
            log.warning("change_password_failed", member_id=member_id, reason="mismatch")
            raise AppError(ErrorCode.PASSWORD_MISMATCH)

        check_password(new_password)

        if new_password == current_password:
            raise AppError(ErrorCode.SAME_AS_CURRENT_PASSWORD)

        try:
            member.password_hash = get_password_hash(new_password)
            member.password_changed_at = _utcnow()
            self.members.save(member)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        log.info("change_password_succeeded", member_id=member_id)
