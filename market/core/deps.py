from functools import lru_cache
from typing import Generator

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from market.core.config import settings
from market.core.errors import AppError, ErrorCode
from market.core.security import TokenProvider
from market.db.session import SessionLocal
from market.models.member import Member, Role
from market.repositories import MemberRepository
from market.services.auth import AuthService

# Swagger Authorize에서 "Bearer 토큰" 입력받는 스키마
bearer_scheme = HTTPBearer(auto_error=False)


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# 설정에서 한 번만 만들어 모든 요청이 공유 (테스트에서는 dependency_overrides 로 교체)
@lru_cache
def get_token_provider() -> TokenProvider:
    return TokenProvider.from_settings(settings)


def get_auth_service(
    db: Session = Depends(get_db),
    tokens: TokenProvider = Depends(get_token_provider),
) -> AuthService:
    return AuthService(db, tokens)


def get_current_member(
    cred: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
    tokens: TokenProvider = Depends(get_token_provider),
) -> Member:
    if cred is None:
        raise AppError(ErrorCode.TOKEN_MISSING)

    # access 토큰만 허용 (refresh 토큰은 서명 키가 달라 여기서 걸림)
    claims = tokens.verify(cred.credentials, "access")

    member = MemberRepository(db).find_by_id(claims.member_id)
    if member is None:
        raise AppError(ErrorCode.INVALID_ACCESS_TOKEN)

    return member

ROLE_LEVEL = {
    Role.USER: 0,
    Role.ADMIN: 1,
    Role.BOSS: 2,
}

def require_min_role(min_role: Role):
    def _checker(current_member: Member = Depends(get_current_member)) -> Member:
        if ROLE_LEVEL[current_member.role] < ROLE_LEVEL[min_role]:
            raise AppError(ErrorCode.HANDLE_ACCESS_DENIED)
        return current_member
    return _checker

get_current_admin = require_min_role(Role.ADMIN)
