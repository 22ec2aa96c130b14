"""
security.py

비밀번호 해싱 및 JWT 토큰 발급/검증을 담당하는 보안 유틸리티 모음.

이 파일은 인증(auth) 로직에서 사용하는
저수준(low-level) 보안 기능만을 제공하며,
라우터나 비즈니스 로직은 포함하지 않는다.

주요 기능:
- 비밀번호 해싱 및 검증 (bcrypt)
- Access / Refresh Token 쌍 발급 (TokenProvider.issue)
- 토큰 서명 / 만료 / 형식 검증 및 클레임 추출 (TokenProvider.verify)

설계 원칙:
- Access Token과 Refresh Token은 서로 다른 시크릿으로 서명
- 같은 회원에게 같은 시각에 발급해도 토큰이 항상 달라지도록 jti 포함
- 검증 실패 사유(누락 / 형식 / 알고리즘 / 서명 / 만료)를 구분된 에러 코드로 반환
- 시크릿 / 만료 정책은 Settings 에서 한 번 읽어 TokenProvider 에 주입

관련 파일:
- market.core.config        : JWT 시크릿 키 및 만료 설정
- market.core.deps          : TokenProvider 주입 / Access Token 인증 의존성
- market.services.auth      : 로그인 / 재발급 / 로그아웃

"""

import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Literal

from jose import jwt, ExpiredSignatureError, JWTError
from passlib.context import CryptContext

from market.core.config import Settings
from market.core.errors import AppError, ErrorCode


TokenType = Literal["access", "refresh"]

# bcrypt 기반 비밀번호 해싱 컨텍스트
# deprecated="auto"로 향후 알고리즘 교체 가능하도록 설정
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)


"""
존재하지 않는 계정으로 로그인할 때 호출

- 실제 해시 비교와 같은 비용을 소모하여
  응답 시간으로 아이디 존재 여부를 추측할 수 없게 한다

"""

def dummy_verify() -> None:
    pwd_context.dummy_verify()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class TokenPair:
    access_token: str
    refresh_token: str
    access_expires_at: datetime
    refresh_expires_at: datetime


@dataclass(frozen=True)
class TokenClaims:
    member_id: int
    role: str
    token_type: TokenType
    jti: str
    issued_at: datetime
    expires_at: datetime


class TokenProvider:
    """Access / Refresh 토큰 발급기 겸 검증기."""

    def __init__(
        self,
        *,
        secret_key: str,
        refresh_secret_key: str,
        algorithm: str = "HS256",
        access_ttl: timedelta = timedelta(hours=1),
        refresh_ttl: timedelta = timedelta(days=14),
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._secrets = {"access": secret_key, "refresh": refresh_secret_key}
        self._ttls = {"access": access_ttl, "refresh": refresh_ttl}
        self.algorithm = algorithm
        self._clock = clock

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "TokenProvider":
        return cls(
            secret_key=settings.SECRET_KEY,
            refresh_secret_key=settings.REFRESH_SECRET_KEY,
            algorithm=settings.ALGORITHM,
            access_ttl=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
            refresh_ttl=timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS),
            **kwargs,
        )

    def _create_token(self, *, member_id: int, role: str, token_type: TokenType) -> tuple[str, datetime]:
        issued_at = self._clock()
        expire = issued_at + self._ttls[token_type]
        payload = {
            "sub": str(member_id),
            "role": role,
            "type": token_type,
            "jti": uuid.uuid4().hex,
            "iat": int(issued_at.timestamp()),
            "exp": int(expire.timestamp()),
        }
        token = jwt.encode(payload, self._secrets[token_type], algorithm=self.algorithm)
        return token, expire

    def issue(self, member_id: int, role: str) -> TokenPair:
        access, access_exp = self._create_token(member_id=member_id, role=role, token_type="access")
        refresh, refresh_exp = self._create_token(member_id=member_id, role=role, token_type="refresh")
        return TokenPair(
            access_token=access,
            refresh_token=refresh,
            access_expires_at=access_exp,
            refresh_expires_at=refresh_exp,
        )

    """
    토큰 검증 함수

    - 검사 순서: 누락 → 형식(header/payload 파싱) → 알고리즘 → 서명 → 만료 → 타입
    - 실패 사유별로 다른 ErrorCode 를 가진 AppError 발생
    - allow_expired=True 이면 만료 검사를 생략 (로그아웃에서 사용)

    """

    def verify(self, token: str | None, token_type: TokenType, *, allow_expired: bool = False) -> TokenClaims:
        if not token or not token.strip():
            raise AppError(ErrorCode.TOKEN_MISSING)

        try:
            header = jwt.get_unverified_header(token)
            jwt.get_unverified_claims(token)
        except JWTError:
            raise AppError(ErrorCode.MALFORMED_TOKEN)

        if header.get("alg") != self.algorithm:
            raise AppError(ErrorCode.UNSUPPORTED_TOKEN)

        try:
            payload = jwt.decode(
                token,
                self._secrets[token_type],
                algorithms=[self.algorithm],
                options={"verify_exp": not allow_expired},
            )
        except ExpiredSignatureError:
            raise AppError(ErrorCode.TOKEN_EXPIRED)
        except JWTError:
            raise AppError(ErrorCode.TOKEN_SIGNATURE_INVALID)

        if payload.get("type") != token_type:
            raise AppError(ErrorCode.UNSUPPORTED_TOKEN)

        try:
            return TokenClaims(
                member_id=int(payload["sub"]),
                role=payload.get("role", ""),
                token_type=token_type,
                jti=payload["jti"],
                issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            )
        except (KeyError, TypeError, ValueError):
            raise AppError(ErrorCode.MALFORMED_TOKEN)
