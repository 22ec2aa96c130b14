"""
config.py

애플리케이션 전역 설정(Configuration) 관리 파일.

이 파일은 .env 환경 변수들을 Pydantic BaseSettings를 통해 로드하여
애플리케이션 전반에서 공통으로 사용하는 설정 값을 제공한다.

주요 설정 항목:
- 데이터베이스 연결 정보
- JWT 서명 키 및 Access / Refresh 만료 정책
- 비밀번호 정책 (길이, 변경 주기)
- 신규 회원 기본 상태
- 로깅 / CORS 허용 도메인

설계 원칙:
- 모든 환경 변수는 이 파일을 통해서만 접근
- 로컬 / 테스트 / 운영 환경을 .env로 분리하여 관리
- 설정 값은 런타임 중 변경되지 않는 불변 객체로 취급 (frozen)

관련 파일:
- market.main               : CORS 및 앱 초기화 시 설정 사용
- market.core.security      : JWT 시크릿 / 만료 설정 사용
- market.core.password_policy : 비밀번호 길이 정책 사용
- market.db.session         : DATABASE_URL 사용

"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

from market.core.enums import MemberStatus


# .env 파일에 정의된 환경 변수를 로드하는 설정 클래스
# extra="ignore" 옵션으로 정의되지 않은 환경 변수는 무시
class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    DATABASE_URL: str = "sqlite:///./market.db"
    TEST_DATABASE_URL: str | None = None

    SECRET_KEY: str
    REFRESH_SECRET_KEY: str  # access 토큰과 분리된 키
    ALGORITHM: str = "HS256"

    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    REFRESH_TOKEN_EXPIRE_DAYS: int = 14

    # 비밀번호 정책
    # - 8자 이상 16자 이하 (영문 / 숫자 / 특수문자 각 1개 이상)
    # - 마지막 변경 후 PASSWORD_EXPIRE_MONTHS 가 지나면 변경 안내
    PASSWORD_MIN_LENGTH: int = 8
    PASSWORD_MAX_LENGTH: int = 16
    PASSWORD_EXPIRE_MONTHS: int = 6

    # 가입 직후 회원 상태 (이메일 인증 기능이 없으므로 ACTIVE)
    DEFAULT_MEMBER_STATUS: MemberStatus = MemberStatus.ACTIVE

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # CORS 허용 도메인 (Next.js 프론트엔드 주소)
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]


# 애플리케이션 전역에서 import하여 사용하는 Settings 인스턴스
# 실행 시 한 번만 생성됨
settings = Settings()
