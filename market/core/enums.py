"""
enums.py

회원 상태(MemberStatus) / 권한(Role) 정의 파일.

ORM 모델, 설정(config), 요청 스키마가 함께 쓰는 값이므로
DB 의존성이 없는 이 파일에 둔다.

관련 파일:
- market.models.member     : 컬럼 타입으로 사용
- market.core.config       : 신규 회원 기본 상태
- market.core.deps         : 권한 등급 비교

"""

from enum import Enum


"""
회원 상태(MemberStatus) 정의

- ACTIVE    : 정상 활동 회원
- INACTIVE  : 장기간 미접속 회원
- SUSPENDED : 이메일 인증 전 / 일시 정지 회원
- BANNED    : 차단된 회원 (다른 상태로 되돌릴 수 없음)

"""

class MemberStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    SUSPENDED = "SUSPENDED"
    BANNED = "BANNED"


"""
회원 권한(Role) 정의

- USER  : 일반 회원
- ADMIN : 관리자
- BOSS  : 최고 관리자

"""

class Role(str, Enum):
    USER = "USER"
    ADMIN = "ADMIN"
    BOSS = "BOSS"
