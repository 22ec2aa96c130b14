"""
member.py

회원(Member) 모델 정의 파일.
상태 / 권한 값은 market.core.enums 에 정의되어 있다.

회원 가입, 로그인, 비밀번호 변경, 관리자 상태 변경 등
모든 인증 흐름의 기준이 되는 핵심 모델이다.

"""

import datetime

from sqlalchemy import DateTime, Enum as SAEnum, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from market.core.enums import MemberStatus, Role
from market.db.base import Base


def _utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


"""
회원(Member) 모델

- login_handle / email / nickname 은 각각 전역 고유 (DB unique 제약이 최종 판정)
- password_hash 에는 bcrypt 해시만 저장
- joined_at 은 가입 시각 (변경 불가)
- last_login_at / password_changed_at 은 로그인 / 비밀번호 변경 시 갱신
- 삭제하지 않고 status 로 생명주기를 관리

"""

class Member(Base):
    __tablename__ = "members"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    login_handle: Mapped[str] = mapped_column(String(20), unique=True, index=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    email: Mapped[str] = mapped_column(String(100), unique=True, index=True, nullable=False)
    display_name: Mapped[str] = mapped_column(String(100), nullable=False)
    nickname: Mapped[str] = mapped_column(String(50), unique=True, index=True, nullable=False)
    phone: Mapped[str | None] = mapped_column(String(20), nullable=True)

    status: Mapped[MemberStatus] = mapped_column(
        SAEnum(MemberStatus, name="member_status"), nullable=False, default=MemberStatus.ACTIVE
    )
    role: Mapped[Role] = mapped_column(SAEnum(Role, name="member_role"), nullable=False, default=Role.USER)

    joined_at: Mapped[datetime.datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=_utcnow)
    last_login_at: Mapped[datetime.datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    password_changed_at: Mapped[datetime.datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
