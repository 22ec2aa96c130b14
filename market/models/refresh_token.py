"""
refresh_token.py

회원별 현재 유효한 Refresh Token 저장 모델.

- 회원당 최대 1개의 행만 존재 (member_id unique)
- 로그인 / 재발급 시 덮어쓰기(회전), 로그아웃 시 삭제
- 다른 기기에서 로그인하면 이전 기기의 세션은 끊어진다

"""

import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from market.db.base import Base
from market.models.member import _utcnow


class RefreshToken(Base):
    __tablename__ = "refresh_tokens"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    member_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("members.id", ondelete="CASCADE"), unique=True, index=True, nullable=False
    )
    token: Mapped[str] = mapped_column(String(512), nullable=False)
    expires_at: Mapped[datetime.datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    created_at: Mapped[datetime.datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=_utcnow)
