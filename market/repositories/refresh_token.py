"""
repositories/refresh_token.py

회원별 Refresh Token 저장소.

- save       : 기존 토큰을 덮어씀 (마지막 저장이 유효, 회원당 1세션)
               동시 insert 충돌은 savepoint 롤백 후 덮어쓰기로 처리
- find       : 회원의 현재 토큰 조회 (없으면 None)
- invalidate : 회원의 토큰 삭제 (없어도 오류 아님)

commit 은 호출 측(서비스)에서 수행한다.

"""

import datetime

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from market.models.refresh_token import RefreshToken


class RefreshTokenStore:
    def __init__(self, db: Session):
        self.db = db

    def find(self, member_id: int) -> RefreshToken | None:
        return self.db.scalar(select(RefreshToken).where(RefreshToken.member_id == member_id))

    def save(self, member_id: int, token: str, expires_at: datetime.datetime) -> RefreshToken:
        record = self.find(member_id)
        if record is None:
            record = RefreshToken(member_id=member_id, token=token, expires_at=expires_at)
            try:
                with self.db.begin_nested():
                    self.db.add(record)
                    self.db.flush()
                return record
            except IntegrityError:
                # 동시 로그인으로 다른 요청이 먼저 행을 만든 경우 → 그 행을 덮어씀
                record = self.find(member_id)

        record.token = token
        record.expires_at = expires_at
        record.created_at = datetime.datetime.now(datetime.timezone.utc)
        self.db.flush()
        return record

    def invalidate(self, member_id: int) -> None:
        self.db.execute(delete(RefreshToken).where(RefreshToken.member_id == member_id))
        self.db.flush()
