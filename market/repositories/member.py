"""
repositories/member.py

회원(Member) 저장소.

인증 서비스가 사용하는 회원 조회/저장 연산만 제공한다.
각 조회는 unique 컬럼 기준의 단건 조회이며,
save() 는 신규 / 수정 모두 처리한다.

NOTE:
- save() 는 flush 까지만 수행하여 unique 제약 위반(IntegrityError)을 즉시 드러낸다
- commit / rollback 은 호출 측(서비스)에서 수행

"""

from sqlalchemy import exists, select
from sqlalchemy.orm import Session

from market.models.member import Member


class MemberRepository:
    def __init__(self, db: Session):
        self.db = db

    def exists_by_login_handle(self, login_handle: str) -> bool:
        return bool(self.db.scalar(select(exists().where(Member.login_handle == login_handle))))

    def exists_by_email(self, email: str) -> bool:
        return bool(self.db.scalar(select(exists().where(Member.email == email))))

    def exists_by_nickname(self, nickname: str) -> bool:
        return bool(self.db.scalar(select(exists().where(Member.nickname == nickname))))

    def find_by_login_handle(self, login_handle: str) -> Member | None:
        return self.db.scalar(select(Member).where(Member.login_handle == login_handle))

    def find_by_id(self, member_id: int) -> Member | None:
        return self.db.get(Member, member_id)

    def save(self, member: Member) -> Member:
        self.db.add(member)
        self.db.flush()
        return member
