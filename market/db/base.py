"""
base.py

SQLAlchemy ORM Base 정의 파일 (SQLAlchemy 2.0 DeclarativeBase).

모든 모델(Member, RefreshToken)은 이 Base 를 상속하며,
테스트의 create_all / drop_all 과 Alembic 마이그레이션 모두
Base.metadata 를 기준으로 동작한다.

관련 파일:
- market.models.*          : 모든 ORM 모델
- alembic/versions         : 마이그레이션

"""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase


# 인덱스 / 제약 이름을 마이그레이션 파일과 맞춤 (ix_members_login_handle 등)
NAMING_CONVENTION = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    metadata = MetaData(naming_convention=NAMING_CONVENTION)
