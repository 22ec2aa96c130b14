"""
session.py

데이터베이스 엔진 및 세션(Session) 관리 파일.

SQLAlchemy Engine과 SessionLocal을 생성하여
애플리케이션 전반에서 공통으로 사용하는 DB 연결을 관리한다.
FastAPI 의존성(get_db)을 통해 요청 단위로 세션을 생성/종료한다.

관련 파일:
- market.core.config       : DATABASE_URL 설정
- market.core.deps         : get_db 의존성

"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from market.core.config import settings


def _connect_args(url: str) -> dict:
    # SQLite 는 요청 스레드가 바뀌어도 같은 연결을 쓸 수 있어야 함
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


# pool_pre_ping=True:
#   장시간 idle 후 끊어진 DB 커넥션을 자동으로 감지/재연결
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    connect_args=_connect_args(settings.DATABASE_URL),
)

# 요청 단위로 사용할 세션 팩토리
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)
