import os

# 설정 로드 전에 테스트용 값 주입 (.env 없이도 실행 가능)
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-access-secret")
os.environ.setdefault("REFRESH_SECRET_KEY", "test-refresh-secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from market.main import app as fastapi_app
from market.core.config import settings
from market.core.deps import get_db, get_token_provider
from market.core.security import TokenProvider
from market.db.base import Base

# ✅ 모델 import (Base.metadata에 테이블 등록)
import market.models  # noqa: F401


TEST_DB_URL = settings.TEST_DATABASE_URL or "sqlite://"

if TEST_DB_URL.startswith("sqlite"):
    # in-memory SQLite 는 연결이 끊기면 사라지므로 하나의 연결을 공유
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
else:
    engine = create_engine(TEST_DB_URL, pool_pre_ping=True)

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(autouse=True)
def setup_test_db():
    """각 테스트마다 스키마 생성/삭제"""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def db():
    """테스트에서 직접 DB 조작할 때 쓰는 세션"""
    session = TestingSessionLocal()
    try:
        yield session
        session.commit()
    finally:
        session.close()


@pytest.fixture()
def token_provider():
    return TokenProvider.from_settings(settings)


@pytest.fixture()
def client(token_provider):
    fastapi_app.dependency_overrides[get_db] = override_get_db
    fastapi_app.dependency_overrides[get_token_provider] = lambda: token_provider
    with TestClient(fastapi_app) as c:
        yield c
    fastapi_app.dependency_overrides.clear()
