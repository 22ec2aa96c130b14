"""
main.py

FastAPI 애플리케이션 진입점(Entry Point).

이 파일은 서버 실행 시 가장 먼저 로드되며,
애플리케이션 전반의 설정과 라우터 등록을 담당한다.

주요 역할:
- 로깅 설정 (structlog)
- FastAPI 앱 인스턴스 생성
- CORS 미들웨어 설정 (Next.js 프론트엔드)
- 전역 예외 처리기 등록 (에러 카탈로그 기반 응답)
- 각 도메인별 라우터(auth, members, admin) 등록
- 헬스 체크 및 DB 연결 상태 확인용 엔드포인트 제공

설계 원칙:
- 비즈니스 로직은 포함하지 않고 설정/조립 역할만 수행
- 실제 기능은 routers / services 계층에 위임

관련 파일:
- market.core.config        : 환경 변수 및 설정 로드
- market.core.exceptions    : 전역 예외 처리기
- market.routers.*          : 기능별 API 라우터

"""

from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session
from sqlalchemy import text

from market.core.config import settings
from market.core.deps import get_db
from market.core.exceptions import register_exception_handlers
from market.core.logging_config import configure_logging
from market.routers import auth, members, admin

configure_logging()

app = FastAPI(title="Neighborhood Market Backend")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(auth.router)
app.include_router(members.router)
app.include_router(admin.router)

"""
서버 헬스 체크 엔드포인트

- 애플리케이션 프로세스가 정상 동작 중인지 확인

"""
@app.get("/health")
def health():
    return {"status": "ok"}

"""
데이터베이스 연결 상태 확인 엔드포인트

- 서버는 살아 있으나 DB가 죽은 상황을 분리해서 감지

"""
@app.get("/db-ping")
def db_ping(db: Session = Depends(get_db)):
    value = db.execute(text("SELECT 1")).scalar_one()
    return {"db": "ok", "value": value}
