# tests/helpers.py
import uuid

from sqlalchemy import select
from sqlalchemy.orm import Session

from market.core.security import get_password_hash
from market.models.member import Member, MemberStatus, Role


DEFAULT_PASSWORD = "Passw0rd!"


def auth_header(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def signup_payload(**overrides) -> dict:
    suffix = uuid.uuid4().hex[:6]
    payload = {
        "login_handle": f"user_{suffix}",
        "password": DEFAULT_PASSWORD,
        "email": f"user_{suffix}@market.com",
        "display_name": "테스트유저",
        "nickname": f"nick_{suffix}",
        "phone": "010-1234-5678",
    }
    payload.update(overrides)
    return payload


def signup_and_login(client, **overrides) -> dict:
    """
    회원가입 → 로그인 후 (payload, 토큰 응답) 반환
    """
    payload = signup_payload(**overrides)
    reg = client.post("/api/auth/signup", json=payload)
    assert reg.status_code == 201, reg.text

    login = client.post(
        "/api/auth/login",
        json={"login_handle": payload["login_handle"], "password": payload["password"]},
    )
    assert login.status_code == 200, login.text
    return {
        "payload": payload,
        "member_id": reg.json()["data"]["member_id"],
        "access_token": login.json()["data"]["access_token"],
        "refresh_token": login.json()["data"]["refresh_token"],
    }


def create_member_in_db(
    db: Session,
    *,
    login_handle: str,
    password: str = DEFAULT_PASSWORD,
    role: Role = Role.USER,
    status: MemberStatus = MemberStatus.ACTIVE,
) -> Member:
    member = Member(
        login_handle=login_handle,
        password_hash=get_password_hash(password),
        email=f"{login_handle}@market.com",
        display_name=login_handle.upper(),
        nickname=f"{login_handle}_nick",
        role=role,
        status=status,
    )
    db.add(member)
    db.commit()
    db.refresh(member)
    return member


def get_member(db: Session, login_handle: str) -> Member:
    # 요청 세션이 commit 한 최신 값을 읽기 위해 캐시를 비움
    db.expire_all()
    return db.scalar(select(Member).where(Member.login_handle == login_handle))
