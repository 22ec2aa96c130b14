"""
회원 부가 API 테스트.
- 아이디 / 이메일 / 닉네임 사용 가능 여부
- 비밀번호 변경 주기 만료 여부
"""

import datetime

from market.models.member import Member
from market.services.member import _add_months, is_password_expired

from tests.helpers import auth_header, get_member, signup_and_login, signup_payload


def test_availability_checks(client):
    payload = signup_payload()
    assert client.post("/api/auth/signup", json=payload).status_code == 201

    r = client.get("/api/members/check-login-handle", params={"login_handle": payload["login_handle"]})
    assert r.status_code == 200
    assert r.json()["data"]["is_available"] is False

    r = client.get("/api/members/check-login-handle", params={"login_handle": "freshone"})
    assert r.json()["data"]["is_available"] is True

    r = client.get("/api/members/check-email", params={"email": payload["email"]})
    assert r.json()["data"]["is_available"] is False

    r = client.get("/api/members/check-email", params={"email": "nobody@market.com"})
    assert r.json()["data"]["is_available"] is True

    r = client.get("/api/members/check-nickname", params={"nickname": payload["nickname"]})
    assert r.json()["data"]["is_available"] is False

    r = client.get("/api/members/check-nickname", params={"nickname": "빈닉네임"})
    assert r.json()["data"]["is_available"] is True


def test_availability_rejects_bad_input(client):
    r = client.get("/api/members/check-email", params={"email": "not-an-email"})
    assert r.status_code == 400
    assert "email" in r.json()["errors"]

    r = client.get("/api/members/check-login-handle", params={"login_handle": "ab"})
    assert r.status_code == 400
    assert "login_handle" in r.json()["errors"]

    r = client.get("/api/members/check-nickname")
    assert r.status_code == 400
    assert "nickname" in r.json()["errors"]


def test_password_expired_flag(client, db):
    session = signup_and_login(client)
    headers = auth_header(session["access_token"])

    r = client.get("/api/members/me/password-expired", headers=headers)
    assert r.status_code == 200
    assert r.json()["data"]["expired"] is False

    member = get_member(db, session["payload"]["login_handle"])
    member.password_changed_at = datetime.datetime.now(datetime.timezone.utc) - datetime.timedelta(days=7 * 31)
    db.commit()

    r = client.get("/api/members/me/password-expired", headers=headers)
    assert r.json()["data"]["expired"] is True


def test_password_never_changed_counts_as_expired():
    assert is_password_expired(Member(password_changed_at=None)) is True


def test_add_months_clamps_to_month_end():
    start = datetime.datetime(2024, 8, 31, tzinfo=datetime.timezone.utc)
    assert _add_months(start, 6) == datetime.datetime(2025, 2, 28, tzinfo=datetime.timezone.utc)
