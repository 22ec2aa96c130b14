"""
로그인 / 내 정보 통합 테스트.
- 아이디 없음 / 비밀번호 틀림이 구분되지 않는지,
  로그인 성공 시 토큰 쌍과 마지막 로그인 시각, Access Token 인증을 검증한다.
"""

from tests.helpers import auth_header, get_member, signup_payload


def test_login_failure_does_not_reveal_which_half_was_wrong(client):
    payload = signup_payload(login_handle="alice", password="Passw0rd!")
    assert client.post("/api/auth/signup", json=payload).status_code == 201

    wrong_password = client.post("/api/auth/login", json={"login_handle": "alice", "password": "wrong"})
    unknown_handle = client.post("/api/auth/login", json={"login_handle": "nobody", "password": "Passw0rd!"})

    assert wrong_password.status_code == 401
    assert unknown_handle.status_code == 401
    assert wrong_password.json() == unknown_handle.json()
    assert wrong_password.json()["code"] == "M005"


def test_login_success_issues_tokens_and_updates_last_login(client, db):
    payload = signup_payload(login_handle="alice", password="Passw0rd!")
    assert client.post("/api/auth/signup", json=payload).status_code == 201

    r = client.post("/api/auth/login", json={"login_handle": "alice", "password": "Passw0rd!"})
    assert r.status_code == 200, r.text
    data = r.json()["data"]
    assert data["access_token"]
    assert data["refresh_token"]
    assert data["token_type"] == "bearer"
    assert data["member"]["login_handle"] == "alice"
    assert data["member"]["role"] == "USER"

    member = get_member(db, "alice")
    assert member.last_login_at is not None

    me = client.get("/api/auth/me", headers=auth_header(data["access_token"]))
    assert me.status_code == 200, me.text
    assert me.json()["data"]["member_id"] == member.id


def test_login_blank_fields(client):
    r = client.post("/api/auth/login", json={"login_handle": "", "password": ""})
    assert r.status_code == 400
    assert set(r.json()["errors"]) == {"login_handle", "password"}


def test_me_requires_valid_access_token(client):
    missing = client.get("/api/auth/me")
    assert missing.status_code == 401
    assert missing.json()["code"] == "T009"

    malformed = client.get("/api/auth/me", headers=auth_header("garbage"))
    assert malformed.status_code == 401
    assert malformed.json()["code"] == "T007"


def test_refresh_token_is_rejected_as_bearer(client):
    payload = signup_payload()
    assert client.post("/api/auth/signup", json=payload).status_code == 201
    login = client.post(
        "/api/auth/login",
        json={"login_handle": payload["login_handle"], "password": payload["password"]},
    )
    refresh_token = login.json()["data"]["refresh_token"]

    r = client.get("/api/auth/me", headers=auth_header(refresh_token))
    assert r.status_code == 401
    assert r.json()["code"] == "T008"
