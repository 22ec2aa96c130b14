"""
관리자 회원 상태 변경 테스트.
- ADMIN 이 USER 상태 변경 → 200
- BANNED 회원은 이후 어떤 상태로도 변경 불가 (409)
- 일반 회원 / 자기 자신 / 같은 등급 대상은 403
"""

from market.models.member import MemberStatus, Role

from tests.helpers import DEFAULT_PASSWORD, auth_header, create_member_in_db, get_member


def _login(client, login_handle):
    r = client.post("/api/auth/login", json={"login_handle": login_handle, "password": DEFAULT_PASSWORD})
    assert r.status_code == 200, r.text
    return r.json()["data"]["access_token"]


def _set_status(client, token, member_id, new_status):
    return client.patch(
        f"/api/admin/members/{member_id}/status",
        headers=auth_header(token),
        json={"status": new_status},
    )


def test_admin_changes_member_status(client, db):
    create_member_in_db(db, login_handle="admin1", role=Role.ADMIN)
    target = create_member_in_db(db, login_handle="user1")
    target_id = target.id
    token = _login(client, "admin1")

    r = _set_status(client, token, target_id, "SUSPENDED")
    assert r.status_code == 200, r.text
    assert r.json()["data"]["status"] == "SUSPENDED"
    assert get_member(db, "user1").status == MemberStatus.SUSPENDED

    r = _set_status(client, token, target_id, "SUSPENDED")
    assert r.status_code == 400
    assert r.json()["code"] == "C001"


def test_banned_is_terminal(client, db):
    create_member_in_db(db, login_handle="admin1", role=Role.ADMIN)
    target_id = create_member_in_db(db, login_handle="user1").id
    token = _login(client, "admin1")

    assert _set_status(client, token, target_id, "BANNED").status_code == 200

    r = _set_status(client, token, target_id, "ACTIVE")
    assert r.status_code == 409
    assert r.json()["code"] == "M011"
    assert get_member(db, "user1").status == MemberStatus.BANNED


def test_status_change_permissions(client, db):
    admin_id = create_member_in_db(db, login_handle="admin1", role=Role.ADMIN).id
    other_admin_id = create_member_in_db(db, login_handle="admin2", role=Role.ADMIN).id
    user_id = create_member_in_db(db, login_handle="user1").id
    create_member_in_db(db, login_handle="user2")

    user_token = _login(client, "user2")
    r = _set_status(client, user_token, user_id, "SUSPENDED")
    assert r.status_code == 403
    assert r.json()["code"] == "C003"

    admin_token = _login(client, "admin1")
    assert _set_status(client, admin_token, admin_id, "INACTIVE").status_code == 403
    assert _set_status(client, admin_token, other_admin_id, "INACTIVE").status_code == 403


def test_status_change_unknown_member(client, db):
    create_member_in_db(db, login_handle="admin1", role=Role.ADMIN)
    token = _login(client, "admin1")

    r = _set_status(client, token, 9999, "SUSPENDED")
    assert r.status_code == 404
    assert r.json()["code"] == "M001"


def test_status_change_rejects_unknown_status(client, db):
    create_member_in_db(db, login_handle="admin1", role=Role.ADMIN)
    target_id = create_member_in_db(db, login_handle="user1").id
    token = _login(client, "admin1")

    r = _set_status(client, token, target_id, "DELETED")
    assert r.status_code == 400
    assert "status" in r.json()["errors"]
