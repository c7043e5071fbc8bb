from flatshare.utils.roles import PERMISSION_ADMIN, PERMISSION_MEMBER


def test_create_and_fetch_group(client, make_user, auth_headers):
    user = make_user()
    headers = auth_headers(user)

    assert client.get("/groups/my", headers=headers).status_code == 204

    resp = client.post("/groups", json={"name": "Flat 3B"}, headers=headers)
    assert resp.status_code == 201
    group = resp.get_json()["group"]
    assert len(group["join_code"]) == 6
    assert group["members"][0]["permission"] == PERMISSION_ADMIN

    mine = client.get("/groups/my", headers=headers)
    assert mine.status_code == 200
    assert mine.get_json()["group"]["id"] == group["id"]


def test_join_by_code(client, make_group, make_user, auth_headers):
    group, _ = make_group(1)
    joiner = make_user()
    headers = auth_headers(joiner)

    lookup = client.get(f"/groups/code/{group.join_code.lower()}", headers=headers)
    assert lookup.get_json()["group"]["name"] == group.name

    resp = client.post("/groups/join", json={"join_code": group.join_code}, headers=headers)

    assert resp.status_code == 200
    assert joiner.group_id == group.id
    assert joiner.permission == PERMISSION_MEMBER


def test_join_unknown_code(client, make_user, auth_headers):
    resp = client.post("/groups/join", json={"join_code": "NOPE00"}, headers=auth_headers(make_user()))

    assert resp.status_code == 404


def test_second_group_conflicts(client, make_group, auth_headers):
    _, (admin,) = make_group(1)

    resp = client.post("/groups", json={"name": "Another"}, headers=auth_headers(admin))

    assert resp.status_code == 409


def test_leave_hands_over_admin(client, make_group, auth_headers):
    group, (admin, member) = make_group(2)

    resp = client.post(f"/groups/{group.id}/leave", headers=auth_headers(admin))

    assert resp.status_code == 200
    assert member.permission == PERMISSION_ADMIN
    assert admin.group_id is None


def test_kick(client, make_group, auth_headers):
    group, (admin, member, other) = make_group(3)

    denied = client.post(f"/groups/{group.id}/kick/{other.id}", headers=auth_headers(member))
    assert denied.status_code == 403
    assert denied.get_json()["message"] == "Only admins can remove users"

    resp = client.post(f"/groups/{group.id}/kick/{member.id}", headers=auth_headers(admin))
    assert resp.status_code == 200
    assert member.group_id is None


def test_user_visibility(client, make_group, auth_headers):
    _, (a, b) = make_group(2)
    _, (outsider,) = make_group(1)

    assert client.get(f"/users/{b.id}", headers=auth_headers(a)).status_code == 200
    assert client.get(f"/users/{b.id}/permission", headers=auth_headers(a)).get_json() == {
        "permission": PERMISSION_MEMBER
    }
    assert client.get(f"/users/{b.id}", headers=auth_headers(outsider)).status_code == 404
