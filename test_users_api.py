def test_get_user(client, make_user):
    user_id, headers, _ = make_user("alice")

    resp = client.get(f"/users/{user_id}", headers=headers)

    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "User retrieved successfully"
    assert body["data"]["id"] == user_id
    assert body["data"]["status"] == "ONLINE"


def test_get_unknown_user(client, make_user):
    _, headers, _ = make_user("alice")

    resp = client.get("/users/9999", headers=headers)

    assert resp.status_code == 404
    assert resp.json()["message"] == "User not found"


def test_update_username(client, make_user):
    user_id, headers, _ = make_user("alice")

    resp = client.put(f"/users/{user_id}", json={"username": "alice_renamed"}, headers=headers)

    assert resp.status_code == 200
    assert resp.json()["message"] == "Username updated successfully"
    assert resp.json()["data"]["username"] == "alice_renamed"


def test_update_username_taken(client, make_user):
    alice_id, alice_headers, _ = make_user("alice")
    bob_id, bob_headers, _ = make_user("bob")
    bob_name = client.get(f"/users/{bob_id}", headers=bob_headers).json()["data"]["username"]

    resp = client.put(f"/users/{alice_id}", json={"username": bob_name}, headers=alice_headers)

    assert resp.status_code == 409
    assert resp.json()["detail"] == "Username already taken"


def test_cannot_update_another_user(client, make_user):
    _, alice_headers, _ = make_user("alice")
    bob_id, _, _ = make_user("bob")

    resp = client.put(f"/users/{bob_id}", json={"username": "hijacked"}, headers=alice_headers)
    assert resp.status_code == 403

    resp = client.put(f"/users/{bob_id}/status", params={"status": "OFFLINE"}, headers=alice_headers)
    assert resp.status_code == 403


def test_update_and_get_status(client, make_user):
    user_id, headers, _ = make_user("alice")

    resp = client.put(f"/users/{user_id}/status", params={"status": "OFFLINE"}, headers=headers)
    assert resp.status_code == 200
    assert resp.json()["message"] == "Status updated successfully"
    assert resp.json()["data"]["status"] == "OFFLINE"

    resp = client.get(f"/users/{user_id}/status", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["message"] == "Status retrieved successfully"
    assert resp.json()["data"] == "OFFLINE"


def test_update_status_rejects_unknown_value(client, make_user):
    user_id, headers, _ = make_user("alice")

    resp = client.put(f"/users/{user_id}/status", params={"status": "SLEEPING"}, headers=headers)
    assert resp.status_code == 422
