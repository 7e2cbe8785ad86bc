ALGEBRA = {
    "title": "Algebra",
    "email": "t@x.com",
    "marks": 50,
    "difficultyLevel": "easy",
    "dueDate": "2024-01-01",
}


def create_assignment(client, payload=None) -> str:
    r = client.post("/assignments", json=payload or ALGEBRA)
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["acknowledged"] is True
    return body["insertedId"]


def test_create_then_get_returns_same_fields(client):
    assignment_id = create_assignment(client)

    r = client.get(f"/assignments/{assignment_id}")
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["_id"] == assignment_id
    for key, value in ALGEBRA.items():
        assert body[key] == value


def test_create_stores_payload_verbatim(client):
    payload = {"title": 7, "marks": "fifty", "custom": {"nested": [1, 2]}}
    assignment_id = create_assignment(client, payload)

    body = client.get(f"/assignments/{assignment_id}").json()
    assert body == {"_id": assignment_id, **payload}


def test_list_assignments_returns_all(client):
    first = create_assignment(client)
    second = create_assignment(client, {**ALGEBRA, "title": "Geometry"})

    r = client.get("/assignments")
    assert r.status_code == 200
    ids = {a["_id"] for a in r.json()}
    assert ids == {first, second}


def test_get_unknown_or_malformed_id_returns_null(client):
    assert client.get("/assignments/" + "0" * 32).json() is None

    r = client.get("/assignments/not-an-id")
    assert r.status_code == 200
    assert r.json() is None


def test_owner_can_update(client):
    assignment_id = create_assignment(client, {**ALGEBRA, "extra": "kept"})

    r = client.put(
        f"/assignments/{assignment_id}",
        json={**ALGEBRA, "title": "Algebra II", "marks": 80},
    )
    assert r.status_code == 200, r.text
    assert r.json()["matchedCount"] == 1
    assert r.json()["modifiedCount"] == 1

    body = client.get(f"/assignments/{assignment_id}").json()
    assert body["title"] == "Algebra II"
    assert body["marks"] == 80
    assert body["extra"] == "kept"


def test_update_sets_missing_whitelisted_fields_to_null(client):
    assignment_id = create_assignment(client, {**ALGEBRA, "description": "old"})

    r = client.put(f"/assignments/{assignment_id}", json={"email": "t@x.com", "title": "New"})
    assert r.status_code == 200, r.text

    body = client.get(f"/assignments/{assignment_id}").json()
    assert body["title"] == "New"
    assert body["description"] is None
    assert body["marks"] is None


def test_update_ignores_fields_outside_whitelist(client):
    assignment_id = create_assignment(client)

    client.put(f"/assignments/{assignment_id}", json={**ALGEBRA, "sneaky": True})

    body = client.get(f"/assignments/{assignment_id}").json()
    assert "sneaky" not in body


def test_update_with_same_values_reports_no_modification(client):
    assignment_id = create_assignment(client, {**ALGEBRA, "thumbnailURL": None, "description": None})

    r = client.put(f"/assignments/{assignment_id}", json=ALGEBRA)
    assert r.status_code == 200
    assert r.json()["matchedCount"] == 1
    assert r.json()["modifiedCount"] == 0


def test_update_by_other_email_is_forbidden_and_leaves_record(client):
    assignment_id = create_assignment(client)

    r = client.put(
        f"/assignments/{assignment_id}",
        json={**ALGEBRA, "title": "Hijacked", "email": "other@x.com"},
    )
    assert r.status_code == 403
    assert r.json() == {"message": "Unauthorized: You are not the creator of this assignment"}

    body = client.get(f"/assignments/{assignment_id}").json()
    assert body["title"] == "Algebra"
    assert body["email"] == "t@x.com"


def test_email_check_is_case_sensitive(client):
    assignment_id = create_assignment(client)

    r = client.put(f"/assignments/{assignment_id}", json={**ALGEBRA, "email": "T@x.com"})
    assert r.status_code == 403


def test_update_unknown_id_is_not_found(client):
    r = client.put("/assignments/" + "a" * 32, json=ALGEBRA)
    assert r.status_code == 404
    assert r.json() == {"message": "Assignment not found"}

    r = client.put("/assignments/bogus", json=ALGEBRA)
    assert r.status_code == 404


def test_owner_can_delete(client):
    assignment_id = create_assignment(client)

    r = client.request("DELETE", f"/assignments/{assignment_id}", json={"email": "t@x.com"})
    assert r.status_code == 200, r.text
    assert r.json() == {"acknowledged": True, "deletedCount": 1}

    assert client.get(f"/assignments/{assignment_id}").json() is None


def test_delete_by_other_email_is_forbidden(client):
    assignment_id = create_assignment(client)

    r = client.request("DELETE", f"/assignments/{assignment_id}", json={"email": "other@x.com"})
    assert r.status_code == 403
    assert client.get(f"/assignments/{assignment_id}").json() is not None


def test_delete_without_body_is_forbidden(client):
    assignment_id = create_assignment(client)

    r = client.delete(f"/assignments/{assignment_id}")
    assert r.status_code == 403


def test_delete_unknown_id_is_not_found(client):
    r = client.request("DELETE", "/assignments/" + "b" * 32, json={"email": "t@x.com"})
    assert r.status_code == 404
    assert r.json() == {"message": "Assignment not found"}


def test_explicit_null_email_does_not_match_missing_email(client):
    assignment_id = create_assignment(client, {"title": "No owner"})

    r = client.put(f"/assignments/{assignment_id}", json={"title": "x", "email": None})
    assert r.status_code == 403

    r = client.request("DELETE", f"/assignments/{assignment_id}", json={"email": None})
    assert r.status_code == 403
    assert client.get(f"/assignments/{assignment_id}").json()["title"] == "No owner"


def test_missing_email_matches_record_without_email(client):
    assignment_id = create_assignment(client, {"title": "No owner"})

    r = client.put(f"/assignments/{assignment_id}", json={"title": "x"})
    assert r.status_code == 200, r.text
    assert client.get(f"/assignments/{assignment_id}").json()["title"] == "x"
