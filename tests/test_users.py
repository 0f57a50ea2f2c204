"""User API tests."""


def test_get_user(client, auth_headers, other_auth_headers):
    response = client.get(f"/api/v1/users/{other_auth_headers.user_id}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["email"] == other_auth_headers.email


def test_get_missing_user(client, auth_headers):
    response = client.get("/api/v1/users/999999", headers=auth_headers)
    assert response.status_code == 404


def test_find_by_username(client, auth_headers):
    response = client.get("/api/v1/users/username/John Doe", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["id"] == auth_headers.user_id

    response = client.get("/api/v1/users/username/john doe", headers=auth_headers)
    assert response.status_code == 404


def test_find_by_email(client, auth_headers):
    response = client.get(f"/api/v1/users/email/{auth_headers.email}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["id"] == auth_headers.user_id

    response = client.get("/api/v1/users/email/nobody@example.com", headers=auth_headers)
    assert response.status_code == 404


def test_update_self_partial(client, auth_headers):
    response = client.put(
        f"/api/v1/users/{auth_headers.user_id}",
        headers=auth_headers,
        json={"name": "Johnny"},
    )
    assert response.status_code == 200
    assert response.json()["name"] == "Johnny"
    assert response.json()["email"] == auth_headers.email


def test_update_password_rehashes(client, auth_headers):
    response = client.put(
        f"/api/v1/users/{auth_headers.user_id}",
        headers=auth_headers,
        json={"password": "new-secret"},
    )
    assert response.status_code == 200

    old = client.post("/api/v1/login", json={"email": auth_headers.email, "password": "password"})
    new = client.post(
        "/api/v1/login", json={"email": auth_headers.email, "password": "new-secret"}
    )
    assert old.status_code == 401
    assert new.status_code == 200


def test_update_email_to_taken(client, auth_headers, other_auth_headers):
    response = client.put(
        f"/api/v1/users/{auth_headers.user_id}",
        headers=auth_headers,
        json={"email": other_auth_headers.email},
    )
    assert response.status_code == 422
    assert response.json()["errors"]["email"] == ["The email has already been taken."]


def test_update_invalid_email(client, auth_headers):
    response = client.put(
        f"/api/v1/users/{auth_headers.user_id}",
        headers=auth_headers,
        json={"email": "not-an-email"},
    )
    assert response.status_code == 422
    assert "email" in response.json()["errors"]


def test_cannot_update_or_delete_other_user(client, auth_headers, other_auth_headers):
    url = f"/api/v1/users/{other_auth_headers.user_id}"
    assert client.put(url, headers=auth_headers, json={"name": "Hacked"}).status_code == 404
    assert client.delete(url, headers=auth_headers).status_code == 404
    assert client.get(url, headers=auth_headers).json()["name"] == "Jane Roe"


def test_delete_self_removes_everything(client, storage, auth_headers, make_company, upload):
    company = make_company(auth_headers)
    path = upload(auth_headers, company["id"]).json()["path"]

    response = client.delete(f"/api/v1/users/{auth_headers.user_id}", headers=auth_headers)
    assert response.status_code == 204
    assert not storage.exists(path)
    # The account and its tokens are gone
    assert client.get("/api/v1/me", headers=auth_headers).status_code == 401
    login = client.post("/api/v1/login", json={"email": auth_headers.email, "password": "password"})
    assert login.status_code == 401
