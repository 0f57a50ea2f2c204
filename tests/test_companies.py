"""Company API tests."""

from bizdocs.models.company import Company


def test_create_company(client, auth_headers):
    """Test creating a company owned by the caller."""
    response = client.post(
        "/api/v1/companies",
        headers=auth_headers,
        json={
            "cnpj": "11222333000181",
            "legal_name": "Acme Comercio Ltda",
            "trade_name": "Acme",
            "email": "contato@acme.example.com",
            "phone": "+55 11 4000-0000",
            "address": "Av. Paulista, 1000",
            "size": "MEI",
        },
    )
    assert response.status_code == 201
    data = response.json()
    assert data["user_id"] == auth_headers.user_id
    assert data["size"] == "MEI"
    assert data["trade_name"] == "Acme"


def test_create_company_ignores_user_id_in_body(
    client, auth_headers, other_auth_headers, make_company
):
    company = make_company(auth_headers, user_id=other_auth_headers.user_id)
    assert company["user_id"] == auth_headers.user_id


def test_create_company_trade_name_optional(client, auth_headers, make_company):
    company = make_company(auth_headers, trade_name=None)
    assert company["trade_name"] is None


def test_create_company_requires_fields(client, auth_headers):
    response = client.post("/api/v1/companies", headers=auth_headers, json={})
    assert response.status_code == 422
    errors = response.json()["errors"]
    assert {"cnpj", "legal_name", "email", "phone", "address", "size"} <= set(errors)
    assert "trade_name" not in errors


def test_create_company_field_lengths(client, auth_headers, make_company):
    response = client.post(
        "/api/v1/companies",
        headers=auth_headers,
        json={
            "cnpj": "1" * 15,
            "legal_name": "Too Long Ltda",
            "email": "long@example.com",
            "phone": "9" * 21,
            "address": "Somewhere",
            "size": "ME",
        },
    )
    assert response.status_code == 422
    assert {"cnpj", "phone"} <= set(response.json()["errors"])


def test_create_company_invalid_size(client, auth_headers, make_company):
    response = client.post(
        "/api/v1/companies",
        headers=auth_headers,
        json={
            "cnpj": "12345678000100",
            "legal_name": "Bad Size Ltda",
            "email": "badsize@example.com",
            "phone": "123",
            "address": "Somewhere",
            "size": "XL",
        },
    )
    assert response.status_code == 422
    assert "size" in response.json()["errors"]


def test_duplicate_unique_fields(client, auth_headers, other_auth_headers, make_company):
    """Tax id, legal name and email are unique across all tenants."""
    existing = make_company(auth_headers)
    response = client.post(
        "/api/v1/companies",
        headers=other_auth_headers,
        json={
            "cnpj": existing["cnpj"],
            "legal_name": existing["legal_name"],
            "email": existing["email"],
            "phone": "123",
            "address": "Elsewhere",
            "size": "EG",
        },
    )
    assert response.status_code == 422
    errors = response.json()["errors"]
    assert errors["cnpj"] == ["The cnpj has already been taken."]
    assert errors["legal_name"] == ["The legal name has already been taken."]
    assert errors["email"] == ["The email has already been taken."]


def test_list_companies_is_scoped(client, auth_headers, other_auth_headers, make_company):
    mine = make_company(auth_headers)
    make_company(other_auth_headers)

    response = client.get("/api/v1/companies", headers=auth_headers)
    assert response.status_code == 200
    assert [c["id"] for c in response.json()] == [mine["id"]]


def test_get_company(client, auth_headers, make_company):
    company = make_company(auth_headers)
    response = client.get(f"/api/v1/companies/{company['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["legal_name"] == company["legal_name"]


def test_foreign_company_is_not_found(client, auth_headers, other_auth_headers, make_company):
    """Another user's company answers exactly like a missing one."""
    theirs = make_company(other_auth_headers)
    url = f"/api/v1/companies/{theirs['id']}"

    missing = client.get("/api/v1/companies/999999", headers=auth_headers)
    foreign = client.get(url, headers=auth_headers)
    assert foreign.status_code == missing.status_code == 404
    assert foreign.json() == missing.json()

    assert client.put(url, headers=auth_headers, json={"phone": "1"}).status_code == 404
    assert client.delete(url, headers=auth_headers).status_code == 404
    assert client.get(url, headers=other_auth_headers).json()["phone"] == theirs["phone"]


def test_update_company_partial(client, auth_headers, make_company):
    """Only the sent fields change."""
    company = make_company(auth_headers)
    response = client.put(
        f"/api/v1/companies/{company['id']}",
        headers=auth_headers,
        json={"phone": "+55 21 3000-0000", "size": "EPP"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["phone"] == "+55 21 3000-0000"
    assert data["size"] == "EPP"
    assert data["legal_name"] == company["legal_name"]
    assert data["cnpj"] == company["cnpj"]


def test_update_company_invalid_size_mutates_nothing(db, client, auth_headers, make_company):
    company = make_company(auth_headers, size="MEI")
    response = client.put(
        f"/api/v1/companies/{company['id']}",
        headers=auth_headers,
        json={"size": "Invalid", "phone": "000"},
    )
    assert response.status_code == 422
    assert "size" in response.json()["errors"]

    db.expire_all()
    row = db.query(Company).filter(Company.id == company["id"]).one()
    assert row.size.value == "MEI"
    assert row.phone == company["phone"]


def test_update_company_to_taken_cnpj(client, auth_headers, make_company):
    first = make_company(auth_headers)
    second = make_company(auth_headers)
    response = client.put(
        f"/api/v1/companies/{second['id']}",
        headers=auth_headers,
        json={"cnpj": first["cnpj"]},
    )
    assert response.status_code == 422
    assert "cnpj" in response.json()["errors"]


def test_update_company_keeps_own_unique_values(client, auth_headers, make_company):
    company = make_company(auth_headers)
    response = client.put(
        f"/api/v1/companies/{company['id']}",
        headers=auth_headers,
        json={"cnpj": company["cnpj"], "email": company["email"]},
    )
    assert response.status_code == 200


def test_update_company_clears_trade_name(client, auth_headers, make_company):
    company = make_company(auth_headers)
    response = client.put(
        f"/api/v1/companies/{company['id']}",
        headers=auth_headers,
        json={"trade_name": None},
    )
    assert response.status_code == 200
    assert response.json()["trade_name"] is None


def test_delete_company(client, auth_headers, make_company):
    company = make_company(auth_headers)
    response = client.delete(f"/api/v1/companies/{company['id']}", headers=auth_headers)
    assert response.status_code == 204
    assert client.get(f"/api/v1/companies/{company['id']}", headers=auth_headers).status_code == 404


def test_delete_company_removes_its_files_and_blobs(
    client, storage, auth_headers, make_company, upload
):
    company = make_company(auth_headers)
    paths = [upload(auth_headers, company["id"]).json()["path"] for _ in range(2)]
    assert all(storage.exists(path) for path in paths)

    response = client.delete(f"/api/v1/companies/{company['id']}", headers=auth_headers)
    assert response.status_code == 204
    assert not any(storage.exists(path) for path in paths)
    assert client.get("/api/v1/files", headers=auth_headers).json() == []


def test_finders(client, auth_headers, make_company):
    company = make_company(
        auth_headers,
        cnpj="99888777000166",
        legal_name="Finder Ltda",
        trade_name="Finder",
        email="finder@example.com",
        phone="+55 31 1234-5678",
    )
    cid = company["id"]
    for url in [
        "/api/v1/companies/cnpj/99888777000166",
        "/api/v1/companies/legal-name/Finder Ltda",
        "/api/v1/companies/trade-name/Finder",
        "/api/v1/companies/email/finder@example.com",
        "/api/v1/companies/phone/+55 31 1234-5678",
    ]:
        response = client.get(url, headers=auth_headers)
        assert response.status_code == 200, url
        assert response.json()["id"] == cid


def test_finders_are_exact_and_case_sensitive(client, auth_headers, make_company):
    make_company(auth_headers, legal_name="Exact Ltda")
    assert client.get(
        "/api/v1/companies/legal-name/exact ltda", headers=auth_headers
    ).status_code == 404
    assert client.get(
        "/api/v1/companies/legal-name/Exact", headers=auth_headers
    ).status_code == 404


def test_finders_do_not_reveal_foreign_companies(
    client, auth_headers, other_auth_headers, make_company
):
    theirs = make_company(other_auth_headers)
    response = client.get(f"/api/v1/companies/cnpj/{theirs['cnpj']}", headers=auth_headers)
    assert response.status_code == 404


def test_find_by_size(client, auth_headers, other_auth_headers, make_company):
    small = make_company(auth_headers, size="ME")
    make_company(auth_headers, size="EG")
    make_company(other_auth_headers, size="ME")

    response = client.get("/api/v1/companies/size/ME", headers=auth_headers)
    assert response.status_code == 200
    assert [c["id"] for c in response.json()] == [small["id"]]


def test_find_by_unknown_size(client, auth_headers):
    response = client.get("/api/v1/companies/size/HUGE", headers=auth_headers)
    assert response.status_code == 422
    assert "size" in response.json()["errors"]


def test_finder_routes_are_documented(client):
    paths = client.get("/openapi.json").json()["paths"]
    for path in [
        "/api/v1/companies/cnpj/{cnpj}",
        "/api/v1/companies/email/{email}",
        "/api/v1/companies/legal-name/{legal_name}",
        "/api/v1/companies/trade-name/{trade_name}",
        "/api/v1/companies/phone/{phone}",
    ]:
        assert paths[path]["get"]["description"].startswith("Find one of the caller's"), path
