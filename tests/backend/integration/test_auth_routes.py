import pytest


pytestmark = pytest.mark.asyncio


async def register_account(client, name: str, email: str, password: str, **extra):
    return await client.post(
        "/auth/register",
        json={"name": name, "email": email, "password": password, **extra},
    )


async def login_account(client, email: str, password: str):
    return await client.post("/auth/login", json={"email": email, "password": password})


async def test_register_and_login_flow(client):
    resp = await register_account(client, "Alice", "a@x.com", "pw1", title="Engineer", bio="Hi")
    assert resp.status_code == 200
    body = resp.json()
    assert body == {"id": 1, "name": "Alice", "email": "a@x.com"}

    login_resp = await login_account(client, "a@x.com", "pw1")
    assert login_resp.status_code == 200
    login_body = login_resp.json()
    assert login_body["token"] == "1"
    assert login_body["user"] == {
        "id": 1,
        "name": "Alice",
        "email": "a@x.com",
        "title": "Engineer",
        "bio": "Hi",
        "hasAttachment": False,
    }


async def test_register_missing_fields(client):
    resp = await client.post("/auth/register", json={"name": "Alice", "email": "a@x.com"})
    assert resp.status_code == 400
    assert resp.json()["detail"]["code"] == "VALIDATION_ERROR"

    empty = await register_account(client, "", "a@x.com", "pw1")
    assert empty.status_code == 400


async def test_register_duplicate_email(client):
    await register_account(client, "Alice", "a@x.com", "pw1")
    dup = await register_account(client, "Not Alice", "a@x.com", "other")
    assert dup.status_code == 400
    assert dup.json()["detail"] == {"code": "EMAIL_EXISTS", "message": "Email already exists"}


async def test_register_wrong_field_type(client):
    resp = await client.post("/auth/register", json={"name": 5, "email": "a@x.com", "password": "pw1"})
    assert resp.status_code == 400
    detail = resp.json()["detail"]
    assert detail["code"] == "VALIDATION_ERROR"
    assert detail["message"].startswith("name")


async def test_register_unparseable_body(client):
    resp = await client.post(
        "/auth/register",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert resp.json()["detail"]["code"] == "VALIDATION_ERROR"


async def test_login_failures_are_indistinguishable(client):
    await register_account(client, "Alice", "a@x.com", "pw1")
    wrong_password = await login_account(client, "a@x.com", "wrong")
    unknown_email = await login_account(client, "nobody@x.com", "pw1")

    assert wrong_password.status_code == unknown_email.status_code == 400
    assert wrong_password.json() == unknown_email.json()
    assert wrong_password.json()["detail"]["code"] == "INVALID_CREDENTIALS"


async def test_login_missing_fields(client):
    resp = await client.post("/auth/login", json={})
    assert resp.status_code == 400
    assert resp.json()["detail"]["code"] == "INVALID_CREDENTIALS"


async def test_jwt_mode_login_returns_signed_token(jwt_client):
    await register_account(jwt_client, "Alice", "a@x.com", "pw1")
    resp = await login_account(jwt_client, "a@x.com", "pw1")
    assert resp.status_code == 200
    assert resp.json()["token"].count(".") == 2


async def test_health(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"ok": True}
