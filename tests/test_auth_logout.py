"""Tests for POST /api/auth/logout and GET /api/auth/session."""
from fastapi.testclient import TestClient

from business.session import SessionIssuer
from models.cookies import SESSION_COOKIE_OPTIONS


def test_logout_without_session_succeeds(client: TestClient):
    response = client.post("/api/auth/logout")

    assert response.status_code == 200
    assert response.json() == {"message": "Logged out successfully"}


def test_logout_clears_both_cookies(client: TestClient, set_cookie_headers, cookie_attributes):
    response = client.post("/api/auth/logout")

    for name in ("userAccessToken", "adminAccessToken"):
        headers = set_cookie_headers(response, name)
        assert len(headers) == 1
        attributes = cookie_attributes(headers[0])
        assert attributes["max-age"] == "0"
        assert "expires" in attributes


def test_logout_attributes_match_login(client: TestClient, set_cookie_headers, cookie_attributes):
    login = client.post("/api/auth/google", json={"token": "valid-token-alice"})
    logout = client.post("/api/auth/logout")

    set_attributes = cookie_attributes(set_cookie_headers(login, "userAccessToken")[0])
    for name in ("userAccessToken", "adminAccessToken"):
        cleared = cookie_attributes(set_cookie_headers(logout, name)[0])
        for attribute in ("path", "samesite", "secure", "httponly"):
            assert (attribute in cleared) == (attribute in set_attributes)
            assert cleared.get(attribute) == set_attributes.get(attribute)


def test_logout_is_repeatable(client: TestClient):
    assert client.post("/api/auth/logout").status_code == 200
    assert client.post("/api/auth/logout").status_code == 200


def test_session_reports_logged_in_user(client: TestClient, set_cookie_headers):
    login = client.post("/api/auth/google", json={"token": "valid-token-alice"})
    token = set_cookie_headers(login, "userAccessToken")[0].split(";")[0].split("=", 1)[1]

    response = client.get("/api/auth/session", headers={"Cookie": f"userAccessToken={token}"})

    assert response.status_code == 200
    body = response.json()
    assert body["userId"] == login.json()["user"]["id"]
    assert body["isAdmin"] is False
    assert isinstance(body["exp"], int)


def test_session_without_cookie_is_401(client: TestClient):
    response = client.get("/api/auth/session")

    assert response.status_code == 401
    assert response.json() == {"error": "Not authenticated"}


def test_session_rejects_token_signed_with_admin_secret(client: TestClient):
    forged = SessionIssuer(
        secret="test-admin-access-secret",
        user_cookie_name="userAccessToken",
        admin_cookie_name="adminAccessToken",
        cookie_options=SESSION_COOKIE_OPTIONS,
    ).issue("someone")

    response = client.get("/api/auth/session", headers={"Cookie": f"userAccessToken={forged}"})

    assert response.status_code == 401
    assert response.json() == {"error": "Not authenticated"}
