"""
Integration tests for /api/users and /api/login endpoints.
"""
import pytest

pytestmark = pytest.mark.integration


class TestRegisterUser:

    def test_root_registration_then_duplicate(self, client):
        assert client.get("/api/users").json() == []

        response = client.post("/api/users", json={"username": "root", "password": "sekret"})
        assert response.status_code == 201
        assert len(client.get("/api/users").json()) == 1

        response = client.post(
            "/api/users", json={"username": "root", "name": "Superuser", "password": "salainen"}
        )
        assert response.status_code == 400
        assert "expected `username` to be unique" in response.json()["detail"]
        assert len(client.get("/api/users").json()) == 1

    def test_response_has_no_password_data(self, client):
        created = client.post(
            "/api/users", json={"username": "mluukkai", "name": "Matti Luukkainen", "password": "salainen"}
        ).json()
        assert created["id"]
        assert created["name"] == "Matti Luukkainen"
        assert "password" not in created
        assert "password_hash" not in created
        assert all("password_hash" not in user for user in client.get("/api/users").json())

    @pytest.mark.parametrize(
        "payload",
        [
            {"username": "ro", "password": "sekret"},
            {"username": "root", "password": "se"},
        ],
    )
    def test_short_fields_are_400(self, client, payload):
        response = client.post("/api/users", json=payload)
        assert response.status_code == 400
        assert "at least 3 characters" in response.json()["detail"]
        assert client.get("/api/users").json() == []

    def test_missing_password_is_400(self, client):
        assert client.post("/api/users", json={"username": "root"}).status_code == 400


class TestLogin:

    def test_login_returns_token(self, client):
        client.post("/api/users", json={"username": "root", "name": "Superuser", "password": "sekret"})

        response = client.post("/api/login", json={"username": "root", "password": "sekret"})
        assert response.status_code == 200
        body = response.json()
        assert body["token"]
        assert body["username"] == "root"
        assert body["name"] == "Superuser"

    @pytest.mark.parametrize("username, password", [("root", "wrong"), ("nobody", "sekret")])
    def test_bad_credentials_are_401(self, client, username, password):
        client.post("/api/users", json={"username": "root", "password": "sekret"})
        response = client.post("/api/login", json={"username": username, "password": password})
        assert response.status_code == 401


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
