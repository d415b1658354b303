"""
Integration tests for the auth endpoints.
"""
from core.security import decode_access_token

TEST_PASSWORD = "s3cret-pass"


def register(client, email="new@example.com", password="s3cret-pass", name="New User"):
    return client.post(
        "/v1/auth/register",
        json={"email": email, "password": password, "name": name},
    )


class TestRegister:

    def test_register_returns_token_and_user(self, client):
        response = register(client, email="New@Example.com")
        assert response.status_code == 201

        data = response.json()
        assert data["token_type"] == "bearer"
        assert data["user"]["email"] == "new@example.com"
        assert data["user"]["name"] == "New User"
        assert data["user"]["role"] == "user"

        payload = decode_access_token(data["access_token"])
        assert payload["sub"] == data["user"]["id"]

    def test_duplicate_email_conflicts(self, client):
        assert register(client).status_code == 201
        response = register(client, email="NEW@example.com")
        assert response.status_code == 409
        assert response.json()["error_code"] == "CONFLICT"

    def test_weak_password_rejected(self, client):
        response = register(client, password="abc")
        assert response.status_code == 400
        assert "at least 6 characters" in response.json()["detail"]

    def test_invalid_email_rejected(self, client):
        response = register(client, email="not-an-email")
        assert response.status_code == 422


class TestLogin:

    def test_login_success(self, client, make_user):
        user = make_user(email="runner@example.com", password=TEST_PASSWORD)
        response = client.post(
            "/v1/auth/login",
            json={"email": "Runner@example.com", "password": TEST_PASSWORD},
        )
        assert response.status_code == 200
        assert response.json()["user"]["id"] == str(user.id)

    def test_wrong_password(self, client, make_user):
        make_user(email="runner@example.com", password=TEST_PASSWORD)
        response = client.post(
            "/v1/auth/login",
            json={"email": "runner@example.com", "password": "wrong-pass"},
        )
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid email or password"

    def test_unknown_email_same_message(self, client):
        response = client.post(
            "/v1/auth/login",
            json={"email": "ghost@example.com", "password": "whatever1"},
        )
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid email or password"


class TestMe:

    def test_requires_token(self, client):
        response = client.get("/v1/auth/me")
        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"

    def test_invalid_token(self, client):
        response = client.get("/v1/auth/me", headers={"Authorization": "Bearer garbage"})
        assert response.status_code == 401

    def test_returns_current_user(self, client, make_user, auth_headers):
        user = make_user(name="Ann")
        response = client.get("/v1/auth/me", headers=auth_headers(user))
        assert response.status_code == 200
        assert response.json() == {
            "id": str(user.id),
            "name": "Ann",
            "email": user.email,
            "role": "user",
        }

    def test_update_profile(self, client, make_user, auth_headers):
        user = make_user()
        response = client.put(
            "/v1/auth/me",
            json={"email": "Renamed@Example.com", "name": " Bob "},
            headers=auth_headers(user),
        )
        assert response.status_code == 200
        data = response.json()
        assert data["user"]["email"] == "renamed@example.com"
        assert data["user"]["name"] == "Bob"
        assert decode_access_token(data["access_token"])["email"] == "renamed@example.com"

    def test_update_to_taken_email_conflicts(self, client, make_user, auth_headers):
        make_user(email="taken@example.com")
        user = make_user()
        response = client.put(
            "/v1/auth/me",
            json={"email": "taken@example.com"},
            headers=auth_headers(user),
        )
        assert response.status_code == 409

    def test_deleted_user_token_rejected(self, client, make_user, auth_headers, db_session):
        user = make_user()
        headers = auth_headers(user)
        db_session.delete(user)
        db_session.commit()
        assert client.get("/v1/auth/me", headers=headers).status_code == 401


class TestChangePassword:

    def test_change_password(self, client, make_user, auth_headers):
        user = make_user(email="runner@example.com", password=TEST_PASSWORD)
        response = client.post(
            "/v1/auth/change-password",
            json={"new_password": "brand-new-pass"},
            headers=auth_headers(user),
        )
        assert response.status_code == 200
        assert response.json() == {"success": True}

        old = client.post("/v1/auth/login", json={"email": "runner@example.com", "password": TEST_PASSWORD})
        new = client.post("/v1/auth/login", json={"email": "runner@example.com", "password": "brand-new-pass"})
        assert old.status_code == 401
        assert new.status_code == 200

    def test_short_password_rejected(self, client, make_user, auth_headers):
        user = make_user()
        response = client.post(
            "/v1/auth/change-password",
            json={"new_password": "123"},
            headers=auth_headers(user),
        )
        assert response.status_code == 400

    def test_requires_auth(self, client):
        response = client.post("/v1/auth/change-password", json={"new_password": "brand-new-pass"})
        assert response.status_code == 401
