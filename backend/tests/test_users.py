"""
Tests for registration and the /api/users endpoints.
"""

from lunch_api.models import Order, User

from conftest import TEST_PASSWORD, auth_headers_for, utc


def _registration(organization_id: int, name: str = "ann", **overrides) -> dict:
    body = {
        "name": name,
        "email": f"{name}@acme.org",
        "password": TEST_PASSWORD,
        "organization_id": organization_id,
    }
    body.update(overrides)
    return body


class TestRegistration:

    def test_first_registration_becomes_admin(self, client, seed_organization):
        response = client.post("/api/users", json=_registration(seed_organization.id))

        assert response.status_code == 201
        data = response.json()
        assert data["admin"] is True
        assert data["first_entry"] is True
        assert data["sign_in_count"] == 1
        assert len(data["auth_token"]) == 20

    def test_later_registration_is_member(self, client, seed_organization):
        client.post("/api/users", json=_registration(seed_organization.id, "ann"))
        response = client.post("/api/users", json=_registration(seed_organization.id, "bob"))

        assert response.status_code == 201
        assert response.json()["admin"] is False

    def test_duplicate_email(self, client, member_user, seed_organization):
        response = client.post(
            "/api/users",
            json=_registration(seed_organization.id, "other", email="alice@acme.org"),
        )

        assert response.status_code == 400
        assert response.json()["detail"]["fields"] == ["email"]

    def test_unknown_organization(self, client, seed_organization):
        response = client.post("/api/users", json=_registration(999))

        assert response.status_code == 400
        assert response.json()["detail"]["fields"] == ["organization_id"]

    def test_short_password_rejected(self, client, seed_organization):
        response = client.post("/api/users", json=_registration(seed_organization.id, password="short"))
        assert response.status_code == 422

    def test_registration_token_authenticates(self, client, seed_organization):
        token = client.post("/api/users", json=_registration(seed_organization.id)).json()["auth_token"]

        response = client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 200
        assert response.json()["name"] == "ann"


class TestCurrentUser:

    def test_me_requires_sign_in(self, client):
        assert client.get("/api/users/me").status_code == 401

    def test_me(self, client, member_user, member_headers):
        response = client.get("/api/users/me", headers=member_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == member_user.id
        assert data["first_entry"] is False
        assert "auth_token" not in data
        assert "password" not in data


class TestUserRecord:

    def test_read_other_user(self, client, member_headers, make_user):
        bob = make_user("bob")
        response = client.get(f"/api/users/{bob.id}", headers=member_headers)

        assert response.status_code == 200
        assert response.json()["name"] == "bob"

    def test_update_self(self, client, member_user, member_headers):
        response = client.patch(
            f"/api/users/{member_user.id}",
            json={"name": "Alice Liddell"},
            headers=member_headers,
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Alice Liddell"
        assert response.json()["email"] == "alice@acme.org"

    def test_update_other_forbidden(self, client, member_headers, make_user):
        bob = make_user("bob")
        response = client.patch(f"/api/users/{bob.id}", json={"name": "Robert"}, headers=member_headers)
        assert response.status_code == 403

    def test_guest_update_forbidden(self, client, member_user):
        response = client.patch(f"/api/users/{member_user.id}", json={"name": "Mallory"})
        assert response.status_code == 403

    def test_new_password_works(self, client, member_user, member_headers):
        client.patch(
            f"/api/users/{member_user.id}",
            json={"password": "brand-new-password"},
            headers=member_headers,
        )

        response = client.post(
            "/api/sessions",
            json={"email": "alice@acme.org", "password": "brand-new-password"},
        )
        assert response.status_code == 201

    def test_delete_self_removes_orders(self, client, db_session, member_user, member_headers, make_order, seed_catalog):
        order = make_order(member_user, utc(2024, 1, 5), [seed_catalog["broth"]])

        response = client.delete(f"/api/users/{member_user.id}", headers=member_headers)

        assert response.status_code == 204
        assert db_session.get(User, member_user.id) is None
        assert db_session.get(Order, order.id) is None

    def test_delete_other_forbidden(self, client, member_headers, make_user):
        bob = make_user("bob")
        response = client.delete(f"/api/users/{bob.id}", headers=member_headers)
        assert response.status_code == 403

    def test_admin_deletes_other(self, client, admin_headers, make_user):
        bob = make_user("bob")
        response = client.delete(f"/api/users/{bob.id}", headers=admin_headers)
        assert response.status_code == 204

    def test_missing_user(self, client, member_headers):
        assert client.get("/api/users/999", headers=member_headers).status_code == 404

    def test_other_token_still_works(self, client, make_user):
        bob = make_user("bob")
        response = client.get("/api/users/me", headers=auth_headers_for(bob))
        assert response.json()["name"] == "bob"
