"""
Tests for admin user management.
"""

from conftest import TEST_PASSWORD


class TestAdminUserEndpoints:

    def test_list_users(self, client, admin_headers, member_user):
        response = client.get("/api/admin/users", headers=admin_headers)

        assert response.status_code == 200
        assert sorted(u["name"] for u in response.json()) == ["admin", "alice"]

    def test_list_filters(self, client, admin_headers, make_user, seed_other_organization):
        make_user("bob", organization=seed_other_organization)

        by_org = client.get(
            "/api/admin/users", params={"organization_id": seed_other_organization.id}, headers=admin_headers
        )
        admins = client.get("/api/admin/users", params={"admin": "true"}, headers=admin_headers)

        assert [u["name"] for u in by_org.json()] == ["bob"]
        assert [u["name"] for u in admins.json()] == ["admin"]

    def test_list_includes_sign_in_count(self, client, admin_headers, member_user):
        data = client.get(f"/api/admin/users/{member_user.id}", headers=admin_headers).json()
        assert data["sign_in_count"] == 0
        assert "auth_token" not in data

    def test_create_admin(self, client, admin_headers, seed_organization):
        response = client.post(
            "/api/admin/users",
            json={
                "name": "carol",
                "email": "carol@acme.org",
                "password": TEST_PASSWORD,
                "organization_id": seed_organization.id,
                "admin": True,
            },
            headers=admin_headers,
        )

        assert response.status_code == 201
        data = response.json()
        assert data["admin"] is True
        assert data["sign_in_count"] == 0

    def test_create_member_by_default(self, client, admin_headers, seed_organization):
        response = client.post(
            "/api/admin/users",
            json={
                "name": "dave",
                "email": "dave@acme.org",
                "password": TEST_PASSWORD,
                "organization_id": seed_organization.id,
            },
            headers=admin_headers,
        )
        assert response.json()["admin"] is False

    def test_promote(self, client, admin_headers, member_user):
        response = client.patch(
            f"/api/admin/users/{member_user.id}", json={"admin": True}, headers=admin_headers
        )

        assert response.status_code == 200
        assert response.json()["admin"] is True

    def test_member_cannot_promote_self(self, client, member_user, member_headers):
        response = client.patch(f"/api/users/{member_user.id}", json={"admin": True}, headers=member_headers)
        # admin is not part of the public update schema, so it is ignored
        assert response.status_code == 200
        assert response.json()["admin"] is False

    def test_delete(self, client, admin_headers, member_user):
        response = client.delete(f"/api/admin/users/{member_user.id}", headers=admin_headers)
        assert response.status_code == 204
