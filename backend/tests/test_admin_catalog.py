"""
Tests for admin management of organizations, categories, items and day menus.
"""

import pytest

from lunch_shared.config.constants import Weekday

from conftest import utc


class TestAdminAccess:
    """Every admin endpoint requires MANAGE on its resource."""

    @pytest.mark.parametrize(
        "path", ["/api/admin/organizations", "/api/admin/categories", "/api/admin/items",
                 "/api/admin/day-menus", "/api/admin/users"],
    )
    def test_guest_is_unauthenticated(self, client, path):
        assert client.get(path).status_code == 401

    @pytest.mark.parametrize(
        "path", ["/api/admin/organizations", "/api/admin/categories", "/api/admin/items",
                 "/api/admin/day-menus", "/api/admin/users"],
    )
    def test_member_is_forbidden(self, client, member_headers, path):
        assert client.get(path, headers=member_headers).status_code == 403


class TestOrganizationEndpoints:

    def test_list(self, client, admin_headers, seed_organization):
        response = client.get("/api/admin/organizations", headers=admin_headers)

        assert response.status_code == 200
        assert [o["name"] for o in response.json()] == ["Acme"]

    def test_create(self, client, admin_headers):
        response = client.post("/api/admin/organizations", json={"name": "Initech"}, headers=admin_headers)

        assert response.status_code == 201
        assert response.json()["name"] == "Initech"

    def test_create_duplicate_name(self, client, admin_headers, seed_organization):
        response = client.post("/api/admin/organizations", json={"name": "Acme"}, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["detail"]["fields"] == ["name"]

    def test_rename(self, client, admin_headers, seed_other_organization):
        response = client.patch(
            f"/api/admin/organizations/{seed_other_organization.id}",
            json={"name": "Globex Corp"},
            headers=admin_headers,
        )
        assert response.status_code == 200
        assert response.json()["name"] == "Globex Corp"

    def test_delete_with_users_conflicts(self, client, admin_headers, seed_organization):
        response = client.delete(f"/api/admin/organizations/{seed_organization.id}", headers=admin_headers)
        assert response.status_code == 409

    def test_delete_empty(self, client, admin_headers, seed_other_organization):
        response = client.delete(f"/api/admin/organizations/{seed_other_organization.id}", headers=admin_headers)
        assert response.status_code == 204

    def test_missing(self, client, admin_headers):
        assert client.get("/api/admin/organizations/999", headers=admin_headers).status_code == 404


class TestCategoryEndpoints:

    def test_create_and_list(self, client, admin_headers):
        created = client.post("/api/admin/categories", json={"name": "dessert"}, headers=admin_headers)
        listed = client.get("/api/admin/categories", headers=admin_headers)

        assert created.status_code == 201
        assert [c["name"] for c in listed.json()] == ["dessert"]

    def test_blank_name(self, client, admin_headers):
        response = client.post("/api/admin/categories", json={"name": "  "}, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["detail"]["fields"] == ["name"]

    def test_delete_with_items_conflicts(self, client, admin_headers, seed_catalog):
        category_id = seed_catalog["broth"].category_id
        response = client.delete(f"/api/admin/categories/{category_id}", headers=admin_headers)
        assert response.status_code == 409


class TestItemEndpoints:

    def test_create(self, client, admin_headers, seed_catalog):
        category_id = seed_catalog["chicken"].category_id

        response = client.post(
            "/api/admin/items",
            json={"name": "risotto", "category_id": category_id},
            headers=admin_headers,
        )

        assert response.status_code == 201
        assert response.json()["category_id"] == category_id

    def test_unknown_category(self, client, admin_headers):
        response = client.post(
            "/api/admin/items",
            json={"name": "risotto", "category_id": 999},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["detail"]["fields"] == ["category_id"]

    def test_filter_by_category(self, client, admin_headers, seed_catalog):
        category_id = seed_catalog["broth"].category_id

        response = client.get("/api/admin/items", params={"category_id": category_id}, headers=admin_headers)

        assert sorted(i["name"] for i in response.json()) == ["broth", "tomato soup"]

    def test_delete_ordered_item_conflicts(self, client, admin_headers, member_user, make_order, seed_catalog):
        make_order(member_user, utc(2024, 1, 5), [seed_catalog["broth"]])

        response = client.delete(f"/api/admin/items/{seed_catalog['broth'].id}", headers=admin_headers)

        assert response.status_code == 409

    def test_delete_unused_item(self, client, admin_headers, seed_catalog):
        response = client.delete(f"/api/admin/items/{seed_catalog['lasagna'].id}", headers=admin_headers)
        assert response.status_code == 204


class TestDayMenuEndpoints:

    def test_publish_snapshot(self, client, admin_headers, seed_catalog):
        response = client.post(
            "/api/admin/day-menus",
            json={
                "day_id": Weekday.WEDNESDAY,
                "item_ids": [seed_catalog["chicken"].id, seed_catalog["broth"].id],
                "created_at": "2024-01-01T08:00:00Z",
            },
            headers=admin_headers,
        )

        assert response.status_code == 201
        data = response.json()
        assert data["day_name"] == "Wednesday"
        assert sorted(i["name"] for i in data["items"]) == ["broth", "chicken"]

    def test_published_snapshot_resolves(self, client, admin_headers, seed_catalog):
        client.post(
            "/api/admin/day-menus",
            json={"day_id": Weekday.WEDNESDAY, "item_ids": [seed_catalog["chicken"].id],
                  "created_at": "2024-01-01T08:00:00Z"},
            headers=admin_headers,
        )

        response = client.get("/api/menu/actual", params={"date": "2024-01-03"})

        assert response.status_code == 200
        assert response.json()["items"][0]["name"] == "chicken"

    def test_invalid_day(self, client, admin_headers):
        response = client.post("/api/admin/day-menus", json={"day_id": 7}, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["detail"]["fields"] == ["day_id"]

    def test_unknown_item(self, client, admin_headers):
        response = client.post(
            "/api/admin/day-menus",
            json={"day_id": Weekday.MONDAY, "item_ids": [999]},
            headers=admin_headers,
        )
        assert response.status_code == 404

    def test_replace_items(self, client, admin_headers, make_menu, seed_catalog):
        menu = make_menu(Weekday.MONDAY, utc(2024, 1, 1), [seed_catalog["broth"]])

        response = client.patch(
            f"/api/admin/day-menus/{menu.id}",
            json={"item_ids": [seed_catalog["lasagna"].id]},
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert [i["name"] for i in response.json()["items"]] == ["lasagna"]

    def test_list_by_day(self, client, admin_headers, make_menu):
        make_menu(Weekday.MONDAY, utc(2024, 1, 1))
        tuesday = make_menu(Weekday.TUESDAY, utc(2024, 1, 1))

        response = client.get("/api/admin/day-menus", params={"day_id": Weekday.TUESDAY}, headers=admin_headers)

        assert [m["id"] for m in response.json()] == [tuesday.id]

    def test_delete(self, client, admin_headers, make_menu):
        menu = make_menu(Weekday.MONDAY, utc(2024, 1, 1))

        response = client.delete(f"/api/admin/day-menus/{menu.id}", headers=admin_headers)

        assert response.status_code == 204
        assert client.get(f"/api/admin/day-menus/{menu.id}", headers=admin_headers).status_code == 404
