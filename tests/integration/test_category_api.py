"""Integration tests for Category API endpoints (owner back office)."""

from __future__ import annotations

import pytest

from modules.categories.models import Category

pytestmark = pytest.mark.integration

URL = "/api/v1/categories/"


class TestCategoryAccess:
    def test_unauthenticated_returns_401(self, api_client):
        assert api_client.get(URL).status_code == 401

    def test_cashier_is_forbidden(self, cashier_client):
        assert cashier_client.get(URL).status_code == 403


class TestCategoryList:
    def test_list_includes_products_count(self, owner_client, product, category):
        Category.objects.create(name="Balado")
        response = owner_client.get(URL)
        assert response.status_code == 200
        rows = {row["name"]: row for row in response.data}
        assert rows["Crispy"]["products_count"] == 1
        assert rows["Balado"]["products_count"] == 0

    def test_list_is_ordered_by_name(self, owner_client):
        for name in ["Sambal", "Balado", "Keripik"]:
            Category.objects.create(name=name)
        names = [row["name"] for row in owner_client.get(URL).data]
        assert names == ["Balado", "Keripik", "Sambal"]


class TestCategoryCreate:
    def test_create_defaults_to_active(self, owner_client):
        response = owner_client.post(URL, {"name": "Keripik"}, format="json")
        assert response.status_code == 201
        assert response.data["is_active"] is True
        assert Category.objects.filter(name="Keripik").exists()

    def test_create_inactive(self, owner_client):
        response = owner_client.post(
            URL, {"name": "Musiman", "is_active": False}, format="json"
        )
        assert response.status_code == 201
        assert response.data["is_active"] is False

    def test_multipart_create_without_flag_is_active(self, owner_client):
        response = owner_client.post(URL, {"name": "Baru"}, format="multipart")
        assert response.status_code == 201
        assert response.data["is_active"] is True

    def test_multipart_create_inactive(self, owner_client):
        response = owner_client.post(
            URL, {"name": "Musiman", "is_active": "false"}, format="multipart"
        )
        assert response.status_code == 201
        assert response.data["is_active"] is False

    def test_name_too_long_returns_400(self, owner_client):
        response = owner_client.post(URL, {"name": "x" * 101}, format="json")
        assert response.status_code == 400
        assert response.json()["errors"][0]["attr"] == "name"


class TestCategoryUpdate:
    def test_rename_keeps_active_flag(self, owner_client):
        category = Category.objects.create(name="Crispy", is_active=False)
        response = owner_client.put(
            f"{URL}{category.id}/", {"name": "Crispy Premium"}, format="json"
        )
        assert response.status_code == 200
        category.refresh_from_db()
        assert category.name == "Crispy Premium"
        assert category.is_active is False

    @pytest.mark.parametrize("method", ["put", "patch"])
    def test_multipart_update_without_flag_keeps_it(
        self, owner_client, category, method
    ):
        response = getattr(owner_client, method)(
            f"{URL}{category.id}/", {"name": "Renamed"}, format="multipart"
        )
        assert response.status_code == 200
        category.refresh_from_db()
        assert category.name == "Renamed"
        assert category.is_active is True

    def test_patch_can_change_active_flag(self, owner_client, category):
        response = owner_client.patch(
            f"{URL}{category.id}/",
            {"name": category.name, "is_active": False},
            format="json",
        )
        assert response.status_code == 200
        assert response.data["is_active"] is False

    def test_update_unknown_returns_404(self, owner_client):
        response = owner_client.put(f"{URL}9999/", {"name": "X"}, format="json")
        assert response.status_code == 404


class TestCategoryDelete:
    def test_delete_empty_category(self, owner_client, category):
        response = owner_client.delete(f"{URL}{category.id}/")
        assert response.status_code == 204
        assert not Category.objects.filter(id=category.id).exists()

    def test_delete_category_with_products_returns_422(
        self, owner_client, category, product
    ):
        response = owner_client.delete(f"{URL}{category.id}/")
        assert response.status_code == 422
        assert response.data["success"] is False
        assert "still has products" in response.data["message"]
        assert Category.objects.filter(id=category.id).exists()

    def test_delete_unknown_returns_404(self, owner_client):
        assert owner_client.delete(f"{URL}9999/").status_code == 404


class TestCategoryToggleStatus:
    def test_toggle_flips_flag(self, owner_client, category):
        response = owner_client.patch(f"{URL}{category.id}/toggle-status/")
        assert response.status_code == 200
        assert response.data == {
            "success": True,
            "is_active": False,
            "message": "Category deactivated.",
        }

        response = owner_client.patch(f"{URL}{category.id}/toggle-status/")
        assert response.data["is_active"] is True
        category.refresh_from_db()
        assert category.is_active is True
