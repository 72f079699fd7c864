"""Tests for /api/v1/categories and /api/v1/settings."""

from __future__ import annotations

from fastapi.testclient import TestClient

CATEGORIES = "/api/v1/categories"
SETTINGS = "/api/v1/settings"


class TestCategories:
    def test_create_with_defaults(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        response = client.post(CATEGORIES, json={"name": "Work"}, headers=auth_headers)
        assert response.status_code == 201
        data = response.json()
        assert (data["color"], data["icon"]) == ("#2196F3", "folder")

    def test_duplicate_name(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        client.post(CATEGORIES, json={"name": "Work"}, headers=auth_headers)
        response = client.post(CATEGORIES, json={"name": "Work"}, headers=auth_headers)
        assert response.status_code == 409
        assert len(client.get(CATEGORIES, headers=auth_headers).json()) == 1

    def test_same_name_for_other_user(
        self, client: TestClient, auth_headers: dict[str, str], other_headers: dict[str, str]
    ) -> None:
        client.post(CATEGORIES, json={"name": "Work"}, headers=auth_headers)
        assert client.post(CATEGORIES, json={"name": "Work"}, headers=other_headers).status_code == 201

    def test_rename_and_delete(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        work = client.post(CATEGORIES, json={"name": "Work"}, headers=auth_headers).json()
        home = client.post(CATEGORIES, json={"name": "Home"}, headers=auth_headers).json()

        clash = client.patch(f"{CATEGORIES}/{home['id']}", json={"name": "Work"}, headers=auth_headers)
        assert clash.status_code == 409

        renamed = client.patch(f"{CATEGORIES}/{home['id']}", json={"icon": "house"}, headers=auth_headers)
        assert renamed.status_code == 200
        assert renamed.json()["icon"] == "house"

        assert client.delete(f"{CATEGORIES}/{work['id']}", headers=auth_headers).status_code == 204
        assert [c["name"] for c in client.get(CATEGORIES, headers=auth_headers).json()] == ["Home"]
        # le nom est libéré par la suppression
        assert client.post(CATEGORIES, json={"name": "Work"}, headers=auth_headers).status_code == 201

    def test_other_users_category_is_not_found(
        self, client: TestClient, auth_headers: dict[str, str], other_headers: dict[str, str]
    ) -> None:
        theirs = client.post(CATEGORIES, json={"name": "Theirs"}, headers=other_headers).json()
        assert client.delete(f"{CATEGORIES}/{theirs['id']}", headers=auth_headers).status_code == 404


class TestSettings:
    def test_defaults_on_first_read(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        response = client.get(SETTINGS, headers=auth_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["theme"] == "light"
        assert data["notification_time"] == "09:00:00"
        assert data["language"] == "zh-CN"
        assert data["timezone"] == "Asia/Shanghai"

    def test_update(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        before = client.get(SETTINGS, headers=auth_headers).json()
        response = client.put(SETTINGS, json={"theme": "dark", "language": "fr-FR"}, headers=auth_headers)
        assert response.status_code == 200
        data = response.json()
        assert (data["theme"], data["language"], data["timezone"]) == ("dark", "fr-FR", "Asia/Shanghai")
        assert data["sync_version"] > before["sync_version"]

    def test_bad_theme(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        response = client.put(SETTINGS, json={"theme": "neon"}, headers=auth_headers)
        assert response.status_code == 422
