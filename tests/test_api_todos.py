"""Tests for /api/v1/todos."""

from __future__ import annotations

from fastapi.testclient import TestClient

TODOS = "/api/v1/todos"


def create(client: TestClient, headers: dict[str, str], **fields) -> dict:
    fields.setdefault("title", "Buy milk")
    response = client.post(TODOS, json=fields, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


class TestCreate:
    def test_create_and_get(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        todo = create(client, auth_headers, priority=2, tags=["home", "urgent"], due_date="2025-02-01T08:00:00Z")
        assert todo["priority"] == 2
        assert todo["tags"] == ["home", "urgent"]
        assert todo["due_date"] == "2025-02-01T08:00:00.000Z"
        assert todo["sync_version"] > 0
        assert todo["is_deleted"] is False

        response = client.get(f"{TODOS}/{todo['id']}", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["title"] == "Buy milk"

    def test_priority_out_of_range(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        response = client.post(TODOS, json={"title": "x", "priority": 5}, headers=auth_headers)
        assert response.status_code == 422

    def test_unreadable_due_date_is_ignored(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        todo = create(client, auth_headers, due_date="tomorrow")
        assert todo["due_date"] is None

    def test_foreign_category(
        self, client: TestClient, auth_headers: dict[str, str], other_headers: dict[str, str]
    ) -> None:
        theirs = client.post("/api/v1/categories", json={"name": "Theirs"}, headers=other_headers).json()
        response = client.post(TODOS, json={"title": "x", "category_id": theirs["id"]}, headers=auth_headers)
        assert response.status_code == 404

    def test_deleted_category(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        old = client.post("/api/v1/categories", json={"name": "Old"}, headers=auth_headers).json()
        client.delete(f"/api/v1/categories/{old['id']}", headers=auth_headers)
        response = client.post(TODOS, json={"title": "x", "category_id": old["id"]}, headers=auth_headers)
        assert response.status_code == 404

    def test_requires_auth(self, client: TestClient) -> None:
        assert client.post(TODOS, json={"title": "x"}).status_code == 401


class TestList:
    def test_pagination_and_filters(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        for i in range(3):
            create(client, auth_headers, title=f"task {i}")
        create(client, auth_headers, title="done thing", completed=True)

        page = client.get(TODOS, params={"page": 1, "size": 2}, headers=auth_headers).json()
        assert page["total"] == 4
        assert len(page["items"]) == 2
        assert (page["page"], page["size"]) == (1, 2)

        done = client.get(TODOS, params={"completed": True}, headers=auth_headers).json()
        assert [t["title"] for t in done["items"]] == ["done thing"]

        found = client.get(TODOS, params={"q": "TASK 1"}, headers=auth_headers).json()
        assert [t["title"] for t in found["items"]] == ["task 1"]

    def test_owners_are_isolated(
        self, client: TestClient, auth_headers: dict[str, str], other_headers: dict[str, str]
    ) -> None:
        mine = create(client, auth_headers)
        assert client.get(TODOS, headers=other_headers).json()["total"] == 0
        assert client.get(f"{TODOS}/{mine['id']}", headers=other_headers).status_code == 404


class TestUpdateDelete:
    def test_patch_bumps_version(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        todo = create(client, auth_headers)
        response = client.patch(f"{TODOS}/{todo['id']}", json={"completed": True}, headers=auth_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["completed"] is True
        assert data["title"] == "Buy milk"
        assert data["sync_version"] > todo["sync_version"]

    def test_patch_priority_out_of_range(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        todo = create(client, auth_headers)
        response = client.patch(f"{TODOS}/{todo['id']}", json={"priority": -1}, headers=auth_headers)
        assert response.status_code == 422

    def test_delete_is_soft(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        todo = create(client, auth_headers)
        assert client.delete(f"{TODOS}/{todo['id']}", headers=auth_headers).status_code == 204
        assert client.get(f"{TODOS}/{todo['id']}", headers=auth_headers).status_code == 404
        assert client.get(TODOS, headers=auth_headers).json()["total"] == 0

        pulled = client.post("/api/v1/sync/pull", json={"since": 0}, headers=auth_headers).json()
        [item] = pulled["todos"]
        assert item["is_deleted"] is True
        assert item["sync_version"] > todo["sync_version"]

    def test_delete_twice(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        todo = create(client, auth_headers)
        client.delete(f"{TODOS}/{todo['id']}", headers=auth_headers)
        assert client.delete(f"{TODOS}/{todo['id']}", headers=auth_headers).status_code == 404
