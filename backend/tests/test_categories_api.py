"""Tests for /categories endpoints (stubbed repository)."""

from dataclasses import dataclass, field

import pytest
from fastapi.testclient import TestClient

from shabelingo.main import app
from shabelingo.models import Category, CategoryCreate
from shabelingo.repositories import CategoryNotFoundError


@dataclass
class StubCategoryRepo:
    categories: dict[str, Category] = field(default_factory=dict)

    def list_by_user(self, user_id: str) -> list[Category]:
        owned = [c for c in self.categories.values() if c.userId == user_id]
        return sorted(owned, key=lambda c: c.createdAt)

    def create(self, user_id: str, category_create: CategoryCreate) -> Category:
        category = Category(userId=user_id, **category_create.model_dump())
        self.categories[category.id] = category
        return category

    def delete(self, category_id: str, user_id: str) -> None:
        category = self.categories.get(category_id)
        if category is None or category.userId != user_id:
            raise CategoryNotFoundError("not found")
        del self.categories[category_id]


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def repo(monkeypatch):
    from shabelingo.routers import categories as categories_router

    stub = StubCategoryRepo()
    stub.categories = {
        "greetings": Category(id="greetings", userId="user-1", name="Greetings", createdAt=2, updatedAt=2),
        "food": Category(id="food", userId="user-1", name="Food", color="#ff8800", createdAt=1, updatedAt=1),
        "theirs": Category(id="theirs", userId="user-2", name="Travel", createdAt=3, updatedAt=3),
    }
    monkeypatch.setattr(categories_router, "get_category_repository", lambda: stub)
    return stub


class TestListCategories:
    def test_lists_own_categories_oldest_first(self, client, repo):
        resp = client.get("/categories", headers={"X-User-Id": "user-1"})

        assert resp.status_code == 200
        data = resp.json()
        assert data["count"] == 2
        assert [c["id"] for c in data["categories"]] == ["food", "greetings"]
        assert data["categories"][0]["color"] == "#ff8800"

    def test_requires_user_header(self, client, repo):
        assert client.get("/categories").status_code == 422


class TestCreateCategory:
    def test_create_defaults_color(self, client, repo):
        resp = client.post("/categories", json={"name": "Verbs"}, headers={"X-User-Id": "user-1"})

        assert resp.status_code == 201
        body = resp.json()
        assert body["name"] == "Verbs"
        assert body["color"] == "#9d4edd"
        assert body["userId"] == "user-1"
        assert body["id"] in repo.categories

    def test_create_with_color(self, client, repo):
        resp = client.post(
            "/categories",
            json={"name": "Verbs", "color": "#00AA11"},
            headers={"X-User-Id": "user-1"},
        )
        assert resp.status_code == 201
        assert resp.json()["color"] == "#00AA11"

    @pytest.mark.parametrize("payload", [{"name": ""}, {}, {"name": "Verbs", "color": "purple"}])
    def test_create_rejects_invalid_payload(self, client, repo, payload):
        resp = client.post("/categories", json=payload, headers={"X-User-Id": "user-1"})
        assert resp.status_code == 422


class TestDeleteCategory:
    def test_delete(self, client, repo):
        resp = client.delete("/categories/food", headers={"X-User-Id": "user-1"})

        assert resp.status_code == 204
        assert "food" not in repo.categories

    def test_delete_missing(self, client, repo):
        resp = client.delete("/categories/missing", headers={"X-User-Id": "user-1"})
        assert resp.status_code == 404

    def test_cannot_delete_another_users_category(self, client, repo):
        resp = client.delete("/categories/theirs", headers={"X-User-Id": "user-1"})

        assert resp.status_code == 404
        assert "theirs" in repo.categories
