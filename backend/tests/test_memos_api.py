"""Tests for /memos endpoints and app-level routes (stubbed repository)."""

from dataclasses import dataclass, field

import pytest
from fastapi.testclient import TestClient

from shabelingo.main import app
from shabelingo.models import Memo, MemoCreate, MemoUpdate
from shabelingo.repositories import MemoNotFoundError


@dataclass
class StubMemoRepo:
    memos: dict[str, Memo] = field(default_factory=dict)

    def list_by_user(self, user_id: str) -> list[Memo]:
        return [m for m in self.memos.values() if m.userId == user_id]

    def get_by_id(self, memo_id: str, user_id: str) -> Memo:
        memo = self.memos.get(memo_id)
        if memo is None or memo.userId != user_id:
            raise MemoNotFoundError("not found")
        return memo

    def create(self, user_id: str, memo_create: MemoCreate) -> Memo:
        memo = Memo(userId=user_id, **memo_create.model_dump())
        self.memos[memo.id] = memo
        return memo

    def update(self, memo_id: str, user_id: str, memo_update: MemoUpdate) -> Memo:
        memo = self.get_by_id(memo_id, user_id)
        for key, value in memo_update.model_dump(exclude_unset=True).items():
            setattr(memo, key, value)
        return memo

    def delete(self, memo_id: str, user_id: str) -> None:
        self.get_by_id(memo_id, user_id)
        del self.memos[memo_id]


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def repo(monkeypatch):
    from shabelingo.routers import memos as memos_router

    stub = StubMemoRepo()
    monkeypatch.setattr(memos_router, "get_memo_repository", lambda: stub)
    return stub


class TestAppRoutes:
    def test_healthz(self, client):
        response = client.get("/healthz")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_root_lists_endpoints(self, client):
        response = client.get("/")
        assert response.status_code == 200
        endpoints = response.json()["endpoints"]
        assert "review_session" in endpoints
        assert endpoints["categories"] == "/categories"


class TestMemoCrud:
    def test_create_applies_review_defaults(self, client, repo):
        resp = client.post(
            "/memos",
            json={"originalText": "gracias", "translatedText": "thank you", "evaluationText": "gracias"},
            headers={"X-User-Id": "user-1"},
        )
        assert resp.status_code == 201
        data = resp.json()
        assert data["userId"] == "user-1"
        assert data["status"] == "new"
        assert data["interval"] == 0
        assert data["easeFactor"] == 2.5
        assert data["reviewCount"] == 0
        assert data["lastReviewDate"] is None
        assert data["nextReviewDate"] >= data["createdAt"]

    def test_create_requires_text(self, client, repo):
        resp = client.post("/memos", json={"originalText": ""}, headers={"X-User-Id": "user-1"})
        assert resp.status_code == 422

    def test_requires_user_header(self, client, repo):
        assert client.get("/memos").status_code == 422

    def test_list_only_own_memos(self, client, repo):
        repo.create("user-1", MemoCreate(originalText="uno"))
        repo.create("user-2", MemoCreate(originalText="dos"))

        resp = client.get("/memos", headers={"X-User-Id": "user-1"})

        assert resp.status_code == 200
        assert resp.json()["count"] == 1
        assert resp.json()["memos"][0]["originalText"] == "uno"

    def test_get_update_delete(self, client, repo):
        memo = repo.create("user-1", MemoCreate(originalText="hola"))
        headers = {"X-User-Id": "user-1"}

        assert client.get(f"/memos/{memo.id}", headers=headers).json()["originalText"] == "hola"

        resp = client.put(f"/memos/{memo.id}", json={"note": "greeting"}, headers=headers)
        assert resp.status_code == 200
        assert resp.json()["note"] == "greeting"
        assert resp.json()["originalText"] == "hola"

        assert client.delete(f"/memos/{memo.id}", headers=headers).status_code == 204
        assert client.get(f"/memos/{memo.id}", headers=headers).status_code == 404

    def test_update_cannot_touch_review_state(self, client, repo):
        memo = repo.create("user-1", MemoCreate(originalText="hola"))
        resp = client.put(
            f"/memos/{memo.id}",
            json={"interval": 99, "status": "remembered"},
            headers={"X-User-Id": "user-1"},
        )
        assert resp.status_code == 200
        assert resp.json()["interval"] == 0
        assert resp.json()["status"] == "new"

    def test_missing_memo_404(self, client, repo):
        headers = {"X-User-Id": "user-1"}
        assert client.get("/memos/nope", headers=headers).status_code == 404
        assert client.put("/memos/nope", json={"note": "x"}, headers=headers).status_code == 404
        assert client.delete("/memos/nope", headers=headers).status_code == 404
