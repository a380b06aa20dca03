"""Unit tests for the article and git API endpoints."""

from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from article_vault import dependencies
from article_vault.api.router import router
from article_vault.clients import MockPushClient
from article_vault.schemas import RepositoryConfig

ARTICLE_PAYLOAD = {
    "slug": "hello-world",
    "frontmatter": {
        "title": "Hello World",
        "pubDatetime": "2024-01-01T09:00:00+09:00",
        "tags": ["intro"],
    },
    "content": "# Hello\n",
}


@pytest.fixture
def push_client() -> MockPushClient:
    return MockPushClient()


@pytest.fixture
def client(repository_config: RepositoryConfig, push_client: MockPushClient):
    """Create FastAPI test client bound to the fixture repository."""
    app = FastAPI()
    app.include_router(router, prefix="/api")
    app.dependency_overrides[dependencies.get_repository_config] = (
        lambda: repository_config
    )
    app.dependency_overrides[dependencies.get_push_client] = lambda: push_client

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture
def unconfigured_client():
    """Create FastAPI test client with no saved repository configuration."""
    app = FastAPI()
    app.include_router(router, prefix="/api")
    return TestClient(app)


def test_create_article_returns_201(client: TestClient, articles_dir: Path):
    """Test that creating an article writes the file and echoes it back."""
    response = client.post("/api/articles", json=ARTICLE_PAYLOAD)

    assert response.status_code == 201
    data = response.json()
    assert data["slug"] == "hello-world"
    assert data["frontmatter"]["title"] == "Hello World"
    assert data["frontmatter"]["draft"] is True
    assert data["frontmatter"]["author"] == "SHEK"
    assert data["content"] == "# Hello\n"
    assert (articles_dir / "hello-world.mdx").exists()


def test_create_duplicate_article_returns_409(client: TestClient):
    """Test that reusing a slug is rejected with a structured error."""
    client.post("/api/articles", json=ARTICLE_PAYLOAD)

    response = client.post("/api/articles", json=ARTICLE_PAYLOAD)

    assert response.status_code == 409
    detail = response.json()["detail"]
    assert detail["kind"] == "already_exists"
    assert detail["target"] == "hello-world"


def test_create_with_naive_datetime_returns_422(client: TestClient):
    """Test that request validation rejects publish times without an offset."""
    payload = {
        **ARTICLE_PAYLOAD,
        "frontmatter": {"title": "Naive", "pubDatetime": "2024-01-01T09:00:00"},
    }

    response = client.post("/api/articles", json=payload)

    assert response.status_code == 422


def test_create_with_invalid_slug_returns_422(client: TestClient):
    """Test that path-like slugs are rejected."""
    response = client.post("/api/articles", json={**ARTICLE_PAYLOAD, "slug": ".secret"})

    assert response.status_code == 422
    assert response.json()["detail"]["kind"] == "invalid_slug"


def test_list_and_get_articles(client: TestClient):
    """Test that created articles appear in the listing and can be fetched."""
    client.post("/api/articles", json=ARTICLE_PAYLOAD)

    listing = client.get("/api/articles")
    single = client.get("/api/articles/hello-world")

    assert listing.status_code == 200
    assert [item["slug"] for item in listing.json()] == ["hello-world"]
    assert listing.json()[0]["pubDatetime"] == "2024-01-01T09:00:00+09:00"
    assert "pub_datetime" not in listing.json()[0]
    assert single.status_code == 200
    assert single.json()["frontmatter"]["tags"] == ["intro"]


def test_get_missing_article_returns_404(client: TestClient):
    """Test that unknown slugs map to 404."""
    response = client.get("/api/articles/missing")

    assert response.status_code == 404
    assert response.json()["detail"]["kind"] == "not_found"


def test_update_article_renames(client: TestClient, articles_dir: Path):
    """Test that a different slug in the body renames the article."""
    client.post("/api/articles", json=ARTICLE_PAYLOAD)
    payload = {
        "slug": "renamed",
        "frontmatter": {**ARTICLE_PAYLOAD["frontmatter"], "draft": False},
        "content": "Updated",
    }

    response = client.put("/api/articles/hello-world", json=payload)

    assert response.status_code == 200
    assert response.json()["slug"] == "renamed"
    assert response.json()["frontmatter"]["draft"] is False
    assert not (articles_dir / "hello-world.mdx").exists()
    assert client.get("/api/articles/hello-world").status_code == 404


def test_delete_article_returns_204(client: TestClient):
    """Test that deleting an article removes it."""
    client.post("/api/articles", json=ARTICLE_PAYLOAD)

    response = client.delete("/api/articles/hello-world")

    assert response.status_code == 204
    assert client.get("/api/articles/hello-world").status_code == 404


def test_git_status_commit_and_push(client: TestClient, push_client: MockPushClient):
    """Test that status, commit, and push are exposed over the API."""
    client.post("/api/articles", json=ARTICLE_PAYLOAD)

    status = client.get("/api/git/status").json()
    assert status["branch"] == "main"
    assert status["added"] == ["src/data/blog/hello-world.mdx"]
    assert status["isClean"] is False

    commit = client.post("/api/git/commit", json={"message": "Add hello world"})
    assert commit.status_code == 201
    assert len(commit.json()["commit_id"]) == 40
    assert client.get("/api/git/status").json()["isClean"] is True

    push = client.post("/api/git/push")
    assert push.status_code == 502
    assert push.json()["detail"]["kind"] == "push_failed"
    assert push_client.calls == []


def test_commit_requires_message(client: TestClient):
    """Test that a blank commit message is rejected."""
    response = client.post("/api/git/commit", json={"message": "   "})

    assert response.status_code == 422


def test_unconfigured_repository_returns_409(unconfigured_client: TestClient):
    """Test that article and git endpoints fail until settings are saved."""
    assert unconfigured_client.get("/api/articles").status_code == 409
    assert unconfigured_client.get("/api/git/status").status_code == 409
    assert unconfigured_client.get("/api/settings").json()["is_configured"] is False


def test_save_settings(unconfigured_client: TestClient, repository_root: Path):
    """Test that saving valid settings configures the store."""
    response = unconfigured_client.put(
        "/api/settings",
        json={"repository_path": str(repository_root), "articles_path": "src/data/blog"},
    )

    assert response.status_code == 200
    assert response.json()["is_configured"] is True
    assert unconfigured_client.get("/api/articles").json() == []


def test_save_settings_with_missing_path_returns_409(
    unconfigured_client: TestClient, tmp_path: Path
):
    """Test that nonexistent paths cannot be saved."""
    response = unconfigured_client.put(
        "/api/settings",
        json={"repository_path": str(tmp_path / "nope"), "articles_path": "blog"},
    )

    assert response.status_code == 409
    assert response.json()["detail"]["kind"] == "not_configured"


def test_status_uses_camel_case_keys(client: TestClient):
    """Test that the status payload uses the same camelCase spelling as articles."""
    data = client.get("/api/git/status").json()

    assert data["isClean"] is True
    assert "is_clean" not in data


def test_overlong_slug_returns_422(client: TestClient):
    """Test that a slug beyond the file name limit is rejected with a structured body."""
    response = client.get(f"/api/articles/{'a' * 300}")

    assert response.status_code == 422
    assert response.json()["detail"]["kind"] == "invalid_slug"
