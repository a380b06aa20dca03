"""Tests for the JSON-backed SettingsService."""

import json
from pathlib import Path

import pytest

from article_vault.config import ArticleVaultSettings
from article_vault.errors import IoFailureError, NotConfiguredError
from article_vault.schemas import DEFAULT_ARTICLES_PATH
from article_vault.services import SettingsService


@pytest.fixture
def settings_file(tmp_path: Path) -> Path:
    return tmp_path / "config" / "settings.json"


@pytest.fixture
def settings_service(settings_file: Path) -> SettingsService:
    return SettingsService(settings_file)


def test_load_without_file_returns_unconfigured_default(
    settings_service: SettingsService,
) -> None:
    """A missing settings file should yield an unconfigured record."""
    config = settings_service.load()

    assert config.is_configured is False
    assert config.repository_path == ""
    assert config.articles_path == DEFAULT_ARTICLES_PATH


def test_save_then_load_round_trips(
    settings_service: SettingsService, settings_file: Path, repository_root: Path
) -> None:
    """Saved settings should be persisted as JSON and marked configured."""
    saved = settings_service.save(str(repository_root), "src/data/blog")
    loaded = settings_service.load()

    assert saved.is_configured is True
    assert loaded == saved
    data = json.loads(settings_file.read_text(encoding="utf-8"))
    assert data == {
        "repository_path": str(repository_root),
        "articles_path": "src/data/blog",
        "is_configured": True,
    }


def test_save_rejects_missing_repository(
    settings_service: SettingsService, settings_file: Path, tmp_path: Path
) -> None:
    """A repository path that does not exist should not be saved."""
    with pytest.raises(NotConfiguredError):
        settings_service.save(str(tmp_path / "missing"), "src/data/blog")

    assert not settings_file.exists()


def test_save_rejects_missing_articles_directory(
    settings_service: SettingsService, repository_root: Path
) -> None:
    """The articles directory must already exist inside the repository."""
    with pytest.raises(NotConfiguredError):
        settings_service.save(str(repository_root), "content/posts")


def test_load_corrupt_file_raises(
    settings_service: SettingsService, settings_file: Path
) -> None:
    """An unreadable settings file should be reported as an I/O failure."""
    settings_file.parent.mkdir(parents=True)
    settings_file.write_text("{not json", encoding="utf-8")

    with pytest.raises(IoFailureError):
        settings_service.load()


def test_from_settings_uses_environment(monkeypatch, tmp_path: Path) -> None:
    """Settings file location and default articles path come from the environment."""
    monkeypatch.setenv("ARTICLE_VAULT_SETTINGS_FILE", str(tmp_path / "s.json"))
    monkeypatch.setenv("ARTICLE_VAULT_DEFAULT_ARTICLES_PATH", "content/blog")

    service = SettingsService.from_settings(ArticleVaultSettings())

    assert service.settings_file == tmp_path / "s.json"
    assert service.load().articles_path == "content/blog"
