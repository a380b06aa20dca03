import pytest

from article_vault import dependencies


@pytest.fixture(autouse=True)
def set_intg_test_env(monkeypatch, tmp_path):
    """Setup environment variables for integration tests - pushes are mocked."""
    monkeypatch.setenv("ARTICLE_VAULT_USE_MOCK_PUSH", "true")
    monkeypatch.setenv(
        "ARTICLE_VAULT_SETTINGS_FILE", str(tmp_path / "config" / "settings.json")
    )

    dependencies.get_app_settings.cache_clear()
    dependencies.get_git_settings.cache_clear()
    yield
    dependencies.get_app_settings.cache_clear()
    dependencies.get_git_settings.cache_clear()
