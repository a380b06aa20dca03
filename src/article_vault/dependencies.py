"""Central dependency injection hub for article-vault using FastAPI's Depends mechanism."""

from functools import lru_cache

from fastapi import Depends

from article_vault.api.errors import to_http_exception
from article_vault.clients import GitPushClient, MockPushClient
from article_vault.config import ArticleVaultSettings, GitSettings
from article_vault.errors import ArticleVaultError
from article_vault.protocols import (
    ArticleStoreProtocol,
    PushExecutorProtocol,
    RepositoryServiceProtocol,
)
from article_vault.schemas import RepositoryConfig
from article_vault.services import ArticleService, RepositoryService, SettingsService

# ============================================================================
# Configuration Providers
# ============================================================================


@lru_cache()
def get_app_settings() -> ArticleVaultSettings:
    """Get the application settings singleton."""
    return ArticleVaultSettings()


@lru_cache()
def get_git_settings() -> GitSettings:
    """Get the git settings singleton."""
    return GitSettings()


# ============================================================================
# Repository Configuration
# ============================================================================


def get_settings_service(
    settings: ArticleVaultSettings = Depends(get_app_settings),
) -> SettingsService:
    """
    Get the settings service that persists the repository configuration.

    Args:
        settings: Application settings containing the settings file location

    Returns:
        SettingsService bound to the configured settings file
    """
    return SettingsService.from_settings(settings)


def get_repository_config(
    settings_service: SettingsService = Depends(get_settings_service),
) -> RepositoryConfig:
    """
    Load the repository configuration for the current request.

    The record is re-read on every request so a saved configuration takes
    effect immediately.

    Raises:
        HTTPException: If the settings file exists but cannot be read
    """
    try:
        return settings_service.load()
    except ArticleVaultError as exc:
        raise to_http_exception(exc) from exc


# ============================================================================
# Client Providers
# ============================================================================


def get_push_client(
    git_settings: GitSettings = Depends(get_git_settings),
) -> PushExecutorProtocol:
    """
    Get the push executor.

    Args:
        git_settings: Git settings for mock configuration and timeouts

    Returns:
        Push executor (mock or real based on settings)
    """
    if git_settings.use_mock_push:
        return MockPushClient()

    return GitPushClient.from_settings(git_settings)


# ============================================================================
# Service Providers
# ============================================================================


def get_article_service(
    config: RepositoryConfig = Depends(get_repository_config),
) -> ArticleStoreProtocol:
    """
    Get the article store.

    Args:
        config: Repository configuration supplying the articles directory

    Returns:
        ArticleService bound to the configured articles directory
    """
    return ArticleService(config)


def get_repository_service(
    config: RepositoryConfig = Depends(get_repository_config),
    git_settings: GitSettings = Depends(get_git_settings),
    push_client: PushExecutorProtocol = Depends(get_push_client),
) -> RepositoryServiceProtocol:
    """
    Get the repository state tracker.

    Args:
        config: Repository configuration supplying the repository root
        git_settings: Remote name and fallback commit identity
        push_client: Executor used for pushes

    Returns:
        RepositoryService bound to the configured repository root
    """
    return RepositoryService.from_settings(config, git_settings, push_client)
