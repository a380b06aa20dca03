"""Service layer for the article-vault project."""

from .article_service import ArticleService
from .repository_service import RepositoryService
from .settings_service import SettingsService

__all__ = [
    "ArticleService",
    "RepositoryService",
    "SettingsService",
]
