"""Configuration module for the article-vault project."""

from .article_vault_settings import ArticleVaultSettings
from .git_settings import GitSettings

__all__ = [
    "ArticleVaultSettings",
    "GitSettings",
]
