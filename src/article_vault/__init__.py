"""Article Vault - slug-addressed MDX articles and git state for a local blog repository."""

from article_vault.errors import ArticleVaultError
from article_vault.schemas import (
    Article,
    ArticleFrontmatter,
    ArticleListItem,
    RepositoryConfig,
    RepositoryStatus,
)

__all__ = [
    "Article",
    "ArticleFrontmatter",
    "ArticleListItem",
    "ArticleVaultError",
    "RepositoryConfig",
    "RepositoryStatus",
]
