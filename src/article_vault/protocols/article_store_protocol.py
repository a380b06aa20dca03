"""Protocol definition for the article store interface."""

from typing import List, Optional, Protocol

from article_vault.schemas import Article, ArticleFrontmatter, ArticleListItem


class ArticleStoreProtocol(Protocol):
    """Protocol for slug-addressed article storage."""

    def list_articles(self) -> List[ArticleListItem]:
        """Return list entries for every readable article, newest first."""
        ...

    def get_article(self, slug: str) -> Article:
        """Load a single article by slug."""
        ...

    def create_article(
        self, slug: str, frontmatter: ArticleFrontmatter, content: str
    ) -> Article:
        """Write a new article file for an unused slug."""
        ...

    def update_article(
        self,
        slug: str,
        new_slug: Optional[str],
        frontmatter: ArticleFrontmatter,
        content: str,
    ) -> Article:
        """Rewrite an article, renaming it first when ``new_slug`` differs."""
        ...

    def delete_article(self, slug: str) -> None:
        """Remove an article file."""
        ...
