"""Service for managing slug-addressed article files in the configured repository."""

import logging
from pathlib import Path
from typing import List, Optional

from article_vault.codec import decode, encode
from article_vault.errors import (
    AlreadyExistsError,
    InvalidSlugError,
    IoFailureError,
    MalformedDocumentError,
    NotConfiguredError,
    NotFoundError,
)
from article_vault.protocols import ArticleStoreProtocol
from article_vault.schemas import (
    Article,
    ArticleFrontmatter,
    ArticleListItem,
    RepositoryConfig,
)

logger = logging.getLogger(__name__)

ARTICLE_EXTENSION = ".mdx"
MAX_FILENAME_BYTES = 255


def is_valid_slug(slug: str) -> bool:
    """Return whether ``slug`` is a single safe file name stem inside the articles directory."""
    if not slug or slug.startswith(".") or Path(slug).name != slug:
        return False
    if any(char in slug for char in ("/", "\\", "\x00")):
        return False
    return len(f"{slug}{ARTICLE_EXTENSION}".encode("utf-8")) <= MAX_FILENAME_BYTES


class ArticleService(ArticleStoreProtocol):
    """
    CRUD over ``<slug>.mdx`` files directly inside the articles directory.

    The filesystem is the only source of truth; nothing is cached between
    calls. Updates that change the slug rename the file before rewriting it,
    so a failed rewrite leaves the article under the new slug with its
    previous content.
    """

    def __init__(self, config: RepositoryConfig) -> None:
        """Initialize the service with an explicit repository configuration."""
        self._config = config

    def list_articles(self) -> List[ArticleListItem]:
        """
        List articles ordered by publish time, newest first.

        Files whose front matter does not decode are skipped. A missing
        articles directory yields an empty list.
        """
        articles_dir = self._require_articles_dir("list_articles")
        if not articles_dir.is_dir():
            return []

        try:
            candidates = sorted(
                path
                for path in articles_dir.iterdir()
                if path.suffix == ARTICLE_EXTENSION
                and is_valid_slug(path.stem)
                and path.is_file()
            )
        except OSError as exc:
            raise IoFailureError(
                f"Failed to scan {articles_dir}",
                operation="list_articles",
                target=str(articles_dir),
            ) from exc

        items: List[ArticleListItem] = []
        for path in candidates:
            blob = self._read(path, "list_articles", path.stem)
            if blob is None:
                continue
            try:
                frontmatter, _ = decode(blob)
            except MalformedDocumentError as exc:
                logger.warning("Skipping malformed article %s: %s", path.name, exc)
                continue
            items.append(
                ArticleListItem(
                    slug=path.stem,
                    title=frontmatter.title,
                    pub_datetime=frontmatter.pub_datetime,
                    draft=frontmatter.draft,
                    featured=frontmatter.featured,
                    tags=frontmatter.tags,
                )
            )

        logger.debug("Listed %d article(s) from %s", len(items), articles_dir)
        items.sort(key=lambda item: item.pub_datetime, reverse=True)
        return items

    def get_article(self, slug: str) -> Article:
        """Load an article, surfacing front matter errors instead of skipping them."""
        path = self._existing_path(slug, "get_article")
        blob = self._read(path, "get_article", slug)
        if blob is None:
            raise MalformedDocumentError(
                f"Article '{slug}' is not valid UTF-8 text",
                operation="get_article",
                target=slug,
            )
        try:
            frontmatter, content = decode(blob)
        except MalformedDocumentError as exc:
            raise MalformedDocumentError(
                f"Article '{slug}' has malformed front matter: {exc.message}",
                operation="get_article",
                target=slug,
            ) from exc
        return self._build_article(slug, frontmatter, content, path)

    def create_article(
        self, slug: str, frontmatter: ArticleFrontmatter, content: str
    ) -> Article:
        """Create a new article file; the slug must not be in use."""
        path = self._article_path(slug, "create_article")
        if self._exists(path, "create_article", slug):
            raise AlreadyExistsError(
                f"Article '{slug}' already exists",
                operation="create_article",
                target=slug,
            )

        self._write(path, encode(frontmatter, content), "create_article", slug)
        logger.info("Created article %s", slug)
        return self._build_article(slug, frontmatter, content, path)

    def update_article(
        self,
        slug: str,
        new_slug: Optional[str],
        frontmatter: ArticleFrontmatter,
        content: str,
    ) -> Article:
        """Rewrite an article, renaming it first when ``new_slug`` names a different slug."""
        path = self._existing_path(slug, "update_article")

        target_slug = slug if new_slug is None else new_slug
        if target_slug != slug:
            target_path = self._article_path(target_slug, "update_article")
            if self._exists(target_path, "update_article", target_slug):
                raise AlreadyExistsError(
                    f"Article '{target_slug}' already exists",
                    operation="update_article",
                    target=target_slug,
                )
            try:
                path.rename(target_path)
            except (OSError, ValueError) as exc:
                raise IoFailureError(
                    f"Failed to rename article '{slug}' to '{target_slug}'",
                    operation="update_article",
                    target=slug,
                ) from exc
            logger.info("Renamed article %s -> %s", slug, target_slug)
            path = target_path

        self._write(path, encode(frontmatter, content), "update_article", target_slug)
        logger.info("Updated article %s", target_slug)
        return self._build_article(target_slug, frontmatter, content, path)

    def delete_article(self, slug: str) -> None:
        """Remove an article file permanently."""
        path = self._existing_path(slug, "delete_article")
        try:
            path.unlink()
        except OSError as exc:
            raise IoFailureError(
                f"Failed to delete article '{slug}'",
                operation="delete_article",
                target=slug,
            ) from exc
        logger.info("Deleted article %s", slug)

    def _require_articles_dir(self, operation: str) -> Path:
        """Return the configured articles directory or raise if unconfigured."""
        if not self._config.is_configured:
            raise NotConfiguredError("Repository not configured", operation=operation)
        return self._config.articles_dir

    def _article_path(self, slug: str, operation: str) -> Path:
        articles_dir = self._require_articles_dir(operation)
        if not is_valid_slug(slug):
            raise InvalidSlugError(
                f"Invalid article slug '{slug}'", operation=operation, target=slug
            )
        return articles_dir / f"{slug}{ARTICLE_EXTENSION}"

    def _existing_path(self, slug: str, operation: str) -> Path:
        path = self._article_path(slug, operation)
        if not self._exists(path, operation, slug):
            raise NotFoundError(
                f"Article '{slug}' not found", operation=operation, target=slug
            )
        return path

    def _exists(self, path: Path, operation: str, slug: str) -> bool:
        try:
            return path.exists()
        except (OSError, ValueError) as exc:
            raise IoFailureError(
                f"Failed to check article '{slug}'", operation=operation, target=slug
            ) from exc

    def _read(self, path: Path, operation: str, slug: str) -> Optional[str]:
        """Read a file as UTF-8; ``None`` means the bytes are not valid UTF-8."""
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            logger.warning("Article %s is not valid UTF-8", path.name)
            return None
        except OSError as exc:
            raise IoFailureError(
                f"Failed to read article '{slug}'", operation=operation, target=slug
            ) from exc

    def _write(self, path: Path, blob: str, operation: str, slug: str) -> None:
        try:
            path.write_text(blob, encoding="utf-8")
        except (OSError, ValueError) as exc:
            raise IoFailureError(
                f"Failed to write article '{slug}'", operation=operation, target=slug
            ) from exc

    def _build_article(
        self, slug: str, frontmatter: ArticleFrontmatter, content: str, path: Path
    ) -> Article:
        return Article(
            slug=slug,
            frontmatter=frontmatter,
            content=content,
            filepath=str(path.resolve()),
        )
