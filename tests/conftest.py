"""Shared test fixtures for all test categories."""

from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import List, Optional

import pygit2
import pytest

from article_vault.schemas import ArticleFrontmatter, RepositoryConfig

ARTICLES_PATH = "src/data/blog"
JST = timezone(timedelta(hours=9))


def commit_all(repo: pygit2.Repository, message: str) -> pygit2.Oid:
    """Stage every file in the working tree and commit it on HEAD."""
    repo.index.add_all()
    repo.index.write()
    tree = repo.index.write_tree()
    signature = pygit2.Signature("Test Author", "author@example.com")
    parents: List[pygit2.Oid] = [] if repo.head_is_unborn else [repo.head.target]
    return repo.create_commit("HEAD", signature, signature, message, tree, parents)


def _make_frontmatter(
    title: str = "Hello World",
    pub_datetime: Optional[datetime] = None,
    **kwargs,
) -> ArticleFrontmatter:
    """Build front matter with a fixed publish time unless one is given."""
    return ArticleFrontmatter(
        title=title,
        pub_datetime=pub_datetime or datetime(2024, 1, 1, 9, 0, tzinfo=JST),
        **kwargs,
    )


# =============================================================================
# Repository Fixtures
# =============================================================================


@pytest.fixture
def repository_root(tmp_path: Path) -> Path:
    """Create a git repository with an articles directory and one commit on main."""
    root = tmp_path / "blog"
    (root / ARTICLES_PATH).mkdir(parents=True)
    (root / "README.md").write_text("# Blog\n", encoding="utf-8")

    repo = pygit2.init_repository(str(root), initial_head="main")
    repo.config["user.name"] = "Test Author"
    repo.config["user.email"] = "author@example.com"
    commit_all(repo, "Initial commit")
    return root


@pytest.fixture
def git_repo(repository_root: Path) -> pygit2.Repository:
    """Open the fixture repository for direct inspection."""
    return pygit2.Repository(str(repository_root))


@pytest.fixture
def articles_dir(repository_root: Path) -> Path:
    return repository_root / ARTICLES_PATH


@pytest.fixture
def repository_config(repository_root: Path) -> RepositoryConfig:
    """Return a configured record pointing at the fixture repository."""
    return RepositoryConfig(
        repository_path=str(repository_root),
        articles_path=ARTICLES_PATH,
        is_configured=True,
    )


@pytest.fixture
def frontmatter() -> ArticleFrontmatter:
    return _make_frontmatter()


@pytest.fixture
def make_frontmatter():
    """Provide a factory for front matter with a fixed default publish time."""
    return _make_frontmatter
