"""Service for reading and committing the version-control state of the article repository."""

from __future__ import annotations

import logging
from typing import Optional, Set

import pygit2
from pygit2.enums import FileStatus, RepositoryOpenFlag

from article_vault.config import GitSettings
from article_vault.errors import (
    IoFailureError,
    NotConfiguredError,
    PushFailedError,
    RepositoryUnavailableError,
)
from article_vault.protocols import PushExecutorProtocol, RepositoryServiceProtocol
from article_vault.schemas import RepositoryConfig, RepositoryStatus

logger = logging.getLogger(__name__)

_MODIFIED_FLAGS = FileStatus.WT_MODIFIED | FileStatus.INDEX_MODIFIED
_ADDED_FLAGS = FileStatus.WT_NEW | FileStatus.INDEX_NEW
_DELETED_FLAGS = FileStatus.WT_DELETED | FileStatus.INDEX_DELETED


class RepositoryService(RepositoryServiceProtocol):
    """
    Working-tree status, stage-all commits, and pushes for the configured repository.

    The repository is reopened on every call so results always reflect what is
    on disk. Pushing is delegated to a ``PushExecutorProtocol`` implementation.
    """

    def __init__(
        self,
        config: RepositoryConfig,
        push_client: PushExecutorProtocol,
        *,
        remote_name: str = "origin",
        fallback_author_name: str = "Unknown",
        fallback_author_email: str = "unknown@example.com",
    ) -> None:
        self._config = config
        self._push_client = push_client
        self._remote_name = remote_name
        self._fallback_author_name = fallback_author_name
        self._fallback_author_email = fallback_author_email

    @classmethod
    def from_settings(
        cls,
        config: RepositoryConfig,
        settings: GitSettings,
        push_client: PushExecutorProtocol,
    ) -> RepositoryService:
        """Create a service from the repository configuration and git settings."""
        return cls(
            config,
            push_client,
            remote_name=settings.remote_name,
            fallback_author_name=settings.fallback_author_name,
            fallback_author_email=settings.fallback_author_email,
        )

    def get_status(self) -> RepositoryStatus:
        """Classify every changed path and count commits ahead of the upstream branch."""
        repo = self._open_repository("get_status")
        head = self._resolve_head(repo, "get_status")
        branch = head.shorthand

        try:
            entries = repo.status(untracked_files="all")
        except pygit2.GitError as exc:
            raise RepositoryUnavailableError(
                "Failed to read working tree status",
                operation="get_status",
                target=self._config.repository_path,
            ) from exc

        modified: Set[str] = set()
        added: Set[str] = set()
        deleted: Set[str] = set()
        for path, flags in entries.items():
            if flags & _MODIFIED_FLAGS:
                modified.add(path)
            if flags & _ADDED_FLAGS:
                added.add(path)
            if flags & _DELETED_FLAGS:
                deleted.add(path)

        return RepositoryStatus(
            branch=branch,
            is_clean=not (modified or added or deleted),
            modified=sorted(modified),
            added=sorted(added),
            deleted=sorted(deleted),
            ahead=self._ahead_count(repo, head, branch),
        )

    def commit(self, message: str) -> str:
        """Stage all changes, including untracked and deleted paths, and commit on HEAD."""
        repo = self._open_repository("commit")
        head = self._resolve_head(repo, "commit")
        try:
            parent = head.peel(pygit2.Commit)
        except (pygit2.GitError, ValueError) as exc:
            raise RepositoryUnavailableError(
                "Failed to resolve the parent commit",
                operation="commit",
                target=head.name,
            ) from exc

        try:
            index = repo.index
            removed = [
                path
                for path, flags in repo.status(untracked_files="all").items()
                if flags & FileStatus.WT_DELETED
            ]
            index.add_all()
            for path in removed:
                if path in index:
                    index.remove(path)
            index.write()
            tree_id = index.write_tree()
        except (pygit2.GitError, OSError) as exc:
            raise IoFailureError(
                "Failed to stage changes",
                operation="commit",
                target=self._config.repository_path,
            ) from exc

        signature = self._signature(repo)
        try:
            commit_id = repo.create_commit(
                "HEAD", signature, signature, message, tree_id, [parent.id]
            )
        except pygit2.GitError as exc:
            raise IoFailureError(
                "Failed to create commit",
                operation="commit",
                target=head.shorthand,
            ) from exc

        logger.info("Committed %s on %s", commit_id, head.shorthand)
        return str(commit_id)

    def push(self) -> None:
        """Push the current branch to the configured remote through the push executor."""
        repo = self._open_repository("push")
        head = self._resolve_head(repo, "push")
        try:
            repo.remotes[self._remote_name]
        except KeyError as exc:
            raise PushFailedError(
                f"Remote '{self._remote_name}' is not configured",
                target=self._remote_name,
            ) from exc

        self._push_client.push(
            self._config.repository_root, self._remote_name, head.shorthand
        )

    def _open_repository(self, operation: str) -> pygit2.Repository:
        """Open the configured repository root without searching parent directories."""
        if not self._config.is_configured:
            raise NotConfiguredError("Repository not configured", operation=operation)

        root = self._config.repository_root
        try:
            return pygit2.Repository(str(root), flags=RepositoryOpenFlag.NO_SEARCH)
        except (pygit2.GitError, KeyError) as exc:
            raise RepositoryUnavailableError(
                f"Failed to open repository at {root}",
                operation=operation,
                target=str(root),
            ) from exc

    def _resolve_head(self, repo: pygit2.Repository, operation: str) -> pygit2.Reference:
        try:
            if repo.head_is_unborn:
                raise RepositoryUnavailableError(
                    "HEAD does not point to a commit yet",
                    operation=operation,
                    target=self._config.repository_path,
                )
            return repo.head
        except pygit2.GitError as exc:
            raise RepositoryUnavailableError(
                "Failed to resolve HEAD",
                operation=operation,
                target=self._config.repository_path,
            ) from exc

    def _ahead_count(
        self, repo: pygit2.Repository, head: pygit2.Reference, branch: str
    ) -> int:
        """Count local commits missing from ``<remote>/<branch>``; 0 when unknown."""
        upstream_name = f"refs/remotes/{self._remote_name}/{branch}"
        try:
            upstream: Optional[pygit2.Reference] = repo.references.get(upstream_name)
            if upstream is None:
                return 0
            ahead, _behind = repo.ahead_behind(head.target, upstream.resolve().target)
        except (pygit2.GitError, KeyError, ValueError) as exc:
            logger.warning("Could not compute ahead count for %s: %s", branch, exc)
            return 0
        return ahead

    def _signature(self, repo: pygit2.Repository) -> pygit2.Signature:
        """Build the commit signature from repository config, falling back to a default identity."""
        try:
            return repo.default_signature
        except (KeyError, pygit2.GitError) as exc:
            logger.debug("No default signature available: %s", exc)

        config = repo.config
        name = (
            config["user.name"]
            if "user.name" in config
            else self._fallback_author_name
        )
        email = (
            config["user.email"]
            if "user.email" in config
            else self._fallback_author_email
        )
        return pygit2.Signature(name, email)
