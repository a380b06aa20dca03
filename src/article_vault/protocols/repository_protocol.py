"""Protocol definition for the repository state tracker."""

from typing import Protocol

from article_vault.schemas import RepositoryStatus


class RepositoryServiceProtocol(Protocol):
    """Protocol for reading and mutating the working tree's version-control state."""

    def get_status(self) -> RepositoryStatus:
        """Compute branch, change sets, and ahead-count for the working tree."""
        ...

    def commit(self, message: str) -> str:
        """Stage every change, commit on the current branch, and return the commit id."""
        ...

    def push(self) -> None:
        """Push the current branch to the configured remote."""
        ...
