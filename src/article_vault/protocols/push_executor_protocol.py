"""Protocol definition for pushing commits through an external git client."""

from pathlib import Path
from typing import Protocol


class PushExecutorProtocol(Protocol):
    """Capability that pushes a branch of a local repository to a remote."""

    def push(self, repository_path: Path, remote: str, branch: str) -> None:
        """
        Push ``branch`` of the repository at ``repository_path`` to ``remote``.

        Raises:
            PushFailedError: If the push does not complete successfully.
        """
        ...
