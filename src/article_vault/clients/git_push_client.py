"""Push executors backed by the command line git client."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from article_vault.config import GitSettings
from article_vault.errors import PushFailedError
from article_vault.protocols import PushExecutorProtocol

logger = logging.getLogger(__name__)


class GitPushClient(PushExecutorProtocol):
    """
    Push a branch by running ``git push <remote> <branch>`` in the repository.

    Credentials and transport are left entirely to the git client and whatever
    helpers it is configured with.
    """

    def __init__(self, git_executable: str = "git", timeout_seconds: float = 120.0):
        self._git_executable = git_executable
        self._timeout_seconds = timeout_seconds

    @classmethod
    def from_settings(cls, settings: GitSettings) -> GitPushClient:
        """Create a client from git settings."""
        return cls(
            git_executable=settings.git_executable,
            timeout_seconds=settings.push_timeout_seconds,
        )

    def push(self, repository_path: Path, remote: str, branch: str) -> None:
        command = [self._git_executable, "push", remote, branch]
        target = f"{remote}/{branch}"
        logger.info("Pushing %s from %s", target, repository_path)

        try:
            completed = subprocess.run(
                command,
                cwd=repository_path,
                capture_output=True,
                text=True,
                timeout=self._timeout_seconds,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            logger.error("git push to %s timed out", target)
            raise PushFailedError(
                f"Push timed out after {self._timeout_seconds:g} seconds",
                timed_out=True,
                target=target,
            ) from exc
        except OSError as exc:
            raise PushFailedError(
                f"Failed to run {self._git_executable} push: {exc}",
                target=target,
            ) from exc

        if completed.returncode != 0:
            output = (completed.stderr or completed.stdout or "").strip()
            logger.error("git push to %s failed: %s", target, output)
            raise PushFailedError(
                f"Push failed: {output}" if output else "Push failed",
                output=output,
                returncode=completed.returncode,
                target=target,
            )

        logger.info("Pushed %s", target)


@dataclass
class MockPushClient(PushExecutorProtocol):
    """Push executor used for local development and tests.

    Records every invocation and either succeeds or raises ``PushFailedError``
    with ``failure_output``.
    """

    failure_output: Optional[str] = None
    calls: List[Tuple[Path, str, str]] = field(default_factory=list)

    def push(self, repository_path: Path, remote: str, branch: str) -> None:
        self.calls.append((Path(repository_path), remote, branch))
        logger.info(
            "[MockPushClient] push(repository_path=%s, remote=%s, branch=%s)",
            repository_path,
            remote,
            branch,
        )
        if self.failure_output is not None:
            raise PushFailedError(
                f"Push failed: {self.failure_output}",
                output=self.failure_output,
                returncode=1,
                target=f"{remote}/{branch}",
            )
