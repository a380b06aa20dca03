"""Structured error hierarchy shared by the article store and repository tracker."""

from __future__ import annotations

from typing import Any

from article_vault.enums import ErrorKind


class ArticleVaultError(RuntimeError):
    """Base class for every failure surfaced across the service boundary.

    Each subclass pins an ``ErrorKind`` tag. Instances carry the operation that
    failed and the slug or path it was acting on; the underlying library error,
    when there is one, is chained as ``__cause__``.
    """

    kind: ErrorKind = ErrorKind.IO_FAILURE

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = None,
        target: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.target = target

    @property
    def detail(self) -> str | None:
        """Return the text of the chained cause, if any."""
        cause = self.__cause__
        if cause is None:
            return None
        return str(cause) or cause.__class__.__name__

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "operation": self.operation,
            "target": self.target,
            "detail": self.detail,
        }


class NotConfiguredError(ArticleVaultError):
    """Raised when the repository configuration is incomplete or its paths are invalid."""

    kind = ErrorKind.NOT_CONFIGURED


class NotFoundError(ArticleVaultError):
    """Raised when no article file exists for the requested slug."""

    kind = ErrorKind.NOT_FOUND


class AlreadyExistsError(ArticleVaultError):
    """Raised when a create or rename would collide with an existing slug."""

    kind = ErrorKind.ALREADY_EXISTS


class InvalidSlugError(ArticleVaultError):
    """Raised when a slug is not a single safe filename stem."""

    kind = ErrorKind.INVALID_SLUG


class MalformedDocumentError(ArticleVaultError):
    """Raised when the front matter header is missing or fails validation."""

    kind = ErrorKind.MALFORMED_DOCUMENT


class RepositoryUnavailableError(ArticleVaultError):
    """Raised when the repository cannot be opened or HEAD cannot be resolved."""

    kind = ErrorKind.REPOSITORY_UNAVAILABLE


class PushFailedError(ArticleVaultError):
    """Raised when the external push process fails, times out, or cannot start."""

    kind = ErrorKind.PUSH_FAILED

    def __init__(
        self,
        message: str,
        *,
        output: str = "",
        returncode: int | None = None,
        timed_out: bool = False,
        operation: str | None = "push",
        target: str | None = None,
    ) -> None:
        super().__init__(message, operation=operation, target=target)
        self.output = output
        self.returncode = returncode
        self.timed_out = timed_out

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update(
            {
                "output": self.output,
                "returncode": self.returncode,
                "timed_out": self.timed_out,
            }
        )
        return data


class IoFailureError(ArticleVaultError):
    """Raised for filesystem or repository write errors not otherwise classified."""

    kind = ErrorKind.IO_FAILURE


__all__ = [
    "AlreadyExistsError",
    "ArticleVaultError",
    "InvalidSlugError",
    "IoFailureError",
    "MalformedDocumentError",
    "NotConfiguredError",
    "NotFoundError",
    "PushFailedError",
    "RepositoryUnavailableError",
]
