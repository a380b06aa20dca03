"""Client modules for external collaborators."""

from .git_push_client import GitPushClient, MockPushClient

__all__ = [
    "GitPushClient",
    "MockPushClient",
]
