"""Protocol definitions for core interfaces maintained in this package."""

from .article_store_protocol import ArticleStoreProtocol
from .push_executor_protocol import PushExecutorProtocol
from .repository_protocol import RepositoryServiceProtocol

__all__ = [
    "ArticleStoreProtocol",
    "PushExecutorProtocol",
    "RepositoryServiceProtocol",
]
