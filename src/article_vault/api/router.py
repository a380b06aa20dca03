"""API endpoints for repository settings, articles, and git state."""

from typing import List

from fastapi import APIRouter, Depends, Response

from article_vault import dependencies
from article_vault.api.errors import to_http_exception
from article_vault.api.schemas import (
    ArticleCreateRequest,
    ArticleUpdateRequest,
    CommitRequest,
    CommitResponse,
    PushResponse,
    SettingsRequest,
)
from article_vault.errors import ArticleVaultError
from article_vault.protocols import ArticleStoreProtocol, RepositoryServiceProtocol
from article_vault.schemas import (
    Article,
    ArticleListItem,
    RepositoryConfig,
    RepositoryStatus,
)
from article_vault.services import SettingsService

router = APIRouter()


# Settings
@router.get("/settings", response_model=RepositoryConfig)
def get_settings(
    config: RepositoryConfig = Depends(dependencies.get_repository_config),
) -> RepositoryConfig:
    """Return the persisted repository configuration."""
    return config


@router.put("/settings", response_model=RepositoryConfig)
def save_settings(
    request: SettingsRequest,
    settings_service: SettingsService = Depends(dependencies.get_settings_service),
) -> RepositoryConfig:
    """
    Validate and persist the repository configuration.

    Raises:
        HTTPException: 409 if either path does not exist on disk
    """
    try:
        return settings_service.save(request.repository_path, request.articles_path)
    except ArticleVaultError as exc:
        raise to_http_exception(exc) from exc


# Articles
@router.get("/articles", response_model=List[ArticleListItem])
def list_articles(
    store: ArticleStoreProtocol = Depends(dependencies.get_article_service),
) -> List[ArticleListItem]:
    """List articles newest first; unreadable files are skipped."""
    try:
        return store.list_articles()
    except ArticleVaultError as exc:
        raise to_http_exception(exc) from exc


@router.get("/articles/{slug}", response_model=Article)
def get_article(
    slug: str,
    store: ArticleStoreProtocol = Depends(dependencies.get_article_service),
) -> Article:
    try:
        return store.get_article(slug)
    except ArticleVaultError as exc:
        raise to_http_exception(exc) from exc


@router.post("/articles", response_model=Article, status_code=201)
def create_article(
    request: ArticleCreateRequest,
    store: ArticleStoreProtocol = Depends(dependencies.get_article_service),
) -> Article:
    """
    Create a new article file.

    Args:
        request: Slug, front matter, and body of the new article
        store: Article store dependency

    Returns:
        The created article including its resolved file path

    Raises:
        HTTPException: 409 if the slug is taken, 422 if it is not a safe filename
    """
    try:
        return store.create_article(request.slug, request.frontmatter, request.content)
    except ArticleVaultError as exc:
        raise to_http_exception(exc) from exc


@router.put("/articles/{slug}", response_model=Article)
def update_article(
    slug: str,
    request: ArticleUpdateRequest,
    store: ArticleStoreProtocol = Depends(dependencies.get_article_service),
) -> Article:
    """
    Rewrite an article, renaming it when the body carries a different slug.

    Raises:
        HTTPException: 404 if the article is missing, 409 if the new slug is taken
    """
    try:
        return store.update_article(
            slug, request.slug, request.frontmatter, request.content
        )
    except ArticleVaultError as exc:
        raise to_http_exception(exc) from exc


@router.delete("/articles/{slug}", status_code=204)
def delete_article(
    slug: str,
    store: ArticleStoreProtocol = Depends(dependencies.get_article_service),
) -> Response:
    try:
        store.delete_article(slug)
    except ArticleVaultError as exc:
        raise to_http_exception(exc) from exc
    return Response(status_code=204)


# Git
@router.get("/git/status", response_model=RepositoryStatus)
def get_status(
    tracker: RepositoryServiceProtocol = Depends(dependencies.get_repository_service),
) -> RepositoryStatus:
    """Return a fresh working-tree status snapshot."""
    try:
        return tracker.get_status()
    except ArticleVaultError as exc:
        raise to_http_exception(exc) from exc


@router.post("/git/commit", response_model=CommitResponse, status_code=201)
def commit(
    request: CommitRequest,
    tracker: RepositoryServiceProtocol = Depends(dependencies.get_repository_service),
) -> CommitResponse:
    """
    Stage every change and record a commit on the current branch.

    Returns:
        CommitResponse with the hex id of the new commit
    """
    try:
        commit_id = tracker.commit(request.message)
    except ArticleVaultError as exc:
        raise to_http_exception(exc) from exc
    return CommitResponse(commit_id=commit_id)


@router.post("/git/push", response_model=PushResponse)
def push(
    tracker: RepositoryServiceProtocol = Depends(dependencies.get_repository_service),
) -> PushResponse:
    """
    Push the current branch to its remote.

    Raises:
        HTTPException: 502 with the captured push output when the push fails
    """
    try:
        tracker.push()
    except ArticleVaultError as exc:
        raise to_http_exception(exc) from exc
    return PushResponse(message="Pushed successfully")
