"""Translation of structured service errors into HTTP responses."""

from fastapi import HTTPException

from article_vault.enums import ErrorKind
from article_vault.errors import ArticleVaultError

STATUS_CODES = {
    ErrorKind.NOT_CONFIGURED: 409,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.ALREADY_EXISTS: 409,
    ErrorKind.INVALID_SLUG: 422,
    ErrorKind.MALFORMED_DOCUMENT: 422,
    ErrorKind.REPOSITORY_UNAVAILABLE: 503,
    ErrorKind.PUSH_FAILED: 502,
    ErrorKind.IO_FAILURE: 500,
}


def to_http_exception(error: ArticleVaultError) -> HTTPException:
    """Render a service error as an ``HTTPException`` carrying its structured fields."""
    return HTTPException(
        status_code=STATUS_CODES.get(error.kind, 500),
        detail=error.to_dict(),
    )
