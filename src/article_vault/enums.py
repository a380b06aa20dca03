"""Enums used across the application."""

from enum import Enum


class ErrorKind(str, Enum):
    """Enumeration of the failure kinds surfaced to callers."""

    NOT_CONFIGURED = "not_configured"
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    INVALID_SLUG = "invalid_slug"
    MALFORMED_DOCUMENT = "malformed_document"
    REPOSITORY_UNAVAILABLE = "repository_unavailable"
    PUSH_FAILED = "push_failed"
    IO_FAILURE = "io_failure"
