"""Encode and decode article files: a ``---`` delimited YAML header followed by the body."""

import re
from typing import Tuple

import yaml
from pydantic import ValidationError

from article_vault.errors import MalformedDocumentError
from article_vault.schemas import ArticleFrontmatter

HEADER_DELIMITER = "---"

_HEADER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(?P<header>.*?)^---[ \t]*(?:\r?\n|\Z)",
    re.DOTALL | re.MULTILINE,
)


def decode(blob: str) -> Tuple[ArticleFrontmatter, str]:
    """
    Split an article blob into validated metadata and body text.

    The body is the text after the closing delimiter, minus the single blank
    separator line that ``encode`` writes.

    Raises:
        MalformedDocumentError: If the header is missing, is not a YAML
            mapping, or fails validation.
    """
    match = _HEADER_PATTERN.match(blob)
    if match is None:
        raise MalformedDocumentError("No front matter found", operation="decode")

    try:
        data = yaml.safe_load(match.group("header"))
    except yaml.YAMLError as exc:
        raise MalformedDocumentError(
            "Front matter is not valid YAML", operation="decode"
        ) from exc

    if not isinstance(data, dict):
        raise MalformedDocumentError(
            "Front matter must be a mapping of fields", operation="decode"
        )

    try:
        frontmatter = ArticleFrontmatter.model_validate(data)
    except ValidationError as exc:
        raise MalformedDocumentError(
            f"Failed to parse front matter: {exc.error_count()} invalid field(s)",
            operation="decode",
        ) from exc

    body = blob[match.end() :]
    if body.startswith("\r\n"):
        body = body[2:]
    elif body.startswith("\n"):
        body = body[1:]
    return frontmatter, body


def encode(frontmatter: ArticleFrontmatter, body: str) -> str:
    """Serialize metadata and body into the on-disk article format."""
    data = frontmatter.model_dump(mode="json", by_alias=True, exclude_none=True)
    header = yaml.safe_dump(
        data,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )
    return f"{HEADER_DELIMITER}\n{header}{HEADER_DELIMITER}\n\n{body}"
