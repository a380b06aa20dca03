"""Pydantic models for API request and response schemas."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from article_vault.schemas import ArticleFrontmatter


class SettingsRequest(BaseModel):
    """Request body for saving the repository configuration."""

    repository_path: str = Field(
        ..., description="Absolute path to the local repository root."
    )
    articles_path: str = Field(
        ..., description="Articles directory relative to the repository root."
    )


class ArticleCreateRequest(BaseModel):
    """Request body for creating an article."""

    slug: str = Field(..., description="Filename stem identifying the article.")
    frontmatter: ArticleFrontmatter
    content: str = Field("", description="Body text written after the header.")


class ArticleUpdateRequest(BaseModel):
    """Request body for updating and optionally renaming an article."""

    slug: Optional[str] = Field(
        None, description="New slug; the article is renamed when it differs."
    )
    frontmatter: ArticleFrontmatter
    content: str = Field("", description="Body text written after the header.")


class CommitRequest(BaseModel):
    """Request body for committing every working-tree change."""

    message: str = Field(..., description="Commit message.")

    @field_validator("message", mode="after")
    @classmethod
    def validate_message_not_empty(cls, v: str) -> str:
        """Validate that the message contains non-whitespace content."""
        if not v.strip():
            raise ValueError("Commit message is required and cannot be empty")
        return v


class CommitResponse(BaseModel):
    """Response for the commit endpoint."""

    commit_id: str


class PushResponse(BaseModel):
    """Response for the push endpoint."""

    message: str
