"""Git integration settings for the article-vault project."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GitSettings(BaseSettings):
    """Configuration for repository status, commits, and pushes."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    git_executable: str = Field(
        default="git",
        description="Command line git client used for pushes.",
        alias="ARTICLE_VAULT_GIT_EXECUTABLE",
    )
    remote_name: str = Field(
        default="origin",
        description="Remote used for pushes and for resolving the upstream branch.",
        alias="ARTICLE_VAULT_GIT_REMOTE",
    )
    push_timeout_seconds: float = Field(
        default=120.0,
        gt=0,
        description="Seconds to wait for the external push process before giving up.",
        alias="ARTICLE_VAULT_PUSH_TIMEOUT_SECONDS",
    )
    fallback_author_name: str = Field(
        default="Unknown",
        description="Commit author name used when the repository has no user.name.",
        alias="ARTICLE_VAULT_FALLBACK_AUTHOR_NAME",
    )
    fallback_author_email: str = Field(
        default="unknown@example.com",
        description="Commit author email used when the repository has no user.email.",
        alias="ARTICLE_VAULT_FALLBACK_AUTHOR_EMAIL",
    )
    use_mock_push: bool = Field(
        default=False,
        title="Use Mock Push",
        description="Record pushes in memory instead of invoking the git client.",
        alias="ARTICLE_VAULT_USE_MOCK_PUSH",
    )
