"""Main application configuration for the article-vault project."""

from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _default_settings_file() -> Path:
    return Path.home() / ".config" / "article-vault" / "settings.json"


class ArticleVaultSettings(BaseSettings):
    """The configurable fields for the article-vault application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    debug: bool = Field(
        default=False,
        title="Debug Mode",
        description="Enable verbose behaviour for development and testing.",
        alias="ARTICLE_VAULT_DEBUG_MODE",
    )
    settings_file: Path = Field(
        default_factory=_default_settings_file,
        title="Settings File",
        description="JSON file holding the persisted repository configuration.",
        alias="ARTICLE_VAULT_SETTINGS_FILE",
    )
    default_articles_path: str = Field(
        default="src/data/blog",
        title="Default Articles Path",
        description="Articles directory, relative to the repository root, used before one is saved.",
        alias="ARTICLE_VAULT_DEFAULT_ARTICLES_PATH",
    )

    @field_validator("debug", mode="before")
    @classmethod
    def parse_debug(cls, value: Any) -> bool:
        """Ensure debug is parsed as a boolean from string."""
        if isinstance(value, str):
            return value.lower() in {"true", "1", "yes", "on"}
        return bool(value)

    @field_validator("settings_file", mode="after")
    @classmethod
    def expand_settings_file(cls, value: Path) -> Path:
        """Expand a leading ``~`` so the path can come straight from the environment."""
        return value.expanduser()
