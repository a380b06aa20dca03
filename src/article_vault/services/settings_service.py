"""Service for persisting and validating the repository configuration record."""

import logging
from pathlib import Path

from pydantic import ValidationError

from article_vault.config import ArticleVaultSettings
from article_vault.errors import IoFailureError, NotConfiguredError
from article_vault.schemas import DEFAULT_ARTICLES_PATH, RepositoryConfig

logger = logging.getLogger(__name__)


class SettingsService:
    """Read and write the repository configuration stored as a JSON file."""

    def __init__(
        self,
        settings_file: Path,
        default_articles_path: str = DEFAULT_ARTICLES_PATH,
    ) -> None:
        self._settings_file = settings_file
        self._default_articles_path = default_articles_path

    @classmethod
    def from_settings(cls, settings: ArticleVaultSettings) -> "SettingsService":
        """Create a service from application settings."""
        return cls(
            settings_file=settings.settings_file,
            default_articles_path=settings.default_articles_path,
        )

    @property
    def settings_file(self) -> Path:
        return self._settings_file

    def load(self) -> RepositoryConfig:
        """Return the persisted configuration, or an unconfigured default if none is saved."""
        if not self._settings_file.exists():
            return RepositoryConfig(articles_path=self._default_articles_path)

        try:
            raw = self._settings_file.read_text(encoding="utf-8")
            return RepositoryConfig.model_validate_json(raw)
        except (OSError, ValidationError) as exc:
            raise IoFailureError(
                f"Failed to read settings from {self._settings_file}",
                operation="load_settings",
                target=str(self._settings_file),
            ) from exc

    def save(self, repository_path: str, articles_path: str) -> RepositoryConfig:
        """
        Validate and persist a repository configuration.

        Both the repository root and ``<repository>/<articles_path>`` must
        already exist; the saved record is marked configured.

        Raises:
            NotConfiguredError: If either path does not exist.
            IoFailureError: If the settings file cannot be written.
        """
        repository_root = Path(repository_path)
        if not repository_root.exists():
            raise NotConfiguredError(
                f"Repository path does not exist: {repository_path}",
                operation="save_settings",
                target=repository_path,
            )

        articles_dir = repository_root / articles_path
        if not articles_dir.exists():
            raise NotConfiguredError(
                f"Articles path does not exist: {articles_dir}",
                operation="save_settings",
                target=str(articles_dir),
            )

        config = RepositoryConfig(
            repository_path=repository_path,
            articles_path=articles_path,
            is_configured=True,
        )
        try:
            self._settings_file.parent.mkdir(parents=True, exist_ok=True)
            self._settings_file.write_text(
                config.model_dump_json(indent=2), encoding="utf-8"
            )
        except OSError as exc:
            raise IoFailureError(
                f"Failed to save settings to {self._settings_file}",
                operation="save_settings",
                target=str(self._settings_file),
            ) from exc

        logger.info("Saved repository settings for %s", repository_path)
        return config
