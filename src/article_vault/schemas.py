"""Pydantic models for articles, repository status, and repository configuration."""

from pathlib import Path
from typing import List, Optional

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DEFAULT_AUTHOR = "SHEK"
DEFAULT_TIMEZONE = "Asia/Tokyo"
DEFAULT_ARTICLES_PATH = "src/data/blog"


class ArticleFrontmatter(BaseModel):
    """
    Metadata stored in the YAML header of an article file.

    Field aliases are the external key spellings written to disk and accepted
    over the API. Optional fields left as ``None`` are omitted when encoding.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str
    pub_datetime: AwareDatetime = Field(..., alias="pubDatetime")
    description: Optional[str] = None
    mod_datetime: Optional[AwareDatetime] = Field(None, alias="modDatetime")
    featured: bool = False
    draft: bool = True
    author: str = DEFAULT_AUTHOR
    tags: List[str] = Field(default_factory=list)
    dek: Optional[str] = None
    og_image: Optional[str] = Field(None, alias="ogImage")
    canonical_url: Optional[str] = Field(None, alias="canonicalURL")
    hide_edit_post: bool = Field(False, alias="hideEditPost")
    timezone: str = DEFAULT_TIMEZONE


class Article(BaseModel):
    """A fully loaded article: slug, metadata, body, and resolved file path."""

    slug: str
    frontmatter: ArticleFrontmatter
    content: str
    filepath: str


class ArticleListItem(BaseModel):
    """Reduced projection of an article used for directory listings."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    slug: str
    title: str
    pub_datetime: AwareDatetime
    draft: bool
    featured: bool
    tags: List[str]


class RepositoryStatus(BaseModel):
    """
    Working-tree status snapshot, computed fresh on every request.

    The three change collections are sets of repository-relative paths; they
    are stored sorted so responses are stable. A path may appear in more than
    one of them.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    branch: str
    is_clean: bool
    modified: List[str] = Field(default_factory=list)
    added: List[str] = Field(default_factory=list)
    deleted: List[str] = Field(default_factory=list)
    ahead: int = 0


class RepositoryConfig(BaseModel):
    """Persisted repository configuration consumed by the store and tracker."""

    repository_path: str = ""
    articles_path: str = DEFAULT_ARTICLES_PATH
    is_configured: bool = False

    @property
    def repository_root(self) -> Path:
        return Path(self.repository_path)

    @property
    def articles_dir(self) -> Path:
        return Path(self.repository_path) / self.articles_path
