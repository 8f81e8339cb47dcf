# blogforge/schemas/articles.py

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WritingPreferences(BaseModel):
    """Promotional guidance a user attaches to a generation request.

    Fields are deliberately loose: a malformed value must not reject the
    request, it only makes the preferences count as absent (see
    ``blogforge.utils.preferences.is_valid_preferences``).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    context: Optional[Any] = None
    explicitness: Optional[Any] = None
    user_preferences: Optional[Any] = Field(default=None, alias="userPreferences")


def _drop_malformed_preferences(value: Any) -> Any:
    # Anything that is not an object is treated as "no preferences"
    if isinstance(value, (dict, WritingPreferences)):
        return value
    return None


class SeoScore(BaseModel):
    score: int
    suggestions: List[str] = []


class GeneratedArticle(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    content: str
    keywords: List[str]
    seo_score: SeoScore = Field(alias="seoScore")


class IdeasRequest(BaseModel):
    keyword: Optional[str] = None
    preferences: Optional[WritingPreferences] = None

    @field_validator("preferences", mode="before")
    @classmethod
    def drop_malformed_preferences(cls, value: Any) -> Any:
        return _drop_malformed_preferences(value)


class GenerateArticleRequest(BaseModel):
    title: Optional[str] = None
    keyword: Optional[str] = None
    preferences: Optional[WritingPreferences] = None

    @field_validator("preferences", mode="before")
    @classmethod
    def drop_malformed_preferences(cls, value: Any) -> Any:
        return _drop_malformed_preferences(value)


class ArticleCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    content: Optional[str] = None
    keywords: List[str] = []
    seo_score: Optional[SeoScore] = Field(default=None, alias="seoScore")


class ArticleUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    content: Optional[str] = None
    keywords: Optional[List[str]] = None
    seo_score: Optional[SeoScore] = Field(default=None, alias="seoScore")


class Article(BaseModel):
    """A persisted article record."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    slug: str
    content: str
    keywords: List[str] = []
    seo_score: SeoScore = Field(alias="seoScore")
    author_id: str = Field(alias="authorId")
    created_at: datetime = Field(alias="createdAt")


class ArticleSearchResult(Article):
    excerpt: str = ""
