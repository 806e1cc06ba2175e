"""Pydantic schemas for the articles module."""

from pydantic import BaseModel, ConfigDict, field_validator


class ArticleCreate(BaseModel):
    """Request body for creating an article. Unknown keys (including id/timestamp) are ignored."""
    model_config = ConfigDict(extra="ignore")

    title: str = ""
    subtitle: str = ""
    content: str = ""

    @field_validator("title", "subtitle", "content", mode="before")
    @classmethod
    def null_as_empty(cls, value):
        return "" if value is None else value


class Article(BaseModel):
    """A stored article. Never mutated after creation."""
    model_config = ConfigDict(frozen=True)

    title: str = ""
    subtitle: str = ""
    id: str = ""
    content: str = ""
    timestamp: str = ""
