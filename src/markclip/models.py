# -*- coding: utf-8 -*-
"""
Pydantic data models for the API.
"""
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ArticleMetadata(BaseModel):
    """Page metadata record. Unknown fields are kept and can be used as placeholders."""

    model_config = ConfigDict(extra="allow")

    pageTitle: str = ""
    title: str | None = None
    byline: str | None = None
    excerpt: str | None = None
    baseURI: str | None = None
    hostname: str | None = None
    keywords: list[str] | str | None = None

    def to_record(self) -> dict[str, Any]:
        """Plain mapping for the template renderer (unset fields omitted)."""
        return self.model_dump(exclude_none=True)


class NormalizeRequest(BaseModel):
    """Normalization request schema."""

    markdown: str = Field(..., description="Markdown produced by the HTML converter")


class NormalizeResponse(BaseModel):
    """Normalization response schema."""

    markdown: str
    content_length: int = 0


class RenderRequest(BaseModel):
    """Template rendering request schema."""

    template: str | None = Field(default=None, description="Template string (defaults to {pageTitle})")
    metadata: ArticleMetadata = Field(default_factory=ArticleMetadata)


class RenderResponse(BaseModel):
    """Template rendering response schema."""

    result: str


class ConvertRequest(BaseModel):
    """Document assembly request schema."""

    markdown: str = Field(..., description="Markdown body produced by the HTML converter")
    metadata: ArticleMetadata = Field(default_factory=ArticleMetadata)
    title_template: str | None = None
    frontmatter_template: str | None = None
    backmatter_template: str | None = None
    include_template: bool | None = Field(
        default=None,
        description="Wrap the body with frontmatter/backmatter (defaults to INCLUDE_TEMPLATE)",
    )


class ConvertResponse(BaseModel):
    """Document assembly response schema."""

    title: str
    markdown: str
    content_length: int = 0
    steps_applied: list[str] = Field(default_factory=list)


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    version: str
