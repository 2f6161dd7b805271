from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class Entity(BaseModel):
    """External record (post, page, tag, author...) represented by one sitemap URL.

    Only the fields the sitemap reads are modelled; anything else a data
    source sends along is ignored.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: int | str

    # Image references, in lookup precedence order
    cover_image: str | None = None
    profile_image: str | None = None
    feature_image: str | None = None

    # News marker: any truthy payload flags the entity as a news article
    type_news: Any = None
    title: str | None = None

    # Date-like: datetime, date, string, or Unix epoch seconds
    updated_at: Any = None
    published_at: Any = None
    created_at: Any = None
