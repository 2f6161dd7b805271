from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from pydantic import BaseModel, ConfigDict


class ImageNode(BaseModel):
    """``<image:image>`` extension element."""

    model_config = ConfigDict(frozen=True)

    loc: str
    caption: str


class NewsNode(BaseModel):
    """``<news:news>`` extension element."""

    model_config = ConfigDict(frozen=True)

    publication_name: str
    publication_language: str
    publication_date: str  # ISO-8601 with offset
    title: str


class UrlNode(BaseModel):
    """Pre-serialization form of one ``<url>`` element.

    Child order on output is fixed: loc, lastmod, image, news.
    """

    model_config = ConfigDict(frozen=True)

    loc: str
    lastmod: str  # ISO-8601 with offset
    image: ImageNode | None = None
    news: NewsNode | None = None


@dataclass(frozen=True)
class IndexEntry:
    """Node plus its sort key, derived from one entity snapshot.

    Stored as a single value so the two can never drift apart.
    """

    node: UrlNode
    sort_key: datetime
