"""Node construction: one entity snapshot in, one immutable ``UrlNode`` out.

Pure apart from the normalizer's clock, which supplies "now" when an entity
carries no usable dates.
"""

from __future__ import annotations

import posixpath
from typing import TYPE_CHECKING
from urllib.parse import urlparse

from sitemapindex.config import NewsSettings
from sitemapindex.dates import first_present, format_timestamp
from sitemapindex.models.node import ImageNode, IndexEntry, NewsNode, UrlNode

if TYPE_CHECKING:
    from datetime import datetime

    from sitemapindex.models.entity import Entity
    from sitemapindex.protocols import DateNormalizer


def resolve_last_modified(entity: Entity, normalizer: DateNormalizer) -> datetime:
    """updated_at, else published_at, else created_at, else now."""
    return normalizer.normalize(
        first_present(entity.updated_at, entity.published_at, entity.created_at)
    )


def resolve_published_at(entity: Entity, normalizer: DateNormalizer) -> datetime:
    """published_at, else created_at, else updated_at, else now."""
    return normalizer.normalize(
        first_present(entity.published_at, entity.created_at, entity.updated_at)
    )


def validate_image_url(image_url: str | None) -> bool:
    return bool(image_url and image_url.strip())


def image_caption(image_url: str) -> str:
    """Basename of the URL's path: ``https://x/c/photo.jpg?w=1`` -> ``photo.jpg``."""
    path = urlparse(image_url).path
    return posixpath.basename(path.rstrip("/"))


def build_image_node(entity: Entity) -> ImageNode | None:
    # Authors have a cover image; everything else only has profile or feature
    for candidate in (entity.cover_image, entity.profile_image, entity.feature_image):
        if validate_image_url(candidate):
            return ImageNode(loc=candidate, caption=image_caption(candidate))
    return None


def build_news_node(
    entity: Entity,
    normalizer: DateNormalizer,
    news: NewsSettings,
) -> NewsNode | None:
    if not entity.type_news:
        return None
    return NewsNode(
        publication_name=news.publication_name,
        publication_language=news.publication_language,
        publication_date=format_timestamp(resolve_published_at(entity, normalizer)),
        title=entity.title or "",
    )


def build_index_entry(
    url: str | None,
    entity: Entity,
    normalizer: DateNormalizer,
    news: NewsSettings | None = None,
) -> IndexEntry | None:
    """Build the node and sort key for ``entity`` from a single snapshot.

    Returns None when there is no location to point at; callers treat that
    as "nothing to index" rather than an error.
    """
    if not url or not url.strip():
        return None

    last_modified = resolve_last_modified(entity, normalizer)
    node = UrlNode(
        loc=url,
        lastmod=format_timestamp(last_modified),
        image=build_image_node(entity),
        news=build_news_node(entity, normalizer, news or NewsSettings()),
    )
    return IndexEntry(node=node, sort_key=last_modified)


def build_url_node(
    url: str | None,
    entity: Entity,
    normalizer: DateNormalizer,
    news: NewsSettings | None = None,
) -> UrlNode | None:
    entry = build_index_entry(url, entity, normalizer, news)
    return entry.node if entry is not None else None
