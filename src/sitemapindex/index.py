"""SitemapIndex: entry store, renderer and document cache in one object.

Mutations (add/remove/reset) always invalidate the cached document; the next
``get_document`` call re-renders from the store and caches the result until
the following mutation. Single-owner: a concurrent host must guard the whole
index with one lock.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Any

import structlog
from pydantic import ValidationError

from sitemapindex.config import Settings
from sitemapindex.dates import DateutilNormalizer
from sitemapindex.errors import ErrorCode, SitemapIndexError
from sitemapindex.models.entity import Entity
from sitemapindex.models.options import RenderOptions
from sitemapindex.nodes import build_index_entry
from sitemapindex.renderer import render
from sitemapindex.store import EntryStore

if TYPE_CHECKING:
    from collections.abc import Mapping
    from datetime import datetime

    from sitemapindex.protocols import DateNormalizer, DocumentSerializer, PreambleGenerator

log = structlog.get_logger()


class CacheState(StrEnum):
    VALID = "valid"
    INVALID = "invalid"


def coerce_entity(entity: Entity | Mapping[str, Any]) -> Entity:
    """Accept an Entity or a plain mapping from a data source."""
    if isinstance(entity, Entity):
        return entity
    try:
        return Entity.model_validate(entity)
    except ValidationError as exc:
        raise SitemapIndexError(
            code=ErrorCode.INVALID_ENTITY,
            message=str(exc),
            suggestion="Pass an Entity or a mapping with at least an 'id' key.",
        ) from exc


def coerce_options(
    options: RenderOptions | Mapping[str, Any] | None,
    settings: Settings,
) -> RenderOptions:
    """Fill unspecified render options from settings."""
    if isinstance(options, RenderOptions):
        return options
    merged = {
        "stylesheet_url": settings.render.stylesheet_url,
        "pretty_print": settings.render.pretty_print,
        **(options or {}),
    }
    try:
        return RenderOptions.model_validate(merged)
    except ValidationError as exc:
        raise SitemapIndexError(
            code=ErrorCode.INVALID_OPTIONS,
            message=str(exc),
            suggestion="Check 'stylesheet_url' and 'pretty_print' in the render options.",
        ) from exc


class SitemapIndex:
    """Incrementally maintained sitemap with a memoized rendered document."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        normalizer: DateNormalizer | None = None,
        serializer: DocumentSerializer | None = None,
        preamble: PreambleGenerator | None = None,
    ) -> None:
        self._settings = settings or Settings()
        self._normalizer = normalizer or DateutilNormalizer()
        self._serializer = serializer
        self._preamble = preamble
        self._store = EntryStore()
        self._state = CacheState.INVALID
        self._document: str | None = None
        self._last_modified: datetime | None = None

    def __len__(self) -> int:
        return len(self._store)

    @property
    def cache_state(self) -> CacheState:
        return self._state

    @property
    def last_modified(self) -> datetime | None:
        """Latest last-modified seen across additions; "now" after a removal."""
        return self._last_modified

    def add_url(self, url: str | None, entity: Entity | Mapping[str, Any]) -> None:
        """Index ``entity`` under ``url``.

        A missing URL is checked first and skips silently, whatever the entity
        holds; only a located entity must validate.
        """
        if not url or not url.strip():
            log.debug("sitemap_url_skipped", reason="no_location")
            return

        entity = coerce_entity(entity)
        entry = build_index_entry(url, entity, self._normalizer, self._settings.news)
        if entry is None:
            return

        if self._last_modified is None or entry.sort_key > self._last_modified:
            self._last_modified = entry.sort_key
        self._store.upsert(entity.id, entry)
        self.invalidate()
        log.debug("sitemap_url_added", entity_id=entity.id, url=url, lastmod=entry.node.lastmod)

    def remove_url(self, url: str | None, entity: Entity | Mapping[str, Any]) -> None:
        entity = coerce_entity(entity)
        self._store.remove(entity.id)
        self.invalidate()
        # Not recomputed from the remaining entries
        self._last_modified = self._normalizer.now()
        log.debug("sitemap_url_removed", entity_id=entity.id, url=url)

    def get_document(self, options: RenderOptions | Mapping[str, Any] | None = None) -> str:
        """Return the sitemap document, rendering only if the cache is stale.

        ``options`` is ignored on a cache hit; call ``invalidate()`` after
        changing it.
        """
        if self._state is CacheState.VALID and self._document is not None:
            log.debug("sitemap_cache_hit", entries=len(self._store))
            return self._document

        resolved = coerce_options(options, self._settings)
        document = render(
            self._store.snapshot(),
            resolved,
            serializer=self._serializer,
            preamble=self._preamble,
        )
        self._document = document
        self._state = CacheState.VALID
        log.info("sitemap_rendered", entries=len(self._store), size=len(document))
        return document

    def invalidate(self) -> None:
        self._document = None
        self._state = CacheState.INVALID

    def reset(self) -> None:
        """Drop every entry. The tracked last-modified is left as is."""
        self._store.clear()
        self.invalidate()
        log.info("sitemap_reset")
