"""Shared test fixtures for the sitemapindex test suite."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from sitemapindex.config import Settings
from sitemapindex.dates import DateutilNormalizer
from sitemapindex.index import SitemapIndex
from sitemapindex.models.entity import Entity

FROZEN_NOW = datetime(2025, 3, 1, 12, 0, 0, tzinfo=UTC)


@pytest.fixture()
def normalizer() -> DateutilNormalizer:
    """Normalizer whose fallback "now" is pinned to FROZEN_NOW."""
    return DateutilNormalizer(clock=lambda: FROZEN_NOW)


@pytest.fixture()
def settings() -> Settings:
    return Settings()


@pytest.fixture()
def index(settings: Settings, normalizer: DateutilNormalizer) -> SitemapIndex:
    return SitemapIndex(settings, normalizer=normalizer)


@pytest.fixture()
def sample_post() -> Entity:
    return Entity(
        id="post-1",
        title="Welcome to the newsroom",
        feature_image="https://cdn.example.com/content/images/2024/welcome.jpg",
        updated_at="2024-03-10T09:30:00Z",
        published_at="2024-03-01T08:00:00Z",
        created_at="2024-02-28T17:45:00Z",
    )


@pytest.fixture()
def frozen_now() -> datetime:
    return FROZEN_NOW
