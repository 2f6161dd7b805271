"""sitemapindex: incrementally maintained, render-on-demand XML sitemaps."""

from __future__ import annotations

import warnings
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("sitemapindex")
except PackageNotFoundError:
    # Source-tree execution without installed package metadata.
    warnings.warn(
        "Package metadata for 'sitemapindex' not found; using fallback version '0.0.0+unknown'.",
        RuntimeWarning,
        stacklevel=2,
    )
    __version__ = "0.0.0+unknown"

from sitemapindex.errors import ErrorCode, SitemapIndexError  # noqa: E402
from sitemapindex.index import CacheState, SitemapIndex  # noqa: E402
from sitemapindex.models import Entity, RenderOptions  # noqa: E402

__all__ = [
    "CacheState",
    "Entity",
    "ErrorCode",
    "RenderOptions",
    "SitemapIndex",
    "SitemapIndexError",
    "__version__",
]
