from __future__ import annotations

from sitemapindex.models.entity import Entity
from sitemapindex.models.node import ImageNode, IndexEntry, NewsNode, UrlNode
from sitemapindex.models.options import RenderOptions

__all__ = [
    # input
    "Entity",
    # nodes
    "UrlNode",
    "ImageNode",
    "NewsNode",
    "IndexEntry",
    # rendering
    "RenderOptions",
]
