"""Sitemap rendering.

Pure business logic: receives ordered nodes and render options, returns the
document string. Tree building, serialization and the preamble are separate
steps so each can be swapped (see protocols.py).
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from lxml import etree

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sitemapindex.models.node import ImageNode, NewsNode, UrlNode
    from sitemapindex.models.options import RenderOptions
    from sitemapindex.protocols import DocumentSerializer, PreambleGenerator

# Sitemap namespace declarations; these never change
SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
IMAGE_NS = "http://www.google.com/schemas/sitemap-image/1.1"
NEWS_NS = "http://www.google.com/schemas/sitemap-news/0.9"

NSMAP = {None: SITEMAP_NS, "image": IMAGE_NS, "news": NEWS_NS}

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

# Characters XML 1.0 forbids in text content, plus lone surrogates
_INVALID_XML_CHARS = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")
_URL_SCHEME = re.compile(r"^https?:", re.IGNORECASE)


def _tag(namespace: str, name: str) -> str:
    return f"{{{namespace}}}{name}"


def _text(parent: etree._Element, namespace: str, name: str, value: str) -> etree._Element:
    element = etree.SubElement(parent, _tag(namespace, name))
    element.text = _INVALID_XML_CHARS.sub("", value)
    return element


def _append_image(url_el: etree._Element, image: ImageNode) -> None:
    image_el = etree.SubElement(url_el, _tag(IMAGE_NS, "image"))
    _text(image_el, IMAGE_NS, "loc", image.loc)
    _text(image_el, IMAGE_NS, "caption", image.caption)


def _append_news(url_el: etree._Element, news: NewsNode) -> None:
    news_el = etree.SubElement(url_el, _tag(NEWS_NS, "news"))
    publication = etree.SubElement(news_el, _tag(NEWS_NS, "publication"))
    _text(publication, NEWS_NS, "name", news.publication_name)
    _text(publication, NEWS_NS, "language", news.publication_language)
    _text(news_el, NEWS_NS, "publication_date", news.publication_date)
    _text(news_el, NEWS_NS, "title", news.title)


def build_tree(nodes: Iterable[UrlNode]) -> etree._Element:
    """Wrap nodes, in the given order, in a namespaced ``urlset`` root."""
    urlset = etree.Element(_tag(SITEMAP_NS, "urlset"), nsmap=NSMAP)
    for node in nodes:
        url_el = etree.SubElement(urlset, _tag(SITEMAP_NS, "url"))
        _text(url_el, SITEMAP_NS, "loc", node.loc)
        _text(url_el, SITEMAP_NS, "lastmod", node.lastmod)
        if node.image is not None:
            _append_image(url_el, node.image)
        if node.news is not None:
            _append_news(url_el, node.news)
    return urlset


class LxmlSerializer:
    """Default DocumentSerializer."""

    def serialize(self, root: etree._Element, *, pretty_print: bool = False) -> str:
        # encoding="unicode" returns str and never writes an XML declaration
        return etree.tostring(root, encoding="unicode", pretty_print=pretty_print)


class DeclarationPreamble:
    """Default PreambleGenerator: XML declaration plus optional XSL stylesheet."""

    def preamble(self, options: RenderOptions) -> str:
        parts = [XML_DECLARATION]
        if options.stylesheet_url:
            href = _URL_SCHEME.sub("", options.stylesheet_url)
            parts.append(f'<?xml-stylesheet type="text/xsl" href="{href}"?>')
        if options.pretty_print:
            return "\n".join(parts) + "\n"
        return "".join(parts)


def render(
    nodes: Iterable[UrlNode],
    options: RenderOptions,
    *,
    serializer: DocumentSerializer | None = None,
    preamble: PreambleGenerator | None = None,
) -> str:
    """Render ordered nodes to a complete sitemap document."""
    serializer = serializer or LxmlSerializer()
    preamble = preamble or DeclarationPreamble()
    body = serializer.serialize(build_tree(nodes), pretty_print=options.pretty_print)
    return preamble.preamble(options) + body
