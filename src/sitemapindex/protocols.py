"""Protocol interfaces for the index's external collaborators.

SitemapIndex references these protocols, not the concrete implementations.
This allows:
- Tests to inject a frozen clock or a trivial serializer
- Hosts to swap date parsing or the XML backend without touching the index
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from datetime import datetime

    from lxml import etree

    from sitemapindex.models.options import RenderOptions


class DateNormalizer(Protocol):
    """Turns arbitrary date-like input into an aware UTC datetime.

    Must fail closed: absent or unparseable input yields the current time.
    """

    def normalize(self, value: object) -> datetime: ...

    def now(self) -> datetime: ...


class DocumentSerializer(Protocol):
    """Serializes a ``urlset`` element tree to markup. Total and deterministic."""

    def serialize(self, root: etree._Element, *, pretty_print: bool = False) -> str: ...


class PreambleGenerator(Protocol):
    """Produces the text placed verbatim before the serialized tree."""

    def preamble(self, options: RenderOptions) -> str: ...
