"""In-memory entry store keyed by entity identifier."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sitemapindex.models.node import IndexEntry, UrlNode

EntityId = int | str


def order_entries(entries: Iterable[IndexEntry]) -> list[UrlNode]:
    """Nodes sorted newest first.

    ``sorted`` is stable, so equal sort keys keep the order they arrived in.
    """
    ordered = sorted(entries, key=lambda entry: entry.sort_key, reverse=True)
    return [entry.node for entry in ordered]


class EntryStore:
    """Maps entity id to its IndexEntry.

    Dict insertion order doubles as the tiebreak for equal timestamps; a
    re-added entity keeps its first position.
    """

    def __init__(self) -> None:
        self._entries: dict[EntityId, IndexEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._entries

    def get(self, entity_id: EntityId) -> IndexEntry | None:
        return self._entries.get(entity_id)

    def upsert(self, entity_id: EntityId, entry: IndexEntry) -> None:
        self._entries[entity_id] = entry

    def remove(self, entity_id: EntityId) -> None:
        self._entries.pop(entity_id, None)

    def snapshot(self) -> list[UrlNode]:
        return order_entries(self._entries.values())

    def clear(self) -> None:
        self._entries.clear()
