"""Unit tests for sitemapindex.store."""

from __future__ import annotations

from datetime import UTC, datetime

from sitemapindex.dates import format_timestamp
from sitemapindex.models.node import IndexEntry, UrlNode
from sitemapindex.store import EntryStore, order_entries


def _entry(loc: str, moment: datetime) -> IndexEntry:
    return IndexEntry(node=UrlNode(loc=loc, lastmod=format_timestamp(moment)), sort_key=moment)


JAN = datetime(2024, 1, 1, tzinfo=UTC)
JUN = datetime(2024, 6, 1, tzinfo=UTC)
DEC = datetime(2024, 12, 1, tzinfo=UTC)


class TestSnapshotOrdering:
    def test_newest_first(self) -> None:
        store = EntryStore()
        store.upsert(1, _entry("https://x/jan", JAN))
        store.upsert(2, _entry("https://x/dec", DEC))
        store.upsert(3, _entry("https://x/jun", JUN))

        assert [n.loc for n in store.snapshot()] == [
            "https://x/dec",
            "https://x/jun",
            "https://x/jan",
        ]

    def test_ties_keep_insertion_order(self) -> None:
        store = EntryStore()
        store.upsert(20, _entry("https://x/first", JAN))
        store.upsert(3, _entry("https://x/second", JAN))
        store.upsert("a", _entry("https://x/third", JAN))

        assert [n.loc for n in store.snapshot()] == [
            "https://x/first",
            "https://x/second",
            "https://x/third",
        ]

    def test_empty(self) -> None:
        assert EntryStore().snapshot() == []

    def test_order_entries_is_pure(self) -> None:
        entries = [_entry("https://x/jan", JAN), _entry("https://x/jun", JUN)]
        assert [n.loc for n in order_entries(entries)] == ["https://x/jun", "https://x/jan"]
        # input untouched
        assert entries[0].node.loc == "https://x/jan"


class TestMutations:
    def test_upsert_replaces(self) -> None:
        store = EntryStore()
        store.upsert(1, _entry("https://x/old", JAN))
        store.upsert(1, _entry("https://x/new", JUN))

        assert len(store) == 1
        entry = store.get(1)
        assert entry is not None
        assert entry.node.loc == "https://x/new"
        assert entry.sort_key == JUN

    def test_remove(self) -> None:
        store = EntryStore()
        store.upsert(1, _entry("https://x/a", JAN))
        store.remove(1)
        assert 1 not in store
        assert store.snapshot() == []

    def test_remove_missing_is_noop(self) -> None:
        store = EntryStore()
        store.upsert(1, _entry("https://x/a", JAN))
        store.remove(99)
        assert len(store) == 1

    def test_readd_keeps_tie_break_slot(self) -> None:
        store = EntryStore()
        store.upsert(1, _entry("https://x/first", JAN))
        store.upsert(2, _entry("https://x/second", JAN))
        store.upsert(1, _entry("https://x/first-again", JAN))

        assert [n.loc for n in store.snapshot()] == [
            "https://x/first-again",
            "https://x/second",
        ]

    def test_clear(self) -> None:
        store = EntryStore()
        store.upsert(1, _entry("https://x/a", JAN))
        store.upsert(2, _entry("https://x/b", JUN))
        store.clear()
        assert len(store) == 0
        assert store.get(1) is None
