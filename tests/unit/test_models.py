"""Tests for clip and operation data models."""

import pytest
from datetime import datetime, timedelta, timezone
from dataclasses import FrozenInstanceError

from clipgroup.exceptions import UnknownOperationKindError, InvalidInputError
from clipgroup.models import (
    MapOp,
    MediaCatalog,
    MediaItem,
    OperationKind,
    available_kinds,
    parse_kind,
)


class TestMediaItem:
    """Tests for MediaItem dataclass."""

    def test_is_immutable(self, make_item):
        """Fields cannot be reassigned."""
        item = make_item(1)
        with pytest.raises(FrozenInstanceError):
            item.id = 2

    def test_day_is_utc_date(self):
        """day uses the UTC calendar date of created_at."""
        paris = timezone(timedelta(hours=2))
        item = MediaItem(
            id=1,
            filename="MVI_0001.MOV",
            created_at=datetime(2024, 5, 2, 1, 30, tzinfo=paris),
        )
        assert item.day.isoformat() == "2024-05-01"


class TestMediaCatalog:
    """Tests for MediaCatalog class."""

    def test_sorted_by_id(self, make_item):
        """Items are sorted ascending by id."""
        catalog = MediaCatalog([make_item(5), make_item(1), make_item(3)])

        ids = [item.id for item in catalog]

        assert ids == [1, 3, 5]
        assert all(a <= b for a, b in zip(ids, ids[1:]))

    def test_keeps_duplicate_ids(self, make_item):
        """Items sharing an id are all retained."""
        first = make_item(7)
        second = MediaItem(id=7, filename="MVI_0007.MOV", created_at=first.created_at + timedelta(days=1))

        catalog = MediaCatalog([second, make_item(2), first])

        assert len(catalog) == 3
        assert [item.id for item in catalog] == [2, 7, 7]

    def test_id_range(self, catalog):
        """id_range returns first and last ids."""
        assert catalog.id_range() == (1, 4)

    def test_id_range_empty(self):
        """id_range of an empty catalog is (0, 0)."""
        assert MediaCatalog().id_range() == (0, 0)

    def test_empty_catalog_is_falsy(self):
        """An empty catalog evaluates to False."""
        assert not MediaCatalog()

    def test_items_in_range_is_half_open(self, catalog):
        """items_in_range includes start and excludes end."""
        result = catalog.items_in_range(1, 3)
        assert [item.id for item in result] == [1, 2]

    def test_items_in_inverted_range(self, catalog):
        """An inverted range matches nothing."""
        assert catalog.items_in_range(3, 1) == []

    def test_by_day_sorted_by_date(self, make_item):
        """by_day groups clips per day in ascending date order."""
        catalog = MediaCatalog([
            make_item(10, "2024-05-03"),
            make_item(1, "2024-05-01"),
            make_item(2, "2024-05-01"),
        ])

        buckets = catalog.by_day()

        assert [day.isoformat() for day in buckets] == ["2024-05-01", "2024-05-03"]
        assert [item.id for item in buckets[min(buckets)]] == [1, 2]

    def test_indexing(self, catalog):
        """Items can be accessed by index."""
        assert catalog[0].id == 1
        assert catalog[-1].id == 4


class TestMapOp:
    """Tests for MapOp dataclass."""

    def test_contains_half_open(self, make_op):
        """contains is true for start and false for end."""
        op = make_op("A", 1, 3)
        assert op.contains(1)
        assert op.contains(2)
        assert not op.contains(3)
        assert not op.contains(0)

    def test_structural_equality(self, make_op):
        """Operations are equal only when every field is."""
        assert make_op("A", 0, 10) == make_op("A", 0, 10)
        assert make_op("A", 0, 10) != make_op("B", 0, 10)

    def test_str(self, make_op):
        """str shows name and range."""
        assert str(make_op("Beach", 5, 9)) == "Beach (5..9)"


class TestParseKind:
    """Tests for parse_kind function."""

    def test_parses_copy(self):
        """'copy' resolves to COPY."""
        assert parse_kind("copy") is OperationKind.COPY

    def test_strips_whitespace(self):
        """Surrounding whitespace is ignored."""
        assert parse_kind(" copy\n") is OperationKind.COPY

    def test_case_sensitive(self):
        """Kind names are case-sensitive."""
        with pytest.raises(UnknownOperationKindError):
            parse_kind("Copy")

    def test_unknown_kind(self):
        """Unknown names raise an input error."""
        with pytest.raises(InvalidInputError) as exc_info:
            parse_kind("move")
        assert "copy" in str(exc_info.value)

    def test_available_kinds(self):
        """available_kinds lists the kind names."""
        assert available_kinds() == ["copy"]
