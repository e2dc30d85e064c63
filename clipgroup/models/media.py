"""Clip and catalog data models for the clipgroup package."""

from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Dict, Iterable, Iterator, List, Tuple


@dataclass(frozen=True)
class MediaItem:
    """
    A camera clip identified by the number embedded in its filename.

    Attributes:
        id: Sequential clip number (MVI_0042.MOV -> 42).
        filename: Bare filename inside the clip directory.
        created_at: Creation time as an aware UTC datetime.
    """

    id: int
    filename: str
    created_at: datetime

    @property
    def day(self) -> date:
        """Calendar day (UTC) the clip was created on."""
        if self.created_at.tzinfo is None:
            return self.created_at.date()
        return self.created_at.astimezone(timezone.utc).date()


class MediaCatalog:
    """
    Immutable, ID-sorted sequence of clips found on the card.

    Items sharing an ID are all kept; their relative order is the scan
    order, which the filesystem does not define.
    """

    def __init__(self, items: Iterable[MediaItem] = ()) -> None:
        self._items: Tuple[MediaItem, ...] = tuple(sorted(items, key=lambda item: item.id))

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[MediaItem]:
        return iter(self._items)

    def __getitem__(self, index: int) -> MediaItem:
        return self._items[index]

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"MediaCatalog({len(self)} items, range={self.id_range()})"

    @property
    def items(self) -> Tuple[MediaItem, ...]:
        return self._items

    def id_range(self) -> Tuple[int, int]:
        """
        Return the smallest and largest clip IDs.

        Returns:
            Tuple (min_id, max_id), or (0, 0) for an empty catalog.
        """
        if not self._items:
            return 0, 0
        return self._items[0].id, self._items[-1].id

    def items_in_range(self, start: int, end: int) -> List[MediaItem]:
        """
        Select clips whose ID lies in the half-open range [start, end).

        Args:
            start: First ID included.
            end: First ID excluded.

        Returns:
            Matching items in catalog order.
        """
        return [item for item in self._items if start <= item.id < end]

    def by_day(self) -> Dict[date, List[MediaItem]]:
        """
        Group clips by the UTC calendar day of their creation time.

        Returns:
            Dict mapping each day to its clips, days in ascending order.
        """
        buckets: Dict[date, List[MediaItem]] = {}
        for item in self._items:
            buckets.setdefault(item.day, []).append(item)
        return dict(sorted(buckets.items()))
