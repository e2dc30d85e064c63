"""Pytest configuration and fixtures."""

from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, List

import pytest

from clipgroup.models import MapOp, MediaCatalog, MediaItem, OperationKind


class ScriptedLineSource:
    """Line source replaying canned replies and recording the prompts."""

    def __init__(self, replies: Iterable[str]) -> None:
        self.replies: List[str] = list(replies)
        self.prompts: List[str] = []

    def ask(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.replies:
            raise AssertionError(f"Unexpected prompt: {prompt!r}")
        return self.replies.pop(0)


@pytest.fixture
def scripted():
    """Factory for scripted line sources."""
    return ScriptedLineSource


@pytest.fixture
def make_item():
    """Factory for MediaItem objects created on a given UTC day and hour."""
    def _make(media_id: int, day: str = "2024-05-01", hour: int = 12) -> MediaItem:
        created = datetime.fromisoformat(day).replace(hour=hour, tzinfo=timezone.utc)
        return MediaItem(id=media_id, filename=f"MVI_{media_id:04d}.MOV", created_at=created)
    return _make


@pytest.fixture
def catalog(make_item):
    """Catalog with clips 1 to 4 shot on the same day."""
    return MediaCatalog(make_item(i) for i in (1, 2, 3, 4))


@pytest.fixture
def make_op():
    """Factory for copy operations."""
    def _make(name: str, start: int, end: int) -> MapOp:
        return MapOp(kind=OperationKind.COPY, name=name, start=start, end=end)
    return _make


@pytest.fixture
def card(tmp_path) -> Path:
    """Card mount point with an empty DCIM/100CANON directory."""
    root = tmp_path / "card"
    (root / "DCIM" / "100CANON").mkdir(parents=True)
    return root


@pytest.fixture
def media_dir(card) -> Path:
    """Clip directory of the card fixture."""
    return card / "DCIM" / "100CANON"


@pytest.fixture
def add_clips(media_dir):
    """Write fake clips with distinct content into the card."""
    def _add(*ids: int) -> List[Path]:
        paths = []
        for media_id in ids:
            path = media_dir / f"MVI_{media_id:04d}.MOV"
            path.write_bytes(f"clip {media_id} ".encode() * 100)
            paths.append(path)
        return paths
    return _add


@pytest.fixture
def output_dir(tmp_path) -> Path:
    """Existing, empty output directory."""
    out = tmp_path / "out"
    out.mkdir()
    return out


@pytest.fixture
def temp_clip(tmp_path) -> Path:
    """Create a temporary clip file for testing."""
    clip = tmp_path / "MVI_0001.MOV"
    clip.write_bytes(b"fake video content " * 1000)
    return clip
