"""Data models for clip grouping."""

from clipgroup.models.media import MediaItem, MediaCatalog
from clipgroup.models.operation import (
    OperationKind,
    MapOp,
    available_kinds,
    parse_kind,
)

__all__ = [
    "MediaItem",
    "MediaCatalog",
    "OperationKind",
    "MapOp",
    "available_kinds",
    "parse_kind",
]
