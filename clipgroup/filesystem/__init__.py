"""Filesystem operations for clip grouping."""

from clipgroup.filesystem.discovery import (
    media_directory,
    parse_media_id,
    creation_time,
    get_media,
    build_catalog,
)
from clipgroup.filesystem.file_ops import (
    is_tolerated_entry,
    check_group_name,
    prepare_output_directory,
    create_group_directory,
    copy_media,
)

__all__ = [
    "media_directory",
    "parse_media_id",
    "creation_time",
    "get_media",
    "build_catalog",
    "is_tolerated_entry",
    "check_group_name",
    "prepare_output_directory",
    "create_group_directory",
    "copy_media",
]
