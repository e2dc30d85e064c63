"""Clip discovery functions for building the media catalog."""

import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Generator, Optional

from loguru import logger

from clipgroup.config.settings import CONTENT_PATH, MEDIA_PATTERN
from clipgroup.exceptions import InvalidRootError, MediaIOError, NoVideosError
from clipgroup.models.media import MediaCatalog, MediaItem


def media_directory(root: Path) -> Path:
    """
    Return the clip directory of a card mounted at root.

    Args:
        root: Card mount point.

    Returns:
        Path to the directory holding the clips.

    Raises:
        InvalidRootError: If the clip directory does not exist.
    """
    path = root.joinpath(*CONTENT_PATH)
    if not path.exists():
        raise InvalidRootError(root, path)
    return path


def parse_media_id(filename: str) -> Optional[int]:
    """
    Extract the clip number from a filename.

    Args:
        filename: Bare filename, e.g. 'MVI_0042.MOV'.

    Returns:
        The clip number, or None if the name does not follow the pattern.
    """
    match = MEDIA_PATTERN.fullmatch(filename)
    if match is None:
        return None
    # The pattern only captures four ASCII digits
    return int(match.group(1))


def creation_time(stat_result: os.stat_result) -> datetime:
    """
    Return the creation time reported by the OS as a UTC datetime.

    Falls back to the modification time on platforms without a birth time.
    """
    timestamp = getattr(stat_result, "st_birthtime", None)
    if timestamp is None:
        timestamp = stat_result.st_mtime
    return datetime.fromtimestamp(timestamp, tz=timezone.utc)


def get_media(directory: Path) -> Generator[MediaItem, None, None]:
    """
    Generate a MediaItem for every clip file directly inside directory.

    Args:
        directory: Clip directory (not searched recursively).

    Yields:
        MediaItem objects in directory order.

    Raises:
        MediaIOError: If the directory or an entry's metadata is unreadable.
    """
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                if not entry.is_file(follow_symlinks=False):
                    continue

                media_id = parse_media_id(entry.name)
                if media_id is None:
                    logger.debug(f"Skipping {entry.name}")
                    continue

                yield MediaItem(
                    id=media_id,
                    filename=entry.name,
                    created_at=creation_time(entry.stat(follow_symlinks=False)),
                )
    except OSError as e:
        raise MediaIOError.from_os_error(e, directory) from e


def build_catalog(directory: Path) -> MediaCatalog:
    """
    Scan a clip directory and return its ID-sorted catalog.

    Args:
        directory: Clip directory.

    Returns:
        Non-empty MediaCatalog.

    Raises:
        NoVideosError: If no file matches the clip naming pattern.
        MediaIOError: If the scan fails.
    """
    logger.debug(f"Parsing filenames in {directory}")
    catalog = MediaCatalog(get_media(directory))
    logger.debug(f"Parsed {len(catalog)} video files!")

    if not catalog:
        raise NoVideosError(directory)

    start, end = catalog.id_range()
    logger.debug(f"Filename range: {start} -> {end}")
    return catalog
