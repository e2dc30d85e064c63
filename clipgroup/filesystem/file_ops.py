"""File operations for preparing the output and copying clips."""

import os
import shutil
from pathlib import Path

from loguru import logger

from clipgroup.config.settings import TOLERATED_OUTPUT_ENTRIES
from clipgroup.exceptions import (
    InvalidInputError,
    MediaIOError,
    OutputDirectoryNotEmptyError,
    OutputDirectoryNotFoundError,
)


def is_tolerated_entry(name: str) -> bool:
    """Check if a directory entry is an OS artifact that may be ignored."""
    return name.lower() in TOLERATED_OUTPUT_ENTRIES


def check_group_name(name: str) -> str:
    """
    Check that a group name denotes a single folder directly under the output.

    Args:
        name: Group folder name.

    Returns:
        The name, unchanged.

    Raises:
        InvalidInputError: If the name is empty, '.' or '..', or holds a
            path separator.
    """
    separators = [sep for sep in ("/", os.sep, os.altsep) if sep]
    if name in ("", ".", "..") or any(sep in name for sep in separators):
        raise InvalidInputError(name, "a folder name without path separators")
    return name


def prepare_output_directory(output_dir: Path, mkdir: bool = False, dry_run: bool = False) -> Path:
    """
    Check that the output directory exists and is empty.

    Args:
        output_dir: Directory that will receive the group folders.
        mkdir: If True, create it (with parents) when missing.
        dry_run: If True, only simulate the creation.

    Returns:
        The output directory.

    Raises:
        OutputDirectoryNotFoundError: If missing and mkdir is False.
        OutputDirectoryNotEmptyError: If it holds a non-tolerated entry.
        MediaIOError: If it cannot be created or listed.
    """
    if not output_dir.exists():
        if not mkdir:
            raise OutputDirectoryNotFoundError(output_dir)
        if dry_run:
            logger.info(f"SIMULATION - Create output directory: {output_dir}")
            return output_dir
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise MediaIOError.from_os_error(e, output_dir) from e
        logger.info(f"Output directory created: {output_dir}")
        return output_dir

    try:
        for entry in output_dir.iterdir():
            if is_tolerated_entry(entry.name):
                logger.debug(f"Ignoring {entry.name} in output directory")
                continue
            raise OutputDirectoryNotEmptyError(output_dir, entry.name)
    except OSError as e:
        raise MediaIOError.from_os_error(e, output_dir) from e

    return output_dir


def create_group_directory(group_dir: Path, dry_run: bool = False) -> None:
    """
    Create a group folder that must not exist yet.

    Args:
        group_dir: Folder to create (its parent must exist).
        dry_run: If True, only simulate the operation.

    Raises:
        MediaIOError: If the folder exists or cannot be created.
    """
    if dry_run:
        logger.info(f"SIMULATION - Create folder: {group_dir}")
        return

    try:
        group_dir.mkdir()
    except OSError as e:
        raise MediaIOError.from_os_error(e, group_dir) from e
    logger.debug(f"Folder created: {group_dir}")


def copy_media(source: Path, destination: Path, dry_run: bool = False) -> int:
    """
    Copy a clip byte-for-byte, keeping its timestamps.

    Args:
        source: Source file path.
        destination: Destination file path.
        dry_run: If True, only simulate the operation.

    Returns:
        Number of bytes copied (the source size in simulation).

    Raises:
        MediaIOError: If the copy fails.
    """
    try:
        if dry_run:
            logger.info(f"SIMULATION - Copy: {source.name} -> {destination}")
            return source.stat().st_size

        shutil.copy2(source, destination)
        size = destination.stat().st_size
    except OSError as e:
        failed = Path(e.filename) if e.filename else source
        raise MediaIOError.from_os_error(e, failed) from e

    logger.debug(f"File copied: {destination}")
    return size
