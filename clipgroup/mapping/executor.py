"""Execution of validated map operations."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Sequence

from loguru import logger
from tqdm import tqdm

from clipgroup.filesystem.file_ops import check_group_name, copy_media, create_group_directory
from clipgroup.models.media import MediaCatalog
from clipgroup.models.operation import MapOp, OperationKind


@dataclass
class ExecutionReport:
    """Statistics of an execution run."""

    groups: List[str] = field(default_factory=list)
    files: int = 0
    bytes: int = 0
    dry_run: bool = False


@dataclass
class ExecutionTarget:
    """Directories an execution reads from and writes to."""

    source_dir: Path
    output_dir: Path
    dry_run: bool = False


def copy_group(catalog: MediaCatalog, operation: MapOp, target: ExecutionTarget, report: ExecutionReport) -> None:
    """
    Create the operation's folder and copy every clip of its range into it.

    Args:
        catalog: Clips found on the card.
        operation: Operation to apply.
        target: Source and output directories.
        report: Report updated with the folder and the copied files.

    Raises:
        MediaIOError: On the first folder or copy failure.
    """
    group_dir = target.output_dir / operation.name
    create_group_directory(group_dir, target.dry_run)
    report.groups.append(operation.name)

    items = catalog.items_in_range(operation.start, operation.end)
    logger.info(f"{operation}: {len(items)} file(s) -> {group_dir}")

    with tqdm(items, desc=operation.name, unit="file", leave=False) as pbar:
        for item in pbar:
            pbar.set_postfix_str(item.filename)
            report.bytes += copy_media(
                target.source_dir / item.filename,
                group_dir / item.filename,
                target.dry_run,
            )
            report.files += 1


OperationHandler = Callable[[MediaCatalog, MapOp, ExecutionTarget, ExecutionReport], None]

HANDLERS: Dict[OperationKind, OperationHandler] = {
    OperationKind.COPY: copy_group,
}


def execute_operations(
    catalog: MediaCatalog,
    operations: Sequence[MapOp],
    source_dir: Path,
    output_dir: Path,
    dry_run: bool = False,
) -> ExecutionReport:
    """
    Apply operations one after the other.

    Stops at the first failure; folders and files already written are left
    in place.

    Args:
        catalog: Clips found on the card.
        operations: Validated operations.
        source_dir: Directory holding the clips.
        output_dir: Directory receiving the group folders.
        dry_run: If True, only simulate the operations.

    Returns:
        ExecutionReport with the folders created and files copied.

    Raises:
        InvalidInputError: If a group name is not a plain folder name;
            checked for every operation before anything is written.
        MediaIOError: On the first filesystem failure.
    """
    for operation in operations:
        check_group_name(operation.name)

    target = ExecutionTarget(source_dir=source_dir, output_dir=output_dir, dry_run=dry_run)
    report = ExecutionReport(dry_run=dry_run)

    for operation in operations:
        logger.debug(f"Processing ops: {operation.name}")
        HANDLERS[operation.kind](catalog, operation, target, report)

    return report
