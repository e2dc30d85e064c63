"""Display functions for catalog, plan and result output."""

from pathlib import Path
from typing import List, Sequence

from rich.markup import escape
from rich.table import Table

from clipgroup.mapping.executor import ExecutionReport
from clipgroup.models.media import MediaCatalog
from clipgroup.models.operation import MapOp
from clipgroup.ui.console import ConsoleUI


def format_size(size: int) -> str:
    """
    Format a byte count for display.

    Args:
        size: Number of bytes.

    Returns:
        Size with a binary unit, e.g. '1.5 GiB'.
    """
    if size < 1024:
        return f"{size} B"
    value = size / 1024
    for unit in ("KiB", "MiB"):
        if value < 1024:
            return f"{value:.1f} {unit}"
        value /= 1024
    return f"{value:.1f} GiB"


def display_catalog_summary(catalog: MediaCatalog, kinds: List[str], console: ConsoleUI) -> None:
    """
    Show how many clips were found and which operations are available.

    Args:
        catalog: Clips found on the card.
        kinds: Names of the available operation kinds.
        console: Console UI instance.
    """
    start, end = catalog.id_range()
    console.print_info(f"{len(catalog)} videos ({start}..{end})")
    console.print_info(f"Available ops: {', '.join(kinds)}")


def build_plan_table(catalog: MediaCatalog, operations: Sequence[MapOp], console: ConsoleUI) -> Table:
    """
    Build a table listing each group with its range and file count.

    Args:
        catalog: Clips found on the card.
        operations: Validated operations.
        console: Console UI instance.

    Returns:
        Rich Table instance.
    """
    table = console.create_table("Groups", ["Group", "Operation", "Range", "Files"], numeric=["Files"])
    for operation in operations:
        count = len(catalog.items_in_range(operation.start, operation.end))
        table.add_row(
            escape(operation.name),
            operation.kind.value,
            f"{operation.start}..{operation.end}",
            str(count),
        )
    return table


def display_plan(catalog: MediaCatalog, operations: Sequence[MapOp], console: ConsoleUI) -> None:
    """Print the plan table before execution."""
    console.print(build_plan_table(catalog, operations, console))


def display_report(report: ExecutionReport, output_dir: Path, console: ConsoleUI) -> None:
    """
    Print the result of an execution.

    Args:
        report: Execution statistics.
        output_dir: Directory that received the groups.
        console: Console UI instance.
    """
    summary = (
        f"{report.files} file(s), {format_size(report.bytes)} "
        f"in {len(report.groups)} group(s)"
    )
    if report.dry_run:
        console.print_warning(f"SIMULATION - {summary}, nothing was written")
        return
    console.print_success(summary)
    console.print_success(f"Done! {output_dir}")
