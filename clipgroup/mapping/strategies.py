"""Strategies producing map operations from user input."""

import re
from datetime import date
from typing import Dict, List, Sequence, Tuple

from loguru import logger

from clipgroup.config.settings import (
    PROMPT_END,
    PROMPT_GROUP_NAME,
    PROMPT_OPERATION,
    PROMPT_START,
    U32_MAX,
)
from clipgroup.exceptions import InvalidInputError
from clipgroup.filesystem.file_ops import check_group_name
from clipgroup.models.media import MediaCatalog
from clipgroup.models.operation import MapOp, OperationKind, parse_kind
from clipgroup.ui.prompts import LineSource

_UNSIGNED = re.compile(r"\+?[0-9]+")


def parse_bound(reply: str) -> int:
    """
    Parse a range bound typed by the user.

    Args:
        reply: Raw reply line.

    Returns:
        The bound as an unsigned 32-bit integer.

    Raises:
        InvalidInputError: If the reply is not a base-10 integer in range.
    """
    text = reply.strip()
    if not _UNSIGNED.fullmatch(text):
        raise InvalidInputError(reply, f"an integer between 0 and {U32_MAX}")
    value = int(text)
    if value > U32_MAX:
        raise InvalidInputError(reply, f"an integer between 0 and {U32_MAX}")
    return value


def ask_kind(prompts: LineSource, kinds: Sequence[OperationKind]) -> OperationKind:
    """
    Ask for an operation kind when there is more than one to choose from.

    Args:
        prompts: Line source to ask.
        kinds: Kinds available for this run.

    Returns:
        The chosen kind, or the only one without asking.
    """
    if len(kinds) > 1:
        return parse_kind(prompts.ask(PROMPT_OPERATION))
    return kinds[0]


def prompt_for_operations(
    prompts: LineSource,
    kinds: Sequence[OperationKind] = tuple(OperationKind),
) -> List[MapOp]:
    """
    Collect named ranges from the user until an empty name is entered.

    Args:
        prompts: Line source to ask.
        kinds: Kinds available for this run.

    Returns:
        Operations in the order they were entered.

    Raises:
        InvalidInputError: On a malformed bound, unknown kind or a name that
            is not a plain folder name (no retry).
    """
    operations: List[MapOp] = []

    while True:
        name = prompts.ask(PROMPT_GROUP_NAME).strip()
        if not name:
            break
        check_group_name(name)

        kind = ask_kind(prompts, kinds)
        start = parse_bound(prompts.ask(PROMPT_START))
        end = parse_bound(prompts.ask(PROMPT_END))

        operation = MapOp(kind=kind, name=name, start=start, end=end)
        logger.debug(f"Operation defined: {operation}")
        operations.append(operation)

    return operations


def day_bounds(catalog: MediaCatalog) -> Dict[date, Tuple[int, int]]:
    """
    Compute the tightest half-open ID range of every shooting day.

    Args:
        catalog: Clips to group.

    Returns:
        Dict mapping each UTC day to (min_id, max_id + 1), days ascending.
    """
    return {
        day: (min(item.id for item in items), max(item.id for item in items) + 1)
        for day, items in catalog.by_day().items()
    }


def group_by_day(
    catalog: MediaCatalog,
    prompts: LineSource,
    kinds: Sequence[OperationKind] = tuple(OperationKind),
) -> List[MapOp]:
    """
    Build one operation per shooting day, asking the user to label each.

    The operation name is '<label>_<YYYY-MM-DD>'.

    Args:
        catalog: Clips to group.
        prompts: Line source to ask.
        kinds: Kinds available for this run.

    Returns:
        One operation per distinct day, in date order.

    Raises:
        InvalidInputError: If a label holds a path separator.
    """
    operations: List[MapOp] = []

    for day, (start, end) in day_bounds(catalog).items():
        label = prompts.ask(f"{day.isoformat()}: ").strip()
        name = check_group_name(f"{label}_{day.isoformat()}")
        kind = ask_kind(prompts, kinds)

        operation = MapOp(kind=kind, name=name, start=start, end=end)
        logger.debug(f"Operation defined: {operation}")
        operations.append(operation)

    return operations
