"""Validation of a set of map operations before execution."""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Sequence, Tuple

from loguru import logger

from clipgroup.exceptions import OperationValidationError
from clipgroup.models.operation import MapOp


class ValidationStatus(Enum):
    """Outcome of validate_operations."""
    VALID = auto()
    EMPTY = auto()
    OVERLAPPING_RANGE = auto()


@dataclass(frozen=True)
class ValidationResult:
    """Validation outcome, with the first conflicting pair if any."""

    status: ValidationStatus
    conflict: Optional[Tuple[MapOp, MapOp]] = None

    @property
    def valid(self) -> bool:
        return self.status is ValidationStatus.VALID

    @property
    def message(self) -> str:
        """Human-readable description of the outcome."""
        if self.status is ValidationStatus.EMPTY:
            return "No operations defined! Exiting."
        if self.status is ValidationStatus.OVERLAPPING_RANGE and self.conflict:
            first, second = self.conflict
            return f"{first} overlaps {second}"
        return "Valid"


def ranges_overlap(a: MapOp, b: MapOp) -> bool:
    """
    Check if the ranges of two operations overlap.

    Operations starting at the same ID are never reported, which keeps
    compatibility with existing group plans.
    """
    return (a.start > b.start and b.end > a.start) or (a.start < b.start and a.end > b.start)


def validate_operations(operations: Sequence[MapOp]) -> ValidationResult:
    """
    Check that no two distinct operations have overlapping ranges.

    Pairs are visited in sequence order (outer, then inner index) and the
    first overlapping pair wins. Structurally equal operations are skipped.

    Args:
        operations: Operations in the order they were defined.

    Returns:
        ValidationResult with status VALID, EMPTY or OVERLAPPING_RANGE.
    """
    if not operations:
        return ValidationResult(ValidationStatus.EMPTY)

    for first in operations:
        for second in operations:
            if first == second:
                continue
            if ranges_overlap(first, second):
                return ValidationResult(ValidationStatus.OVERLAPPING_RANGE, (first, second))

    return ValidationResult(ValidationStatus.VALID)


def ensure_valid(operations: Sequence[MapOp]) -> None:
    """
    Validate operations and raise unless they are valid.

    Raises:
        OperationValidationError: If the set is empty or has an overlap.
    """
    logger.debug("Validating map ops")
    result = validate_operations(operations)
    logger.debug(f"Result: {result.status.name}")

    if not result.valid:
        raise OperationValidationError(result)
