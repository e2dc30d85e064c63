"""Clip grouping: operation validation, strategies and execution."""

from clipgroup.mapping.validator import (
    ValidationStatus,
    ValidationResult,
    ranges_overlap,
    validate_operations,
    ensure_valid,
)
from clipgroup.mapping.strategies import (
    parse_bound,
    ask_kind,
    prompt_for_operations,
    day_bounds,
    group_by_day,
)
from clipgroup.mapping.executor import (
    ExecutionReport,
    ExecutionTarget,
    copy_group,
    execute_operations,
)
from clipgroup.mapping.mapper import Mapper

__all__ = [
    "ValidationStatus",
    "ValidationResult",
    "ranges_overlap",
    "validate_operations",
    "ensure_valid",
    "parse_bound",
    "ask_kind",
    "prompt_for_operations",
    "day_bounds",
    "group_by_day",
    "ExecutionReport",
    "ExecutionTarget",
    "copy_group",
    "execute_operations",
    "Mapper",
]
