"""User interface components."""

from clipgroup.ui.console import ConsoleUI
from clipgroup.ui.prompts import LineSource, ConsoleLineSource
from clipgroup.ui.display import (
    format_size,
    display_catalog_summary,
    build_plan_table,
    display_plan,
    display_report,
)

__all__ = [
    "ConsoleUI",
    "LineSource",
    "ConsoleLineSource",
    "format_size",
    "display_catalog_summary",
    "build_plan_table",
    "display_plan",
    "display_report",
]
