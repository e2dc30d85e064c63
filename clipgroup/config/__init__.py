"""Configuration and CLI handling."""

from clipgroup.config.settings import (
    CONTENT_PATH,
    MEDIA_PATTERN,
    TOLERATED_OUTPUT_ENTRIES,
    DEFAULT_ROOT,
    U32_MAX,
    PROMPT_GROUP_NAME,
    PROMPT_OPERATION,
    PROMPT_START,
    PROMPT_END,
    LOG_ROTATION,
    LOG_RETENTION,
)
from clipgroup.config.cli import (
    CLIArgs,
    create_parser,
    parse_arguments,
    args_to_cli_args,
)

__all__ = [
    "CONTENT_PATH",
    "MEDIA_PATTERN",
    "TOLERATED_OUTPUT_ENTRIES",
    "DEFAULT_ROOT",
    "U32_MAX",
    "PROMPT_GROUP_NAME",
    "PROMPT_OPERATION",
    "PROMPT_START",
    "PROMPT_END",
    "LOG_ROTATION",
    "LOG_RETENTION",
    "CLIArgs",
    "create_parser",
    "parse_arguments",
    "args_to_cli_args",
]
