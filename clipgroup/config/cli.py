"""Command-line interface argument parsing."""

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from clipgroup.config.settings import DEFAULT_ROOT


@dataclass
class CLIArgs:
    """
    Parsed command-line arguments.

    Attributes:
        root: Mount point of the memory card.
        out: Directory receiving one folder per group.
        auto: If True, build one group per shooting day.
        mkdir: If True, create the output directory when missing.
        dry_run: If True, simulate without making changes.
        debug: If True, enable debug logging.
        log_file: Optional file receiving a full debug log.
    """

    root: Path = DEFAULT_ROOT
    out: Optional[Path] = None
    auto: bool = False
    mkdir: bool = False
    dry_run: bool = False
    debug: bool = False
    log_file: Optional[Path] = None

    @property
    def uses_default_root(self) -> bool:
        """Check if the root was left at its default value."""
        return self.root == DEFAULT_ROOT


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog='clipgroup',
        description="""
        Copies the video clips of a camera memory card into named group
        folders, one folder per range of clip numbers.
        """
    )

    parser.add_argument(
        '-r', '--root',
        default=str(DEFAULT_ROOT),
        help=f"root directory of the SD card (default: {DEFAULT_ROOT})"
    )

    parser.add_argument(
        '-o', '--out',
        required=True,
        help="output directory to store the generated groups"
    )

    parser.add_argument(
        '-a', '--auto',
        action='store_true',
        help="group clips automatically by shooting day"
    )

    parser.add_argument(
        '--mkdir',
        action='store_true',
        help="create the output directory if it does not exist"
    )

    parser.add_argument(
        '--dry-run',
        action='store_true',
        help="simulation mode - no folders created, no files copied"
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help="enable debug mode"
    )

    parser.add_argument(
        '--log-file',
        default=None,
        help="also write a debug log to this file"
    )

    return parser


def parse_arguments(args: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        args: List of argument strings (None for sys.argv).

    Returns:
        Parsed Namespace object.
    """
    parser = create_parser()
    return parser.parse_args(args)


def args_to_cli_args(namespace: argparse.Namespace) -> CLIArgs:
    """
    Convert argparse Namespace to CLIArgs dataclass.

    Args:
        namespace: Parsed argparse Namespace.

    Returns:
        CLIArgs instance.
    """
    return CLIArgs(
        root=Path(namespace.root),
        out=Path(namespace.out),
        auto=namespace.auto,
        mkdir=namespace.mkdir,
        dry_run=namespace.dry_run,
        debug=namespace.debug,
        log_file=Path(namespace.log_file) if namespace.log_file else None,
    )
