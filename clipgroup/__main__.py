"""Entry point for the clipgroup package.

This module provides the command-line entry point for the clip grouping tool.
Run with: python -m clipgroup -o <output>
"""

import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger
from rich.markup import escape

from clipgroup.config import (
    CLIArgs,
    LOG_RETENTION,
    LOG_ROTATION,
    parse_arguments,
    args_to_cli_args,
)
from clipgroup.exceptions import InvalidRootError, MapperError
from clipgroup.mapping import Mapper
from clipgroup.models import available_kinds
from clipgroup.ui import (
    ConsoleUI,
    ConsoleLineSource,
    display_catalog_summary,
    display_plan,
    display_report,
)


def setup_logging(debug: bool = False, log_file: Optional[Path] = None) -> None:
    """
    Configure loguru logging.

    Args:
        debug: If True, enable debug-level logging on stderr.
        log_file: Optional file receiving every debug message.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if debug else "WARNING",
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )
    if log_file:
        logger.add(
            log_file,
            rotation=LOG_ROTATION,
            retention=LOG_RETENTION,
            level="DEBUG",
        )


def display_configuration(cli_args: CLIArgs, console: ConsoleUI) -> None:
    """
    Display the current configuration to the user.

    Args:
        cli_args: Parsed CLI arguments.
        console: Console UI instance.
    """
    mode = "[yellow]SIMULATION[/yellow]" if cli_args.dry_run else "[green]Normal[/green]"
    grouping = "By day" if cli_args.auto else "Manual ranges"

    console.print_panel(
        f"Card: [cyan]{escape(str(cli_args.root))}[/cyan]\n"
        f"Output: [cyan]{escape(str(cli_args.out))}[/cyan]\n"
        f"Grouping: {grouping}\n"
        f"Mode: {mode}",
        title="Clip grouping",
    )


def run(cli_args: CLIArgs, console: ConsoleUI) -> None:
    """
    Build the catalog, collect and validate groups, then copy them.

    Args:
        cli_args: Parsed CLI arguments.
        console: Console UI instance.

    Raises:
        MapperError: On the first error; nothing is rolled back.
    """
    mapper = Mapper(
        root=cli_args.root,
        output_dir=cli_args.out,
        prompts=ConsoleLineSource(console.console),
        mkdir=cli_args.mkdir,
        dry_run=cli_args.dry_run,
    )
    catalog = mapper.load_media()
    display_catalog_summary(catalog, available_kinds(), console)

    if cli_args.auto:
        console.print("Enter a name for the following days.")
        mapper.group_by_day()
    else:
        mapper.prompt_for_ops()

    display_plan(catalog, mapper.operations, console)
    console.print_info("Processing all operations... (this will take a while)")

    report = mapper.execute()
    display_report(report, mapper.output_dir, console)


def main(args: Optional[List[str]] = None) -> int:
    """
    Main entry point for the clip grouping tool.

    Args:
        args: Argument strings (None for sys.argv).

    Returns:
        Exit code (0 for success, the error's exit code otherwise).
    """
    cli_args = args_to_cli_args(parse_arguments(args))

    setup_logging(cli_args.debug, cli_args.log_file)
    console = ConsoleUI()

    if cli_args.dry_run:
        console.print_warning(
            "SIMULATION MODE\n\n"
            "• No folder will be created\n"
            "• No file will be copied"
        )
    display_configuration(cli_args, console)

    try:
        run(cli_args, console)
    except InvalidRootError as e:
        logger.error(str(e))
        if cli_args.uses_default_root:
            console.print_error("The current directory is not a valid SD mount point.")
            console.print_error("Change directories or use the `-r` option to set the mount point root.")
        console.print_error(str(e))
        return e.exit_code
    except MapperError as e:
        logger.error(str(e))
        console.print_error(str(e))
        return e.exit_code
    except KeyboardInterrupt:
        console.print_warning("Interrupted, files already copied are left in place")
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
