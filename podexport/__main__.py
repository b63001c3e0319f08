"""Entry point for the podexport package.

This module provides the command-line entry point for the podcast export tool.
Run with: python -m podexport
"""

import sys
from typing import List, Optional

from loguru import logger

from podexport.config import (
    ExportOptions,
    args_to_cli_args,
    get_output_dir_path,
    parse_arguments,
)
from podexport.config.settings import LOG_FILE, LOG_RETENTION, LOG_ROTATION
from podexport.filesystem import open_in_file_browser
from podexport.library import CacheDirectoryError, LibraryNotFoundError, locate_library
from podexport.pipeline import ExportPipeline
from podexport.ui import (
    ConsoleUI,
    display_configuration,
    display_summary,
    display_tree,
    generate_tree_structure,
)


def setup_logging(debug: bool = False, quiet: bool = False) -> None:
    """
    Configure loguru logging.

    Args:
        debug: If True, enable debug-level logging.
        quiet: If True, only warnings and errors reach the terminal.
    """
    logger.remove()
    if debug:
        level = "DEBUG"
    elif quiet:
        level = "WARNING"
    else:
        level = "INFO"
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )
    logger.add(
        LOG_FILE,
        rotation=LOG_ROTATION,
        retention=LOG_RETENTION,
        level="DEBUG",
    )


def main(args: Optional[List[str]] = None) -> int:
    """
    Main entry point for the podcast export tool.

    Args:
        args: Command-line arguments (None for sys.argv).

    Returns:
        Exit code (0 for success, 1 when the library or cache can't be reached).
    """
    cli_args = args_to_cli_args(parse_arguments(args))

    setup_logging(cli_args.debug, cli_args.quiet)
    console = ConsoleUI(quiet=cli_args.quiet)

    options = ExportOptions(
        output_root=get_output_dir_path(cli_args.output_dir, cli_args.date_subdir),
        patterns=cli_args.patterns,
        replace_spaces=cli_args.no_spaces,
        update_timestamps=cli_args.update_utime,
        dry_run=cli_args.dry_run,
        quiet=cli_args.quiet,
        max_workers=cli_args.workers,
    )
    display_configuration(cli_args, options, console)

    try:
        library = locate_library(cli_args.library_dir)
    except LibraryNotFoundError as e:
        logger.error(f"{e} ({e.__cause__})" if e.__cause__ else str(e))
        console.print_error(str(e), e.__cause__)
        return 1

    pipeline = ExportPipeline(library, options)

    metadata = pipeline.load_metadata()
    if not metadata:
        console.print_warning("No podcast metadata available, names fall back to audio tags or identifiers")

    try:
        cached_files = pipeline.discover()
    except CacheDirectoryError as e:
        logger.error(f"{e} ({e.__cause__})" if e.__cause__ else str(e))
        console.print_error(str(e), e.__cause__)
        return 1

    plan = pipeline.plan(cached_files, metadata)
    if cli_args.has_filters:
        console.print_info(f"Exporting {len(plan)} of {plan.total_candidates}")

    if cli_args.report:
        display_tree(console, generate_tree_structure(plan), str(options.output_root))

    report = pipeline.export(plan)
    display_summary(console, plan, report, options.dry_run)

    if cli_args.open_output and not options.dry_run and options.output_root.is_dir():
        open_in_file_browser(options.output_root)

    return 0


if __name__ == "__main__":
    sys.exit(main())
