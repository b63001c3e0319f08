"""Command-line interface argument parsing."""

import argparse
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import List, Optional

from podexport.config.settings import DATE_SUBDIR_FORMAT, DEFAULT_OUTPUT_DIR


@dataclass
class CLIArgs:
    """
    Parsed command-line arguments.

    Attributes:
        output_dir: Base output directory.
        date_subdir: If True, export into a YYYY.MM.DD subdirectory.
        patterns: Substring patterns used to select episodes.
        update_utime: If True, set file times from the publish date.
        no_spaces: If True, replace spaces with underscores.
        quiet: If True, only print the final summary.
        report: If True, print the export plan as a tree.
        open_output: If True, open the output folder when done.
        dry_run: If True, simulate without copying.
        library_dir: Override for the Podcasts group container.
        workers: Thread pool size.
        debug: If True, enable debug logging.
    """

    output_dir: Path = DEFAULT_OUTPUT_DIR
    date_subdir: bool = True
    patterns: List[str] = field(default_factory=list)
    update_utime: bool = False
    no_spaces: bool = False
    quiet: bool = False
    report: bool = False
    open_output: bool = True
    dry_run: bool = False
    library_dir: Optional[Path] = None
    workers: Optional[int] = None
    debug: bool = False

    @property
    def has_filters(self) -> bool:
        """Check if the run is restricted by patterns."""
        return bool(self.patterns)


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog='podexport',
        description="""
        Copies downloaded Apple Podcasts episodes out of the app cache into
        a folder per podcast, named after the episode title.
        """
    )

    parser.add_argument(
        '-o', '--outputdir',
        default=str(DEFAULT_OUTPUT_DIR),
        help=f"base output directory (default: {DEFAULT_OUTPUT_DIR})"
    )

    # Date subdirectory on by default, --no-datesubdir turns it off
    parser.add_argument(
        '-d', '--datesubdir',
        dest='datesubdir',
        action='store_true',
        help="add a YYYY.MM.DD subdirectory to the output dir (default)"
    )
    parser.add_argument(
        '--no-datesubdir',
        dest='datesubdir',
        action='store_false',
        help="export directly into the output dir"
    )
    parser.set_defaults(datesubdir=True)

    parser.add_argument(
        '-p', '--pattern',
        action='append',
        default=[],
        help="file or podcast substring to match (repeatable, case-insensitive)"
    )

    parser.add_argument(
        '-u', '--updateutime',
        action='store_true',
        help="set the exported files' times to the episode publish date"
    )

    parser.add_argument(
        '--nospaces',
        action='store_true',
        help="replace spaces in file and folder names with underscores"
    )

    parser.add_argument(
        '-q', '--quiet',
        action='store_true',
        help="only print the final summary"
    )

    parser.add_argument(
        '-r', '--report',
        action='store_true',
        help="print the export plan as a folder tree"
    )

    parser.add_argument(
        '--no-open',
        action='store_true',
        help="do not open the output folder after exporting"
    )

    parser.add_argument(
        '--dry-run',
        action='store_true',
        help="simulation mode - compute the plan without copying anything"
    )

    parser.add_argument(
        '--library-dir',
        default=None,
        help="Podcasts group container to read from (default: auto-detected)"
    )

    parser.add_argument(
        '-j', '--workers',
        type=int,
        default=None,
        help="number of worker threads"
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help="enable debug mode"
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
    # Blank patterns would match everything
    patterns = [p for p in namespace.pattern if p]

    return CLIArgs(
        output_dir=Path(namespace.outputdir).expanduser(),
        date_subdir=namespace.datesubdir,
        patterns=patterns,
        update_utime=namespace.updateutime,
        no_spaces=namespace.nospaces,
        quiet=namespace.quiet,
        report=namespace.report,
        open_output=not namespace.no_open,
        dry_run=namespace.dry_run,
        library_dir=Path(namespace.library_dir).expanduser() if namespace.library_dir else None,
        workers=namespace.workers,
        debug=namespace.debug,
    )


def get_output_dir_path(base_dir: Path, date_subdir: bool, today: Optional[date] = None) -> Path:
    """
    Compute the directory the episodes are exported into.

    Args:
        base_dir: Base output directory.
        date_subdir: If True, append a YYYY.MM.DD folder for the current day.
        today: Date to use instead of the current day.

    Returns:
        Output root path.
    """
    if not date_subdir:
        return base_dir
    today = today or date.today()
    return base_dir / today.strftime(DATE_SUBDIR_FORMAT)
