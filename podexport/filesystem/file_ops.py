"""File operations for exporting episodes."""

import os
import shutil
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Optional

from loguru import logger

PARTIAL_SUFFIX = ".part"


def ensure_directories(directories: Iterable[Path], dry_run: bool = False) -> List[Path]:
    """
    Create each directory once, treating existing ones as success.

    Args:
        directories: Directories to create (duplicates are collapsed).
        dry_run: If True, only simulate the operation.

    Returns:
        The unique directories, in first-seen order.
    """
    unique_dirs = list(dict.fromkeys(directories))
    if dry_run:
        logger.debug(f"SIMULATION - Create {len(unique_dirs)} directories")
        return unique_dirs

    for dir_path in unique_dirs:
        dir_path.mkdir(parents=True, exist_ok=True)
    logger.debug(f"{len(unique_dirs)} directories ready")
    return unique_dirs


def set_file_times(path: Path, timestamp: datetime) -> None:
    """
    Set the access and modification times of a file.

    Args:
        path: File to update.
        timestamp: Time to apply (naive values are taken as local time).
    """
    epoch = timestamp.timestamp()
    os.utime(path, (epoch, epoch))


def copy_file(source: Path, destination: Path, timestamp: Optional[datetime] = None) -> None:
    """
    Copy file contents byte for byte, optionally setting its times.

    The bytes are written to a ".part" sibling which is renamed onto the
    destination only once the copy and the time update succeeded, so a
    failed copy never leaves a truncated file at the destination.
    Metadata such as permissions is not copied: the exported file
    belongs to the user, not to the Podcasts app.

    Args:
        source: Cached audio file.
        destination: Destination path (its directory must exist).
        timestamp: If given, applied as access and modification time.

    Raises:
        OSError: If the copy or the time update fails.
    """
    partial = destination.with_name(destination.name + PARTIAL_SUFFIX)
    try:
        shutil.copyfile(source, partial)
        if timestamp is not None:
            set_file_times(partial, timestamp)
        os.replace(partial, destination)
    except OSError:
        partial.unlink(missing_ok=True)
        raise
