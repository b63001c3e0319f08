"""Filesystem operations for podcast export."""

from podexport.filesystem.discovery import (
    identifier_from_filename,
    get_cached_files,
)
from podexport.filesystem.file_ops import (
    ensure_directories,
    set_file_times,
    copy_file,
)
from podexport.filesystem.open_location import open_in_file_browser

__all__ = [
    "identifier_from_filename",
    "get_cached_files",
    "ensure_directories",
    "set_file_times",
    "copy_file",
    "open_in_file_browser",
]
