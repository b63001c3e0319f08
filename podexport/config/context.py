"""Explicit options for an export run."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


@dataclass
class ExportOptions:
    """
    Runtime options passed through the export pipeline.

    Attributes:
        output_root: Directory receiving the exported tree.
        patterns: Case-insensitive substring filters (empty keeps all).
        replace_spaces: If True, spaces become underscores in exported names.
        update_timestamps: If True, exported files get the publish date as mtime.
        dry_run: If True, plan and report without touching the filesystem.
        quiet: If True, suppress per-file output and progress bars.
        max_workers: Thread pool size (None lets the executor decide).
    """

    output_root: Path
    patterns: List[str] = field(default_factory=list)
    replace_spaces: bool = False
    update_timestamps: bool = False
    dry_run: bool = False
    quiet: bool = False
    max_workers: Optional[int] = None
