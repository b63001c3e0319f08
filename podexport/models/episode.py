"""Episode data models for the podexport package."""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

DestinationKey = Tuple[str, str]


@dataclass(frozen=True)
class CachedFile:
    """An audio file found in the Podcasts cache directory."""

    identifier: str
    source_path: Path


@dataclass(frozen=True)
class MetadataRecord:
    """
    One row of the Podcasts library join.

    Every field but the identifier may be missing: the library holds
    podcasts without a cleaned title or a publish date.
    """

    identifier: str
    group_name: Optional[str] = None
    cleaned_title: Optional[str] = None
    published_at: Optional[datetime] = None


@dataclass
class ResolvedEpisode:
    """
    A cached file with its export location resolved.

    Attributes:
        identifier: Opaque identifier taken from the cached filename.
        source_path: Path of the cached audio file.
        group_folder_name: Podcast folder, or empty for the output root.
        export_file_name: Sanitized file name including the extension.
        timestamp: Publish date used for the file times, if known.
    """

    identifier: str
    source_path: Path
    group_folder_name: str
    export_file_name: str
    timestamp: Optional[datetime] = None

    @property
    def destination_key(self) -> DestinationKey:
        """Pair identifying the destination file inside the output root."""
        return self.group_folder_name, self.export_file_name

    @property
    def relative_path(self) -> Path:
        """Destination path relative to the output root."""
        if self.group_folder_name:
            return Path(self.group_folder_name) / self.export_file_name
        return Path(self.export_file_name)

    def destination_dir(self, output_root: Path) -> Path:
        """Directory receiving this episode under output_root."""
        if self.group_folder_name:
            return output_root / self.group_folder_name
        return output_root

    def destination_path(self, output_root: Path) -> Path:
        """Full destination path under output_root."""
        return self.destination_dir(output_root) / self.export_file_name


@dataclass
class ExportPlan:
    """
    Ordered episodes to export, unique by destination key.

    Attributes:
        episodes: Episodes in export order.
        total_candidates: Number of cached files considered before
            filtering and deduplication.
    """

    episodes: List[ResolvedEpisode] = field(default_factory=list)
    total_candidates: int = 0

    def __len__(self) -> int:
        return len(self.episodes)

    def __iter__(self) -> Iterator[ResolvedEpisode]:
        return iter(self.episodes)

    def destination_dirs(self, output_root: Path) -> List[Path]:
        """Unique destination directories, in plan order."""
        return list(dict.fromkeys(e.destination_dir(output_root) for e in self.episodes))


@dataclass
class ExportOutcome:
    """Result of exporting a single episode."""

    COPIED = "copied"
    SKIPPED = "skipped"
    FAILED = "failed"

    episode: ResolvedEpisode
    destination: Path
    status: str
    error: Optional[str] = None


@dataclass
class ExportReport:
    """Counts and per-entry outcomes of an export run."""

    output_root: Path
    planned: int = 0
    copied: int = 0
    skipped: int = 0
    failed: int = 0
    outcomes: List[ExportOutcome] = field(default_factory=list)

    @classmethod
    def from_outcomes(cls, output_root: Path, outcomes: List[ExportOutcome]) -> "ExportReport":
        """Builds the report counts from a list of outcomes."""
        return cls(
            output_root=output_root,
            planned=len(outcomes),
            copied=sum(1 for o in outcomes if o.status == ExportOutcome.COPIED),
            skipped=sum(1 for o in outcomes if o.status == ExportOutcome.SKIPPED),
            failed=sum(1 for o in outcomes if o.status == ExportOutcome.FAILED),
            outcomes=outcomes,
        )
