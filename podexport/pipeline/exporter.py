"""Placement of planned episodes into the output tree."""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Optional

from loguru import logger
from tqdm import tqdm

from podexport.filesystem.file_ops import copy_file, ensure_directories
from podexport.models.episode import (
    ExportOutcome,
    ExportPlan,
    ExportReport,
    ResolvedEpisode,
)


def export_episode(
    episode: ResolvedEpisode,
    output_root: Path,
    adjust_timestamps: bool = False,
    dry_run: bool = False,
) -> ExportOutcome:
    """
    Copy one episode unless its destination already exists.

    The destination directory must already exist. An existing
    destination is never overwritten, which makes re-runs against the
    same output root safe.

    Args:
        episode: Episode to export.
        output_root: Root of the export tree.
        adjust_timestamps: If True, apply the publish date as file times.
        dry_run: If True, only simulate the copy.

    Returns:
        ExportOutcome describing what happened.
    """
    destination = episode.destination_path(output_root)
    relative = episode.relative_path

    if destination.exists():
        logger.info(f"Already have {relative}, skipping")
        return ExportOutcome(episode, destination, ExportOutcome.SKIPPED)

    if dry_run:
        logger.info(f"SIMULATION - {episode.source_path.name} -> {relative}")
        return ExportOutcome(episode, destination, ExportOutcome.COPIED)

    timestamp = episode.timestamp if adjust_timestamps else None
    try:
        copy_file(episode.source_path, destination, timestamp)
    except OSError as e:
        logger.error(f"Error exporting {episode.source_path.name} -> {relative}: {e}")
        return ExportOutcome(episode, destination, ExportOutcome.FAILED, error=str(e))

    logger.info(f"{episode.source_path.name} -> {relative}")
    return ExportOutcome(episode, destination, ExportOutcome.COPIED)


def export_plan(
    plan: ExportPlan,
    output_root: Path,
    adjust_timestamps: bool = False,
    dry_run: bool = False,
    max_workers: Optional[int] = None,
    show_progress: bool = True,
) -> ExportReport:
    """
    Export every planned episode under output_root.

    All destination directories are created before the copies start,
    so concurrent copies never race on directory creation. The plan's
    destinations are unique, so no two copies write the same file.

    Args:
        plan: Deduplicated export plan.
        output_root: Root of the export tree.
        adjust_timestamps: If True, apply publish dates as file times.
        dry_run: If True, simulate without creating or copying anything.
        max_workers: Thread pool size.
        show_progress: If True, display a progress bar.

    Returns:
        ExportReport with planned, copied, skipped and failed counts.
    """
    ensure_directories(plan.destination_dirs(output_root), dry_run)

    def export(episode: ResolvedEpisode) -> ExportOutcome:
        return export_episode(episode, output_root, adjust_timestamps, dry_run)

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        outcomes = list(tqdm(
            executor.map(export, plan),
            desc="Exporting episodes",
            total=len(plan),
            unit="file",
            disable=not show_progress,
        ))

    report = ExportReport.from_outcomes(output_root, outcomes)
    logger.info(
        f"Export finished: {report.copied} copied, {report.skipped} already present, "
        f"{report.failed} failed"
    )
    return report
