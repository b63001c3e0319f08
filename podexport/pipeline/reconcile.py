"""Reconciliation of cached episode files with library metadata.

Each cached file is resolved independently into a ResolvedEpisode: its
export name comes from the library's cleaned title, else the embedded
title tag, else the raw identifier. The resolved episodes are then
filtered and deduplicated into an ExportPlan whose destinations never
collide.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from loguru import logger
from tqdm import tqdm

from podexport.classification.tags import read_title_tag
from podexport.classification.text_processing import (
    matches_any,
    sanitize_name,
    truncate_name,
)
from podexport.config.settings import AUDIO_EXTENSION, FILE_NAME_MAX_LENGTH
from podexport.models.episode import (
    CachedFile,
    DestinationKey,
    ExportPlan,
    MetadataRecord,
    ResolvedEpisode,
)

TagReader = Callable[..., Optional[str]]


def build_metadata_index(records: Iterable[MetadataRecord]) -> Dict[str, MetadataRecord]:
    """
    Index records by identifier.

    When the library holds several rows for one identifier, the first
    row returned by the query is kept.

    Args:
        records: Records in query order.

    Returns:
        Dict mapping identifier to record.
    """
    index: Dict[str, MetadataRecord] = {}
    for record in records:
        index.setdefault(record.identifier, record)
    return index


def resolve_export_base(
    cached: CachedFile,
    record: Optional[MetadataRecord],
    tag_reader: TagReader = read_title_tag,
    no_spaces: bool = False,
) -> str:
    """
    Pick the path-safe base name of the exported file.

    Candidates are tried in order and only evaluated when the previous
    ones are missing, so the audio file is only opened when the library
    has no usable cleaned title for it:
    1. cleaned title from the library
    2. title tag embedded in the audio file
    3. raw identifier

    Each candidate is truncated, then sanitized. A candidate that is
    blank or sanitizes to nothing (a title like "???") counts as missing.

    Args:
        cached: Cached file being resolved.
        record: Matching library record, if any.
        tag_reader: Callable returning the embedded title of a path.
        no_spaces: If True, spaces become underscores.

    Returns:
        The first candidate with a non-empty safe name.
    """
    candidates = (
        lambda: record.cleaned_title if record else None,
        lambda: tag_reader(cached.source_path),
        lambda: cached.identifier,
    )
    for candidate in candidates:
        safe_name = sanitize_name(truncate_name(candidate() or "", FILE_NAME_MAX_LENGTH), no_spaces)
        if safe_name:
            return safe_name
    return cached.identifier


def resolve_episode(
    cached: CachedFile,
    record: Optional[MetadataRecord],
    no_spaces: bool = False,
    tag_reader: TagReader = read_title_tag,
) -> ResolvedEpisode:
    """
    Resolve the export folder and file name of one cached file.

    Args:
        cached: Cached file being resolved.
        record: Matching library record, if any.
        no_spaces: If True, spaces become underscores in both names.
        tag_reader: Callable returning the embedded title of a path.

    Returns:
        ResolvedEpisode for the file.
    """
    safe_base = resolve_export_base(cached, record, tag_reader, no_spaces)
    group_name = record.group_name if record else None

    return ResolvedEpisode(
        identifier=cached.identifier,
        source_path=cached.source_path,
        group_folder_name=sanitize_name(group_name, no_spaces),
        export_file_name=f"{safe_base}{AUDIO_EXTENSION}",
        timestamp=record.published_at if record else None,
    )


def filter_episodes(
    episodes: Sequence[ResolvedEpisode],
    patterns: Sequence[str],
) -> List[ResolvedEpisode]:
    """
    Keep episodes whose file or folder name contains any pattern.

    Args:
        episodes: Resolved episodes.
        patterns: Case-insensitive substrings; empty keeps everything.

    Returns:
        Matching episodes in their original order.
    """
    if not patterns:
        return list(episodes)

    return [
        e for e in episodes
        if matches_any(e.export_file_name, patterns) or matches_any(e.group_folder_name, patterns)
    ]


def deduplicate(episodes: Iterable[ResolvedEpisode]) -> List[ResolvedEpisode]:
    """
    Collapse episodes sharing a destination.

    The library occasionally lists the same episode twice, which would
    make two copies target the same file. The last episode seen for a
    destination wins and takes the position of the first one.

    Args:
        episodes: Resolved episodes in input order.

    Returns:
        Episodes with unique destination keys.
    """
    unique: Dict[DestinationKey, ResolvedEpisode] = {}
    for episode in episodes:
        key = episode.destination_key
        if key in unique:
            logger.debug(
                f"Duplicate destination {episode.relative_path}: "
                f"{unique[key].identifier} replaced by {episode.identifier}"
            )
        unique[key] = episode
    return list(unique.values())


def reconcile(
    cached_files: Sequence[CachedFile],
    metadata: Iterable[MetadataRecord],
    filters: Sequence[str] = (),
    sanitize_whitespace: bool = False,
    tag_reader: TagReader = read_title_tag,
    max_workers: Optional[int] = None,
    show_progress: bool = False,
) -> ExportPlan:
    """
    Build the export plan for a set of cached files.

    Files are resolved concurrently; results keep the order of
    cached_files so the plan is deterministic for a given input.

    Args:
        cached_files: Files found in the cache directory.
        metadata: Library records (may be empty when the library is unusable).
        filters: Case-insensitive substring patterns.
        sanitize_whitespace: If True, spaces become underscores.
        tag_reader: Callable returning the embedded title of a path.
        max_workers: Thread pool size.
        show_progress: If True, display a progress bar.

    Returns:
        ExportPlan with unique destinations.
    """
    index = build_metadata_index(metadata)

    def resolve(cached: CachedFile) -> ResolvedEpisode:
        return resolve_episode(cached, index.get(cached.identifier), sanitize_whitespace, tag_reader)

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        resolved = list(tqdm(
            executor.map(resolve, cached_files),
            desc="Resolving episodes",
            total=len(cached_files),
            unit="file",
            disable=not show_progress,
        ))

    matched = sum(1 for c in cached_files if c.identifier in index)
    logger.info(f"{matched} of {len(cached_files)} cached episodes found in the library")

    filtered = filter_episodes(resolved, filters)
    if filters:
        logger.info(f"{len(filtered)} of {len(resolved)} episodes match {list(filters)}")

    episodes = deduplicate(filtered)
    if len(episodes) != len(filtered):
        logger.info(f"{len(filtered) - len(episodes)} duplicate destinations collapsed")

    return ExportPlan(episodes=episodes, total_candidates=len(cached_files))
