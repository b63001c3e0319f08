"""Discovery of cached episode files."""

from pathlib import Path
from typing import List

from loguru import logger

from podexport.config.settings import AUDIO_EXTENSION
from podexport.library.exceptions import CacheDirectoryError
from podexport.models.episode import CachedFile


def identifier_from_filename(file_name: str, extension: str = AUDIO_EXTENSION) -> str:
    """
    Derive the episode identifier from a cached filename.

    Examples:
        >>> identifier_from_filename("abc123.mp3")
        'abc123'
    """
    if file_name.lower().endswith(extension):
        return file_name[:-len(extension)]
    return file_name


def get_cached_files(cache_dir: Path) -> List[CachedFile]:
    """
    List the audio files in the Podcasts cache directory.

    Args:
        cache_dir: Directory holding the downloaded episodes.

    Returns:
        CachedFile list sorted by filename.

    Raises:
        CacheDirectoryError: If the directory can't be read.
    """
    try:
        entries = sorted(cache_dir.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise CacheDirectoryError(
            f"Could not find {AUDIO_EXTENSION} files in podcasts cache folder {cache_dir}: "
            f"either there are no downloaded podcasts or something changed in the podcasts app"
        ) from e

    cached_files = [
        CachedFile(identifier=identifier_from_filename(entry.name), source_path=entry)
        for entry in entries
        if entry.suffix.lower() == AUDIO_EXTENSION and entry.is_file()
    ]
    logger.info(f"{len(cached_files)} cached episodes found in {cache_dir}")
    return cached_files
