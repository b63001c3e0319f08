"""Location of the Apple Podcasts library on disk."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from loguru import logger

from podexport.config.settings import (
    CACHE_RELATIVE_PATH,
    DATABASE_RELATIVE_PATH,
    GROUP_CONTAINERS_DIR,
    PODCASTS_CONTAINER_MARKER,
)
from podexport.library.exceptions import LibraryNotFoundError


@dataclass(frozen=True)
class PodcastsLibrary:
    """
    Paths inside the Podcasts app group container.

    Attributes:
        base_dir: The group container itself.
    """

    base_dir: Path

    @property
    def database_path(self) -> Path:
        """SQLite library holding podcast and episode metadata."""
        return self.base_dir / DATABASE_RELATIVE_PATH

    @property
    def cache_dir(self) -> Path:
        """Directory holding the downloaded episode files."""
        return self.base_dir / CACHE_RELATIVE_PATH


def find_podcasts_container(group_containers_dir: Path = GROUP_CONTAINERS_DIR) -> Path:
    """
    Find the Podcasts app folder among the group containers.

    Args:
        group_containers_dir: Folder listing the app group containers.

    Returns:
        Path of the first (sorted) entry whose name contains the Podcasts marker.

    Raises:
        LibraryNotFoundError: If the folder can't be listed or has no match.
    """
    try:
        entries = sorted(p.name for p in group_containers_dir.iterdir())
    except OSError as e:
        raise LibraryNotFoundError(
            f"Could not find podcasts app folder in {group_containers_dir}"
        ) from e

    for name in entries:
        if PODCASTS_CONTAINER_MARKER in name:
            logger.debug(f"Podcasts container: {name}")
            return group_containers_dir / name

    raise LibraryNotFoundError(
        f"Could not find podcasts app folder in {group_containers_dir}"
    )


def locate_library(library_dir: Optional[Path] = None) -> PodcastsLibrary:
    """
    Resolve the Podcasts library, honouring an explicit override.

    Args:
        library_dir: Group container to use instead of auto-detection.

    Returns:
        PodcastsLibrary instance.

    Raises:
        LibraryNotFoundError: If the library can't be located.
    """
    if library_dir is not None:
        if not library_dir.is_dir():
            raise LibraryNotFoundError(f"Podcasts library directory {library_dir} does not exist")
        return PodcastsLibrary(library_dir)
    return PodcastsLibrary(find_podcasts_container())
