"""Apple Podcasts library access."""

from podexport.library.exceptions import (
    PodexportError,
    LibraryNotFoundError,
    CacheDirectoryError,
    MetadataSourceError,
)
from podexport.library.locations import (
    PodcastsLibrary,
    find_podcasts_container,
    locate_library,
)
from podexport.library.metadata_db import (
    MetadataDB,
    load_metadata_records,
    parse_published_at,
)

__all__ = [
    "PodexportError",
    "LibraryNotFoundError",
    "CacheDirectoryError",
    "MetadataSourceError",
    "PodcastsLibrary",
    "find_podcasts_container",
    "locate_library",
    "MetadataDB",
    "load_metadata_records",
    "parse_published_at",
]
