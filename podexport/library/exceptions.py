"""Exceptions for locating and reading the Podcasts library."""


class PodexportError(Exception):
    """Base class for all podexport errors."""

    pass


class LibraryNotFoundError(PodexportError):
    """The Podcasts app group container could not be found."""

    pass


class CacheDirectoryError(PodexportError):
    """The episode cache directory is missing or unreadable."""

    pass


class MetadataSourceError(PodexportError):
    """The Podcasts database could not be opened or queried."""

    pass
