"""Configuration settings and constants for the podexport package."""

from pathlib import Path

# Audio files cached by the Podcasts app
AUDIO_EXTENSION: str = ".mp3"

# Maximum length of an exported base name, applied before sanitization
FILE_NAME_MAX_LENGTH: int = 50

# Apple Podcasts library layout
GROUP_CONTAINERS_DIR = Path.home() / "Library" / "Group Containers"
PODCASTS_CONTAINER_MARKER: str = "groups.com.apple.podcasts"
DATABASE_RELATIVE_PATH = Path("Documents") / "MTLibrary.sqlite"
CACHE_RELATIVE_PATH = Path("Library") / "Cache"

# Publish dates are stored 31 years behind; corrected in the query
PODCASTS_SELECT_SQL: str = """
    SELECT PC.ZTITLE AS zpodcast, EP.ZCLEANEDTITLE AS zcleanedtitle, EP.ZUUID AS zuuid,
        datetime(EP.ZPUBDATE, 'unixepoch', '+31 years') AS date
    FROM ZMTPODCAST PC LEFT OUTER JOIN ZMTEPISODE EP
    ON PC.Z_PK = EP.ZPODCAST
"""
PUBLISHED_AT_FORMAT: str = "%Y-%m-%d %H:%M:%S"

# Output
DEFAULT_OUTPUT_DIR = Path.home() / "Downloads" / "PodcastsExport"
DATE_SUBDIR_FORMAT: str = "%Y.%m.%d"

# Logging
LOG_FILE: str = "podexport.log"
LOG_ROTATION: str = "10 MB"
LOG_RETENTION: str = "7 days"
