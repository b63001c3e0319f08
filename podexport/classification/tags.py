"""Embedded audio tag extraction."""

from pathlib import Path
from typing import Optional

from loguru import logger
from mutagen import File as MutagenFile


def read_title_tag(path: Path) -> Optional[str]:
    """
    Read the title tag embedded in an audio file.

    Cached episodes are sometimes truncated or not audio at all, so
    any failure is reported as a missing title.

    Args:
        path: Audio file to inspect.

    Returns:
        The first non-blank title value, or None.
    """
    try:
        audio = MutagenFile(path, easy=True)
    except Exception as e:
        logger.debug(f"Unreadable tags for {path.name}: {e}")
        return None

    if audio is None or not audio.tags:
        return None

    for value in audio.tags.get('title', []):
        title = str(value).strip()
        if title:
            return title
    return None
