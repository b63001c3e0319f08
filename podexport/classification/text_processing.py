"""Text processing utilities for episode titles and filenames."""

import re
from typing import Optional

from podexport.config.settings import FILE_NAME_MAX_LENGTH

# Characters rejected by at least one common filesystem
ILLEGAL_CHARS = re.compile(r'[/?<>\\:*|"]')
CONTROL_CHARS = re.compile(r'[\x00-\x1f\x80-\x9f]')
RESERVED_NAME = re.compile(r'^\.+$')
WINDOWS_RESERVED_NAME = re.compile(r'^(con|prn|aux|nul|com[0-9]|lpt[0-9])(\..*)?$', re.IGNORECASE)
WINDOWS_TRAILING = re.compile(r'[. ]+$')

# Most filesystems cap a path segment at 255 bytes
MAX_SEGMENT_BYTES: int = 255


def truncate_name(name: str, max_length: int = FILE_NAME_MAX_LENGTH) -> str:
    """
    Cut a base name to at most max_length characters.

    Args:
        name: Base name before sanitization.
        max_length: Maximum number of characters kept.

    Returns:
        The first max_length characters of name.
    """
    return name[:max_length]


def _truncate_bytes(text: str, limit: int = MAX_SEGMENT_BYTES) -> str:
    """Truncate to limit UTF-8 bytes without splitting a character."""
    encoded = text.encode('utf-8')
    if len(encoded) <= limit:
        return text
    return encoded[:limit].decode('utf-8', errors='ignore')


def replace_spaces(text: str) -> str:
    """
    Replace every space with an underscore.

    Examples:
        >>> replace_spaces("Tech Weekly")
        'Tech_Weekly'
    """
    return text.replace(' ', '_')


def sanitize_name(name: Optional[str], no_spaces: bool = False) -> str:
    """
    Make a string safe to use as a single path segment.

    This function:
    - Removes characters illegal on Windows, macOS or Linux
    - Removes control characters
    - Blanks names made only of dots and Windows device names
    - Strips trailing dots and spaces
    - Limits the result to 255 UTF-8 bytes
    - Optionally replaces spaces with underscores

    Args:
        name: Input string (None gives an empty result).
        no_spaces: If True, replace spaces with underscores afterwards.

    Returns:
        Sanitized segment, possibly empty.

    Examples:
        >>> sanitize_name("AC/DC: Live?")
        'ACDC Live'
        >>> sanitize_name("Tech Weekly", no_spaces=True)
        'Tech_Weekly'
    """
    if not name:
        return ""

    result = ILLEGAL_CHARS.sub('', name)
    result = CONTROL_CHARS.sub('', result)
    result = RESERVED_NAME.sub('', result)
    result = WINDOWS_RESERVED_NAME.sub('', result)
    result = WINDOWS_TRAILING.sub('', result)
    result = _truncate_bytes(result)

    if no_spaces:
        result = replace_spaces(result)
    return result


def matches_any(text: str, patterns) -> bool:
    """
    Check whether text contains any of the patterns, ignoring case.

    Args:
        text: Text to search in.
        patterns: Iterable of substrings.

    Returns:
        True if at least one pattern occurs in text.
    """
    lowered = text.lower()
    return any(pattern.lower() in lowered for pattern in patterns)
