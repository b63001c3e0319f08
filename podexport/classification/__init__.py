"""Episode naming: tags and filename sanitization."""

from podexport.classification.text_processing import (
    truncate_name,
    replace_spaces,
    sanitize_name,
    matches_any,
)
from podexport.classification.tags import read_title_tag

__all__ = [
    "truncate_name",
    "replace_spaces",
    "sanitize_name",
    "matches_any",
    "read_title_tag",
]
