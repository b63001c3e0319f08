"""User interface components."""

from podexport.ui.console import ConsoleUI
from podexport.ui.display import (
    format_file_count,
    generate_tree_structure,
    display_tree,
    display_configuration,
    display_summary,
)

__all__ = [
    "ConsoleUI",
    "format_file_count",
    "generate_tree_structure",
    "display_tree",
    "display_configuration",
    "display_summary",
]
