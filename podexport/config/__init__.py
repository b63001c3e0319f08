"""Configuration and CLI handling."""

from podexport.config.settings import (
    AUDIO_EXTENSION,
    FILE_NAME_MAX_LENGTH,
    GROUP_CONTAINERS_DIR,
    PODCASTS_CONTAINER_MARKER,
    DATABASE_RELATIVE_PATH,
    CACHE_RELATIVE_PATH,
    DEFAULT_OUTPUT_DIR,
    DATE_SUBDIR_FORMAT,
)
from podexport.config.cli import (
    CLIArgs,
    create_parser,
    parse_arguments,
    args_to_cli_args,
    get_output_dir_path,
)
from podexport.config.context import ExportOptions

__all__ = [
    "AUDIO_EXTENSION",
    "FILE_NAME_MAX_LENGTH",
    "GROUP_CONTAINERS_DIR",
    "PODCASTS_CONTAINER_MARKER",
    "DATABASE_RELATIVE_PATH",
    "CACHE_RELATIVE_PATH",
    "DEFAULT_OUTPUT_DIR",
    "DATE_SUBDIR_FORMAT",
    "CLIArgs",
    "create_parser",
    "parse_arguments",
    "args_to_cli_args",
    "get_output_dir_path",
    "ExportOptions",
]
