"""Open the export folder in the system file manager."""

import platform
import subprocess
from pathlib import Path

from loguru import logger


def open_in_file_browser(path: Path) -> bool:
    """
    Launch the platform file manager on a folder without waiting for it.

    Args:
        path: Folder to show.

    Returns:
        True if the file manager was launched, False otherwise.
    """
    system = platform.system()
    if system == "Darwin":
        command = ["open", str(path)]
    elif system == "Windows":
        command = ["explorer", str(path)]
    else:
        command = ["xdg-open", str(path)]

    try:
        subprocess.Popen(
            command,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL
        )
    except OSError as e:
        logger.warning(f"Could not open {path} in the file browser: {e}")
        return False

    logger.debug(f"Opened {path} with {command[0]}")
    return True
