"""
Open a file with the desktop's default application.
"""
import logging
import os
import shutil
import subprocess
import sys
from pathlib import Path

from .errors import FilesystemError

LOGGER = logging.getLogger(__name__)


def default_open_command(platform=None):
    """Return the launcher command for the platform, or None on Windows."""
    platform = platform or sys.platform
    if platform == 'win32':
        return None
    if platform == 'darwin':
        return 'open'
    return 'xdg-open'


def open_with_default_app(path, platform=None):
    """Spawn the default handler for ``path`` without waiting for it."""
    path = Path(path)
    platform = platform or sys.platform
    command = default_open_command(platform)
    try:
        if command is None:
            os.startfile(str(path))  # type: ignore[attr-defined]
        else:
            launcher = shutil.which(command)
            if launcher is None:
                raise FileNotFoundError(f'{command} not found')
            subprocess.Popen(
                [launcher, str(path)],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
    except OSError as exc:
        raise FilesystemError(path, exc) from exc
    LOGGER.info('Opened %s with %s', path, command or 'startfile')
