"""
Directory listing: read one directory into ordered, classified entries.
"""
import logging
import os
from datetime import datetime, timezone
from pathlib import Path

from ..constants import TIMESTAMP_FORMAT
from .entries import DirectoryEntry, FileEntry, sort_key
from .errors import FilesystemError

LOGGER = logging.getLogger(__name__)


def format_access_time(stat_result):
    """Format st_atime as 'YYYY-MM-DD HH:MM' (UTC), or '' when unavailable."""
    atime = getattr(stat_result, 'st_atime', None)
    if atime is None:
        return ''
    try:
        return datetime.fromtimestamp(atime, tz=timezone.utc).strftime(TIMESTAMP_FORMAT)
    except (OverflowError, OSError, ValueError):
        return ''


def _entry_stat(item):
    """Stat following symlinks, falling back to the link itself."""
    try:
        return item.stat()
    except OSError:
        return item.stat(follow_symlinks=False)


def _is_dir(item):
    try:
        return item.is_dir()
    except OSError:
        return False


def list_directory(directory, show_hidden=True):
    """Return directories then files of ``directory``, each sorted by name.

    Children removed while listing are skipped; a child that cannot be
    stat'ed is listed with size 0 and no access time. Raises FilesystemError
    only when the directory itself cannot be read.
    """
    base = Path(directory)
    dirs = []
    files = []
    try:
        with os.scandir(base) as it:
            for item in it:
                if not show_hidden and item.name.startswith('.'):
                    continue
                path = base / item.name
                if _is_dir(item):
                    dirs.append(DirectoryEntry(item.name, path))
                    continue
                try:
                    st = _entry_stat(item)
                except FileNotFoundError:
                    LOGGER.debug('Skipping %s: removed while listing', path)
                    continue
                except OSError as exc:
                    LOGGER.warning('Cannot stat %s: %s', path, exc)
                    files.append(FileEntry(item.name, 0, path))
                    continue
                files.append(FileEntry(item.name, st.st_size, path, format_access_time(st)))
    except OSError as exc:
        raise FilesystemError(base, exc) from exc

    dirs.sort(key=sort_key)
    files.sort(key=sort_key)
    LOGGER.debug('Listed %s: %d dirs, %d files', base, len(dirs), len(files))
    return dirs + files
