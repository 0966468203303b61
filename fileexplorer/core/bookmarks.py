"""
Bookmark locations for the sidebar (home and the standard user folders).
"""
import logging
import os
from dataclasses import dataclass
from pathlib import Path

import platformdirs

from ..constants import BOOKMARK_LOCATIONS

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Bookmark:
    name: str
    path: Path


def _platform_dir(lookup):
    """Return the platformdirs location named by ``lookup``, or None."""
    try:
        value = getattr(platformdirs, lookup)()
    except (OSError, ValueError) as exc:
        LOGGER.debug('platformdirs.%s failed: %s', lookup, exc)
        return None
    return Path(value) if value else None


def get_default_bookmarks(home=None):
    """Return the Home, Downloads, Documents, Pictures, Music, Videos bookmarks.

    Each location comes from platformdirs, then ``~/<Name>``, and falls back
    to the home directory when neither is a directory.
    """
    home = Path(home) if home is not None else Path(os.path.expanduser('~'))
    bookmarks = []
    for name, lookup in BOOKMARK_LOCATIONS:
        path = home
        if lookup is not None:
            configured = _platform_dir(lookup)
            if configured is not None and configured.is_dir():
                path = configured
            elif (home / name).is_dir():
                path = home / name
        bookmarks.append(Bookmark(name, path))
    return bookmarks
