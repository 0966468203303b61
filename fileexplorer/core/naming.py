"""
Conflict-free name resolution inside a directory.

Two schemes:

* creation names (``new_file.txt`` -> ``new_file_0.txt``) put ``_<n>`` before
  the final extension;
* rename and paste names (``report`` -> ``report0``) append the counter to the
  whole requested name.
"""
import logging
import os

from ..constants import MAX_NAME_ATTEMPTS
from .errors import NameSpaceExhausted

LOGGER = logging.getLogger(__name__)


def _exists(directory, name):
    return os.path.lexists(os.path.join(directory, name))


def _search(directory, desired, candidate_for, max_attempts):
    if not _exists(directory, desired):
        return desired
    for index in range(max_attempts):
        candidate = candidate_for(index)
        if not _exists(directory, candidate):
            LOGGER.debug('Resolved %r to %r in %s', desired, candidate, directory)
            return candidate
    raise NameSpaceExhausted(directory, desired, max_attempts)


def resolve_name(desired, directory, max_attempts=MAX_NAME_ATTEMPTS):
    """Return ``desired`` or ``desired<n>``, whichever is free first."""
    return _search(directory, desired, lambda index: f'{desired}{index}', max_attempts)


def resolve_creation_name(desired, directory, max_attempts=MAX_NAME_ATTEMPTS):
    """Return ``desired`` or ``<stem>_<n><ext>``, whichever is free first."""
    stem, ext = os.path.splitext(desired)
    return _search(directory, desired, lambda index: f'{stem}_{index}{ext}', max_attempts)
