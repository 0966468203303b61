"""
Mutating file system operations for File Explorer.

Each function either completes and returns its result or raises a
FileExplorerError. Nothing here asks for confirmation: callers confirm
deletes before invoking :func:`delete`.
"""
import errno
import logging
import os
import shutil
from dataclasses import dataclass
from pathlib import Path

from ..constants import DEFAULT_FILE_NAME, DEFAULT_FOLDER_NAME
from .entries import DirectoryEntry
from .errors import FilesystemError, InvalidName, UnsupportedOperation
from .naming import resolve_creation_name, resolve_name

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenameResult:
    """Outcome of a rename; ``adjusted`` is set when the name was disambiguated."""

    path: Path
    name: str
    adjusted: bool = False


def validate_name(name):
    """Reject names that are empty or not a single path component."""
    if not name or name in ('.', '..'):
        raise InvalidName(name)
    separators = {os.sep}
    if os.altsep:
        separators.add(os.altsep)
    if any(sep in name for sep in separators) or '\0' in name:
        raise InvalidName(name)
    return name


def create_file(directory):
    """Create an empty ``new_file.txt`` (or ``new_file_<n>.txt``) in directory."""
    directory = Path(directory)
    path = directory / resolve_creation_name(DEFAULT_FILE_NAME, directory)
    try:
        with open(path, 'x'):
            pass
    except OSError as exc:
        raise FilesystemError(path, exc) from exc
    LOGGER.info('Created file %s', path)
    return path


def create_directory(directory):
    """Create ``new_folder`` (or ``new_folder_<n>``) in directory."""
    directory = Path(directory)
    path = directory / resolve_creation_name(DEFAULT_FOLDER_NAME, directory)
    try:
        os.mkdir(path)
    except OSError as exc:
        raise FilesystemError(path, exc) from exc
    LOGGER.info('Created directory %s', path)
    return path


def delete(entry):
    """Remove a file, or a directory with everything below it."""
    path = Path(entry.path)
    try:
        if isinstance(entry, DirectoryEntry) and not path.is_symlink():
            shutil.rmtree(path)
        else:
            os.unlink(path)
    except OSError as exc:
        raise FilesystemError(getattr(exc, 'filename', None) or path, exc) from exc
    LOGGER.info('Deleted %s', path)


def copy_into(source, destination_directory):
    """Copy file ``source`` into destination_directory under a free name.

    A failure part way through the copy can leave a partial file behind.
    """
    source = Path(source)
    destination_directory = Path(destination_directory)
    if source.is_dir():
        raise UnsupportedOperation(f'Copying directories is not supported: {source}')
    if not destination_directory.is_dir():
        raise FilesystemError(
            destination_directory,
            NotADirectoryError(f'Not a directory: {destination_directory}'),
        )
    target = destination_directory / resolve_name(source.name, destination_directory)
    try:
        shutil.copy(source, target)
    except OSError as exc:
        raise FilesystemError(getattr(exc, 'filename', None) or source, exc) from exc
    LOGGER.info('Copied %s to %s', source, target)
    return target


def rename(old_path, new_name):
    """Rename old_path within its directory, disambiguating on collision."""
    old_path = Path(old_path)
    validate_name(new_name)
    if new_name == old_path.name:
        if not os.path.lexists(old_path):
            raise FilesystemError(
                old_path, FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(old_path))
            )
        return RenameResult(old_path, new_name, adjusted=False)

    parent = old_path.parent
    resolved = resolve_name(new_name, parent)
    new_path = parent / resolved
    try:
        os.rename(old_path, new_path)
    except OSError as exc:
        raise FilesystemError(old_path, exc) from exc
    LOGGER.info('Renamed %s to %s', old_path, new_path)
    return RenameResult(new_path, resolved, adjusted=resolved != new_name)
