"""
Error taxonomy raised by the File Explorer engine.

Every engine operation either returns its documented result or raises one of
these. The presentation layer catches ``FileExplorerError`` and reports it.
"""
from __future__ import annotations

from pathlib import Path


class FileExplorerError(Exception):
    """Base class for all engine failures."""


class FilesystemError(FileExplorerError):
    """An OS call failed for ``path``; ``cause`` is the underlying OSError."""

    def __init__(self, path, cause: OSError):
        self.path = Path(path)
        self.cause = cause
        reason = getattr(cause, 'strerror', None) or str(cause)
        super().__init__(f'{self.path}: {reason}')


class IndexOutOfRange(FileExplorerError, IndexError):
    """Selection index is not a position in the current listing."""

    def __init__(self, index, size):
        self.index = index
        self.size = size
        super().__init__(f'Index {index} out of range for listing of {size} entries.')


class UnsupportedOperation(FileExplorerError):
    """Operation is not supported for this kind of entry."""


class NameSpaceExhausted(FileExplorerError):
    """No free name found within the resolver's attempt bound."""

    def __init__(self, directory, name, attempts):
        self.directory = Path(directory)
        self.name = name
        self.attempts = attempts
        super().__init__(
            f'No free name for {name!r} in {self.directory} after {attempts} attempts.'
        )


class InvalidName(FileExplorerError, ValueError):
    """Name is empty or is not a single path component."""

    def __init__(self, name):
        self.name = name
        if not name:
            message = 'Name cannot be empty.'
        else:
            message = f'Invalid name: {name!r}'
        super().__init__(message)


class NothingSelected(FileExplorerError):
    """Operation needs a selected entry and there is none."""

    def __init__(self, message='No item selected.'):
        super().__init__(message)


class ClipboardEmpty(FileExplorerError):
    """Paste requested while the clipboard holds no path."""

    def __init__(self, message='Clipboard is empty.'):
        super().__init__(message)


class RenameStateError(FileExplorerError):
    """Rename controller method called in the wrong state."""
