"""
File Explorer engine: listing, naming and file operations.
"""
from .entries import DirectoryEntry, Entry, FileEntry
from .errors import (
    ClipboardEmpty,
    FileExplorerError,
    FilesystemError,
    IndexOutOfRange,
    InvalidName,
    NameSpaceExhausted,
    NothingSelected,
    RenameStateError,
    UnsupportedOperation,
)
from .listing import list_directory
from .naming import resolve_creation_name, resolve_name
from .operations import RenameResult, copy_into, create_directory, create_file, delete, rename
from .session import BrowserSession

__all__ = [
    'BrowserSession',
    'ClipboardEmpty',
    'DirectoryEntry',
    'Entry',
    'FileEntry',
    'FileExplorerError',
    'FilesystemError',
    'IndexOutOfRange',
    'InvalidName',
    'NameSpaceExhausted',
    'NothingSelected',
    'RenameResult',
    'RenameStateError',
    'UnsupportedOperation',
    'copy_into',
    'create_directory',
    'create_file',
    'delete',
    'list_directory',
    'rename',
    'resolve_creation_name',
    'resolve_name',
]
