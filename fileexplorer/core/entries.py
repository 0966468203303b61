"""
Entry types produced by a directory listing.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union


@dataclass(frozen=True)
class DirectoryEntry:
    """A directory inside the listed directory."""

    name: str
    path: Path

    @property
    def is_dir(self) -> bool:
        return True


@dataclass(frozen=True)
class FileEntry:
    """A non-directory entry with its size and formatted access time."""

    name: str
    size: int
    path: Path
    last_accessed: str = ''

    @property
    def is_dir(self) -> bool:
        return False


Entry = Union[DirectoryEntry, FileEntry]


def sort_key(entry: Entry):
    """Total order within one kind: name bytes first, then full path."""
    return (os.fsencode(entry.name), os.fsencode(entry.path))
