"""
Path clipboard for copy/paste between directories.
"""
from __future__ import annotations

import logging
from pathlib import Path

import pyperclip

from .errors import ClipboardEmpty
from .operations import copy_into

LOGGER = logging.getLogger(__name__)


class ClipboardController:
    """Holds the source path of the last copy request."""

    def __init__(self, sync_system: bool = False):
        self.sync_system = sync_system
        self._path: Path | None = None

    @property
    def path(self) -> Path | None:
        return self._path

    def is_empty(self) -> bool:
        return self._path is None

    def copy(self, path) -> Path:
        """Remember ``path`` as the paste source, replacing any previous one."""
        self._path = Path(path)
        if self.sync_system:
            self._system_copy(str(self._path))
        return self._path

    def clear(self) -> None:
        self._path = None

    def paste_into(self, directory) -> Path:
        """Copy the held file into ``directory``; the clipboard keeps its path."""
        if self._path is None:
            raise ClipboardEmpty()
        return copy_into(self._path, directory)

    @staticmethod
    def _system_copy(text: str) -> bool:
        """Mirror text to the desktop clipboard; failure only logs a warning."""
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as exc:
            LOGGER.warning('System clipboard unavailable: %s', exc)
            return False
        return True
