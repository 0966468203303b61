"""
In-place rename edit: Idle -> Editing -> Idle.
"""
from pathlib import Path

from . import operations
from .errors import InvalidName, RenameStateError


class RenameController:
    """Coordinates one rename edit at a time."""

    def __init__(self):
        self.target_path = None
        self._text = ''
        self.active = False

    @property
    def edited_text(self):
        return self._text

    @edited_text.setter
    def edited_text(self, value):
        if not self.active:
            raise RenameStateError('No rename in progress.')
        self._text = value

    def begin(self, target_path):
        """Start editing the name of ``target_path``."""
        if self.active:
            raise RenameStateError('A rename is already in progress.')
        self.target_path = Path(target_path)
        self._text = self.target_path.name
        self.active = True

    def commit(self):
        """Apply the edited name and return to Idle.

        On failure the edit stays open so the name can be corrected.
        """
        if not self.active:
            raise RenameStateError('No rename in progress.')
        if not self._text:
            raise InvalidName(self._text)
        result = operations.rename(self.target_path, self._text)
        self._reset()
        return result

    def cancel(self):
        """Abandon the edit without touching the file system."""
        self._reset()

    def _reset(self):
        self.target_path = None
        self._text = ''
        self.active = False
