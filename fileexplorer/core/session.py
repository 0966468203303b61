"""
Browsing session: the mutable state of one File Explorer window.

The session owns the working directory, the current listing, the selection,
the clipboard and the rename edit, and applies the invalidation rules:

* navigation lists the target first and only switches when that succeeds;
  it clears the selection and abandons any rename in progress;
* every successful mutation clears the selection and re-lists;
* a failed call raises and leaves path, selection and clipboard untouched.
"""
import logging
import os
from pathlib import Path

from . import operations
from .bookmarks import get_default_bookmarks
from .clipboard import ClipboardController
from .errors import FilesystemError, NothingSelected
from .listing import list_directory
from .rename import RenameController
from .selection import SelectionModel

LOGGER = logging.getLogger(__name__)


class BrowserSession:
    """State and operations for one browsing window."""

    def __init__(self, start_path=None, show_hidden=True, clipboard=None, bookmarks=None):
        self.current_path = Path(os.path.realpath(start_path or os.getcwd()))
        self.show_hidden = show_hidden
        self.entries = []
        self.selection = SelectionModel()
        self.clipboard = clipboard if clipboard is not None else ClipboardController()
        self.rename = RenameController()
        self.bookmarks = bookmarks if bookmarks is not None else get_default_bookmarks()
        self.refresh()

    # --- Listing and navigation ---

    def refresh(self):
        """Re-list the working directory and clear the selection."""
        entries = list_directory(self.current_path, show_hidden=self.show_hidden)
        self.entries = entries
        self.selection.reset(len(entries))
        return entries

    def navigate(self, path):
        target = Path(os.path.realpath(path))
        entries = list_directory(target, show_hidden=self.show_hidden)
        if self.rename.active:
            self.rename.cancel()
        LOGGER.debug('Navigate %s -> %s', self.current_path, target)
        self.current_path = target
        self.entries = entries
        self.selection.reset(len(entries))
        return entries

    def go_up(self):
        """Navigate to the parent directory; return False at the root."""
        parent = self.current_path.parent
        if parent == self.current_path:
            return False
        self.navigate(parent)
        return True

    def go_to_bookmark(self, bookmark):
        return self.navigate(bookmark.path)

    def set_show_hidden(self, show_hidden):
        entries = list_directory(self.current_path, show_hidden=bool(show_hidden))
        self.show_hidden = bool(show_hidden)
        self.entries = entries
        self.selection.reset(len(entries))
        return entries

    # --- Selection ---

    def select(self, index):
        self.selection.select(index)
        return self.entries[index]

    def clear_selection(self):
        self.selection.clear()

    def selected_entry(self):
        index = self.selection.current()
        if index is None:
            return None
        return self.entries[index]

    def _require_selection(self):
        entry = self.selected_entry()
        if entry is None:
            raise NothingSelected()
        return entry

    def activate(self, index=None):
        """Open the selected (or given) entry.

        Directories are entered; for files the path is returned so the caller
        can hand it to the default application.
        """
        if index is not None:
            self.select(index)
        entry = self._require_selection()
        if entry.is_dir:
            self.navigate(entry.path)
            return None
        return entry.path

    # --- Mutations ---

    def _after_mutation(self):
        """Re-list once a mutation has taken effect.

        The mutation is not undone when the re-list fails; the failure is
        logged and the listing stays empty until the next refresh.
        """
        self.selection.clear()
        try:
            self.refresh()
        except FilesystemError as exc:
            LOGGER.warning('Re-listing %s failed: %s', self.current_path, exc)
            self.entries = []
            self.selection.reset(0)

    def copy_selected(self):
        entry = self._require_selection()
        return self.clipboard.copy(entry.path)

    def paste(self):
        target = self.clipboard.paste_into(self.current_path)
        self._after_mutation()
        return target

    def delete_selected(self):
        entry = self._require_selection()
        operations.delete(entry)
        self._after_mutation()
        return entry

    def create_file(self):
        path = operations.create_file(self.current_path)
        self._after_mutation()
        return path

    def create_directory(self):
        path = operations.create_directory(self.current_path)
        self._after_mutation()
        return path

    def begin_rename(self):
        entry = self._require_selection()
        self.rename.begin(entry.path)
        return self.rename.edited_text

    def commit_rename(self):
        result = self.rename.commit()
        self._after_mutation()
        return result

    def cancel_rename(self):
        self.rename.cancel()
