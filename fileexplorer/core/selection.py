"""
Selection state scoped to the most recent listing.
"""
from .errors import IndexOutOfRange


class SelectionModel:
    """Tracks at most one selected index in the current listing."""

    def __init__(self, size=0):
        self._size = size
        self._index = None

    @property
    def size(self):
        return self._size

    def reset(self, size):
        """Bind to a new listing of ``size`` entries and clear the selection."""
        self._size = size
        self._index = None

    def select(self, index):
        if not 0 <= index < self._size:
            raise IndexOutOfRange(index, self._size)
        self._index = index

    def clear(self):
        self._index = None

    def current(self):
        return self._index

    def move(self, delta):
        """Step the selection by ``delta``, stopping at the listing ends.

        With nothing selected, a forward step lands on the first entry and a
        backward step on the last one.
        """
        if self._size == 0:
            return None
        if self._index is None:
            self._index = 0 if delta >= 0 else self._size - 1
        else:
            self._index = max(0, min(self._size - 1, self._index + delta))
        return self._index
