"""
Utility functions for the File Explorer terminal UI.
"""
import curses
import unicodedata

from .constants import ROLE_COLORS, ROLE_TO_PAIR_ID


def init_colors():
    """Initialize curses color pairs for every semantic role."""
    curses.start_color()
    curses.use_default_colors()
    for role, pair_id in ROLE_TO_PAIR_ID.items():
        fg, bg = ROLE_COLORS[role]
        curses.init_pair(pair_id, fg, bg)


def theme_attr(role):
    """Return curses color attribute for a semantic role."""
    return curses.color_pair(ROLE_TO_PAIR_ID[role])


def safe_addstr(win, y, x, text, attr=0):
    """Write string safely, clipping to window bounds."""
    h, w = win.getmaxyx()
    if y < 0 or y >= h or x >= w:
        return
    max_len = w - x - 1
    if max_len <= 0:
        return
    try:
        win.addnstr(y, x, text, max_len, attr)
    except curses.error:
        pass


def normalize_key_code(key):
    """Normalize keys from get_wch()/getch() into comparable integer codes."""
    if isinstance(key, int):
        return key
    if not isinstance(key, str) or not key or len(key) != 1:
        return None
    if key in ('\n', '\r'):
        return 10
    if key == '\x1b':
        return 27
    if key == '\t':
        return 9
    if key == '\x7f':
        return 127
    if key == '\b':
        return 8
    return ord(key)


def cell_width(ch):
    """Return terminal cell width for a single character."""
    if not ch:
        return 0
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in ('W', 'F'):
        return 2
    return 1


def fit_text_to_cells(text, max_cells):
    """Clip/pad text so rendered width does not exceed max_cells."""
    if max_cells <= 0:
        return ''
    out = []
    used = 0
    for ch in text:
        w = cell_width(ch)
        if used + w > max_cells:
            break
        out.append(ch)
        used += w
    if used < max_cells:
        out.append(' ' * (max_cells - used))
    return ''.join(out)
