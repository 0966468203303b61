"""
Browser window: header toolbar, bookmark sidebar, entry table and status line.
"""
import curses
import logging

from ..constants import (
    DATE_COLUMN_WIDTH,
    HEADER_HEIGHT,
    SIDEBAR_WIDTH,
    SIZE_COLUMN_WIDTH,
    STATUS_HEIGHT,
)
from ..core.actions import ActionResult, ActionType
from ..core.errors import FileExplorerError
from ..utils import fit_text_to_cells, normalize_key_code, safe_addstr, theme_attr

LOGGER = logging.getLogger(__name__)

CTRL_H = 8
CTRL_P = 16
CTRL_Y = 25
KEY_TAB = 9
KEY_ESC = 27

UP_BUTTON = '[<]'
NEW_FILE_BUTTON = '[+]'
NEW_FOLDER_BUTTON = '[New Folder]'


class BrowserWindow:
    """Full-screen file browser bound to one BrowserSession."""

    KEY_F2 = getattr(curses, 'KEY_F2', -1)
    KEY_F5 = getattr(curses, 'KEY_F5', -1)
    KEY_F7 = getattr(curses, 'KEY_F7', -1)
    KEY_F8 = getattr(curses, 'KEY_F8', -1)
    PAGE_STEP = 10

    def __init__(self, session, sidebar_expanded=True, width=80, height=24):
        self.session = session
        self.sidebar_expanded = bool(sidebar_expanded)
        self.width = width
        self.height = height
        self.scroll_offset = 0
        self.status_message = ''
        self.status_is_error = False
        self.confirm_delete = False
        self.rename_cursor = 0

    # --- Layout ---

    def list_rect(self):
        """Return (x, y, w, h) of the entry table body."""
        x = SIDEBAR_WIDTH + 1 if self.sidebar_expanded else 0
        y = HEADER_HEIGHT
        w = max(0, self.width - x)
        h = max(0, self.height - HEADER_HEIGHT - STATUS_HEIGHT)
        return x, y, w, h

    def _name_width(self, list_w):
        return max(1, list_w - SIZE_COLUMN_WIDTH - DATE_COLUMN_WIDTH - 2)

    def _header_buttons(self):
        """Return [(x, label, handler)] for the clickable toolbar."""
        folder_x = max(len(UP_BUTTON) + 1, self.width - len(NEW_FOLDER_BUTTON) - len(NEW_FILE_BUTTON) - 3)
        file_x = folder_x + len(NEW_FOLDER_BUTTON) + 1
        return [
            (0, UP_BUTTON, self.go_up),
            (folder_x, NEW_FOLDER_BUTTON, self.create_directory),
            (file_x, NEW_FILE_BUTTON, self.create_file),
        ]

    def _ensure_visible(self):
        _, _, _, list_h = self.list_rect()
        index = self.session.selection.current()
        if index is None or list_h <= 0:
            return
        if index < self.scroll_offset:
            self.scroll_offset = index
        elif index >= self.scroll_offset + list_h:
            self.scroll_offset = index - list_h + 1

    def _reset_scroll(self):
        self.scroll_offset = 0

    # --- Status ---

    def set_status(self, message, error=False):
        self.status_message = message or ''
        self.status_is_error = bool(error)

    def _run(self, operation, *args, success=None, rescroll=True):
        """Call a session operation and turn engine errors into an ERROR action."""
        try:
            value = operation(*args)
        except FileExplorerError as exc:
            LOGGER.warning('%s failed: %s', getattr(operation, '__name__', operation), exc)
            return ActionResult(ActionType.ERROR, str(exc))
        if rescroll:
            self._reset_scroll()
        message = success(value) if callable(success) else success
        return ActionResult(ActionType.REFRESH, message)

    # --- Actions ---

    def go_up(self):
        return self._run(self.session.go_up)

    def create_file(self):
        return self._run(self.session.create_file, success=lambda path: f'Created {path.name}')

    def create_directory(self):
        return self._run(self.session.create_directory, success=lambda path: f'Created {path.name}')

    def copy_selected(self):
        return self._run(
            self.session.copy_selected,
            success=lambda path: f'Copied {path.name}',
            rescroll=False,
        )

    def paste(self):
        return self._run(self.session.paste, success=lambda path: f'Pasted {path.name}')

    def request_delete(self):
        entry = self.session.selected_entry()
        if entry is None:
            return ActionResult(ActionType.ERROR, 'No item selected.')
        self.confirm_delete = True
        kind = 'directory' if entry.is_dir else 'file'
        return ActionResult(ActionType.REFRESH, f'Delete {kind} {entry.name}? (y/n)')

    def _confirm_delete_key(self, key_code):
        self.confirm_delete = False
        if key_code in (ord('y'), ord('Y')):
            return self._run(self.session.delete_selected, success=lambda entry: f'Deleted {entry.name}')
        return ActionResult(ActionType.REFRESH, 'Delete cancelled.')

    def begin_rename(self):
        result = self._run(self.session.begin_rename, rescroll=False)
        if result.type == ActionType.REFRESH:
            self.rename_cursor = len(self.session.rename.edited_text)
        return result

    def commit_rename(self):
        def _message(result):
            if result.adjusted:
                return f'Renamed to {result.name} (name was taken)'
            return f'Renamed to {result.name}'
        return self._run(self.session.commit_rename, success=_message)

    def cancel_rename(self):
        self.session.cancel_rename()
        return ActionResult(ActionType.REFRESH, 'Rename cancelled.')

    def activate(self, index=None):
        try:
            path = self.session.activate(index)
        except FileExplorerError as exc:
            LOGGER.warning('activate failed: %s', exc)
            return ActionResult(ActionType.ERROR, str(exc))
        if path is not None:
            return ActionResult(ActionType.OPEN_FILE, path)
        self._reset_scroll()
        return ActionResult(ActionType.REFRESH)

    def go_to_bookmark(self, slot):
        bookmarks = self.session.bookmarks
        if not 0 <= slot < len(bookmarks):
            return None
        return self._run(self.session.go_to_bookmark, bookmarks[slot])

    def refresh(self):
        return self._run(self.session.refresh)

    def toggle_hidden(self):
        show = not self.session.show_hidden
        return self._run(
            self.session.set_show_hidden,
            show,
            success='Showing hidden files.' if show else 'Hiding hidden files.',
        )

    def toggle_sidebar(self):
        self.sidebar_expanded = not self.sidebar_expanded
        return ActionResult(ActionType.REFRESH)

    def move_selection(self, delta):
        self.session.selection.move(delta)
        self._ensure_visible()
        return ActionResult(ActionType.REFRESH)

    def jump_selection(self, index):
        if self.session.entries:
            self.session.select(index)
            self._ensure_visible()
        return ActionResult(ActionType.REFRESH)

    # --- Input ---

    def handle_key(self, key):
        key_code = normalize_key_code(key)
        if key_code is None:
            return None

        if self.session.rename.active:
            return self._handle_rename_key(key, key_code)
        if self.confirm_delete:
            return self._confirm_delete_key(key_code)

        count = len(self.session.entries)
        if key_code == curses.KEY_UP:
            return self.move_selection(-1)
        if key_code == curses.KEY_DOWN:
            return self.move_selection(1)
        if key_code == curses.KEY_PPAGE:
            return self.move_selection(-self.PAGE_STEP)
        if key_code == curses.KEY_NPAGE:
            return self.move_selection(self.PAGE_STEP)
        if key_code == curses.KEY_HOME:
            return self.jump_selection(0)
        if key_code == curses.KEY_END:
            return self.jump_selection(count - 1)
        if key_code in (10, 13, curses.KEY_ENTER):
            return self.activate()
        if key_code in (127, CTRL_H, curses.KEY_BACKSPACE, ord('<')):
            return self.go_up()
        if key_code == CTRL_Y:
            return self.copy_selected()
        if key_code == CTRL_P:
            return self.paste()
        if key_code == curses.KEY_DC:
            return self.request_delete()
        if key_code == self.KEY_F2:
            return self.begin_rename()
        if key_code == self.KEY_F5:
            return self.refresh()
        if key_code == self.KEY_F7:
            return self.create_directory()
        if key_code in (self.KEY_F8, ord('+')):
            return self.create_file()
        if key_code == KEY_TAB:
            return self.toggle_sidebar()
        if key_code in (ord('h'), ord('H')):
            return self.toggle_hidden()
        if ord('1') <= key_code <= ord('9'):
            return self.go_to_bookmark(key_code - ord('1'))
        if key_code in (ord('q'), ord('Q')):
            return ActionResult(ActionType.QUIT)
        return None

    def _handle_rename_key(self, key, key_code):
        rename = self.session.rename
        text = rename.edited_text
        cursor = min(self.rename_cursor, len(text))

        if key_code in (10, 13, curses.KEY_ENTER):
            return self.commit_rename()
        if key_code == KEY_ESC:
            return self.cancel_rename()
        if key_code in (curses.KEY_BACKSPACE, 127, CTRL_H):
            if cursor > 0:
                rename.edited_text = text[:cursor - 1] + text[cursor:]
                cursor -= 1
        elif key_code == curses.KEY_DC:
            if cursor < len(text):
                rename.edited_text = text[:cursor] + text[cursor + 1:]
        elif key_code == curses.KEY_LEFT:
            cursor = max(0, cursor - 1)
        elif key_code == curses.KEY_RIGHT:
            cursor = min(len(text), cursor + 1)
        elif key_code == curses.KEY_HOME:
            cursor = 0
        elif key_code == curses.KEY_END:
            cursor = len(text)
        elif isinstance(key, str) and key.isprintable():
            rename.edited_text = text[:cursor] + key + text[cursor:]
            cursor += 1
        elif isinstance(key, int) and 32 <= key <= 126:
            rename.edited_text = text[:cursor] + chr(key) + text[cursor:]
            cursor += 1
        self.rename_cursor = cursor
        return ActionResult(ActionType.REFRESH)

    def handle_mouse(self, mx, my, bstate):
        """Route a mouse event; clicking anywhere commits an open rename."""
        clicked = bstate & (curses.BUTTON1_CLICKED | curses.BUTTON1_DOUBLE_CLICKED)
        if not clicked:
            return None
        if self.session.rename.active:
            return self.commit_rename()
        self.confirm_delete = False

        if my == 0:
            for x, label, handler in self._header_buttons():
                if x <= mx < x + len(label):
                    return handler()
            return None

        list_x, list_y, list_w, list_h = self.list_rect()
        if self.sidebar_expanded and mx < SIDEBAR_WIDTH and my >= list_y:
            return self.go_to_bookmark(my - list_y)

        if not (list_x <= mx < list_x + list_w and list_y <= my < list_y + list_h):
            return None
        index = self.scroll_offset + (my - list_y)
        if not 0 <= index < len(self.session.entries):
            return None
        if bstate & curses.BUTTON1_DOUBLE_CLICKED:
            return self.activate(index)
        self.session.select(index)
        return ActionResult(ActionType.REFRESH)

    # --- Drawing ---

    def format_row(self, entry, list_w):
        name_w = self._name_width(list_w)
        name = entry.name + '/' if entry.is_dir else entry.name
        if entry.is_dir:
            size, date = '', ''
        else:
            size, date = str(entry.size), entry.last_accessed
        return (
            fit_text_to_cells(name, name_w)
            + ' ' + size.rjust(SIZE_COLUMN_WIDTH)
            + ' ' + fit_text_to_cells(date, DATE_COLUMN_WIDTH)
        )

    def draw(self, stdscr):
        self.height, self.width = stdscr.getmaxyx()
        self._ensure_visible()
        self._draw_header(stdscr)
        if self.sidebar_expanded:
            self._draw_sidebar(stdscr)
        self._draw_entries(stdscr)
        self._draw_status(stdscr)

    def _draw_header(self, stdscr):
        header_attr = theme_attr('header')
        safe_addstr(stdscr, 0, 0, ' ' * self.width, header_attr)
        buttons = self._header_buttons()
        path_w = max(0, buttons[1][0] - len(UP_BUTTON) - 2)
        safe_addstr(stdscr, 0, len(UP_BUTTON) + 1, fit_text_to_cells(str(self.session.current_path), path_w), header_attr)
        for x, label, _ in buttons:
            safe_addstr(stdscr, 0, x, label, header_attr | curses.A_BOLD)

        list_x, _, list_w, _ = self.list_rect()
        columns = (
            fit_text_to_cells('Name', self._name_width(list_w))
            + ' ' + 'Size'.rjust(SIZE_COLUMN_WIDTH)
            + ' ' + 'Date'
        )
        safe_addstr(stdscr, 1, list_x, columns, theme_attr('body') | curses.A_BOLD)

    def _draw_sidebar(self, stdscr):
        attr = theme_attr('sidebar')
        _, list_y, _, list_h = self.list_rect()
        for row, bookmark in enumerate(self.session.bookmarks[:list_h]):
            label = f'{row + 1} {bookmark.name}'
            safe_addstr(stdscr, list_y + row, 0, fit_text_to_cells(label, SIDEBAR_WIDTH), attr)
        for row in range(list_h):
            safe_addstr(stdscr, list_y + row, SIDEBAR_WIDTH, '│', attr)

    def _draw_entries(self, stdscr):
        list_x, list_y, list_w, list_h = self.list_rect()
        entries = self.session.entries
        if not entries:
            safe_addstr(stdscr, list_y, list_x, '  (empty directory)', theme_attr('body'))
            return
        selected = self.session.selection.current()
        for row in range(list_h):
            index = self.scroll_offset + row
            if index >= len(entries):
                break
            entry = entries[index]
            if index == selected:
                attr = theme_attr('selected')
            elif entry.is_dir:
                attr = theme_attr('directory')
            else:
                attr = theme_attr('body')
            safe_addstr(stdscr, list_y + row, list_x, self.format_row(entry, list_w), attr)

    def _draw_status(self, stdscr):
        y = self.height - STATUS_HEIGHT
        rename = self.session.rename
        if rename.active:
            prompt = 'Rename: '
            safe_addstr(stdscr, y, 0, fit_text_to_cells(prompt + rename.edited_text, self.width), theme_attr('status'))
            cursor_x = len(prompt) + min(self.rename_cursor, len(rename.edited_text))
            char = rename.edited_text[self.rename_cursor:self.rename_cursor + 1] or ' '
            safe_addstr(stdscr, y, cursor_x, char, theme_attr('status') | curses.A_REVERSE)
            return
        attr = theme_attr('error') if self.status_is_error else theme_attr('status')
        safe_addstr(stdscr, y, 0, fit_text_to_cells(self.status_message, self.width), attr)
