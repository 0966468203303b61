"""
Main loop for File Explorer: draw, read one input, dispatch, repeat.
"""
import curses
import logging
import os

from .core.actions import ActionResult, ActionType
from .core.clipboard import ClipboardController
from .core.config import AppConfig
from .core.errors import FileExplorerError, FilesystemError
from .core.opener import open_with_default_app
from .core.session import BrowserSession
from .ui.browser import BrowserWindow
from .utils import init_colors

LOGGER = logging.getLogger(__name__)


def configure_terminal(stdscr):
    """Apply core curses terminal setup."""
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    curses.noecho()
    curses.cbreak()
    stdscr.keypad(True)
    curses.mousemask(curses.BUTTON1_CLICKED | curses.BUTTON1_DOUBLE_CLICKED)
    if curses.has_colors():
        init_colors()


def read_input_key(stdscr):
    """Read one key from curses, returning None on timeout/no input."""
    try:
        return stdscr.get_wch()
    except curses.error:
        return None


def open_session(config, start_path=None):
    """Open a session at start_path, falling back to the home directory."""
    clipboard = ClipboardController(sync_system=config.sync_system_clipboard)
    requested = start_path or config.start_path or os.getcwd()
    try:
        return BrowserSession(requested, show_hidden=config.show_hidden, clipboard=clipboard)
    except FilesystemError as exc:
        LOGGER.warning('Cannot open %s (%s); starting in home directory.', requested, exc)
        return BrowserSession(
            os.path.expanduser('~'), show_hidden=config.show_hidden, clipboard=clipboard
        )


class FileExplorerApp:
    """Owns the curses screen, one browser window and its session."""

    def __init__(self, stdscr, config=None, start_path=None, session=None):
        self.stdscr = stdscr
        self.config = config or AppConfig()
        self.session = session or open_session(self.config, start_path)
        self.window = BrowserWindow(self.session, sidebar_expanded=self.config.sidebar_expanded)
        self.running = True

    def dispatch_result(self, result):
        """Apply an ActionResult returned by the window."""
        if not isinstance(result, ActionResult):
            return
        LOGGER.debug('Dispatching result: type=%s payload=%r', result.type, result.payload)
        if result.type == ActionType.QUIT:
            self.running = False
        elif result.type == ActionType.ERROR:
            self.window.set_status(str(result.payload), error=True)
        elif result.type == ActionType.OPEN_FILE:
            try:
                open_with_default_app(result.payload)
            except FileExplorerError as exc:
                LOGGER.warning('Open failed: %s', exc)
                self.window.set_status(str(exc), error=True)
            else:
                self.window.set_status(f'Opened {result.payload.name}')
        elif result.type == ActionType.REFRESH:
            self.window.set_status(result.payload or '')

    def dispatch_input(self, key):
        if key is None:
            return
        if key == curses.KEY_MOUSE:
            try:
                _, mx, my, _, bstate = curses.getmouse()
            except curses.error:
                return
            self.dispatch_result(self.window.handle_mouse(mx, my, bstate))
            return
        if key == curses.KEY_RESIZE:
            return
        self.dispatch_result(self.window.handle_key(key))

    def draw(self):
        self.stdscr.erase()
        self.window.draw(self.stdscr)
        self.stdscr.noutrefresh()
        curses.doupdate()

    def run(self):
        configure_terminal(self.stdscr)
        LOGGER.info('Browsing %s', self.session.current_path)
        while self.running:
            self.draw()
            self.dispatch_input(read_input_key(self.stdscr))
