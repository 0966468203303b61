import contextlib
import io
import logging
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from _support import FakeScreen, import_with_fake_curses, make_tree, restore_curses

from fileexplorer.core.actions import ActionResult, ActionType
from fileexplorer.core.bookmarks import Bookmark
from fileexplorer.core.config import AppConfig
from fileexplorer.core.errors import FilesystemError
from fileexplorer.core.session import BrowserSession


class FileExplorerAppTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.app_mod, cls.curses, cls._prev_curses = import_with_fake_curses('fileexplorer.app')

    @classmethod
    def tearDownClass(cls):
        restore_curses(cls._prev_curses)

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.base = Path(self.tmp.name).resolve()
        make_tree(self.base, files=['a.txt'], dirs=['sub'])
        self.session = BrowserSession(self.base, bookmarks=[Bookmark('Home', self.base)])
        self.screen = FakeScreen()
        self.app = self.app_mod.FileExplorerApp(self.screen, session=self.session)

    def test_quit_stops_loop(self):
        self.app.dispatch_result(ActionResult(ActionType.QUIT))
        self.assertFalse(self.app.running)

    def test_error_sets_error_status(self):
        self.app.dispatch_result(ActionResult(ActionType.ERROR, 'nope'))
        self.assertEqual(self.app.window.status_message, 'nope')
        self.assertTrue(self.app.window.status_is_error)

    def test_refresh_sets_plain_status(self):
        self.app.dispatch_result(ActionResult(ActionType.REFRESH, 'done'))
        self.assertEqual(self.app.window.status_message, 'done')
        self.assertFalse(self.app.window.status_is_error)

    def test_non_results_are_ignored(self):
        self.app.dispatch_result(None)
        self.assertTrue(self.app.running)

    def test_open_file_uses_default_app(self):
        path = self.base / 'a.txt'
        with mock.patch.object(self.app_mod, 'open_with_default_app') as open_mock:
            self.app.dispatch_result(ActionResult(ActionType.OPEN_FILE, path))
        open_mock.assert_called_once_with(path)
        self.assertEqual(self.app.window.status_message, 'Opened a.txt')

    def test_open_failure_is_reported(self):
        path = self.base / 'a.txt'
        error = FilesystemError(path, FileNotFoundError(2, 'xdg-open not found'))
        with mock.patch.object(self.app_mod, 'open_with_default_app', side_effect=error):
            with self.assertLogs('fileexplorer.app', level='WARNING'):
                self.app.dispatch_result(ActionResult(ActionType.OPEN_FILE, path))
        self.assertTrue(self.app.window.status_is_error)
        self.assertIn('xdg-open not found', self.app.window.status_message)

    def test_mouse_input_is_routed_to_window(self):
        list_x, list_y, _, _ = self.app.window.list_rect()
        event = (0, list_x + 2, list_y + 1, 0, self.curses.BUTTON1_CLICKED)
        with mock.patch.object(self.curses, 'getmouse', return_value=event, create=True):
            self.app.dispatch_input(self.curses.KEY_MOUSE)
        self.assertEqual(self.session.selected_entry().name, 'a.txt')

    def test_resize_and_empty_input(self):
        self.app.dispatch_input(self.curses.KEY_RESIZE)
        self.app.dispatch_input(None)
        self.assertTrue(self.app.running)

    def test_run_loop_until_quit(self):
        self.screen.keys = [self.curses.KEY_DOWN, self.curses.KEY_DOWN, 'q']
        self.app.run()
        self.assertFalse(self.app.running)
        self.assertEqual(self.session.selection.current(), 1)
        self.assertIn('a.txt', ''.join(text for _, _, text, _ in self.screen.calls))


class OpenSessionTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.app_mod, cls.curses, cls._prev_curses = import_with_fake_curses('fileexplorer.app')

    @classmethod
    def tearDownClass(cls):
        restore_curses(cls._prev_curses)

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.base = Path(self.tmp.name).resolve()

    def test_opens_configured_start_path(self):
        config = AppConfig(start_path=str(self.base), show_hidden=False, sync_system_clipboard=True)
        session = self.app_mod.open_session(config)
        self.assertEqual(session.current_path, self.base)
        self.assertFalse(session.show_hidden)
        self.assertTrue(session.clipboard.sync_system)

    def test_explicit_path_wins_over_config(self):
        make_tree(self.base, dirs=['other'])
        config = AppConfig(start_path=str(self.base))
        session = self.app_mod.open_session(config, start_path=self.base / 'other')
        self.assertEqual(session.current_path, self.base / 'other')

    def test_unreadable_start_falls_back_to_home(self):
        config = AppConfig(start_path=str(self.base / 'missing'))
        with mock.patch.object(self.app_mod.os.path, 'expanduser', return_value=str(self.base)):
            with self.assertLogs('fileexplorer.app', level='WARNING'):
                session = self.app_mod.open_session(config)
        self.assertEqual(session.current_path, self.base)


class MainEntrypointTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.main_mod, cls.curses, cls._prev_curses = import_with_fake_curses('fileexplorer.__main__')

    @classmethod
    def tearDownClass(cls):
        restore_curses(cls._prev_curses)

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.base = Path(self.tmp.name).resolve()
        self.missing_config = str(self.base / 'missing.toml')
        env = mock.patch.dict(os.environ, {}, clear=False)
        env.start()
        self.addCleanup(env.stop)
        os.environ.pop('FILEEXPLORER_DEBUG', None)

    def test_parse_args(self):
        args = self.main_mod.parse_args(['/srv', '--show-hidden', '--debug'])
        self.assertEqual(args.path, '/srv')
        self.assertTrue(args.show_hidden)
        self.assertTrue(args.debug)

        args = self.main_mod.parse_args([])
        self.assertIsNone(args.path)
        self.assertIsNone(args.show_hidden)
        self.assertIsNone(args.config)

    def test_logging_stays_quiet_by_default(self):
        with mock.patch.object(self.main_mod.logging, 'basicConfig') as basic_mock:
            self.main_mod.configure_logging(AppConfig())
        basic_mock.assert_not_called()

    def test_debug_flag_enables_debug_logging(self):
        with mock.patch.object(self.main_mod.logging, 'basicConfig') as basic_mock:
            self.main_mod.configure_logging(AppConfig(), debug=True)
        kwargs = basic_mock.call_args.kwargs
        self.assertEqual(kwargs['level'], logging.DEBUG)
        self.assertNotIn('filename', kwargs)

    def test_debug_environment_variable(self):
        os.environ['FILEEXPLORER_DEBUG'] = '1'
        with mock.patch.object(self.main_mod.logging, 'basicConfig') as basic_mock:
            self.main_mod.configure_logging(AppConfig())
        self.assertEqual(basic_mock.call_args.kwargs['level'], logging.DEBUG)

    def test_log_file_uses_configured_level(self):
        config = AppConfig(log_level='INFO', log_file=str(self.base / 'fe.log'))
        with mock.patch.object(self.main_mod.logging, 'basicConfig') as basic_mock:
            self.main_mod.configure_logging(config)
        kwargs = basic_mock.call_args.kwargs
        self.assertEqual(kwargs['level'], logging.INFO)
        self.assertEqual(kwargs['filename'], str(self.base / 'fe.log'))

    def test_run_returns_zero_after_quit(self):
        code = self.main_mod.run([str(self.base), '--config', self.missing_config])
        self.assertEqual(code, 0)

    def test_run_applies_show_hidden_flag(self):
        with mock.patch.object(self.main_mod, 'FileExplorerApp') as app_mock:
            self.main_mod.run([str(self.base), '--config', self.missing_config, '--show-hidden'])
        config = app_mock.call_args.kwargs['config']
        self.assertTrue(config.show_hidden)
        self.assertEqual(app_mock.call_args.kwargs['start_path'], str(self.base))

    def test_keyboard_interrupt_exit_code(self):
        with mock.patch.object(self.main_mod, 'FileExplorerApp', side_effect=KeyboardInterrupt):
            code = self.main_mod.run(['--config', self.missing_config])
        self.assertEqual(code, 130)

    def test_crash_is_reported(self):
        out, err = io.StringIO(), io.StringIO()
        with mock.patch.object(self.main_mod, 'FileExplorerApp', side_effect=RuntimeError('boom')):
            with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
                with self.assertLogs('fileexplorer.__main__', level='ERROR'):
                    code = self.main_mod.run(['--config', self.missing_config])
        self.assertEqual(code, 1)
        self.assertIn('Error: boom', out.getvalue())
        self.assertIn('RuntimeError', err.getvalue())


if __name__ == '__main__':
    unittest.main()
