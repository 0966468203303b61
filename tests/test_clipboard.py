import tempfile
import unittest
from pathlib import Path
from unittest import mock

from _support import write_file

from fileexplorer.core import clipboard as clipboard_mod
from fileexplorer.core.clipboard import ClipboardController
from fileexplorer.core.errors import ClipboardEmpty, UnsupportedOperation


class ClipboardControllerTests(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.base = Path(self.tmp.name)
        self.src = write_file(self.base / 'a' / 'photo.png', b'png')
        self.dest = self.base / 'b'
        self.dest.mkdir()

    def test_starts_empty_and_paste_fails(self):
        clip = ClipboardController()
        self.assertTrue(clip.is_empty())
        self.assertIsNone(clip.path)
        with self.assertRaises(ClipboardEmpty):
            clip.paste_into(self.dest)

    def test_paste_copies_and_keeps_clipboard(self):
        clip = ClipboardController()
        clip.copy(self.src)
        first = clip.paste_into(self.dest)
        second = clip.paste_into(self.dest)
        self.assertEqual(first.name, 'photo.png')
        self.assertEqual(second.name, 'photo.png0')
        self.assertEqual(clip.path, self.src)
        self.assertEqual(second.read_bytes(), b'png')

    def test_copy_replaces_previous_path(self):
        clip = ClipboardController()
        clip.copy(self.src)
        other = write_file(self.base / 'other.txt')
        clip.copy(other)
        self.assertEqual(clip.path, other)
        clip.clear()
        self.assertTrue(clip.is_empty())

    def test_paste_of_directory_is_unsupported(self):
        clip = ClipboardController()
        clip.copy(self.src.parent)
        with self.assertRaises(UnsupportedOperation):
            clip.paste_into(self.dest)

    def test_system_mirror_disabled_by_default(self):
        with mock.patch.object(clipboard_mod.pyperclip, 'copy') as copy_mock:
            ClipboardController().copy(self.src)
        copy_mock.assert_not_called()

    def test_system_mirror_copies_path_text(self):
        with mock.patch.object(clipboard_mod.pyperclip, 'copy') as copy_mock:
            ClipboardController(sync_system=True).copy(self.src)
        copy_mock.assert_called_once_with(str(self.src))

    def test_system_mirror_failure_only_warns(self):
        failure = clipboard_mod.pyperclip.PyperclipException('no backend')
        with mock.patch.object(clipboard_mod.pyperclip, 'copy', side_effect=failure):
            with self.assertLogs('fileexplorer.core.clipboard', level='WARNING'):
                clip = ClipboardController(sync_system=True)
                clip.copy(self.src)
        self.assertEqual(clip.path, self.src)


if __name__ == '__main__':
    unittest.main()
