import os
import tempfile
import unittest

from _support import make_tree

from fileexplorer.core import naming
from fileexplorer.core.errors import NameSpaceExhausted


class ResolveNameTests(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.base = self.tmp.name

    def test_free_name_is_returned_unchanged(self):
        self.assertEqual(naming.resolve_name('report', self.base), 'report')
        self.assertEqual(naming.resolve_creation_name('new_file.txt', self.base), 'new_file.txt')

    def test_general_scheme_appends_counter_without_separator(self):
        make_tree(self.base, files=['report'])
        self.assertEqual(naming.resolve_name('report', self.base), 'report0')
        make_tree(self.base, files=['report0'])
        self.assertEqual(naming.resolve_name('report', self.base), 'report1')

    def test_general_scheme_keeps_extension_in_front_of_counter(self):
        make_tree(self.base, files=['a.txt'])
        self.assertEqual(naming.resolve_name('a.txt', self.base), 'a.txt0')

    def test_creation_scheme_inserts_counter_before_extension(self):
        make_tree(self.base, files=['new_file.txt'])
        self.assertEqual(naming.resolve_creation_name('new_file.txt', self.base), 'new_file_0.txt')
        make_tree(self.base, files=['new_file_0.txt'])
        self.assertEqual(naming.resolve_creation_name('new_file.txt', self.base), 'new_file_1.txt')

    def test_creation_scheme_without_extension(self):
        make_tree(self.base, dirs=['new_folder', 'new_folder_0'])
        self.assertEqual(naming.resolve_creation_name('new_folder', self.base), 'new_folder_1')

    def test_directories_count_as_collisions(self):
        make_tree(self.base, dirs=['report'])
        self.assertEqual(naming.resolve_name('report', self.base), 'report0')

    @unittest.skipUnless(hasattr(os, 'symlink'), 'symlinks not supported')
    def test_dangling_symlink_counts_as_collision(self):
        os.symlink(os.path.join(self.base, 'missing'), os.path.join(self.base, 'link'))
        self.assertEqual(naming.resolve_name('link', self.base), 'link0')

    def test_bounded_search_raises_name_space_exhausted(self):
        make_tree(self.base, files=['x', 'x0', 'x1', 'x2'])
        with self.assertRaises(NameSpaceExhausted) as ctx:
            naming.resolve_name('x', self.base, max_attempts=3)
        self.assertEqual(ctx.exception.name, 'x')
        self.assertEqual(ctx.exception.attempts, 3)
        self.assertEqual(naming.resolve_name('x', self.base, max_attempts=4), 'x3')


if __name__ == '__main__':
    unittest.main()
