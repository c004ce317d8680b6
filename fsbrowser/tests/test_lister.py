"""
Directory Lister Tests

Run with: python -m pytest fsbrowser/tests -v
"""

import errno
import os
import tempfile
import unittest
from unittest import mock

from fsbrowser.exceptions import (
    DirectoryUnreadableError,
    ErrorKind,
    NotDirectoryError,
    PathNotFoundError,
)
from fsbrowser.filesystem.entry import EntryKind
from fsbrowser.filesystem.lister import DirectoryLister, scan_directory


class TestDirectoryLister(unittest.TestCase):
    """Test one-level listings."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = self._tmp.name

        for name in ('b', 'A', 'a'):
            os.mkdir(os.path.join(self.root, name))
        for name in ('z.txt', 'B.txt', 'a.txt'):
            with open(os.path.join(self.root, name), 'w') as f:
                f.write(name)

        os.chmod(os.path.join(self.root, 'a.txt'), 0o644)
        os.symlink(os.path.join(self.root, 'b'), os.path.join(self.root, 'link'))
        os.symlink(os.path.join(self.root, 'nowhere'), os.path.join(self.root, 'broken'))

        self.lister = DirectoryLister()

    def tearDown(self):
        self._tmp.cleanup()

    def test_partitions_sorted(self):
        """Both partitions are sorted by name, case-sensitively."""
        directories, files = self.lister.list(self.root)

        self.assertEqual([e.name for e in directories], ['A', 'a', 'b', 'link'])
        self.assertEqual([e.name for e in files], ['B.txt', 'a.txt', 'z.txt'])
        self.assertTrue(all(e.kind == EntryKind.DIRECTORY for e in directories))
        self.assertTrue(all(e.kind == EntryKind.OTHER for e in files))

    def test_counts_exclude_unreadable_children(self):
        """Every child except the dangling symlink is listed."""
        directories, files = self.lister.list(self.root)

        self.assertEqual(len(directories) + len(files), len(os.listdir(self.root)) - 1)
        names = {e.name for e in directories + files}
        self.assertNotIn('broken', names)
        self.assertNotIn('.', names)
        self.assertNotIn('..', names)

    def test_simple_entries_have_no_metadata(self):
        _, files = self.lister.list(self.root, detailed=False)

        entry = files[0]
        self.assertFalse(entry.detailed)
        self.assertIsNone(entry.permissions)
        self.assertIsNone(entry.readable_size)
        self.assertEqual(entry.path, os.path.join(self.root, entry.name))

    def test_detailed_entries(self):
        directories, files = self.lister.list(self.root, detailed=True)

        a_txt = next(e for e in files if e.name == 'a.txt')
        self.assertEqual(a_txt.permissions, '-rw-r--r--')
        self.assertEqual(a_txt.octal, '644')
        self.assertEqual(a_txt.size, len('a.txt'))
        self.assertEqual(a_txt.readable_size, '5.00 B')
        self.assertTrue(a_txt.owner)
        self.assertTrue(a_txt.group)
        self.assertTrue(directories[0].permissions.startswith('d'))

    def test_entry_to_dict(self):
        directories, files = self.lister.list(self.root, detailed=True)

        data = next(e for e in files if e.name == 'a.txt').to_dict()
        self.assertEqual(data['type'], 'regular-or-other')
        self.assertEqual(data['octal'], '644')
        self.assertEqual(data['size'], 5)
        self.assertNotIn('octal', self.lister.list(self.root)[1][0].to_dict())

    def test_unknown_owner(self):
        _, files = self.lister.list(self.root, detailed=True)

        entry = files[0]
        entry.uid = 2 ** 31 - 2
        entry.gid = 2 ** 31 - 2
        self.assertEqual(entry.owner, 'unknown')
        self.assertEqual(entry.group, 'unknown')

    def test_empty_directory(self):
        directories, files = self.lister.list(os.path.join(self.root, 'a'))
        self.assertEqual((directories, files), ([], []))

    def test_missing_directory(self):
        with self.assertRaises(PathNotFoundError):
            self.lister.list(os.path.join(self.root, 'missing'))

    def test_file_is_not_a_directory(self):
        with self.assertRaises(NotDirectoryError):
            self.lister.list(os.path.join(self.root, 'a.txt'))

    @unittest.skipIf(os.geteuid() == 0, "root can read any directory")
    def test_unreadable_directory(self):
        locked = os.path.join(self.root, 'A')
        os.chmod(locked, 0o000)
        try:
            with self.assertRaises(DirectoryUnreadableError):
                self.lister.list(locked)
        finally:
            os.chmod(locked, 0o755)

    def test_open_denied_is_unreadable(self):
        """A directory the OS refuses to open is DirectoryUnreadable."""
        denied = PermissionError(errno.EACCES, 'Permission denied')

        with mock.patch('fsbrowser.filesystem.lister.os.scandir', side_effect=denied):
            with self.assertRaises(DirectoryUnreadableError) as ctx:
                self.lister.list(self.root)

        self.assertEqual(ctx.exception.kind, ErrorKind.DIRECTORY_UNREADABLE)
        self.assertEqual(ctx.exception.context['reason'], 'Permission denied')

    def test_scan_directory(self):
        self.assertEqual(
            sorted(scan_directory(self.root)),
            sorted(os.listdir(self.root))
        )


if __name__ == '__main__':
    unittest.main()
