"""
Path Resolver and Size Formatter Tests

Run with: python -m pytest fsbrowser/tests -v
"""

import os
import tempfile
import unittest

from fsbrowser.exceptions import (
    ErrorKind,
    InvalidArgumentError,
    NotDirectoryError,
    PathNotFoundError,
)
from fsbrowser.filesystem.path_resolver import PathResolver
from fsbrowser.filesystem.size_formatter import SizeFormatter


class TestResolveAgainst(unittest.TestCase):
    """Test the pure resolution rules."""

    def test_parent_reference(self):
        self.assertEqual(PathResolver.resolve_against('/home/user', '..'), '/home')
        self.assertEqual(PathResolver.resolve_against('/home', '..'), '/')
        self.assertEqual(PathResolver.resolve_against('/', '..'), '/')

    def test_empty_means_parent(self):
        self.assertEqual(PathResolver.resolve_against('/home/user', ''), '/home')

    def test_absolute_unchanged(self):
        self.assertEqual(PathResolver.resolve_against('/home', '/etc/hosts'), '/etc/hosts')
        self.assertEqual(PathResolver.resolve_against('/home', '/etc//x/'), '/etc//x/')

    def test_relative_concatenation(self):
        self.assertEqual(PathResolver.resolve_against('/home', 'user'), '/home/user')
        self.assertEqual(PathResolver.resolve_against('/', 'tmp'), '/tmp')

    def test_relative_dot_segments_kept(self):
        """Segments inside a relative argument are not collapsed."""
        self.assertEqual(PathResolver.resolve_against('/home', 'a/../b'), '/home/a/../b')
        self.assertEqual(PathResolver.resolve_against('/home', './x'), '/home/./x')

    def test_parse(self):
        parsed = PathResolver.parse('/a//b/./c/')

        self.assertTrue(parsed.is_absolute)
        self.assertEqual(parsed.components, ['a', 'b', 'c'])
        self.assertEqual(str(parsed), '/a/b/c')
        self.assertEqual(str(parsed.parent), '/a/b')
        self.assertEqual(PathResolver.canonical('/'), '/')


class TestCurrentDirectory(unittest.TestCase):
    """Test the current directory state."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = self._tmp.name
        os.mkdir(os.path.join(self.root, 'sub'))
        with open(os.path.join(self.root, 'file.txt'), 'w') as f:
            f.write('x')
        self.resolver = PathResolver(self.root)

    def tearDown(self):
        self._tmp.cleanup()

    def test_initial_state(self):
        self.assertEqual(self.resolver.cwd, PathResolver.canonical(self.root))

    def test_change_relative(self):
        new_cwd = self.resolver.change_directory('sub')

        self.assertEqual(new_cwd, PathResolver.canonical(os.path.join(self.root, 'sub')))
        self.assertEqual(self.resolver.cwd, new_cwd)

    def test_change_absolute_is_canonicalised(self):
        self.resolver.change_directory(self.root + '/sub/')
        self.assertEqual(self.resolver.cwd, PathResolver.canonical(os.path.join(self.root, 'sub')))

    def test_change_parent(self):
        self.resolver.change_directory('sub')
        self.resolver.change_directory('..')
        self.assertEqual(self.resolver.cwd, PathResolver.canonical(self.root))

    def test_missing_leaves_state(self):
        before = self.resolver.cwd

        with self.assertRaises(PathNotFoundError) as ctx:
            self.resolver.change_directory('missing')

        self.assertEqual(ctx.exception.kind, ErrorKind.NOT_FOUND)
        self.assertEqual(self.resolver.cwd, before)

    def test_file_is_not_a_directory(self):
        before = self.resolver.cwd

        with self.assertRaises(NotDirectoryError) as ctx:
            self.resolver.change_directory('file.txt')

        self.assertEqual(ctx.exception.kind, ErrorKind.NOT_A_DIRECTORY)
        self.assertEqual(self.resolver.cwd, before)

    def test_parent_of_root_is_root(self):
        """cd .. at the root is a no-op, not an error."""
        resolver = PathResolver('/')
        self.assertEqual(resolver.change_directory('..'), '/')
        self.assertEqual(resolver.cwd, '/')

    def test_empty_argument_rejected(self):
        with self.assertRaises(InvalidArgumentError) as ctx:
            self.resolver.resolve_argument('')
        self.assertEqual(ctx.exception.kind, ErrorKind.INVALID_ARGUMENT)

    def test_resolve_argument(self):
        self.assertEqual(
            self.resolver.resolve_argument('file.txt'),
            self.resolver.cwd + '/file.txt'
        )

    def test_relative_start_rejected(self):
        with self.assertRaises(InvalidArgumentError):
            PathResolver('relative/dir')

    def test_start_must_exist(self):
        with self.assertRaises(PathNotFoundError):
            PathResolver(os.path.join(self.root, 'missing'))


class TestSizeFormatter(unittest.TestCase):
    """Test human-readable sizes."""

    def test_bytes(self):
        self.assertEqual(SizeFormatter.format_size(0), "0.00 B")
        self.assertEqual(SizeFormatter.format_size(1023), "1023.00 B")

    def test_larger_units(self):
        self.assertEqual(SizeFormatter.format_size(1024), "1.00 KB")
        self.assertEqual(SizeFormatter.format_size(1536), "1.50 KB")
        self.assertEqual(SizeFormatter.format_size(1024 ** 2), "1.00 MB")
        self.assertEqual(SizeFormatter.format_size(3 * 1024 ** 3), "3.00 GB")

    def test_terabytes_is_largest(self):
        self.assertEqual(SizeFormatter.format_size(1024 ** 4), "1.00 TB")
        self.assertEqual(SizeFormatter.format_size(1024 ** 5), "1024.00 TB")

    def test_negative_rejected(self):
        with self.assertRaises(InvalidArgumentError):
            SizeFormatter.format_size(-1)


if __name__ == '__main__':
    unittest.main()
