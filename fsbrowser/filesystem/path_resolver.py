"""
Path Resolver Module

Owns the explorer's current directory and resolves path arguments
against it.

Relative arguments are joined to the current directory as-is: ``.``
and ``..`` segments inside a relative argument are not collapsed.

Author: YSNRFD
Version: 1.0.0
"""

import os
import stat
from dataclasses import dataclass
from typing import Optional, List

from fsbrowser.exceptions import (
    InvalidArgumentError,
    NotDirectoryError,
    translate_os_error,
)
from fsbrowser.logger import get_logger


PARENT_REFERENCE = '..'
SEPARATOR = '/'
ROOT = '/'


@dataclass
class ParsedPath:
    """A parsed path with its components."""
    is_absolute: bool
    components: List[str]

    def __str__(self) -> str:
        if self.is_absolute:
            return SEPARATOR + SEPARATOR.join(self.components)
        return SEPARATOR.join(self.components) if self.components else '.'

    @property
    def parent(self) -> 'ParsedPath':
        """The path with its last component removed (root stays root)."""
        return ParsedPath(is_absolute=self.is_absolute, components=self.components[:-1])


class PathResolver:
    """
    Resolves path expressions against a current directory.

    Handles:
    - Absolute paths (returned unchanged)
    - Relative paths (joined to the current directory)
    - The parent reference ``..`` and the empty path (parent directory)

    Example:
        >>> resolver = PathResolver('/home/user')
        >>> resolver.resolve('notes.txt')
        '/home/user/notes.txt'
        >>> resolver.resolve('..')
        '/home'
    """

    def __init__(self, start_directory: Optional[str] = None):
        """
        Args:
            start_directory: Initial current directory; defaults to the
                process working directory, or ``/`` if that is unknown

        Raises:
            InvalidArgumentError: If the start directory is not absolute
            PathNotFoundError / NotDirectoryError: If it is not a directory
        """
        self._logger = get_logger('path')

        if start_directory is None:
            try:
                start_directory = os.getcwd()
            except OSError:
                start_directory = ROOT

        if not self.is_absolute(start_directory):
            raise InvalidArgumentError(
                f"Start directory must be absolute: {start_directory}",
                argument=start_directory
            )

        self._check_directory(start_directory)
        self._cwd = self.canonical(start_directory)

    @property
    def cwd(self) -> str:
        """The current directory."""
        return self._cwd

    @staticmethod
    def parse(path: str) -> ParsedPath:
        """
        Parse a path into components.

        Empty and ``.`` components are dropped; ``..`` is kept.

        Args:
            path: Path string to parse

        Returns:
            ParsedPath with components
        """
        is_absolute = path.startswith(SEPARATOR)
        components = [c for c in path.split(SEPARATOR) if c and c != '.']
        return ParsedPath(is_absolute=is_absolute, components=components)

    @staticmethod
    def canonical(path: str) -> str:
        """Path with repeated, trailing and ``.`` separators removed."""
        return str(PathResolver.parse(path))

    @staticmethod
    def is_absolute(path: str) -> bool:
        """Check if a path is absolute."""
        return path.startswith(SEPARATOR)

    @staticmethod
    def parent_of(path: str) -> str:
        """The parent of an absolute path; the root is its own parent."""
        return str(PathResolver.parse(path).parent)

    @staticmethod
    def resolve_against(current_dir: str, input_path: str) -> str:
        """
        Resolve ``input_path`` relative to ``current_dir``.

        Args:
            current_dir: Absolute directory to resolve against
            input_path: Path expression supplied by the user

        Returns:
            Absolute path
        """
        if input_path == '' or input_path == PARENT_REFERENCE:
            return PathResolver.parent_of(current_dir)

        if PathResolver.is_absolute(input_path):
            return input_path

        return current_dir.rstrip(SEPARATOR) + SEPARATOR + input_path

    def resolve(self, input_path: str) -> str:
        """Resolve a path expression against the current directory."""
        return self.resolve_against(self._cwd, input_path)

    def resolve_argument(self, input_path: str) -> str:
        """
        Resolve a file-name argument.

        Unlike ``resolve``, an empty argument is rejected instead of
        meaning the parent directory.

        Raises:
            InvalidArgumentError: If ``input_path`` is empty
        """
        if not input_path:
            raise InvalidArgumentError("Path argument must not be empty", argument=input_path)
        return self.resolve(input_path)

    def change_directory(self, path: str) -> str:
        """
        Make ``path`` the current directory.

        The current directory is left unchanged on failure.

        Args:
            path: Path expression (absolute, relative, ``..`` or empty)

        Returns:
            The new current directory

        Raises:
            PathNotFoundError: If the target does not exist
            NotDirectoryError: If the target is not a directory
        """
        target = self.resolve(path)
        self._check_directory(target)

        previous = self._cwd
        self._cwd = self.canonical(target)
        self._logger.debug(
            "Current directory changed",
            context={'from': previous, 'to': self._cwd}
        )
        return self._cwd

    @staticmethod
    def _check_directory(path: str) -> None:
        """Raise unless ``path`` currently names a directory."""
        try:
            info = os.stat(path)
        except OSError as e:
            raise translate_os_error(e, path, operation='chdir') from e

        if not stat.S_ISDIR(info.st_mode):
            raise NotDirectoryError(path)
