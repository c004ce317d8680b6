"""
Search Module

Finds entries whose name contains a substring, in one directory or in
a whole subtree.

The subtree walk is a pre-order depth-first traversal driven by an
explicit stack. Directories are identified by (device, inode) so a
directory reachable through several symlinks is entered only once.

Author: YSNRFD
Version: 1.0.0
"""

import os
import stat
from typing import List, Optional, Set, Tuple

from .lister import child_path, scan_directory
from fsbrowser.core.config_loader import get_config
from fsbrowser.exceptions import FileSystemException, translate_os_error
from fsbrowser.logger import get_logger


DirectoryIdentity = Tuple[int, int]


class RecursiveSearchEngine:
    """
    Substring search over directory entries.

    Matching is case-sensitive and independent of the entry kind; the
    empty pattern matches every entry. Results are absolute paths in
    visitation order: a directory's own matches come before anything
    found below it, and subdirectories are visited in name order.

    Example:
        >>> engine = RecursiveSearchEngine()
        >>> engine.search('/etc', 'conf', recursive=True)
    """

    def __init__(self, follow_symlinks: Optional[bool] = None):
        """
        Args:
            follow_symlinks: Descend into symlinked directories; defaults
                to ``search.follow_symlinks`` from the configuration
        """
        if follow_symlinks is None:
            follow_symlinks = get_config().search.follow_symlinks
        self._follow_symlinks = follow_symlinks
        self._logger = get_logger('search')

    @property
    def follow_symlinks(self) -> bool:
        return self._follow_symlinks

    def search(self, root: str, pattern: str, recursive: bool = False) -> List[str]:
        """
        Collect paths below ``root`` whose name contains ``pattern``.

        Args:
            root: Absolute directory to search
            pattern: Substring to look for
            recursive: Whether to descend into subdirectories

        Returns:
            Matching absolute paths; empty if nothing matches

        Raises:
            FileSystemException: If ``root`` itself cannot be read
        """
        results: List[str] = []
        root_names = scan_directory(root)

        root_identity: Optional[DirectoryIdentity] = None
        if recursive:
            try:
                info = os.stat(root)
            except OSError as e:
                raise translate_os_error(e, root, operation='search') from e
            root_identity = (info.st_dev, info.st_ino)

        # Directories are marked visited when entered, not when pushed
        visited: Set[DirectoryIdentity] = set()
        stack: List[Tuple[str, Optional[DirectoryIdentity], Optional[List[str]]]] = [
            (root, root_identity, root_names)
        ]
        skipped = 0

        while stack:
            directory, identity, names = stack.pop()

            if identity is not None:
                if identity in visited:
                    self._logger.debug("Directory already visited", context={'path': directory})
                    continue
                visited.add(identity)

            if names is None:
                try:
                    names = scan_directory(directory)
                except FileSystemException as e:
                    skipped += 1
                    self._logger.debug(
                        "Skipping unreadable directory",
                        context={'path': directory, 'error': e.message}
                    )
                    continue

            subdirectories: List[Tuple[str, DirectoryIdentity]] = []

            for name in sorted(names):
                path = child_path(directory, name)

                if pattern in name:
                    results.append(path)

                if not recursive:
                    continue

                child_identity = self._directory_identity(path)
                if child_identity is not None and child_identity not in visited:
                    subdirectories.append((path, child_identity))

            for path, child_identity in reversed(subdirectories):
                stack.append((path, child_identity, None))

        self._logger.info(
            "Search finished",
            context={
                'root': root,
                'pattern': pattern,
                'recursive': recursive,
                'matches': len(results),
                'skipped': skipped,
            }
        )
        return results

    def _directory_identity(self, path: str) -> Optional[DirectoryIdentity]:
        """(device, inode) of ``path`` if it is a directory to descend into."""
        try:
            info = os.stat(path) if self._follow_symlinks else os.lstat(path)
        except OSError:
            return None

        if not stat.S_ISDIR(info.st_mode):
            return None
        return (info.st_dev, info.st_ino)
