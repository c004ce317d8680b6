"""
Directory Lister Module

Enumerates the immediate children of a directory, split into
directories and everything else, each sorted by name.

Author: YSNRFD
Version: 1.0.0
"""

import errno
import os
from typing import List, Tuple

from .entry import FileSystemEntry
from .path_resolver import SEPARATOR
from fsbrowser.exceptions import (
    DirectoryUnreadableError,
    PathNotFoundError,
    NotDirectoryError,
)
from fsbrowser.logger import get_logger


def child_path(directory: str, name: str) -> str:
    """Join a directory and a child name with a single separator."""
    return directory.rstrip(SEPARATOR) + SEPARATOR + name


def scan_directory(path: str) -> List[str]:
    """
    Read the names of a directory's children.

    ``os.scandir`` never yields ``.`` or ``..``. The directory handle
    is closed before returning, including on error.

    Args:
        path: Directory to read

    Returns:
        Child names in the order the filesystem reports them

    Raises:
        PathNotFoundError: If the directory does not exist
        NotDirectoryError: If the path is not a directory
        DirectoryUnreadableError: If it cannot be opened or read
    """
    try:
        with os.scandir(path) as it:
            return [entry.name for entry in it]
    except OSError as e:
        if e.errno == errno.ENOENT:
            raise PathNotFoundError(path) from e
        if e.errno == errno.ENOTDIR:
            raise NotDirectoryError(path) from e
        raise DirectoryUnreadableError(path, reason=e.strerror or str(e)) from e


class DirectoryLister:
    """
    Lists one directory level.

    Children whose metadata cannot be read (dangling symlinks, races
    with deletion, permission problems) are skipped.

    Example:
        >>> directories, files = DirectoryLister().list('/tmp', detailed=True)
    """

    def __init__(self):
        self._logger = get_logger('lister')

    def list(
        self,
        directory: str,
        detailed: bool = False
    ) -> Tuple[List[FileSystemEntry], List[FileSystemEntry]]:
        """
        List the immediate children of ``directory``.

        Args:
            directory: Absolute directory path
            detailed: Whether to keep permission, size and owner data

        Returns:
            Tuple of (directories, files), each sorted by name
        """
        directories: List[FileSystemEntry] = []
        files: List[FileSystemEntry] = []

        for name in scan_directory(directory):
            path = child_path(directory, name)
            try:
                info = os.stat(path)
            except OSError as e:
                self._logger.debug(
                    "Skipping entry without metadata",
                    context={'path': path, 'reason': e.strerror}
                )
                continue

            entry = FileSystemEntry.from_stat(name, path, info, detailed=detailed)
            if entry.is_directory:
                directories.append(entry)
            else:
                files.append(entry)

        directories.sort(key=lambda e: e.name)
        files.sort(key=lambda e: e.name)

        self._logger.debug(
            "Listed directory",
            context={'path': directory, 'directories': len(directories), 'files': len(files)}
        )
        return directories, files
