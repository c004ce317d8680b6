"""
File Operations Module

Create, copy, move and delete entries and read or change their
permission bits. Every method takes already-resolved absolute paths,
runs once, and raises a FileSystemException subclass on failure.
Operations are independent: nothing is rolled back across calls.

Author: YSNRFD
Version: 1.0.0
"""

import errno
import os
import shutil
import stat
from typing import Optional

from .entry import EntryKind, FileSystemEntry
from .path_resolver import PathResolver
from fsbrowser.core.config_loader import get_config
from fsbrowser.exceptions import (
    DestinationUnwritableError,
    DirectoryNotEmptyError,
    FileIOError,
    InvalidArgumentError,
    MoveFailedError,
    SourceNotFoundError,
    translate_os_error,
)
from fsbrowser.logger import get_logger


NEW_FILE_MODE = 0o666  # narrowed by the process umask
MODE_MASK = 0o7777


class FileOperations:
    """
    Single-shot filesystem mutations.

    Example:
        >>> ops = FileOperations()
        >>> ops.create_file('/tmp/notes.txt')
        >>> ops.copy('/tmp/notes.txt', '/tmp/notes.bak')
    """

    def __init__(
        self,
        directory_mode: Optional[int] = None,
        copy_buffer_size: Optional[int] = None
    ):
        config = get_config()
        self._directory_mode = (
            directory_mode if directory_mode is not None else config.explorer.directory_mode
        )
        self._copy_buffer_size = copy_buffer_size or config.explorer.copy_buffer_size
        self._logger = get_logger('fileops')

    def create_file(self, path: str) -> None:
        """
        Create an empty regular file.

        Raises:
            AlreadyExistsError: If something already exists at ``path``
            PermissionDeniedError: If the parent directory is not writable
        """
        try:
            fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, NEW_FILE_MODE)
        except OSError as e:
            raise translate_os_error(e, path, operation='create') from e
        os.close(fd)
        self._logger.info("Created file", context={'path': path})

    def create_directory(self, path: str, mode: Optional[int] = None) -> None:
        """
        Create one directory level; parents are not created.

        Raises:
            AlreadyExistsError: If something already exists at ``path``
            PathNotFoundError: If the parent directory does not exist
        """
        mode = self._directory_mode if mode is None else mode
        try:
            os.mkdir(path, mode)
        except OSError as e:
            raise translate_os_error(e, path, operation='mkdir') from e
        self._logger.info("Created directory", context={'path': path, 'mode': oct(mode)})

    def copy(self, source: str, destination: str) -> int:
        """
        Copy the bytes of ``source`` into ``destination``.

        The destination is created or truncated. The copy is not atomic:
        a failure part way through may leave a partial destination.

        Returns:
            Number of bytes copied

        Raises:
            SourceNotFoundError: If ``source`` cannot be opened for reading
            DestinationUnwritableError: If ``destination`` cannot be opened
                for writing
            FileIOError: If reading or writing fails mid-copy
            InvalidArgumentError: If both paths name the same file
        """
        if self._same_file(source, destination):
            raise InvalidArgumentError(
                f"Source and destination are the same file: {source}",
                argument=destination
            )

        try:
            src = open(source, 'rb')
        except OSError as e:
            raise SourceNotFoundError(source, reason=e.strerror or str(e)) from e

        with src:
            try:
                dst = open(destination, 'wb')
            except OSError as e:
                raise DestinationUnwritableError(destination, reason=e.strerror or str(e)) from e

            with dst:
                try:
                    shutil.copyfileobj(src, dst, self._copy_buffer_size)
                    copied = dst.tell()
                except OSError as e:
                    raise FileIOError(
                        destination,
                        reason=e.strerror or str(e),
                        errno_value=e.errno,
                        context={'operation': 'copy', 'source': source}
                    ) from e

        self._logger.info(
            "Copied file",
            context={'source': source, 'destination': destination, 'bytes': copied}
        )
        return copied

    @staticmethod
    def _same_file(first: str, second: str) -> bool:
        """True when both paths exist and refer to the same inode."""
        try:
            return os.path.samefile(first, second)
        except OSError:
            return False

    def move(self, source: str, destination: str) -> None:
        """
        Rename ``source`` to ``destination``.

        Only same-volume renames are supported; no copy and delete
        fallback is attempted.

        Raises:
            MoveFailedError: On any failure, carrying the errno
        """
        try:
            os.rename(source, destination)
        except OSError as e:
            raise MoveFailedError(
                source,
                destination,
                errno_value=e.errno,
                strerror=e.strerror or str(e)
            ) from e
        self._logger.info("Moved entry", context={'source': source, 'destination': destination})

    def delete(self, path: str) -> EntryKind:
        """
        Remove a file or an empty directory.

        Symbolic links are removed themselves, never their targets.

        Returns:
            The kind of entry that was removed

        Raises:
            PathNotFoundError: If nothing exists at ``path``
            DirectoryNotEmptyError: If ``path`` is a non-empty directory
        """
        try:
            info = os.lstat(path)
        except OSError as e:
            raise translate_os_error(e, path, operation='delete') from e

        try:
            if stat.S_ISDIR(info.st_mode):
                os.rmdir(path)
            else:
                os.remove(path)
        except OSError as e:
            # Some systems report a non-empty directory as EEXIST
            if stat.S_ISDIR(info.st_mode) and e.errno in (errno.ENOTEMPTY, errno.EEXIST):
                raise DirectoryNotEmptyError(path) from e
            raise translate_os_error(e, path, operation='delete') from e

        kind = EntryKind.DIRECTORY if stat.S_ISDIR(info.st_mode) else EntryKind.OTHER
        self._logger.info("Deleted entry", context={'path': path, 'kind': kind.value})
        return kind

    def stat(self, path: str) -> FileSystemEntry:
        """
        Read the full metadata of ``path`` (symlinks followed).

        Raises:
            PathNotFoundError: If nothing exists at ``path``
        """
        try:
            info = os.stat(path)
        except OSError as e:
            raise translate_os_error(e, path, operation='stat') from e

        components = PathResolver.parse(path).components
        name = components[-1] if components else '/'
        return FileSystemEntry.from_stat(name, path, info, detailed=True)

    def get_permissions(self, path: str) -> int:
        """Return the permission bits (including setuid/setgid/sticky) of ``path``."""
        return stat.S_IMODE(self.stat(path).mode)

    def set_permissions(self, path: str, mode: int) -> None:
        """
        Apply ``mode`` to ``path``.

        Raises:
            PathNotFoundError: If nothing exists at ``path``
            PermissionDeniedError: If the caller may not change the mode
        """
        try:
            os.chmod(path, mode & MODE_MASK)
        except OSError as e:
            raise translate_os_error(e, path, operation='chmod') from e
        self._logger.info("Changed permissions", context={'path': path, 'mode': oct(mode)})
