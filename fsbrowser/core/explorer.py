"""
fsbrowser Explorer

The interface offered to the shell. Each operation takes raw argument
strings, resolves them against the current directory, runs the engine
and returns a result object instead of raising.

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass, field
from typing import Optional, List

from fsbrowser.core.config_loader import Config, get_config
from fsbrowser.exceptions import ErrorKind, FileSystemException
from fsbrowser.filesystem import (
    DirectoryLister,
    EntryKind,
    FileOperations,
    FileSystemEntry,
    PathResolver,
    PermissionCodec,
    RecursiveSearchEngine,
)
from fsbrowser.logger import get_logger


@dataclass
class OperationResult:
    """Outcome of an explorer operation."""
    success: bool
    message: str
    error: Optional[FileSystemException] = None

    @property
    def error_kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error is not None else None


@dataclass
class ListResult(OperationResult):
    """Directory listing split into directories and other entries."""
    path: str = ''
    detailed: bool = False
    directories: List[FileSystemEntry] = field(default_factory=list)
    files: List[FileSystemEntry] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.directories) + len(self.files)


@dataclass
class SearchResult(OperationResult):
    """Matching absolute paths in visitation order."""
    root: str = ''
    pattern: str = ''
    recursive: bool = False
    matches: List[str] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.matches)


@dataclass
class PermissionInfo(OperationResult):
    """Permission and ownership details of one entry."""
    path: str = ''
    symbolic: str = ''
    octal: str = ''
    owner: str = ''
    group: str = ''
    size: str = ''


class FileExplorer:
    """
    Filesystem browser.

    Holds the current directory (through its PathResolver) and offers
    listing, navigation, file operations, search and permission
    management.

    Example:
        >>> explorer = FileExplorer('/tmp')
        >>> result = explorer.create_file('notes.txt')
        >>> result.success
        True
        >>> explorer.show_permissions('notes.txt').symbolic
        '-rw-r--r--'
    """

    def __init__(self, start_directory: Optional[str] = None, config: Optional[Config] = None):
        """
        Args:
            start_directory: Initial current directory; defaults to
                ``explorer.start_directory`` or the process cwd
            config: Configuration to use instead of the global one

        Raises:
            FileSystemException: If the start directory is unusable
        """
        config = config or get_config()
        self._logger = get_logger('explorer')
        self._resolver = PathResolver(start_directory or config.explorer.start_directory)
        self._lister = DirectoryLister()
        self._search_engine = RecursiveSearchEngine(follow_symlinks=config.search.follow_symlinks)
        self._ops = FileOperations(
            directory_mode=config.explorer.directory_mode,
            copy_buffer_size=config.explorer.copy_buffer_size
        )

    @property
    def cwd(self) -> str:
        """The current directory."""
        return self._resolver.cwd

    def _failure(self, operation: str, exc: FileSystemException, result_cls=OperationResult, **fields):
        """Log a failed operation and wrap it in a result object."""
        self._logger.warning(
            f"{operation} failed: {exc.message}",
            context={'kind': exc.kind.value, **exc.context}
        )
        return result_cls(success=False, message=f"Error: {exc.message}", error=exc, **fields)

    # Listing and navigation

    def list(self, detailed: bool = False) -> ListResult:
        """List the current directory."""
        path = self.cwd
        try:
            directories, files = self._lister.list(path, detailed=detailed)
        except FileSystemException as e:
            return self._failure('list', e, ListResult, path=path, detailed=detailed)

        return ListResult(
            success=True,
            message=f"Total: {len(directories)} directories, {len(files)} files",
            path=path,
            detailed=detailed,
            directories=directories,
            files=files,
        )

    def change_directory(self, path: str) -> OperationResult:
        """
        Change the current directory.

        ``..`` (or an empty path) moves to the parent; at the root this
        is a successful no-op.
        """
        try:
            new_cwd = self._resolver.change_directory(path)
        except FileSystemException as e:
            return self._failure('cd', e)

        self._logger.info("Changed directory", context={'path': new_cwd})
        return OperationResult(success=True, message=f"Changed directory to: {new_cwd}")

    # File operations

    def create_file(self, name: str) -> OperationResult:
        """Create an empty file."""
        try:
            self._ops.create_file(self._resolver.resolve_argument(name))
        except FileSystemException as e:
            return self._failure('create file', e)
        return OperationResult(success=True, message=f"File created successfully: {name}")

    def create_directory(self, name: str) -> OperationResult:
        """Create a directory (one level)."""
        try:
            self._ops.create_directory(self._resolver.resolve_argument(name))
        except FileSystemException as e:
            return self._failure('create directory', e)
        return OperationResult(success=True, message=f"Directory created successfully: {name}")

    def copy(self, source: str, destination: str) -> OperationResult:
        """Copy a file's bytes to a new or existing file."""
        try:
            self._ops.copy(
                self._resolver.resolve_argument(source),
                self._resolver.resolve_argument(destination)
            )
        except FileSystemException as e:
            return self._failure('copy', e)
        return OperationResult(
            success=True,
            message=f"File copied successfully: {source} -> {destination}"
        )

    def move(self, source: str, destination: str) -> OperationResult:
        """Rename an entry within one filesystem."""
        try:
            self._ops.move(
                self._resolver.resolve_argument(source),
                self._resolver.resolve_argument(destination)
            )
        except FileSystemException as e:
            return self._failure('move', e)
        return OperationResult(
            success=True,
            message=f"File moved successfully: {source} -> {destination}"
        )

    def delete(self, target: str) -> OperationResult:
        """Delete a file or an empty directory."""
        try:
            kind = self._ops.delete(self._resolver.resolve_argument(target))
        except FileSystemException as e:
            return self._failure('delete', e)

        label = "Directory" if kind == EntryKind.DIRECTORY else "File"
        return OperationResult(success=True, message=f"{label} deleted successfully: {target}")

    # Search

    def search(self, pattern: str, recursive: bool = False) -> SearchResult:
        """Search the current directory (and optionally below) by name substring."""
        root = self.cwd
        try:
            matches = self._search_engine.search(root, pattern, recursive=recursive)
        except FileSystemException as e:
            return self._failure(
                'search', e, SearchResult,
                root=root, pattern=pattern, recursive=recursive
            )

        if matches:
            message = f"Found {len(matches)} match(es)"
        else:
            message = f"No files found matching: {pattern}"

        return SearchResult(
            success=True,
            message=message,
            root=root,
            pattern=pattern,
            recursive=recursive,
            matches=matches,
        )

    # Permissions

    def show_permissions(self, target: str) -> PermissionInfo:
        """Describe permissions, ownership and size of an entry."""
        try:
            path = self._resolver.resolve_argument(target)
            entry = self._ops.stat(path)
        except FileSystemException as e:
            return self._failure('show permissions', e, PermissionInfo)

        return PermissionInfo(
            success=True,
            message=f"File: {target}",
            path=path,
            symbolic=entry.permissions,
            octal=entry.octal,
            owner=entry.owner,
            group=entry.group,
            size=entry.readable_size,
        )

    def change_permissions(self, target: str, octal: str) -> OperationResult:
        """
        Apply a three-digit octal mode such as ``"755"``.

        The mode string is validated before the filesystem is touched.
        """
        try:
            path = self._resolver.resolve_argument(target)
            mode = PermissionCodec.from_octal(octal)
            self._ops.set_permissions(path, mode)
        except FileSystemException as e:
            return self._failure('chmod', e)

        return OperationResult(
            success=True,
            message=f"Permissions changed successfully for: {target}"
        )
