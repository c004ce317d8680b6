"""
Filesystem Exceptions

Exceptions raised by the explorer engine: path resolution, listing,
searching, file operations and permission handling.

Author: YSNRFD
Version: 1.0.0
"""

import errno
from enum import Enum
from typing import Optional, Any


class ErrorKind(Enum):
    """Error taxonomy shared by every filesystem exception."""
    INVALID_ARGUMENT = "InvalidArgument"
    INVALID_FORMAT = "InvalidFormat"
    NOT_FOUND = "NotFound"
    NOT_A_DIRECTORY = "NotADirectory"
    DIRECTORY_UNREADABLE = "DirectoryUnreadable"
    DIRECTORY_NOT_EMPTY = "DirectoryNotEmpty"
    ALREADY_EXISTS = "AlreadyExists"
    PERMISSION_DENIED = "PermissionDenied"
    SOURCE_NOT_FOUND = "SourceNotFound"
    DESTINATION_UNWRITABLE = "DestinationUnwritable"
    MOVE_FAILED = "MoveFailed"
    IO_ERROR = "IOError"


class FileSystemException(Exception):
    """
    Base exception for all filesystem-related errors.

    This is the parent class for all exceptions that occur within
    the explorer engine.

    Attributes:
        message: Human-readable error description
        path: File path associated with the error (if applicable)
        error_code: Numeric error code for programmatic handling
        context: Extra structured details
    """

    kind: ErrorKind = ErrorKind.IO_ERROR

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        self.error_code = error_code or 4000
        self.context = context or {}
        if path:
            self.context["path"] = path

    def __str__(self) -> str:
        base = f"[Error {self.error_code}] {self.message}"
        if self.path:
            base = f"{base} (path={self.path})"
        return base


class InvalidArgumentError(FileSystemException):
    """
    Malformed input supplied by the caller.

    Example:
        >>> raise InvalidArgumentError("Path argument must not be empty")
    """

    kind = ErrorKind.INVALID_ARGUMENT

    def __init__(
        self,
        message: str,
        argument: Optional[str] = None,
        error_code: int = 4010,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if argument is not None:
            ctx["argument"] = argument
        super().__init__(
            message=message,
            error_code=error_code,
            context=ctx
        )
        self.argument = argument


class InvalidFormatError(InvalidArgumentError):
    """
    A permission string is not three octal digits.

    Example:
        >>> raise InvalidFormatError("888")
    """

    kind = ErrorKind.INVALID_FORMAT

    def __init__(
        self,
        value: str,
        reason: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if reason:
            ctx["reason"] = reason
        super().__init__(
            message=f"Invalid permissions format: {value!r}. Use octal (e.g., 755)",
            argument=value,
            error_code=4011,
            context=ctx
        )
        self.value = value
        self.reason = reason


class PathNotFoundError(FileSystemException):
    """
    The specified path does not exist.

    Example:
        >>> raise PathNotFoundError("/path/to/file")
    """

    kind = ErrorKind.NOT_FOUND

    def __init__(
        self,
        path: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"File not found: {path}",
            path=path,
            error_code=4001,
            context=context
        )


class AlreadyExistsError(FileSystemException):
    """
    The specified path already exists.

    Example:
        >>> raise AlreadyExistsError("/path/to/file")
    """

    kind = ErrorKind.ALREADY_EXISTS

    def __init__(
        self,
        path: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"File already exists: {path}",
            path=path,
            error_code=4002,
            context=context
        )


class PermissionDeniedError(FileSystemException):
    """
    Permission denied for the operation.

    Example:
        >>> raise PermissionDeniedError("/root/file", operation="chmod")
    """

    kind = ErrorKind.PERMISSION_DENIED

    def __init__(
        self,
        path: str,
        operation: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if operation:
            ctx["operation"] = operation
        super().__init__(
            message=f"Permission denied: {path}",
            path=path,
            error_code=4003,
            context=ctx
        )
        self.operation = operation


class DirectoryNotEmptyError(FileSystemException):
    """
    Directory is not empty.

    This exception is raised when attempting to remove a directory
    that still contains files or subdirectories.
    """

    kind = ErrorKind.DIRECTORY_NOT_EMPTY

    def __init__(
        self,
        path: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"Directory not empty: {path}",
            path=path,
            error_code=4004,
            context=context
        )


class NotDirectoryError(FileSystemException):
    """
    Path is not a directory.

    This exception is raised when a directory operation is attempted
    on a path that is not a directory.
    """

    kind = ErrorKind.NOT_A_DIRECTORY

    def __init__(
        self,
        path: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"Not a directory: {path}",
            path=path,
            error_code=4009,
            context=context
        )


class DirectoryUnreadableError(FileSystemException):
    """The directory exists but cannot be opened for reading."""

    kind = ErrorKind.DIRECTORY_UNREADABLE

    def __init__(
        self,
        path: str,
        reason: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if reason:
            ctx["reason"] = reason
        super().__init__(
            message=f"Error opening directory: {path}",
            path=path,
            error_code=4012,
            context=ctx
        )
        self.reason = reason


class SourceNotFoundError(FileSystemException):
    """The copy source cannot be opened for reading."""

    kind = ErrorKind.SOURCE_NOT_FOUND

    def __init__(
        self,
        path: str,
        reason: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if reason:
            ctx["reason"] = reason
        super().__init__(
            message=f"Cannot open source file: {path}",
            path=path,
            error_code=4013,
            context=ctx
        )
        self.reason = reason


class DestinationUnwritableError(FileSystemException):
    """The copy destination cannot be opened for writing."""

    kind = ErrorKind.DESTINATION_UNWRITABLE

    def __init__(
        self,
        path: str,
        reason: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if reason:
            ctx["reason"] = reason
        super().__init__(
            message=f"Cannot create destination file: {path}",
            path=path,
            error_code=4014,
            context=ctx
        )
        self.reason = reason


class MoveFailedError(FileSystemException):
    """
    Rename failed.

    Carries the errno reported by the operating system. No copy and
    delete fallback is attempted for cross-device moves.

    Example:
        >>> raise MoveFailedError("/a", "/mnt/b", errno.EXDEV, "Invalid cross-device link")
    """

    kind = ErrorKind.MOVE_FAILED

    def __init__(
        self,
        source: str,
        destination: str,
        errno_value: Optional[int] = None,
        strerror: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        ctx["destination"] = destination
        if errno_value is not None:
            ctx["errno"] = errno_value
        super().__init__(
            message=f"Error moving file: {strerror or 'unknown error'}",
            path=source,
            error_code=4015,
            context=ctx
        )
        self.source = source
        self.destination = destination
        self.errno = errno_value
        self.strerror = strerror


class FileIOError(FileSystemException):
    """Underlying filesystem failure not otherwise classified."""

    kind = ErrorKind.IO_ERROR

    def __init__(
        self,
        path: str,
        reason: Optional[str] = None,
        errno_value: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if errno_value is not None:
            ctx["errno"] = errno_value
        super().__init__(
            message=f"I/O error: {reason or 'unknown error'}",
            path=path,
            error_code=4016,
            context=ctx
        )
        self.reason = reason
        self.errno = errno_value


def translate_os_error(
    exc: OSError,
    path: str,
    operation: Optional[str] = None
) -> FileSystemException:
    """
    Map an OSError onto the filesystem exception hierarchy.

    Args:
        exc: The error raised by the os module
        path: Path the operation was applied to
        operation: Name of the failing operation, kept in the context

    Returns:
        The matching FileSystemException (not raised)
    """
    code = exc.errno

    if code == errno.ENOENT:
        return PathNotFoundError(path)
    if code == errno.EEXIST:
        return AlreadyExistsError(path)
    if code in (errno.EACCES, errno.EPERM):
        return PermissionDeniedError(path, operation=operation)
    if code == errno.ENOTEMPTY:
        return DirectoryNotEmptyError(path)
    if code == errno.ENOTDIR:
        return NotDirectoryError(path)

    return FileIOError(
        path,
        reason=exc.strerror or str(exc),
        errno_value=code,
        context={"operation": operation} if operation else None
    )
