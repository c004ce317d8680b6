"""
fsbrowser Exception Hierarchy

All explorer errors inherit from FileSystemException. Each class names
its entry of the error taxonomy through its ``kind`` attribute.

Architecture:
    FileSystemException (Base)
    ├── InvalidArgumentError
    │   └── InvalidFormatError
    ├── PathNotFoundError
    ├── AlreadyExistsError
    ├── PermissionDeniedError
    ├── DirectoryNotEmptyError
    ├── NotDirectoryError
    ├── DirectoryUnreadableError
    ├── SourceNotFoundError
    ├── DestinationUnwritableError
    ├── MoveFailedError
    └── FileIOError
"""

from .fs_exceptions import (
    ErrorKind,
    FileSystemException,
    InvalidArgumentError,
    InvalidFormatError,
    PathNotFoundError,
    AlreadyExistsError,
    PermissionDeniedError,
    DirectoryNotEmptyError,
    NotDirectoryError,
    DirectoryUnreadableError,
    SourceNotFoundError,
    DestinationUnwritableError,
    MoveFailedError,
    FileIOError,
    translate_os_error,
)

__all__ = [
    "ErrorKind",
    "FileSystemException",
    "InvalidArgumentError",
    "InvalidFormatError",
    "PathNotFoundError",
    "AlreadyExistsError",
    "PermissionDeniedError",
    "DirectoryNotEmptyError",
    "NotDirectoryError",
    "DirectoryUnreadableError",
    "SourceNotFoundError",
    "DestinationUnwritableError",
    "MoveFailedError",
    "FileIOError",
    "translate_os_error",
]
