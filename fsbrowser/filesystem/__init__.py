"""
fsbrowser Filesystem Module

The explorer engine:
- Permission bits and their symbolic/octal codec
- Human-readable sizes
- Path resolution against a current directory
- Directory listing
- Substring search with cycle-safe traversal
- File operations
"""

from .permissions import Permission, PermissionBits, PermissionCodec
from .size_formatter import SizeFormatter
from .path_resolver import PathResolver, ParsedPath
from .entry import FileSystemEntry, EntryKind
from .lister import DirectoryLister, scan_directory
from .search import RecursiveSearchEngine
from .file_ops import FileOperations

__all__ = [
    # Permissions
    'Permission',
    'PermissionBits',
    'PermissionCodec',
    # Sizes
    'SizeFormatter',
    # Path Resolver
    'PathResolver',
    'ParsedPath',
    # Entries
    'FileSystemEntry',
    'EntryKind',
    # Listing and search
    'DirectoryLister',
    'scan_directory',
    'RecursiveSearchEngine',
    # Operations
    'FileOperations',
]
