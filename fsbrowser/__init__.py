"""
fsbrowser - Linux File Explorer

An interactive filesystem browser: listing, navigation, file
operations, name search and POSIX permission management.
"""

__version__ = "1.0.0"
__author__ = "YSNRFD"

# Import main components for convenience
from .core.explorer import (
    FileExplorer,
    OperationResult,
    ListResult,
    SearchResult,
    PermissionInfo,
)
from .shell.shell import Shell

__all__ = [
    'FileExplorer',
    'OperationResult',
    'ListResult',
    'SearchResult',
    'PermissionInfo',
    'Shell',
]
