"""
fsbrowser Core Module

Core components:
- Configuration Loader
- File Explorer and its result types
"""

# config_loader must be imported first: the filesystem package reads it
from .config_loader import (
    ConfigLoader,
    Config,
    ConfigError,
    ConfigValidationError,
    get_config,
)
from .explorer import (
    FileExplorer,
    OperationResult,
    ListResult,
    SearchResult,
    PermissionInfo,
)

__all__ = [
    # Config
    'ConfigLoader',
    'Config',
    'ConfigError',
    'ConfigValidationError',
    'get_config',
    # Explorer
    'FileExplorer',
    'OperationResult',
    'ListResult',
    'SearchResult',
    'PermissionInfo',
]
