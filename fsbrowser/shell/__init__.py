"""
fsbrowser Shell Module

Interactive numbered-menu shell:
- Menu display
- Argument prompts
- Result rendering
"""

from .shell import Shell
from .builtins import MenuCommands, MenuEntry

__all__ = [
    'Shell',
    'MenuCommands',
    'MenuEntry',
]
