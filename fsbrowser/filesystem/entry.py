"""
Entry Module

Metadata for a single directory entry, read from ``os.stat``.
Entries are transient and live for the length of one operation.

Author: YSNRFD
Version: 1.0.0
"""

import grp
import os
import pwd
import stat
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Any

from .permissions import PermissionCodec
from .size_formatter import SizeFormatter


UNKNOWN_NAME = "unknown"


class EntryKind(Enum):
    """Kinds of entries the explorer distinguishes."""
    DIRECTORY = "directory"
    OTHER = "regular-or-other"


@dataclass
class FileSystemEntry:
    """
    A directory entry.

    ``mode``, ``size``, ``uid`` and ``gid`` are only filled in for
    detailed entries. Owner and group names are looked up on first
    access.
    """

    name: str
    path: str
    kind: EntryKind
    mode: Optional[int] = None
    size: Optional[int] = None
    uid: Optional[int] = None
    gid: Optional[int] = None

    @classmethod
    def from_stat(cls, name: str, path: str, info: os.stat_result, detailed: bool = True) -> 'FileSystemEntry':
        """Build an entry from a stat result."""
        kind = EntryKind.DIRECTORY if stat.S_ISDIR(info.st_mode) else EntryKind.OTHER
        if not detailed:
            return cls(name=name, path=path, kind=kind)
        return cls(
            name=name,
            path=path,
            kind=kind,
            mode=info.st_mode,
            size=info.st_size,
            uid=info.st_uid,
            gid=info.st_gid,
        )

    @property
    def is_directory(self) -> bool:
        return self.kind == EntryKind.DIRECTORY

    @property
    def detailed(self) -> bool:
        return self.mode is not None

    @property
    def permissions(self) -> Optional[str]:
        """Symbolic permission string, e.g. ``drwxr-xr-x``."""
        if self.mode is None:
            return None
        return PermissionCodec.to_symbolic(self.mode)

    @property
    def octal(self) -> Optional[str]:
        if self.mode is None:
            return None
        return PermissionCodec.to_octal(self.mode)

    @property
    def readable_size(self) -> Optional[str]:
        if self.size is None:
            return None
        return SizeFormatter.format_size(self.size)

    @property
    def owner(self) -> str:
        """Owner user name, ``unknown`` if it cannot be resolved."""
        if self.uid is None:
            return UNKNOWN_NAME
        try:
            return pwd.getpwuid(self.uid).pw_name
        except KeyError:
            return UNKNOWN_NAME

    @property
    def group(self) -> str:
        """Owner group name, ``unknown`` if it cannot be resolved."""
        if self.gid is None:
            return UNKNOWN_NAME
        try:
            return grp.getgrgid(self.gid).gr_name
        except KeyError:
            return UNKNOWN_NAME

    def to_dict(self) -> dict[str, Any]:
        """Convert entry to dictionary for display."""
        data: dict[str, Any] = {
            'name': self.name,
            'path': self.path,
            'type': self.kind.value,
        }
        if self.detailed:
            data.update({
                'permissions': self.permissions,
                'octal': self.octal,
                'size': self.size,
                'owner': self.owner,
                'group': self.group,
            })
        return data
