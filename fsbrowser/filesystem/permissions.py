"""
Permissions Module

Permission bits and the codec converting them to and from their
symbolic ("drwxr-xr-x") and octal ("755") renderings.

Author: YSNRFD
Version: 1.0.0
"""

import stat
from dataclasses import dataclass
from enum import Flag

from fsbrowser.exceptions import InvalidFormatError


class Permission(Flag):
    """File permission bits."""
    # Owner permissions
    OWNER_READ = 0o400
    OWNER_WRITE = 0o200
    OWNER_EXEC = 0o100

    # Group permissions
    GROUP_READ = 0o040
    GROUP_WRITE = 0o020
    GROUP_EXEC = 0o010

    # Other permissions
    OTHER_READ = 0o004
    OTHER_WRITE = 0o002
    OTHER_EXEC = 0o001

    # Common combinations
    OWNER_RWX = OWNER_READ | OWNER_WRITE | OWNER_EXEC
    GROUP_RWX = GROUP_READ | GROUP_WRITE | GROUP_EXEC
    OTHER_RWX = OTHER_READ | OTHER_WRITE | OTHER_EXEC


# Rendering order of the nine symbolic positions after the type flag
SYMBOLIC_ORDER = (
    (Permission.OWNER_READ, 'r'),
    (Permission.OWNER_WRITE, 'w'),
    (Permission.OWNER_EXEC, 'x'),
    (Permission.GROUP_READ, 'r'),
    (Permission.GROUP_WRITE, 'w'),
    (Permission.GROUP_EXEC, 'x'),
    (Permission.OTHER_READ, 'r'),
    (Permission.OTHER_WRITE, 'w'),
    (Permission.OTHER_EXEC, 'x'),
)

PERMISSION_MASK = 0o777
OCTAL_DIGITS = '01234567'


@dataclass(frozen=True)
class PermissionBits:
    """
    The nine rwx bits of an entry plus its directory flag.

    Callers test individual bits through the named predicates instead
    of masking raw integers.
    """

    bits: int
    is_directory: bool = False

    def __post_init__(self):
        if not 0 <= self.bits <= PERMISSION_MASK:
            raise ValueError(f"Permission bits out of range: {oct(self.bits)}")

    @classmethod
    def from_mode(cls, mode: int) -> 'PermissionBits':
        """Build from a raw ``st_mode`` value."""
        return cls(bits=mode & PERMISSION_MASK, is_directory=stat.S_ISDIR(mode))

    def has(self, permission: Permission) -> bool:
        """True when every bit of ``permission`` is set."""
        return (self.bits & permission.value) == permission.value

    @property
    def owner_readable(self) -> bool:
        return self.has(Permission.OWNER_READ)

    @property
    def owner_writable(self) -> bool:
        return self.has(Permission.OWNER_WRITE)

    @property
    def owner_executable(self) -> bool:
        return self.has(Permission.OWNER_EXEC)

    @property
    def group_readable(self) -> bool:
        return self.has(Permission.GROUP_READ)

    @property
    def group_writable(self) -> bool:
        return self.has(Permission.GROUP_WRITE)

    @property
    def group_executable(self) -> bool:
        return self.has(Permission.GROUP_EXEC)

    @property
    def other_readable(self) -> bool:
        return self.has(Permission.OTHER_READ)

    @property
    def other_writable(self) -> bool:
        return self.has(Permission.OTHER_WRITE)

    @property
    def other_executable(self) -> bool:
        return self.has(Permission.OTHER_EXEC)

    def to_symbolic(self) -> str:
        """Render as a 10-character string such as ``-rw-r--r--``."""
        chars = ['d' if self.is_directory else '-']
        for permission, letter in SYMBOLIC_ORDER:
            chars.append(letter if self.has(permission) else '-')
        return ''.join(chars)

    def to_octal(self) -> str:
        """Render as exactly three octal digits."""
        return format(self.bits, '03o')


class PermissionCodec:
    """
    Converts permission bits between their integer, symbolic and
    octal forms.
    """

    @staticmethod
    def to_symbolic(mode: int) -> str:
        """
        Render a raw mode as a symbolic permission string.

        Args:
            mode: ``st_mode`` value (type bits decide the leading flag)

        Returns:
            10-character string, e.g. ``drwxr-xr-x``
        """
        return PermissionBits.from_mode(mode).to_symbolic()

    @staticmethod
    def to_octal(mode: int) -> str:
        """Render the low nine bits of ``mode`` as three octal digits."""
        return PermissionBits.from_mode(mode).to_octal()

    @staticmethod
    def from_octal(text: str) -> int:
        """
        Parse a three-digit octal permission string.

        Args:
            text: String such as ``"755"``

        Returns:
            Mode bits (0 to 0o777)

        Raises:
            InvalidFormatError: If ``text`` is not exactly three digits 0-7
        """
        if not isinstance(text, str) or len(text) != 3:
            raise InvalidFormatError(str(text), reason="Permissions must be 3 digits (e.g., 755)")

        mode = 0
        for char in text:
            if char not in OCTAL_DIGITS:
                raise InvalidFormatError(text, reason=f"Not an octal digit: {char!r}")
            mode = mode * 8 + OCTAL_DIGITS.index(char)

        return mode
