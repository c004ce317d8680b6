"""
Size Formatter Module

Human-readable byte counts.

Author: YSNRFD
Version: 1.0.0
"""

from fsbrowser.exceptions import InvalidArgumentError


SIZE_UNITS = ("B", "KB", "MB", "GB", "TB")


class SizeFormatter:
    """Formats byte counts as ``"<value> <unit>"`` with two decimals."""

    @staticmethod
    def format_size(size: int) -> str:
        """
        Convert a byte count into a readable string.

        Args:
            size: Non-negative number of bytes

        Returns:
            String such as ``"1.50 KB"``; TB is the largest unit
        """
        if size < 0:
            raise InvalidArgumentError(f"Size must be non-negative: {size}", argument=str(size))

        readable = float(size)
        unit_index = 0

        while readable >= 1024 and unit_index < len(SIZE_UNITS) - 1:
            readable /= 1024
            unit_index += 1

        return f"{readable:.2f} {SIZE_UNITS[unit_index]}"
