"""Pure formatting utilities for human-readable file sizes.

Sizes scale by repeated division until the value drops below one unit. Byte
counts print as integers, scaled values print without decimals when integral
and with two decimals otherwise.
"""

from typing import Final

# Decimal unit constants (1000-based)
_DECIMAL_DIVISOR: Final[float] = 1000.0
_DECIMAL_UNITS: Final[tuple[str, ...]] = ("B", "kB", "MB", "GB", "TB", "PB", "EB")

# Binary unit constants (1024-based)
_BINARY_DIVISOR: Final[float] = 1024.0
_BINARY_UNITS: Final[tuple[str, ...]] = ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB")


def _format_scaled(size: int, divisor: float, units: tuple[str, ...]) -> str:
    if size < 0:
        msg = "size must be non-negative"
        raise ValueError(msg)

    value = float(size)
    index = 0
    while value >= divisor and index < len(units) - 1:
        value /= divisor
        index += 1

    if index == 0:
        return f"{size} {units[0]}"
    if value.is_integer():
        return f"{value:.0f} {units[index]}"
    return f"{value:.2f} {units[index]}"


def format_decimal_size(size: int) -> str:
    """Convert bytes to a decimal (SI, powers of 1000) size string.

    Args:
        size: Number of bytes (must be non-negative)

    Returns:
        Human-readable size

    Examples:
        >>> format_decimal_size(999)
        '999 B'
        >>> format_decimal_size(1000)
        '1 kB'
        >>> format_decimal_size(1234567)
        '1.23 MB'
    """
    return _format_scaled(size, _DECIMAL_DIVISOR, _DECIMAL_UNITS)


def format_binary_size(size: int) -> str:
    """Convert bytes to a binary (IEC, powers of 1024) size string.

    Args:
        size: Number of bytes (must be non-negative)

    Returns:
        Human-readable size

    Examples:
        >>> format_binary_size(1000)
        '1000 B'
        >>> format_binary_size(1024)
        '1 KiB'
        >>> format_binary_size(10000)
        '9.77 KiB'
    """
    return _format_scaled(size, _BINARY_DIVISOR, _BINARY_UNITS)
