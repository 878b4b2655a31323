"""Fixed-point and integer helpers shared by the uplink and downlink codecs.

All multi-byte quantities on the wire are big-endian 16-bit registers.
"""

from __future__ import annotations

UINT16_MAX = 0xFFFF
INT16_MIN = -0x8000
INT16_MAX = 0x7FFF

_SIGN_BIT = 0x8000
_MODULUS = 0x10000


def mask_byte(value: int) -> int:
    """Keep the low 8 bits of ``value``."""
    return value & 0xFF


def split_uint16(value: int) -> tuple[int, int]:
    """Split ``value`` into (high byte, low byte).

    Bits above 16 are discarded, so 70000 splits like 70000 - 65536 = 4464.
    Negative values are split in two's complement.

    Example:
        >>> split_uint16(300)
        (1, 44)
    """
    return mask_byte(value >> 8), mask_byte(value)


def join_uint16(high: int, low: int) -> int:
    """Combine a big-endian byte pair into an unsigned 16-bit value."""
    return (high << 8) | low


def to_signed16(raw: int) -> int:
    """Reinterpret an unsigned 16-bit register as two's complement.

    Example:
        >>> to_signed16(0xFFFF)
        -1
        >>> to_signed16(0x7FFF)
        32767
    """
    if raw & _SIGN_BIT:
        return raw - _MODULUS
    return raw


def to_unsigned16(value: int) -> int:
    """Inverse of :func:`to_signed16` for values in the int16 range."""
    if value < 0:
        return value + _MODULUS
    return value


def from_fixed_point(raw: int, scale: int) -> float:
    """Convert a scaled integer to its physical value (``raw / scale``)."""
    return raw / float(scale)


def to_fixed_point(value: float, scale: int) -> int:
    """Convert a physical value to its scaled integer, rounding half to even."""
    return int(round(value * scale))
