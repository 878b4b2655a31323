"""Byte-level register reading and writing.

The sensor frame is a flat run of big-endian 16-bit registers, so the codec
works a byte at a time rather than a bit at a time. RegisterWriter never
range-checks the opcodes and payload it is handed beyond masking each byte,
which is what gives SET_INTERVAL its wraparound behavior.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..exceptions import DecodeError
from .fixedpoint import join_uint16, mask_byte, split_uint16, to_signed16


class RegisterWriter:
    """Appends bytes and big-endian 16-bit registers to a frame.

    Example:
        >>> writer = RegisterWriter()
        >>> writer.write_uint8(0x01)
        >>> writer.write_uint16(300)
        >>> writer.to_list()
        [1, 1, 44]
    """

    def __init__(self) -> None:
        self._bytes: list[int] = []

    def write_uint8(self, value: int) -> None:
        """Write one byte, keeping its low 8 bits."""
        self._bytes.append(mask_byte(value))

    def write_uint16(self, value: int) -> None:
        """Write a 16-bit value high byte first, keeping its low 16 bits."""
        high, low = split_uint16(value)
        self._bytes.append(high)
        self._bytes.append(low)

    def to_list(self) -> list[int]:
        """Return the frame as a list of ints (the host's byte representation)."""
        return list(self._bytes)

    def to_bytes(self) -> bytes:
        """Return the frame as ``bytes``."""
        return bytes(self._bytes)


class RegisterReader:
    """Reads bytes and big-endian 16-bit registers from a frame.

    Reads are sequential. Bytes left unread after the last register are
    ignored, so frames may grow trailing fields without breaking old readers.

    Args:
        data: Frame bytes (``bytes``, ``bytearray`` or a sequence of ints)

    Raises:
        DecodeError: If any element is not an integer in 0-255
    """

    def __init__(self, data: Iterable[int]) -> None:
        frame: list[int] = []
        for index, value in enumerate(data):
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 0xFF:
                raise DecodeError(f"Byte {index} is not an 8-bit unsigned value: {value!r}")
            frame.append(value)
        self._bytes = frame
        self._position = 0

    def read_uint8(self) -> int:
        """Read one byte.

        Raises:
            DecodeError: If the frame is exhausted
        """
        if self._position >= len(self._bytes):
            raise DecodeError("Attempted to read past end of frame")

        value = self._bytes[self._position]
        self._position += 1
        return value

    def read_uint16(self) -> int:
        """Read a big-endian unsigned 16-bit register.

        Raises:
            DecodeError: If fewer than 2 bytes remain
        """
        if self.bytes_remaining() < 2:
            raise DecodeError(
                f"Not enough bytes for a 16-bit register: have {self.bytes_remaining()}"
            )
        high = self.read_uint8()
        low = self.read_uint8()
        return join_uint16(high, low)

    def read_int16(self) -> int:
        """Read a big-endian 16-bit register as two's complement."""
        return to_signed16(self.read_uint16())

    def bytes_remaining(self) -> int:
        return len(self._bytes) - self._position

    def __len__(self) -> int:
        return len(self._bytes)
