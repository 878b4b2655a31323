"""Frame decoders.

This module provides decode(), which turns an uplink frame from the sensor
into engineering-unit measurements, and decode_command(), which turns a
downlink frame back into the command that produced it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..exceptions import DecodeError
from ..layout import (
    MIN_UPLINK_LENGTH,
    OPCODE_RESET,
    OPCODE_SET_INTERVAL,
    UPLINK_REGISTERS,
    RegisterSpec,
)
from ..models.downlink import Command, CommandRecord
from ..models.uplink import (
    DecodedUplink,
    DecodeResult,
    InvalidUplink,
    MeasurementRecord,
    ShortPayload,
)
from .fixedpoint import from_fixed_point
from .registers import RegisterReader

logger = logging.getLogger(__name__)


def decode(data: Iterable[int]) -> DecodeResult:
    """Decode an uplink frame into measurements.

    The frame holds four big-endian 16-bit registers: temperature (signed,
    /10), humidity (/10), current (signed, /100) and pressure (/10). Power is
    derived from current at 230 V. Bytes after the eighth are ignored.

    This function never raises. Structural problems come back as result
    variants:

    - fewer than 8 bytes: :class:`ShortPayload`
    - not a byte sequence: :class:`InvalidUplink`

    Args:
        data: Frame bytes (``bytes``, ``bytearray`` or a sequence of ints)

    Returns:
        DecodedUplink, ShortPayload or InvalidUplink

    Examples:
        ```python
        from ttnformatter import decode

        result = decode(bytes.fromhex("00FF025801F404B0"))
        result.data.temperature  # 25.5
        result.data.pressure     # 120.0
        result.data.power        # 1150.0
        ```
    """
    try:
        frame = list(data)
    except TypeError:
        logger.warning("Uplink payload is not a byte sequence: %r", data)
        return InvalidUplink(errors=[f"Expected a byte sequence, got {type(data).__name__}"])

    if len(frame) < MIN_UPLINK_LENGTH:
        logger.warning("Uplink payload too short: %d bytes", len(frame))
        return ShortPayload()

    try:
        reader = RegisterReader(frame[:MIN_UPLINK_LENGTH])
        values = {spec.name: _read_register(reader, spec) for spec in UPLINK_REGISTERS}
    except DecodeError as e:
        logger.warning("Uplink payload rejected: %s", e)
        return InvalidUplink(errors=[str(e)])

    record = MeasurementRecord(**values)
    logger.debug("Decoded uplink %s", record)
    return DecodedUplink(data=record)


def _read_register(reader: RegisterReader, spec: RegisterSpec) -> float:
    """Read one register and scale it to its physical value."""
    raw = reader.read_int16() if spec.signed else reader.read_uint16()
    return from_fixed_point(raw, spec.scale)


def decode_command(data: Iterable[int]) -> CommandRecord:
    """Decode a downlink frame back into a command.

    Args:
        data: Downlink frame bytes

    Returns:
        CommandRecord for SET_INTERVAL (with its interval) or RESET

    Raises:
        DecodeError: If the frame is empty, truncated, or has an unknown opcode
    """
    reader = RegisterReader(data)
    if len(reader) == 0:
        raise DecodeError("Empty downlink frame")

    opcode = reader.read_uint8()

    if opcode == OPCODE_SET_INTERVAL:
        if reader.bytes_remaining() != 2:
            raise DecodeError(
                f"SET_INTERVAL frame must be 3 bytes, got {len(reader)}"
            )
        # model_construct keeps a decoded interval of 0 instead of mapping it to None
        return CommandRecord.model_construct(
            command=Command.SET_INTERVAL, interval=reader.read_uint16()
        )

    if opcode == OPCODE_RESET:
        if reader.bytes_remaining() != 0:
            raise DecodeError(f"RESET frame must be 1 byte, got {len(reader)}")
        return CommandRecord(command=Command.RESET)

    raise DecodeError(f"Unknown downlink opcode 0x{opcode:02X}")
