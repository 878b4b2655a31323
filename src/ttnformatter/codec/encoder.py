"""Frame encoders.

This module provides encode(), which serializes a downlink command for the
device, and encode_measurements(), the device-side packing of an uplink frame
(what the sensor firmware transmits).
"""

from __future__ import annotations

import logging

from ..config import DEFAULT_CONFIG, FormatterConfig
from ..exceptions import EncodeError
from ..layout import OPCODE_RESET, OPCODE_SET_INTERVAL, UPLINK_REGISTERS
from ..models.downlink import Command, CommandRecord, EncodedFrame
from .fixedpoint import INT16_MAX, INT16_MIN, UINT16_MAX, to_fixed_point, to_unsigned16
from .registers import RegisterWriter

logger = logging.getLogger(__name__)


def encode(command: CommandRecord, config: FormatterConfig = DEFAULT_CONFIG) -> EncodedFrame:
    """Encode a downlink command.

    Frame layout per command:

    - SET_INTERVAL: ``[0x01, interval_hi, interval_lo]``
    - RESET: ``[0xFF]``
    - anything else: empty frame

    The interval defaults to ``config.default_interval`` (60 s) when missing
    or zero. Intervals outside 0-65535 wrap to their low 16 bits unless
    ``config.strict_interval`` is set, in which case the frame is empty and
    the problem is listed in ``errors``.

    This function never raises.

    Args:
        command: Command to encode
        config: Formatter options

    Returns:
        EncodedFrame on ``config.fport``

    Examples:
        ```python
        from ttnformatter import CommandRecord, encode

        encode(CommandRecord(command="SET_INTERVAL", interval=300)).frame  # [1, 1, 44]
        encode(CommandRecord(command="RESET")).frame                       # [255]
        ```
    """
    writer = RegisterWriter()

    try:
        if command.command is Command.SET_INTERVAL:
            _write_set_interval(writer, command, config)
        elif command.command is Command.RESET:
            writer.write_uint8(OPCODE_RESET)
        else:
            logger.info("Unrecognized downlink command, sending empty frame")
    except EncodeError as e:
        logger.warning("Downlink rejected: %s", e)
        return EncodedFrame(fport=config.fport, errors=[str(e)])

    frame = EncodedFrame(frame=writer.to_list(), fport=config.fport)
    logger.debug("Encoded %s as %s", command.command.value, frame.frame)
    return frame


def _write_set_interval(
    writer: RegisterWriter, command: CommandRecord, config: FormatterConfig
) -> None:
    interval = command.resolved_interval(config.default_interval)
    if not 0 <= interval <= UINT16_MAX:
        if config.strict_interval:
            raise EncodeError(f"Interval {interval} out of range 0-{UINT16_MAX}")
        logger.warning("Interval %d exceeds 16 bits and will wrap", interval)

    writer.write_uint8(OPCODE_SET_INTERVAL)
    writer.write_uint16(interval)


def encode_measurements(
    temperature: float, humidity: float, current: float, pressure: float
) -> bytes:
    """Pack measurements into an uplink frame the way the sensor does.

    Each value is scaled, rounded to the nearest integer and written as a
    big-endian 16-bit register.

    Args:
        temperature: Degrees Celsius
        humidity: Percent
        current: Amperes
        pressure: Hectopascal

    Returns:
        8-byte uplink frame

    Raises:
        EncodeError: If a value does not fit its register

    Example:
        >>> encode_measurements(25.5, 60.0, 5.0, 120.0).hex()
        '00ff025801f404b0'
    """
    values = {
        "temperature": temperature,
        "humidity": humidity,
        "current": current,
        "pressure": pressure,
    }
    writer = RegisterWriter()

    for spec in UPLINK_REGISTERS:
        raw = to_fixed_point(values[spec.name], spec.scale)
        low, high = (INT16_MIN, INT16_MAX) if spec.signed else (0, UINT16_MAX)
        if not low <= raw <= high:
            raise EncodeError(
                f"{spec.name} {values[spec.name]} {spec.unit} out of range "
                f"[{low / spec.scale}, {high / spec.scale}]"
            )
        writer.write_uint16(to_unsigned16(raw))

    return writer.to_bytes()
