"""Wire layout of the uplink frame and the downlink opcodes.

The uplink frame is four big-endian 16-bit registers::

    [TEMP_H][TEMP_L][HUM_H][HUM_L][CURR_H][CURR_L][PRES_H][PRES_L]

Scale factors are part of the wire contract and must match the device
firmware.
"""

from __future__ import annotations

from dataclasses import dataclass

# Nominal mains voltage used to derive power from current
NOMINAL_VOLTAGE = 230

DEFAULT_FPORT = 1
DEFAULT_INTERVAL = 60

OPCODE_SET_INTERVAL = 0x01
OPCODE_RESET = 0xFF

SHORT_PAYLOAD_WARNING = "Expected at least 8 bytes"
SHORT_PAYLOAD_ERROR = "Payload too short"


@dataclass(frozen=True)
class RegisterSpec:
    """One 16-bit register of the uplink frame.

    Attributes:
        name: Measurement field name
        offset: Byte offset of the high byte
        signed: Whether the register is two's complement
        scale: Fixed-point divisor (raw / scale = physical value)
        unit: Physical unit, informational only
    """

    name: str
    offset: int
    signed: bool
    scale: int
    unit: str


UPLINK_REGISTERS: tuple[RegisterSpec, ...] = (
    RegisterSpec("temperature", 0, signed=True, scale=10, unit="°C"),
    RegisterSpec("humidity", 2, signed=False, scale=10, unit="%"),
    RegisterSpec("current", 4, signed=True, scale=100, unit="A"),
    RegisterSpec("pressure", 6, signed=False, scale=10, unit="hPa"),
)

MIN_UPLINK_LENGTH = 2 * len(UPLINK_REGISTERS)
