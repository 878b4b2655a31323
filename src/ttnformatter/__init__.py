"""ttnformatter: LoRaWAN payload formatter for an environmental/power sensor

Translates between the sensor's 8-byte uplink frame and engineering-unit
measurements, and serializes downlink commands for the device. Designed to
sit behind a network server's payload-formatter hook (The Things Stack).

Key Features:
- Bit-exact big-endian fixed-point decoding with sign correction
- Pydantic records for measurements, commands and results
- Stateless, never-raising host entry points
- Optional strict range checking for downlink intervals

Quick Start:
    >>> from ttnformatter import decode_uplink, encode_downlink
    >>> decode_uplink({"bytes": [0x00, 0xFF, 0x02, 0x58, 0x01, 0xF4, 0x04, 0xB0]})["data"]["power"]
    1150.0
    >>> encode_downlink({"data": {"command": "SET_INTERVAL", "interval": 300}})["bytes"]
    [1, 1, 44]
"""

from __future__ import annotations

from .codec import decode, decode_command, encode, encode_measurements
from .config import FormatterConfig
from .exceptions import ConfigError, DecodeError, EncodeError, FormatterError
from .formatter import decode_downlink, decode_uplink, encode_downlink
from .models import (
    Command,
    CommandRecord,
    DecodedDownlink,
    DecodedUplink,
    DecodeResult,
    EncodedFrame,
    InvalidUplink,
    MeasurementRecord,
    ShortPayload,
)

__version__ = "0.1.0"

__all__ = [
    # Host entry points
    "decode_uplink",
    "encode_downlink",
    "decode_downlink",
    # Codec
    "decode",
    "encode",
    "decode_command",
    "encode_measurements",
    # Records
    "MeasurementRecord",
    "DecodeResult",
    "DecodedUplink",
    "ShortPayload",
    "InvalidUplink",
    "Command",
    "CommandRecord",
    "EncodedFrame",
    "DecodedDownlink",
    # Configuration
    "FormatterConfig",
    # Exceptions
    "FormatterError",
    "DecodeError",
    "EncodeError",
    "ConfigError",
    # Version
    "__version__",
]
