"""Binary codec for the sensor's uplink and downlink frames.

This module provides the stateless transformations between raw frames and
the formatter's records.
"""

from __future__ import annotations

from .decoder import decode, decode_command
from .encoder import encode, encode_measurements
from .registers import RegisterReader, RegisterWriter

__all__ = [
    "decode",
    "decode_command",
    "encode",
    "encode_measurements",
    "RegisterReader",
    "RegisterWriter",
]
