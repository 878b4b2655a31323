"""Pydantic records for ttnformatter.

This module provides the measurement, command and result records exchanged
with the network host.
"""

from __future__ import annotations

from .base import BaseRecord
from .downlink import Command, CommandRecord, DecodedDownlink, EncodedFrame
from .uplink import DecodedUplink, DecodeResult, InvalidUplink, MeasurementRecord, ShortPayload

__all__ = [
    "BaseRecord",
    "MeasurementRecord",
    "DecodeResult",
    "DecodedUplink",
    "ShortPayload",
    "InvalidUplink",
    "Command",
    "CommandRecord",
    "EncodedFrame",
    "DecodedDownlink",
]
