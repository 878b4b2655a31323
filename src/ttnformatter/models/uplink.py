"""Uplink records: decoded measurements and the decode result variants."""

from __future__ import annotations

from typing import Union

from pydantic import Field, computed_field

from ..layout import NOMINAL_VOLTAGE, SHORT_PAYLOAD_ERROR, SHORT_PAYLOAD_WARNING
from .base import BaseRecord


class MeasurementRecord(BaseRecord):
    """Engineering-unit values decoded from one uplink frame.

    Attributes:
        temperature: Degrees Celsius, 0.1 resolution, signed
        humidity: Relative humidity in percent, 0.1 resolution
        current: Amperes, 0.01 resolution, signed
        pressure: Hectopascal, 0.1 resolution
        power: Watts, always ``abs(current) * 230``; derived, never stored
    """

    temperature: float
    humidity: float
    current: float
    pressure: float

    @computed_field  # type: ignore[prop-decorator]
    @property
    def power(self) -> float:
        return abs(self.current) * NOMINAL_VOLTAGE


class DecodedUplink(BaseRecord):
    """Successful decode: every measurement present, no warnings or errors."""

    data: MeasurementRecord
    warnings: list[str] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)


class ShortPayload(BaseRecord):
    """Frame shorter than 8 bytes.

    The problem is reported in-band as ``data.error`` plus a warning, while
    ``errors`` stays empty. Consumers key on ``data.error``.
    """

    data: dict[str, str] = Field(default_factory=lambda: {"error": SHORT_PAYLOAD_ERROR})
    warnings: list[str] = Field(default_factory=lambda: [SHORT_PAYLOAD_WARNING])
    errors: list[str] = Field(default_factory=list)


class InvalidUplink(BaseRecord):
    """Input that is not a byte sequence at all (missing, or values outside 0-255)."""

    data: dict[str, str] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    errors: list[str]


DecodeResult = Union[DecodedUplink, ShortPayload, InvalidUplink]
