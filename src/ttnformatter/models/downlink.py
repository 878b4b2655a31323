"""Downlink records: commands and encoded frames."""

from __future__ import annotations

import enum
from typing import Any

from pydantic import Field, TypeAdapter, ValidationError, field_validator

from ..exceptions import EncodeError
from ..layout import DEFAULT_FPORT, DEFAULT_INTERVAL
from .base import BaseRecord

_INTERVAL_ADAPTER = TypeAdapter(int)


class Command(str, enum.Enum):
    """Downlink commands understood by the device firmware.

    Any other command string maps to UNRECOGNIZED, which encodes to an
    empty frame.
    """

    SET_INTERVAL = "SET_INTERVAL"
    RESET = "RESET"
    UNRECOGNIZED = "UNRECOGNIZED"

    @classmethod
    def parse(cls, value: Any) -> Command:
        if isinstance(value, cls):
            return value
        if value == cls.SET_INTERVAL.value:
            return cls.SET_INTERVAL
        if value == cls.RESET.value:
            return cls.RESET
        return cls.UNRECOGNIZED


class CommandRecord(BaseRecord):
    """A downlink command as scheduled by the network host.

    ``interval`` is kept as received and only parsed when a SET_INTERVAL
    frame is built, so a malformed interval never affects other commands.

    Attributes:
        command: Which command to send
        interval: Reporting interval in seconds, SET_INTERVAL only. Optional;
            falsy values (``0``, ``""``, ``False``, ``None``) mean "use the default".

    Example:
        >>> CommandRecord(command="SET_INTERVAL").resolved_interval()
        60
        >>> CommandRecord(command="FLASH_LED").command
        <Command.UNRECOGNIZED: 'UNRECOGNIZED'>
    """

    command: Command = Command.UNRECOGNIZED
    interval: Any = None

    @field_validator("command", mode="before")
    @classmethod
    def _parse_command(cls, value: Any) -> Command:
        return Command.parse(value)

    @field_validator("interval", mode="before")
    @classmethod
    def _falsy_interval(cls, value: Any) -> Any:
        if not value:
            return None
        return value

    def resolved_interval(self, default: int = DEFAULT_INTERVAL) -> int:
        """Return ``interval`` as an integer, or ``default`` when it is missing.

        Raises:
            EncodeError: If ``interval`` is not an integer value
        """
        if self.interval is None:
            return default
        try:
            return _INTERVAL_ADAPTER.validate_python(self.interval)
        except ValidationError as e:
            raise EncodeError(f"Invalid interval: {e.errors()[0]['msg']}") from e


class EncodedFrame(BaseRecord):
    """Downlink frame ready for transmission.

    Serialized with the host's field names: ``bytes`` and ``fPort``.
    """

    frame: list[int] = Field(default_factory=list, alias="bytes")
    fport: int = Field(default=DEFAULT_FPORT, alias="fPort")
    warnings: list[str] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)


class DecodedDownlink(BaseRecord):
    """A downlink frame decoded back into its command, for console display."""

    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)
