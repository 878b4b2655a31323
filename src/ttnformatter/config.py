"""Configuration for the payload formatter.

The defaults reproduce the deployed wire contract exactly. The only behavior
switch is ``strict_interval``, which turns the silent 16-bit wraparound of the
SET_INTERVAL downlink into a reported error.
"""

from __future__ import annotations

from dataclasses import dataclass

from .exceptions import ConfigError


@dataclass(frozen=True)
class FormatterConfig:
    """Formatter options.

    Attributes:
        strict_interval: Reject SET_INTERVAL values outside 0-65535 instead of
            truncating them with ``& 0xFF`` per byte (default False).
        default_interval: Interval in seconds used when a SET_INTERVAL command
            carries no interval, or a falsy one (default 60).
        fport: LoRaWAN FPort stamped on every downlink frame (default 1).

    Examples:
        ```python
        from ttnformatter import FormatterConfig, encode_downlink

        strict = FormatterConfig(strict_interval=True)
        result = encode_downlink({"data": {"command": "SET_INTERVAL", "interval": 70000}}, strict)
        result["errors"]  # ['Interval 70000 out of range 0-65535']
        ```
    """

    strict_interval: bool = False
    default_interval: int = 60
    fport: int = 1

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if not 0 < self.default_interval <= 0xFFFF:
            raise ConfigError(
                f"default_interval must be 1-65535, got {self.default_interval}"
            )

        # FPort 0 is reserved for MAC commands, 224+ for the LoRaWAN test protocol
        if not 1 <= self.fport <= 223:
            raise ConfigError(f"fport must be 1-223, got {self.fport}")


DEFAULT_CONFIG = FormatterConfig()
