"""Payload formatter entry points for the network host.

These mirror the Things Stack formatter interface: each takes the host's
input record and returns a plain dict with ``warnings`` and ``errors`` lists.
They never raise; malformed input is reported in ``errors``.

Example:
    ```python
    decode_uplink({"bytes": [0x00, 0xFF, 0x02, 0x58, 0x01, 0xF4, 0x04, 0xB0], "fPort": 1})
    # {'data': {'temperature': 25.5, 'humidity': 60.0, 'current': 5.0,
    #           'pressure': 120.0, 'power': 1150.0}, 'warnings': [], 'errors': []}

    encode_downlink({"data": {"command": "RESET"}})
    # {'bytes': [255], 'fPort': 1, 'warnings': [], 'errors': []}
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .codec import decode, decode_command, encode
from .config import DEFAULT_CONFIG, FormatterConfig
from .exceptions import DecodeError
from .models.downlink import CommandRecord, DecodedDownlink, EncodedFrame
from .models.uplink import InvalidUplink

logger = logging.getLogger(__name__)


def decode_uplink(input: Mapping[str, Any]) -> dict[str, Any]:
    """Decode an uplink message from the host.

    Args:
        input: Host record with a ``bytes`` field; other keys (``fPort``,
            ``recvTime``, ...) are ignored

    Returns:
        ``{"data": ..., "warnings": [...], "errors": [...]}``
    """
    if not isinstance(input, Mapping) or "bytes" not in input:
        logger.warning("Uplink input has no bytes field")
        return InvalidUplink(errors=["Input has no bytes field"]).to_output()

    return decode(input["bytes"]).to_output()


def encode_downlink(
    input: Mapping[str, Any], config: FormatterConfig = DEFAULT_CONFIG
) -> dict[str, Any]:
    """Encode a downlink command from the host.

    Args:
        input: Host record with a ``data`` field holding ``command`` and,
            for SET_INTERVAL, an optional ``interval``
        config: Formatter options

    Returns:
        ``{"bytes": [...], "fPort": 1, "warnings": [...], "errors": [...]}``
    """
    data = input.get("data") if isinstance(input, Mapping) else None
    if not isinstance(data, Mapping):
        logger.warning("Downlink input has no data object")
        return EncodedFrame(fport=config.fport, errors=["Input has no data object"]).to_output()

    return encode(CommandRecord.model_validate(dict(data)), config).to_output()


def decode_downlink(input: Mapping[str, Any]) -> dict[str, Any]:
    """Decode a scheduled downlink frame back into its command.

    Args:
        input: Host record with a ``bytes`` field (and usually ``fPort``)

    Returns:
        ``{"data": {"command": ..., ["interval": ...]}, "warnings": [...], "errors": [...]}``
    """
    if not isinstance(input, Mapping) or "bytes" not in input:
        return DecodedDownlink(errors=["Input has no bytes field"]).to_output()

    try:
        command = decode_command(input["bytes"])
    except (DecodeError, TypeError) as e:
        logger.warning("Unknown downlink frame: %s", e)
        return DecodedDownlink(errors=[f"Unknown downlink frame: {e}"]).to_output()

    return DecodedDownlink(data=command.model_dump(mode="json", exclude_none=True)).to_output()
