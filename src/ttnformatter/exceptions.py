"""Exception hierarchy for ttnformatter.

All exceptions inherit from FormatterError so callers can catch any
ttnformatter-specific error in one place. The host-facing functions in
:mod:`ttnformatter.formatter` never let these escape; they are turned into
``warnings``/``errors`` entries of the result instead.
"""

from __future__ import annotations


class FormatterError(Exception):
    """Base exception for all ttnformatter errors."""

    pass


class DecodeError(FormatterError):
    """Raised when a byte sequence cannot be decoded.

    Examples:
        - Truncated frame (read past the end of the buffer)
        - Byte value outside 0-255
        - Downlink frame with an unknown opcode
    """

    pass


class EncodeError(FormatterError):
    """Raised when a value cannot be encoded.

    Examples:
        - Interval outside 0-65535 in strict mode
        - Measurement that does not fit its 16-bit register
        - Non-integer interval
    """

    pass


class ConfigError(FormatterError):
    """Raised when a FormatterConfig is invalid."""

    pass
