"""Unit tests for uplink and downlink frame decoding."""

from __future__ import annotations

import pytest

from ttnformatter import (
    Command,
    DecodedUplink,
    DecodeError,
    InvalidUplink,
    ShortPayload,
    decode,
    decode_command,
)


class TestDecodeUplink:
    """Test measurement decoding."""

    def test_reference_frame(self, reference_frame: bytes) -> None:
        """Test the documented example frame."""
        result = decode(reference_frame)

        assert isinstance(result, DecodedUplink)
        assert result.data.temperature == 25.5
        assert result.data.humidity == 60.0
        assert result.data.current == 5.0
        assert result.data.pressure == 120.0
        assert result.data.power == 1150.0
        assert result.warnings == []
        assert result.errors == []

    def test_accepts_int_list(self) -> None:
        """Test the host's list-of-ints representation."""
        result = decode([0x00, 0xFF, 0x02, 0x58, 0x01, 0xF4, 0x04, 0xB0])

        assert isinstance(result, DecodedUplink)
        assert result.data.temperature == 25.5

    def test_negative_temperature(self) -> None:
        """Test sign correction on temperature."""
        # -10.5 °C = -105 = 0xFF97
        result = decode([0xFF, 0x97, 0, 0, 0, 0, 0, 0])

        assert result.data.temperature == -10.5

    def test_negative_current(self) -> None:
        """Test sign correction on current and power from its magnitude."""
        # -2.50 A = -250 = 0xFF06
        result = decode([0, 0, 0, 0, 0xFF, 0x06, 0, 0])

        assert result.data.current == -2.5
        assert result.data.power == 575.0

    def test_humidity_and_pressure_unsigned(self) -> None:
        """Test that bit 15 is not a sign bit for unsigned registers."""
        result = decode([0, 0, 0xFF, 0xFF, 0, 0, 0xFF, 0xFF])

        assert result.data.humidity == 6553.5
        assert result.data.pressure == 6553.5

    def test_extreme_signed_values(self) -> None:
        """Test 0x8000 and 0x7FFF on signed registers."""
        minimum = decode([0x80, 0x00, 0, 0, 0x80, 0x00, 0, 0])
        maximum = decode([0x7F, 0xFF, 0, 0, 0x7F, 0xFF, 0, 0])

        assert minimum.data.temperature == pytest.approx(-3276.8)
        assert minimum.data.current == pytest.approx(-327.68)
        assert maximum.data.temperature == pytest.approx(3276.7)
        assert maximum.data.current == pytest.approx(327.67)

    def test_trailing_bytes_ignored(self, reference_frame: bytes) -> None:
        """Test bytes after the eighth are ignored, even invalid ones."""
        extended = decode(list(reference_frame) + [0x12, 0x34, 999])

        assert extended == decode(reference_frame)

    def test_all_zero(self) -> None:
        """Test an all-zero frame."""
        result = decode(bytes(8))

        assert result.data.model_dump() == {
            "temperature": 0.0,
            "humidity": 0.0,
            "current": 0.0,
            "pressure": 0.0,
            "power": 0.0,
        }


class TestDecodeUplinkErrors:
    """Test structural problems in uplink frames."""

    @pytest.mark.parametrize("length", [0, 1, 7])
    def test_short_payload(self, length: int) -> None:
        """Test frames shorter than 8 bytes."""
        result = decode(bytes(length))

        assert isinstance(result, ShortPayload)
        assert result.data == {"error": "Payload too short"}
        assert result.warnings == ["Expected at least 8 bytes"]
        assert result.errors == []

    def test_short_payload_ignores_content(self) -> None:
        """Test the length guard applies before any content check."""
        result = decode([999, -1])

        assert isinstance(result, ShortPayload)

    def test_out_of_range_byte(self) -> None:
        """Test values outside 0-255 in the frame."""
        result = decode([0, 0, 0, 300, 0, 0, 0, 0])

        assert isinstance(result, InvalidUplink)
        assert result.data == {}
        assert result.errors == ["Byte 3 is not an 8-bit unsigned value: 300"]

    def test_not_a_sequence(self) -> None:
        """Test non-iterable input."""
        result = decode(None)  # type: ignore[arg-type]

        assert isinstance(result, InvalidUplink)
        assert result.errors == ["Expected a byte sequence, got NoneType"]


class TestDecodeCommand:
    """Test downlink frame decoding."""

    def test_set_interval(self) -> None:
        """Test SET_INTERVAL frame."""
        record = decode_command([0x01, 0x01, 0x2C])

        assert record.command is Command.SET_INTERVAL
        assert record.interval == 300

    def test_set_interval_zero(self) -> None:
        """Test a zero interval on the wire is shown as 0."""
        record = decode_command([0x01, 0x00, 0x00])

        assert record.interval == 0

    def test_reset(self) -> None:
        """Test RESET frame."""
        record = decode_command(b"\xff")

        assert record.command is Command.RESET
        assert record.interval is None

    def test_empty_frame(self) -> None:
        """Test empty frame."""
        with pytest.raises(DecodeError, match="Empty"):
            decode_command([])

    def test_unknown_opcode(self) -> None:
        """Test unknown opcode."""
        with pytest.raises(DecodeError, match="0x02"):
            decode_command([0x02])

    @pytest.mark.parametrize("frame", [[0x01], [0x01, 0x00], [0x01, 0, 0, 0]])
    def test_set_interval_wrong_length(self, frame: list[int]) -> None:
        """Test SET_INTERVAL frames that are not 3 bytes."""
        with pytest.raises(DecodeError, match="3 bytes"):
            decode_command(frame)

    def test_reset_with_payload(self) -> None:
        """Test RESET frame carrying extra bytes."""
        with pytest.raises(DecodeError, match="1 byte"):
            decode_command([0xFF, 0x00])
