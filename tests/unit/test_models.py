"""Tests for formatter records."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from ttnformatter import (
    Command,
    CommandRecord,
    DecodedUplink,
    EncodeError,
    EncodedFrame,
    MeasurementRecord,
    ShortPayload,
)


class TestMeasurementRecord:
    """Test the measurement record."""

    def test_power_is_derived(self) -> None:
        """Test power follows current and is not a stored field."""
        record = MeasurementRecord(temperature=20.0, humidity=50.0, current=-3.0, pressure=1000.0)

        assert record.power == 690.0
        assert "power" not in MeasurementRecord.model_fields

    def test_power_cannot_be_supplied(self) -> None:
        """Test a supplied power value is ignored."""
        record = MeasurementRecord(
            temperature=0.0, humidity=0.0, current=1.0, pressure=0.0, power=9999.0
        )

        assert record.power == 230.0

    def test_dump_includes_power(self) -> None:
        """Test serialized measurements include power."""
        record = MeasurementRecord(temperature=25.5, humidity=60.0, current=5.0, pressure=120.0)

        assert record.model_dump()["power"] == 1150.0

    def test_frozen(self) -> None:
        """Test records are immutable."""
        record = MeasurementRecord(temperature=0.0, humidity=0.0, current=0.0, pressure=0.0)

        with pytest.raises(ValidationError):
            record.current = 1.0  # type: ignore[misc]


class TestCommandRecord:
    """Test command parsing."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("SET_INTERVAL", Command.SET_INTERVAL),
            ("RESET", Command.RESET),
            (Command.RESET, Command.RESET),
            ("UNKNOWN", Command.UNRECOGNIZED),
            ("set_interval", Command.UNRECOGNIZED),
            (42, Command.UNRECOGNIZED),
        ],
    )
    def test_command_parsing(self, value: object, expected: Command) -> None:
        """Test closed command set with a catch-all."""
        assert CommandRecord(command=value).command is expected

    def test_missing_command(self) -> None:
        """Test a record with no command."""
        assert CommandRecord().command is Command.UNRECOGNIZED

    def test_resolved_interval(self) -> None:
        """Test interval default resolution."""
        assert CommandRecord(command="SET_INTERVAL", interval=300).resolved_interval() == 300
        assert CommandRecord(command="SET_INTERVAL").resolved_interval() == 60
        assert CommandRecord(command="SET_INTERVAL", interval=0).resolved_interval() == 60
        assert CommandRecord(command="SET_INTERVAL").resolved_interval(default=120) == 120

    def test_interval_coercion(self) -> None:
        """Test numeric strings are accepted as intervals."""
        assert CommandRecord(command="SET_INTERVAL", interval="300").resolved_interval() == 300

    @pytest.mark.parametrize("value", ["", 0, False, None])
    def test_falsy_interval_is_missing(self, value: object) -> None:
        """Test falsy intervals are stored as missing and resolve to the default."""
        record = CommandRecord(command="SET_INTERVAL", interval=value)

        assert record.interval is None
        assert record.resolved_interval() == 60

    @pytest.mark.parametrize("value", [2.5, "soon", [300]])
    def test_invalid_interval_rejected_on_resolve(self, value: object) -> None:
        """Test malformed intervals are kept as given and rejected when resolved."""
        record = CommandRecord(command="SET_INTERVAL", interval=value)

        assert record.interval == value
        with pytest.raises(EncodeError, match="^Invalid interval:"):
            record.resolved_interval()

    def test_extra_keys_ignored(self) -> None:
        """Test host metadata next to the command is ignored."""
        record = CommandRecord.model_validate({"command": "RESET", "confirmed": True})

        assert record.command is Command.RESET


class TestOutputShape:
    """Test serialization to host dicts."""

    def test_encoded_frame_aliases(self) -> None:
        """Test host field names bytes and fPort."""
        frame = EncodedFrame(frame=[0xFF])

        assert frame.to_output() == {"bytes": [255], "fPort": 1, "warnings": [], "errors": []}

    def test_short_payload_output(self) -> None:
        """Test the in-band short payload marker."""
        assert ShortPayload().to_output() == {
            "data": {"error": "Payload too short"},
            "warnings": ["Expected at least 8 bytes"],
            "errors": [],
        }

    def test_decoded_uplink_output(self) -> None:
        """Test decoded uplink output."""
        record = MeasurementRecord(temperature=1.0, humidity=2.0, current=0.5, pressure=3.0)

        assert DecodedUplink(data=record).to_output() == {
            "data": {
                "temperature": 1.0,
                "humidity": 2.0,
                "current": 0.5,
                "pressure": 3.0,
                "power": 115.0,
            },
            "warnings": [],
            "errors": [],
        }
