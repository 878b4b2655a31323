"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def reference_frame() -> bytes:
    """Documented example uplink: 25.5 °C, 60.0 %, 5.00 A, 120.0 hPa."""
    return bytes.fromhex("00FF025801F404B0")


@pytest.fixture
def uplink_input(reference_frame: bytes) -> dict:
    """Host uplink record carrying metadata the formatter does not use."""
    return {
        "bytes": list(reference_frame),
        "fPort": 2,
        "recvTime": "2026-01-15T10:00:00Z",
        "end_device_ids": {"device_id": "sensor-01"},
    }
