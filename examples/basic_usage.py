#!/usr/bin/env python3
"""Basic usage example for ttnformatter.

This example demonstrates:
1. Packing a sensor reading the way the device firmware does
2. Decoding the uplink as the network host would
3. Encoding downlink commands
4. Decoding a scheduled downlink for display
"""

from __future__ import annotations

from ttnformatter import (
    FormatterConfig,
    decode_downlink,
    decode_uplink,
    encode_downlink,
    encode_measurements,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("ttnformatter Basic Usage Example")
    print("=" * 60)
    print()

    # Pack a reading on the "device"
    print("1. Packing a sensor reading...")
    frame = encode_measurements(temperature=25.5, humidity=60.0, current=5.0, pressure=120.0)
    print(f"   Frame: {frame.hex().upper()} ({len(frame)} bytes)")
    print()

    # Decode it as the network host
    print("2. Decoding the uplink...")
    result = decode_uplink({"bytes": list(frame), "fPort": 1})
    for name, value in result["data"].items():
        print(f"   {name}: {value}")
    print()

    # A truncated frame
    print("3. Decoding a truncated uplink...")
    short = decode_uplink({"bytes": list(frame[:4])})
    print(f"   data: {short['data']}")
    print(f"   warnings: {short['warnings']}")
    print()

    # Downlink commands
    print("4. Encoding downlink commands...")
    for data in (
        {"command": "SET_INTERVAL", "interval": 300},
        {"command": "SET_INTERVAL"},
        {"command": "RESET"},
        {"command": "UNKNOWN"},
    ):
        encoded = encode_downlink({"data": data})
        hex_bytes = " ".join(f"{b:02X}" for b in encoded["bytes"]) or "(empty)"
        print(f"   {data} -> {hex_bytes} on FPort {encoded['fPort']}")
    print()

    # Interval overflow, default vs strict
    print("5. Interval overflow...")
    overflow = {"data": {"command": "SET_INTERVAL", "interval": 70000}}
    wrapped = encode_downlink(overflow)
    shown = decode_downlink({"bytes": wrapped["bytes"], "fPort": 1})
    print(f"   default: sends interval {shown['data']['interval']}")
    strict = encode_downlink(overflow, FormatterConfig(strict_interval=True))
    print(f"   strict:  {strict['errors']}")
    print()


if __name__ == "__main__":
    main()
