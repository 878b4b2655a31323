"""Main CLI entry point for ttnformatter."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from .. import __version__
from ..codec import encode_measurements
from ..config import FormatterConfig
from ..exceptions import FormatterError
from ..formatter import decode_downlink, decode_uplink, encode_downlink


def _parse_hex(text: str) -> list[int]:
    cleaned = text.replace(" ", "").replace(":", "")
    if cleaned.lower().startswith("0x"):
        cleaned = cleaned[2:]
    try:
        return list(bytes.fromhex(cleaned))
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"not a hex string: {text!r}") from e


def _print_json(result: dict[str, Any]) -> None:
    print(json.dumps(result, ensure_ascii=False))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ttnformatter",
        description="ttnformatter: LoRaWAN sensor payload formatter",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ttnformatter decode 00FF025801F404B0            Decode an uplink frame
  ttnformatter encode SET_INTERVAL --interval 300 Encode a downlink command
  ttnformatter decode-downlink 01012C             Decode a downlink frame
  ttnformatter pack -t 25.5 -u 60 -c 5 -p 120     Build an uplink frame
        """,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"ttnformatter {__version__}",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for diagnostics on stderr (default: WARNING)",
    )

    subparsers = parser.add_subparsers(dest="action")

    decode_parser = subparsers.add_parser("decode", help="Decode an uplink frame")
    decode_parser.add_argument("payload", type=_parse_hex, help="Frame as hex")
    decode_parser.add_argument("--fport", type=int, default=1, help="Uplink FPort")

    encode_parser = subparsers.add_parser("encode", help="Encode a downlink command")
    encode_parser.add_argument("command", help="SET_INTERVAL, RESET, ...")
    encode_parser.add_argument("--interval", type=int, help="Interval in seconds")
    encode_parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject intervals outside 0-65535 instead of wrapping",
    )

    downlink_parser = subparsers.add_parser("decode-downlink", help="Decode a downlink frame")
    downlink_parser.add_argument("payload", type=_parse_hex, help="Frame as hex")

    pack_parser = subparsers.add_parser("pack", help="Pack measurements into an uplink frame")
    pack_parser.add_argument("-t", "--temperature", type=float, required=True, help="°C")
    pack_parser.add_argument("-u", "--humidity", type=float, required=True, help="%%")
    pack_parser.add_argument("-c", "--current", type=float, required=True, help="A")
    pack_parser.add_argument("-p", "--pressure", type=float, required=True, help="hPa")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the ttnformatter CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.action == "decode":
        result = decode_uplink({"bytes": args.payload, "fPort": args.fport})
    elif args.action == "encode":
        data: dict[str, Any] = {"command": args.command}
        if args.interval is not None:
            data["interval"] = args.interval
        result = encode_downlink({"data": data}, FormatterConfig(strict_interval=args.strict))
    elif args.action == "decode-downlink":
        result = decode_downlink({"bytes": args.payload, "fPort": 1})
    elif args.action == "pack":
        try:
            frame = encode_measurements(
                args.temperature, args.humidity, args.current, args.pressure
            )
        except FormatterError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        print(frame.hex().upper())
        return 0
    else:
        # If no command specified, show help
        parser.print_help()
        return 0

    _print_json(result)
    return 1 if result["errors"] else 0


if __name__ == "__main__":
    sys.exit(main())
