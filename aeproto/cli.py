#!/usr/bin/env python3
"""
aeprotoctl - AEPROTO packet inspection CLI

Usage:
    aeprotoctl decode HEX   - Decode a hex-encoded packet
    aeprotoctl encode ...   - Encode a packet and print it as hex
    aeprotoctl types        - List named packet types
"""

import sys
import struct
import argparse
import logging
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config import Config, ConfigError
from .log import setup_logging
from .packet import (
    PacketType,
    PACKET_TYPE_NAMES,
    ProtocolError,
    Header,
    Packet,
    decode_packet,
    encode_packet,
    packet_type_name,
)


logger = logging.getLogger(__name__)


def parse_int(value: str) -> int:
    """Parse decimal or 0x-prefixed integers."""
    return int(value, 0)


def parse_packet_type(value: str) -> int:
    """Parse a packet type given as a number or an enum name."""
    try:
        return PacketType[value.upper()]
    except KeyError:
        pass
    try:
        return int(value, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Unknown packet type: {value}")


def parse_hex(value: str) -> bytes:
    """Parse hex, ignoring whitespace."""
    try:
        return bytes.fromhex("".join(value.split()))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid hex: {value}")


class ProtoCtl:
    """aeprotoctl CLI application."""

    def decode(self, data: bytes) -> int:
        """Decode a packet and print its fields."""
        try:
            packet = decode_packet(data)
        except ProtocolError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

        h = packet.header
        print("Packet")
        print("=" * 40)
        print(f"Magic:       {h.magic:#04x}")
        print(f"Version:     {h.version:#04x}")
        print(f"Type:        {packet_type_name(h.packet_type)} ({h.packet_type:#04x})")
        print(f"Flags:       {h.flags:#04x}")
        print(f"ID:          {h.id}")
        print(f"Length:      {h.length}")
        print(f"Fragment ID: {h.fragment_id}")
        print(f"Payload:     {len(packet.payload)} bytes")
        if packet.payload:
            print(f"  {packet.payload.hex()}")
        if h.length != len(packet.payload):
            logger.debug(
                f"Declared length {h.length} differs from payload size {len(packet.payload)}"
            )
        return 0

    def encode(
        self,
        packet_type: int,
        payload: bytes,
        flags: int = 0,
        packet_id: int = 0,
        fragment_id: int = 0,
        length: Optional[int] = None,
    ) -> int:
        """Encode a packet and print it as hex."""
        header = Header(
            packet_type=packet_type,
            flags=flags,
            id=packet_id,
            length=len(payload) if length is None else length,
            fragment_id=fragment_id,
        )
        try:
            encoded = encode_packet(Packet(header=header, payload=payload))
        except struct.error as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

        print(encoded.hex())
        return 0

    def types(self) -> int:
        """List named packet types."""
        for code, name in sorted(PACKET_TYPE_NAMES.items()):
            if code == PacketType.NONE:
                continue
            print(f"{code:#04x}  {name}")
        return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aeprotoctl",
        description="AEPROTO packet inspection tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  aeprotoctl types
  aeprotoctl encode --type DEBUG_HELLO --payload "Hello, Server!"
  aeprotoctl decode ae0190420000000100000064000268656c6c6f
""",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Path to config file",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command")

    # decode command
    decode_parser = subparsers.add_parser("decode", help="Decode a hex packet")
    decode_parser.add_argument("data", type=parse_hex, help="Packet bytes as hex")

    # encode command
    encode_parser = subparsers.add_parser("encode", help="Encode a packet")
    encode_parser.add_argument(
        "-t", "--type",
        dest="packet_type",
        type=parse_packet_type,
        required=True,
        help="Packet type: name (DEBUG_HELLO) or code (0x90)",
    )
    encode_parser.add_argument("--flags", type=parse_int, default=0, help="Flag byte")
    encode_parser.add_argument("--id", type=parse_int, default=0, help="Packet id")
    encode_parser.add_argument(
        "--fragment-id",
        type=parse_int,
        default=0,
        help="Fragment id",
    )
    encode_parser.add_argument(
        "--length",
        type=parse_int,
        default=None,
        help="Override the length field (default: payload size)",
    )
    payload_group = encode_parser.add_mutually_exclusive_group()
    payload_group.add_argument("--payload", default="", help="Payload text (UTF-8)")
    payload_group.add_argument("--payload-hex", type=parse_hex, help="Payload as hex")

    # types command
    subparsers.add_parser("types", help="List named packet types")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = Config.load(args.config)
        if args.verbose:
            config.logging.level = "DEBUG"
        setup_logging(config)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    cli = ProtoCtl()

    # Dispatch command
    if args.command == "decode":
        return cli.decode(args.data)
    elif args.command == "encode":
        if args.payload_hex is not None:
            payload = args.payload_hex
        else:
            payload = args.payload.encode("utf-8")
        return cli.encode(
            args.packet_type,
            payload,
            flags=args.flags,
            packet_id=args.id,
            fragment_id=args.fragment_id,
            length=args.length,
        )
    elif args.command == "types":
        return cli.types()
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
