"""
AEPROTO - Fixed-Header Binary Wire Packet Codec

Encodes packets into a 14-byte big-endian header followed by an opaque
payload, and decodes received buffers back into structured packets.

This package contains:
- packet/    : Flags, packet types, errors and the wire codec
- config.py  : TOML configuration
- log.py     : Logging setup
- cli.py     : aeprotoctl inspection tool

License: Open Source (see LICENSE)
"""

__version__ = "0.1.0"
__author__ = "AEPROTO Project"

from .packet import (
    MAGIC,
    PROTOCOL_VERSION,
    HEADER_SIZE,
    Flags,
    PacketType,
    Header,
    Packet,
    ProtocolError,
    DataTooShortError,
    InvalidMagicError,
    InvalidVersionError,
    InvalidPacketTypeError,
    is_valid_packet_type,
    packet_type_name,
    encode_header,
    decode_header,
    encode_packet,
    decode_packet,
    build_packet,
)

__all__ = [
    'MAGIC',
    'PROTOCOL_VERSION',
    'HEADER_SIZE',
    'Flags',
    'PacketType',
    'Header',
    'Packet',
    'ProtocolError',
    'DataTooShortError',
    'InvalidMagicError',
    'InvalidVersionError',
    'InvalidPacketTypeError',
    'is_valid_packet_type',
    'packet_type_name',
    'encode_header',
    'decode_header',
    'encode_packet',
    'decode_packet',
    'build_packet',
]
