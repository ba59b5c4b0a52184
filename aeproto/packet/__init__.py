"""
AEPROTO Packet Module

Handles the wire format: header and packet codecs, packet type registry,
flag bits, and decode errors.
"""

from .errors import (
    ProtocolError,
    DataTooShortError,
    InvalidMagicError,
    InvalidVersionError,
    InvalidPacketTypeError,
)

from .flags import Flags

from .types import (
    PacketType,
    PACKET_TYPE_NAMES,
    is_valid_packet_type,
    packet_type_name,
)

from .format import (
    MAGIC,
    PROTOCOL_VERSION,
    HEADER_SIZE,
    Header,
    Packet,
    encode_header,
    decode_header,
    encode_packet,
    decode_packet,
    build_packet,
)

__all__ = [
    # Errors
    'ProtocolError',
    'DataTooShortError',
    'InvalidMagicError',
    'InvalidVersionError',
    'InvalidPacketTypeError',
    # Flags
    'Flags',
    # Types
    'PacketType',
    'PACKET_TYPE_NAMES',
    'is_valid_packet_type',
    'packet_type_name',
    # Format
    'MAGIC',
    'PROTOCOL_VERSION',
    'HEADER_SIZE',
    'Header',
    'Packet',
    'encode_header',
    'decode_header',
    'encode_packet',
    'decode_packet',
    'build_packet',
]
