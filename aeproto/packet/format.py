"""
AEPROTO Packet Wire Format

Defines the structure of packets handed to and received from the transport.

Packet Structure:
    Header (fixed size) + Payload (variable)

Header Format (14 bytes, big-endian):
    magic       (1 byte)  - Protocol family sentinel (0xAE)
    version     (1 byte)  - Protocol version
    type        (1 byte)  - Packet type
    flags       (1 byte)  - Caller-defined flag bits
    id          (4 bytes) - Opaque identifier (sequence/session)
    length      (4 bytes) - Payload length as declared by the sender
    fragment_id (2 bytes) - Fragment correlation id

The decoder checks packet type, then magic, then version, and stops at the
first failure. The length field is carried as-is and is not compared with
the number of payload bytes actually received.
"""

import logging
import struct
from dataclasses import dataclass, field

from .errors import (
    DataTooShortError,
    InvalidMagicError,
    InvalidVersionError,
    InvalidPacketTypeError,
)
from .flags import Flags
from .types import PacketType, is_valid_packet_type, packet_type_name


logger = logging.getLogger(__name__)

# Protocol family sentinel
MAGIC = 0xAE

# Only supported protocol version
PROTOCOL_VERSION = 0x01

HEADER_FORMAT = ">BBBBIIH"

# Header size in bytes
HEADER_SIZE = struct.calcsize(HEADER_FORMAT)


@dataclass
class Header:
    """
    Packet header structure.

    Fixed 14-byte header preceding every payload.
    """
    magic: int = MAGIC            # Sentinel (1 byte)
    version: int = PROTOCOL_VERSION  # Version (1 byte)
    packet_type: int = PacketType.NONE  # Packet type (1 byte)
    flags: int = 0                # Flags (1 byte)
    id: int = 0                   # Identifier (4 bytes)
    length: int = 0               # Declared payload length (4 bytes)
    fragment_id: int = 0          # Fragment id (2 bytes)

    def to_bytes(self) -> bytes:
        """Serialize header to bytes."""
        return struct.pack(
            HEADER_FORMAT,
            self.magic,
            self.version,
            self.packet_type,
            self.flags,
            self.id,
            self.length,
            self.fragment_id,
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> 'Header':
        """
        Parse and validate a header.

        Only the first HEADER_SIZE bytes are read.

        Raises:
            DataTooShortError: If fewer than HEADER_SIZE bytes
            InvalidPacketTypeError: If type is the reserved NONE code
            InvalidMagicError: If magic is not MAGIC
            InvalidVersionError: If version is not PROTOCOL_VERSION
        """
        if len(data) < HEADER_SIZE:
            raise DataTooShortError(len(data), HEADER_SIZE)

        (magic, version, packet_type, flags, packet_id,
         length, fragment_id) = struct.unpack_from(HEADER_FORMAT, data)

        if not is_valid_packet_type(packet_type):
            raise InvalidPacketTypeError(packet_type)
        if magic != MAGIC:
            raise InvalidMagicError(magic)
        if version != PROTOCOL_VERSION:
            raise InvalidVersionError(version)

        header = cls(
            magic=magic,
            version=version,
            packet_type=packet_type,
            flags=flags,
            id=packet_id,
            length=length,
            fragment_id=fragment_id,
        )
        logger.info(f"Decoded header: {packet_type_name(packet_type)}")
        return header


@dataclass
class Packet:
    """
    Complete packet with header and payload.
    """
    header: Header = field(default_factory=Header)
    payload: bytes = b""

    @property
    def packet_type(self) -> int:
        """Packet type shortcut."""
        return self.header.packet_type

    @property
    def flag_set(self) -> Flags:
        """Copy of the header flags. Changes are not written back to the header."""
        return Flags(self.header.flags)

    @property
    def total_size(self) -> int:
        """Total packet size in bytes."""
        return HEADER_SIZE + len(self.payload)

    def to_bytes(self) -> bytes:
        """Serialize packet to bytes."""
        return self.header.to_bytes() + bytes(self.payload)

    @classmethod
    def from_bytes(cls, data: bytes) -> 'Packet':
        """Parse packet from bytes. Everything after the header is payload."""
        if len(data) < HEADER_SIZE:
            raise DataTooShortError(len(data), HEADER_SIZE)

        header = Header.from_bytes(data[:HEADER_SIZE])
        return cls(header=header, payload=bytes(data[HEADER_SIZE:]))


def encode_header(header: Header) -> bytes:
    """Encode a header into exactly HEADER_SIZE bytes."""
    return header.to_bytes()


def decode_header(data: bytes) -> Header:
    """
    Decode and validate a header from the front of data.

    Args:
        data: Raw bytes, at least HEADER_SIZE long

    Returns:
        Header: Parsed header

    Raises:
        ProtocolError: If the header is malformed
    """
    return Header.from_bytes(data)


def encode_packet(packet: Packet) -> bytes:
    """Encode header followed by payload."""
    return packet.to_bytes()


def decode_packet(data: bytes) -> Packet:
    """
    Parse a packet from wire format.

    Args:
        data: Raw packet bytes

    Returns:
        Packet: Parsed packet

    Raises:
        ProtocolError: If the packet is malformed
    """
    return Packet.from_bytes(data)


def build_packet(
    packet_type: int,
    payload: bytes,
    flags: int = 0,
    packet_id: int = 0,
    fragment_id: int = 0,
) -> Packet:
    """
    Build a new packet with the length field set from the payload.

    Args:
        packet_type: Type of packet
        payload: Packet payload
        flags: Flag bits
        packet_id: Opaque identifier
        fragment_id: Fragment correlation id

    Returns:
        Packet: Constructed packet
    """
    header = Header(
        magic=MAGIC,
        version=PROTOCOL_VERSION,
        packet_type=packet_type,
        flags=int(flags),
        id=packet_id,
        length=len(payload),
        fragment_id=fragment_id,
    )

    return Packet(header=header, payload=bytes(payload))
