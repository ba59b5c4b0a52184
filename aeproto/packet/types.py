"""
AEPROTO Packet Types

Registry of packet type codes and their display names.

Validity is permissive: every code except the reserved NONE sentinel is
accepted on decode, named or not. Names are only used for diagnostics.
"""

from enum import IntEnum
from typing import Dict


class PacketType(IntEnum):
    """Packet type identifiers."""
    # Reserved, never valid on the wire
    NONE = 0x00

    # Session
    HELLO = 0x01
    HELLO_ACK = 0x02
    GOODBYE = 0x03

    # Liveness
    PING = 0x10
    PONG = 0x11

    # Data
    DATA = 0x20
    ACK = 0x21
    NACK = 0x22

    # Debug/Test
    DEBUG_HELLO = 0x90


PACKET_TYPE_NAMES: Dict[int, str] = {
    PacketType.NONE: "None",
    PacketType.HELLO: "Hello",
    PacketType.HELLO_ACK: "HelloAck",
    PacketType.GOODBYE: "Goodbye",
    PacketType.PING: "Ping",
    PacketType.PONG: "Pong",
    PacketType.DATA: "Data",
    PacketType.ACK: "Ack",
    PacketType.NACK: "Nack",
    PacketType.DEBUG_HELLO: "DebugHello",
}


def is_valid_packet_type(code: int) -> bool:
    """Return True unless code is the reserved NONE sentinel."""
    return code != PacketType.NONE


def packet_type_name(code: int) -> str:
    """Display name for a packet type code."""
    name = PACKET_TYPE_NAMES.get(code)
    if name is None:
        return f"Unknown({code:#04x})"
    return name
