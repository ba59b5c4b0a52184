"""
Pytest configuration and fixtures for AEPROTO tests.
"""

import logging
import struct

import pytest

from aeproto.packet import MAGIC, PROTOCOL_VERSION, PacketType


def build_header_bytes(
    magic: int = MAGIC,
    version: int = PROTOCOL_VERSION,
    packet_type: int = PacketType.DEBUG_HELLO,
    flags: int = 0,
    packet_id: int = 0,
    length: int = 0,
    fragment_id: int = 0,
) -> bytes:
    """Build raw header bytes independently of the codec under test."""
    return (
        bytes([magic, version, packet_type, flags])
        + struct.pack(">I", packet_id)
        + struct.pack(">I", length)
        + struct.pack(">H", fragment_id)
    )


@pytest.fixture
def header_bytes():
    """Factory for raw header bytes."""
    return build_header_bytes


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo logging changes made by setup_logging()."""
    root = logging.getLogger()
    decode_logger = logging.getLogger("aeproto.packet.format")
    before = set(root.handlers)
    level = root.level
    decode_level = decode_logger.level
    yield
    for handler in root.handlers[:]:
        if handler not in before and type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    decode_logger.setLevel(decode_level)
