"""
Packet Type Registry Tests
"""

import pytest

from aeproto.packet import (
    PACKET_TYPE_NAMES,
    PacketType,
    is_valid_packet_type,
    packet_type_name,
)


class TestPacketTypeValidity:
    """Test the validity predicate."""

    def test_none_is_invalid(self) -> None:
        assert not is_valid_packet_type(PacketType.NONE)
        assert not is_valid_packet_type(0x00)

    @pytest.mark.parametrize("packet_type", [t for t in PacketType if t != PacketType.NONE])
    def test_named_types_are_valid(self, packet_type: PacketType) -> None:
        assert is_valid_packet_type(packet_type)

    @pytest.mark.parametrize("code", [0x91, 0x7F, 0xFF])
    def test_unnamed_codes_are_valid(self, code: int) -> None:
        """Any non-sentinel byte is accepted, even without a name."""
        assert code not in PACKET_TYPE_NAMES
        assert is_valid_packet_type(code)


class TestPacketTypeNames:
    """Test diagnostic names."""

    def test_every_type_has_a_name(self) -> None:
        for packet_type in PacketType:
            assert packet_type in PACKET_TYPE_NAMES

    def test_debug_hello(self) -> None:
        assert PacketType.DEBUG_HELLO == 0x90
        assert packet_type_name(0x90) == "DebugHello"

    def test_unknown_name(self) -> None:
        assert packet_type_name(0x91) == "Unknown(0x91)"
        assert packet_type_name(0x05) == "Unknown(0x05)"
