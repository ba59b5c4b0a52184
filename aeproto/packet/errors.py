"""
AEPROTO Decode Errors

All decode failures derive from ProtocolError so transport code can drop
malformed input with a single except clause.
"""


class ProtocolError(ValueError):
    """Base exception for malformed wire data."""
    pass


class DataTooShortError(ProtocolError):
    """Buffer is shorter than the fixed header."""

    def __init__(self, length: int, required: int):
        super().__init__(f"Data too short: {length} < {required}")
        self.length = length
        self.required = required


class InvalidMagicError(ProtocolError):
    """Magic byte does not match the protocol sentinel."""

    def __init__(self, magic: int):
        super().__init__(f"Invalid magic: {magic:#04x}")
        self.magic = magic


class InvalidVersionError(ProtocolError):
    """Unsupported protocol version."""

    def __init__(self, version: int):
        super().__init__(f"Invalid version: {version:#04x}")
        self.version = version


class InvalidPacketTypeError(ProtocolError):
    """Packet type is the reserved NONE code."""

    def __init__(self, packet_type: int):
        super().__init__(f"Invalid packet type: {packet_type:#04x}")
        self.packet_type = packet_type
