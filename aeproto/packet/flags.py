"""
AEPROTO Header Flags

Mutable 8-bit flag value carried in the header's flags byte.
Flag meanings are defined by the caller; this layer only does bit math.
"""

from dataclasses import dataclass


FLAG_MASK = 0xFF


@dataclass
class Flags:
    """
    8-bit flag set.

    Usage:
        flags = Flags()
        flags.set(0x02)
        if flags.has(0x02):
            ...
    """
    value: int = 0

    def __post_init__(self) -> None:
        self.value &= FLAG_MASK

    def has(self, flag: int) -> bool:
        """True if any bit of flag is set."""
        return self.value & flag != 0

    def set(self, flag: int) -> None:
        self.value = (self.value | flag) & FLAG_MASK

    def clear(self, flag: int) -> None:
        self.value = self.value & ~flag & FLAG_MASK

    def toggle(self, flag: int) -> None:
        self.value = (self.value ^ flag) & FLAG_MASK

    def __int__(self) -> int:
        return self.value
