"""Byte-addressable buses with a 16-bit address space."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import MutableSequence

ADDRESS_MASK = 0xFFFF


def _next(addr: int) -> int:
    return (addr + 1) & ADDRESS_MASK


class Addressable(ABC):
    """Something the CPU can read bytes from and write bytes to."""

    @abstractmethod
    def read_byte(self, addr: int) -> int:
        """Return the byte at ``addr``."""

    @abstractmethod
    def write_byte(self, addr: int, val: int) -> None:
        """Store ``val`` at ``addr``."""

    def read_le_word(self, addr: int) -> int:
        """Read a little-endian 16-bit word; the second byte address wraps."""
        lo = self.read_byte(addr)
        hi = self.read_byte(_next(addr))
        return lo | (hi << 8)

    def write_le_word(self, addr: int, val: int) -> None:
        """Write a little-endian 16-bit word; the second byte address wraps."""
        self.write_byte(addr, val & 0xFF)
        self.write_byte(_next(addr), (val >> 8) & 0xFF)

    def read_be_word(self, addr: int) -> int:
        """Read a big-endian 16-bit word; the second byte address wraps."""
        hi = self.read_byte(addr)
        lo = self.read_byte(_next(addr))
        return (hi << 8) | lo

    def write_be_word(self, addr: int, val: int) -> None:
        """Write a big-endian 16-bit word; the second byte address wraps."""
        self.write_byte(addr, (val >> 8) & 0xFF)
        self.write_byte(_next(addr), val & 0xFF)


class ByteBus(Addressable):
    """A bus over a caller-owned mutable byte sequence.

    Reads outside the sequence yield 0 and writes outside it are dropped.
    Writes go straight into the wrapped sequence.
    """

    def __init__(self, data: MutableSequence[int]) -> None:
        self.data = data

    def read_byte(self, addr: int) -> int:
        addr &= ADDRESS_MASK
        if addr < len(self.data):
            return self.data[addr]
        return 0

    def write_byte(self, addr: int, val: int) -> None:
        addr &= ADDRESS_MASK
        if addr < len(self.data):
            self.data[addr] = val

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.data!r})"