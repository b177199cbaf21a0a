"""RAM and ROM banks."""

from __future__ import annotations

import random
from collections.abc import Iterable

from melo.addressing import ADDRESS_MASK, Addressable


class Ram(Addressable):
    """Writable memory; out-of-range accesses read 0 and drop writes."""

    def __init__(self, data: Iterable[int]) -> None:
        self._data = bytearray(data)

    @classmethod
    def zero(cls, size: int) -> Ram:
        """RAM of ``size`` zero bytes."""
        return cls(bytes(size))

    @classmethod
    def rand(cls, size: int) -> Ram:
        """RAM of ``size`` random bytes."""
        return cls(random.randbytes(size))

    @property
    def data(self) -> bytes:
        return bytes(self._data)

    def read_byte(self, addr: int) -> int:
        addr &= ADDRESS_MASK
        return self._data[addr] if addr < len(self._data) else 0

    def write_byte(self, addr: int, val: int) -> None:
        addr &= ADDRESS_MASK
        if addr < len(self._data):
            self._data[addr] = val

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ram):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Ram({bytes(self._data)!r})"


class Rom(Addressable):
    """Read-only memory; writes are ignored."""

    def __init__(self, data: Iterable[int]) -> None:
        self._data = bytes(data)

    @property
    def data(self) -> bytes:
        return self._data

    def read_byte(self, addr: int) -> int:
        addr &= ADDRESS_MASK
        return self._data[addr] if addr < len(self._data) else 0

    def write_byte(self, addr: int, val: int) -> None:
        pass

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rom):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash(self._data)

    def __repr__(self) -> str:
        return f"Rom({self._data!r})"