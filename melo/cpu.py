"""The Melo fantasy CPU: sixteen 8-bit registers and a 32-opcode instruction set."""

from __future__ import annotations

import random
from enum import IntEnum, IntFlag

from melo.addressing import Addressable


class Reg(IntEnum):
    """Indices of the special-purpose registers."""

    PC = 0
    SP = 2
    FLAG = 4
    A0 = 5
    A1 = 6
    A2 = 7


class Flag(IntFlag):
    """Bits of the FLAG register."""

    COND = 1 << 7
    HALT = 1 << 6
    GT = 1 << 5
    EQ = 1 << 4
    LT = 1 << 3
    NEG = 1 << 2
    ZERO = 1 << 1
    CARRY = 1 << 0


def _reverse_bits(b: int) -> int:
    return int(f"{b:08b}"[::-1], 2)


class MeloCpu:
    """CPU state; every register starts at zero."""

    __slots__ = ("_regs",)

    def __init__(self) -> None:
        self._regs = bytearray(16)

    @classmethod
    def zero(cls) -> MeloCpu:
        return cls()

    @classmethod
    def rand(cls) -> MeloCpu:
        """A CPU with random registers, then reset."""
        cpu = cls()
        cpu._regs[:] = random.randbytes(16)
        cpu.reset()
        return cpu

    @property
    def registers(self) -> bytes:
        """A snapshot of all sixteen registers."""
        return bytes(self._regs)

    def reset(self) -> None:
        self._set_le(Reg.PC, 0)
        self._clear_flag(Flag.HALT)

    def halt(self) -> None:
        self._set_flag(Flag.HALT)

    def clear_halt(self) -> None:
        self._clear_flag(Flag.HALT)

    def is_halted(self) -> bool:
        return self._flag(Flag.HALT) != 0

    # register access

    def _get(self, idx: int) -> int:
        return self._regs[idx]

    def _set(self, idx: int, val: int) -> None:
        self._regs[idx] = val & 0xFF

    def _inc(self, idx: int, amt: int) -> None:
        self._set(idx, self._get(idx) + amt)

    def _dec(self, idx: int, amt: int) -> None:
        self._set(idx, self._get(idx) - amt)

    def _get_le(self, idx: int) -> int:
        base = idx & ~1
        return self._regs[base] | (self._regs[base + 1] << 8)

    def _set_le(self, idx: int, val: int) -> None:
        base = idx & ~1
        self._regs[base] = val & 0xFF
        self._regs[base + 1] = (val >> 8) & 0xFF

    def _flag(self, mask: int) -> int:
        return self._regs[Reg.FLAG] & mask

    def _set_flag(self, mask: int) -> None:
        self._regs[Reg.FLAG] |= mask & 0xFF

    def _clear_flag(self, mask: int) -> None:
        self._regs[Reg.FLAG] &= ~mask & 0xFF

    def _put_flag(self, mask: int, on: bool) -> None:
        if on:
            self._set_flag(mask)
        else:
            self._clear_flag(mask)

    def _update_math_flags(self, val: int) -> None:
        self._put_flag(Flag.NEG, bool(val & 0x80))
        self._put_flag(Flag.ZERO, val & 0xFF == 0)
        self._put_flag(Flag.CARRY, val > 0xFF)

    def _update_logic_flags(self, val: int) -> None:
        self._put_flag(Flag.NEG, bool(val & 0x80))
        self._put_flag(Flag.ZERO, val == 0)

    # execution

    def _fetch(self, bus: Addressable) -> int:
        pc = self._get_le(Reg.PC)
        byte = bus.read_byte(pc)
        self._set_le(Reg.PC, (pc + 1) & 0xFFFF)
        return byte

    def tick(self, bus: Addressable) -> None:
        """Fetch, decode and run one instruction unless halted."""
        if self.is_halted():
            return
        opcode = self._fetch(bus)
        argc = opcode >> 6
        conditional = (opcode >> 5) & 1
        for reg in (Reg.A0, Reg.A1, Reg.A2)[:argc]:
            self._set(reg, self._fetch(bus))
        if not conditional or self._flag(Flag.COND):
            arg = self._get(Reg.A0)
            _OPERATIONS[opcode & 0x1F](self, arg >> 4, arg & 0x0F, bus)

    # instructions: each takes (dest nibble, src nibble, bus)

    def _nop(self, dest, src, bus):
        pass

    def _cmp(self, dest, src, bus):
        lhs, rhs = self._get(dest), self._get(src)
        self._put_flag(Flag.GT, lhs > rhs)
        self._put_flag(Flag.EQ, lhs == rhs)
        self._put_flag(Flag.LT, lhs < rhs)
        self._update_logic_flags(rhs)

    def _any(self, dest, src, bus):
        arg = (dest << 4) | src
        self._put_flag(Flag.COND, self._flag(arg) != 0)

    def _all(self, dest, src, bus):
        arg = (dest << 4) | src
        self._put_flag(Flag.COND, self._flag(arg) == arg)

    def _swap(self, dest, src, bus):
        lhs, rhs = self._get(dest), self._get(src)
        self._set(dest, rhs)
        self._set(src, lhs)

    def _rev(self, dest, src, bus):
        self._set(dest, _reverse_bits(self._get(src)))

    def _zeros(self, dest, src, bus):
        self._set(dest, 8 - self._get(src).bit_count())

    def _ones(self, dest, src, bus):
        self._set(dest, self._get(src).bit_count())

    def _mov(self, dest, src, bus):
        self._set(dest, self._get(src))

    def _mov16(self, dest, src, bus):
        self._set_le(dest, self._get_le(src))

    def _call(self, dest, src, bus):
        bus.write_le_word(self._get_le(Reg.SP), self._get_le(dest))
        self._inc(Reg.SP, 2)
        self._set_le(dest, self._get_le(src))

    def _ret(self, dest, src, bus):
        self._dec(Reg.SP, 2)
        self._set_le(dest, bus.read_le_word(self._get_le(Reg.SP)))

    def _load(self, dest, src, bus):
        self._set(dest, bus.read_byte(self._get_le(src)))

    def _store(self, dest, src, bus):
        bus.write_byte(self._get_le(dest), self._get(src))

    def _push(self, dest, src, bus):
        bus.write_byte(self._get_le(Reg.SP), self._get(src))
        self._inc(Reg.SP, 1)

    def _pop(self, dest, src, bus):
        self._dec(Reg.SP, 1)
        self._set(dest, bus.read_byte(self._get_le(Reg.SP)))

    def _logic(self, dest, val):
        self._update_logic_flags(val)
        self._set(dest, val)

    def _and(self, dest, src, bus):
        self._logic(dest, self._get(dest) & self._get(src))

    def _or(self, dest, src, bus):
        self._logic(dest, self._get(dest) | self._get(src))

    def _xor(self, dest, src, bus):
        self._logic(dest, self._get(dest) ^ self._get(src))

    def _not(self, dest, src, bus):
        self._logic(dest, ~self._get(src) & 0xFF)

    def _add_with_carry(self, dest, lhs, rhs):
        total = lhs + rhs + self._flag(Flag.CARRY)
        self._update_math_flags(total)
        self._set(dest, total)

    def _add(self, dest, src, bus):
        self._add_with_carry(dest, self._get(dest), self._get(src))

    def _sub(self, dest, src, bus):
        self._add_with_carry(dest, self._get(dest), ~self._get(src) & 0xFF)

    def _rsub(self, dest, src, bus):
        self._add_with_carry(dest, ~self._get(dest) & 0xFF, self._get(src))

    def _neg(self, dest, src, bus):
        self._logic(dest, -self._get(src) & 0xFF)

    @staticmethod
    def _shifted_left(val, amount):
        return (val << amount) & 0xFF if amount < 8 else 0

    @staticmethod
    def _shifted_right(val, amount):
        return val >> amount if amount < 8 else 0

    def _shl(self, dest, src, bus):
        self._set(dest, self._shifted_left(self._get(dest), self._get(src)))

    def _shr(self, dest, src, bus):
        self._set(dest, self._shifted_right(self._get(dest), self._get(src)))

    def _shlimm(self, dest, src, bus):
        self._set(dest, self._shifted_left(self._get(dest), src))

    def _shrimm(self, dest, src, bus):
        self._set(dest, self._shifted_right(self._get(dest), src))

    def _inc_op(self, dest, src, bus):
        total = self._get(dest) + src
        self._update_math_flags(total)
        self._set(dest, total)

    def _dec_op(self, dest, src, bus):
        total = self._get(dest) + (~src & 0xFF) + 1
        self._update_math_flags(total)
        self._set(dest, total)

    def _set_op(self, dest, src, bus):
        self._set_flag((dest << 4) | src)

    def _clear_op(self, dest, src, bus):
        self._clear_flag((dest << 4) | src)

    # presentation

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MeloCpu):
            return NotImplemented
        return self._regs == other._regs

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"MeloCpu(registers={bytes(self._regs)!r})"

    def __str__(self) -> str:
        r = self._regs
        return "\n".join(
            [
                f"PC: ${self._get_le(Reg.PC):04x}, SP: ${self._get_le(Reg.SP):04x}",
                f"FLAG: %{r[Reg.FLAG]:08b}",
                f"A0: ${r[Reg.A0]:02x}, A1: ${r[Reg.A1]:02x}, A2: ${r[Reg.A2]:02x}",
                f"R8: ${r[8]:02x}, R9: ${r[9]:02x}, R10: ${r[10]:02x}, R11: ${r[11]:02x}",
                f"R12: ${r[12]:02x}, R13: ${r[13]:02x}, R14: ${r[14]:02x}, R15: ${r[15]:02x}",
            ]
        )


_OPERATIONS = (
    MeloCpu._nop, MeloCpu._cmp, MeloCpu._any, MeloCpu._all,
    MeloCpu._swap, MeloCpu._rev, MeloCpu._zeros, MeloCpu._ones,
    MeloCpu._mov, MeloCpu._mov16, MeloCpu._call, MeloCpu._ret,
    MeloCpu._load, MeloCpu._store, MeloCpu._push, MeloCpu._pop,
    MeloCpu._and, MeloCpu._or, MeloCpu._xor, MeloCpu._not,
    MeloCpu._add, MeloCpu._sub, MeloCpu._rsub, MeloCpu._neg,
    MeloCpu._shl, MeloCpu._shr, MeloCpu._shlimm, MeloCpu._shrimm,
    MeloCpu._inc_op, MeloCpu._dec_op, MeloCpu._set_op, MeloCpu._clear_op,
)