"""Growable, zero-extending integer memory."""
from __future__ import annotations
from typing import List, Optional

from intcode.errors import NegativeAddress
from intcode.parser import parse_program, INT64_MIN

_U64 = 1 << 64


def wrap_i64(value: int) -> int:
    """Two's-complement wrap into the signed 64-bit range."""
    return (value - INT64_MIN) % _U64 + INT64_MIN


class Memory:
    """Index-addressed store of signed 64-bit integers.

    Any read or write past the end first extends the store with zeros up to
    and including the address. The store never shrinks. Written values wrap
    to signed 64 bits. The list passed in is adopted, not copied, so a
    caller holding it sees every write.
    """

    def __init__(self, cells: Optional[List[int]] = None):
        self._cells: List[int] = cells if cells is not None else []

    @classmethod
    def from_text(cls, text: str) -> "Memory":
        return cls(parse_program(text))

    @property
    def cells(self) -> List[int]:
        return self._cells

    def _ensure(self, addr: int) -> None:
        if addr < 0:
            raise NegativeAddress(addr)
        short = addr + 1 - len(self._cells)
        if short > 0:
            self._cells.extend([0] * short)

    def read(self, addr: int) -> int:
        self._ensure(addr)
        return self._cells[addr]

    def write(self, addr: int, value: int) -> None:
        self._ensure(addr)
        self._cells[addr] = wrap_i64(value)

    def __getitem__(self, addr: int) -> int:
        return self.read(addr)

    def __setitem__(self, addr: int, value: int) -> None:
        self.write(addr, value)

    def __len__(self) -> int:
        return len(self._cells)

    def __eq__(self, other):
        if isinstance(other, Memory):
            return self._cells == other._cells
        if isinstance(other, list):
            return self._cells == other
        return NotImplemented

    def __repr__(self):
        head = ",".join(str(v) for v in self._cells[:8])
        more = ",..." if len(self._cells) > 8 else ""
        return f"Memory([{head}{more}], len={len(self._cells)})"

    def snapshot(self) -> List[int]:
        return list(self._cells)

    def copy(self) -> "Memory":
        return Memory(self.snapshot())
