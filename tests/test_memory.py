"""
tests.test_memory
=================
Zero-extending reads and writes, negative addresses, list adoption.
"""

from __future__ import annotations

import pytest

from intcode.memory import Memory, wrap_i64
from intcode.errors import NegativeAddress


class TestMemory:

    def test_read_in_range(self):
        mem = Memory([5, 6, 7])
        assert mem.read(1) == 6
        assert len(mem) == 3

    def test_read_past_end_returns_zero_and_grows(self):
        mem = Memory([1, 2])
        assert mem.read(10) == 0
        assert len(mem) == 11
        assert mem.cells[2:] == [0] * 9

    def test_write_past_end_grows(self):
        mem = Memory([1])
        mem.write(4, 42)
        assert mem == [1, 0, 0, 0, 42]

    def test_never_shrinks(self):
        mem = Memory([1, 2, 3])
        mem.read(100)
        mem.write(0, 9)
        assert len(mem) == 101

    @pytest.mark.parametrize("op", ["read", "write"])
    def test_negative_address(self, op):
        mem = Memory([1, 2, 3])
        with pytest.raises(NegativeAddress) as exc:
            if op == "read":
                mem.read(-1)
            else:
                mem.write(-1, 0)
        assert exc.value.addr == -1
        assert len(mem) == 3

    def test_adopts_list(self):
        cells = [1, 2, 3]
        mem = Memory(cells)
        mem.write(0, 100)
        assert cells[0] == 100

    def test_copy_is_independent(self):
        mem = Memory([1, 2, 3])
        dup = mem.copy()
        dup.write(0, 7)
        assert mem.read(0) == 1
        assert dup.read(0) == 7

    def test_item_access(self):
        mem = Memory()
        mem[3] = 8
        assert mem[3] == 8
        assert mem.snapshot() == [0, 0, 0, 8]

    def test_from_text(self):
        assert Memory.from_text("1,0,0,3,99\n") == [1, 0, 0, 3, 99]

    def test_write_wraps_to_signed_64_bits(self):
        mem = Memory()
        mem.write(0, 1 << 63)
        mem.write(1, -(1 << 63) - 1)
        mem.write(2, (1 << 64) + 7)
        assert mem.snapshot() == [-(1 << 63), (1 << 63) - 1, 7]


class TestWrapI64:

    @pytest.mark.parametrize("value,expected", [
        (0, 0),
        (-1, -1),
        ((1 << 63) - 1, (1 << 63) - 1),
        (1 << 63, -(1 << 63)),
        (1 << 64, 0),
        (-(1 << 64) - 1, -1),
    ])
    def test_wrap(self, value, expected):
        assert wrap_i64(value) == expected
