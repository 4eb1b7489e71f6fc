"""
tests.test_disasm
=================
Disassembler listing format.
"""

from __future__ import annotations

from intcode.disasm import disassemble


class TestDisassemble:

    def test_position_operands(self):
        lines = disassemble([1, 0, 0, 0, 99]).splitlines()
        assert lines[0].split() == ["0", "ADD", "[0],", "[0],", "[0]"]
        assert lines[1].split() == ["4", "HALT"]

    def test_modes(self):
        text = disassemble([21101, 7, -2, 3, 99])
        assert "ADD   7, -2, [rb+3]" in text

    def test_relative_output(self):
        text = disassemble([109, 1, 204, -1, 99])
        assert "ARB   1" in text
        assert "OUT   [rb-1]" in text

    def test_unknown_word_is_data(self):
        lines = disassemble([99, 42, 3]).splitlines()
        assert lines[1].split() == ["1", "DATA", "42"]

    def test_truncated_instruction_is_data(self):
        lines = disassemble([1, 0, 0]).splitlines()
        assert [l.split()[1] for l in lines] == ["DATA", "DATA", "DATA"]

    def test_empty(self):
        assert disassemble([]) == ""
