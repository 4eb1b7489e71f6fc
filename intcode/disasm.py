"""Intcode disassembler — renders a program as one instruction per line."""
from __future__ import annotations
from typing import List, Sequence

from intcode.isa import (
    PARAM_COUNTS, MODE_POSITION, MODE_IMMEDIATE, MODE_RELATIVE,
    decode,
)


def _operand(raw: int, mode: int) -> str:
    if mode == MODE_POSITION:
        return f"[{raw}]"
    if mode == MODE_IMMEDIATE:
        return str(raw)
    if mode == MODE_RELATIVE:
        return f"[rb{raw:+d}]"
    return f"?{mode}:{raw}"


def disassemble(program: Sequence[int]) -> str:
    """Linear sweep; words that are not a complete instruction print as DATA."""
    lines: List[str] = []
    ip = 0
    addr_w = max(len(str(len(program))), 4)
    while ip < len(program):
        instr = decode(program[ip])
        n = PARAM_COUNTS.get(instr.opcode)
        if n is None or ip + n >= len(program):
            lines.append(f"{ip:>{addr_w}}  DATA  {program[ip]}")
            ip += 1
            continue
        ops = [_operand(program[ip + k], instr.mode(k)) for k in range(1, n + 1)]
        text = f"{ip:>{addr_w}}  {instr.name:<4}"
        if ops:
            text += "  " + ", ".join(ops)
        lines.append(text.rstrip())
        ip += 1 + n
    return "\n".join(lines)
