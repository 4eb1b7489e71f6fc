"""Intcode ISA — opcode table, parameter modes and instruction-word decoding.

Instruction word layout (decimal digits, least significant first):
  [1:0]  opcode        word mod 100
  [2]    mode of p1    0 = position, 1 = immediate, 2 = relative
  [3]    mode of p2
  [4]    mode of p3
Absent leading digits read as 0 (position mode).
"""
from __future__ import annotations
from dataclasses import dataclass

# ── Opcodes ────────────────────────────────────────────────────────────────────
OPCODES: dict[str, int] = {
    "ADD":   1,
    "MUL":   2,
    "IN":    3,
    "OUT":   4,
    "JNZ":   5,    # jump-if-true
    "JZ":    6,    # jump-if-false
    "LT":    7,
    "EQ":    8,
    "ARB":   9,    # adjust relative base
    "HALT": 99,
}

OPCODE_NAMES: dict[int, str] = {v: k for k, v in OPCODES.items()}

OP_ADD  = OPCODES["ADD"]
OP_MUL  = OPCODES["MUL"]
OP_IN   = OPCODES["IN"]
OP_OUT  = OPCODES["OUT"]
OP_JNZ  = OPCODES["JNZ"]
OP_JZ   = OPCODES["JZ"]
OP_LT   = OPCODES["LT"]
OP_EQ   = OPCODES["EQ"]
OP_ARB  = OPCODES["ARB"]
OP_HALT = OPCODES["HALT"]

# Parameter count per opcode; width of an instruction is 1 + count.
PARAM_COUNTS: dict[int, int] = {
    OP_ADD: 3, OP_MUL: 3, OP_IN: 1, OP_OUT: 1,
    OP_JNZ: 2, OP_JZ: 2, OP_LT: 3, OP_EQ: 3,
    OP_ARB: 1, OP_HALT: 0,
}

# 1-indexed parameter that names a destination address, if any.
WRITE_PARAMS: dict[int, int] = {
    OP_ADD: 3, OP_MUL: 3, OP_IN: 1, OP_LT: 3, OP_EQ: 3,
}

ALL_OPCODES: frozenset[int] = frozenset(PARAM_COUNTS)
RESTRICTED_OPCODES: frozenset[int] = frozenset({OP_ADD, OP_MUL, OP_HALT})


def width(opcode: int) -> int:
    return 1 + PARAM_COUNTS[opcode]


# ── Parameter modes ────────────────────────────────────────────────────────────
MODE_POSITION  = 0
MODE_IMMEDIATE = 1
MODE_RELATIVE  = 2

MODE_NAMES: dict[int, str] = {
    MODE_POSITION:  "position",
    MODE_IMMEDIATE: "immediate",
    MODE_RELATIVE:  "relative",
}


# ── Decoding ───────────────────────────────────────────────────────────────────

def _trunc_mod(value: int, base: int) -> int:
    # Remainder with the sign of the dividend, so negative words never
    # alias onto a valid opcode (-1 % 100 would otherwise be 99).
    r = abs(value) % base
    return -r if value < 0 else r


@dataclass(frozen=True)
class Instruction:
    word: int
    opcode: int

    def mode(self, k: int) -> int:
        """Addressing mode of parameter ``k`` (1-indexed)."""
        if k < 1:
            raise ValueError(f"Parameter index must be >= 1, got {k}")
        return _trunc_mod(abs(self.word) // 10 ** (1 + k), 10)

    @property
    def name(self) -> str:
        return OPCODE_NAMES.get(self.opcode, f"UNK({self.opcode})")

    @property
    def known(self) -> bool:
        return self.opcode in ALL_OPCODES


def decode(word: int) -> Instruction:
    """Split a raw word into opcode + modes. Total: never raises."""
    return Instruction(word=word, opcode=_trunc_mod(word, 100))


def encode(opcode: int, *modes: int) -> int:
    word = opcode
    for k, m in enumerate(modes, start=1):
        word += m * 10 ** (1 + k)
    return word
