"""
intcode
=======
Integer virtual machine for the Intcode instruction set.

Exports:
    Memory             — growable, zero-extending integer store
    IntcodeVM          — fetch/decode/execute loop (ip, relative base, state)
    execute_program    — restricted entry point (ADD, MUL, HALT)
    execute            — full entry point with input/output callbacks
    run_collect        — run with queued inputs, return outputs
    InteractiveProgram — program + input queue + output buffer
    parse_program      — "1,0,0,3,99" → [1, 0, 0, 3, 99]
    disassemble        — program → mnemonic listing
"""

from .errors   import (IntcodeError, ParseError, UnknownOpcode, NegativeAddress,
                       InvalidWriteMode, UnknownParameterMode, InputExhausted)
from .isa      import Instruction, decode, encode, OPCODES, OPCODE_NAMES
from .memory   import Memory
from .parser   import parse_program
from .vm       import (IntcodeVM, InteractiveProgram, execute_program, execute,
                       run_collect, run_with_noun_verb, find_noun_verb,
                       iterator_input, constant_input)
from .disasm   import disassemble

__version__ = "1.0.0"

__all__ = [
    # Core
    "Memory",
    "IntcodeVM",
    "execute_program",
    "execute",
    "run_collect",
    "run_with_noun_verb",
    "find_noun_verb",
    "iterator_input",
    "constant_input",
    "InteractiveProgram",
    # ISA
    "Instruction",
    "decode",
    "encode",
    "OPCODES",
    "OPCODE_NAMES",
    # Text
    "parse_program",
    "disassemble",
    # Errors
    "IntcodeError",
    "ParseError",
    "UnknownOpcode",
    "NegativeAddress",
    "InvalidWriteMode",
    "UnknownParameterMode",
    "InputExhausted",
]
