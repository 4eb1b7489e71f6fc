"""Intcode Virtual Machine — fetch/decode/execute over a growable memory.

Entry points:
  execute_program(memory)                 opcodes {1, 2, 99} only
  execute(memory, input_fn, output_fn)    full instruction set

Both mutate ``memory`` in place (a Memory or a plain list) and return None.
Input and output go through two synchronous callbacks supplied by the
caller; the VM never suspends mid-instruction.
"""
from __future__ import annotations
import logging
from collections import deque
from typing import Callable, Deque, Iterable, List, Optional, Tuple, Union

from intcode.errors import (
    IntcodeError, ParseError, UnknownOpcode, NegativeAddress,
    InvalidWriteMode, UnknownParameterMode, InputExhausted,
)
from intcode.isa import (
    ALL_OPCODES, RESTRICTED_OPCODES, WRITE_PARAMS,
    MODE_POSITION, MODE_IMMEDIATE, MODE_RELATIVE,
    OP_ADD, OP_MUL, OP_IN, OP_OUT, OP_JNZ, OP_JZ, OP_LT, OP_EQ, OP_ARB, OP_HALT,
    Instruction, decode, width,
)
from intcode.memory import Memory, wrap_i64

log = logging.getLogger(__name__)

InputFn  = Callable[[], int]
OutputFn = Callable[[int], None]
Program  = Union[Memory, List[int]]

__all__ = [
    "IntcodeVM", "InteractiveProgram",
    "execute_program", "execute", "run_collect",
    "run_with_noun_verb", "find_noun_verb",
    "iterator_input", "constant_input", "split_ascii",
    "IntcodeError", "ParseError", "UnknownOpcode", "NegativeAddress",
    "InvalidWriteMode", "UnknownParameterMode", "InputExhausted",
]


def _as_memory(program: Program) -> Memory:
    return program if isinstance(program, Memory) else Memory(program)


def _no_input() -> int:
    raise InputExhausted()


def _no_output(value: int) -> None:
    pass


# ── VM ─────────────────────────────────────────────────────────────────────────

class IntcodeVM:
    RUNNING = "running"
    HALTED  = "halted"
    FAILED  = "failed"

    def __init__(self, memory: Program,
                 input_fn: Optional[InputFn] = None,
                 output_fn: Optional[OutputFn] = None,
                 *, opcodes: frozenset = ALL_OPCODES, trace: bool = False):
        self.memory    = _as_memory(memory)
        self.input_fn  = input_fn or _no_input
        self.output_fn = output_fn or _no_output
        self.opcodes   = opcodes
        self.trace     = trace

        self.ip            = 0
        self.relative_base = 0
        self.state         = self.RUNNING
        self.steps         = 0

    # ── Parameter resolution ──────────────────────────────────────────────────

    def _raw(self, k: int) -> int:
        return self.memory.read(self.ip + k)

    def _read_param(self, instr: Instruction, k: int) -> int:
        mode = instr.mode(k)
        raw  = self._raw(k)
        if mode == MODE_POSITION:
            return self.memory.read(raw)
        if mode == MODE_IMMEDIATE:
            return raw
        if mode == MODE_RELATIVE:
            return self.memory.read(raw + self.relative_base)
        raise UnknownParameterMode(mode, self.ip)

    def _write_addr(self, instr: Instruction, k: int) -> int:
        mode = instr.mode(k)
        raw  = self._raw(k)
        if mode == MODE_POSITION:
            return raw
        if mode == MODE_RELATIVE:
            return raw + self.relative_base
        if mode == MODE_IMMEDIATE:
            raise InvalidWriteMode(self.ip, k)
        raise UnknownParameterMode(mode, self.ip)

    # ── Main loop ─────────────────────────────────────────────────────────────

    def run(self) -> Memory:
        log.debug("run start: %d words, opcodes=%s", len(self.memory), sorted(self.opcodes))
        while not self.step():
            pass
        log.debug("halted after %d steps at ip=%d", self.steps, self.ip)
        return self.memory

    def step(self) -> bool:
        """Execute one instruction. Returns True once the VM has halted."""
        if self.state == self.HALTED:
            return True
        if self.state == self.FAILED:
            raise IntcodeError("VM has already failed")
        try:
            return self._step()
        except InputExhausted as e:
            self.state = self.FAILED
            log.debug("failed at ip=%d: %s", self.ip, e)
            if e.ip is None:
                raise InputExhausted(self.ip) from e
            raise
        except Exception as e:
            self.state = self.FAILED
            log.debug("failed at ip=%d: %s", self.ip, e)
            raise

    # ── Single-step execution ─────────────────────────────────────────────────

    def _step(self) -> bool:
        instr = decode(self.memory.read(self.ip))
        op    = instr.opcode

        if self.trace:
            log.debug("ip=%d  %s  word=%d rb=%d",
                      self.ip, instr.name, instr.word, self.relative_base)

        if op not in self.opcodes:
            raise UnknownOpcode(op, self.ip)

        self.steps += 1

        # ── HALT ───────────────────────────────────────────────────────────────
        if op == OP_HALT:
            self.state = self.HALTED
            return True

        # ── ADD / MUL / LT / EQ ────────────────────────────────────────────────
        elif op in (OP_ADD, OP_MUL, OP_LT, OP_EQ):
            a   = self._read_param(instr, 1)
            b   = self._read_param(instr, 2)
            dst = self._write_addr(instr, WRITE_PARAMS[op])
            if op == OP_ADD:
                value = a + b
            elif op == OP_MUL:
                value = a * b
            elif op == OP_LT:
                value = 1 if a < b else 0
            else:
                value = 1 if a == b else 0
            self.memory.write(dst, value)

        # ── IN ─────────────────────────────────────────────────────────────────
        elif op == OP_IN:
            dst = self._write_addr(instr, WRITE_PARAMS[op])
            self.memory.write(dst, self.input_fn())

        # ── OUT ────────────────────────────────────────────────────────────────
        elif op == OP_OUT:
            self.output_fn(self._read_param(instr, 1))

        # ── JNZ / JZ ───────────────────────────────────────────────────────────
        elif op in (OP_JNZ, OP_JZ):
            a = self._read_param(instr, 1)
            b = self._read_param(instr, 2)
            if (a != 0) == (op == OP_JNZ):
                self.ip = b
                return False

        # ── ARB ────────────────────────────────────────────────────────────────
        elif op == OP_ARB:
            self.relative_base = wrap_i64(self.relative_base + self._read_param(instr, 1))

        self.ip += width(op)
        return False


# ── Entry points ───────────────────────────────────────────────────────────────

def execute_program(memory: Program) -> None:
    """Run a program that uses only ADD, MUL and HALT.

    Any other opcode raises UnknownOpcode. The caller reads ``memory[0]``
    afterwards.
    """
    IntcodeVM(memory, opcodes=RESTRICTED_OPCODES).run()


def execute(memory: Program, input_fn: InputFn, output_fn: OutputFn) -> None:
    """Run a program with the full instruction set until it halts."""
    IntcodeVM(memory, input_fn, output_fn).run()


# ── I/O helpers ────────────────────────────────────────────────────────────────

def iterator_input(values: Iterable[int]) -> InputFn:
    """Producer that yields ``values`` in order, then raises InputExhausted."""
    it = iter(values)

    def _next() -> int:
        try:
            return next(it)
        except StopIteration:
            raise InputExhausted() from None

    return _next


def split_ascii(outputs: Iterable[int]) -> Tuple[str, List[int]]:
    """Split outputs into ASCII text (0–127) and the remaining values."""
    text: List[str] = []
    rest: List[int] = []
    for v in outputs:
        if 0 <= v < 128:
            text.append(chr(v))
        else:
            rest.append(v)
    return "".join(text), rest


def constant_input(value: int) -> InputFn:
    return lambda: value


def run_collect(memory: Program, inputs: Iterable[int] = ()) -> List[int]:
    """Run with queued ``inputs`` and return every output value in order."""
    outputs: List[int] = []
    execute(memory, iterator_input(inputs), outputs.append)
    return outputs


# ── Noun/verb patching ─────────────────────────────────────────────────────────

def run_with_noun_verb(program: Program, noun: int, verb: int) -> int:
    """Copy ``program``, set addresses 1 and 2, run restricted, return cell 0."""
    memory = _as_memory(program).copy()
    memory.write(1, noun)
    memory.write(2, verb)
    execute_program(memory)
    return memory.read(0)


def find_noun_verb(program: Program, target: int) -> int:
    """Search noun, verb in 0..99 for ``target`` at cell 0; return 100*noun+verb."""
    base = _as_memory(program)
    for noun in range(100):
        for verb in range(100):
            if run_with_noun_verb(base, noun, verb) == target:
                log.info("noun=%d verb=%d produce %d", noun, verb, target)
                return 100 * noun + verb
    raise IntcodeError(f"no noun/verb pair produces {target}")


# ── Queue-fed program ──────────────────────────────────────────────────────────

class InteractiveProgram:
    """A program bundled with an input queue and an output buffer.

    All input must be queued before ``execute()``; running dry raises
    InputExhausted rather than pausing. A program executes at most once.
    """

    def __init__(self, program: Program):
        self.memory = _as_memory(program).copy()
        self._inputs: Deque[int] = deque()
        self._outputs: List[int] = []
        self.vm: Optional[IntcodeVM] = None

    def push_input(self, value: int) -> None:
        self._inputs.append(value)

    def push_inputs(self, values: Iterable[int]) -> None:
        self._inputs.extend(values)

    def push_line_as_ascii(self, line: str) -> None:
        self._inputs.extend(ord(ch) for ch in line)
        self._inputs.append(ord("\n"))

    def _pop_input(self) -> int:
        if not self._inputs:
            raise InputExhausted()
        return self._inputs.popleft()

    def execute(self) -> None:
        if self.vm is not None:
            raise IntcodeError(f"program already executed (state={self.vm.state})")
        self.vm = IntcodeVM(self.memory, self._pop_input, self._outputs.append)
        self.vm.run()

    def fetch_outputs(self) -> List[int]:
        out = list(self._outputs)
        self._outputs.clear()
        return out

    def outputs_as_ascii(self) -> str:
        """Buffered outputs in 0–127 as text; other values are left out."""
        return split_ascii(self._outputs)[0]
