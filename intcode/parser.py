"""Intcode program parser — one line of comma-separated signed integers."""
from __future__ import annotations
import re
from typing import List

from intcode.errors import ParseError

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

_INT_RE = re.compile(r'[+-]?[0-9]+')


def _first_line(text: str) -> str:
    for line in text.splitlines():
        if line.strip():
            return line
    raise ParseError("input is empty, expected a single line")


def parse_program(text: str) -> List[int]:
    """Parse ``"1,0,0,3,99"`` into ``[1, 0, 0, 3, 99]``.

    Only the first non-blank line is read. Whitespace around each token is
    ignored; anything that is not a base-10 signed 64-bit integer raises
    ParseError with the offending token and its 1-based column.
    """
    line = _first_line(text)
    program: List[int] = []
    col = 1
    for raw in line.split(","):
        tok = raw.strip()
        tok_col = col + (len(raw) - len(raw.lstrip()))
        if not _INT_RE.fullmatch(tok):
            raise ParseError(f"invalid integer {tok!r} at column {tok_col}",
                             token=tok, column=tok_col)
        value = int(tok, 10)
        if not INT64_MIN <= value <= INT64_MAX:
            raise ParseError(f"integer {tok} at column {tok_col} out of 64-bit range",
                             token=tok, column=tok_col)
        program.append(value)
        col += len(raw) + 1
    return program
