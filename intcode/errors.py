"""Exception hierarchy shared by the parser, memory and VM."""
from __future__ import annotations

from typing import Optional


class IntcodeError(Exception):
    """Base exception for all Intcode errors."""
    pass


class ParseError(IntcodeError, ValueError):
    """Program text could not be parsed into integers."""

    def __init__(self, message: str, token: Optional[str] = None,
                 column: Optional[int] = None):
        super().__init__(message)
        self.token  = token
        self.column = column


class UnknownOpcode(IntcodeError):
    def __init__(self, code: int, ip: int):
        super().__init__(f"unknown opcode {code} at ip={ip}")
        self.code = code
        self.ip   = ip


class NegativeAddress(IntcodeError):
    def __init__(self, addr: int):
        super().__init__(f"negative address {addr}")
        self.addr = addr


class InvalidWriteMode(IntcodeError):
    """A destination parameter was encoded in immediate mode."""

    def __init__(self, ip: int, param: int):
        super().__init__(f"parameter {param} at ip={ip} is a write target in immediate mode")
        self.ip    = ip
        self.param = param


class UnknownParameterMode(IntcodeError):
    def __init__(self, mode: int, ip: int):
        super().__init__(f"unknown parameter mode {mode} at ip={ip}")
        self.mode = mode
        self.ip   = ip


class InputExhausted(IntcodeError):
    """Raised by queue/iterator producers when no input value is left."""

    def __init__(self, ip: Optional[int] = None):
        where = f" at ip={ip}" if ip is not None else ""
        super().__init__(f"input requested but none available{where}")
        self.ip = ip
