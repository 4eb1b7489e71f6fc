"""
tests.test_parser
=================
Program-text parsing: whitespace, signs, bad tokens, 64-bit range.
"""

from __future__ import annotations

import pytest

from intcode.parser import parse_program
from intcode.errors import ParseError, IntcodeError


class TestParseProgram:

    def test_simple(self):
        assert parse_program("1,9,10,3,2,3,11,0,99,30,40,50") == \
            [1, 9, 10, 3, 2, 3, 11, 0, 99, 30, 40, 50]

    def test_negative_values(self):
        assert parse_program("109,1,204,-1") == [109, 1, 204, -1]

    def test_surrounding_whitespace_and_newlines(self):
        assert parse_program("\n  1, 2 ,3  \n\n") == [1, 2, 3]

    def test_only_first_line_read(self):
        assert parse_program("1,2\n3,4\n") == [1, 2]

    def test_large_value(self):
        assert parse_program("104,1125899906842624,99") == [104, 1125899906842624, 99]

    def test_empty_input(self):
        with pytest.raises(ParseError, match="empty"):
            parse_program("   \n\n")

    def test_bad_token_reports_column(self):
        with pytest.raises(ParseError) as exc:
            parse_program("1,2,x3,4")
        assert exc.value.token == "x3"
        assert exc.value.column == 5

    def test_empty_token(self):
        with pytest.raises(ParseError):
            parse_program("1,,2")

    def test_trailing_comma(self):
        with pytest.raises(ParseError):
            parse_program("1,2,")

    def test_out_of_int64_range(self):
        with pytest.raises(ParseError, match="64-bit"):
            parse_program("9223372036854775808")
        assert parse_program("9223372036854775807,-9223372036854775808") == \
            [9223372036854775807, -9223372036854775808]

    def test_parse_error_is_intcode_and_value_error(self):
        with pytest.raises(IntcodeError):
            parse_program("a")
        with pytest.raises(ValueError):
            parse_program("a")

    @pytest.mark.parametrize("text", ["١,٢", "1,²", "１,2"])
    def test_non_ascii_digits_rejected(self, text):
        with pytest.raises(ParseError):
            parse_program(text)
