"""Tests for primitive CSA token recognizers."""

import itertools
import string

import pytest

from csakifu.core.enums import Color, PieceType
from csakifu.core.notation.scanner import (
    Cursor,
    comment_line,
    digits,
    line_end,
    line_sep,
    not_line_sep,
    one_digit,
    piece_type,
    skip_comments,
    square,
    square_pieces,
    terminated,
    two_digits,
)
from csakifu.core.notation.scanner import color as color_marker
from csakifu.core.types import Square

PIECE_CODES = {
    "FU": PieceType.PAWN,
    "KY": PieceType.LANCE,
    "KE": PieceType.KNIGHT,
    "GI": PieceType.SILVER,
    "KI": PieceType.GOLD,
    "KA": PieceType.BISHOP,
    "HI": PieceType.ROOK,
    "OU": PieceType.KING,
    "TO": PieceType.PRO_PAWN,
    "NY": PieceType.PRO_LANCE,
    "NK": PieceType.PRO_KNIGHT,
    "NG": PieceType.PRO_SILVER,
    "UM": PieceType.HORSE,
    "RY": PieceType.DRAGON,
    "AL": PieceType.ALL,
}


class TestPieceType:
    @pytest.mark.parametrize(("code", "expected"), sorted(PIECE_CODES.items()))
    def test_known_codes(self, code: str, expected: PieceType) -> None:
        cur = Cursor(code)
        assert piece_type(cur) == expected
        assert cur.at_end

    def test_every_piece_type_has_a_code(self) -> None:
        assert set(PIECE_CODES.values()) == set(PieceType)

    def test_rejects_other_uppercase_pairs(self) -> None:
        for a, b in itertools.product(string.ascii_uppercase, repeat=2):
            code = a + b
            if code in PIECE_CODES:
                continue
            cur = Cursor(code)
            assert piece_type(cur) is None, code
            assert cur.pos == 0

    @pytest.mark.parametrize("text", ["fu", "F", "", "F U", "*FU"])
    def test_rejects_malformed(self, text: str) -> None:
        cur = Cursor(text)
        assert piece_type(cur) is None
        assert cur.pos == 0


class TestDigits:
    def test_one_digit(self) -> None:
        for value in range(10):
            assert one_digit(Cursor(str(value))) == value

    def test_one_digit_leaves_rest(self) -> None:
        cur = Cursor("10")
        assert one_digit(cur) == 1
        assert cur.peek() == "0"

    def test_two_digits_always_consume_two(self) -> None:
        cur = Cursor("075")
        assert two_digits(cur) == 7
        assert cur.pos == 2

    def test_two_digits_rejects_short_input(self) -> None:
        cur = Cursor("7")
        assert two_digits(cur) is None
        assert cur.pos == 0

    def test_two_digits_rejects_sign(self) -> None:
        assert two_digits(Cursor("+1")) is None

    def test_variable_width_digits(self) -> None:
        cur = Cursor("12345:")
        assert digits(cur) == 12345
        assert cur.peek() == ":"

    def test_digits_requires_one(self) -> None:
        assert digits(Cursor(":00")) is None

    def test_digits_beyond_conversion_limit(self) -> None:
        cur = Cursor("9" * 5000)
        assert digits(cur) is None
        assert cur.pos == 0


class TestSquare:
    def test_corners(self) -> None:
        assert square(Cursor("00")) == Square(0, 0)
        assert square(Cursor("99")) == Square(9, 9)

    def test_partial_square_is_not_consumed(self) -> None:
        cur = Cursor("7F")
        assert square(cur) is None
        assert cur.pos == 0

    def test_square_pieces(self) -> None:
        cur = Cursor("82HI22KA\n")
        assert square_pieces(cur) == [
            (Square(8, 2), PieceType.ROOK),
            (Square(2, 2), PieceType.BISHOP),
        ]
        assert cur.peek() == "\n"

    def test_square_pieces_stops_before_incomplete_pair(self) -> None:
        cur = Cursor("82HI22")
        assert square_pieces(cur) == [(Square(8, 2), PieceType.ROOK)]
        assert cur.pos == 4


class TestColor:
    def test_markers(self) -> None:
        assert color_marker(Cursor("+")) == Color.BLACK
        assert color_marker(Cursor("-")) == Color.WHITE

    def test_other_characters(self) -> None:
        assert color_marker(Cursor("*")) is None


class TestSeparators:
    def test_free_text_stops_at_separator(self) -> None:
        cur = Cursor("black player,rest")
        assert not_line_sep(cur) == "black player"
        assert cur.peek() == ","

    def test_free_text_may_be_empty(self) -> None:
        cur = Cursor("\nrest")
        assert not_line_sep(cur) == ""
        assert cur.pos == 0

    def test_line_sep_consumes_a_run(self) -> None:
        cur = Cursor("\r\n\n,next")
        assert line_sep(cur)
        assert cur.peek(4) == "next"

    def test_line_sep_requires_one(self) -> None:
        assert not line_sep(Cursor("x"))

    def test_line_end_accepts_end_of_input(self) -> None:
        assert line_end(Cursor(""))

    def test_terminated_restores_on_missing_separator(self) -> None:
        cur = Cursor("+2")
        assert terminated(cur, color_marker) is None
        assert cur.pos == 0


class TestComments:
    def test_comment(self) -> None:
        cur = Cursor("'this is a comment")
        assert comment_line(cur) == "this is a comment"
        assert cur.at_end

    def test_comment_runs_to_end_of_line(self) -> None:
        cur = Cursor("'a, b\r\n+")
        assert comment_line(cur) == "a, b"
        assert cur.peek() == "+"

    def test_skip_comments(self) -> None:
        cur = Cursor("'one\n'two\n+\n")
        assert skip_comments(cur) == 2
        assert cur.peek() == "+"

    def test_location(self) -> None:
        cur = Cursor("ab\ncd", pos=4)
        assert cur.location() == (2, 2)
