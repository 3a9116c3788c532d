"""Input cursor and primitive CSA token recognizers.

Every recognizer takes a :class:`Cursor`, consumes a prefix of the
remaining input and returns the decoded value.  On mismatch it returns
``None`` and leaves the cursor where it was, so callers can try
alternatives in order without restarting.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from csakifu.core.enums import Color, PieceType
from csakifu.core.piece import piece_type_from_csa
from csakifu.core.types import Square

LINE_SEPARATORS = "\r\n,"
NEWLINES = "\r\n"
COMMENT_MARKER = "'"
_DIGITS = "0123456789"

T = TypeVar("T")


class Cursor:
    """Read position over an immutable input string."""

    __slots__ = ("text", "pos")

    def __init__(self, text: str, pos: int = 0) -> None:
        self.text = text
        self.pos = pos

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self, size: int = 1) -> str:
        return self.text[self.pos : self.pos + size]

    def startswith(self, token: str) -> bool:
        return self.text.startswith(token, self.pos)

    def location(self) -> tuple[int, int]:
        """1-based (line, column) of the cursor."""
        consumed = self.text[: self.pos]
        line = consumed.count("\n") + 1
        column = self.pos - (consumed.rfind("\n") + 1) + 1
        return line, column


def literal(cur: Cursor, token: str) -> bool:
    if not cur.startswith(token):
        return False
    cur.pos += len(token)
    return True


def one_of(cur: Cursor, chars: str) -> str | None:
    ch = cur.peek()
    if not ch or ch not in chars:
        return None
    cur.pos += 1
    return ch


def at_line_end(cur: Cursor) -> bool:
    """True at end of input or when the next character is a separator."""
    return cur.at_end or cur.peek() in LINE_SEPARATORS


# ── Numbers ──────────────────────────────────────────────────────────────────


def fixed_digits(cur: Cursor, width: int) -> int | None:
    """Exactly *width* ASCII digits."""
    chunk = cur.peek(width)
    if len(chunk) != width or any(ch not in _DIGITS for ch in chunk):
        return None
    cur.pos += width
    return int(chunk)


def two_digits(cur: Cursor) -> int | None:
    return fixed_digits(cur, 2)


def four_digits(cur: Cursor) -> int | None:
    return fixed_digits(cur, 4)


def digits(cur: Cursor) -> int | None:
    """One or more ASCII digits of any width."""
    end = cur.pos
    while end < len(cur.text) and cur.text[end] in _DIGITS:
        end += 1
    if end == cur.pos:
        return None
    try:
        value = int(cur.text[cur.pos : end])
    except ValueError:
        # Beyond the interpreter's integer string conversion limit.
        return None
    cur.pos = end
    return value


def one_digit(cur: Cursor) -> int | None:
    return fixed_digits(cur, 1)


# ── Board tokens ─────────────────────────────────────────────────────────────


def color(cur: Cursor) -> Color | None:
    ch = one_of(cur, "+-")
    if ch is None:
        return None
    return Color.BLACK if ch == "+" else Color.WHITE


def piece_type(cur: Cursor) -> PieceType | None:
    found = piece_type_from_csa(cur.peek(2))
    if found is not None:
        cur.pos += 2
    return found


def square(cur: Cursor) -> Square | None:
    start = cur.pos
    file = one_digit(cur)
    rank = one_digit(cur) if file is not None else None
    if file is None or rank is None:
        cur.pos = start
        return None
    return Square(file, rank)


def square_pieces(cur: Cursor) -> list[tuple[Square, PieceType]]:
    """Zero or more (square, piece type) pairs, e.g. ``82HI22KA``."""
    pairs: list[tuple[Square, PieceType]] = []
    while True:
        start = cur.pos
        sq = square(cur)
        pt = piece_type(cur) if sq is not None else None
        if sq is None or pt is None:
            cur.pos = start
            return pairs
        pairs.append((sq, pt))


# ── Text and separators ──────────────────────────────────────────────────────


def not_line_sep(cur: Cursor) -> str:
    """Free text up to the next separator; may be empty, never fails."""
    end = cur.pos
    while end < len(cur.text) and cur.text[end] not in LINE_SEPARATORS:
        end += 1
    text = cur.text[cur.pos : end]
    cur.pos = end
    return text


def line_sep(cur: Cursor) -> bool:
    """One or more consecutive separators, consumed as a single unit."""
    start = cur.pos
    while not cur.at_end and cur.peek() in LINE_SEPARATORS:
        cur.pos += 1
    return cur.pos > start


def line_end(cur: Cursor) -> bool:
    """A line separator, or end of input for an unterminated last line."""
    return line_sep(cur) or cur.at_end


def comment_line(cur: Cursor) -> str | None:
    """A ``'`` comment running to end of line, with its terminator."""
    if not cur.startswith(COMMENT_MARKER):
        return None
    end = cur.pos + 1
    while end < len(cur.text) and cur.text[end] not in NEWLINES:
        end += 1
    body = cur.text[cur.pos + 1 : end]
    cur.pos = end
    line_end(cur)
    return body


def skip_comments(cur: Cursor) -> int:
    """Consume any number of comment lines; return how many."""
    count = 0
    while comment_line(cur) is not None:
        count += 1
    return count


def terminated(cur: Cursor, recognize: Callable[[Cursor], T | None]) -> T | None:
    """Run *recognize* and require a line end right after it."""
    start = cur.pos
    value = recognize(cur)
    if value is None or not line_end(cur):
        cur.pos = start
        return None
    return value
