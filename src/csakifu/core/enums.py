"""Core enumerations for the shogi notation domain."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Color(IntEnum):
    """Side color. BLACK (sente) moves first."""

    BLACK = 0
    WHITE = 1

    @property
    def symbol(self) -> str:
        """CSA side marker: ``+`` for black, ``-`` for white."""
        return "+" if self == Color.BLACK else "-"

    def __str__(self) -> str:
        return self.symbol


class PieceType(IntEnum):
    """Shogi piece kinds, promoted forms, and the ``AL`` wildcard."""

    PAWN = 1
    LANCE = 2
    KNIGHT = 3
    SILVER = 4
    GOLD = 5
    BISHOP = 6
    ROOK = 7
    KING = 8
    PRO_PAWN = 9
    PRO_LANCE = 10
    PRO_KNIGHT = 11
    PRO_SILVER = 12
    HORSE = 13
    DRAGON = 14
    # Only meaningful in handicap / placement lines ("all remaining pieces").
    ALL = 15


class SpecialMove(StrEnum):
    """Non-coordinate plies; each value is the keyword following ``%``."""

    TORYO = "TORYO"
    CHUDAN = "CHUDAN"
    SENNICHITE = "SENNICHITE"
    TIME_UP = "TIME_UP"
    ILLEGAL_MOVE = "ILLEGAL_MOVE"
    BLACK_ILLEGAL_ACTION = "+ILLEGAL_ACTION"
    WHITE_ILLEGAL_ACTION = "-ILLEGAL_ACTION"
    JISHOGI = "JISHOGI"
    KACHI = "KACHI"
    HIKIWAKE = "HIKIWAKE"
    MATTA = "MATTA"
    TSUMI = "TSUMI"
    FUZUMI = "FUZUMI"
    ERROR = "ERROR"

    @property
    def token(self) -> str:
        """Full CSA line, e.g. ``%TORYO``."""
        return f"%{self.value}"
