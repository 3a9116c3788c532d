"""Structured game-record value objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, time, timedelta
from typing import TypeAlias

from csakifu.core.enums import Color, PieceType, SpecialMove
from csakifu.core.piece import Piece
from csakifu.core.types import Square

GridRow: TypeAlias = tuple[Piece | None, ...]
Grid: TypeAlias = tuple[GridRow, ...]  # rows P1..P9, cells file 9 → file 1


@dataclass(frozen=True, slots=True)
class Move:
    """A coordinate move. Drops use ``Square.HAND`` as the origin."""

    color: Color
    from_sq: Square
    to_sq: Square
    piece_type: PieceType

    @property
    def is_drop(self) -> bool:
        return self.from_sq.is_hand


Action: TypeAlias = Move | SpecialMove


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """One ply plus the time spent on it, when recorded."""

    action: Action
    time: timedelta | None = None


@dataclass(frozen=True, slots=True)
class Time:
    """Calendar date with an optional clock time.

    The date is kept as plain numbers: month and day are range-checked
    when parsed, but no month-length check is made, so ``2024/02/30`` is
    a valid value.
    """

    year: int
    month: int
    day: int
    clock: time | None = None

    def to_datetime(self) -> datetime:
        """Convert to :class:`datetime`; raises ``ValueError`` for impossible dates."""
        clock = self.clock or time()
        return datetime(
            self.year, self.month, self.day, clock.hour, clock.minute, clock.second
        )

    @classmethod
    def from_datetime(cls, value: datetime, with_clock: bool = True) -> Time:
        clock = value.time().replace(microsecond=0) if with_clock else None
        return cls(value.year, value.month, value.day, clock)


@dataclass(frozen=True, slots=True)
class TimeLimit:
    """Main time allotment plus per-move byoyomi."""

    main_time: timedelta
    byoyomi: timedelta = timedelta()


GameAttribute: TypeAlias = str | Time | TimeLimit


@dataclass(frozen=True, slots=True)
class HeaderAttribute:
    """A ``$KEY:value`` line decoded while assembling a record."""

    key: str
    value: GameAttribute
    raw: str


@dataclass(slots=True)
class Position:
    """Starting position: handicap, optional full grid, placements, side to move."""

    drop_pieces: list[tuple[Square, PieceType]] = field(default_factory=list)
    bulk: Grid | None = None
    add_pieces: list[tuple[Color, Square, PieceType]] = field(default_factory=list)
    side_to_move: Color = Color.BLACK


@dataclass(slots=True)
class GameRecord:
    """A complete CSA game record."""

    black_player: str | None = None
    white_player: str | None = None
    event: str | None = None
    site: str | None = None
    start_time: Time | None = None
    end_time: Time | None = None
    time_limit: TimeLimit | None = None
    opening: str | None = None
    start_pos: Position = field(default_factory=Position)
    moves: list[MoveRecord] = field(default_factory=list)


# ── Grid helpers ────────────────────────────────────────────────────────────


def grid_piece_at(grid: Grid, sq: Square) -> Piece | None:
    """Return the cell of *grid* holding board square *sq*."""
    if not sq.on_board:
        raise ValueError(f"Square is not on the board: {sq}")
    return grid[sq.rank - 1][9 - sq.file]


def _row(*codes: str) -> GridRow:
    return tuple(Piece.from_csa(code) if code else None for code in codes)


_BACK_RANK = ("KY", "KE", "GI", "KI", "OU", "KI", "GI", "KE", "KY")

STANDARD_GRID: Grid = (
    _row(*(f"-{code}" for code in _BACK_RANK)),
    _row("", "-HI", "", "", "", "", "", "-KA", ""),
    _row(*(["-FU"] * 9)),
    _row(*([""] * 9)),
    _row(*([""] * 9)),
    _row(*([""] * 9)),
    _row(*(["+FU"] * 9)),
    _row("", "+KA", "", "", "", "", "", "+HI", ""),
    _row(*(f"+{code}" for code in _BACK_RANK)),
)
