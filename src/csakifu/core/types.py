"""Square value object and coordinate helpers.

Squares are written as two digits, file then rank, both 1-9 on the
board.  ``00`` stands for "in hand" and only appears as the origin of a
drop or inside handicap / placement lines.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, slots=True)
class Square:
    """Immutable (file, rank) pair, each a single digit 0-9."""

    file: int
    rank: int

    HAND: ClassVar[Square]

    def __post_init__(self) -> None:
        if not (0 <= self.file <= 9 and 0 <= self.rank <= 9):
            raise ValueError(f"Square digits must be 0-9: {self.file}, {self.rank}")

    @property
    def is_hand(self) -> bool:
        return self.file == 0 and self.rank == 0

    @property
    def on_board(self) -> bool:
        return 1 <= self.file <= 9 and 1 <= self.rank <= 9

    def __str__(self) -> str:
        return f"{self.file}{self.rank}"


Square.HAND = Square(0, 0)
