"""Core domain layer: shogi record values and CSA notation, zero external dependencies.

Quick start::

    from csakifu.core import parse_csa, build_csa

    record = parse_csa(text)
    for ply in record.moves:
        print(ply.action, ply.time)
    assert parse_csa(build_csa(record)) == record
"""

from csakifu.core.enums import Color, PieceType, SpecialMove
from csakifu.core.notation import CsaParseError, build_csa, parse_csa
from csakifu.core.piece import Piece
from csakifu.core.record import (
    STANDARD_GRID,
    Action,
    GameAttribute,
    GameRecord,
    Grid,
    Move,
    MoveRecord,
    Position,
    Time,
    TimeLimit,
    grid_piece_at,
)
from csakifu.core.types import Square

__all__ = [
    # Enums
    "Color",
    "PieceType",
    "SpecialMove",
    # Types / helpers
    "Square",
    "grid_piece_at",
    "STANDARD_GRID",
    # Domain objects
    "Action",
    "GameAttribute",
    "GameRecord",
    "Grid",
    "Move",
    "MoveRecord",
    "Piece",
    "Position",
    "Time",
    "TimeLimit",
    # Notation
    "CsaParseError",
    "build_csa",
    "parse_csa",
]
