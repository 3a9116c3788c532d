"""csakifu: read and write shogi game records in CSA notation."""

from csakifu.config import CsaOptions
from csakifu.core import (
    STANDARD_GRID,
    Action,
    Color,
    CsaParseError,
    GameAttribute,
    GameRecord,
    Grid,
    Move,
    MoveRecord,
    Piece,
    PieceType,
    Position,
    SpecialMove,
    Square,
    Time,
    TimeLimit,
    build_csa,
    grid_piece_at,
    parse_csa,
)
from csakifu.csa_io import load_csa_file, save_csa_file

__all__ = [
    "CsaOptions",
    "Color",
    "PieceType",
    "SpecialMove",
    "Square",
    "grid_piece_at",
    "STANDARD_GRID",
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
    "CsaParseError",
    "build_csa",
    "parse_csa",
    "load_csa_file",
    "save_csa_file",
]
