"""Piece value object and CSA piece codes."""

from __future__ import annotations

from dataclasses import dataclass

from csakifu.core.enums import Color, PieceType

# CSA two-letter code ↔ PieceType
_CSA_CODES: dict[str, PieceType] = {
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

_CSA_NAMES: dict[PieceType, str] = {v: k for k, v in _CSA_CODES.items()}


def piece_type_from_csa(code: str) -> PieceType | None:
    """Look up a two-letter code; ``None`` when it is not a piece code."""
    return _CSA_CODES.get(code)


def piece_type_to_csa(piece_type: PieceType) -> str:
    return _CSA_NAMES[piece_type]


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object: a piece kind owned by one side."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """CSA cell text, e.g. ``+FU``."""
        return f"{self.color.symbol}{_CSA_NAMES[self.piece_type]}"

    @classmethod
    def from_csa(cls, text: str) -> Piece:
        """Create piece from a three-character cell, e.g. '-KY' → white lance."""
        if len(text) != 3 or text[0] not in "+-":
            raise ValueError(f"Invalid piece text: {text!r}")
        piece_type = _CSA_CODES.get(text[1:])
        if piece_type is None:
            raise ValueError(f"Invalid piece text: {text!r}")
        color = Color.BLACK if text[0] == "+" else Color.WHITE
        return cls(color, piece_type)
