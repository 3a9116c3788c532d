"""Starting-position lines: ``PI`` handicap, ``P1``-``P9`` grid, ``P+``/``P-`` placements."""

from __future__ import annotations

from csakifu.core.enums import Color, PieceType
from csakifu.core.notation.scanner import (
    Cursor,
    at_line_end,
    color,
    line_sep,
    literal,
    piece_type,
    square_pieces,
)
from csakifu.core.piece import Piece, piece_type_to_csa
from csakifu.core.record import Grid, GridRow, Position
from csakifu.core.types import Square

EMPTY_CELL = " * "
_GRID_SIZE = 9


def handicap(cur: Cursor) -> list[tuple[Square, PieceType]] | None:
    """``PI`` followed by zero or more pieces removed from the standard set."""
    if not literal(cur, "PI"):
        return None
    return square_pieces(cur)


def grid_cell(cur: Cursor, last: bool = False) -> Piece | None | bool:
    """One grid cell: a piece, ``None`` for an empty cell, ``False`` on mismatch.

    The last cell of a row may lose its trailing space (`` *`` at line end).
    """
    start = cur.pos
    side = color(cur)
    if side is not None:
        pt = piece_type(cur)
        if pt is None:
            cur.pos = start
            return False
        return Piece(side, pt)
    if literal(cur, EMPTY_CELL):
        return None
    if last and literal(cur, EMPTY_CELL.rstrip()):
        if at_line_end(cur):
            return None
        cur.pos = start
    return False


def grid_row(cur: Cursor, rank: int) -> GridRow | None:
    """``P<rank>`` and exactly nine cells, then the line must end."""
    start = cur.pos
    if not literal(cur, f"P{rank}"):
        return None
    cells: list[Piece | None] = []
    for idx in range(_GRID_SIZE):
        cell = grid_cell(cur, last=idx == _GRID_SIZE - 1)
        if cell is False:
            cur.pos = start
            return None
        cells.append(cell)
    if not at_line_end(cur):
        cur.pos = start
        return None
    return tuple(cells)


def grid(cur: Cursor) -> Grid | None:
    """Nine consecutive rows ``P1``..``P9``; the last row is left unterminated."""
    start = cur.pos
    rows: list[GridRow] = []
    for rank in range(1, _GRID_SIZE + 1):
        row = grid_row(cur, rank)
        if row is None or (rank < _GRID_SIZE and not line_sep(cur)):
            cur.pos = start
            return None
        rows.append(row)
    return tuple(rows)


def piece_placement(cur: Cursor) -> list[tuple[Color, Square, PieceType]] | None:
    """``P+`` or ``P-`` followed by zero or more (square, piece type) pairs."""
    start = cur.pos
    side = color(cur) if literal(cur, "P") else None
    if side is None:
        cur.pos = start
        return None
    return [(side, sq, pt) for sq, pt in square_pieces(cur)]


def side_to_move(cur: Cursor) -> Color | None:
    """A lone ``+`` or ``-``; anything else on the line is a mismatch."""
    start = cur.pos
    side = color(cur)
    if side is None or not at_line_end(cur):
        cur.pos = start
        return None
    return side


# ── Formatting ───────────────────────────────────────────────────────────────


def _format_pairs(pairs: list[tuple[Square, PieceType]]) -> str:
    return "".join(f"{sq}{piece_type_to_csa(pt)}" for sq, pt in pairs)


def format_handicap(pairs: list[tuple[Square, PieceType]]) -> str:
    return "PI" + _format_pairs(pairs)


def format_grid(bulk: Grid) -> list[str]:
    lines: list[str] = []
    for rank, row in enumerate(bulk, start=1):
        cells = "".join(EMPTY_CELL if cell is None else str(cell) for cell in row)
        lines.append(f"P{rank}{cells}")
    return lines


def format_placements(placements: list[tuple[Color, Square, PieceType]]) -> list[str]:
    """One ``P+``/``P-`` line per placement, in order."""
    return [
        f"P{side.symbol}{sq}{piece_type_to_csa(pt)}" for side, sq, pt in placements
    ]


def format_position(pos: Position) -> list[str]:
    """Lines for *pos*, echoing whichever layout it actually holds.

    ``PI`` is written when handicap pieces are present, or when there is
    no grid to describe the board.
    """
    lines: list[str] = []
    if pos.drop_pieces or pos.bulk is None:
        lines.append(format_handicap(pos.drop_pieces))
    if pos.bulk is not None:
        lines.extend(format_grid(pos.bulk))
    lines.extend(format_placements(pos.add_pieces))
    lines.append(pos.side_to_move.symbol)
    return lines
