"""Move lines: coordinate moves, ``%`` declarations and ``T`` elapsed times."""

from __future__ import annotations

from datetime import timedelta

from csakifu.core.enums import SpecialMove
from csakifu.core.notation.scanner import (
    Cursor,
    color,
    digits,
    line_sep,
    literal,
    not_line_sep,
    piece_type,
    square,
)
from csakifu.core.piece import piece_type_to_csa
from csakifu.core.record import Action, Move, MoveRecord

SPECIAL_MARKER = "%"
TIME_MARKER = "T"

_SPECIAL_KEYWORDS: dict[str, SpecialMove] = {sm.value: sm for sm in SpecialMove}


def normal_move(cur: Cursor) -> Move | None:
    """``+2726FU``: side, origin, destination, piece type. No legality checks."""
    start = cur.pos
    side = color(cur)
    from_sq = square(cur) if side is not None else None
    to_sq = square(cur) if from_sq is not None else None
    pt = piece_type(cur) if to_sq is not None else None
    if side is None or from_sq is None or to_sq is None or pt is None:
        cur.pos = start
        return None
    return Move(side, from_sq, to_sq, pt)


def special_move(cur: Cursor) -> SpecialMove | None:
    """``%`` plus a whole keyword; partial keywords do not match."""
    start = cur.pos
    if not literal(cur, SPECIAL_MARKER):
        return None
    found = _SPECIAL_KEYWORDS.get(not_line_sep(cur))
    if found is None:
        cur.pos = start
    return found


def action(cur: Cursor) -> Action | None:
    found = normal_move(cur)
    if found is not None:
        return found
    return special_move(cur)


def elapsed_time(cur: Cursor) -> timedelta | None:
    """``T<seconds>``."""
    start = cur.pos
    seconds = digits(cur) if literal(cur, TIME_MARKER) else None
    if seconds is None:
        cur.pos = start
        return None
    try:
        return timedelta(seconds=seconds)
    except OverflowError:
        cur.pos = start
        return None


def move_record(cur: Cursor) -> MoveRecord | None:
    """An action, optionally followed by an elapsed-time line."""
    found = action(cur)
    if found is None:
        return None
    start = cur.pos
    spent = elapsed_time(cur) if line_sep(cur) else None
    if spent is None:
        cur.pos = start
    return MoveRecord(action=found, time=spent)


# ── Formatting ───────────────────────────────────────────────────────────────


def format_action(value: Action) -> str:
    if isinstance(value, SpecialMove):
        return value.token
    return (
        f"{value.color.symbol}{value.from_sq}{value.to_sq}"
        f"{piece_type_to_csa(value.piece_type)}"
    )


def format_elapsed(spent: timedelta) -> str:
    return f"{TIME_MARKER}{int(spent.total_seconds())}"


def format_move_record(record: MoveRecord) -> list[str]:
    lines = [format_action(record.action)]
    if record.time is not None:
        lines.append(format_elapsed(record.time))
    return lines
