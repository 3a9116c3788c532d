"""CSA game-record parsing and serialization.

The parser is a single forward pass over the input in the fixed order
version → players → ``$`` attributes → ``PI`` → grid → placements →
side to move → moves.  Comment lines may precede any of these and are
dropped.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from csakifu.config import CsaOptions
from csakifu.core.notation.errors import CsaParseError
from csakifu.core.notation.moves import format_move_record, move_record
from csakifu.core.notation.position import (
    format_position,
    grid,
    handicap,
    piece_placement,
    side_to_move,
)
from csakifu.core.notation.scanner import (
    LINE_SEPARATORS,
    Cursor,
    at_line_end,
    line_sep,
    literal,
    not_line_sep,
    skip_comments,
    terminated,
)
from csakifu.core.notation.time import (
    format_time,
    format_time_limit,
    time_limit,
    timestamp,
)
from csakifu.core.record import (
    GameAttribute,
    GameRecord,
    HeaderAttribute,
    MoveRecord,
    Position,
    Time,
    TimeLimit,
)

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

# Longest first so "2.2" is not read as "2" followed by junk.
_VERSIONS = ("2.2", "2.1", "2")

_TEXT_KEYS = ("EVENT", "SITE", "OPENING")
_TIME_KEYS = ("START_TIME", "END_TIME")
_TIME_LIMIT_KEY = "TIME_LIMIT"
_KNOWN_KEYS = frozenset((*_TEXT_KEYS, *_TIME_KEYS, _TIME_LIMIT_KEY))


# ── Header lines ─────────────────────────────────────────────────────────────


def version(cur: Cursor) -> str | None:
    """``V2``, ``V2.1`` or ``V2.2``; any other version is a mismatch."""
    start = cur.pos
    if not literal(cur, "V"):
        return None
    after_marker = cur.pos
    for candidate in _VERSIONS:
        if literal(cur, candidate) and at_line_end(cur):
            return candidate
        cur.pos = after_marker
    cur.pos = start
    return None


def _player(marker: str) -> Callable[[Cursor], str | None]:
    def recognize(cur: Cursor) -> str | None:
        if not literal(cur, marker):
            return None
        return not_line_sep(cur)

    return recognize


black_player = _player("N+")
white_player = _player("N-")


def attribute_value(raw: str) -> GameAttribute:
    """Decode an attribute value by shape: timestamp, time limit, else text."""
    for recognize in (timestamp, time_limit):
        sub = Cursor(raw)
        value = recognize(sub)
        if value is not None and sub.at_end:
            return value
    return raw


def game_attribute(cur: Cursor) -> HeaderAttribute | None:
    """``$KEY:value``."""
    start = cur.pos
    if not literal(cur, "$"):
        return None
    key_end = cur.pos
    while key_end < len(cur.text) and cur.text[key_end] not in LINE_SEPARATORS + ":":
        key_end += 1
    key = cur.text[cur.pos : key_end]
    cur.pos = key_end
    if not key or not literal(cur, ":"):
        cur.pos = start
        return None
    raw = not_line_sep(cur)
    return HeaderAttribute(key=key, value=attribute_value(raw), raw=raw)


def _repeated(cur: Cursor, recognize: Callable[[Cursor], T | None]) -> list[T]:
    """Zero or more terminated lines, each optionally preceded by comments."""
    found: list[T] = []
    while True:
        start = cur.pos
        skip_comments(cur)
        value = terminated(cur, recognize)
        if value is None:
            cur.pos = start
            return found
        found.append(value)


def _fold_attributes(record: GameRecord, attrs: list[HeaderAttribute]) -> None:
    # Later duplicates replace earlier ones.
    by_key = {attr.key: attr for attr in attrs}

    for key in by_key.keys() - _KNOWN_KEYS:
        _LOGGER.debug("Ignoring unrecognized header attribute %r", key)

    text_values = {key: by_key[key].raw for key in _TEXT_KEYS if key in by_key}
    record.event = text_values.get("EVENT")
    record.site = text_values.get("SITE")
    record.opening = text_values.get("OPENING")

    times: dict[str, Time | None] = {}
    for key in _TIME_KEYS:
        attr = by_key.get(key)
        if attr is not None and isinstance(attr.value, Time):
            times[key] = attr.value
        else:
            times[key] = None
    record.start_time = times["START_TIME"]
    record.end_time = times["END_TIME"]

    limit = by_key.get(_TIME_LIMIT_KEY)
    if limit is not None and isinstance(limit.value, TimeLimit):
        record.time_limit = limit.value


def _failure(cur: Cursor, expected: str) -> CsaParseError:
    line, column = cur.location()
    return CsaParseError(
        f"Invalid CSA record: expected {expected}",
        line=line,
        column=column,
        expected=expected,
    )


# ── Public API ───────────────────────────────────────────────────────────────


def parse_csa(text: str, options: CsaOptions | None = None) -> GameRecord:
    """Parse a CSA document into a :class:`GameRecord`.

    Raises :class:`CsaParseError` when the text is not a valid record; no
    partial record is returned.  Parsing stops at the first line that is
    neither a ply nor a comment; the rest is discarded unless
    ``options.strict`` is set.
    """
    options = options or CsaOptions()
    cur = Cursor(text)
    line_sep(cur)

    skip_comments(cur)
    terminated(cur, version)
    skip_comments(cur)
    black = terminated(cur, black_player)
    skip_comments(cur)
    white = terminated(cur, white_player)

    attrs: list[HeaderAttribute] = _repeated(cur, game_attribute)

    skip_comments(cur)
    drop_pieces = terminated(cur, handicap)
    skip_comments(cur)
    bulk = terminated(cur, grid)
    placements = _repeated(cur, piece_placement)

    skip_comments(cur)
    side = terminated(cur, side_to_move)
    if side is None:
        raise _failure(cur, "side-to-move line ('+' or '-')")

    moves: list[MoveRecord] = _repeated(cur, move_record)
    skip_comments(cur)

    if not cur.at_end:
        if options.strict:
            raise _failure(cur, "a move, a comment or end of input")
        _LOGGER.debug("Discarding %d trailing characters", len(text) - cur.pos)

    record = GameRecord(
        black_player=black,
        white_player=white,
        start_pos=Position(
            drop_pieces=drop_pieces if drop_pieces is not None else [],
            bulk=bulk,
            add_pieces=[entry for line in placements for entry in line],
            side_to_move=side,
        ),
        moves=moves,
    )
    _fold_attributes(record, attrs)
    _LOGGER.debug("Parsed CSA record with %d moves", len(moves))
    return record


def _sanitize(text: str) -> str:
    """Replace separator characters, which free text cannot contain."""
    clean = text
    for sep in LINE_SEPARATORS:
        clean = clean.replace(sep, " ")
    if clean != text:
        _LOGGER.debug("Replaced separators in free text %r", text)
    return clean


def build_csa(record: GameRecord, options: CsaOptions | None = None) -> str:
    """Serialize *record* to canonical CSA text. Never fails."""
    options = options or CsaOptions()
    lines: list[str] = [f"V{options.version}"]

    if record.black_player is not None:
        lines.append(f"N+{_sanitize(record.black_player)}")
    if record.white_player is not None:
        lines.append(f"N-{_sanitize(record.white_player)}")

    start_time = record.start_time
    end_time = record.end_time
    limit = record.time_limit
    headers: list[tuple[str, str | None]] = [
        ("EVENT", record.event),
        ("SITE", record.site),
        ("START_TIME", format_time(start_time) if start_time is not None else None),
        ("END_TIME", format_time(end_time) if end_time is not None else None),
        (
            "TIME_LIMIT",
            format_time_limit(limit) if limit is not None else None,
        ),
        ("OPENING", record.opening),
    ]
    for key, value in headers:
        if value is not None:
            lines.append(f"${key}:{_sanitize(value)}")

    lines.extend(format_position(record.start_pos))
    for move in record.moves:
        lines.extend(format_move_record(move))

    return options.newline.join(lines) + options.newline
