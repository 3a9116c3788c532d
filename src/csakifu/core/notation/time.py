"""Calendar, clock and time-limit fields: ``YYYY/MM/DD HH:MM:SS`` and ``H:MM+S``."""

from __future__ import annotations

from collections.abc import Callable
from datetime import time, timedelta

from csakifu.core.notation.scanner import (
    Cursor,
    digits,
    four_digits,
    literal,
    two_digits,
)
from csakifu.core.record import Time, TimeLimit


def _ranged(low: int, high: int) -> Callable[[Cursor], int | None]:
    def recognize(cur: Cursor) -> int | None:
        start = cur.pos
        value = two_digits(cur)
        if value is None or not (low <= value <= high):
            cur.pos = start
            return None
        return value

    return recognize


year = four_digits
month = _ranged(1, 12)
day = _ranged(1, 31)
hour = _ranged(0, 23)
minute = _ranged(0, 59)
second = _ranged(0, 59)


def date(cur: Cursor) -> tuple[int, int, int] | None:
    """``YYYY/MM/DD``; month and day are range-checked independently."""
    start = cur.pos
    y = year(cur)
    m = month(cur) if y is not None and literal(cur, "/") else None
    d = day(cur) if m is not None and literal(cur, "/") else None
    if y is None or m is None or d is None:
        cur.pos = start
        return None
    return y, m, d


def clock(cur: Cursor) -> time | None:
    """``HH:MM:SS``."""
    start = cur.pos
    h = hour(cur)
    m = minute(cur) if h is not None and literal(cur, ":") else None
    s = second(cur) if m is not None and literal(cur, ":") else None
    if h is None or m is None or s is None:
        cur.pos = start
        return None
    return time(h, m, s)


def timestamp(cur: Cursor) -> Time | None:
    """A date optionally followed by a space and a clock time."""
    ymd = date(cur)
    if ymd is None:
        return None
    start = cur.pos
    hms = clock(cur) if literal(cur, " ") else None
    if hms is None:
        cur.pos = start
    return Time(*ymd, clock=hms)


def time_limit(cur: Cursor) -> TimeLimit | None:
    """``<hours>:<MM>+<byoyomi seconds>``; hours and byoyomi are any width."""
    start = cur.pos
    hours = digits(cur)
    minutes = minute(cur) if hours is not None and literal(cur, ":") else None
    byoyomi = digits(cur) if minutes is not None and literal(cur, "+") else None
    if hours is None or minutes is None or byoyomi is None:
        cur.pos = start
        return None
    try:
        return TimeLimit(
            main_time=timedelta(hours=hours, minutes=minutes),
            byoyomi=timedelta(seconds=byoyomi),
        )
    except OverflowError:
        # Wider than timedelta can hold.
        cur.pos = start
        return None


# ── Formatting ───────────────────────────────────────────────────────────────


def format_time(value: Time) -> str:
    """Render a :class:`Time`, e.g. ``2003/05/03 10:30:00``.

    Years past 9999 come out wider than four digits and will not parse back.
    """
    text = f"{value.year:04d}/{value.month:02d}/{value.day:02d}"
    if value.clock is not None:
        text += f" {value.clock.hour:02d}:{value.clock.minute:02d}:{value.clock.second:02d}"
    return text


def format_time_limit(value: TimeLimit) -> str:
    """Render a :class:`TimeLimit`, e.g. ``00:25+00``.

    Main time is written in whole minutes; leftover seconds are dropped.
    """
    total_minutes = int(value.main_time.total_seconds()) // 60
    hours, minutes = divmod(total_minutes, 60)
    byoyomi = int(value.byoyomi.total_seconds())
    return f"{hours:02d}:{minutes:02d}+{byoyomi:02d}"
