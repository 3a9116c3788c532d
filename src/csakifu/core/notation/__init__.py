"""Notation package: CSA record parsing and serialization."""

from csakifu.core.notation.csa import build_csa, parse_csa
from csakifu.core.notation.errors import CsaParseError
from csakifu.core.notation.moves import format_action
from csakifu.core.notation.time import format_time, format_time_limit

__all__ = [
    "CsaParseError",
    "build_csa",
    "format_action",
    "format_time",
    "format_time_limit",
    "parse_csa",
]
