"""Parse failure raised at the notation boundary."""

from __future__ import annotations


class CsaParseError(ValueError):
    """The input could not be parsed as a CSA game record.

    ``line`` and ``column`` are 1-based and point at where parsing stopped;
    ``expected`` names the construct that was required there.
    """

    def __init__(
        self,
        message: str,
        *,
        line: int | None = None,
        column: int | None = None,
        expected: str | None = None,
    ) -> None:
        self.line = line
        self.column = column
        self.expected = expected
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)
