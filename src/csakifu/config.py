"""Options shared by the CSA composer and the file helpers."""

from __future__ import annotations

import codecs
from dataclasses import dataclass

SUPPORTED_VERSIONS = ("2", "2.1", "2.2")
_NEWLINES = ("\n", "\r\n")


@dataclass(frozen=True, slots=True)
class CsaOptions:
    """Immutable formatting and I/O settings.

    Args:
        version: Version marker written by the composer (``V<version>``).
        newline: Line separator written by the composer.
        encoding: Text encoding used by the file helpers.
        strict: Fail on input left over after the move list instead of
            discarding it.
    """

    version: str = "2.2"
    newline: str = "\n"
    encoding: str = "utf-8"
    strict: bool = False

    def __post_init__(self) -> None:
        if self.version not in SUPPORTED_VERSIONS:
            raise ValueError(f"Unsupported CSA version: {self.version!r}")
        if self.newline not in _NEWLINES:
            raise ValueError(f"Invalid newline: {self.newline!r}")
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ValueError(f"Unknown encoding: {self.encoding!r}") from None

    # Common presets
    @classmethod
    def default(cls) -> CsaOptions:
        return cls()

    @classmethod
    def shift_jis(cls) -> CsaOptions:
        """Legacy records saved by Japanese shogi software."""
        return cls(encoding="shift_jis", newline="\r\n")

    @classmethod
    def strict_parsing(cls) -> CsaOptions:
        return cls(strict=True)
