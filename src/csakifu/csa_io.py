"""CSA import/export helpers for files on disk."""

from __future__ import annotations

import logging
from pathlib import Path

from csakifu.config import CsaOptions
from csakifu.core.notation import build_csa, parse_csa
from csakifu.core.record import GameRecord

_LOGGER = logging.getLogger(__name__)
_BOM = "\ufeff"


def load_csa_file(file_path: Path | str, options: CsaOptions | None = None) -> GameRecord:
    """Read and parse a CSA record from disk."""
    options = options or CsaOptions()
    path = Path(file_path)
    text = path.read_text(encoding=options.encoding)
    if text.startswith(_BOM):
        text = text[len(_BOM) :]
    record = parse_csa(text, options)
    _LOGGER.info("Loaded %s (%d moves)", path, len(record.moves))
    return record


def save_csa_file(
    record: GameRecord, file_path: Path | str, options: CsaOptions | None = None
) -> Path:
    """Write *record* as CSA text, adding a ``.csa`` suffix when missing."""
    options = options or CsaOptions()
    save_path = Path(file_path)
    if save_path.suffix.lower() != ".csa":
        save_path = save_path.with_suffix(".csa")

    # newline="" keeps the configured separator as-is on every platform.
    with save_path.open("w", encoding=options.encoding, newline="") as handle:
        handle.write(build_csa(record, options))
    _LOGGER.info("Saved %s (%d moves)", save_path, len(record.moves))
    return save_path
