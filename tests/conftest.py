"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"

STANDARD_GRID_LINES = [
    "P1-KY-KE-GI-KI-OU-KI-GI-KE-KY",
    "P2 * -HI *  *  *  *  * -KA * ",
    "P3-FU-FU-FU-FU-FU-FU-FU-FU-FU",
    "P4 *  *  *  *  *  *  *  *  * ",
    "P5 *  *  *  *  *  *  *  *  * ",
    "P6 *  *  *  *  *  *  *  *  * ",
    "P7+FU+FU+FU+FU+FU+FU+FU+FU+FU",
    "P8 * +KA *  *  *  *  * +HI * ",
    "P9+KY+KE+GI+KI+OU+KI+GI+KE+KY",
]

EXAMPLE_CSA = "\n".join(
    [
        "'----------棋譜ファイルの例\"example.csa\"-----------------",
        "'バージョン",
        "V2.2",
        "'対局者名",
        "N+NAKAHARA",
        "N-YONENAGA",
        "'棋譜情報",
        "'棋戦名",
        "$EVENT:13th World Computer Shogi Championship",
        "'対局場所",
        "$SITE:KAZUSA ARC",
        "'開始日時",
        "$START_TIME:2003/05/03 10:30:00",
        "'終了日時",
        "$END_TIME:2003/05/03 11:11:05",
        "'持ち時間:25分、切れ負け",
        "$TIME_LIMIT:00:25+00",
        "'戦型:矢倉",
        "$OPENING:YAGURA",
        "'平手の局面",
        *STANDARD_GRID_LINES,
        "'先手番",
        "+",
        "'指し手と消費時間",
        "+2726FU",
        "T12",
        "-3334FU",
        "T6",
        "%CHUDAN",
        "'---------------------------------------------------------",
        "",
    ]
)


@pytest.fixture
def standard_grid_text() -> str:
    """The hirate layout as nine unterminated-last ``P1``..``P9`` rows."""
    return "\n".join(STANDARD_GRID_LINES)


@pytest.fixture
def example_csa() -> str:
    """A fully annotated record exercising every header field."""
    return EXAMPLE_CSA


@pytest.fixture
def fixture_paths() -> list[Path]:
    return sorted(FIXTURES_DIR.glob("*.csa"))
