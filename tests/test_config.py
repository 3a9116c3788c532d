"""Tests for CsaOptions."""

import pytest

from csakifu.config import CsaOptions


class TestCsaOptions:
    def test_defaults(self) -> None:
        options = CsaOptions.default()
        assert options.version == "2.2"
        assert options.newline == "\n"
        assert options.encoding == "utf-8"
        assert not options.strict

    def test_presets(self) -> None:
        assert CsaOptions.shift_jis().encoding == "shift_jis"
        assert CsaOptions.shift_jis().newline == "\r\n"
        assert CsaOptions.strict_parsing().strict

    @pytest.mark.parametrize(
        ("kwargs", "message"),
        [
            ({"version": "3.0"}, "version"),
            ({"newline": "\r"}, "newline"),
            ({"encoding": "no-such-codec"}, "encoding"),
        ],
    )
    def test_invalid_values(self, kwargs: dict[str, str], message: str) -> None:
        with pytest.raises(ValueError, match=message):
            CsaOptions(**kwargs)
