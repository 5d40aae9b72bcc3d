import pytest

from labkit.sqlescape import escape_like, escape_like_with_char


@pytest.mark.parametrize(
    "s, want",
    [
        ("%_\\t", "\\%\\_\\\\t"),
        ("%", "\\%"),
        ("t", "t"),
        ("", ""),
    ],
)
def test_escape_like(s, want):
    assert escape_like(s) == want


@pytest.mark.parametrize(
    "s, want",
    [
        ("%_!\\t", "!%!_!!\\t"),
        ("%", "!%"),
        ("t", "t"),
        ("", ""),
    ],
)
def test_escape_like_with_char(s, want):
    assert escape_like_with_char(s, "!") == want


def test_escape_like_keeps_multibyte_text():
    assert escape_like("日本_語%") == "日本\\_語\\%"


@pytest.mark.parametrize("bad", ["", "ab", "あ"])
def test_escape_like_with_char_rejects_bad_escape(bad):
    with pytest.raises(ValueError):
        escape_like_with_char("x", bad)