import pytest

from pinyinbook.index_bar import (
    HIGHLIGHT_STYLE,
    NORMAL_STYLE,
    AlphabetIndexBar,
)


def test_letters_order():
    letters = AlphabetIndexBar().letters()
    assert letters[0] == "#"
    assert letters[1:] == [chr(c) for c in range(ord("A"), ord("Z") + 1)]


def test_letters_returns_copy():
    bar = AlphabetIndexBar()
    bar.letters().append("?")
    assert "?" not in bar.letters()


def test_click_reports_letter():
    seen = []
    bar = AlphabetIndexBar(seen.append)
    assert bar.click("Q") == "Q"
    assert bar.click("#") == "#"
    assert seen == ["Q", "#"]


def test_click_unknown_letter_raises():
    seen = []
    bar = AlphabetIndexBar(seen.append)
    with pytest.raises(ValueError):
        bar.click("a")
    assert seen == []


def test_all_buttons_start_normal():
    bar = AlphabetIndexBar()
    assert bar.highlighted is None
    assert set(bar.button_styles.values()) == {NORMAL_STYLE}


def test_highlight_sets_style():
    bar = AlphabetIndexBar()
    bar.highlight_letter("M")
    assert bar.highlighted == "M"
    assert bar.button_styles["M"] == HIGHLIGHT_STYLE


def test_second_highlight_restores_first():
    bar = AlphabetIndexBar()
    bar.highlight_letter("M")
    bar.highlight_letter("N")
    assert bar.button_styles["M"] == NORMAL_STYLE
    assert bar.button_styles["N"] == HIGHLIGHT_STYLE
    assert bar.highlighted == "N"


def test_expire_matching_clears():
    bar = AlphabetIndexBar()
    bar.highlight_letter("B")
    bar.expire_highlight("B")
    assert bar.highlighted is None
    assert bar.button_styles["B"] == NORMAL_STYLE


def test_expire_stale_letter_keeps_current():
    bar = AlphabetIndexBar()
    bar.highlight_letter("B")
    bar.highlight_letter("C")
    bar.expire_highlight("B")
    assert bar.highlighted == "C"
    assert bar.button_styles["C"] == HIGHLIGHT_STYLE


def test_highlight_unknown_letter_only_clears_style():
    bar = AlphabetIndexBar()
    bar.highlight_letter("D")
    bar.highlight_letter("?")
    assert bar.button_styles["D"] == NORMAL_STYLE
    assert bar.highlighted == "D"
    assert "?" not in bar.button_styles