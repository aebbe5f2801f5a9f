"""The vertical '#', A–Z index strip beside the contact list."""

from __future__ import annotations

import string
from typing import Callable, Optional

INDEX_LETTERS: tuple[str, ...] = ("#", *string.ascii_uppercase)

HIGHLIGHT_MS = 1000
BAR_WIDTH = 36
BUTTON_SIZE = 36

NORMAL_STYLE = """
QPushButton {
    background-color: transparent;
    border: none;
    font-size: 18px;
    font-weight: bold;
    color: black;
}
QPushButton:hover {
    background-color: rgba(0,0,0,0.1);
    border-radius: 18px;
}
QPushButton:pressed {
    background-color: rgba(0,0,0,0.3);
    border-radius: 18px;
}
"""

HIGHLIGHT_STYLE = """
QPushButton {
    background-color: rgba(0,0,0,0.3);
    border: none;
    font-size: 18px;
    font-weight: bold;
    color: black;
    border-radius: 18px;
}
"""


class AlphabetIndexBar:
    """One button per index letter; a clicked letter is reported and can be highlighted.

    The highlight is meant to fade after HIGHLIGHT_MS; the host calls
    expire_highlight(letter) when that time is up.
    """

    def __init__(
        self, on_letter_clicked: Optional[Callable[[str], None]] = None
    ) -> None:
        self.on_letter_clicked = on_letter_clicked
        self.button_styles: dict[str, str] = dict.fromkeys(INDEX_LETTERS, NORMAL_STYLE)
        self.highlighted: Optional[str] = None

    def letters(self) -> list[str]:
        """The index letters in display order."""
        return list(INDEX_LETTERS)

    def click(self, letter: str) -> str:
        """Press the button for letter and report it to the listener."""
        if letter not in self.button_styles:
            raise ValueError(f"no index button for {letter!r}")
        if self.on_letter_clicked is not None:
            self.on_letter_clicked(letter)
        return letter

    def highlight_letter(self, letter: str) -> None:
        """Highlight letter's button, clearing any earlier highlight."""
        if self.highlighted is not None and self.highlighted in self.button_styles:
            self.button_styles[self.highlighted] = NORMAL_STYLE
        if letter in self.button_styles:
            self.highlighted = letter
            self.button_styles[letter] = HIGHLIGHT_STYLE

    def expire_highlight(self, letter: str) -> None:
        """End the highlight started for letter, if it is still the current one."""
        if self.highlighted == letter:
            self.button_styles[letter] = NORMAL_STYLE
            self.highlighted = None