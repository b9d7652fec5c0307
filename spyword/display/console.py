"""Terminal implementation of Display."""

from typing import Callable, TextIO
import sys

from .base import Display, MenuItem


class ConsoleDisplay(Display):
    """
    Renders onto a terminal and reads button presses from stdin.

    Buttons are listed with a number; the player types the number to press.
    """

    # Enough blank lines to push the previous player's content off screen
    CLEAR_LINES = 40

    def __init__(
        self,
        locale: str = "en",
        out: TextIO | None = None,
        read_line: Callable[[str], str] = input,
    ):
        self._locale = locale
        self._out = out if out is not None else sys.stdout
        self._read_line = read_line
        self._menu: list[MenuItem] = []

    @property
    def locale(self) -> str:
        return self._locale

    def show_text(self, text: str) -> None:
        print(text, file=self._out)

    def show_menu(self, menu_id: str, items: list[MenuItem]) -> None:
        self._menu = list(items)
        for i, item in enumerate(self._menu, 1):
            print(f"  [{i}] {item.text}", file=self._out)

    def clear_ui(self) -> None:
        self._menu = []
        print("\n" * self.CLEAR_LINES, file=self._out)

    def wait_for_choice(self) -> str | None:
        """Block until a valid button number is typed.

        Returns:
            The chosen button's id, or None on end of input.
        """
        while self._menu:
            try:
                raw = self._read_line("> ")
            except EOFError:
                return None
            raw = raw.strip()
            if raw.isdigit() and 1 <= int(raw) <= len(self._menu):
                return self._menu[int(raw) - 1].id
        return None
