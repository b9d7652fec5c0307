"""Abstract Display class that the host renders onto."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..messages.localization import Localization


@dataclass
class MenuItem:
    """A menu item (a button) with text and optional ID."""

    text: str
    id: str | None = None


class Display(ABC):
    """
    Abstract base class for the shared screen.

    The host interacts with this interface, never with a terminal or a
    browser directly. Implementations include ConsoleDisplay (a terminal)
    and MockDisplay (for testing).
    """

    @property
    @abstractmethod
    def locale(self) -> str:
        """The locale for localization (e.g., 'en', 'es')."""
        ...

    @abstractmethod
    def show_text(self, text: str) -> None:
        """
        Put a line of text on the screen.

        Args:
            text: The message text.
        """
        ...

    def show_text_l(self, message_id: str, **kwargs) -> None:
        """
        Put a localized line of text on the screen.

        Args:
            message_id: The message ID from the .ftl file.
            **kwargs: Variables to substitute into the message.
        """
        self.show_text(Localization.get(self.locale, message_id, **kwargs))

    @abstractmethod
    def show_menu(self, menu_id: str, items: list[MenuItem]) -> None:
        """
        Show the buttons that are currently available.

        Args:
            menu_id: Identifier for the menu.
            items: The buttons, in display order.
        """
        ...

    @abstractmethod
    def clear_ui(self) -> None:
        """Wipe the screen so nothing from the previous player stays visible."""
        ...
