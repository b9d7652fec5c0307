"""Pass-the-device host: turns button presses into controller calls."""

from .display.base import Display, MenuItem
from .game.controller import RoundController
from .errors import InvalidTransition
from .game.options import RoundOptions
from .game.round import RoundPhase
from .messages.localization import Localization

MENU_ID = "turn_menu"


class PassTheDeviceHost:
    """
    Renders the controller's state onto a display and handles its buttons.

    Each button press is one synchronous controller call. A press the
    controller rejects changes nothing; the screen is simply redrawn.
    """

    def __init__(
        self,
        controller: RoundController,
        display: Display,
        options: RoundOptions | None = None,
    ):
        self.controller = controller
        self.display = display
        self.options = options or RoundOptions()
        self._handlers = {
            "start_round": self._action_start_round,
            "new_round": self._action_start_round,
            "see_word": self._action_see_word,
            "got_it": self._action_got_it,
        }

    @property
    def locale(self) -> str:
        return self.display.locale

    def press(self, button_id: str) -> bool:
        """Handle a button press.

        Returns:
            True if the press changed the game state.
        """
        handler = self._handlers.get(button_id)
        if handler is None:
            self.render()
            return False
        try:
            handler()
        except InvalidTransition as e:
            self.render()
            self.display.show_text_l(e.reason)
            return False
        self.render()
        return True

    # ==========================================================================
    # Actions
    # ==========================================================================

    def _action_start_round(self) -> None:
        self.controller.start_round(self.options.player_count)

    def _action_see_word(self) -> None:
        index = self.controller.current_player_index()
        if index is None:
            raise InvalidTransition("spyword-no-round")
        self.controller.reveal(index)

    def _action_got_it(self) -> None:
        index = self.controller.current_player_index()
        if index is None:
            raise InvalidTransition("spyword-no-round")
        self.controller.hide(index)

    # ==========================================================================
    # Rendering
    # ==========================================================================

    def render(self) -> None:
        """Redraw the screen for the current state."""
        self.display.clear_ui()
        phase = self.controller.phase
        if phase == RoundPhase.WAITING:
            self._render_waiting()
        elif phase == RoundPhase.AWAITING_REVEAL:
            self._render_awaiting_reveal()
        elif phase == RoundPhase.REVEALED:
            self._render_revealed()
        else:
            self._render_complete()

    def _render_waiting(self) -> None:
        self.display.show_text_l("spyword-title")
        meta = self.options.get_option_metas()["player_count"]
        self.display.show_text(meta.get_label(self.locale, self.options.player_count))
        self._show_buttons(("start_round", "spyword-start-round"))

    def _render_awaiting_reveal(self) -> None:
        index = self.controller.current_player_index()
        if index == 0:
            self.display.show_text_l(
                "spyword-round-start",
                round=self.controller.round_number,
                players=self.controller.player_count,
                spies=self.controller.spy_count,
            )
        seat = index + 1
        self.display.show_text_l("spyword-pass-to", player=seat)
        self.display.show_menu(
            MENU_ID,
            [
                MenuItem(
                    text=Localization.get(self.locale, "spyword-see-word", player=seat),
                    id="see_word",
                )
            ],
        )

    def _render_revealed(self) -> None:
        index = self.controller.current_player_index()
        disclosure = self.controller.revealed_content_for(index)
        if disclosure.is_spy:
            self.display.show_text_l("spyword-you-are-spy")
        else:
            self.display.show_text_l("spyword-your-word", word=disclosure.word)
        self._show_buttons(("got_it", "spyword-got-it"))

    def _render_complete(self) -> None:
        seats = [str(i + 1) for i in range(self.controller.player_count)]
        self.display.show_text_l(
            "spyword-players-done",
            players=Localization.format_list_and(self.locale, seats),
        )
        self.display.show_text_l(
            "spyword-round-complete", spies=self.controller.spy_count
        )
        self._show_buttons(("new_round", "spyword-new-round"))

    def _show_buttons(self, *buttons: tuple[str, str]) -> None:
        self.display.show_menu(
            MENU_ID,
            [
                MenuItem(text=Localization.get(self.locale, label), id=button_id)
                for button_id, label in buttons
            ],
        )
