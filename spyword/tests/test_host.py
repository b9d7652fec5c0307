"""Tests for the pass-the-device host and its rendering."""

import io
import random

import pytest

from spyword.display.base import MenuItem
from spyword.display.console import ConsoleDisplay
from spyword.display.test_display import MockDisplay
from spyword.game.controller import RoundController
from spyword.game.options import RoundOptions
from spyword.game.round import RoundPhase
from spyword.host import MENU_ID, PassTheDeviceHost
from spyword.words.supply import WordSupply


def make_host(players: int = 4, locale: str = "en", words=None, seed: int = 3):
    rng = random.Random(seed)
    supply = WordSupply.from_lines(words or ["Lighthouse", "Submarine"], rng=rng)
    controller = RoundController(supply=supply)
    controller.set_rng(rng)
    display = MockDisplay(locale=locale)
    options = RoundOptions(player_count=players, locale=locale)
    host = PassTheDeviceHost(controller, display, options)
    host.render()
    return host, display


class TestHostRendering:
    """What the screen shows in each phase."""

    def test_waiting_screen(self):
        """Before the first round only the start button is offered."""
        host, display = make_host(players=6)
        assert display.screen[0] == "Spyword"
        assert "Players: 6" in display.screen
        assert display.get_menu_ids(MENU_ID) == ["start_round"]

    def test_first_turn_screen(self):
        """Starting a round asks for the device to go to player 1."""
        host, display = make_host(players=6)
        assert host.press("start_round")

        assert any("6 players" in line for line in display.screen)
        assert "Pass the device to player 1." in display.screen
        assert display.get_menu_ids(MENU_ID) == ["see_word"]
        assert display.menus[MENU_ID][0].text == "Player 1, see your word"

    def test_revealed_screen_shows_word_or_spy(self):
        """A revealed player sees either the word or the spy notice."""
        host, display = make_host(players=4)
        host.press("start_round")
        host.press("see_word")

        word = host.controller.round.secret_word
        assert display.screen in (["Your word is: " + word], ["You are the spy!"])
        assert display.get_menu_ids(MENU_ID) == ["got_it"]
        assert display.menus[MENU_ID][0].text == "I got it"

    def test_hide_clears_previous_content(self):
        """Hiding wipes the revealed content off the screen."""
        host, display = make_host(players=4)
        host.press("start_round")
        host.press("see_word")
        host.press("got_it")

        assert display.screen == ["Pass the device to player 2."]
        assert not any("Your word" in line for line in display.screen)

    def test_complete_screen(self):
        """A finished round shows the summary and a new-round button."""
        host, display = make_host(players=3)
        host.press("start_round")
        for _ in range(3):
            host.press("see_word")
            host.press("got_it")

        assert host.controller.phase == RoundPhase.COMPLETE
        assert display.screen[0] == "Players 1, 2, and 3 have seen their role."
        assert "There is one spy among you." in display.screen[1]
        assert display.get_menu_ids(MENU_ID) == ["new_round"]

    def test_spanish_screens(self):
        """Screens are localized in Spanish."""
        host, display = make_host(players=4, locale="es")
        host.press("start_round")
        assert "Pasa el dispositivo al jugador 1." in display.screen
        assert display.menus[MENU_ID][0].text == "Jugador 1, mira tu palabra"


class TestHostActions:
    """Button presses and rejected presses."""

    def test_got_it_before_see_word_is_rejected(self):
        """Pressing got it early changes nothing and says why."""
        host, display = make_host()
        host.press("start_round")
        before = host.controller.to_json()

        assert not host.press("got_it")

        assert host.controller.to_json() == before
        assert display.get_last_text() == "Your word is not showing."
        assert display.get_menu_ids(MENU_ID) == ["see_word"]

    def test_see_word_without_round_is_rejected(self):
        """See word does nothing before a round starts."""
        host, display = make_host()
        assert not host.press("see_word")
        assert host.controller.phase == RoundPhase.WAITING
        assert display.get_last_text() == "No round has been started yet."

    def test_new_round_mid_round_is_rejected(self):
        """A stray new-round press can't throw away the round being played."""
        host, display = make_host()
        host.press("start_round")
        host.press("see_word")
        before = host.controller.to_json()

        assert not host.press("new_round")

        assert host.controller.to_json() == before
        assert display.get_last_text() == "Finish the current round first."
        assert display.get_menu_ids(MENU_ID) == ["got_it"]

    def test_unknown_button_ignored(self):
        """Unknown button ids are ignored."""
        host, display = make_host()
        assert not host.press("self_destruct")
        assert display.get_menu_ids(MENU_ID) == ["start_round"]

    def test_new_round_recycles_two_word_bank(self):
        """New rounds keep going after a small bank is used up."""
        host, display = make_host(players=2)
        words = []
        host.press("start_round")
        for _ in range(3):
            words.append(host.controller.round.secret_word)
            while not host.controller.is_complete:
                host.press("see_word")
                host.press("got_it")
            host.press("new_round")

        assert set(words[:2]) == {"Lighthouse", "Submarine"}
        assert words[2] in ("Lighthouse", "Submarine")
        assert host.controller.round_number == 4

    def test_every_player_sees_exactly_one_thing(self):
        """Each player sees one word or one spy notice."""
        host, display = make_host(players=10, words=["Zoo"])
        host.press("start_round")
        shown = []
        while not host.controller.is_complete:
            host.press("see_word")
            shown.extend(display.screen)
            host.press("got_it")

        assert len(shown) == 10
        assert shown.count("You are the spy!") == 2
        assert shown.count("Your word is: Zoo") == 8


class TestRoundOptions:
    """Tests for the declarative options."""

    def test_defaults(self):
        """Options start at their declared defaults."""
        options = RoundOptions()
        assert options.player_count == 4
        assert options.locale == "en"

    def test_player_count_is_clamped(self):
        """Player counts outside 2-20 are clamped."""
        options = RoundOptions()
        assert options.set_option("player_count", "50")
        assert options.player_count == 20
        assert options.set_option("player_count", "1")
        assert options.player_count == 2

    def test_bad_values_rejected(self):
        """Unparseable values and unknown options are rejected."""
        options = RoundOptions()
        assert not options.set_option("player_count", "lots")
        assert not options.set_option("locale", "xx")
        assert not options.set_option("no_such_option", "1")
        assert options.player_count == 4
        assert options.locale == "en"

    def test_locale_choices(self):
        """Locale accepts a shipped language code."""
        options = RoundOptions()
        assert options.set_option("locale", "es")
        assert options.locale == "es"

    @pytest.mark.parametrize(
        "locale,label", [("en", "Players: 7"), ("es", "Jugadores: 7")]
    )
    def test_labels(self, locale, label):
        """Option labels are localized."""
        meta = RoundOptions().get_option_metas()["player_count"]
        assert meta.get_label(locale, 7) == label

    def test_serialization(self):
        """Options survive a JSON round trip."""
        options = RoundOptions(player_count=9, locale="es")
        loaded = RoundOptions.from_json(options.to_json())
        assert loaded == options


class TestConsoleDisplay:
    """Tests for the terminal display."""

    def test_menu_and_choice(self):
        """Bad input is skipped until a valid button number is entered."""
        out = io.StringIO()
        answers = iter(["9", "oops", "2"])
        display = ConsoleDisplay(out=out, read_line=lambda prompt: next(answers))
        display.show_menu(
            MENU_ID, [MenuItem("First", id="first"), MenuItem("Second", id="second")]
        )

        assert display.wait_for_choice() == "second"
        assert "  [1] First" in out.getvalue()
        assert "  [2] Second" in out.getvalue()

    def test_end_of_input(self):
        """End of input returns no choice."""
        def read_line(prompt):
            raise EOFError

        display = ConsoleDisplay(out=io.StringIO(), read_line=read_line)
        display.show_menu(MENU_ID, [MenuItem("Only", id="only")])
        assert display.wait_for_choice() is None

    def test_clear_hides_previous_text(self):
        """Clearing scrolls earlier text off the terminal."""
        out = io.StringIO()
        display = ConsoleDisplay(out=out)
        display.show_text_l("spyword-you-are-spy")
        display.clear_ui()
        lines = out.getvalue().splitlines()
        assert lines[0] == "You are the spy!"
        assert len(lines) > ConsoleDisplay.CLEAR_LINES
