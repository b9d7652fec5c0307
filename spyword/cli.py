"""
Command-line interface to simulate and inspect Spyword sessions.

All operations are parameter-based with no interactive input required.

Usage examples:
    # Simulate three rounds with 6 players
    python -m spyword.cli simulate --players 6 --rounds 3

    # Use a custom word list and a fixed seed
    python -m spyword.cli simulate --players 5 --words words.txt --seed 7

    # Output as JSON for machine parsing
    python -m spyword.cli simulate --players 4 --json

    # Test serialization (save/restore after each button press)
    python -m spyword.cli simulate --players 8 --rounds 5 --test-serialization

    # Show configurable options
    python -m spyword.cli show-options

    # List available languages
    python -m spyword.cli list-locales
"""

import argparse
import json
import random
import sys
from typing import Any

from .display.base import Display, MenuItem
from .game.controller import RoundController
from .errors import ConfigurationError
from .game.options import RoundOptions, get_all_option_metas
from .host import MENU_ID, PassTheDeviceHost
from .messages.localization import Localization
from .words.supply import WordSupply


class SpectatorDisplay(Display):
    """
    A display that captures everything shown on screen.
    Used for CLI simulation to watch rounds play out.
    """

    def __init__(
        self, locale: str = "en", json_mode: bool = False, quiet: bool = False
    ):
        self._locale = locale
        self._json_mode = json_mode
        self._quiet = quiet
        self.messages: list[str] = []
        self.menus: dict[str, list[MenuItem]] = {}

    @property
    def locale(self) -> str:
        return self._locale

    def show_text(self, text: str) -> None:
        self.messages.append(text)
        if not self._quiet and not self._json_mode:
            print(f"  {text}")

    def show_menu(self, menu_id: str, items: list[MenuItem]) -> None:
        self.menus[menu_id] = list(items)

    def clear_ui(self) -> None:
        self.menus.clear()

    def button_ids(self) -> list[str | None]:
        return [item.id for item in self.menus.get(MENU_ID, [])]


class RoundSimulator:
    """Runs a session of rounds, pressing every button in turn."""

    def __init__(
        self,
        player_count: int,
        rounds: int,
        words_path: str | None = None,
        locale: str = "en",
        seed: int | None = None,
        json_mode: bool = False,
        quiet: bool = False,
        test_serialization: bool = False,
    ):
        self.player_count = player_count
        self.rounds = rounds
        self.words_path = words_path
        self.locale = locale
        self.seed = seed
        self.json_mode = json_mode
        self.quiet = quiet
        self.test_serialization = test_serialization

        self.rng = random.Random(seed)
        self.controller: RoundController | None = None
        self.host: PassTheDeviceHost | None = None
        self.spectator: SpectatorDisplay | None = None

    def setup(self) -> bool:
        """Set up the session. Returns True on success."""
        try:
            if self.words_path:
                supply = WordSupply.from_file(self.words_path, rng=self.rng)
            else:
                supply = WordSupply.load_default(rng=self.rng)
        except ConfigurationError as e:
            if not self.json_mode:
                print(f"Error: {e}")
            return False

        self.controller = RoundController(supply=supply)
        self.controller.set_rng(self.rng)

        reason = self.controller.start_blocked_reason(self.player_count)
        if reason:
            if not self.json_mode:
                print(f"Error: {Localization.get(self.locale, reason)}")
            return False

        options = RoundOptions(player_count=self.player_count, locale=self.locale)
        self.spectator = SpectatorDisplay(
            locale=self.locale, json_mode=self.json_mode, quiet=self.quiet
        )
        self.host = PassTheDeviceHost(self.controller, self.spectator, options)
        return True

    def _save_and_restore(self, step: int) -> None:
        """Save the controller to JSON and restore it, testing serialization."""
        if not self.controller or not self.host:
            return

        try:
            controller_json = self.controller.to_json()
        except Exception as e:
            raise RuntimeError(f"Serialization failed at step {step}: {e}")

        try:
            restored = RoundController.from_json(controller_json)
        except Exception as e:
            raise RuntimeError(f"Deserialization failed at step {step}: {e}")

        restored.rebuild_runtime_state(self.rng)
        self.controller = restored
        self.host.controller = restored

    def _press(self, button_id: str) -> None:
        if not self.host.press(button_id):
            raise RuntimeError(f"Button '{button_id}' was rejected")

    def run(self) -> dict[str, Any]:
        """Run the simulation to completion. Returns results dict."""
        if not self.host or not self.spectator:
            return {"error": "Session not set up"}

        if not self.json_mode and not self.quiet:
            mode_str = " [testing serialization]" if self.test_serialization else ""
            print(
                f"\n=== Spyword ({self.player_count} players, "
                f"{self.rounds} rounds){mode_str} ===\n"
            )

        self.host.render()
        step = 0
        serialization_error = None
        words: list[str] = []
        spy_counts: list[int] = []

        try:
            for _ in range(self.rounds):
                if "start_round" in self.spectator.button_ids():
                    self._press("start_round")
                else:
                    self._press("new_round")
                spy_counts.append(self.controller.spy_count)
                words.append(self.controller.round.secret_word)
                while not self.controller.is_complete:
                    for button_id in ("see_word", "got_it"):
                        self._press(button_id)
                        step += 1
                        if self.test_serialization:
                            self._save_and_restore(step)
        except RuntimeError as e:
            serialization_error = str(e)
            if not self.json_mode:
                print(f"\nError: {serialization_error}")

        results = {
            "players": self.player_count,
            "rounds": self.controller.rounds_played,
            "steps": step,
            "spy_counts": spy_counts,
            "words": words,
            "recycled": self.controller.supply.cycles,
            "messages": self.spectator.messages,
        }

        if self.test_serialization:
            results["serialization_tested"] = True
            if serialization_error:
                results["serialization_error"] = serialization_error
            else:
                results["serialization_passed"] = True
        elif serialization_error:
            results["error"] = serialization_error

        return results


def cmd_show_options(args):
    """Show the configurable options."""
    options = RoundOptions()
    options_list = []

    for name, meta in get_all_option_metas(RoundOptions).items():
        current_value = getattr(options, name)
        option_data = {
            "name": name,
            "type": type(current_value).__name__,
            "default": current_value,
            "label": meta.label,
        }
        if hasattr(meta, "min_val"):
            option_data["min"] = meta.min_val
            option_data["max"] = meta.max_val
        if hasattr(meta, "get_choices"):
            option_data["choices"] = meta.get_choices()
        options_list.append(option_data)

    if args.json:
        print(json.dumps({"options": options_list}, indent=2))
    else:
        print("Options:\n")
        for opt in options_list:
            print(f"  {opt['name']} ({opt['type']})")
            print(f"    Default: {opt['default']}")
            if "min" in opt:
                print(f"    Range: {opt['min']} - {opt['max']}")
            if "choices" in opt:
                print(f"    Choices: {', '.join(opt['choices'])}")
            print()


def cmd_list_locales(args):
    """List available languages."""
    languages = Localization.get_available_languages()
    if args.json:
        print(json.dumps(languages, indent=2))
    else:
        print("Available languages:\n")
        for code, name in languages.items():
            print(f"  {code}: {name}")


def cmd_simulate(args):
    """Simulate a session of rounds."""
    simulator = RoundSimulator(
        player_count=args.players,
        rounds=args.rounds,
        words_path=args.words,
        locale=args.locale,
        seed=args.seed,
        json_mode=args.json,
        quiet=args.quiet,
        test_serialization=args.test_serialization,
    )

    if not simulator.setup():
        sys.exit(1)

    results = simulator.run()

    if args.json:
        print(json.dumps(results, indent=2))
    elif not args.quiet:
        print(
            f"\n=== Finished: {results['rounds']} rounds, {results['steps']} steps ==="
        )
        print(f"Words: {', '.join(results['words'])}")


def main():
    parser = argparse.ArgumentParser(
        description="Spyword CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # show-options command
    options_parser = subparsers.add_parser(
        "show-options", help="Show configurable options"
    )
    options_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # list-locales command
    locales_parser = subparsers.add_parser(
        "list-locales", help="List available languages"
    )
    locales_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # simulate command
    sim_parser = subparsers.add_parser("simulate", help="Simulate a session")
    sim_parser.add_argument(
        "--players",
        "-p",
        type=int,
        default=4,
        help="Number of players (default: 4)",
    )
    sim_parser.add_argument(
        "--rounds",
        "-r",
        type=int,
        default=1,
        help="Number of rounds to play (default: 1)",
    )
    sim_parser.add_argument(
        "--words", "-w", help="Path to a word list (default: bundled list)"
    )
    sim_parser.add_argument(
        "--locale", "-l", default="en", help="Language for output (default: en)"
    )
    sim_parser.add_argument("--seed", type=int, help="Random seed")
    sim_parser.add_argument("--json", action="store_true", help="Output as JSON")
    sim_parser.add_argument(
        "--quiet", "-q", action="store_true", help="Suppress round output"
    )
    sim_parser.add_argument(
        "--test-serialization",
        "-s",
        action="store_true",
        help="Save and restore session state after each button press",
    )

    args = parser.parse_args()

    Localization.init()

    if args.command == "show-options":
        cmd_show_options(args)
    elif args.command == "list-locales":
        cmd_list_locales(args)
    elif args.command == "simulate":
        cmd_simulate(args)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
