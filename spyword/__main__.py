"""Entry point for playing Spyword on a single shared terminal."""

import argparse
import random
import sys

from . import VERSION
from .display.console import ConsoleDisplay
from .game.controller import RoundController
from .errors import ConfigurationError
from .game.options import RoundOptions
from .host import PassTheDeviceHost
from .messages.localization import Localization
from .words.supply import WordSupply


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Spyword - pass the device, find the spy",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Play with the default 4 players and the bundled word list
  python -m spyword

  # Play with 7 players and your own words, in Spanish
  python -m spyword --players 7 --words my_words.txt --locale es
""",
    )
    parser.add_argument(
        "--players",
        "-p",
        default="4",
        help="Number of players (default: 4)",
    )
    parser.add_argument(
        "--words",
        "-w",
        help="Path to a word list, one word per line (default: bundled list)",
    )
    parser.add_argument(
        "--locale",
        "-l",
        default="en",
        help="Language for on-screen text (default: en)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed, for reproducible rounds",
    )

    args = parser.parse_args()

    Localization.init()

    options = RoundOptions()
    if not options.set_option("player_count", args.players):
        parser.error(f"invalid number of players: {args.players!r}")
    if not options.set_option("locale", args.locale):
        print(f"Warning: Unknown locale '{args.locale}', using {options.locale}")

    rng = random.Random(args.seed)
    try:
        if args.words:
            supply = WordSupply.from_file(args.words, rng=rng)
        else:
            supply = WordSupply.load_default(rng=rng)
    except ConfigurationError as e:
        print(f"Error: {e}")
        sys.exit(1)

    controller = RoundController(supply=supply)
    controller.set_rng(rng)

    print(f"Spyword v{VERSION}: {len(supply.word_bank)} words loaded")

    display = ConsoleDisplay(locale=options.locale)
    host = PassTheDeviceHost(controller, display, options)
    host.render()
    try:
        while (choice := display.wait_for_choice()) is not None:
            host.press(choice)
    except KeyboardInterrupt:
        pass
    print(f"\nRounds played: {controller.rounds_played}")


if __name__ == "__main__":
    main()
