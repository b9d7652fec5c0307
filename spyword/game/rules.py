"""Spy count derivation and spy selection."""

import math
import random

from ..errors import InvalidTransition

MIN_PLAYERS = 2
MAX_PLAYERS = 20

# One spy for every five players, rounded up
PLAYERS_PER_SPY = 5


def spy_count_for(player_count: int) -> int:
    """Return how many spies a round with ``player_count`` players gets.

    At least one spy, and always at least one player who sees the word.
    """
    if player_count < MIN_PLAYERS:
        raise InvalidTransition(
            "spyword-too-few-players",
            f"at least {MIN_PLAYERS} players are required, got {player_count}",
        )
    count = math.ceil(player_count / PLAYERS_PER_SPY)
    return max(1, min(count, player_count - 1))


def choose_spy_indices(
    player_count: int, spy_count: int, rng: random.Random
) -> list[int]:
    """Pick ``spy_count`` distinct seat indices from ``range(player_count)``.

    Partial Fisher-Yates: the first ``spy_count`` slots of the index list are
    each swapped with a random slot at or after them. Only ``rng.randrange``
    is used.

    Returns:
        The chosen indices in ascending order.
    """
    if not 0 < spy_count < player_count:
        raise ValueError(
            f"spy_count must be between 1 and {player_count - 1}, got {spy_count}"
        )
    indices = list(range(player_count))
    for i in range(spy_count):
        j = rng.randrange(i, player_count)
        indices[i], indices[j] = indices[j], indices[i]
    return sorted(indices[:spy_count])
