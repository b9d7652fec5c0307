"""Round management: rules, round state and the controller that drives it."""

from .controller import RoundController
from ..errors import ConfigurationError, InvalidTransition, SpywordError
from .options import RoundOptions
from .round import Disclosure, RevealState, Round, RoundPhase
from .rules import MAX_PLAYERS, MIN_PLAYERS, choose_spy_indices, spy_count_for

__all__ = [
    "RoundController",
    "ConfigurationError",
    "InvalidTransition",
    "SpywordError",
    "RoundOptions",
    "Disclosure",
    "RevealState",
    "Round",
    "RoundPhase",
    "MAX_PLAYERS",
    "MIN_PLAYERS",
    "choose_spy_indices",
    "spy_count_for",
]
