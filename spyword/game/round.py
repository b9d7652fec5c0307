"""Round value object and the reveal states players move through."""

from dataclasses import dataclass, field
from enum import Enum

from mashumaro.mixins.json import DataClassJSONMixin


class RevealState(Enum):
    """Where a player is in the reveal/hide protocol."""

    HIDDEN = "hidden"  # Has not looked yet
    REVEALED = "revealed"  # Looking at the screen right now
    DONE = "done"  # Looked and handed the device on


class RoundPhase(Enum):
    """Phase of the round as a whole."""

    WAITING = "waiting"  # No round started yet this session
    AWAITING_REVEAL = "awaiting_reveal"
    REVEALED = "revealed"
    COMPLETE = "complete"


@dataclass(frozen=True)
class Disclosure:
    """What a single player sees when their content is revealed.

    ``word`` is None for spies.
    """

    word: str | None = None

    @property
    def is_spy(self) -> bool:
        return self.word is None


@dataclass
class Round(DataClassJSONMixin):
    """
    State of one round.

    A fresh Round is built every time a round starts; only the turn pointer
    and reveal states change afterwards, and only through RoundController.
    """

    number: int
    player_count: int
    spy_count: int
    secret_word: str
    spy_indices: list[int] = field(default_factory=list)
    current_turn: int = 0
    reveal_states: list[RevealState] = field(default_factory=list)

    def __post_init__(self):
        if not self.reveal_states:
            self.reveal_states = [RevealState.HIDDEN] * self.player_count

    @property
    def is_complete(self) -> bool:
        return self.current_turn >= self.player_count

    @property
    def phase(self) -> RoundPhase:
        if self.is_complete:
            return RoundPhase.COMPLETE
        if self.reveal_states[self.current_turn] == RevealState.REVEALED:
            return RoundPhase.REVEALED
        return RoundPhase.AWAITING_REVEAL

    @property
    def revealed_count(self) -> int:
        """Number of players currently looking at the screen (0 or 1)."""
        return sum(1 for s in self.reveal_states if s == RevealState.REVEALED)

    def is_spy(self, player_index: int) -> bool:
        return player_index in self.spy_indices

    def disclosure_for(self, player_index: int) -> Disclosure:
        """Content player ``player_index`` is shown on reveal."""
        if self.is_spy(player_index):
            return Disclosure()
        return Disclosure(word=self.secret_word)
