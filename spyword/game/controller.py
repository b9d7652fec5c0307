"""Round controller: the only thing that mutates round state."""

from dataclasses import dataclass
import random

from mashumaro.mixins.json import DataClassJSONMixin

from ..errors import InvalidTransition
from .round import Disclosure, RevealState, Round, RoundPhase
from .rules import MAX_PLAYERS, MIN_PLAYERS, choose_spy_indices, spy_count_for
from ..game_utils.turn_management_mixin import TurnManagementMixin
from ..words.supply import WordSupply


@dataclass
class RoundController(TurnManagementMixin, DataClassJSONMixin):
    """
    Owns the session's word supply and the current round.

    The controller drives players one at a time through reveal -> hide.
    Callers only ever learn what a single player sees at the moment that
    player's content is revealed; spy seats and the secret word are never
    handed out as a whole.

    Every mutator checks its guard first. A tripped guard raises
    InvalidTransition and leaves the state exactly as it was.
    """

    supply: WordSupply
    round: Round | None = None
    rounds_played: int = 0
    max_players: int = MAX_PLAYERS

    def __post_init__(self):
        """Initialize non-serialized state."""
        self._rng: random.Random = random.Random()

    def rebuild_runtime_state(self, rng: random.Random | None = None) -> None:
        """Reattach runtime-only state after deserialization."""
        self.set_rng(rng or random.Random())

    def set_rng(self, rng: random.Random) -> None:
        """Use ``rng`` for spy selection and word selection."""
        self._rng = rng
        self.supply.set_rng(rng)

    # ==========================================================================
    # Queries
    # ==========================================================================

    @property
    def phase(self) -> RoundPhase:
        if self.round is None:
            return RoundPhase.WAITING
        return self.round.phase

    @property
    def is_complete(self) -> bool:
        return self.round is not None and self.round.is_complete

    @property
    def player_count(self) -> int:
        return self.round.player_count if self.round else 0

    @property
    def spy_count(self) -> int:
        return self.round.spy_count if self.round else 0

    @property
    def round_number(self) -> int:
        return self.round.number if self.round else 0

    def current_player_index(self) -> int | None:
        """Seat whose turn it is, or None if no turn is pending."""
        return self.current_turn

    def current_player_state(self) -> RevealState | None:
        index = self.current_turn
        if index is None:
            return None
        return self.round.reveal_states[index]

    def revealed_content_for(self, player_index: int) -> Disclosure | None:
        """What player ``player_index`` sees right now.

        Only the player currently looking at the screen gets an answer.
        """
        if self.round is None or self.round.is_complete:
            return None
        if player_index != self.round.current_turn:
            return None
        if self.round.reveal_states[player_index] != RevealState.REVEALED:
            return None
        return self.round.disclosure_for(player_index)

    # ==========================================================================
    # Guards
    # ==========================================================================

    def start_blocked_reason(self, player_count: int) -> str | None:
        """Why a round with ``player_count`` players can't start, or None."""
        if self.round is not None and not self.round.is_complete:
            return "spyword-round-in-progress"
        if isinstance(player_count, bool) or not isinstance(player_count, int):
            return "spyword-invalid-player-count"
        if player_count < MIN_PLAYERS:
            return "spyword-too-few-players"
        if player_count > self.max_players:
            return "spyword-too-many-players"
        return None

    def reveal_blocked_reason(self, player_index: int) -> str | None:
        """Why ``player_index`` can't reveal now, or None if they can."""
        if self.round is None:
            return "spyword-no-round"
        if self.round.is_complete:
            return "spyword-round-over"
        if player_index != self.round.current_turn:
            return "spyword-not-your-turn"
        if self.round.reveal_states[player_index] != RevealState.HIDDEN:
            return "spyword-already-revealed"
        return None

    def hide_blocked_reason(self, player_index: int) -> str | None:
        """Why ``player_index`` can't hide now, or None if they can."""
        if self.round is None:
            return "spyword-no-round"
        if self.round.is_complete:
            return "spyword-round-over"
        if player_index != self.round.current_turn:
            return "spyword-not-your-turn"
        if self.round.reveal_states[player_index] != RevealState.REVEALED:
            return "spyword-not-revealed"
        return None

    # ==========================================================================
    # Mutations
    # ==========================================================================

    def start_round(self, player_count: int) -> None:
        """Start a fresh round once the previous one (if any) is complete.

        The word supply keeps its memory of used words.

        Raises:
            InvalidTransition: If a round is still in progress or
                ``player_count`` is not acceptable.
            ConfigurationError: If the word supply has no words.
        """
        reason = self.start_blocked_reason(player_count)
        if reason:
            raise InvalidTransition(
                reason, f"cannot start a round of {player_count!r} players now"
            )

        spy_count = spy_count_for(player_count)
        secret_word = self.supply.select_word()
        spy_indices = choose_spy_indices(player_count, spy_count, self._rng)

        self.rounds_played += 1
        self.round = Round(
            number=self.rounds_played,
            player_count=player_count,
            spy_count=spy_count,
            secret_word=secret_word,
            spy_indices=spy_indices,
        )

    def reveal(self, player_index: int) -> Disclosure:
        """Show player ``player_index`` their content.

        Raises:
            InvalidTransition: If it isn't that player's turn to look.
        """
        reason = self.reveal_blocked_reason(player_index)
        if reason:
            raise InvalidTransition(reason, f"player {player_index} cannot reveal")
        self.round.reveal_states[player_index] = RevealState.REVEALED
        return self.round.disclosure_for(player_index)

    def hide(self, player_index: int) -> None:
        """Conceal player ``player_index``'s content and pass the turn on.

        Raises:
            InvalidTransition: If that player isn't the one looking.
        """
        reason = self.hide_blocked_reason(player_index)
        if reason:
            raise InvalidTransition(reason, f"player {player_index} cannot hide")
        self.round.reveal_states[player_index] = RevealState.DONE
        self.advance_turn()
