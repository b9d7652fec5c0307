"""Mixin providing turn management for pass-the-device rounds."""


class TurnManagementMixin:
    """Mixin providing a strict left-to-right turn pointer.

    Turns never wrap: once every seat has had its turn the pointer sits at
    ``player_count`` and the round is over.

    Expects on the class:
        - self.round: Round | None
    """

    @property
    def current_turn(self) -> int | None:
        """Seat whose turn it is, or None when no turn is pending."""
        if self.round is None or self.round.is_complete:
            return None
        return self.round.current_turn

    @property
    def turns_remaining(self) -> int:
        """Number of players who still have to take their turn."""
        if self.round is None:
            return 0
        return self.round.player_count - self.round.current_turn

    def advance_turn(self) -> int | None:
        """Move the pointer to the next seat.

        Returns:
            The new current seat, or None if the round just ended.
        """
        if self.round is None or self.round.is_complete:
            return None
        self.round.current_turn += 1
        return self.current_turn
