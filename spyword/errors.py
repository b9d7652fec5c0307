"""Errors raised by the round controller and the word supply."""


class SpywordError(Exception):
    """Base class for all game errors."""


class ConfigurationError(SpywordError):
    """The game cannot be played with the supplied configuration.

    Raised when the word bank is empty. Fatal: no round can ever start.
    """


class InvalidTransition(SpywordError):
    """An action was attempted that the current round state does not allow.

    Non-fatal. The state is left unchanged and the caller is expected to
    re-render the current state.
    """

    def __init__(self, reason: str, message: str | None = None):
        self.reason = reason  # Localization key describing the rejection
        super().__init__(message or reason)
