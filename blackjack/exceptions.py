"""Exception hierarchy for the blackjack round engine."""

from typing import Any


class BlackjackError(Exception):
    """Base class for every error raised by the engine."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details if details is not None else {}


class ValidationError(BlackjackError, ValueError):
    """Bad input: player names, command tokens or bet amounts."""


class IllegalStateError(BlackjackError, RuntimeError):
    """An action was requested in a state that does not allow it."""


class DeckExhaustedError(BlackjackError):
    """A card was drawn from an empty deck."""
