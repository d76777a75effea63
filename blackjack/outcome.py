"""Round outcomes, their payout multipliers, and the dealer's mirror view."""

from decimal import Decimal
from enum import Enum


class Outcome(Enum):
    """How a player's hand finished against the dealer's."""

    BLACKJACK_WIN = "blackjack_win"
    WIN = "win"
    PUSH = "push"
    LOSE = "lose"
    BUST_LOSE = "bust_lose"

    @property
    def multiplier(self) -> Decimal:
        """Signed payout multiplier applied to the bet."""
        return _MULTIPLIERS[self]

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def is_win(self) -> bool:
        return self.multiplier > 0

    @property
    def is_loss(self) -> bool:
        return self.multiplier < 0

    def reverse(self) -> "Outcome":
        """The same result seen from the dealer's side of the table."""
        return REVERSED[self]

    def __str__(self) -> str:
        return self.label


_MULTIPLIERS: dict[Outcome, Decimal] = {
    Outcome.BLACKJACK_WIN: Decimal("1.5"),
    Outcome.WIN: Decimal("1"),
    Outcome.PUSH: Decimal("0"),
    Outcome.LOSE: Decimal("-1"),
    Outcome.BUST_LOSE: Decimal("-1"),
}

_LABELS: dict[Outcome, str] = {
    Outcome.BLACKJACK_WIN: "Blackjack",
    Outcome.WIN: "Win",
    Outcome.PUSH: "Push",
    Outcome.LOSE: "Lose",
    Outcome.BUST_LOSE: "Bust",
}

REVERSED: dict[Outcome, Outcome] = {
    Outcome.BLACKJACK_WIN: Outcome.LOSE,
    Outcome.WIN: Outcome.LOSE,
    Outcome.PUSH: Outcome.PUSH,
    Outcome.LOSE: Outcome.WIN,
    Outcome.BUST_LOSE: Outcome.WIN,
}
