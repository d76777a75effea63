"""Players and the dealer: hands plus the rules for drawing more cards."""

import logging
from abc import ABC, abstractmethod
from typing import Iterable

from transitions import Machine

from blackjack.cards import Card
from blackjack.exceptions import IllegalStateError, ValidationError
from blackjack.game.state import VALID_TRANSITIONS, ParticipantState
from blackjack.hand import Hand

logger = logging.getLogger(__name__)

INITIAL_CARDS = 2
DEALER_STAND_THRESHOLD = 17


class Participant(ABC):
    """Anything seated at the table: holds a hand and may be asked to hit."""

    def __init__(self, cards: Iterable[Card]) -> None:
        cards = list(cards)
        if len(cards) != INITIAL_CARDS:
            raise ValidationError(
                f"An opening hand must have exactly {INITIAL_CARDS} cards",
                {"cards": len(cards)},
            )
        self.hand = Hand(cards)

    @property
    @abstractmethod
    def is_able_to_hit(self) -> bool:
        """Whether another card may be added to the hand."""

    def hit(self, card: Card) -> None:
        """Add a card to the hand, only while hitting is allowed."""
        if not self.is_able_to_hit:
            raise IllegalStateError(
                f"{self.display_name} cannot take another card",
                {"value": self.hand.value},
            )
        self.hand.add_card(card)
        self._after_hit()

    def _after_hit(self) -> None:
        """Hook run once the new card is in the hand."""

    @property
    def display_name(self) -> str:
        return type(self).__name__

    @property
    def value(self) -> int:
        return self.hand.value

    @property
    def cards(self) -> list[Card]:
        return list(self.hand.cards)


class Player(Participant):
    """
    A named player with a state machine and an optional bet.

    The player stays ACTIVE until choosing to stay or until a hit busts
    the hand; both are terminal for the round.
    """

    STATES = [s.name.lower() for s in ParticipantState]

    # mark_stayed, mark_busted
    TRANSITIONS = [
        {"trigger": f"mark_{dest.name.lower()}", "source": source.name.lower(), "dest": dest.name.lower()}
        for source, dests in VALID_TRANSITIONS.items()
        for dest in dests
    ]

    def __init__(self, name: str, cards: Iterable[Card]) -> None:
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Player name must not be blank", {"name": name})
        super().__init__(cards)
        self.name = name.strip()
        self.bet_amount: int | None = None

        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="active",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> ParticipantState:
        """Get current state as enum."""
        return ParticipantState[self._machine_state.upper()]  # type: ignore

    @property
    def display_name(self) -> str:
        return self.name

    @property
    def is_able_to_hit(self) -> bool:
        return self.state == ParticipantState.ACTIVE

    @property
    def is_able_to_bet(self) -> bool:
        return self.bet_amount is None

    def _after_hit(self) -> None:
        if self.hand.is_busted:
            self.mark_busted()
            logger.debug("%s busts with %d", self.name, self.hand.value)

    def stay(self) -> None:
        """Stop drawing for the rest of the round."""
        if self.state != ParticipantState.ACTIVE:
            raise IllegalStateError(
                f"{self.name} cannot stay while {self.state}",
                {"state": self.state.name},
            )
        self.mark_stayed()

    def bet(self, amount: int) -> None:
        """
        Place this round's bet.

        Args:
            amount: Non-negative whole amount

        Raises:
            ValidationError: If the amount is negative or not an integer
            IllegalStateError: If a bet was already placed
        """
        if isinstance(amount, bool) or not isinstance(amount, int) or amount < 0:
            raise ValidationError(
                "Bet must be a non-negative whole number", {"amount": amount}
            )
        if not self.is_able_to_bet:
            raise IllegalStateError(
                f"{self.name} has already bet {self.bet_amount}",
                {"bet": self.bet_amount},
            )
        self.bet_amount = amount

    def __repr__(self) -> str:
        return f"Player({self.name!r}, {self.hand!r}, state={self.state.name})"


class Dealer(Participant):
    """The house: keeps hitting below 17 and never hits at 17 or above."""

    @property
    def is_able_to_hit(self) -> bool:
        return self.hand.value < DEALER_STAND_THRESHOLD

    def __repr__(self) -> str:
        return f"Dealer({self.hand!r})"
