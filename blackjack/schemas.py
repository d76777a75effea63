"""Pydantic schemas for round snapshots and settlement results."""

from collections import Counter

from pydantic import BaseModel, ConfigDict

from blackjack.cards import Card
from blackjack.hand import Hand
from blackjack.outcome import Outcome


class CardSchema(BaseModel):
    """Card representation."""

    model_config = ConfigDict(frozen=True)

    rank: str
    suit: str
    value: int

    @classmethod
    def from_card(cls, card: Card) -> "CardSchema":
        return cls(rank=str(card.rank), suit=str(card.suit), value=card.value)

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"


class HandSchema(BaseModel):
    """Hand representation."""

    model_config = ConfigDict(frozen=True)

    cards: list[CardSchema]
    value: int
    is_soft: bool
    is_blackjack: bool
    is_busted: bool

    @classmethod
    def from_hand(cls, hand: Hand) -> "HandSchema":
        return cls(
            cards=[CardSchema.from_card(card) for card in hand],
            value=hand.value,
            is_soft=hand.is_soft,
            is_blackjack=hand.is_blackjack,
            is_busted=hand.is_busted,
        )


class PlayerResult(BaseModel):
    """One player's settled result."""

    model_config = ConfigDict(frozen=True)

    name: str
    outcome: Outcome
    bet: int
    dividend: int
    hand: HandSchema

    @property
    def label(self) -> str:
        return self.outcome.label


class DealerResult(BaseModel):
    """The dealer's results, one mirrored outcome per player."""

    model_config = ConfigDict(frozen=True)

    outcomes: list[Outcome]
    dividend: int
    hand: HandSchema

    @property
    def labels(self) -> list[str]:
        return [outcome.label for outcome in self.outcomes]

    @property
    def tally(self) -> dict[str, int]:
        """Count of each label, e.g. {'Win': 2, 'Lose': 1}."""
        return dict(Counter(self.labels))


class SettlementReport(BaseModel):
    """Everything the round owes and is owed once it is over."""

    model_config = ConfigDict(frozen=True)

    players: list[PlayerResult]
    dealer: DealerResult

    def by_name(self) -> dict[str, tuple[str, int]]:
        """Map each player name to its (label, dividend)."""
        return {result.name: (result.label, result.dividend) for result in self.players}
