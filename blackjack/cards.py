"""Card, Deck, and StackedDeck classes - immutable card representations."""

from dataclasses import dataclass
from enum import Enum, auto
from random import Random
from typing import Iterable, Iterator

from blackjack.exceptions import DeckExhaustedError


class Suit(Enum):
    """Card suits."""

    CLUBS = auto()
    DIAMONDS = auto()
    HEARTS = auto()
    SPADES = auto()

    def __str__(self) -> str:
        symbols = {
            Suit.CLUBS: "♣",
            Suit.DIAMONDS: "♦",
            Suit.HEARTS: "♥",
            Suit.SPADES: "♠",
        }
        return symbols[self]


class Rank(Enum):
    """Card ranks with blackjack values."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        if 2 <= self.value <= 10:
            return str(self.value)
        return {
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
            Rank.ACE: "A",
        }[self]

    @property
    def blackjack_value(self) -> int:
        """Return the point value with an Ace counted high (11)."""
        if self == Rank.ACE:
            return 11
        return min(self.value, 10)

    @property
    def is_ace(self) -> bool:
        return self == Rank.ACE


_RANK_TOKENS = {
    "A": Rank.ACE,
    "2": Rank.TWO,
    "3": Rank.THREE,
    "4": Rank.FOUR,
    "5": Rank.FIVE,
    "6": Rank.SIX,
    "7": Rank.SEVEN,
    "8": Rank.EIGHT,
    "9": Rank.NINE,
    "10": Rank.TEN,
    "T": Rank.TEN,
    "J": Rank.JACK,
    "Q": Rank.QUEEN,
    "K": Rank.KING,
}

_SUIT_TOKENS = {
    "C": Suit.CLUBS,
    "♣": Suit.CLUBS,
    "D": Suit.DIAMONDS,
    "♦": Suit.DIAMONDS,
    "H": Suit.HEARTS,
    "♥": Suit.HEARTS,
    "S": Suit.SPADES,
    "♠": Suit.SPADES,
}


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def value(self) -> int:
        """Return the blackjack point value (Ace counted as 11)."""
        return self.rank.blackjack_value

    @property
    def is_ace(self) -> bool:
        return self.rank.is_ace

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', 'Kh', '10D'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]
        if rank_str not in _RANK_TOKENS:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in _SUIT_TOKENS:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(_RANK_TOKENS[rank_str], _SUIT_TOKENS[suit_str])


class Deck:
    """A standard 52-card deck, shuffled once when it is built.

    Cards are consumed without replacement; a round never recycles them.
    """

    SIZE = 52

    def __init__(self, rng: Random | None = None) -> None:
        self._rng = rng or Random()
        self._cards: list[Card] = [Card(rank, suit) for suit in Suit for rank in Rank]
        self._rng.shuffle(self._cards)

    def draw(self) -> Card:
        """Draw a card from the top of the deck."""
        if not self._cards:
            raise DeckExhaustedError("Cannot draw from an empty deck")
        return self._cards.pop()

    def initial_draw(self) -> tuple[Card, Card]:
        """Draw the two cards of an opening hand."""
        if len(self._cards) < 2:
            raise DeckExhaustedError(
                "Not enough cards left for an initial deal",
                {"cards_remaining": len(self._cards)},
            )
        return self.draw(), self.draw()

    @property
    def cards_remaining(self) -> int:
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        """Iterate over the remaining cards, next to be drawn first."""
        return reversed(self._cards)


class StackedDeck(Deck):
    """A deck that deals a fixed sequence of cards, first card first.

    Substitutes for the shuffled deck wherever a reproducible deal is needed.
    """

    def __init__(self, cards: Iterable[Card]) -> None:
        self._cards = list(cards)
        self._cards.reverse()

    @classmethod
    def from_strings(cls, *card_strs: str) -> "StackedDeck":
        """Build a stacked deck from strings such as 'AS', '10H'."""
        return cls(Card.from_string(s) for s in card_strs)
