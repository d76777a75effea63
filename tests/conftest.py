"""Pytest fixtures for blackjack round tests."""

import pytest
from random import Random

from blackjack.cards import Card, Deck, StackedDeck, Rank, Suit
from blackjack.hand import Hand
from blackjack.game import Dealer, EventEmitter, Player


def cards(*card_strs: str) -> list[Card]:
    """Build a card list from strings such as 'AS', '10H'."""
    return [Card.from_string(s) for s in card_strs]


def make_hand(*card_strs: str) -> Hand:
    return Hand(cards(*card_strs))


def make_player(name: str, *card_strs: str) -> Player:
    """A player dealt the first two cards, hitting the rest."""
    player = Player(name, cards(*card_strs[:2]))
    for card in cards(*card_strs[2:]):
        player.hit(card)
    return player


def make_dealer(*card_strs: str) -> Dealer:
    """A dealer dealt the first two cards, hitting the rest."""
    dealer = Dealer(cards(*card_strs[:2]))
    for card in cards(*card_strs[2:]):
        dealer.hit(card)
    return dealer


DUMMY_CARD = Card(Rank.TWO, Suit.CLUBS)


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    return Deck(rng=rng)


@pytest.fixture
def dummy_deck():
    """A stacked deck of low cards, enough for a full table."""
    return StackedDeck([DUMMY_CARD] * 20)


@pytest.fixture
def emitter():
    return EventEmitter()


@pytest.fixture
def empty_hand():
    """An empty hand."""
    return Hand()


@pytest.fixture
def blackjack_hand():
    """A natural blackjack hand."""
    return make_hand("AS", "KH")


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    return make_hand("AS", "6H")


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    return make_hand("10S", "6H")


@pytest.fixture
def bust_hand():
    """A busted hand."""
    return make_hand("10S", "6H", "KC")
