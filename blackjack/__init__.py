"""Blackjack round engine - turns, hand values, and settlement."""

from blackjack.cards import Card, Deck, StackedDeck, Rank, Suit
from blackjack.hand import Hand
from blackjack.outcome import Outcome
from blackjack.exceptions import (
    BlackjackError,
    DeckExhaustedError,
    IllegalStateError,
    ValidationError,
)
from blackjack.game import Command, Dealer, Player, PlayerSet, Round

__all__ = [
    "Card",
    "Deck",
    "StackedDeck",
    "Rank",
    "Suit",
    "Hand",
    "Outcome",
    "BlackjackError",
    "DeckExhaustedError",
    "IllegalStateError",
    "ValidationError",
    "Command",
    "Dealer",
    "Player",
    "PlayerSet",
    "Round",
]
