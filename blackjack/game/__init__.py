"""Round engine, participants, and turn management."""

from blackjack.game.events import GameEvent, EventType, EventEmitter
from blackjack.game.state import ParticipantState
from blackjack.game.participants import Participant, Player, Dealer
from blackjack.game.players import PlayerSet
from blackjack.game.commands import Command
from blackjack.game.round import Round

__all__ = [
    "GameEvent",
    "EventType",
    "EventEmitter",
    "ParticipantState",
    "Participant",
    "Player",
    "Dealer",
    "PlayerSet",
    "Command",
    "Round",
]
