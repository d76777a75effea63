"""A single blackjack round: deal, turns, dealer play, and settlement."""

import logging
from typing import Callable, Sequence

from blackjack.cards import Card, Deck
from blackjack.exceptions import IllegalStateError
from blackjack.game.commands import Command
from blackjack.game.events import EventEmitter, EventType, GameEvent
from blackjack.game.participants import Dealer, Participant, Player
from blackjack.game.players import PlayerSet
from blackjack.schemas import SettlementReport
from blackjack.settlement import settle

logger = logging.getLogger(__name__)


class Round:
    """
    One round for up to seven players against the dealer.

    This is the engine's outward face: it owns the deck, the turn queue and
    the dealer, and reports progress through events and return values only.
    """

    def __init__(
        self,
        names: Sequence[str],
        deck: Deck | None = None,
        events: EventEmitter | None = None,
    ) -> None:
        """
        Validate the table and deal the opening hands.

        Players are dealt two cards each in seating order, then the dealer.

        Args:
            names: Player names in seating order
            deck: Card source (a freshly shuffled deck if not provided)
            events: Emitter to report to (a new one if not provided)

        Raises:
            ValidationError: If the names are blank, repeated, or not 1-7
        """
        PlayerSet.validate_names(names)

        self.deck = deck if deck is not None else Deck()
        self.events = events if events is not None else EventEmitter()

        self.players = PlayerSet([Player(name, self.deck.initial_draw()) for name in names])
        self.dealer = Dealer(self.deck.initial_draw())
        self._dealer_finished = False

        for player in self.players:
            self._report_deal(player)
            if player.hand.is_blackjack:
                self.events.emit_new(EventType.PLAYER_BLACKJACK, player=player.name)
        self._report_deal(self.dealer)

        self.events.emit_new(
            EventType.ROUND_STARTED,
            players=[player.name for player in self.players],
        )
        logger.info("Round started with %d player(s)", len(self.players))

    @classmethod
    def create(
        cls,
        names: Sequence[str],
        deck: Deck | None = None,
        events: EventEmitter | None = None,
    ) -> "Round":
        return cls(names, deck=deck, events=events)

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to round events."""
        self.events.subscribe(handler, event_type)

    @property
    def current_player(self) -> Player:
        return self.players.current_turn

    # Betting phase

    def betting_phase_active(self) -> bool:
        return self.players.any_satisfies(lambda player: player.is_able_to_bet)

    def next_bettor_name(self) -> str:
        """Move the turn to the next player without a bet and return their name."""
        self.players.advance_until(lambda player: player.is_able_to_bet)
        return self.current_player.name

    def place_bet(self, amount: int) -> None:
        """
        Bet for the current player and pass the turn.

        Raises:
            ValidationError: If the amount is negative or not an integer
            IllegalStateError: If the current player already bet
        """
        player = self.players.bet_current_and_advance(amount)
        self.events.emit_new(EventType.BET_PLACED, player=player.name, amount=amount)
        logger.debug("%s bets %d", player.name, amount)

    # Player phase

    def player_phase_active(self) -> bool:
        """Whether any player can still hit or stay."""
        return self.players.any_satisfies(lambda player: player.is_able_to_hit)

    def current_actionable_player_name(self) -> str:
        """
        Move the turn to the next player who can act and return their name.

        The current player keeps the turn until they stay or bust. If nobody
        can act, the turn ends where it began.
        """
        self.players.advance_until(lambda player: player.is_able_to_hit)
        return self.current_player.name

    def apply_command(self, command: Command | str) -> None:
        """
        Apply HIT or STAY to the current player.

        Args:
            command: A Command, or a token such as 'y' / 'n'

        Raises:
            ValidationError: If a token cannot be parsed
            IllegalStateError: If the current player can no longer act
        """
        if not isinstance(command, Command):
            command = Command.from_token(command)

        player = self.current_player
        if command is Command.HIT:
            self._hit(player)
        else:
            player.stay()
            self.events.emit_new(
                EventType.PLAYER_STAY, player=player.name, hand_value=player.value
            )
            logger.debug("%s stays on %d", player.name, player.value)

    def _hit(self, player: Player) -> None:
        if not player.is_able_to_hit:
            raise IllegalStateError(
                f"{player.name} cannot take another card while {player.state}",
                {"state": player.state.name},
            )
        card = self._deal_card_to(player)
        self.events.emit_new(EventType.PLAYER_HIT, player=player.name, hand_value=player.value)
        logger.debug("%s hits %s for %d", player.name, card, player.value)

        if player.hand.is_busted:
            self.events.emit_new(EventType.PLAYER_BUSTS, player=player.name, hand_value=player.value)

    # Dealer phase

    def dealer_can_draw(self) -> bool:
        return self.dealer.is_able_to_hit

    def dealer_draw(self) -> Card:
        """
        Draw one card for the dealer.

        Raises:
            IllegalStateError: If the dealer already stands on 17 or more
        """
        if not self.dealer.is_able_to_hit:
            raise IllegalStateError(
                "Dealer stands on 17 or more", {"value": self.dealer.value}
            )
        card = self._deal_card_to(self.dealer)
        self.events.emit_new(EventType.DEALER_HITS, hand_value=self.dealer.value)
        logger.debug("Dealer hits %s for %d", card, self.dealer.value)

        if not self.dealer.is_able_to_hit:
            self._finish_dealer()
        return card

    def play_dealer(self) -> int:
        """Draw for the dealer until it must stand; return the cards drawn."""
        drawn = 0
        while self.dealer_can_draw():
            self.dealer_draw()
            drawn += 1
        self._finish_dealer()
        return drawn

    def _finish_dealer(self) -> None:
        """Report once that the dealer stands or busts."""
        if self._dealer_finished or self.dealer.is_able_to_hit:
            return
        self._dealer_finished = True
        if self.dealer.hand.is_busted:
            self.events.emit_new(EventType.DEALER_BUSTS, hand_value=self.dealer.value)
        else:
            self.events.emit_new(EventType.DEALER_STANDS, hand_value=self.dealer.value)

    # Settlement

    def settlement(self) -> SettlementReport:
        """Settle every player against the dealer's current hand."""
        self._finish_dealer()
        report = settle(self.players, self.dealer)
        self.events.emit_new(
            EventType.ROUND_SETTLED,
            results=report.by_name(),
            dealer=report.dealer.tally,
        )
        logger.info(
            "Round settled: %s; dealer %s",
            ", ".join(f"{r.name} {r.label} {r.dividend:+d}" for r in report.players),
            report.dealer.tally,
        )
        return report

    def player_results(self) -> dict[str, tuple[str, int]]:
        """Each player's (outcome label, dividend)."""
        return settle(self.players, self.dealer).by_name()

    def dealer_results(self) -> list[str]:
        """The dealer's mirrored outcome label against each player."""
        return settle(self.players, self.dealer).dealer.labels

    def _deal_card_to(self, participant: Participant) -> Card:
        card = self.deck.draw()
        participant.hit(card)
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=str(card),
            hand=participant.display_name,
            hand_value=participant.value,
        )
        return card

    def _report_deal(self, participant: Participant) -> None:
        for card in participant.hand:
            self.events.emit_new(
                EventType.CARD_DEALT,
                card=str(card),
                hand=participant.display_name,
                hand_value=participant.value,
            )
