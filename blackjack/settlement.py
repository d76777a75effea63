"""
Settlement: outcome classification and dividend calculation.

Classification precedence (highest to lowest):
    1. Player bust              → player loses, even if the dealer busts too
    2. Player blackjack only    → player wins 1.5x
    3. Dealer bust              → player wins
    4. Dealer blackjack only    → player loses
    5. Total comparison         → higher total wins, equal totals push

Dividends are signed from the player's side: +N means the house pays N.
"""

import logging
from decimal import ROUND_FLOOR, Decimal
from typing import TYPE_CHECKING, Iterable

from blackjack.hand import Hand
from blackjack.outcome import Outcome
from blackjack.schemas import DealerResult, HandSchema, PlayerResult, SettlementReport

if TYPE_CHECKING:
    from blackjack.game.participants import Dealer, Player

logger = logging.getLogger(__name__)


def classify(player_hand: Hand, dealer_hand: Hand) -> Outcome:
    """Compare a player's final hand with the dealer's."""
    if player_hand.is_busted:
        return Outcome.BUST_LOSE

    player_bj = player_hand.is_blackjack
    dealer_bj = dealer_hand.is_blackjack

    if player_bj and not dealer_bj:
        return Outcome.BLACKJACK_WIN
    if dealer_hand.is_busted:
        return Outcome.WIN
    if dealer_bj and not player_bj:
        return Outcome.LOSE

    player_value = player_hand.value
    dealer_value = dealer_hand.value
    if player_value > dealer_value:
        return Outcome.WIN
    if player_value < dealer_value:
        return Outcome.LOSE
    return Outcome.PUSH


def calculate_dividend(bet: int | None, outcome: Outcome) -> int:
    """
    Signed payout for a bet, rounded down to a whole amount.

    Examples:
        >>> calculate_dividend(15, Outcome.BLACKJACK_WIN)
        22
        >>> calculate_dividend(1000, Outcome.BUST_LOSE)
        -1000
        >>> calculate_dividend(None, Outcome.WIN)
        0
    """
    amount = Decimal(bet or 0) * outcome.multiplier
    return int(amount.to_integral_value(rounding=ROUND_FLOOR))


def settle(players: Iterable["Player"], dealer: "Dealer") -> SettlementReport:
    """Settle every player against the dealer, in seating order."""
    results = []
    for player in players:
        outcome = classify(player.hand, dealer.hand)
        bet = player.bet_amount or 0
        results.append(
            PlayerResult(
                name=player.name,
                outcome=outcome,
                bet=bet,
                dividend=calculate_dividend(bet, outcome),
                hand=HandSchema.from_hand(player.hand),
            )
        )
        logger.debug("%s: %s (%d)", player.name, outcome.label, results[-1].dividend)

    dealer_result = DealerResult(
        outcomes=[result.outcome.reverse() for result in results],
        dividend=-sum(result.dividend for result in results),
        hand=HandSchema.from_hand(dealer.hand),
    )
    return SettlementReport(players=results, dealer=dealer_result)
