"""
Console driver: plays one round at the terminal.

Usage:
    blackjack-round
    blackjack-round --seed 7 --no-betting
    blackjack-round --log-level DEBUG
"""

import logging
from random import Random
from typing import Callable, TypeVar

import click

from blackjack.cards import Deck
from blackjack.exceptions import BlackjackError, ValidationError
from blackjack.game import Command, Participant, Round
from blackjack.logging_utils import setup_logging
from blackjack.schemas import SettlementReport
from config import config

logger = logging.getLogger(__name__)

T = TypeVar("T")


def prompt_until_valid(
    text: str,
    parse: Callable[[str], T],
    max_attempts: int | None = None,
) -> T:
    """
    Prompt until ``parse`` accepts the answer.

    Each ValidationError is shown and the question asked again. With
    ``max_attempts`` set, giving that many bad answers aborts the program.
    """
    attempts = 0
    while True:
        attempts += 1
        raw = click.prompt(text, default="", show_default=False)
        try:
            return parse(raw)
        except ValidationError as exc:
            click.echo(f"[ERROR] {exc.message}")
            logger.debug("Rejected answer %r: %s", raw, exc.details)
            if max_attempts is not None and attempts >= max_attempts:
                raise click.ClickException(
                    f"Giving up after {attempts} invalid answers"
                ) from exc


def parse_names(raw: str) -> list[str]:
    return [name.strip() for name in raw.split(",")]


def parse_bet(raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ValidationError("Bet must be a whole number", {"bet": raw}) from exc


def format_cards(participant: Participant) -> str:
    cards = ", ".join(str(card) for card in participant.hand)
    return f"{participant.display_name}: {cards}"


def format_total(participant: Participant) -> str:
    return f"{format_cards(participant)} - total: {participant.value}"


def format_dividend(amount: int) -> str:
    return f"{amount:+d}"


def echo_initial_deal(round_: Round) -> None:
    names = ", ".join(player.name for player in round_.players)
    click.echo(f"\nDealt two cards each to the dealer and {names}.")
    click.echo(f"Dealer: {round_.dealer.hand.cards[0]}")
    for player in round_.players:
        click.echo(format_cards(player))
    click.echo()


def echo_results(round_: Round, report: SettlementReport, betting: bool) -> None:
    click.echo()
    click.echo(format_total(round_.dealer))
    for player in round_.players:
        click.echo(format_total(player))

    click.echo("\n## Final results")
    if betting:
        click.echo(f"Dealer: {format_dividend(report.dealer.dividend)}")
        for result in report.players:
            click.echo(f"{result.name}: {result.label} {format_dividend(result.dividend)}")
        return

    tally = " ".join(f"{count} {label}" for label, count in report.dealer.tally.items())
    click.echo(f"Dealer: {tally}")
    for result in report.players:
        click.echo(f"{result.name}: {result.label}")


def play_round(
    deck: Deck,
    betting: bool = True,
    max_attempts: int | None = None,
) -> SettlementReport:
    """Drive a full round through the console and return its settlement."""
    round_ = prompt_until_valid(
        "Enter player names, separated by commas",
        lambda raw: Round(parse_names(raw), deck=deck),
        max_attempts,
    )

    if betting:
        while round_.betting_phase_active():
            name = round_.next_bettor_name()
            prompt_until_valid(
                f"How much does {name} bet?",
                lambda raw: round_.place_bet(parse_bet(raw)),
                max_attempts,
            )

    echo_initial_deal(round_)

    while round_.player_phase_active():
        name = round_.current_actionable_player_name()
        command = prompt_until_valid(
            f"{name}, take another card? (y/n)",
            Command.from_token,
            max_attempts,
        )
        round_.apply_command(command)
        click.echo(format_cards(round_.current_player))

    click.echo()
    while round_.dealer_can_draw():
        round_.dealer_draw()
        click.echo("Dealer has 16 or less and takes another card.")

    report = round_.settlement()
    echo_results(round_, report, betting)
    return report


@click.command()
@click.option("--seed", type=int, default=config.table.seed, help="Seed for a reproducible shuffle")
@click.option(
    "--betting/--no-betting",
    default=config.table.betting_enabled,
    help="Ask each player for a bet before the deal",
)
@click.option("--log-level", default=None, help="Override LOG_LEVEL (DEBUG, INFO, ...)")
def main(seed: int | None, betting: bool, log_level: str | None) -> None:
    """Play one round of blackjack against the dealer."""
    setup_logging(log_level)
    deck = Deck(rng=Random(seed)) if seed is not None else Deck()

    try:
        play_round(deck, betting=betting, max_attempts=config.table.max_prompt_attempts)
    except BlackjackError as exc:
        logger.error("Round aborted: %s", exc.message)
        raise click.ClickException(exc.message) from exc


if __name__ == "__main__":
    main()
