"""The turn queue: players seated in order with a rotating cursor."""

from typing import Callable, Iterator, Sequence

from blackjack.exceptions import ValidationError
from blackjack.game.participants import Player

MIN_PLAYERS = 1
MAX_PLAYERS = 7

PlayerPredicate = Callable[[Player], bool]


class PlayerSet:
    """
    Players in seating order plus the index of whose turn it is.

    The seating order never changes; turns move by advancing the cursor
    and wrap around after the last seat.
    """

    def __init__(self, players: Sequence[Player]) -> None:
        self.validate_names([player.name for player in players])
        self._players: tuple[Player, ...] = tuple(players)
        self._cursor = 0

    @staticmethod
    def validate_names(names: Sequence[str]) -> None:
        """
        Check a table's names before anything is dealt.

        Raises:
            ValidationError: On a blank name, a player count outside 1-7,
                or a repeated name
        """
        stripped = [name.strip() if isinstance(name, str) else "" for name in names]
        if any(not name for name in stripped):
            raise ValidationError("Player names must not be blank", {"names": list(names)})

        distinct = len(set(stripped))
        if distinct < MIN_PLAYERS or distinct > MAX_PLAYERS:
            raise ValidationError(
                f"The number of players must be between {MIN_PLAYERS} and {MAX_PLAYERS}",
                {"players": distinct},
            )
        if distinct != len(stripped):
            raise ValidationError(
                "Player names must be unique", {"names": stripped}
            )

    @property
    def current_turn(self) -> Player:
        """The player whose turn it is, without moving the cursor."""
        return self._players[self._cursor]

    def advance(self) -> None:
        """Pass the turn to the next seat."""
        self._cursor = (self._cursor + 1) % len(self._players)

    def advance_until(self, predicate: PlayerPredicate) -> bool:
        """
        Pass the turn until the current player satisfies ``predicate``.

        Rotates at most once around the table. When nobody satisfies the
        predicate the cursor ends on the seat it started from.

        Returns:
            True if the current player satisfies the predicate
        """
        for _ in range(len(self._players)):
            if predicate(self.current_turn):
                return True
            self.advance()
        return predicate(self.current_turn)

    def any_satisfies(self, predicate: PlayerPredicate) -> bool:
        return any(predicate(player) for player in self._players)

    def bet_current_and_advance(self, amount: int) -> Player:
        """Place the current player's bet, then pass the turn."""
        player = self.current_turn
        player.bet(amount)
        self.advance()
        return player

    def find(self, name: str) -> Player:
        for player in self._players:
            if player.name == name:
                return player
        raise KeyError(name)

    def to_list(self) -> list[Player]:
        """Players in seating order."""
        return list(self._players)

    def __len__(self) -> int:
        return len(self._players)

    def __iter__(self) -> Iterator[Player]:
        return iter(self._players)
