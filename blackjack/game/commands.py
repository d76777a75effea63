"""Player decisions and the tokens that spell them."""

from enum import Enum

from blackjack.exceptions import ValidationError


class Command(Enum):
    """A player's decision on their turn."""

    HIT = "y"
    STAY = "n"

    @classmethod
    def from_token(cls, token: str) -> "Command":
        """
        Parse a console answer such as 'y' or 'n'.

        Also accepts the command names themselves ('hit', 'stay'),
        ignoring case and surrounding whitespace.
        """
        normalized = token.strip().lower() if isinstance(token, str) else ""
        for command in cls:
            if normalized in (command.value, command.name.lower()):
                return command
        raise ValidationError(
            "Answer with 'y' to hit or 'n' to stay", {"token": token}
        )

    def __str__(self) -> str:
        return self.name.lower()
