"""Participant state enumeration."""

from enum import Enum, auto


class ParticipantState(Enum):
    """
    Participant state machine states.

    Flow: ACTIVE → STAYED (voluntary stop) or ACTIVE → BUSTED (forced stop)
    """

    # Still deciding
    ACTIVE = auto()

    # Chose to stop drawing
    STAYED = auto()

    # Hand went over 21
    BUSTED = auto()

    def __str__(self) -> str:
        return self.name.title()


# Valid state transitions
VALID_TRANSITIONS: dict[ParticipantState, list[ParticipantState]] = {
    ParticipantState.ACTIVE: [ParticipantState.STAYED, ParticipantState.BUSTED],
    ParticipantState.STAYED: [],  # Terminal state
    ParticipantState.BUSTED: [],  # Terminal state
}


def is_valid_transition(from_state: ParticipantState, to_state: ParticipantState) -> bool:
    """
    Check if a state transition is valid.

    Args:
        from_state: Current state
        to_state: Desired state

    Returns:
        True if the transition is allowed
    """
    return to_state in VALID_TRANSITIONS.get(from_state, [])
