"""State machine for publish attempts."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from schemas.workspace import PublishState


@dataclass
class Transition:
    """Defines a valid state transition."""

    from_state: PublishState
    to_state: PublishState


@dataclass
class TransitionRecord:
    """One transition that actually happened."""

    from_state: PublishState
    to_state: PublishState
    at: datetime = field(default_factory=datetime.now)


class InvalidTransition(RuntimeError):
    """Raised when a transition is not in the table."""


class PublishStateMachine:
    """State machine for a session's publish attempts.

    Idle -> Publishing -> (Succeeded | Failed) -> Idle

    A new attempt may only start from Idle; callers use is_idle() to
    reject triggers while an attempt is in flight.
    """

    TRANSITIONS: list[Transition] = [
        Transition(PublishState.IDLE, PublishState.PUBLISHING),
        Transition(PublishState.PUBLISHING, PublishState.SUCCEEDED),
        Transition(PublishState.PUBLISHING, PublishState.FAILED),
        Transition(PublishState.SUCCEEDED, PublishState.IDLE),
        Transition(PublishState.FAILED, PublishState.IDLE),
    ]

    def __init__(self) -> None:
        self.state = PublishState.IDLE
        self.history: list[TransitionRecord] = []

        # Build transition map for quick lookup
        self._transition_map: dict[PublishState, list[PublishState]] = {}
        for t in self.TRANSITIONS:
            self._transition_map.setdefault(t.from_state, []).append(t.to_state)

    def can_transition(self, to_state: PublishState) -> bool:
        return to_state in self._transition_map.get(self.state, [])

    def transition(self, to_state: PublishState) -> None:
        """Move to ``to_state``.

        Raises:
            InvalidTransition: If the move is not in the table
        """
        if not self.can_transition(to_state):
            raise InvalidTransition(f"{self.state.value} -> {to_state.value}")

        previous = self.state
        self.state = to_state
        self.history.append(TransitionRecord(previous, to_state))

    def finish(self) -> None:
        """Return to Idle from wherever the attempt ended.

        An attempt interrupted while Publishing is recorded as Failed
        first so every attempt ends in a terminal state.
        """
        if self.state == PublishState.PUBLISHING:
            self.transition(PublishState.FAILED)
        if self.state != PublishState.IDLE:
            self.transition(PublishState.IDLE)

    def is_idle(self) -> bool:
        return self.state == PublishState.IDLE

    def path(self) -> list[PublishState]:
        """States visited, starting from the first recorded origin."""
        if not self.history:
            return [self.state]
        return [self.history[0].from_state] + [r.to_state for r in self.history]

    def summary(self) -> dict[str, Any]:
        attempts = sum(1 for r in self.history if r.to_state == PublishState.PUBLISHING)
        succeeded = sum(1 for r in self.history if r.to_state == PublishState.SUCCEEDED)
        failed = sum(1 for r in self.history if r.to_state == PublishState.FAILED)
        return {
            "state": self.state.value,
            "attempts": attempts,
            "succeeded": succeeded,
            "failed": failed,
        }
