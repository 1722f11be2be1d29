"""Tests for the publish state machine."""

from __future__ import annotations

import pytest

from orchestrator.state_machine import InvalidTransition, PublishStateMachine
from schemas.workspace import PublishState


def test_starts_idle() -> None:
    machine = PublishStateMachine()

    assert machine.is_idle()
    assert machine.path() == [PublishState.IDLE]


def test_happy_path() -> None:
    machine = PublishStateMachine()
    machine.transition(PublishState.PUBLISHING)
    machine.transition(PublishState.SUCCEEDED)
    machine.finish()

    assert machine.path() == [
        PublishState.IDLE,
        PublishState.PUBLISHING,
        PublishState.SUCCEEDED,
        PublishState.IDLE,
    ]
    assert machine.summary() == {"state": "idle", "attempts": 1, "succeeded": 1, "failed": 0}


def test_finish_from_publishing_records_failure() -> None:
    machine = PublishStateMachine()
    machine.transition(PublishState.PUBLISHING)
    machine.finish()

    assert machine.path()[-2:] == [PublishState.FAILED, PublishState.IDLE]
    assert machine.summary()["failed"] == 1


def test_finish_when_idle_is_noop() -> None:
    machine = PublishStateMachine()
    machine.finish()

    assert machine.history == []


@pytest.mark.parametrize(
    "target",
    [PublishState.SUCCEEDED, PublishState.FAILED, PublishState.IDLE],
)
def test_idle_only_moves_to_publishing(target) -> None:
    machine = PublishStateMachine()

    assert not machine.can_transition(target)
    with pytest.raises(InvalidTransition):
        machine.transition(target)


def test_cannot_start_second_attempt_while_publishing() -> None:
    machine = PublishStateMachine()
    machine.transition(PublishState.PUBLISHING)

    assert not machine.can_transition(PublishState.PUBLISHING)
    assert not machine.is_idle()
