"""Orchestrator module for workspace publishing.

State machine-based publish orchestration with:
- Explicit Idle/Publishing/Succeeded/Failed transitions
- Rejection of triggers while an attempt is in flight
- Synchronous branch confirmation prompts
"""

from .state_machine import InvalidTransition, PublishStateMachine, Transition
from .coordinator import PublishCoordinator, PublishOutcome
from .checkpoints import BranchPrompt

__all__ = [
    "InvalidTransition",
    "PublishStateMachine",
    "Transition",
    "PublishCoordinator",
    "PublishOutcome",
    "BranchPrompt",
]
