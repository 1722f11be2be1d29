"""Synchronous user confirmations (branch prompt)."""

from typing import Callable

from rich.console import Console
from rich.prompt import Prompt

# Receives the current value, returns the new one (None or "" = cancelled)
ConfirmCallback = Callable[[str], str | None]


class BranchPrompt:
    """Asks the user for a new target branch.

    Supports:
    - CLI prompts (blocking, rich)
    - A fixed answer (non-interactive runs)
    - Custom callbacks (any other UI surface)
    """

    def __init__(
        self,
        console: Console | None = None,
        answer: str | None = None,
        callback: ConfirmCallback | None = None,
    ) -> None:
        """Initialize branch prompt.

        Args:
            console: Rich console for the interactive prompt
            answer: If given, returned without prompting
            callback: Custom prompt handler
        """
        self.console = console or Console()
        self.answer = answer
        self.callback = callback

    def __call__(self, current_branch: str) -> str | None:
        if self.callback is not None:
            return self.callback(current_branch)
        if self.answer is not None:
            return self.answer

        try:
            return Prompt.ask(
                "Enter branch name",
                default=current_branch or "main",
                console=self.console,
            )
        except (EOFError, KeyboardInterrupt):
            self.console.print()
            return None
