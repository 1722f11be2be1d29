"""User-facing notices (toasts)."""

from rich.console import Console


class Notifier:
    """Collects notices shown to the user.

    The base class only records them; subclasses also render them.
    """

    def __init__(self) -> None:
        self.history: list[str] = []

    def notify(self, message: str) -> None:
        self.history.append(message)
        self._show(message)

    def _show(self, message: str) -> None:
        pass

    @property
    def last(self) -> str | None:
        return self.history[-1] if self.history else None


class ConsoleNotifier(Notifier):
    """Renders notices on a rich console."""

    def __init__(self, console: Console | None = None) -> None:
        super().__init__()
        self.console = console or Console()

    def _show(self, message: str) -> None:
        self.console.print(f"[cyan]●[/cyan] {message}")
