"""Base interface for side-effecting workspace collaborators."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable


class ToolStatus(Enum):
    """How a collaborator call ended."""

    SUCCESS = "success"
    FAILURE = "failure"
    TIMEOUT = "timeout"


@dataclass
class ToolResult:
    """Outcome of one collaborator call. Falsy unless it succeeded."""

    status: ToolStatus
    output: Any = None
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.status == ToolStatus.SUCCESS

    def __bool__(self) -> bool:
        return self.success


class BaseTool(ABC):
    """Wraps a side effect outside the session (clipboard, browser).

    Subclasses publish their operations as a name -> handler table.
    execute() never raises: unknown operations and handler errors come
    back as failed results.
    """

    name: str = "tool"
    description: str = ""

    @abstractmethod
    def operations(self) -> dict[str, Callable[..., ToolResult]]:
        """Handlers by operation name."""
        ...

    def execute(self, operation: str, **kwargs: Any) -> ToolResult:
        """Run ``operation`` with its keyword arguments.

        Returns:
            The handler's result, or a FAILURE result
        """
        handlers = self.operations()
        handler = handlers.get(operation)
        if handler is None:
            return ToolResult(
                status=ToolStatus.FAILURE,
                error=f"Unknown operation: {operation}. Available: {sorted(handlers)}",
            )

        try:
            return handler(**kwargs)
        except Exception as e:
            return ToolResult(status=ToolStatus.FAILURE, error=f"{self.name}.{operation}: {e}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"
