"""System clipboard tool."""

import shutil
import subprocess
import sys
from typing import Callable

from .base import BaseTool, ToolResult, ToolStatus

# First available command wins
CLIPBOARD_COMMANDS: list[list[str]] = [
    ["pbcopy"],
    ["wl-copy"],
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
]


class ClipboardTool(BaseTool):
    """Copies text to the system clipboard through a platform command."""

    name = "clipboard"
    description = "System clipboard writes"

    def __init__(self, command: list[str] | None = None, timeout: int = 5) -> None:
        """Initialize clipboard tool.

        Args:
            command: Explicit copy command (default: detect per platform)
            timeout: Command timeout in seconds
        """
        self.command = command
        self.timeout = timeout

    def operations(self) -> dict[str, Callable[..., ToolResult]]:
        return {"copy": self._copy}

    def _detect_command(self) -> list[str] | None:
        if self.command:
            return self.command
        if sys.platform == "win32":
            return ["clip"]
        for candidate in CLIPBOARD_COMMANDS:
            if shutil.which(candidate[0]):
                return candidate
        return None

    def _copy(self, text: str) -> ToolResult:
        command = self._detect_command()
        if command is None:
            return ToolResult(status=ToolStatus.FAILURE, error="No clipboard command available")

        try:
            subprocess.run(
                command,
                input=text,
                text=True,
                check=True,
                capture_output=True,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired:
            return ToolResult(
                status=ToolStatus.TIMEOUT,
                error=f"Clipboard command timed out after {self.timeout}s",
            )
        except (subprocess.CalledProcessError, OSError) as e:
            return ToolResult(status=ToolStatus.FAILURE, error=str(e))

        return ToolResult(status=ToolStatus.SUCCESS, output={"command": command[0]})
