"""Tools module for workspace collaborators.

Provides side-effect abstractions for:
- Clipboard writes (platform copy command)
- Opening URLs in a browser
- User-facing notices
"""

from .base import BaseTool, ToolResult, ToolStatus
from .browser_tool import BrowserTool
from .clipboard_tool import ClipboardTool
from .notifier import ConsoleNotifier, Notifier

__all__ = [
    "BaseTool",
    "ToolResult",
    "ToolStatus",
    "BrowserTool",
    "ClipboardTool",
    "ConsoleNotifier",
    "Notifier",
]
