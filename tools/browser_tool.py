"""Browser tool for opening repository URLs."""

import webbrowser
from typing import Callable

from .base import BaseTool, ToolResult, ToolStatus


class BrowserTool(BaseTool):
    """Opens URLs in the user's browser (new tab where supported)."""

    name = "browser"
    description = "Open URLs in a browser"

    def operations(self) -> dict[str, Callable[..., ToolResult]]:
        return {"open": self._open}

    def _open(self, url: str) -> ToolResult:
        opened = webbrowser.open(url, new=2)
        if not opened:
            return ToolResult(status=ToolStatus.FAILURE, error=f"No browser could open {url}")
        return ToolResult(status=ToolStatus.SUCCESS, output={"url": url})
