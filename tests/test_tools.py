"""Tests for the clipboard and browser tools."""

from __future__ import annotations

import sys

import tools.browser_tool as browser_tool
from tools.base import ToolStatus
from tools.browser_tool import BrowserTool
from tools.clipboard_tool import ClipboardTool
from tools.notifier import Notifier


def test_unknown_operation_fails() -> None:
    result = ClipboardTool().execute("paste")

    assert result.status == ToolStatus.FAILURE
    assert "Unknown operation" in result.error
    assert not result


def test_clipboard_runs_explicit_command() -> None:
    tool = ClipboardTool(command=[sys.executable, "-c", "import sys; sys.stdin.read()"])

    result = tool.execute("copy", text="https://github.com/acme/app")

    assert result.success
    assert result.output == {"command": sys.executable}


def test_clipboard_command_failure_is_reported() -> None:
    tool = ClipboardTool(command=[sys.executable, "-c", "raise SystemExit(3)"])

    result = tool.execute("copy", text="x")

    assert result.status == ToolStatus.FAILURE


def test_clipboard_missing_command_is_reported() -> None:
    tool = ClipboardTool(command=["definitely-not-a-clipboard-command"])

    result = tool.execute("copy", text="x")

    assert result.status == ToolStatus.FAILURE


def test_browser_opens_in_new_tab(monkeypatch) -> None:
    calls = []
    monkeypatch.setattr(
        browser_tool.webbrowser, "open", lambda url, new=0: calls.append((url, new)) or True
    )

    result = BrowserTool().execute("open", url="https://github.com/acme/app")

    assert result.success
    assert calls == [("https://github.com/acme/app", 2)]


def test_browser_reports_when_nothing_opened(monkeypatch) -> None:
    monkeypatch.setattr(browser_tool.webbrowser, "open", lambda url, new=0: False)

    result = BrowserTool().execute("open", url="https://github.com/acme/app")

    assert result.status == ToolStatus.FAILURE


def test_notifier_keeps_history() -> None:
    notifier = Notifier()
    assert notifier.last is None

    notifier.notify("one")
    notifier.notify("two")

    assert notifier.history == ["one", "two"]
    assert notifier.last == "two"
