from __future__ import annotations

from typing import Any

import pytest

from settings.config import Config
from tests._fixtures.fakes import SESSION_START, FakeBackend, FakeBrowser, FakeClipboard
from tools.notifier import Notifier
from workspace.session import WorkspaceSession


@pytest.fixture
def config() -> Config:
    return Config()


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def notifier() -> Notifier:
    return Notifier()


@pytest.fixture
def browser() -> FakeBrowser:
    return FakeBrowser()


@pytest.fixture
def clipboard() -> FakeClipboard:
    return FakeClipboard()


@pytest.fixture
def make_session(config, backend, notifier, browser, clipboard):
    """Build a started session against the fake backend."""

    async def _make(project_id: str | None = "p1", **kwargs: Any) -> WorkspaceSession:
        kwargs.setdefault("browser", browser)
        kwargs.setdefault("clipboard", clipboard)
        kwargs.setdefault("clock", lambda: SESSION_START)
        return await WorkspaceSession.start(
            config,
            project_id=project_id,
            notifier=notifier,
            transport=backend.transport,
            **kwargs,
        )

    return _make
