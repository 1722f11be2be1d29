"""Tests for configuration loading."""

from __future__ import annotations

import pytest

import settings.config as config_module
from settings.config import (
    Config,
    _float_or_none,
    find_config_file,
    get_config,
    load_config,
    reload_config,
)

ENV_VARS = ["WORKSPACE_API_URL", "WORKSPACE_API_TIMEOUT", "WORKSPACE_PROJECT_ID", "LOG_LEVEL"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    config = Config()

    assert config.api.publish_path == "/api/github-publish"
    assert config.publish.default_branch == "main"
    assert config.editor.template == "react"
    assert config.project_id is None


def test_load_from_toml(tmp_path) -> None:
    path = tmp_path / "workspace.toml"
    path.write_text(
        '[api]\nbase_url = "https://studio.example"\ntimeout = 5\n\n'
        '[publish]\ndefault_branch = "trunk"\n\n'
        '[editor.default_files]\n"/App.js" = "export default 1"\n'
    )

    config = load_config(path)

    assert config.api.base_url == "https://studio.example"
    assert config.api.timeout == 5
    assert config.api.projects_path == "/api/projects"
    assert config.publish.default_branch == "trunk"
    assert config.editor.default_files == {"/App.js": "export default 1"}


def test_env_overrides_file(tmp_path, monkeypatch) -> None:
    path = tmp_path / "workspace.toml"
    path.write_text('[api]\nbase_url = "https://file.example"\n')
    monkeypatch.setenv("WORKSPACE_API_URL", "https://env.example")
    monkeypatch.setenv("WORKSPACE_API_TIMEOUT", "12.5")
    monkeypatch.setenv("WORKSPACE_PROJECT_ID", "p9")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = load_config(path)

    assert config.api.base_url == "https://env.example"
    assert config.api.timeout == 12.5
    assert config.project_id == "p9"
    assert config.logging.level == "debug"


def test_invalid_timeout_env_is_ignored(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("WORKSPACE_API_TIMEOUT", "soon")

    config = load_config(tmp_path / "missing.toml")

    assert config.api.timeout == 60.0


def test_find_config_file_walks_parents(tmp_path, monkeypatch) -> None:
    (tmp_path / "workspace.toml").write_text("")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    monkeypatch.chdir(nested)

    assert find_config_file() == tmp_path / "workspace.toml"


@pytest.mark.parametrize(
    "value,expected",
    [(None, None), ("3", 3.0), ("0.5", 0.5), ("", None), ("abc", None)],
)
def test_float_or_none(value, expected) -> None:
    assert _float_or_none(value) == expected


def test_get_config_is_cached_until_reload(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(config_module, "_config", None)

    first = get_config()
    assert get_config() is first

    monkeypatch.setenv("WORKSPACE_PROJECT_ID", "p7")
    assert get_config().project_id is None
    assert reload_config().project_id == "p7"
    assert get_config().project_id == "p7"
