"""Configuration management for workspace publishing.

Loads configuration from:
1. workspace.toml (defaults)
2. Environment variables (overrides)
"""

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from dotenv import load_dotenv

# Load .env file if present
load_dotenv()

CONFIG_FILENAME = "workspace.toml"


@dataclass
class ApiConfig:
    """Backend API configuration."""

    base_url: str = "http://localhost:3000"
    publish_path: str = "/api/github-publish"
    projects_path: str = "/api/projects"
    timeout: float = 60.0


@dataclass
class PublishConfig:
    """Publish behaviour configuration."""

    # {id} is replaced with the project id, or a session timestamp if none
    fallback_name_template: str = "ai-workspace-{id}"
    default_branch: str = "main"


@dataclass
class EditorConfig:
    """Embedded editor configuration (handed over as-is)."""

    template: str = "react"
    external_resources: list[str] = field(
        default_factory=lambda: ["https://cdn.tailwindcss.com"]
    )
    dependencies: dict[str, str] = field(
        default_factory=lambda: {
            "postcss": "^8",
            "tailwindcss": "^3.4.1",
            "autoprefixer": "^10.0.0",
            "lucide-react": "latest",
        }
    )
    # Initial file set shown before any project files arrive
    default_files: dict[str, str] = field(default_factory=dict)


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"


@dataclass
class Config:
    """Main configuration container."""

    api: ApiConfig = field(default_factory=ApiConfig)
    publish: PublishConfig = field(default_factory=PublishConfig)
    editor: EditorConfig = field(default_factory=EditorConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    project_id: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        """Create Config from dictionary."""
        return cls(
            api=ApiConfig(**data.get("api", {})),
            publish=PublishConfig(**data.get("publish", {})),
            editor=EditorConfig(**data.get("editor", {})),
            logging=LoggingConfig(**data.get("logging", {})),
            project_id=data.get("project_id") or None,
        )


def find_config_file() -> Path | None:
    """Find workspace.toml in current or parent directories.

    Returns:
        Path to workspace.toml or None if not found.
    """
    current = Path.cwd()

    for directory in [current, *current.parents]:
        config_path = directory / CONFIG_FILENAME
        if config_path.exists():
            return config_path

    return None


def _float_or_none(value: str | None) -> float | None:
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None


# env var -> (section, key, converter); unset or unparsable values are skipped
ENV_OVERRIDES: dict[str, tuple[str, str, Callable[[str], Any]]] = {
    "WORKSPACE_API_URL": ("api", "base_url", str),
    "WORKSPACE_API_TIMEOUT": ("api", "timeout", _float_or_none),
    "LOG_LEVEL": ("logging", "level", str),
}


def _apply_env(config_data: dict[str, Any]) -> dict[str, Any]:
    for env_var, (section, key, convert) in ENV_OVERRIDES.items():
        raw = os.getenv(env_var)
        if raw is None:
            continue
        value = convert(raw)
        if value is not None:
            config_data.setdefault(section, {})[key] = value

    project_id = os.getenv("WORKSPACE_PROJECT_ID")
    if project_id:
        config_data["project_id"] = project_id
    return config_data


def load_config(config_path: Path | str | None = None) -> Config:
    """Load workspace.toml (explicit path or discovered) plus env overrides.

    A missing file is not an error; defaults apply.
    """
    path = Path(config_path) if config_path is not None else find_config_file()

    config_data: dict[str, Any] = {}
    if path is not None and path.is_file():
        with open(path, "rb") as f:
            config_data = tomllib.load(f)

    return Config.from_dict(_apply_env(config_data))


_config: Config | None = None


def get_config() -> Config:
    """Process-wide config, loaded on first use."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config() -> Config:
    """Re-read workspace.toml and the environment."""
    global _config
    _config = load_config()
    return _config
