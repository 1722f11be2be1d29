"""Settings for workspace publishing."""

from .config import Config, find_config_file, get_config, load_config, reload_config

__all__ = ["Config", "find_config_file", "get_config", "load_config", "reload_config"]
