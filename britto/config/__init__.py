"""YAML configuration: defaults from config/config.yaml.example, user overrides merged on top."""

from britto.config.settings import (
    get_cache_config,
    get_launcher_config,
    get_status_server_config,
    read_config,
)

__all__ = ["get_cache_config", "get_launcher_config", "get_status_server_config", "read_config"]
