"""Configuration module: server connection settings and apply options."""

from .manager import (
    DEFAULT_PARALLELISM,
    ENV_API_KEY,
    ENV_URL,
    ServerSettings,
    get_parallelism,
    load_config,
    load_server_settings,
)
from .paths import get_user_config_path, get_project_config_path

__all__ = [
    "DEFAULT_PARALLELISM",
    "ENV_API_KEY",
    "ENV_URL",
    "ServerSettings",
    "get_parallelism",
    "load_config",
    "load_server_settings",
    "get_user_config_path",
    "get_project_config_path",
]
