"""Two-tier configuration manager (user + project override)."""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from pydantic import BaseModel, Field, ValidationError, field_validator
from .paths import get_user_config_path, get_project_config_path
from ..utils.errors import ConfigError
from ..utils.logging import get_logger

logger = get_logger("config.manager")

ENV_URL = "LIDARR_URL"
ENV_API_KEY = "LIDARR_API_KEY"
DEFAULT_PARALLELISM = 4


class ServerSettings(BaseModel):
    """Connection settings of the remote server."""
    url: str = Field(..., description="Full server URL, e.g. http://localhost:8686")
    api_key: str = Field(..., description="API key")
    timeout: float = Field(default=30.0, gt=0, description="Per-call HTTP timeout in seconds")

    @field_validator("url")
    @classmethod
    def _url_not_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("URL cannot be an empty string")
        return value.strip().rstrip("/")

    @field_validator("api_key")
    @classmethod
    def _api_key_not_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("API key cannot be an empty string")
        return value.strip()


def load_config() -> Dict[str, Any]:
    """
    Load full config tree with project override.

    Returns:
        Configuration dictionary (project config overrides user config)

    Raises:
        ConfigError: If a config file exists but is not valid YAML
    """
    config: Dict[str, Any] = {}
    for path in (get_user_config_path(), get_project_config_path()):
        if path is None or not path.exists():
            continue
        _deep_merge(config, _read_yaml(path))
        logger.info(f"Loaded config from {path}")
    return config


def load_server_settings(url: Optional[str] = None, api_key: Optional[str] = None,
                         timeout: Optional[float] = None,
                         config: Optional[Dict[str, Any]] = None) -> ServerSettings:
    """
    Resolve server settings: CLI values, then environment, then config files.

    Args:
        url: URL given on the command line
        api_key: API key given on the command line
        timeout: Timeout given on the command line
        config: Optional config dict (if None, loads from file)

    Raises:
        ConfigError: If the URL or API key is missing or empty
    """
    if config is None:
        config = load_config()
    server = config.get("server") or {}

    resolved_url = _first(url, os.environ.get(ENV_URL), server.get("url"))
    resolved_key = _first(api_key, os.environ.get(ENV_API_KEY), server.get("api_key"))
    if resolved_url is None:
        raise ConfigError(f"Missing server URL: pass --url, set {ENV_URL}, or set server.url in the config file")
    if resolved_key is None:
        raise ConfigError(
            f"Missing API key: pass --api-key, set {ENV_API_KEY}, or set server.api_key in the config file"
        )

    values: Dict[str, Any] = {"url": resolved_url, "api_key": resolved_key}
    resolved_timeout = _first(timeout, server.get("timeout"))
    if resolved_timeout is not None:
        values["timeout"] = resolved_timeout
    try:
        return ServerSettings(**values)
    except ValidationError as e:
        raise ConfigError("; ".join(error["msg"].replace("Value error, ", "") for error in e.errors())) from e


def get_parallelism(config: Optional[Dict[str, Any]] = None) -> int:
    """Number of resources reconciled concurrently by apply."""
    if config is None:
        config = load_config()
    value = (config.get("apply") or {}).get("parallelism", DEFAULT_PARALLELISM)
    if not isinstance(value, int) or isinstance(value, bool) or value < 1:
        raise ConfigError(f"apply.parallelism must be a positive integer, got {value!r}")
    return value


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {path}: {e}")
    except OSError as e:
        raise ConfigError(f"Could not read config file {path}: {e}")
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a dictionary")
    return data


def _first(*values: Any) -> Any:
    for value in values:
        if value is not None:
            return value
    return None


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> None:
    """Deep merge override into base (mutates base)."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
