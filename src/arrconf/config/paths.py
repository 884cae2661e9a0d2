"""Config path resolution for two-tier config system."""

from pathlib import Path
from typing import Optional


def get_user_config_path() -> Path:
    """Get user config path: ~/.arrconf/config.yaml"""
    home = Path.home()
    return home / ".arrconf" / "config.yaml"


def get_project_config_path() -> Optional[Path]:
    """Get project config path: .arrconf/config.yaml (from current working directory)"""
    cwd = Path.cwd()
    project_config = cwd / ".arrconf" / "config.yaml"
    if project_config.exists():
        return project_config
    return None
