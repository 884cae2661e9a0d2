"""Local state file recording the remote ID of every applied resource."""

import json
from pathlib import Path
from typing import Any, Dict, Union
from pydantic import BaseModel, Field, ValidationError
from ..utils.errors import ConfigError
from ..utils.logging import get_logger

logger = get_logger("apply.state")

STATE_VERSION = 1


class StateEntry(BaseModel):
    """Last known remote state of one resource instance."""
    kind: str = Field(..., description="Resource kind")
    id: int = Field(..., description="Remote ID")
    attributes: Dict[str, Any] = Field(default_factory=dict, description="Attributes as last read")


class State(BaseModel):
    """Every applied resource instance, keyed by address."""
    version: int = Field(default=STATE_VERSION, description="State file format version")
    resources: Dict[str, StateEntry] = Field(default_factory=dict)


def load_state(path: Union[str, Path]) -> State:
    """
    Load the state file; a missing file is an empty state.

    Raises:
        ConfigError: If the file is not a valid state file
    """
    path = Path(path)
    if not path.exists():
        logger.debug(f"No state file at {path}, starting empty")
        return State()
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        state = State(**data)
    except (json.JSONDecodeError, TypeError, ValidationError) as e:
        raise ConfigError(f"Invalid state file {path}: {e}")
    if state.version != STATE_VERSION:
        raise ConfigError(f"Unsupported state file version {state.version} in {path}")
    return state


def save_state(state: State, path: Union[str, Path]) -> None:
    """Write the state file, addresses sorted."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = state.model_dump(mode="json")
    data["resources"] = dict(sorted(data["resources"].items()))
    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)
            f.write("\n")
    except OSError as e:
        raise ConfigError(f"Failed to write state file {path}: {e}")
    logger.debug(f"Saved state with {len(state.resources)} resource(s) to {path}")
