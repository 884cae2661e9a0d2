"""Declarations file: the desired set of resources, keyed by address."""

from pathlib import Path
from typing import Any, Dict, Union
import yaml
from pydantic import BaseModel, Field
from ..utils.errors import ConfigError
from ..utils.logging import get_logger

logger = get_logger("apply.declarations")


class Declaration(BaseModel):
    """One declared resource instance."""
    address: str = Field(..., description="Stable, user-chosen address of the instance")
    kind: str = Field(..., description="Resource kind, e.g. 'notification_gotify'")
    attributes: Dict[str, Any] = Field(default_factory=dict, description="Declared attribute values")


def load_declarations(path: Union[str, Path]) -> Dict[str, Declaration]:
    """
    Load declarations from a YAML file.

    The file holds a single ``resources`` mapping::

        resources:
          gotify:
            kind: notification_gotify
            name: Gotify
            server: http://gotify.local

    Raises:
        ConfigError: If the file cannot be read or is malformed
    """
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Declarations file not found: {path}")
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in declarations file {path}: {e}")

    declarations = parse_declarations(data, str(path))
    logger.info(f"Loaded {len(declarations)} declaration(s) from {path}")
    return declarations


def parse_declarations(data: Any, source: str = "declarations") -> Dict[str, Declaration]:
    """Validate the parsed ``resources`` mapping into declarations."""
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{source} must contain a dictionary")
    resources = data.get("resources") or {}
    if not isinstance(resources, dict):
        raise ConfigError(f"{source}: 'resources' must be a mapping of address to resource")

    declarations: Dict[str, Declaration] = {}
    for address, body in resources.items():
        if not isinstance(body, dict):
            raise ConfigError(f"{source}: resource '{address}' must be a mapping")
        attributes = dict(body)
        kind = attributes.pop("kind", None)
        if not isinstance(kind, str) or not kind:
            raise ConfigError(f"{source}: resource '{address}' is missing 'kind'")
        declarations[str(address)] = Declaration(address=str(address), kind=kind, attributes=attributes)
    return declarations
