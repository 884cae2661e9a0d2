"""Pydantic models for the wire representation exchanged with the server."""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, field_validator

_IDENTITY_KEYS = ("id", "name", "implementation", "configContract", "tags", "fields")


class WireField(BaseModel):
    """One named, dynamically typed setting of a resource."""
    name: str = Field(..., description="Field name as the server knows it")
    # Any JSON value; declared attributes are type-checked by the codec on decode.
    value: Any = Field(None, description="Field value (absent when null)")


class WireRecord(BaseModel):
    """Identity attributes plus an ordered list of fields and the remaining top-level properties."""
    id: Optional[int] = Field(None, description="Server-assigned identifier")
    name: Optional[str] = Field(None, description="Resource name")
    implementation: Optional[str] = Field(None, description="Implementation name")
    config_contract: Optional[str] = Field(None, description="Configuration contract name")
    tags: List[int] = Field(default_factory=list, description="Tag IDs")
    fields: List[WireField] = Field(default_factory=list, description="Implementation-specific fields")
    properties: Dict[str, Any] = Field(default_factory=dict, description="Other top-level properties")

    @field_validator("fields")
    @classmethod
    def _unique_field_names(cls, fields: List[WireField]) -> List[WireField]:
        seen = set()
        for field in fields:
            if field.name in seen:
                raise ValueError(f"duplicate field name '{field.name}'")
            seen.add(field.name)
        return fields

    def field_map(self) -> Dict[str, Any]:
        """Field values keyed by field name."""
        return {field.name: field.value for field in self.fields}

    def field_names(self) -> List[str]:
        return [field.name for field in self.fields]

    def to_payload(self) -> Dict[str, Any]:
        """Build the JSON body the server expects."""
        payload = dict(self.properties)
        if self.id is not None:
            payload["id"] = self.id
        payload["name"] = self.name
        if self.implementation is not None:
            payload["implementation"] = self.implementation
        if self.config_contract is not None:
            payload["configContract"] = self.config_contract
        payload["tags"] = sorted(self.tags)
        payload["fields"] = [{"name": f.name, "value": f.value} for f in self.fields]
        return payload

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "WireRecord":
        """
        Parse a JSON body returned by the server.

        Field entries carry extra metadata (label, order, helpText, ...);
        only name and value are kept. Fields without a value are dropped.

        Raises:
            ValueError: If the payload is not a JSON object
            pydantic.ValidationError: If identity attributes or fields are malformed
        """
        if not isinstance(payload, dict):
            raise ValueError(f"expected a JSON object, got {type(payload).__name__}")
        fields = [
            {"name": f.get("name"), "value": f.get("value")}
            for f in payload.get("fields") or []
            if isinstance(f, dict) and "value" in f
        ]
        return cls(
            id=payload.get("id"),
            name=payload.get("name"),
            implementation=payload.get("implementation"),
            config_contract=payload.get("configContract"),
            tags=payload.get("tags") or [],
            fields=fields,
            properties={k: v for k, v in payload.items() if k not in _IDENTITY_KEYS},
        )
