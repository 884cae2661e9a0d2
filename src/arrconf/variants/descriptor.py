"""Variant descriptors - declarative identity and schema of one concrete resource kind."""

from enum import Enum
from typing import Any, List, Optional, Tuple, Type
from pydantic import BaseModel, Field, model_validator
from ..records.base import GenericRecord, ResourceFamily


class Mode(str, Enum):
    """How an attribute is exposed to declared configuration."""
    REQUIRED = "required"
    OPTIONAL = "optional"  # optional, server default when unset
    COMPUTED = "computed"  # read-only, always from the server


class AttributeSpec(BaseModel):
    """One user-facing attribute of a variant."""
    name: str = Field(..., description="Generic attribute name")
    mode: Mode = Field(default=Mode.OPTIONAL, description="Required, optional or computed")
    one_of: Optional[Tuple[Any, ...]] = Field(default=None, description="Enumerated allowed values")
    ge: Optional[float] = Field(default=None, description="Inclusive lower bound")
    le: Optional[float] = Field(default=None, description="Inclusive upper bound")
    sensitive: bool = Field(default=False, description="Value is a secret")
    description: Optional[str] = Field(default=None, description="Override of the family description")

    class Config:
        frozen = True


class VariantDescriptor(BaseModel):
    """Static description of a concrete resource kind."""
    resource_name: str = Field(..., description="Kind name, e.g. 'notification_gotify'")
    family: ResourceFamily = Field(..., description="Family the variant belongs to")
    implementation: str = Field(..., description="Fixed implementation name")
    config_contract: Optional[str] = Field(None, description="Fixed configuration contract")
    attributes: Tuple[AttributeSpec, ...] = Field(..., description="Declared attributes, in order")
    description: str = Field(default="", description="Human-readable description")

    class Config:
        frozen = True

    @model_validator(mode="after")
    def _attributes_exist(self) -> "VariantDescriptor":
        known = set(self.family.record_type.attribute_names())
        names = [spec.name for spec in self.attributes]
        unknown = [n for n in names if n not in known]
        if unknown:
            raise ValueError(
                f"{self.resource_name}: attributes {unknown} are not declared by "
                f"{self.family.record_type.__name__}"
            )
        if len(set(names)) != len(names):
            raise ValueError(f"{self.resource_name}: duplicate attributes")
        return self

    @property
    def record_type(self) -> Type[GenericRecord]:
        return self.family.record_type

    @property
    def attribute_names(self) -> List[str]:
        return [spec.name for spec in self.attributes]


def required(name: str, **kwargs: Any) -> AttributeSpec:
    return AttributeSpec(name=name, mode=Mode.REQUIRED, **kwargs)


def optional(name: str, **kwargs: Any) -> AttributeSpec:
    return AttributeSpec(name=name, mode=Mode.OPTIONAL, **kwargs)


def computed(name: str, **kwargs: Any) -> AttributeSpec:
    return AttributeSpec(name=name, mode=Mode.COMPUTED, **kwargs)


def superset_descriptor(family: ResourceFamily) -> VariantDescriptor:
    """Descriptor exposing every attribute of a family, used by read-only listings."""
    return VariantDescriptor(
        resource_name=family.name,
        family=family,
        implementation="",
        attributes=tuple(computed(name) for name in family.record_type.attribute_names()),
        description=f"Any {family.name}",
    )
