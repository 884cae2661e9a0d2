"""Generic resource record: the superset pivot between typed variants and the wire."""

import typing
from typing import Any, ClassVar, Dict, FrozenSet, List, NamedTuple, Optional, Set, Type
from pydantic import BaseModel, Field

IDENTITY_ATTRIBUTES = ("id", "name", "tags", "implementation", "config_contract")


class AttributeType(NamedTuple):
    """Static type of a generic attribute: a scalar base type, optionally wrapped in a set."""
    base: type
    is_set: bool = False

    @property
    def python_type(self) -> Any:
        return Set[self.base] if self.is_set else self.base

    @property
    def label(self) -> str:
        name = {bool: "bool", int: "int", float: "float", str: "string"}[self.base]
        return f"set of {name}" if self.is_set else name


def camel_case(name: str) -> str:
    """Convert a snake_case attribute name to the server's camelCase wire name."""
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


class GenericRecord(BaseModel):
    """
    Superset record for one resource family.

    Every attribute is optional; a variant populates only its subset.
    Subclasses list all attributes of the family once, plus:

    - PROPERTIES: attributes carried as top-level wire properties instead
      of entries of the field list
    - WIRE_NAMES: wire names that differ from the camelCase attribute name
    """
    PROPERTIES: ClassVar[FrozenSet[str]] = frozenset()
    WIRE_NAMES: ClassVar[Dict[str, str]] = {}

    id: Optional[int] = Field(None, description="Server-assigned identifier")
    name: Optional[str] = Field(None, description="User-chosen name, unique within the family")
    tags: Optional[Set[int]] = Field(None, description="Associated tag IDs")
    implementation: Optional[str] = Field(None, description="Implementation selecting the variant")
    config_contract: Optional[str] = Field(None, description="Configuration contract of the variant")

    class Config:
        extra = "forbid"

    @classmethod
    def attribute_names(cls) -> List[str]:
        """All non-identity attribute names, in declaration order."""
        return [name for name in cls.model_fields if name not in IDENTITY_ATTRIBUTES]

    @classmethod
    def attribute_type(cls, name: str) -> AttributeType:
        """Resolve the static type declared for an attribute."""
        if name not in cls.model_fields:
            raise KeyError(f"{cls.__name__} has no attribute '{name}'")
        annotation = cls.model_fields[name].annotation
        args = [a for a in typing.get_args(annotation) if a is not type(None)]
        inner = args[0] if args else annotation
        if typing.get_origin(inner) in (set, frozenset):
            return AttributeType(typing.get_args(inner)[0], True)
        return AttributeType(inner)

    @classmethod
    def wire_name(cls, name: str) -> str:
        return cls.WIRE_NAMES.get(name) or camel_case(name)

    @classmethod
    def from_variant(cls, typed: BaseModel) -> "GenericRecord":
        """Project a typed variant record into the superset, leaving other attributes absent."""
        return cls(**{name: getattr(typed, name) for name in type(typed).model_fields})

    def to_variant(self, model: Type[BaseModel]) -> BaseModel:
        """
        Select the attributes of a typed variant model from this record.

        Values come from a server response or a previous projection, so the
        typed record is constructed without re-validation.
        """
        return model.model_construct(**{name: getattr(self, name) for name in model.model_fields})


class ResourceFamily(BaseModel):
    """A class of server-side object with several concrete variants."""
    name: str = Field(..., description="Family name, e.g. 'notification'")
    endpoint: str = Field(..., description="API path segment under /api/v1")
    record_type: Type[GenericRecord] = Field(..., description="Superset record of the family")

    class Config:
        frozen = True
