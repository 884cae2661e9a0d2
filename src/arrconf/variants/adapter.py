"""Variant adapter: typed record <-> generic record <-> wire record."""

from typing import Any, Dict, List, Literal, Mapping, Optional, Set, Type
from pydantic import BaseModel, ConfigDict, Field, ValidationError, create_model
from ..records.base import GenericRecord
from ..utils.errors import InputValidationError
from ..wire.codec import decode, encode
from ..wire.models import WireRecord
from .descriptor import AttributeSpec, Mode, VariantDescriptor

# Identity attributes the user can never set.
_NOT_SETTABLE = ("id", "implementation", "config_contract")


class AttributeSchema(BaseModel):
    """Externally visible schema of one attribute."""
    name: str
    type: str
    mode: Mode
    sensitive: bool = False
    one_of: Optional[List[Any]] = None
    ge: Optional[float] = None
    le: Optional[float] = None
    preserve_prior: bool = Field(default=False, description="Keep the prior value when unknown")
    description: Optional[str] = None

    class Config:
        use_enum_values = True


class VariantSchema(BaseModel):
    """Externally visible schema of a resource kind."""
    resource_name: str
    implementation: str
    config_contract: Optional[str] = None
    description: str = ""
    attributes: List[AttributeSchema] = Field(default_factory=list)


class VariantAdapter:
    """
    Binds one variant descriptor to the generic codec.

    The adapter owns no state besides the descriptor and the typed model
    generated from it, so one instance is shared by every caller.
    """

    def __init__(self, descriptor: VariantDescriptor):
        self.descriptor = descriptor
        self.model = build_variant_model(descriptor)

    @property
    def resource_name(self) -> str:
        return self.descriptor.resource_name

    @property
    def record_type(self) -> Type[GenericRecord]:
        return self.descriptor.record_type

    def declare(self, values: Mapping[str, Any]) -> BaseModel:
        """
        Validate declared configuration into a typed record.

        Raises:
            InputValidationError: If an attribute is unknown, computed-only,
                missing, or outside its allowed domain
        """
        kind = self.resource_name
        blocked = [name for name in values if name in _NOT_SETTABLE]
        blocked += [
            spec.name for spec in self.descriptor.attributes
            if spec.mode == Mode.COMPUTED and spec.name in values
        ]
        if blocked:
            raise InputValidationError(
                f"Invalid {kind} configuration: {', '.join(sorted(blocked))} "
                f"{'is' if len(blocked) == 1 else 'are'} computed and cannot be set"
            )
        try:
            return self.model(**values)
        except ValidationError as e:
            raise InputValidationError(f"Invalid {kind} configuration: {format_validation_error(e)}") from e

    def read(self, typed: BaseModel) -> WireRecord:
        """Build the wire request for a typed record, with this variant's fixed identity."""
        record = self.record_type.from_variant(typed)
        wire = encode(record, self.descriptor)
        return wire.model_copy(update={
            "implementation": self.descriptor.implementation,
            "config_contract": self.descriptor.config_contract,
        })

    def write(self, wire: WireRecord) -> BaseModel:
        """Project a wire response onto this variant's typed record."""
        return decode(wire, self.descriptor).to_variant(self.model)

    def schema(self) -> VariantSchema:
        record_type = self.record_type
        attributes = [
            AttributeSchema(
                name="id", type="int", mode=Mode.COMPUTED, preserve_prior=True,
                description=f"{self.descriptor.family.name.replace('_', ' ').capitalize()} ID.",
            ),
            AttributeSchema(name="name", type="string", mode=Mode.REQUIRED, description="Name."),
            AttributeSchema(
                name="tags", type="set of int", mode=Mode.OPTIONAL, preserve_prior=True,
                description="List of associated tags.",
            ),
        ]
        for spec in self.descriptor.attributes:
            field = record_type.model_fields[spec.name]
            attributes.append(AttributeSchema(
                name=spec.name,
                type=record_type.attribute_type(spec.name).label,
                mode=spec.mode,
                sensitive=spec.sensitive,
                one_of=list(spec.one_of) if spec.one_of else None,
                ge=spec.ge,
                le=spec.le,
                preserve_prior=spec.mode != Mode.REQUIRED,
                description=spec.description or field.description,
            ))
        return VariantSchema(
            resource_name=self.resource_name,
            implementation=self.descriptor.implementation,
            config_contract=self.descriptor.config_contract,
            description=self.descriptor.description,
            attributes=attributes,
        )


def build_variant_model(descriptor: VariantDescriptor) -> Type[BaseModel]:
    """Generate the typed record model of a variant from its descriptor."""
    record_type = descriptor.record_type
    fields: Dict[str, Any] = {
        "id": (Optional[int], Field(None, description="Server-assigned identifier")),
        "name": (str, Field(..., description="Name")),
        "tags": (Optional[Set[int]], Field(None, description="Associated tag IDs")),
    }
    for spec in descriptor.attributes:
        fields[spec.name] = _field_definition(spec, record_type)

    model_name = "".join(part.capitalize() for part in descriptor.resource_name.split("_"))
    return create_model(model_name, __config__=ConfigDict(extra="forbid"), **fields)


def _field_definition(spec: AttributeSpec, record_type: Type[GenericRecord]) -> Any:
    attribute_type = record_type.attribute_type(spec.name)
    python_type = attribute_type.python_type
    if spec.one_of:
        python_type = Literal[tuple(spec.one_of)]

    constraints: Dict[str, Any] = {}
    if spec.ge is not None:
        constraints["ge"] = spec.ge
    if spec.le is not None:
        constraints["le"] = spec.le
    description = spec.description or record_type.model_fields[spec.name].description

    if spec.mode == Mode.REQUIRED:
        return (python_type, Field(..., description=description, **constraints))
    return (Optional[python_type], Field(None, description=description, **constraints))


def format_validation_error(error: ValidationError) -> str:
    """Flatten a pydantic validation error into one line per problem."""
    problems = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "record"
        problems.append(f"{location}: {item['msg']}")
    return "; ".join(problems)
