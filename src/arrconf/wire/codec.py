"""Field codec: convert between generic records and wire records."""

from typing import TYPE_CHECKING, Any, Dict, List
from ..records.base import AttributeType, GenericRecord
from ..utils.errors import CoercionError
from ..utils.logging import get_logger
from .models import WireField, WireRecord

if TYPE_CHECKING:
    from ..variants.descriptor import VariantDescriptor

logger = get_logger("wire.codec")


def encode(record: GenericRecord, descriptor: "VariantDescriptor") -> WireRecord:
    """
    Encode the attributes a variant declares into a wire record.

    Absent (None) attributes are omitted entirely: the wire has no explicit
    null, and omitting them lets the server keep its own defaults. Tags
    travel as the identity-level tag list, never as a field.

    Args:
        record: Generic record holding the values
        descriptor: Variant whose attribute set selects what is emitted

    Returns:
        Wire record with identity attributes, fields and properties
    """
    record_type = type(record)
    fields: List[WireField] = []
    properties: Dict[str, Any] = {}

    for name in descriptor.attribute_names:
        value = getattr(record, name)
        if value is None:
            continue
        wire_name = record_type.wire_name(name)
        wire_value = _to_wire_value(value)
        if name in record_type.PROPERTIES:
            properties[wire_name] = wire_value
        else:
            fields.append(WireField(name=wire_name, value=wire_value))

    return WireRecord(
        id=record.id,
        name=record.name,
        implementation=record.implementation,
        config_contract=record.config_contract,
        tags=sorted(record.tags or ()),
        fields=fields,
        properties=properties,
    )


def decode(wire: WireRecord, descriptor: "VariantDescriptor") -> GenericRecord:
    """
    Decode a wire record into the family's generic record.

    Only attributes the variant declares are read; anything else on the
    wire is ignored. Values are coerced explicitly to the declared type.

    Raises:
        CoercionError: If a value cannot be converted to its declared type
    """
    record_type = descriptor.record_type
    values: Dict[str, Any] = {
        "id": wire.id,
        "name": wire.name,
        "tags": set(wire.tags),
        "implementation": wire.implementation,
        "config_contract": wire.config_contract,
    }
    fields = wire.field_map()

    for name in descriptor.attribute_names:
        source = wire.properties if name in record_type.PROPERTIES else fields
        wire_name = record_type.wire_name(name)
        raw = source.get(wire_name)
        if raw is None:
            continue
        values[name] = coerce_value(
            raw, record_type.attribute_type(name), wire_name, descriptor.resource_name
        )

    ignored = set(fields) - {record_type.wire_name(n) for n in descriptor.attribute_names}
    if ignored:
        logger.debug(f"{descriptor.resource_name}: ignoring undeclared fields {sorted(ignored)}")

    return record_type(**values)


def coerce_value(value: Any, attribute_type: AttributeType, field: str, kind: str) -> Any:
    """Coerce a dynamic wire value to a static attribute type."""
    if attribute_type.is_set:
        if not isinstance(value, (list, tuple, set)):
            raise CoercionError(field, kind, value, attribute_type.label)
        return {_coerce_scalar(item, attribute_type.base, field, kind) for item in value}
    return _coerce_scalar(value, attribute_type.base, field, kind)


def _coerce_scalar(value: Any, base: type, field: str, kind: str) -> Any:
    if base is bool:
        if isinstance(value, bool):
            return value
    elif base is int:
        # bool is a subclass of int
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
    elif base is float:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
    elif base is str:
        if isinstance(value, str):
            return value
    raise CoercionError(field, kind, value, AttributeType(base).label)


def _to_wire_value(value: Any) -> Any:
    if isinstance(value, (set, frozenset)):
        return sorted(value)
    return value
