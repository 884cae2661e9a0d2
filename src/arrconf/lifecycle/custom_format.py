"""Lifecycle of custom formats and their polymorphic conditions."""

import json
from typing import Any, Dict, List, Mapping
from pydantic import ValidationError
from ..records import CONDITION, ConditionRecord, CustomFormat, FormatCondition
from ..records.base import AttributeType
from ..utils.errors import InputValidationError
from ..variants.adapter import VariantAdapter, format_validation_error
from ..variants.descriptor import superset_descriptor
from ..variants.registry import adapter_for_implementation
from ..wire.codec import coerce_value, decode, encode
from ..wire.models import WireRecord
from .base import BaseLifecycle

_CONDITION_DEFAULTS = {"negate": False, "required": False}


def sort_conditions(conditions: List[FormatCondition]) -> List[FormatCondition]:
    """Conditions form a set; order them canonically so the server's ordering never shows as a change."""
    return sorted(
        conditions,
        key=lambda c: (c.implementation or "", c.name or "", json.dumps(c.model_dump(), sort_keys=True)),
    )


class CustomFormatLifecycle(BaseLifecycle):
    """
    Custom formats carry a list of conditions, each a small variant of its own.

    Every condition is encoded with the field codec through the adapter its
    implementation name selects.
    """

    kind = "custom_format"
    endpoint = "customformat"
    model = CustomFormat

    def declare(self, values: Mapping[str, Any]) -> CustomFormat:
        if "id" in values:
            raise InputValidationError(f"Invalid {self.kind} configuration: id is computed and cannot be set")
        try:
            custom_format = CustomFormat(**values)
        except ValidationError as e:
            raise InputValidationError(f"Invalid {self.kind} configuration: {format_validation_error(e)}") from e

        conditions = []
        for condition in custom_format.specifications:
            adapter = self._condition_adapter(condition.implementation)
            settings = {
                k: v for k, v in condition.model_dump().items()
                if v is not None and k != "implementation"
            }
            adapter.declare(settings)
            defaults = {k: v for k, v in _CONDITION_DEFAULTS.items() if getattr(condition, k) is None}
            conditions.append(condition.model_copy(update=defaults))
        return custom_format.model_copy(update={"specifications": sort_conditions(conditions)})

    def to_payload(self, typed: CustomFormat) -> dict:
        payload: Dict[str, Any] = {"name": typed.name}
        if typed.id is not None:
            payload["id"] = typed.id
        if typed.include_custom_format_when_renaming is not None:
            payload["includeCustomFormatWhenRenaming"] = typed.include_custom_format_when_renaming
        payload["specifications"] = [self._condition_payload(c) for c in typed.specifications]
        return payload

    def from_payload(self, payload: Any) -> CustomFormat:
        if not isinstance(payload, dict):
            raise ValueError(f"expected a JSON object, got {type(payload).__name__}")
        include = payload.get("includeCustomFormatWhenRenaming")
        if include is not None:
            include = coerce_value(include, AttributeType(bool), "includeCustomFormatWhenRenaming", self.kind)
        conditions = [self._read_condition(item) for item in payload.get("specifications") or []]
        return CustomFormat.model_construct(
            id=payload.get("id"),
            name=payload.get("name"),
            include_custom_format_when_renaming=include,
            specifications=sort_conditions(conditions),
        )

    def _condition_adapter(self, implementation: str) -> VariantAdapter:
        adapter = adapter_for_implementation(CONDITION, implementation)
        if adapter is None:
            raise InputValidationError(
                f"Invalid {self.kind} configuration: unsupported condition implementation '{implementation}'"
            )
        return adapter

    def _condition_payload(self, condition: FormatCondition) -> dict:
        adapter = self._condition_adapter(condition.implementation)
        record = ConditionRecord(**condition.model_dump())
        wire = encode(record, adapter.descriptor)
        payload = wire.to_payload()
        # Conditions carry neither ids nor tags.
        payload.pop("tags", None)
        return payload

    def _read_condition(self, item: Any) -> FormatCondition:
        wire = WireRecord.from_payload(item)
        adapter = adapter_for_implementation(CONDITION, wire.implementation or "")
        descriptor = adapter.descriptor if adapter else superset_descriptor(CONDITION)
        return decode(wire, descriptor).to_variant(FormatCondition)
