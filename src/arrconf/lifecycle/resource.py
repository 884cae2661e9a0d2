"""Lifecycle of a polymorphic resource driven by its variant adapter."""

from typing import Any, Mapping, Optional
from pydantic import BaseModel
from ..client.api import ArrClient
from ..utils.errors import InputValidationError
from ..variants.adapter import VariantAdapter
from ..wire.models import WireRecord
from .base import BaseLifecycle


class ResourceLifecycle(BaseLifecycle):
    """Create, read, update, delete and import for one variant."""

    def __init__(self, adapter: VariantAdapter, client: Optional[ArrClient] = None):
        super().__init__(client)
        self.adapter = adapter
        self.kind = adapter.resource_name
        self.endpoint = adapter.descriptor.family.endpoint
        self.model = adapter.model

    def declare(self, values: Mapping[str, Any]) -> BaseModel:
        return self.adapter.declare(values)

    def to_payload(self, typed: BaseModel) -> dict:
        return self.adapter.read(typed).to_payload()

    def from_payload(self, payload: Any) -> BaseModel:
        wire = WireRecord.from_payload(payload)
        expected = self.adapter.descriptor.implementation
        if wire.implementation and wire.implementation != expected:
            raise InputValidationError(
                f"{self.kind} {wire.id} has implementation '{wire.implementation}', expected '{expected}'"
            )
        return self.adapter.write(wire)
