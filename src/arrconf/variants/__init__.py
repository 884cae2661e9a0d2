"""Variant descriptors and the adapters built from them."""

from .descriptor import AttributeSpec, Mode, VariantDescriptor, superset_descriptor
from .adapter import AttributeSchema, VariantAdapter, VariantSchema, build_variant_model
from .registry import adapter_for_implementation, get_adapter, list_kinds

__all__ = [
    "AttributeSpec",
    "Mode",
    "VariantDescriptor",
    "superset_descriptor",
    "AttributeSchema",
    "VariantAdapter",
    "VariantSchema",
    "build_variant_model",
    "adapter_for_implementation",
    "get_adapter",
    "list_kinds",
]
