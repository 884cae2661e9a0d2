"""Reconciliation lifecycle of declared resources."""

from typing import List, Optional
from ..client.api import ArrClient
from ..variants.registry import get_adapter, list_kinds
from .base import BaseLifecycle, LifecycleState, parse_import_id, require_client
from .collection import Collection, find_by_name, list_collection, list_custom_formats
from .custom_format import CustomFormatLifecycle
from .deadline import Deadline
from .resource import ResourceLifecycle

CUSTOM_FORMAT_KIND = CustomFormatLifecycle.kind


def lifecycle_for(kind: str, client: Optional[ArrClient] = None) -> BaseLifecycle:
    """
    Lifecycle handling one resource kind.

    Raises:
        InputValidationError: If the kind is unknown
    """
    if kind == CUSTOM_FORMAT_KIND:
        return CustomFormatLifecycle(client)
    return ResourceLifecycle(get_adapter(kind), client)


def declarable_kinds() -> List[str]:
    """Every kind that can appear in a declaration."""
    return sorted(list_kinds() + [CUSTOM_FORMAT_KIND])


__all__ = [
    "BaseLifecycle",
    "LifecycleState",
    "parse_import_id",
    "require_client",
    "Collection",
    "find_by_name",
    "list_collection",
    "list_custom_formats",
    "CustomFormatLifecycle",
    "Deadline",
    "ResourceLifecycle",
    "CUSTOM_FORMAT_KIND",
    "lifecycle_for",
    "declarable_kinds",
]
