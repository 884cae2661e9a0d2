"""Registry of every known variant, keyed by resource name."""

from typing import Dict, List, Optional
from ..records.base import ResourceFamily
from ..utils.errors import InputValidationError
from .adapter import VariantAdapter
from .conditions import CONDITION_VARIANTS
from .download_clients import DOWNLOAD_CLIENT_VARIANTS
from .indexers import INDEXER_VARIANTS
from .notifications import NOTIFICATION_VARIANTS

_ADAPTERS: Dict[str, VariantAdapter] = {
    descriptor.resource_name: VariantAdapter(descriptor)
    for descriptor in NOTIFICATION_VARIANTS + INDEXER_VARIANTS + DOWNLOAD_CLIENT_VARIANTS + CONDITION_VARIANTS
}


def get_adapter(resource_name: str) -> VariantAdapter:
    """
    Look up the adapter of a resource kind.

    Raises:
        InputValidationError: If the kind is unknown
    """
    try:
        return _ADAPTERS[resource_name]
    except KeyError:
        raise InputValidationError(
            f"Unknown resource kind '{resource_name}'. Known kinds: {', '.join(list_kinds())}"
        ) from None


def list_kinds(family: Optional[str] = None) -> List[str]:
    """Resource kinds that can be declared, optionally limited to one family."""
    return sorted(
        name for name, adapter in _ADAPTERS.items()
        if adapter.descriptor.family.endpoint
        and (family is None or adapter.descriptor.family.name == family)
    )


def adapter_for_implementation(family: ResourceFamily, implementation: str) -> Optional[VariantAdapter]:
    """Adapter of the variant a family selects by implementation name, if any."""
    for adapter in _ADAPTERS.values():
        if adapter.descriptor.family.name == family.name and adapter.descriptor.implementation == implementation:
            return adapter
    return None
