"""Read-only listings of every resource of a family."""

from typing import Any, List, Optional
from pydantic import BaseModel, Field
from ..client.api import ArrClient
from ..records.base import GenericRecord, ResourceFamily
from ..utils.errors import NotFoundError, RemoteError
from ..utils.logging import get_logger
from ..variants.descriptor import superset_descriptor
from ..wire.codec import decode
from ..wire.models import WireRecord
from .base import require_client
from .custom_format import CustomFormatLifecycle
from .deadline import Deadline

logger = get_logger("lifecycle.collection")


class Collection(BaseModel):
    """
    Every resource of a family, decoded into the superset record.

    Items are ordered by ID so two listings of the same server state compare
    equal regardless of the order the server returned them in.
    """
    id: str = Field(..., description="Synthetic identifier: the number of items")
    family: str = Field(..., description="Family name")
    items: List[Any] = Field(default_factory=list, description="Generic records, ordered by ID")


def list_collection(family: ResourceFamily, client: Optional[ArrClient],
                    deadline: Optional[Deadline] = None) -> Collection:
    """
    List every resource of a family, whatever its variant.

    Raises:
        ConfigError: If no client was supplied
        RemoteError: If the listing failed or an item is malformed
    """
    client = require_client(client, f"list {family.name}s")
    kind = f"{family.name}s"
    timeout = deadline.timeout(client.timeout, f"list {kind}") if deadline else None
    payloads = client.list(family.endpoint, kind=kind, timeout=timeout)

    descriptor = superset_descriptor(family)
    items: List[GenericRecord] = []
    for payload in payloads:
        try:
            items.append(decode(WireRecord.from_payload(payload), descriptor))
        except ValueError as e:
            raise RemoteError("read", kind, f"malformed response: {e}") from e
    items.sort(key=lambda record: record.id or 0)
    logger.debug(f"listed {len(items)} {kind}")
    return Collection(id=str(len(items)), family=family.name, items=items)


def find_by_name(family: ResourceFamily, client: Optional[ArrClient], name: str,
                 deadline: Optional[Deadline] = None) -> GenericRecord:
    """
    Find one resource of a family by its name.

    Raises:
        NotFoundError: If no resource carries that name
    """
    for record in list_collection(family, client, deadline).items:
        if record.name == name:
            return record
    raise NotFoundError("read", family.name, f"no {family.name} named '{name}'")


def list_custom_formats(client: Optional[ArrClient], deadline: Optional[Deadline] = None) -> Collection:
    """List every custom format with its conditions."""
    lifecycle = CustomFormatLifecycle(require_client(client, "list custom_formats"))
    timeout = deadline.timeout(client.timeout, "list custom_formats") if deadline else None
    payloads = client.list(lifecycle.endpoint, kind="custom_formats", timeout=timeout)
    items = [lifecycle.parse_response("read", payload) for payload in payloads]
    items.sort(key=lambda custom_format: custom_format.id or 0)
    return Collection(id=str(len(items)), family=lifecycle.kind, items=items)
