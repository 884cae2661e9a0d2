"""Shared reconciliation lifecycle: create, read, update, delete, import."""

import re
from enum import Enum
from typing import Any, Callable, List, Mapping, Optional, Type, Union
from pydantic import BaseModel, ValidationError
from ..client.api import ArrClient
from ..utils.errors import (
    ConfigError,
    InputValidationError,
    NotFoundError,
    OperationCancelled,
    RemoteError,
)
from ..utils.logging import get_logger
from .deadline import Deadline

logger = get_logger("lifecycle")

_NUMERIC_ID = re.compile(r"^\d+$")


class LifecycleState(str, Enum):
    """Lifecycle of one declared resource instance."""
    PLANNED = "planned"
    CREATED = "created"
    SYNCED = "synced"
    UPDATED = "updated"
    DELETED = "deleted"


def require_client(client: Optional[ArrClient], action: str) -> ArrClient:
    """
    Return the client, or fail loudly when none was supplied.

    Raises:
        ConfigError: If no client handle was injected
    """
    if client is None:
        raise ConfigError(
            f"Cannot {action}: no API client configured. "
            "Supply a client (server URL and API key) before running operations."
        )
    return client


def parse_import_id(identifier: str) -> int:
    """
    Parse an import identifier into a resource ID.

    Raises:
        InputValidationError: If the identifier is not a positive decimal integer
    """
    text = (identifier or "").strip()
    if not _NUMERIC_ID.match(text) or int(text) == 0:
        raise InputValidationError(
            f"Unexpected import identifier: expected a numeric ID, got '{identifier}'"
        )
    return int(text)


def resource_id(target: Union[int, BaseModel]) -> Optional[int]:
    if isinstance(target, bool):
        return None
    if isinstance(target, int):
        return target
    return getattr(target, "id", None)


class BaseLifecycle:
    """
    Drives one resource kind through its remote operations.

    Subclasses provide the typed model and the conversion between typed
    records and JSON payloads; everything else lives here once. The client
    is injected, never looked up globally.
    """

    kind: str = ""
    endpoint: str = ""
    model: Type[BaseModel] = BaseModel

    def __init__(self, client: Optional[ArrClient] = None):
        self.client = client

    def declare(self, values: Mapping[str, Any]) -> BaseModel:
        raise NotImplementedError

    def to_payload(self, typed: BaseModel) -> dict:
        raise NotImplementedError

    def from_payload(self, payload: Any) -> BaseModel:
        raise NotImplementedError

    # -- Operations --------------------------------------------------------

    def create(self, typed: BaseModel, deadline: Optional[Deadline] = None) -> BaseModel:
        """Create the resource remotely and return the authoritative record, including its ID."""
        if typed.id is not None:
            raise InputValidationError(f"Cannot create {self.kind}: record already has ID {typed.id}")
        payload = self.to_payload(typed)
        response = self._call(
            "create", deadline,
            lambda client, timeout: client.create(self.endpoint, payload, kind=self.kind, timeout=timeout),
        )
        result = self.parse_response("create", response)
        logger.debug(f"created {self.kind}: {result.id}")
        return result

    def read(self, target: Union[int, BaseModel], deadline: Optional[Deadline] = None) -> BaseModel:
        """
        Re-fetch the resource and refresh every attribute.

        Raises:
            NotFoundError: If the server no longer knows the ID
        """
        rid = self._require_id("read", target)
        response = self._call(
            "read", deadline,
            lambda client, timeout: client.get(self.endpoint, rid, kind=self.kind, timeout=timeout),
        )
        result = self.parse_response("read", response)
        logger.debug(f"read {self.kind}: {result.id}")
        return result

    def update(self, typed: BaseModel, prior: Optional[BaseModel] = None,
               deadline: Optional[Deadline] = None) -> BaseModel:
        """
        Push the desired attribute values, keyed by the existing ID.

        Attributes left unknown in ``typed`` (including the ID) keep their
        value from ``prior``.
        """
        if prior is not None:
            typed = self.fill_unknown(typed, prior)
        rid = self._require_id("update", typed)
        payload = self.to_payload(typed)
        response = self._call(
            "update", deadline,
            lambda client, timeout: client.update(self.endpoint, rid, payload, kind=self.kind, timeout=timeout),
        )
        result = self.parse_response("update", response)
        logger.debug(f"updated {self.kind}: {result.id}")
        return result

    def delete(self, target: Union[int, BaseModel], deadline: Optional[Deadline] = None) -> None:
        """Delete the resource; a resource that is already gone counts as deleted."""
        rid = self._require_id("delete", target)
        try:
            self._call(
                "delete", deadline,
                lambda client, timeout: client.delete(self.endpoint, rid, kind=self.kind, timeout=timeout),
            )
        except NotFoundError:
            logger.debug(f"{self.kind} {rid} already deleted")
            return
        logger.debug(f"deleted {self.kind}: {rid}")

    def import_state(self, identifier: str, deadline: Optional[Deadline] = None) -> BaseModel:
        """Adopt an existing remote resource by its ID given as text."""
        rid = parse_import_id(identifier)
        result = self.read(rid, deadline)
        logger.debug(f"imported {self.kind}: {identifier}")
        return result

    # -- Plan helpers ------------------------------------------------------

    def fill_unknown(self, desired: BaseModel, prior: BaseModel) -> BaseModel:
        """Keep the prior value of every attribute the desired record leaves unknown."""
        updates = {
            name: getattr(prior, name)
            for name in type(desired).model_fields
            if getattr(desired, name) is None and getattr(prior, name, None) is not None
        }
        return desired.model_copy(update=updates) if updates else desired

    def diff(self, desired: BaseModel, current: BaseModel) -> List[str]:
        """Attributes whose known desired value differs from the current one."""
        return [
            name for name in type(desired).model_fields
            if getattr(desired, name) is not None and getattr(desired, name) != getattr(current, name, None)
        ]

    # -- Internals ---------------------------------------------------------

    def _require_id(self, operation: str, target: Union[int, BaseModel]) -> int:
        rid = resource_id(target)
        if rid is None:
            raise InputValidationError(f"Cannot {operation} {self.kind}: no ID known for this resource")
        return rid

    def _call(self, operation: str, deadline: Optional[Deadline],
              request: Callable[[ArrClient, Optional[float]], Any]) -> Any:
        client = require_client(self.client, f"{operation} {self.kind}")
        timeout = deadline.timeout(client.timeout, f"{operation} {self.kind}") if deadline else None
        try:
            return request(client, timeout)
        except NotFoundError:
            raise
        except RemoteError as e:
            if deadline is not None and deadline.cancelled():
                raise OperationCancelled(f"{operation} {self.kind} cancelled: {e.detail}") from e
            raise

    def parse_response(self, operation: str, payload: Any) -> BaseModel:
        try:
            return self.from_payload(payload)
        except (ValidationError, ValueError, TypeError) as e:
            raise RemoteError(operation, self.kind, f"malformed response: {e}") from e
