"""Shared fixtures: an in-memory stand-in for the server API."""

import copy
from collections import defaultdict
from typing import Any, Dict, List, Optional, Tuple
import pytest
from arrconf.utils.errors import NotFoundError, RemoteError


class FakeArrClient:
    """
    In-memory implementation of the ArrClient interface.

    Assigns increasing IDs, stores payloads as sent, answers 404 for unknown
    IDs and records every call as ``(method, endpoint, id)``.
    """

    def __init__(self, timeout: float = 30.0):
        self.timeout = timeout
        self.store: Dict[str, Dict[int, dict]] = defaultdict(dict)
        self.calls: List[Tuple[str, str, Optional[int]]] = []
        self.timeouts: List[Optional[float]] = []
        self.fail_names: set = set()
        self._next_id = 0

    def seed(self, endpoint: str, payload: Dict[str, Any]) -> int:
        """Store a record directly, as if created out of band."""
        self._next_id += 1
        record = copy.deepcopy(payload)
        record["id"] = self._next_id
        self.store[endpoint][self._next_id] = record
        return self._next_id

    def mutating_calls(self) -> List[Tuple[str, str, Optional[int]]]:
        return [call for call in self.calls if call[0] in ("create", "update", "delete")]

    def _record(self, method: str, endpoint: str, resource_id: Optional[int], timeout: Optional[float]) -> None:
        self.calls.append((method, endpoint, resource_id))
        self.timeouts.append(timeout)

    def _lookup(self, operation: str, endpoint: str, resource_id: int, kind: Optional[str]) -> dict:
        try:
            return self.store[endpoint][resource_id]
        except KeyError:
            raise NotFoundError(operation, kind or endpoint, f"404 Not Found: {endpoint}/{resource_id}",
                                status_code=404) from None

    def list(self, endpoint: str, kind: Optional[str] = None, timeout: Optional[float] = None) -> List[dict]:
        self._record("list", endpoint, None, timeout)
        return [copy.deepcopy(record) for record in self.store[endpoint].values()]

    def get(self, endpoint: str, resource_id: int, kind: Optional[str] = None,
            timeout: Optional[float] = None) -> dict:
        self._record("get", endpoint, resource_id, timeout)
        return copy.deepcopy(self._lookup("read", endpoint, resource_id, kind))

    def create(self, endpoint: str, payload: dict, kind: Optional[str] = None,
               timeout: Optional[float] = None) -> dict:
        self._record("create", endpoint, None, timeout)
        if payload.get("name") in self.fail_names:
            raise RemoteError("create", kind or endpoint, "400 Bad Request: name: rejected", status_code=400)
        return copy.deepcopy(self.store[endpoint][self.seed(endpoint, payload)])

    def update(self, endpoint: str, resource_id: int, payload: dict, kind: Optional[str] = None,
               timeout: Optional[float] = None) -> dict:
        self._record("update", endpoint, resource_id, timeout)
        self._lookup("update", endpoint, resource_id, kind)
        record = copy.deepcopy(payload)
        record["id"] = resource_id
        self.store[endpoint][resource_id] = record
        return copy.deepcopy(record)

    def delete(self, endpoint: str, resource_id: int, kind: Optional[str] = None,
               timeout: Optional[float] = None) -> None:
        self._record("delete", endpoint, resource_id, timeout)
        self._lookup("delete", endpoint, resource_id, kind)
        del self.store[endpoint][resource_id]


@pytest.fixture
def fake_client():
    """Fresh in-memory server per test."""
    return FakeArrClient()


@pytest.fixture
def gotify_values():
    """Declared configuration of a Gotify notification."""
    return {
        "name": "Gotify",
        "on_grab": True,
        "on_release_import": True,
        "include_health_warnings": False,
        "server": "http://gotify.local",
        "app_token": "Token123",
        "priority": 5,
        "tags": {1, 2},
    }


def sample_attribute_values(adapter) -> Dict[str, Any]:
    """A value for every attribute of a variant, inside its declared domain."""
    samples = {bool: True, int: 7, float: 2.5, str: "sample"}
    values: Dict[str, Any] = {}
    for spec in adapter.descriptor.attributes:
        attribute_type = adapter.record_type.attribute_type(spec.name)
        if spec.one_of:
            values[spec.name] = spec.one_of[-1]
            continue
        value = samples[attribute_type.base]
        if spec.ge is not None and value < spec.ge:
            value = attribute_type.base(spec.ge)
        if spec.le is not None and value > spec.le:
            value = attribute_type.base(spec.le)
        if attribute_type.is_set:
            second = {bool: False, int: 3, float: 0.5, str: "other"}[attribute_type.base]
            value = {value, second}
        values[spec.name] = value
    return values


@pytest.fixture
def variant_values():
    """Builds fully populated attribute values for a variant adapter."""
    return sample_attribute_values
