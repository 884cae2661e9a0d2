"""REST client for Lidarr-family servers (/api/v1/)."""

from typing import Any, Dict, List, Optional
import requests
from ..utils.errors import NotFoundError, RemoteError
from ..utils.logging import get_logger

logger = get_logger("client.api")

DEFAULT_TIMEOUT = 30.0


class ArrClient:
    """
    Client for the settings endpoints of the server API.

    Every family shares the same shape: list, get by id, create, update by
    id, delete by id. The client raises, it never retries.
    """

    def __init__(self, base_url: str, api_key: str, timeout: float = DEFAULT_TIMEOUT,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "X-Api-Key": api_key,
            "Content-Type": "application/json",
            "Accept": "application/json",
        })

    def _url(self, path: str) -> str:
        return f"{self.base_url}/api/v1/{path.lstrip('/')}"

    def _request(self, method: str, path: str, operation: str, kind: str,
                 payload: Any = None, timeout: Optional[float] = None) -> Any:
        url = self._url(path)
        try:
            response = self.session.request(
                method,
                url,
                json=payload,
                timeout=timeout if timeout is not None else self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"{method} {url} failed: {e}")
            raise RemoteError(operation, kind, str(e)) from e

        if response.status_code == 404:
            raise NotFoundError(operation, kind, parse_error_body(response), status_code=404)
        if not response.ok:
            detail = f"{response.status_code} {response.reason}: {parse_error_body(response)}"
            logger.error(f"{method} {url} returned {detail}")
            raise RemoteError(operation, kind, detail, status_code=response.status_code)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise RemoteError(operation, kind, f"malformed response: {e}", status_code=response.status_code) from e

    # -- Generic operations ------------------------------------------------

    def list(self, endpoint: str, kind: Optional[str] = None, timeout: Optional[float] = None) -> List[Dict[str, Any]]:
        body = self._request("GET", endpoint, "read", kind or endpoint, timeout=timeout)
        if not isinstance(body, list):
            raise RemoteError("read", kind or endpoint, f"malformed response: expected a list, got {type(body).__name__}")
        return body

    def get(self, endpoint: str, resource_id: int, kind: Optional[str] = None,
            timeout: Optional[float] = None) -> Dict[str, Any]:
        return self._request("GET", f"{endpoint}/{resource_id}", "read", kind or endpoint, timeout=timeout)

    def create(self, endpoint: str, payload: Dict[str, Any], kind: Optional[str] = None,
               timeout: Optional[float] = None) -> Dict[str, Any]:
        return self._request("POST", endpoint, "create", kind or endpoint, payload=payload, timeout=timeout)

    def update(self, endpoint: str, resource_id: int, payload: Dict[str, Any], kind: Optional[str] = None,
               timeout: Optional[float] = None) -> Dict[str, Any]:
        payload = dict(payload, id=resource_id)
        return self._request("PUT", f"{endpoint}/{resource_id}", "update", kind or endpoint,
                             payload=payload, timeout=timeout)

    def delete(self, endpoint: str, resource_id: int, kind: Optional[str] = None,
               timeout: Optional[float] = None) -> None:
        self._request("DELETE", f"{endpoint}/{resource_id}", "delete", kind or endpoint, timeout=timeout)


def parse_error_body(response: requests.Response) -> str:
    """
    Extract a readable message from an error response.

    The server answers validation failures with a list of
    ``{"propertyName", "errorMessage"}`` objects and other failures with
    ``{"message": ...}``; anything else is returned as raw text.
    """
    try:
        body = response.json()
    except ValueError:
        return response.text.strip() or response.reason or "no response body"

    if isinstance(body, list):
        messages = []
        for item in body:
            if isinstance(item, dict) and item.get("errorMessage"):
                prop = item.get("propertyName")
                messages.append(f"{prop}: {item['errorMessage']}" if prop else item["errorMessage"])
        if messages:
            return "; ".join(messages)
    if isinstance(body, dict):
        for key in ("message", "error", "description"):
            if body.get(key):
                return str(body[key])
    return str(body)
