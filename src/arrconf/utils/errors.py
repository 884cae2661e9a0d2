"""Custom exception classes for arrconf."""

from typing import Any, Dict, List, Optional


class ArrconfError(Exception):
    """Base exception for all arrconf errors."""
    pass


class ConfigError(ArrconfError):
    """Raised when configuration is invalid, missing, or a client handle was never supplied."""
    pass


class InputValidationError(ArrconfError):
    """Raised when declared configuration or an import identifier is rejected before any network call."""
    pass


class OperationCancelled(ArrconfError):
    """Raised when an operation's deadline expired before or during the remote call."""
    pass


class RemoteError(ArrconfError):
    """Raised when a remote call fails (network, non-success status, malformed response)."""

    def __init__(self, operation: str, kind: str, detail: str, status_code: Optional[int] = None):
        self.operation = operation
        self.kind = kind
        self.detail = detail
        self.status_code = status_code
        super().__init__(f"Unable to {operation} {kind}, got error: {detail}")


class NotFoundError(RemoteError):
    """Raised when the remote server no longer recognizes the requested ID."""
    pass


class CoercionError(ArrconfError):
    """Raised when a wire field value cannot be converted to its declared type."""

    def __init__(self, field: str, kind: str, value: Any, expected: str):
        self.field = field
        self.kind = kind
        self.value = value
        self.expected = expected
        super().__init__(
            f"Cannot convert field '{field}' of {kind}: expected {expected}, "
            f"got {type(value).__name__} {value!r}"
        )


class ApplyError(ArrconfError):
    """Raised when one or more declared resources failed to reconcile."""

    def __init__(self, failures: Dict[str, Exception]):
        self.failures = failures
        lines: List[str] = [f"{len(failures)} resource(s) failed to apply:"]
        for address in sorted(failures):
            lines.append(f"  {address}: {failures[address]}")
        super().__init__("\n".join(lines))
