"""Deadlines and cancellation for remote operations."""

import threading
import time
from typing import Optional
from ..utils.errors import OperationCancelled


class Deadline:
    """
    Absolute deadline, optionally paired with a cancellation event.

    The remaining time bounds the timeout of the in-flight HTTP call, so a
    call never outlives its deadline by more than the transport's own
    granularity.

    The cancel event is checked before each call and after a failed one.
    Setting it does not interrupt a request already in flight: that request
    runs until it completes or its (deadline-bounded) timeout expires.
    """

    def __init__(self, at: Optional[float] = None, cancel_event: Optional[threading.Event] = None):
        self.at = at
        self.cancel_event = cancel_event

    @classmethod
    def after(cls, seconds: float, cancel_event: Optional[threading.Event] = None) -> "Deadline":
        return cls(time.monotonic() + seconds, cancel_event)

    def remaining(self) -> Optional[float]:
        if self.at is None:
            return None
        return self.at - time.monotonic()

    def cancelled(self) -> bool:
        if self.cancel_event is not None and self.cancel_event.is_set():
            return True
        remaining = self.remaining()
        return remaining is not None and remaining <= 0

    def timeout(self, default: float, operation: str) -> float:
        """
        Timeout for the next call.

        Raises:
            OperationCancelled: If the deadline passed or the operation was cancelled
        """
        if self.cancelled():
            raise OperationCancelled(f"{operation} cancelled: deadline exceeded before the remote call")
        remaining = self.remaining()
        return default if remaining is None else min(default, remaining)
