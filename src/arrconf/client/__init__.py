"""Remote API client."""

from .api import ArrClient, DEFAULT_TIMEOUT, parse_error_body

__all__ = ["ArrClient", "DEFAULT_TIMEOUT", "parse_error_body"]
