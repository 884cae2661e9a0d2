"""Wire representation and the field codec."""

from .models import WireField, WireRecord
from .codec import encode, decode, coerce_value

__all__ = [
    "WireField",
    "WireRecord",
    "encode",
    "decode",
    "coerce_value",
]
