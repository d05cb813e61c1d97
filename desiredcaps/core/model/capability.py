from enum import Enum
from typing import Any


class CapabilityKind(Enum):
    TEXT = "text"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    STRUCTURED = "structured"


def kind_of(value: Any) -> CapabilityKind:
    """
    Tag a converted capability value.

    ``bool`` is checked before ``int`` since it is an ``int`` subclass.
    """
    if isinstance(value, bool):
        return CapabilityKind.BOOLEAN
    if isinstance(value, int):
        return CapabilityKind.INTEGER
    if isinstance(value, dict):
        return CapabilityKind.STRUCTURED
    if isinstance(value, str):
        return CapabilityKind.TEXT
    raise TypeError(f"Not a capability value: {type(value).__name__}")
