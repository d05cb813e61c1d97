from typing import Any, Protocol

CapabilityValue = str | int | bool | dict[str, Any]

Capabilities = dict[str, CapabilityValue]


class DiagnosticSink(Protocol):
    def warn(self, message: str) -> None:
        ...
