from desiredcaps.core.config import ParserSettings
from desiredcaps.core.diagnostics import CollectingSink, LoggingSink, NullSink, StreamSink
from desiredcaps.core.model.capability import CapabilityKind, kind_of
from desiredcaps.core.parser import CapabilityParser, convert

__all__ = [
    "CapabilityKind",
    "CapabilityParser",
    "CollectingSink",
    "LoggingSink",
    "NullSink",
    "ParserSettings",
    "StreamSink",
    "convert",
    "kind_of",
]
