import logging
import sys
from typing import TextIO


class LoggingSink:
    def __init__(self, logger: logging.Logger | None = None):
        self._logger = logger or logging.getLogger("desiredcaps.diagnostics")

    def warn(self, message: str) -> None:
        self._logger.warning(message)


class StreamSink:
    """Write each diagnostic line to a text stream, stderr unless told otherwise."""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream

    def warn(self, message: str) -> None:
        # resolved late so that redirected/captured stderr is honoured
        stream = self._stream or sys.stderr
        print(message, file=stream)


class CollectingSink:
    def __init__(self):
        self.messages: list[str] = []

    def warn(self, message: str) -> None:
        self.messages.append(message)


class NullSink:
    def warn(self, message: str) -> None:
        pass


SINKS = {
    "log": LoggingSink,
    "stderr": StreamSink,
    "silent": NullSink,
}


def get_sink(name: str):
    try:
        return SINKS[name]()
    except KeyError:
        raise ValueError(f"Unknown diagnostics sink: {name!r} (expected one of {', '.join(SINKS)})")
