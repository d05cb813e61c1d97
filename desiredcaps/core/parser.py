"""
Entry parser for flat capability strings.

Converts a human typed list such as::

    browserName=chrome, version=120, chromeOptions={"args": ["--headless"]}

into a mapping of capability names to typed values. Each value is
classified by its first significant character:

  - ``"``  quoted string, kept with its quotes until coercion strips them
  - ``[``  JSON array, kept as text
  - ``{``  JSON object, kept as text unless the name ends with the
           options suffix and the text decodes to an object
  - other  literal running up to the next unescaped comma

Malformed input never raises. Extra symbols after a quoted name or a
quoted/structured value are reported to the diagnostic sink and skipped
up to the next separator.
"""

import logging
from functools import partial

from desiredcaps.core.coercion import coerce
from desiredcaps.core.config import ParserSettings
from desiredcaps.core.cursor import Cursor
from desiredcaps.core.diagnostics import LoggingSink
from desiredcaps.core.exception import NestingTooDeep
from desiredcaps.core.scanner import (
    ENTRY_SEPARATOR,
    NAME_SEPARATOR,
    OPEN_ARRAY,
    OPEN_OBJECT,
    QUOTE,
    accept_json_array,
    accept_json_object,
    accept_literal_definition,
    accept_literal_identifier,
    accept_quoted_string,
)
from desiredcaps.core.types_ import Capabilities, DiagnosticSink


def strip_quotes(value: str) -> str:
    """Drop one leading quote and, when present, one trailing quote."""
    if not value.startswith(QUOTE):
        return value
    if len(value) > 1 and value.endswith(QUOTE):
        return value[1:-1]
    return value[1:]


class CapabilityParser:
    def __init__(self, settings: ParserSettings | None = None, sink: DiagnosticSink | None = None):
        self.settings = settings or ParserSettings()
        self.sink = sink or LoggingSink()
        self._logger = logging.getLogger("desiredcaps.core.parser")

        max_depth = self.settings.max_depth
        self._delimited = {
            QUOTE: accept_quoted_string,
            OPEN_ARRAY: partial(accept_json_array, max_depth=max_depth),
            OPEN_OBJECT: partial(accept_json_object, max_depth=max_depth),
        }

    def convert(self, input: str | None) -> Capabilities:
        capabilities: Capabilities = {}

        if not input:
            return capabilities

        cursor = Cursor(input)

        while not cursor.at_end():
            if not cursor.skip_whitespace():
                break

            name = self._scan_name(cursor)

            # consume '=' unless the name was cut short by a comma
            if not cursor.at_end() and cursor.peek() != ENTRY_SEPARATOR:
                cursor.advance()

            if cursor.at_end():
                if name:
                    capabilities[name] = ""
                break

            if not cursor.skip_whitespace():
                capabilities[name] = ""
                break

            value, too_deep = self._scan_value(cursor, name)

            # step over ','
            cursor.advance()

            value = strip_quotes(value)

            if too_deep:
                capabilities[name] = value
            elif name or value:
                capabilities[name] = coerce(name, value, self.settings)

        self._logger.debug(f"Converted {len(capabilities)} capabilities from {len(input)} characters")
        return capabilities

    def _scan_name(self, cursor: Cursor) -> str:
        text = cursor.text
        start = cursor.pos

        if text[start] != QUOTE:
            stop = accept_literal_identifier(text, start)
            cursor.move_to(stop)
            return text[start:stop].strip()

        stop = accept_quoted_string(text, start)
        name = text[start + 1:stop].strip()

        cursor.move_to(stop + 1)
        cursor.skip_whitespace()
        if not cursor.at_end() and cursor.peek() != NAME_SEPARATOR:
            self._discard_trailing(cursor, name, "identifier name", NAME_SEPARATOR)

        return name

    def _scan_value(self, cursor: Cursor, name: str) -> tuple[str, bool]:
        """Return the trimmed value text and whether it overflowed ``max_depth``."""
        text = cursor.text
        start = cursor.pos
        scan = self._delimited.get(text[start])

        if scan is None:
            stop = accept_literal_definition(text, start)
            cursor.move_to(stop)
            return text[start:stop].strip(), False

        too_deep = False
        try:
            stop = scan(text, start)
        except NestingTooDeep as exc:
            self.sink.warn(
                f"ERROR: Nesting depth exceeds {exc.max_depth} in {name} definition value "
                f"at character {exc.position}; value kept as text."
            )
            stop = exc.stop
            too_deep = True

        # an unterminated lexeme runs to the end of the input
        value = text[start:stop + 1]

        cursor.move_to(stop + 1)
        cursor.skip_whitespace()
        if not cursor.at_end() and cursor.peek() != ENTRY_SEPARATOR:
            self._discard_trailing(cursor, name, "definition value", ENTRY_SEPARATOR)

        return value.strip(), too_deep

    def _discard_trailing(self, cursor: Cursor, name: str, what: str, delimiter: str) -> None:
        trailing_start = cursor.pos
        discarded = cursor.skip_until(delimiter)
        self.sink.warn(
            f"ERROR: Found extraneous trailing symbols after {name} {what} "
            f"at character {trailing_start} that were discarded."
        )
        self.sink.warn(f"   discarded ({discarded.slice(cursor.text)}) symbols")


def convert(
    input: str | None,
    *,
    settings: ParserSettings | None = None,
    sink: DiagnosticSink | None = None,
) -> Capabilities:
    return CapabilityParser(settings=settings, sink=sink).convert(input)
