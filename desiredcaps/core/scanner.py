"""
Position based scanners for the capability string grammar.

Every scanner takes the full input text and the index of the first
character of its lexeme, and returns the index where the lexeme stops:

  - for delimited lexemes (quoted strings, arrays, objects) the index of
    the closing symbol, or ``len(text)`` when the input ran out first;
  - for literals the index of the delimiter that ended them, or
    ``len(text)``.

Scanners never validate what they skip. A JSON array is only known to be
bracket-balanced, not to be valid JSON.
"""

from desiredcaps.core.exception import NestingTooDeep

QUOTE = '"'
ESCAPE = "\\"
NAME_SEPARATOR = "="
ENTRY_SEPARATOR = ","

OPEN_ARRAY = "["
OPEN_OBJECT = "{"

CLOSERS = {
    OPEN_ARRAY: "]",
    OPEN_OBJECT: "}",
}

CLOSER_SET = frozenset(CLOSERS.values())

DEFAULT_MAX_DEPTH = 512


def accept_quoted_string(text: str, start: int) -> int:
    if text[start] != QUOTE:
        raise ValueError(f"Expected '\"' at character {start}")

    n = len(text)
    index = start + 1

    while index < n:
        ch = text[index]

        if ch == QUOTE:
            return index

        # the escaped character is skipped whatever it is
        if ch == ESCAPE:
            index += 2
        else:
            index += 1

    return n


def accept_literal_identifier(text: str, start: int) -> int:
    n = len(text)
    index = start

    while index < n and text[index] not in (ENTRY_SEPARATOR, NAME_SEPARATOR):
        index += 1

    return index


def accept_literal_definition(text: str, start: int) -> int:
    n = len(text)
    index = start

    while index < n:
        ch = text[index]

        if ch == ENTRY_SEPARATOR:
            return index

        if ch == ESCAPE:
            index += 2
        else:
            index += 1

    return n


def _accept_nested(text: str, start: int, max_depth: int) -> int:
    """
    Match the bracket at ``start`` against its closer.

    Nested arrays, objects and strings are skipped. Only the closer of the
    innermost open bracket counts: a stray ``}`` inside an array is plain
    content.

    Below ``max_depth`` an explicit stack of closers is kept. Deeper levels
    are only counted and any closer ends one of them, which matches the
    same closer for well-formed input. The scan still runs to the real end
    of the value before ``NestingTooDeep`` reports the overflow.
    """
    closers = [CLOSERS[text[start]]]
    overflow = 0
    overflow_at = None
    n = len(text)
    index = start + 1

    while index < n:
        ch = text[index]

        if ch == QUOTE:
            index = accept_quoted_string(text, index) + 1
            continue

        if overflow:
            if ch in CLOSERS:
                overflow += 1
            elif ch in CLOSER_SET:
                overflow -= 1

        elif ch == closers[-1]:
            closers.pop()
            if not closers:
                break

        elif ch in CLOSERS:
            if len(closers) >= max_depth:
                overflow = 1
                if overflow_at is None:
                    overflow_at = index
            else:
                closers.append(CLOSERS[ch])

        index += 1

    stop = min(index, n)
    if overflow_at is not None:
        raise NestingTooDeep(overflow_at, max_depth, stop)
    return stop


def accept_json_array(text: str, start: int, max_depth: int = DEFAULT_MAX_DEPTH) -> int:
    if text[start] != OPEN_ARRAY:
        raise ValueError(f"Expected '[' at character {start}")
    return _accept_nested(text, start, max_depth)


def accept_json_object(text: str, start: int, max_depth: int = DEFAULT_MAX_DEPTH) -> int:
    if text[start] != OPEN_OBJECT:
        raise ValueError(f"Expected '{{' at character {start}")
    return _accept_nested(text, start, max_depth)
